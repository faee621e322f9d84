"""
Moisture chart renderer for the plant moisture dashboard.

Draws one line chart per plant with plotly. Both charts share the y-axis
bounds, the wet/dry reference line and the hover overlay; they differ only in
dataset, label and line color.
"""

from typing import Dict, List, Optional

import plotly.graph_objects as go

from plant_monitor.components.base import RenderingComponent
from plant_monitor.components.classification import classify, state_color
from plant_monitor.components.display import DashboardSurface
from plant_monitor.config import ChannelSettings, PipelineConfig
from plant_monitor.models import SeriesState
from plant_monitor.utils import get_logger, RenderError


class MoistureChartRenderer(RenderingComponent):
    """Renders plant 1 and plant 2 moisture charts from a SeriesState."""

    def __init__(self, config: PipelineConfig):
        """
        Initialize chart renderer.

        Args:
            config: Pipeline configuration
        """
        super().__init__(config)
        self.logger = get_logger(__name__)
        self.settings = config.charts

    def execute(self, series: SeriesState, surface: Optional[DashboardSurface] = None) -> Dict[str, go.Figure]:
        """
        Build both charts and place them on the surface.

        The series is stored newest first; it is reversed once so the charts
        read oldest to newest from left to right. The x-axis is the 1-based
        position of the reading, and the hover title shows the original
        timestamp for that position.

        Args:
            series: Aggregated series from the current cycle
            surface: Optional dashboard surface to receive the figures

        Returns:
            Figures keyed by chart container id

        Raises:
            RenderError: If a figure cannot be built
        """
        try:
            chronological = series.reversed()
            channel_values = [chronological.moisture_a, chronological.moisture_b]

            figures = {}
            for channel, values in zip(self.settings.channels, channel_values):
                figures[channel.container_id] = self._build_figure(channel, values, series)

        except Exception as e:
            self.logger.error(f"Chart rendering failed: {str(e)}")
            raise RenderError(f"Chart rendering failed: {str(e)}") from e

        if surface is not None:
            for container_id, figure in figures.items():
                surface.set_chart(container_id, figure)

        self.logger.info(f"Rendered {len(figures)} charts with {len(series)} points each")
        return figures

    def hover_labels(self, values: List[float]) -> List[str]:
        """Wet/Dry label for each plotted value."""
        return [classify(value, self.settings.threshold).value for value in values]

    def _build_figure(self, channel: ChannelSettings, values: List[float], series: SeriesState) -> go.Figure:
        positions = list(range(1, len(values) + 1))
        labels = self.hover_labels(values)
        label_colors = [
            state_color(classify(value, self.settings.threshold), self.settings.dry_color, self.settings.wet_color)
            for value in values
        ]
        customdata = [
            [series.timestamp_for_display_index(i), label]
            for i, label in enumerate(labels)
        ]

        trace = go.Scatter(
            x=positions,
            y=values,
            mode='lines+markers',
            name=channel.label,
            line=dict(color=channel.color, width=1),
            marker=dict(size=5, color=channel.color),
            customdata=customdata,
            hovertemplate='<b>%{customdata[0]}</b><br>%{y}<br><b>%{customdata[1]}</b><extra></extra>',
            hoverlabel=dict(
                bgcolor='white',
                bordercolor=label_colors,
                font=dict(color=label_colors)
            )
        )

        fig = go.Figure(data=[trace])
        fig.add_hline(
            y=self.settings.threshold,
            line_color=self.settings.threshold_color,
            line_width=self.settings.threshold_width
        )
        fig.update_layout(
            title=dict(text=channel.label),
            xaxis=dict(title=dict(text='Reading'), tick0=1),
            yaxis=dict(title=dict(text='Moisture'), range=[self.settings.y_min, self.settings.y_max]),
            hovermode='closest',
            showlegend=True,
            plot_bgcolor='white'
        )
        return fig
