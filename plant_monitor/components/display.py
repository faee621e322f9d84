"""
Display surface for the plant moisture dashboard.

The surface is the render target shared by the table and chart renderers: a
records table with a stable id and one slot per chart container. It keeps
whatever has been rendered into it until it is written out, so a failed
cycle leaves earlier content untouched.
"""

import html
from pathlib import Path
from typing import Dict, List, Optional, Union

import plotly.graph_objects as go

from plant_monitor.config import PipelineConfig
from plant_monitor.models import Row
from plant_monitor.utils import get_logger, RenderError


class TableSurface:
    """Table with an append-only body."""

    def __init__(self, table_id: str = "recordsTable"):
        self.table_id = table_id
        self.body: List[List[str]] = []

    def append_row(self, cells: Row) -> None:
        self.body.append([str(cell) for cell in cells])

    def __len__(self) -> int:
        return len(self.body)

    def to_html(self) -> str:
        lines = [f'<table id="{html.escape(self.table_id)}">', "  <tbody>"]
        for cells in self.body:
            tds = "".join(f"<td>{html.escape(cell)}</td>" for cell in cells)
            lines.append(f"    <tr>{tds}</tr>")
        lines.extend(["  </tbody>", "</table>"])
        return "\n".join(lines)


class DashboardSurface:
    """Records table plus chart containers, written as one HTML page."""

    def __init__(self, title: str, table_id: str, container_ids: List[str]):
        self.title = title
        self.table = TableSurface(table_id)
        self.charts: Dict[str, Optional[go.Figure]] = {cid: None for cid in container_ids}
        self.logger = get_logger(__name__)

    @classmethod
    def from_config(cls, config: PipelineConfig) -> "DashboardSurface":
        return cls(
            title=config.display.title,
            table_id=config.display.table_id,
            container_ids=[channel.container_id for channel in config.charts.channels]
        )

    def set_chart(self, container_id: str, figure: go.Figure) -> None:
        if container_id not in self.charts:
            raise RenderError(f"Unknown chart container: {container_id}")
        self.charts[container_id] = figure

    def to_html(self) -> str:
        """Render the full dashboard page."""
        chart_blocks = []
        plotlyjs_included = False
        for container_id, figure in self.charts.items():
            if figure is None:
                chart_blocks.append(f'<div id="{html.escape(container_id)}"></div>')
                continue
            chart_blocks.append(figure.to_html(
                full_html=False,
                include_plotlyjs=False if plotlyjs_included else "cdn",
                div_id=container_id
            ))
            plotlyjs_included = True

        title = html.escape(self.title)
        return "\n".join([
            "<!DOCTYPE html>",
            "<html>",
            "<head>",
            '  <meta charset="utf-8">',
            f"  <title>{title}</title>",
            "</head>",
            "<body>",
            f"  <h1>{title}</h1>",
            *chart_blocks,
            self.table.to_html(),
            "</body>",
            "</html>",
        ])

    def write_html(self, output_path: Union[str, Path]) -> Path:
        """Write the page to disk and return its path."""
        output_path = Path(output_path)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(self.to_html(), encoding="utf-8")
        except OSError as e:
            self.logger.error(f"Failed to write dashboard to {output_path}: {str(e)}")
            raise RenderError(f"Failed to write dashboard: {str(e)}") from e

        self.logger.info(f"Wrote dashboard to {output_path}")
        return output_path
