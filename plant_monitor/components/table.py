"""Records table renderer."""

from typing import List

from plant_monitor.components.base import RenderingComponent
from plant_monitor.components.display import TableSurface
from plant_monitor.config import PipelineConfig
from plant_monitor.models import Row
from plant_monitor.utils import get_logger


class RecordsTableRenderer(RenderingComponent):
    """Appends one table row per record, one cell per field."""

    def __init__(self, config: PipelineConfig):
        super().__init__(config)
        self.logger = get_logger(__name__)

    def execute(self, records: List[Row], surface: TableSurface) -> None:
        """
        Append records to the table body in the order received.

        Existing rows are kept. Rendering twice onto the same surface
        duplicates the records; callers start each cycle with a new surface
        if they want a fresh table.
        """
        for record in records:
            surface.append_row(record)

        self.logger.info(f"Rendered {len(records)} records into table {surface.table_id}")
