# grid_helper/grid_table_extractor.py
"""
Grid Table Extractor

BaseTableExtractor implementation for grid tables:
    Pass 1: detect_table_regions() - GridTableBlockDetector
    Pass 2: extract_table_from_region() - GridTableParser, then conversion of
            the GridTable into the common TableData model

Blocks that fail to parse are logged and skipped.
"""
import logging
from typing import Any, List, Optional, Sequence, Union

from xgen_gridtable.core.functions.table_extractor import (
    BaseTableExtractor,
    TableCell,
    TableData,
    TableExtractorConfig,
    TableRegion,
)
from xgen_gridtable.core.functions.utils import normalize_newlines
from xgen_gridtable.core.processor.grid_helper.grid_block_detector import (
    GridTableBlockDetector,
    get_block_lines,
)
from xgen_gridtable.core.processor.grid_helper.grid_constants import GridTable
from xgen_gridtable.core.processor.grid_helper.grid_errors import MalformedTableError
from xgen_gridtable.core.processor.grid_helper.grid_tracer import GridTableParser

logger = logging.getLogger("document-processor")

GRID_FORMAT = "grid"


def to_lines(content: Union[str, Sequence[str]]) -> List[str]:
    """Normalize document content to a list of lines."""
    if isinstance(content, str):
        return normalize_newlines(content).split('\n')
    return list(content)


def grid_table_to_table_data(
    grid_table: GridTable,
    region: Optional[TableRegion] = None,
    include_header_row: bool = True,
) -> TableData:
    """
    Convert a parsed GridTable into TableData.

    Slots covered by another cell's span are left out of the rows, as in
    HTML. Column widths become percentages of the total character width.
    """
    num_head_rows = len(grid_table.head_rows) if include_header_row else 0
    rows: List[List[TableCell]] = []
    for row_idx, row in enumerate(grid_table.rows):
        cells = []
        for col_idx, cell in enumerate(row):
            if cell is None:
                continue
            cells.append(TableCell(
                content=cell.text,
                lines=list(cell.lines),
                row_span=cell.row_span,
                col_span=cell.col_span,
                row_index=row_idx,
                col_index=col_idx,
                is_header=row_idx < num_head_rows,
                line_offset=cell.line_offset,
            ))
        rows.append(cells)

    total_width = sum(grid_table.col_widths)
    if total_width > 0:
        col_widths_percent = [width * 100.0 / total_width for width in grid_table.col_widths]
    else:
        col_widths_percent = []

    return TableData(
        rows=rows,
        num_rows=grid_table.num_rows,
        num_cols=grid_table.num_cols,
        head_row_count=num_head_rows,
        col_widths=list(grid_table.col_widths),
        col_widths_percent=col_widths_percent,
        start_line=region.start_line if region else 0,
        end_line=region.end_line if region else 0,
        source_format=GRID_FORMAT,
        grid_table=grid_table,
    )


class GridTableExtractor(BaseTableExtractor):
    """
    Extracts grid tables from plain text.

    Example:
        extractor = GridTableExtractor()
        for table in extractor.extract_tables(text):
            print(table.num_rows, table.num_cols)
    """

    def __init__(self, config: Optional[TableExtractorConfig] = None):
        super().__init__(config)
        self._detector = GridTableBlockDetector()

    def detect_table_regions(self, content: Any) -> List[TableRegion]:
        """Find grid table blocks in the text."""
        return self._detector.find_regions(to_lines(content))

    def extract_table_from_region(self, content: Any, region: TableRegion) -> Optional[TableData]:
        """Parse the grid table of a region and convert it to TableData."""
        grid_table = self.parse_region(to_lines(content), region)
        if grid_table is None:
            return None
        return grid_table_to_table_data(grid_table, region, self.config.include_header_row)

    def parse_region(self, lines: Sequence[str], region: TableRegion) -> Optional[GridTable]:
        """
        Parse the block of a region.

        Returns:
            GridTable, or None if the block is not a well-formed grid table
        """
        block = get_block_lines(lines, region)
        try:
            return GridTableParser(block, self.config).parse()
        except MalformedTableError as e:
            self.logger.warning(
                f"Grid table at lines {region.start_line + 1}-{region.end_line + 1} "
                f"could not be parsed: {e}"
            )
            return None

    def extract_grid_tables(self, content: Any) -> List[GridTable]:
        """Return the parsed GridTable of every well-formed grid table in the text."""
        lines = to_lines(content)
        tables = []
        for region in self._detector.find_regions(lines):
            grid_table = self.parse_region(lines, region)
            if grid_table is not None:
                tables.append(grid_table)
        return tables

    def supports_format(self, format_type: str) -> bool:
        return format_type.lower() == GRID_FORMAT


__all__ = [
    "GRID_FORMAT",
    "GridTableExtractor",
    "grid_table_to_table_data",
    "to_lines",
]
