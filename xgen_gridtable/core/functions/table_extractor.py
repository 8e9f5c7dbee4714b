# xgen_gridtable/core/functions/table_extractor.py
"""
Table Extractor - Table Model and Extractor Interface

Holds the notation-independent table model handed to the renderers, and the
interface that notation-specific extractors implement.

================================================================================
EXTRACTION IN TWO PASSES
================================================================================

A table written in plain text first has to be located, then parsed:

--------------------------------------------------------------------------------
Pass 1: detect_table_regions(content) -> List[TableRegion]
--------------------------------------------------------------------------------
  - Line-level scan of the document
  - Yields the line span of every block that looks like a table

--------------------------------------------------------------------------------
Pass 2: extract_table_from_region(content, region) -> Optional[TableData]
--------------------------------------------------------------------------------
  - Runs the notation parser on one block
  - None means the block only looked like a table

extract_tables(content) runs both passes and filters on the configured size.

| Notation    | Extractor Class      | Location                                     |
|-------------|----------------------|----------------------------------------------|
| Grid table  | GridTableExtractor   | processor/grid_helper/grid_table_extractor.py |

================================================================================
MODEL
================================================================================

- TableRegion: Line span of a candidate block (pass 1 output)
- TableCell: One placed cell; slots covered by a span have no TableCell
- TableData: Parsed table (pass 2 output), ready for TableProcessor
- TableExtractorConfig: Parsing and filtering options
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List, Optional

logger = logging.getLogger("document-processor")


@dataclass
class TableRegion:
    """Line span of a table block inside a document.

    Attributes:
        start_line: Index of the top border line
        end_line: Index of the bottom border line (inclusive)
        indent: Indentation shared by every line of the block
        width: Width of the block lines without indentation
        col_count: Number of columns suggested by the top border
        missing_bottom: The block was cut back to its last complete row
    """
    start_line: int = 0
    end_line: int = 0
    indent: int = 0
    width: int = 0
    col_count: int = 0
    missing_bottom: bool = False

    @property
    def line_count(self) -> int:
        return self.end_line - self.start_line + 1


@dataclass
class TableCell:
    """A cell placed in a table row.

    row_index/col_index give the top-left slot the cell occupies; the slots
    it spans to the right and below are not represented by another cell.
    """
    content: str = ""
    lines: List[str] = field(default_factory=list)
    row_span: int = 1
    col_span: int = 1
    row_index: int = 0
    col_index: int = 0
    is_header: bool = False
    line_offset: int = 0


@dataclass
class TableData:
    """A parsed table.

    Attributes:
        rows: Placed cells of each logical row, left to right
        num_rows: Logical row count (head and body)
        num_cols: Logical column count
        head_row_count: Leading rows that form the table head
        col_widths: Column widths in characters
        col_widths_percent: Column widths as a share of the table width
        start_line: First document line of the table
        end_line: Last document line of the table (inclusive)
        source_format: Notation the table was written in (e.g. "grid")
        grid_table: Parser output the table was built from
    """
    rows: List[List[TableCell]] = field(default_factory=list)
    num_rows: int = 0
    num_cols: int = 0
    head_row_count: int = 0
    col_widths: List[int] = field(default_factory=list)
    col_widths_percent: List[float] = field(default_factory=list)
    start_line: int = 0
    end_line: int = 0
    source_format: str = ""
    grid_table: Any = None

    @property
    def has_header(self) -> bool:
        return self.head_row_count > 0

    @property
    def head_rows(self) -> List[List[TableCell]]:
        return self.rows[:self.head_row_count]

    @property
    def body_rows(self) -> List[List[TableCell]]:
        return self.rows[self.head_row_count:]

    def is_valid(self, min_rows: int = 1, min_cols: int = 1) -> bool:
        return self.num_rows >= min_rows and self.num_cols >= min_cols


@dataclass
class TableExtractorConfig:
    """Configuration for table extraction.

    Attributes:
        min_rows: Tables with fewer logical rows are dropped by extract_tables()
        min_cols: Tables with fewer logical columns are dropped by extract_tables()
        include_header_row: Treat rows above the head/body separator as the head
        strip_indent: Remove the common leading whitespace of each cell
        validate_width: Reject blocks whose lines differ in width before tracing
    """
    min_rows: int = 1
    min_cols: int = 1
    include_header_row: bool = True
    strip_indent: bool = True
    validate_width: bool = True


class BaseTableExtractor(ABC):
    """Interface of notation-specific extractors.

    Subclasses provide detect_table_regions() and extract_table_from_region();
    extract_tables() chains them.
    """

    def __init__(self, config: Optional[TableExtractorConfig] = None):
        self.config = config or TableExtractorConfig()
        self.logger = logging.getLogger("document-processor")

    @abstractmethod
    def detect_table_regions(self, content: Any) -> List[TableRegion]:
        """Return the regions of all candidate blocks, top to bottom.

        Args:
            content: Document text, or its lines
        """

    @abstractmethod
    def extract_table_from_region(self, content: Any, region: TableRegion) -> Optional[TableData]:
        """Parse the block of one region.

        Args:
            content: Document text, or its lines
            region: Region returned by detect_table_regions()

        Returns:
            TableData, or None if the block is not a well-formed table
        """

    def extract_tables(self, content: Any) -> List[TableData]:
        """Return every well-formed table of the document that passes the size filter."""
        regions = self.detect_table_regions(content)
        self.logger.debug(f"Found {len(regions)} candidate table blocks")

        tables = []
        for region in regions:
            table = self.extract_table_from_region(content, region)
            if table is None:
                continue
            if not table.is_valid(self.config.min_rows, self.config.min_cols):
                self.logger.debug(
                    f"Skipping {table.num_rows}x{table.num_cols} table at line {region.start_line + 1}"
                )
                continue
            tables.append(table)

        self.logger.debug(f"Extracted {len(tables)} of {len(regions)} tables")
        return tables

    def supports_format(self, format_type: str) -> bool:
        """Whether this extractor handles the named notation."""
        return False


# Default configuration
DEFAULT_EXTRACTOR_CONFIG = TableExtractorConfig()
