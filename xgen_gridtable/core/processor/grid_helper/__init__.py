# grid_helper/__init__.py
"""
Grid Helper Module

Provides the components used to find, parse and extract grid tables.

Module Structure:
- grid_constants: Border characters, line patterns and data classes
- grid_errors: MalformedTableError and its subclasses
- grid_geometry: Character grid helpers (separator detection, cell block extraction)
- grid_tracer: Cell tracing parser (GridTableParser)
- grid_block_detector: Locating grid table blocks in a text
- grid_table_extractor: BaseTableExtractor implementation for grid tables
"""

# Constants
from xgen_gridtable.core.processor.grid_helper.grid_constants import (
    CORNER,
    HORIZONTAL_BORDER,
    VERTICAL_BORDER,
    HEAD_BODY_BORDER,
    HEAD_BODY_SEPARATOR_PATTERN,
    ROW_SEPARATOR_PATTERN,
    RawCell,
    GridCell,
    GridRow,
    GridTable,
)

# Errors
from xgen_gridtable.core.processor.grid_helper.grid_errors import (
    MalformedTableError,
    DuplicateCellError,
    IncomparableTuplesError,
)

# Geometry
from xgen_gridtable.core.processor.grid_helper.grid_geometry import (
    split_to_codepoints,
    find_head_body_separator,
    extract_cell_block,
    compare_tuples,
    merge_boundary_sets,
)

# Tracer
from xgen_gridtable.core.processor.grid_helper.grid_tracer import (
    GridTableParser,
    parse_grid_table,
    structure_from_cells,
    scan_cell,
)

# Block detection
from xgen_gridtable.core.processor.grid_helper.grid_block_detector import (
    GridTableBlockDetector,
    get_block_lines,
    identify_grid_table,
    find_grid_table_regions,
)

# Extractor
from xgen_gridtable.core.processor.grid_helper.grid_table_extractor import (
    GRID_FORMAT,
    GridTableExtractor,
    grid_table_to_table_data,
    to_lines,
)

__all__ = [
    # Constants
    "CORNER",
    "HORIZONTAL_BORDER",
    "VERTICAL_BORDER",
    "HEAD_BODY_BORDER",
    "HEAD_BODY_SEPARATOR_PATTERN",
    "ROW_SEPARATOR_PATTERN",
    "RawCell",
    "GridCell",
    "GridRow",
    "GridTable",
    # Errors
    "MalformedTableError",
    "DuplicateCellError",
    "IncomparableTuplesError",
    # Geometry
    "split_to_codepoints",
    "find_head_body_separator",
    "extract_cell_block",
    "compare_tuples",
    "merge_boundary_sets",
    # Tracer
    "GridTableParser",
    "parse_grid_table",
    "structure_from_cells",
    "scan_cell",
    # Block detection
    "GridTableBlockDetector",
    "get_block_lines",
    "identify_grid_table",
    "find_grid_table_regions",
    # Extractor
    "GRID_FORMAT",
    "GridTableExtractor",
    "grid_table_to_table_data",
    "to_lines",
]
