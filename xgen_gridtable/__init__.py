# xgen_gridtable/__init__.py
"""
xgen_gridtable Library

Parses plain-text grid tables into a structured table model and renders them.

Package Structure:
- core: Grid table processing core module
    - DocumentProcessor: Main document processing class
    - processor: Text handler and grid table helpers (detection, parsing)
    - functions: Table model, rendering and text utilities

Usage:
    from xgen_gridtable import DocumentProcessor, parse_grid_table

    table = parse_grid_table(lines)
    processor = DocumentProcessor()
    html = processor.convert_text(text)
"""

__version__ = "0.1.0"

# Expose core classes at top level
from xgen_gridtable.core import DocumentProcessor
from xgen_gridtable.core.processor.grid_helper import (
    GridCell,
    GridTable,
    GridTableParser,
    MalformedTableError,
    parse_grid_table,
)

# Explicit subpackages
from xgen_gridtable import core

__all__ = [
    "__version__",
    # Core classes
    "DocumentProcessor",
    "GridTableParser",
    "GridTable",
    "GridCell",
    "MalformedTableError",
    "parse_grid_table",
    # Subpackages
    "core",
]
