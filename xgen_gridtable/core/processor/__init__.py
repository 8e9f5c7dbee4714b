# xgen_gridtable/core/processor/__init__.py
"""
Processor - Handler Module

Handler List:
- text_handler: Text file processing (grid tables rendered in place)

Helper Modules (subdirectories):
- grid_helper/: Grid table detection, parsing and extraction

Usage Example:
    from xgen_gridtable.core.processor import TextHandler
    from xgen_gridtable.core.processor.grid_helper import GridTableParser
"""

# === Text Handler ===
from xgen_gridtable.core.processor.text_handler import TextHandler

# === Helper Modules (subpackages) ===
from xgen_gridtable.core.processor import grid_helper

__all__ = [
    # Handlers
    "TextHandler",
    # Helper subpackages
    "grid_helper",
]
