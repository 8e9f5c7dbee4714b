# xgen_gridtable/core/__init__.py
"""
Core - Grid Table Processing Core Module

Module Structure:
- document_processor: Main DocumentProcessor class
- processor/: Text handler and grid table helpers
    - text_handler: Renders the grid tables of a text document
    - grid_helper: Block detection, cell tracing and extraction
- functions/: Utility functions
    - table_extractor: Table model and extractor interface
    - table_processor: HTML/Markdown/Text rendering
    - file_converter: Text decoding
    - utils: Text cleaning utilities

Usage:
    from xgen_gridtable import DocumentProcessor
    from xgen_gridtable.core.processor import TextHandler
    from xgen_gridtable.core.functions import TableProcessor, clean_text
"""

# === Main Class ===
from xgen_gridtable.core.document_processor import DocumentProcessor

# === Utility Functions ===
from xgen_gridtable.core.functions.utils import clean_text

# === Explicit Subpackage Imports ===
from xgen_gridtable.core import processor
from xgen_gridtable.core import functions

__all__ = [
    # Main Class
    "DocumentProcessor",
    # Utility Functions
    "clean_text",
    # Subpackages
    "processor",
    "functions",
]
