# xgen_gridtable/core/functions/__init__.py
"""
Functions - Common Utility Functions Module

Module Components:
- table_extractor: Table data classes and the extractor interface
- table_processor: HTML/Markdown/Text rendering of TableData
- file_converter: Text decoding with encoding detection
- utils: Text cleaning and line handling

Usage Example:
    from xgen_gridtable.core.functions import TableProcessor, TableOutputFormat
    from xgen_gridtable.core.functions import TextFileConverter, clean_text
"""

from xgen_gridtable.core.functions.utils import (
    clean_text,
    normalize_newlines,
    expand_tabs,
    split_lines,
)

# Table model and extractor interface
from xgen_gridtable.core.functions.table_extractor import (
    TableCell,
    TableData,
    TableRegion,
    TableExtractorConfig,
    BaseTableExtractor,
    DEFAULT_EXTRACTOR_CONFIG,
)

# Table rendering
from xgen_gridtable.core.functions.table_processor import (
    TableOutputFormat,
    TableProcessorConfig,
    TableProcessor,
    create_table_processor,
    DEFAULT_PROCESSOR_CONFIG,
)

# Text decoding
from xgen_gridtable.core.functions.file_converter import (
    TextFileConverter,
    detect_bom,
)

__all__ = [
    # Text utilities
    "clean_text",
    "normalize_newlines",
    "expand_tabs",
    "split_lines",
    # Table model
    "TableCell",
    "TableData",
    "TableRegion",
    "TableExtractorConfig",
    "BaseTableExtractor",
    "DEFAULT_EXTRACTOR_CONFIG",
    # Table rendering
    "TableOutputFormat",
    "TableProcessorConfig",
    "TableProcessor",
    "create_table_processor",
    "DEFAULT_PROCESSOR_CONFIG",
    # Text decoding
    "TextFileConverter",
    "detect_bom",
]
