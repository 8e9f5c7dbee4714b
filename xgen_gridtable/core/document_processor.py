# xgen_gridtable/core/document_processor.py
"""DocumentProcessor - Grid Table Document Processing Class

Entry point of the xgen_gridtable library. Takes text documents (plain text,
reStructuredText, Markdown), finds the grid tables in them and renders those
tables as HTML, Markdown or plain text. Everything outside the tables is
passed through.

Usage Example:
    from xgen_gridtable import DocumentProcessor

    processor = DocumentProcessor(output_format="html")

    # Render the grid tables of a file
    text = processor.extract_text("README.rst")

    # Render the grid tables of a string
    text = processor.convert_text(document)

    # Parse a single table block
    table = processor.parse_table([
        "+-----+-----+",
        "| A   | B   |",
        "+-----+-----+",
    ])
    print(table.col_widths, table.body_rows)
"""

import logging
import os
from dataclasses import replace
from pathlib import Path
from typing import List, Optional, Sequence, TypedDict, Union

from xgen_gridtable.core.functions.table_extractor import TableData, TableExtractorConfig
from xgen_gridtable.core.functions.table_processor import (
    ContentRenderer,
    TableOutputFormat,
    TableProcessorConfig,
)
from xgen_gridtable.core.functions.utils import clean_text
from xgen_gridtable.core.processor.grid_helper.grid_constants import GridTable
from xgen_gridtable.core.processor.grid_helper.grid_tracer import GridTableParser
from xgen_gridtable.core.processor.text_handler import TextHandler

logger = logging.getLogger("xgen_gridtable")


class CurrentFile(TypedDict, total=False):
    """
    A file read from disk, as handed to TextHandler.

    Attributes:
        file_path: Absolute path
        file_name: Base name including the extension
        file_extension: Lowercase extension without the dot
        file_data: Raw bytes, decoded by the handler
        file_size: Size in bytes
    """
    file_path: str
    file_name: str
    file_extension: str
    file_data: bytes
    file_size: int


class DocumentProcessor:
    """
    Renders the grid tables of text documents.

    Attributes:
        extractor_config: Detection and parsing options
        processor_config: Rendering options
        supported_extensions: File extensions accepted by extract_text()

    Example:
        >>> processor = DocumentProcessor(output_format="markdown")
        >>> text = processor.convert_text(document_text)
    """

    TEXT_TYPES = frozenset(['txt', 'text', 'md', 'markdown', 'rst'])

    def __init__(
        self,
        extractor_config: Optional[TableExtractorConfig] = None,
        processor_config: Optional[TableProcessorConfig] = None,
        *,
        output_format: Optional[Union[str, TableOutputFormat]] = None,
        content_renderer: Optional[ContentRenderer] = None,
    ):
        """
        Args:
            extractor_config: Detection and parsing options
            processor_config: Rendering options
            output_format: Overrides processor_config.output_format
                   - "html" (default), "markdown" or "text"
            content_renderer: Renders the lines of one cell to an HTML fragment
                   - Default: whitespace-collapsed, escaped text
        """
        self._extractor_config = extractor_config or TableExtractorConfig()
        self._processor_config = processor_config or TableProcessorConfig()
        if output_format is not None:
            self._processor_config = replace(
                self._processor_config, output_format=TableOutputFormat(output_format)
            )

        self._logger = logger
        self._text_handler = TextHandler(
            extractor_config=self._extractor_config,
            processor_config=self._processor_config,
            content_renderer=content_renderer,
        )

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def supported_extensions(self) -> List[str]:
        return sorted(self.TEXT_TYPES)

    @property
    def extractor_config(self) -> TableExtractorConfig:
        return self._extractor_config

    @property
    def processor_config(self) -> TableProcessorConfig:
        return self._processor_config

    # =========================================================================
    # Public Methods
    # =========================================================================

    def extract_text(
        self,
        file_path: Union[str, Path],
        file_extension: Optional[str] = None,
        *,
        encoding: Optional[str] = None,
    ) -> str:
        """
        Read a text file and return its content with the grid tables rendered.

        Args:
            file_path: Path of the document
            file_extension: Overrides the extension taken from file_path
            encoding: Encoding to try before detection

        Returns:
            Rendered document, with runs of blank lines collapsed

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the extension is not a text type
        """
        path = str(file_path)
        if not os.path.exists(path):
            raise FileNotFoundError(f"File not found: {path}")

        ext = (file_extension if file_extension is not None else os.path.splitext(path)[1])
        ext = ext.lower().lstrip('.')
        if not self.is_supported(ext):
            raise ValueError(f"Unsupported file format: {ext}")

        self._logger.info(f"Rendering grid tables of {path}")
        text = self._text_handler.extract_text(self._read_file(path, ext), encoding=encoding)
        return clean_text(text)

    def convert_text(self, text: str) -> str:
        """Render the grid tables of a text, leaving everything else as is."""
        return self._text_handler.convert_text(text)

    def extract_tables(self, text: str) -> List[TableData]:
        """Return every well-formed grid table of a text as TableData."""
        return self._text_handler.extract_tables(text)

    def parse_table(self, lines: Sequence[str]) -> GridTable:
        """
        Parse one grid table block.

        Raises:
            MalformedTableError: If the block is not a well-formed grid table
        """
        return GridTableParser(lines, self._extractor_config).parse()

    def is_supported(self, file_extension: str) -> bool:
        return file_extension.lower().lstrip('.') in self.TEXT_TYPES

    # =========================================================================
    # Private Methods
    # =========================================================================

    def _read_file(self, file_path: str, ext: str) -> CurrentFile:
        file_path = os.path.abspath(file_path)
        with open(file_path, 'rb') as f:
            file_data = f.read()

        return {
            "file_path": file_path,
            "file_name": os.path.basename(file_path),
            "file_extension": ext,
            "file_data": file_data,
            "file_size": len(file_data),
        }

    def __repr__(self) -> str:
        return f"DocumentProcessor(output_format={self._processor_config.output_format.value!r})"


# === Module-level Convenience Functions ===

def create_processor(
    output_format: Union[str, TableOutputFormat] = TableOutputFormat.HTML,
    content_renderer: Optional[ContentRenderer] = None,
    **kwargs
) -> DocumentProcessor:
    """
    Shortcut for DocumentProcessor(output_format=..., content_renderer=..., **kwargs).

    Example:
        >>> processor = create_processor("markdown")
    """
    return DocumentProcessor(output_format=output_format, content_renderer=content_renderer, **kwargs)


__all__ = [
    "DocumentProcessor",
    "CurrentFile",
    "create_processor",
]
