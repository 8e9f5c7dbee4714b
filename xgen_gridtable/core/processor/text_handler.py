# xgen_gridtable/core/processor/text_handler.py
"""
Text Handler - Text File Processor

Converts the grid tables of a text document into rendered tables and leaves
the rest of the text untouched. A block that looks like a grid table but does
not parse is kept as literal text.
"""
import logging
from typing import List, Optional, TYPE_CHECKING

from xgen_gridtable.core.functions.file_converter import TextFileConverter
from xgen_gridtable.core.functions.table_extractor import TableData, TableExtractorConfig
from xgen_gridtable.core.functions.table_processor import (
    ContentRenderer,
    TableProcessor,
    TableProcessorConfig,
)
from xgen_gridtable.core.functions.utils import expand_tabs, split_lines
from xgen_gridtable.core.processor.grid_helper.grid_table_extractor import (
    GridTableExtractor,
    grid_table_to_table_data,
)

if TYPE_CHECKING:
    from xgen_gridtable.core.document_processor import CurrentFile

logger = logging.getLogger("document-processor")


class TextHandler:
    """Text File Processing Handler Class"""

    def __init__(
        self,
        extractor_config: Optional[TableExtractorConfig] = None,
        processor_config: Optional[TableProcessorConfig] = None,
        content_renderer: Optional[ContentRenderer] = None,
        tab_width: int = 8,
    ):
        """
        Args:
            extractor_config: Grid table extraction configuration
            processor_config: Table rendering configuration
            content_renderer: Renderer for cell content lines (see TableProcessor)
            tab_width: Tab stop width used before table detection
        """
        self.extractor = GridTableExtractor(extractor_config)
        self.table_processor = TableProcessor(processor_config, content_renderer)
        self.file_converter = TextFileConverter()
        self.tab_width = tab_width
        self.logger = logging.getLogger("document-processor")

    def extract_text(
        self,
        current_file: "CurrentFile",
        encoding: Optional[str] = None,
        **kwargs
    ) -> str:
        """
        Decode a text file and render its grid tables.

        Args:
            current_file: CurrentFile dict containing file info and binary data
            encoding: Encoding to try first (None for auto-detect)
            **kwargs: Additional options

        Returns:
            Text with grid tables rendered
        """
        file_path = current_file.get("file_path", "unknown")
        file_data = current_file.get("file_data", b"")

        text = self.file_converter.convert(file_data, encoding=encoding)
        self.logger.info(f"Decoded {file_path} with {self.file_converter.detected_encoding} encoding")
        return self.convert_text(text)

    def convert_text(self, text: str) -> str:
        """
        Replace every grid table of the text with its rendered form.

        Line endings are normalized to LF; a final line break is kept.
        """
        lines = split_lines(expand_tabs(text, self.tab_width))
        output: List[str] = []
        position = 0
        converted = 0

        for region in self.extractor.detect_table_regions(lines):
            output.extend(lines[position:region.start_line])
            block = lines[region.start_line:region.end_line + 1]

            grid_table = self.extractor.parse_region(lines, region)
            if grid_table is not None:
                table = grid_table_to_table_data(grid_table, region, self.extractor.config.include_header_row)
                output.append(self.table_processor.format_table(table))
                converted += 1
            elif self.table_processor.config.fallback_to_literal:
                output.append(self.table_processor.format_literal_block(block))
            else:
                output.extend(block)
            position = region.end_line + 1

        output.extend(lines[position:])
        self.logger.debug(f"Converted {converted} grid tables")
        result = "\n".join(output)
        if text.endswith(("\n", "\r")):
            result += "\n"
        return result

    def extract_tables(self, text: str) -> List[TableData]:
        """Return the TableData of every well-formed grid table in the text."""
        return self.extractor.extract_tables(split_lines(expand_tabs(text, self.tab_width)))
