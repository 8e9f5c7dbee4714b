# xgen_gridtable/core/functions/table_processor.py
"""
Table Processor - Rendering of TableData

Turns a parsed table into HTML, Markdown or plain text, and renders blocks
that failed to parse as literal text.

================================================================================
OUTPUT FORMATS
================================================================================

format_table(table) picks the renderer from config.output_format:

    HTML      format_table_as_html()      <thead>/<tbody>, rowspan/colspan
    MARKDOWN  format_table_as_markdown()  pipe table, spans become blank cells
    TEXT      format_table_as_text()      tab separated cells, one row per line

format_literal_block(lines) is the counterpart for blocks that are not
well-formed tables:

    HTML      <pre><code>...</code></pre>
    MARKDOWN  fenced code block
    TEXT      the lines as they were

================================================================================
HTML LAYOUT
================================================================================

    <table>
      <thead>
        <tr>
          <th>Header</th>
        </tr>
      </thead>
      <tbody>
        <tr>
          <td rowspan="2">
            multi-line
            content
          </td>
        </tr>
      </tbody>
    </table>

Head rows (above the '=' separator) use <th>, body rows <td>. A span
attribute is only written when it is larger than 1. Content of one line
stays on the tag line; longer content goes on its own indented line.

================================================================================
CELL CONTENT
================================================================================

Cells may hold nested markup (lists, paragraphs, ...). A content_renderer
(List[str] -> str) receives the lines of one cell and returns the fragment to
put between the tags, e.g. the output of a Markdown engine:

    processor = TableProcessor(content_renderer=lambda lines: md.render("\\n".join(lines)))

Without one, the lines are joined, whitespace is collapsed (clean_whitespace)
and the result is HTML-escaped.
"""
import html
import logging
import re
from enum import Enum
from dataclasses import dataclass
from typing import Callable, List, Optional

from xgen_gridtable.core.functions.table_extractor import TableData, TableCell

logger = logging.getLogger("document-processor")

ContentRenderer = Callable[[List[str]], str]

_HTML_ROW_INDENT = "    "
_HTML_CELL_INDENT = "      "
_HTML_CONTENT_INDENT = "        "


class TableOutputFormat(Enum):
    """Table output format options."""
    HTML = "html"
    MARKDOWN = "markdown"
    TEXT = "text"


@dataclass
class TableProcessorConfig:
    """Rendering options.

    Attributes:
        output_format: Target notation
        clean_whitespace: Collapse runs of whitespace inside a cell to one space
        preserve_merged_cells: Write rowspan/colspan in HTML (otherwise spans are dropped)
        fallback_to_literal: Render unparseable blocks as literal text instead of leaving them raw
    """
    output_format: TableOutputFormat = TableOutputFormat.HTML
    clean_whitespace: bool = True
    preserve_merged_cells: bool = True
    fallback_to_literal: bool = True


class TableProcessor:
    """
    Renders TableData in the configured output format.

    Public Methods:
        format_table()             -> entry point, dispatches on config.output_format
        format_table_as_html()     -> HTML (called from format_table)
        format_table_as_markdown() -> Markdown (called from format_table)
        format_table_as_text()     -> tab separated text (called from format_table)
        format_literal_block()     -> blocks that did not parse

    Example:
        processor = TableProcessor(TableProcessorConfig(output_format=TableOutputFormat.MARKDOWN))
        markdown = processor.format_table(table)
    """

    def __init__(
        self,
        config: Optional[TableProcessorConfig] = None,
        content_renderer: Optional[ContentRenderer] = None,
    ):
        self.config = config or TableProcessorConfig()
        self.content_renderer = content_renderer or self._render_cell_lines
        self.logger = logging.getLogger("document-processor")

    def format_table(self, table: TableData) -> str:
        """
        Render a table in config.output_format.

        Called from TextHandler.convert_text() for every block that parsed.

        Args:
            table: TableData from GridTableExtractor / grid_table_to_table_data()

        Returns:
            Rendered table; an empty table renders as an empty string
        """
        if self.config.output_format == TableOutputFormat.HTML:
            return self.format_table_as_html(table)
        elif self.config.output_format == TableOutputFormat.MARKDOWN:
            return self.format_table_as_markdown(table)
        else:
            return self.format_table_as_text(table)

    # ==========================================================================
    # HTML
    # ==========================================================================

    def format_table_as_html(self, table: TableData) -> str:
        """
        Convert TableData to an HTML table.

        Called from format_table() when output_format == HTML.

        Head rows go to <thead> as <th>, body rows to <tbody> as <td>; a
        section without rows is left out. Cell content comes from
        content_renderer.

        Args:
            table: Table to render

        Returns:
            HTML string, or "" for a table without rows
        """
        if not table.rows:
            return ""

        parts = ["<table>"]
        for section, tag, rows in (("thead", "th", table.head_rows), ("tbody", "td", table.body_rows)):
            if not rows:
                continue
            parts.append(f"  <{section}>")
            for row in rows:
                parts.append(f"{_HTML_ROW_INDENT}<tr>")
                parts.extend(self._format_html_cell(cell, tag) for cell in row)
                parts.append(f"{_HTML_ROW_INDENT}</tr>")
            parts.append(f"  </{section}>")
        parts.append("</table>")
        return "\n".join(parts)

    def _format_html_cell(self, cell: TableCell, tag: str) -> str:
        attrs = ""
        if self.config.preserve_merged_cells:
            if cell.row_span > 1:
                attrs += f' rowspan="{cell.row_span}"'
            if cell.col_span > 1:
                attrs += f' colspan="{cell.col_span}"'

        lines = cell.lines or [cell.content]
        content = self.content_renderer(lines)
        if len(lines) > 1:
            content = f"\n{_HTML_CONTENT_INDENT}{content}\n{_HTML_CELL_INDENT}"
        return f"{_HTML_CELL_INDENT}<{tag}{attrs}>{content}</{tag}>"

    # ==========================================================================
    # Markdown
    # ==========================================================================

    def format_table_as_markdown(self, table: TableData) -> str:
        """
        Convert TableData to a Markdown pipe table.

        Called from format_table() when output_format == MARKDOWN.

        Markdown has no spans: a spanning cell is written to its top-left slot
        and the slots it covers stay empty. The '---' line follows the last
        head row; a table without head rows has none. '|' in content is escaped.

        Args:
            table: Table to render

        Returns:
            Markdown string, or "" for a table without rows
        """
        if not table.rows:
            return ""

        lines = []
        for row_idx, row in enumerate(self._expand_to_grid(table)):
            escaped = [content.replace("|", "\\|") for content in row]
            lines.append("| " + " | ".join(escaped) + " |")
            if row_idx == table.head_row_count - 1:
                lines.append("| " + " | ".join("---" for _ in row) + " |")
        return "\n".join(lines)

    # ==========================================================================
    # Text
    # ==========================================================================

    def format_table_as_text(self, table: TableData) -> str:
        """
        Convert TableData to plain text.

        Called from format_table() when output_format == TEXT.

        Cells of a row are joined by tabs, one row per line. Spans are not
        marked, covered slots are skipped.

        Args:
            table: Table to render

        Returns:
            Text, or "" for a table without rows
        """
        return "\n".join(
            "\t".join(self._clean_cell_content(cell.content) for cell in row)
            for row in table.rows
        )

    # ==========================================================================
    # Literal fallback
    # ==========================================================================

    def format_literal_block(self, lines: List[str]) -> str:
        """
        Render lines verbatim in the configured output format.

        Called from TextHandler.convert_text() for blocks that look like a grid
        table but fail to parse, when config.fallback_to_literal is set.

        Args:
            lines: Original lines of the block

        Returns:
            <pre><code> (HTML, escaped), a fenced code block (Markdown) or the
            lines unchanged (TEXT)
        """
        text = "\n".join(lines)
        if self.config.output_format == TableOutputFormat.HTML:
            return f"<pre><code>{html.escape(text)}</code></pre>"
        elif self.config.output_format == TableOutputFormat.MARKDOWN:
            return f"```\n{text}\n```"
        return text

    # ==========================================================================
    # Helpers
    # ==========================================================================

    def _expand_to_grid(self, table: TableData) -> List[List[str]]:
        grid = [[""] * table.num_cols for _ in range(table.num_rows)]
        for row in table.rows:
            for cell in row:
                grid[cell.row_index][cell.col_index] = self._clean_cell_content(cell.content)
        return grid

    def _render_cell_lines(self, lines: List[str]) -> str:
        return html.escape(self._clean_cell_content("\n".join(lines)))

    def _clean_cell_content(self, content: str) -> str:
        if self.config.clean_whitespace:
            return re.sub(r'\s+', ' ', content).strip()
        return content


def create_table_processor(
    config: Optional[TableProcessorConfig] = None,
    content_renderer: Optional[ContentRenderer] = None,
) -> TableProcessor:
    """Build a TableProcessor; see TableProcessor for the arguments."""
    return TableProcessor(config, content_renderer)


# Default configuration
DEFAULT_PROCESSOR_CONFIG = TableProcessorConfig()
