import pytest

from xgen_gridtable import DocumentProcessor, MalformedTableError
from xgen_gridtable.core.document_processor import create_processor
from xgen_gridtable.core.functions import TableOutputFormat, TableProcessorConfig
from xgen_gridtable.core.functions.table_processor import DEFAULT_PROCESSOR_CONFIG

from conftest import BROKEN_BORDER, HEAD_BODY, SINGLE_CELL


@pytest.mark.unit
class TestDocumentProcessorSetup:
    def test_defaults(self):
        processor = DocumentProcessor()
        assert processor.processor_config.output_format == TableOutputFormat.HTML
        assert processor.extractor_config.validate_width is True
        assert repr(processor) == "DocumentProcessor(output_format='html')"

    def test_output_format_shortcut(self):
        processor = DocumentProcessor(output_format="markdown")
        assert processor.processor_config.output_format == TableOutputFormat.MARKDOWN

    def test_output_format_overrides_config(self):
        config = TableProcessorConfig(output_format=TableOutputFormat.HTML)
        processor = DocumentProcessor(processor_config=config, output_format=TableOutputFormat.TEXT)
        assert processor.processor_config.output_format == TableOutputFormat.TEXT

    def test_passed_config_not_modified(self):
        config = TableProcessorConfig()
        processor = DocumentProcessor(processor_config=config, output_format="markdown")
        assert config.output_format == TableOutputFormat.HTML
        assert processor.processor_config.output_format == TableOutputFormat.MARKDOWN
        assert processor.processor_config is not config

    def test_shared_default_config_not_modified(self):
        DocumentProcessor(processor_config=DEFAULT_PROCESSOR_CONFIG, output_format="text")
        assert DEFAULT_PROCESSOR_CONFIG.output_format == TableOutputFormat.HTML

    def test_unknown_output_format(self):
        with pytest.raises(ValueError):
            DocumentProcessor(output_format="pdf")

    def test_create_processor(self):
        processor = create_processor("text")
        assert processor.processor_config.output_format == TableOutputFormat.TEXT

    def test_supported_extensions(self):
        processor = DocumentProcessor()
        assert processor.supported_extensions == ["markdown", "md", "rst", "text", "txt"]
        assert processor.is_supported("RST")
        assert processor.is_supported(".md")
        assert not processor.is_supported("pdf")


@pytest.mark.unit
class TestDocumentProcessorText:
    def test_parse_table(self):
        table = DocumentProcessor().parse_table(HEAD_BODY)
        assert table.col_widths == [5, 5]
        assert len(table.head_rows) == 1

    def test_parse_table_malformed(self):
        with pytest.raises(MalformedTableError):
            DocumentProcessor().parse_table(BROKEN_BORDER)

    def test_convert_text(self, document_text):
        result = DocumentProcessor(output_format="text").convert_text(document_text)
        assert result == "Intro paragraph\n\nH1\tH2\na\tb\nc\td\n\nBetween tables\n\nA\tB\nC\n\nOutro"

    def test_content_renderer(self):
        processor = DocumentProcessor(content_renderer=lambda lines: "<em>" + " ".join(lines) + "</em>")
        assert "<td><em>X</em></td>" in processor.convert_text("\n".join(SINGLE_CELL))

    def test_extract_tables(self, document_text):
        tables = DocumentProcessor().extract_tables(document_text)
        assert len(tables) == 2
        assert tables[0].head_row_count == 1


@pytest.mark.integration
class TestDocumentProcessorFiles:
    def test_extract_text(self, tmp_path, document_text):
        path = tmp_path / "doc.rst"
        path.write_text(document_text + "\n\n\n", encoding="utf-8")
        result = DocumentProcessor(output_format="markdown").extract_text(path)
        assert result.startswith("Intro paragraph\n\n| H1 | H2 |\n| --- | --- |")
        assert result.endswith("| C |  |\n\nOutro")

    def test_bom_file(self, tmp_path):
        path = tmp_path / "doc.txt"
        path.write_bytes(b"\xef\xbb\xbf" + "\n".join(SINGLE_CELL).encode("utf-8"))
        result = DocumentProcessor().extract_text(path)
        assert result.startswith("<table>")

    def test_explicit_extension(self, tmp_path):
        path = tmp_path / "doc.data"
        path.write_text("\n".join(SINGLE_CELL), encoding="utf-8")
        assert "<td>X</td>" in DocumentProcessor().extract_text(path, "txt")

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "doc.pdf"
        path.write_bytes(b"%PDF")
        with pytest.raises(ValueError, match="Unsupported file format: pdf"):
            DocumentProcessor().extract_text(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            DocumentProcessor().extract_text(tmp_path / "missing.txt")
