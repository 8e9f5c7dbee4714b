import pytest

from xgen_gridtable import GridCell, GridTableParser, MalformedTableError, parse_grid_table
from xgen_gridtable.core.functions import TableExtractorConfig
from xgen_gridtable.core.processor.grid_helper import (
    DuplicateCellError,
    RawCell,
    scan_cell,
    split_to_codepoints,
    structure_from_cells,
)
from xgen_gridtable.core.processor.grid_helper.grid_tracer import _ParseSession

from conftest import BROKEN_BORDER, EMPTY_CELL, TWO_SEPARATORS


def _grid(lines):
    return [split_to_codepoints(line) for line in lines]


@pytest.mark.unit
class TestParseBasicTables:
    def test_single_cell(self, single_cell):
        table = parse_grid_table(single_cell)
        assert table.col_widths == [3]
        assert table.head_rows == []
        assert table.body_rows == [[GridCell(0, 0, 1, ("X",))]]

    def test_two_columns(self, two_columns):
        table = parse_grid_table(two_columns)
        assert table.col_widths == [3, 3]
        assert table.as_tuple() == ([3, 3], [], [[[0, 0, 1, ["A"]], [0, 0, 1, ["B"]]]])

    def test_empty_cell(self):
        table = parse_grid_table(EMPTY_CELL)
        assert table.body_rows == [[GridCell(0, 0, 1, ("",))]]

    def test_unicode_content(self):
        table = parse_grid_table(["+-----+", "| äé漢 |", "+-----+"])
        assert table.body_rows[0][0].lines == ("äé漢",)


@pytest.mark.unit
class TestParseSpans:
    def test_column_span(self, column_span):
        table = parse_grid_table(column_span)
        assert table.col_widths == [3, 3]
        assert table.body_rows == [
            [GridCell(0, 0, 1, ("A",)), GridCell(0, 0, 1, ("B",))],
            [GridCell(0, 1, 3, ("C",)), None],
        ]

    def test_row_span(self, row_span):
        table = parse_grid_table(row_span)
        assert table.body_rows == [
            [GridCell(1, 0, 1, ("A", "", "")), GridCell(0, 0, 1, ("B",))],
            [None, GridCell(0, 0, 3, ("C",))],
        ]
        assert table.body_rows[0][0].row_span == 2

    def test_pinwheel(self, pinwheel):
        table = parse_grid_table(pinwheel)
        assert table.col_widths == [2, 1, 2]
        assert table.body_rows == [
            [GridCell(0, 1, 1, ("a",)), None, GridCell(1, 0, 1, ("b", "", ""))],
            [GridCell(1, 0, 3, ("", "d", "")), GridCell(0, 0, 3, ("c",)), None],
            [None, GridCell(0, 1, 5, ("e",)), None],
        ]

    def test_spans_cover_every_slot(self, example_table):
        table = parse_grid_table(example_table)
        covered = sum(cell.row_span * cell.col_span for _, _, cell in table.iter_cells())
        assert covered == table.num_rows * table.num_cols


@pytest.mark.unit
class TestParseHeadBody:
    def test_head_rows_split(self, head_body):
        table = parse_grid_table(head_body)
        assert table.col_widths == [5, 5]
        assert table.head_rows == [[GridCell(0, 0, 1, ("H1",)), GridCell(0, 0, 1, ("H2",))]]
        assert table.body_rows == [
            [GridCell(0, 0, 3, ("a",)), GridCell(0, 0, 3, ("b",))],
            [GridCell(0, 0, 5, ("c",)), GridCell(0, 0, 5, ("d",))],
        ]

    def test_example_table(self, example_table):
        col_widths, head_rows, body_rows = parse_grid_table(example_table).as_tuple()
        assert col_widths == [24, 12, 10, 10]
        assert head_rows == [[
            [0, 0, 1, ["Header row, column 1"]],
            [0, 0, 1, ["Header 2"]],
            [0, 0, 1, ["Header 3"]],
            [0, 0, 1, ["Header 4"]],
        ]]
        assert body_rows == [
            [
                [0, 0, 3, ["body row 1, column 1"]],
                [0, 0, 3, ["column 2"]],
                [0, 0, 3, ["column 3"]],
                [0, 0, 3, ["column 4"]],
            ],
            [[0, 0, 5, ["body row 2"]], [0, 2, 5, ["Cells may span columns."]], None, None],
            [
                [0, 0, 7, ["body row 3"]],
                [1, 0, 7, ["Cells may", "span rows.", ""]],
                [1, 1, 7, ["- Table cells", "- contain", "- body elements."]],
                None,
            ],
            [[0, 0, 9, ["body row 4"]], None, None, None],
        ]

    def test_two_separators(self):
        with pytest.raises(MalformedTableError, match=r"table lines 3 and 5"):
            parse_grid_table(TWO_SEPARATORS)


@pytest.mark.unit
class TestParseErrors:
    def test_broken_border(self):
        with pytest.raises(MalformedTableError, match="parse incomplete"):
            parse_grid_table(BROKEN_BORDER)

    def test_empty_block(self):
        with pytest.raises(MalformedTableError, match="Empty table block"):
            parse_grid_table([])

    def test_single_line(self):
        with pytest.raises(MalformedTableError):
            parse_grid_table(["+---+"])

    def test_width_mismatch(self):
        with pytest.raises(MalformedTableError) as exc_info:
            parse_grid_table(["+---+", "| X  |", "+---+"])
        assert str(exc_info.value) == "Table line 2 is 6 characters wide, expected 5"
        assert exc_info.value.position == (1,)

    def test_ragged_lines_without_width_check(self):
        config = TableExtractorConfig(validate_width=False)
        with pytest.raises(MalformedTableError, match="ragged"):
            parse_grid_table(["+---+", "| X |", "+--"], config)

    def test_no_corner_at_origin(self):
        with pytest.raises(MalformedTableError):
            parse_grid_table(["|---+", "| X |", "+---+"])

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            parse_grid_table(BROKEN_BORDER)


@pytest.mark.unit
class TestTrailingWhitespace:
    def test_separator_with_trailing_spaces(self):
        table = parse_grid_table(["+---+", "| a |", "+===+  ", "| b |", "+---+"])
        assert table.col_widths == [3]
        assert table.head_rows[0][0].lines == ("a",)
        assert table.body_rows[0][0].lines == ("b",)

    def test_body_line_with_trailing_spaces(self):
        table = parse_grid_table(["+---+", "| a |   ", "+---+"])
        assert table.body_rows[0][0].lines == ("a",)

    def test_top_line_with_trailing_spaces(self):
        table = parse_grid_table(["+---+---+  ", "| a | b |", "+---+---+ "])
        assert table.col_widths == [3, 3]
        assert [cell.lines for cell in table.body_rows[0]] == [("a",), ("b",)]

    def test_trimmed_width_still_checked(self):
        with pytest.raises(MalformedTableError) as exc_info:
            parse_grid_table(["+---+", "| a  |  ", "+---+"])
        assert str(exc_info.value) == "Table line 2 is 6 characters wide, expected 5"


@pytest.mark.unit
class TestParserBehavior:
    def test_parse_is_repeatable(self, example_table):
        parser = GridTableParser(example_table)
        assert parser.parse() == parser.parse()

    def test_input_not_modified(self, head_body):
        original = list(head_body)
        parse_grid_table(head_body)
        assert head_body == original

    def test_indent_kept_when_disabled(self):
        config = TableExtractorConfig(strip_indent=False)
        table = parse_grid_table(["+-----+", "|  x  |", "+-----+"], config)
        assert table.body_rows[0][0].lines == ("  x",)


@pytest.mark.unit
class TestScanCell:
    def test_traces_spanning_cell(self, row_span):
        bottom, right, row_seps, col_seps = scan_cell(_grid(row_span), 0, 0)
        assert (bottom, right) == (4, 4)
        assert 2 in row_seps

    def test_not_a_corner(self, single_cell):
        with pytest.raises(MalformedTableError) as exc_info:
            scan_cell(_grid(single_cell), 1, 0)
        assert exc_info.value.position == (1, 0)

    def test_no_cell_from_corner(self):
        assert scan_cell(_grid(BROKEN_BORDER), 2, 4) is None


@pytest.mark.unit
class TestColumnCoverage:
    def test_cell_not_below_done_lines(self):
        session = _ParseSession(["+---+", "| a |", "+---+"], TableExtractorConfig())
        with pytest.raises(MalformedTableError) as exc_info:
            session._mark_done(2, 0, 2, 4)
        assert str(exc_info.value) == "Expected to see done[0] value to be 1, actual is -1"
        assert exc_info.value.position == (2, 0)

    def test_columns_marked_done(self):
        session = _ParseSession(["+---+", "| a |", "+---+"], TableExtractorConfig())
        session._mark_done(0, 0, 2, 4)
        assert session.done == [1, 1, 1, 1, -1]


@pytest.mark.unit
class TestStructureFromCells:
    def test_duplicate_cell(self):
        cells = [RawCell(0, 0, 2, 4, ["a"]), RawCell(0, 0, 2, 4, ["b"])]
        with pytest.raises(DuplicateCellError, match=r"Cell \(row 1, column 1\) already used"):
            structure_from_cells(cells, {0: [0], 2: [4]}, {0: [0], 4: [0]})

    def test_unused_cells(self):
        cells = [RawCell(0, 0, 2, 4, ["a"])]
        with pytest.raises(MalformedTableError, match=r"Unused cells remaining \(1\)"):
            structure_from_cells(cells, {0: [0], 2: [4]}, {0: [0], 4: [0], 8: [0]})

    def test_separator_not_a_row_boundary(self):
        cells = [RawCell(0, 0, 2, 4, ["a"])]
        with pytest.raises(MalformedTableError, match="not a row boundary"):
            structure_from_cells(cells, {0: [0], 2: [4]}, {0: [0], 4: [0]}, head_body_sep=1)
