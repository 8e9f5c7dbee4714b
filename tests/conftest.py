"""Shared grid table fixtures."""

import pytest


def lines_of(text):
    """Split a dedented multi-line literal into table lines."""
    return text.strip("\n").split("\n")


EXAMPLE_TABLE = lines_of("""
+------------------------+------------+----------+----------+
| Header row, column 1   | Header 2   | Header 3 | Header 4 |
+========================+============+==========+==========+
| body row 1, column 1   | column 2   | column 3 | column 4 |
+------------------------+------------+----------+----------+
| body row 2             | Cells may span columns.          |
+------------------------+------------+---------------------+
| body row 3             | Cells may  | - Table cells       |
+------------------------+ span rows. | - contain           |
| body row 4             |            | - body elements.    |
+------------------------+------------+---------------------+
""")

SINGLE_CELL = lines_of("""
+---+
| X |
+---+
""")

TWO_COLUMNS = lines_of("""
+---+---+
| A | B |
+---+---+
""")

COLUMN_SPAN = lines_of("""
+---+---+
| A | B |
+---+---+
| C     |
+-------+
""")

ROW_SPAN = lines_of("""
+---+---+
| A | B |
|   +---+
|   | C |
+---+---+
""")

HEAD_BODY = lines_of("""
+-----+-----+
| H1  | H2  |
+=====+=====+
| a   | b   |
+-----+-----+
| c   | d   |
+-----+-----+
""")

PINWHEEL = lines_of("""
+----+--+
| a  |b |
+--+-+  |
|  |c|  |
|d +-+--+
|  | e  |
+--+----+
""")

EMPTY_CELL = lines_of("""
+--+
|  |
+--+
""")

BROKEN_BORDER = lines_of("""
+---+---+
| A | B |
+---+   |
| C     |
+---+---+
""")

TWO_SEPARATORS = lines_of("""
+-----+
| H   |
+=====+
| a   |
+=====+
| b   |
+-----+
""")


@pytest.fixture
def example_table():
    return list(EXAMPLE_TABLE)


@pytest.fixture
def single_cell():
    return list(SINGLE_CELL)


@pytest.fixture
def two_columns():
    return list(TWO_COLUMNS)


@pytest.fixture
def column_span():
    return list(COLUMN_SPAN)


@pytest.fixture
def row_span():
    return list(ROW_SPAN)


@pytest.fixture
def head_body():
    return list(HEAD_BODY)


@pytest.fixture
def pinwheel():
    return list(PINWHEEL)


@pytest.fixture
def broken_border():
    return list(BROKEN_BORDER)


@pytest.fixture
def document_text():
    return "\n".join(
        ["Intro paragraph", ""]
        + HEAD_BODY
        + ["", "Between tables", ""]
        + COLUMN_SPAN
        + ["", "Outro"]
    )
