# grid_helper/grid_constants.py
"""
Grid Table Constants and Types

Defines the border characters, line patterns and data classes used by the
grid table parser.

A grid table looks like this::

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

Intersections use '+', row separators use '-' (except for one optional
head/body row separator, which uses '='), and column separators use '|'.
"""
from dataclasses import dataclass, field
from typing import Any, List, NamedTuple, Optional, Tuple


# === Border characters ===

CORNER = '+'
HORIZONTAL_BORDER = '-'
VERTICAL_BORDER = '|'
HEAD_BODY_BORDER = '='

# Characters a table line may start or end with
EDGE_CHARACTERS = (CORNER, VERTICAL_BORDER)


# === Line patterns ===

# Head/body separator: +====+====+ (trailing whitespace allowed)
HEAD_BODY_SEPARATOR_PATTERN = r'^\+=[=+]+=\+\s*$'

# Ordinary row separator: +----+----+ (surrounding whitespace allowed)
ROW_SEPARATOR_PATTERN = r'^\s*\+-[-+]+-\+\s*$'

# Left and right edges of any table line
LEFT_EDGE_PATTERN = r'^[|+]'
RIGHT_EDGE_PATTERN = r'[|+]$'


# === Data classes ===

class RawCell(NamedTuple):
    """A traced cell rectangle in grid coordinates (corners inclusive)."""
    top: int
    left: int
    bottom: int
    right: int
    lines: List[str]


@dataclass(frozen=True)
class GridCell:
    """
    A cell of a parsed grid table.

    Attributes:
        more_rows: Number of extra rows used by the cell in a vertical span
        more_cols: Number of extra columns used by the cell in a horizontal span
        line_offset: Line offset of the first content line within the block
        lines: Cell contents, one string per text line
    """
    more_rows: int
    more_cols: int
    line_offset: int
    lines: Tuple[str, ...]

    @property
    def row_span(self) -> int:
        return self.more_rows + 1

    @property
    def col_span(self) -> int:
        return self.more_cols + 1

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def as_list(self) -> List[Any]:
        return [self.more_rows, self.more_cols, self.line_offset, list(self.lines)]


GridRow = List[Optional[GridCell]]


@dataclass
class GridTable:
    """
    Structure of a parsed grid table.

    Rows hold one entry per logical column. An entry is None when the slot is
    covered by the span of a cell placed earlier in the table.

    Attributes:
        col_widths: Width of each column in characters (border excluded)
        head_rows: Rows above the head/body separator
        body_rows: Remaining rows
    """
    col_widths: List[int] = field(default_factory=list)
    head_rows: List[GridRow] = field(default_factory=list)
    body_rows: List[GridRow] = field(default_factory=list)

    @property
    def num_cols(self) -> int:
        return len(self.col_widths)

    @property
    def num_rows(self) -> int:
        return len(self.head_rows) + len(self.body_rows)

    @property
    def rows(self) -> List[GridRow]:
        return self.head_rows + self.body_rows

    def iter_cells(self):
        """Yield (row_index, col_index, cell) for every placed cell."""
        for row_idx, row in enumerate(self.rows):
            for col_idx, cell in enumerate(row):
                if cell is not None:
                    yield row_idx, col_idx, cell

    def as_tuple(self) -> Tuple[List[int], List[List[Any]], List[List[Any]]]:
        """Return the table as plain (col_widths, head_rows, body_rows) lists."""
        def _plain(rows: List[GridRow]) -> List[List[Any]]:
            return [[cell.as_list() if cell is not None else None for cell in row] for row in rows]

        return list(self.col_widths), _plain(self.head_rows), _plain(self.body_rows)
