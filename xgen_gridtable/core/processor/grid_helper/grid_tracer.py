# grid_helper/grid_tracer.py
"""
Grid Tracer - parse a grid table block into a GridTable

Start with a queue of upper-left corners, containing the upper-left corner of
the table itself. Trace out one rectangular cell, remember it, and add its
upper-right and lower-left corners to the queue of potential upper-left
corners of further cells. Process the queue in top-to-bottom order, keeping
track of how much of each text column has been seen.

We end up knowing all the row and column boundaries, cell positions and their
dimensions, which structure_from_cells() turns into rows and columns.

Passing the table from grid_constants to parse_grid_table() results in:

    GridTable(
        col_widths=[24, 12, 10, 10],
        head_rows=[[(0, 0, 1, ['Header row, column 1']),
                    (0, 0, 1, ['Header 2']),
                    (0, 0, 1, ['Header 3']),
                    (0, 0, 1, ['Header 4'])]],
        body_rows=[[(0, 0, 3, ['body row 1, column 1']),
                    (0, 0, 3, ['column 2']),
                    (0, 0, 3, ['column 3']),
                    (0, 0, 3, ['column 4'])],
                   [(0, 0, 5, ['body row 2']),
                    (0, 2, 5, ['Cells may span columns.']),
                    None,
                    None],
                   [(0, 0, 7, ['body row 3']),
                    (1, 0, 7, ['Cells may', 'span rows.', '']),
                    (1, 1, 7, ['- Table cells', '- contain', '- body elements.']),
                    None],
                   [(0, 0, 9, ['body row 4']), None, None, None]])

Each cell is (more_rows, more_cols, line_offset, lines).
"""
import bisect
import logging
from functools import cmp_to_key
from typing import Dict, List, Optional, Sequence, Tuple

from xgen_gridtable.core.functions.table_extractor import TableExtractorConfig
from xgen_gridtable.core.processor.grid_helper.grid_constants import (
    CORNER,
    HORIZONTAL_BORDER,
    VERTICAL_BORDER,
    GridCell,
    GridRow,
    GridTable,
    RawCell,
)
from xgen_gridtable.core.processor.grid_helper.grid_errors import (
    DuplicateCellError,
    MalformedTableError,
)
from xgen_gridtable.core.processor.grid_helper.grid_geometry import (
    compare_tuples,
    extract_cell_block,
    find_head_body_separator,
    merge_boundary_sets,
    split_to_codepoints,
)

logger = logging.getLogger("document-processor")

Grid = Sequence[Sequence[str]]
Boundaries = Dict[int, List[int]]

_CORNER_KEY = cmp_to_key(compare_tuples)


# ============================================================================
# Four-sided scan
# ============================================================================

def scan_cell(
    grid: Grid, top: int, left: int, limit: Optional[int] = None
) -> Optional[Tuple[int, int, Boundaries, Boundaries]]:
    """
    Starting at the top-left corner, trace out a cell.

    Called from _ParseSession.trace() for every corner taken off the queue.

    Args:
        grid: Table lines split into characters
        top: Line index of the corner
        left: Column index of the corner
        limit: Rightmost column of the table; characters past it are ignored
               (None: the end of the top line)

    Returns:
        (bottom, right, row_seps, col_seps) or None if no cell starts here

    Raises:
        MalformedTableError: If there is no corner at (top, left)
    """
    if grid[top][left] != CORNER:
        raise MalformedTableError(
            f"Expected to see '{CORNER}' at position [{top}, {left}]",
            position=(top, left),
        )
    return scan_right(grid, top, left, limit)


def scan_right(
    grid: Grid, top: int, left: int, limit: Optional[int] = None
) -> Optional[Tuple[int, int, Boundaries, Boundaries]]:
    """
    Look for the top-right corner of the cell, and make note of all column
    boundaries ('+').

    Every '+' on the top border is tried as the right corner, nearest first,
    until scan_down() closes a rectangle from it.

    Args:
        grid: Table lines split into characters
        top: Line index of the top border
        left: Column index of the top-left corner
        limit: Last column to look at (None: the end of the line)

    Returns:
        (bottom, right, row_seps, col_seps), or None if the top border is
        broken before a rectangle closes
    """
    col_seps: Boundaries = {}
    line = grid[top]
    end = len(line) if limit is None else min(len(line), limit + 1)
    for i in range(left + 1, end):
        if line[i] == CORNER:
            col_seps[i] = [top]
            result = scan_down(grid, top, left, i)
            if result is not None:
                bottom, row_seps, new_col_seps = result
                merge_boundary_sets(col_seps, new_col_seps)
                return bottom, i, row_seps, col_seps
        elif line[i] != HORIZONTAL_BORDER:
            return None
    return None


def scan_down(grid: Grid, top: int, left: int, right: int) -> Optional[Tuple[int, Boundaries, Boundaries]]:
    """
    Look for the bottom-right corner of the cell, making note of all row
    boundaries.

    Walks down the right border; each '+' is tried as the bottom-right corner.

    Returns:
        (bottom, row_seps, col_seps), or None if the right border breaks
    """
    row_seps: Boundaries = {}
    for i in range(top + 1, len(grid)):
        if grid[i][right] == CORNER:
            row_seps[i] = [right]
            result = scan_left(grid, top, left, i, right)
            if result is not None:
                new_row_seps, col_seps = result
                merge_boundary_sets(row_seps, new_row_seps)
                return i, row_seps, col_seps
        elif grid[i][right] != VERTICAL_BORDER:
            return None
    return None


def scan_left(
    grid: Grid, top: int, left: int, bottom: int, right: int
) -> Optional[Tuple[Boundaries, Boundaries]]:
    """
    Noting column boundaries, look for the bottom-left corner of the cell.
    It must line up with the starting point.

    Returns:
        (row_seps, col_seps) of the bottom and left borders, or None if the
        bottom border breaks or the left border does not lead back to the top
    """
    col_seps: Boundaries = {}
    line = grid[bottom]
    for i in range(right - 1, left, -1):
        if line[i] == CORNER:
            col_seps[i] = [bottom]
        elif line[i] != HORIZONTAL_BORDER:
            return None
    if line[left] != CORNER:
        return None
    row_seps = scan_up(grid, top, left, bottom, right)
    if row_seps is None:
        return None
    return row_seps, col_seps


def scan_up(grid: Grid, top: int, left: int, bottom: int, right: int) -> Optional[Boundaries]:
    """
    Noting row boundaries, see if we can return to the starting point.

    Returns:
        Row boundaries met on the left border, or None if it breaks
    """
    row_seps: Boundaries = {}
    for i in range(bottom - 1, top, -1):
        if grid[i][left] == CORNER:
            row_seps[i] = [left]
        elif grid[i][left] != VERTICAL_BORDER:
            return None
    return row_seps


# ============================================================================
# Structure assembly
# ============================================================================

def structure_from_cells(
    cells: List[RawCell],
    row_seps: Boundaries,
    col_seps: Boundaries,
    head_body_sep: Optional[int] = None,
) -> GridTable:
    """
    From the data collected by scan_cell(), convert to the final data structure.

    Raises:
        DuplicateCellError: If two cells claim the same slot
        MalformedTableError: If any slot is left unclaimed
    """
    row_bounds = sorted(row_seps)
    row_index = {boundary: i for i, boundary in enumerate(row_bounds)}
    col_bounds = sorted(col_seps)
    col_index = {boundary: i for i, boundary in enumerate(col_bounds)}
    col_widths = [col_bounds[i] - col_bounds[i - 1] - 1 for i in range(1, len(col_bounds))]

    # Empty table with the correct number of rows & columns
    num_cols = len(col_bounds) - 1
    rows: List[GridRow] = [[None] * num_cols for _ in range(len(row_bounds) - 1)]
    # Should reduce to zero
    remaining = (len(row_bounds) - 1) * num_cols

    for top, left, bottom, right, block in cells:
        row_num = row_index[top]
        col_num = col_index[left]
        if rows[row_num][col_num] is not None:
            raise DuplicateCellError(
                f"Cell (row {row_num + 1}, column {col_num + 1}) already used",
                position=(top, left),
            )
        more_rows = row_index[bottom] - row_num - 1
        more_cols = col_index[right] - col_num - 1
        remaining -= (more_rows + 1) * (more_cols + 1)
        rows[row_num][col_num] = GridCell(more_rows, more_cols, top + 1, tuple(block))

    if remaining != 0:
        raise MalformedTableError(f"Unused cells remaining ({remaining})")

    if head_body_sep is None:
        return GridTable(col_widths=col_widths, head_rows=[], body_rows=rows)

    if head_body_sep not in row_index:
        raise MalformedTableError(
            f"Head/body row separator at table line {head_body_sep + 1} is not a row boundary",
            position=(head_body_sep,),
        )
    num_head_rows = row_index[head_body_sep]
    return GridTable(col_widths=col_widths, head_rows=rows[:num_head_rows], body_rows=rows[num_head_rows:])


# ============================================================================
# Parser
# ============================================================================

class _ParseSession:
    """Mutable state of one parse() call."""

    def __init__(self, block: Sequence[str], config: TableExtractorConfig):
        lines = list(block)
        if not lines:
            raise MalformedTableError("Empty table block")

        self.config = config
        self.head_body_sep = find_head_body_separator(lines)
        self.grid = [split_to_codepoints(line) for line in lines]
        self.bottom = len(self.grid) - 1
        # Trailing whitespace is not part of the table
        self.right = len(split_to_codepoints(lines[0].rstrip())) - 1

        if config.validate_width:
            self._check_width(lines)
        if self.bottom < 1 or self.right < 1:
            raise MalformedTableError(
                f"Table must be at least 2 lines high and 2 characters wide, "
                f"got {self.bottom + 1}x{self.right + 1}"
            )

        self.done = [-1] * (self.right + 1)
        self.cells: List[RawCell] = []
        self.row_seps: Boundaries = {0: [0]}
        self.col_seps: Boundaries = {0: [0]}

    def _check_width(self, lines: Sequence[str]) -> None:
        width = self.right + 1
        for i, line in enumerate(lines):
            line_width = len(split_to_codepoints(line.rstrip()))
            if line_width != width:
                raise MalformedTableError(
                    f"Table line {i + 1} is {line_width} characters wide, expected {width}",
                    position=(i,),
                )

    def trace(self) -> None:
        """
        Trace every cell reachable from the top-left corner of the table.

        Called from GridTableParser.parse(). Fills cells, row_seps and
        col_seps for structure_from_cells().

        Raises:
            MalformedTableError: If cells overlap or some part of the table
                is never reached
        """
        corners: List[Tuple[int, int]] = [(0, 0)]
        while corners:
            top, left = corners.pop(0)
            if top == self.bottom or left == self.right or top <= self.done[left]:
                continue
            result = scan_cell(self.grid, top, left, self.right)
            if result is None:
                continue
            bottom, right, row_seps, col_seps = result
            merge_boundary_sets(self.row_seps, row_seps)
            merge_boundary_sets(self.col_seps, col_seps)
            self._mark_done(top, left, bottom, right)
            block = extract_cell_block(
                self.grid, top + 1, left + 1, bottom, right, strip_indent=self.config.strip_indent
            )
            self.cells.append(RawCell(top, left, bottom, right, block))
            bisect.insort(corners, (top, right), key=_CORNER_KEY)
            bisect.insort(corners, (bottom, left), key=_CORNER_KEY)

        if not self._parse_complete():
            raise MalformedTableError("Malformed table, parse incomplete")
        logger.debug(f"Traced {len(self.cells)} grid table cells")

    def _mark_done(self, top: int, left: int, bottom: int, right: int) -> None:
        """
        For keeping track of how much of each text column has been seen.

        A traced cell must start right below what is already done in each of
        its text columns.

        Raises:
            MalformedTableError: If a column of the cell was not done up to
                the line above it
        """
        before = top - 1
        after = bottom - 1
        for col in range(left, right):
            if self.done[col] != before:
                raise MalformedTableError(
                    f"Expected to see done[{col}] value to be {before}, actual is {self.done[col]}",
                    position=(top, col),
                )
            self.done[col] = after

    def _parse_complete(self) -> bool:
        """Each text column should have been completely seen."""
        last = self.bottom - 1
        return all(self.done[col] == last for col in range(self.right))


class GridTableParser:
    """
    Parse a grid table using parse().

    The parser keeps no state between calls: every parse() works on a fresh
    session, so one instance can be reused and shared.

    Example:
        parser = GridTableParser(lines)
        table = parser.parse()
        for row in table.body_rows:
            ...
    """

    def __init__(self, block: Sequence[str], config: Optional[TableExtractorConfig] = None):
        """
        Args:
            block: Table lines with no surrounding whitespace padding
            config: Extraction configuration (strip_indent, validate_width)
        """
        self.block = tuple(block)
        self.config = config or TableExtractorConfig()

    def parse(self) -> GridTable:
        """
        Analyze the text block and return a table data structure.

        Called from DocumentProcessor.parse_table() and
        GridTableExtractor.parse_region(), or directly through parse_grid_table().

        Returns:
            GridTable with column widths and the head and body rows; slots
            covered by a spanning cell are None

        Raises:
            MalformedTableError: If there is any problem with the markup
        """
        session = _ParseSession(self.block, self.config)
        try:
            session.trace()
        except IndexError as e:
            raise MalformedTableError(f"Malformed table, ragged lines: {e}") from e
        return structure_from_cells(session.cells, session.row_seps, session.col_seps, session.head_body_sep)


def parse_grid_table(lines: Sequence[str], config: Optional[TableExtractorConfig] = None) -> GridTable:
    """Parse a block of grid table lines. See GridTableParser."""
    return GridTableParser(lines, config).parse()


__all__ = [
    "GridTableParser",
    "parse_grid_table",
    "structure_from_cells",
    "scan_cell",
    "scan_right",
    "scan_down",
    "scan_left",
    "scan_up",
]
