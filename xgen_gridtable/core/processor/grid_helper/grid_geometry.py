# grid_helper/grid_geometry.py
"""
Grid Geometry - low-level helpers shared by the grid table parser

- Character grid indexing (one element per code point)
- Head/body separator detection
- Corner tuple ordering
- Cell content extraction and dedent
- Boundary set merging
"""
import logging
import re
from typing import Dict, List, Optional, Sequence

from xgen_gridtable.core.processor.grid_helper.grid_constants import (
    HEAD_BODY_BORDER,
    HEAD_BODY_SEPARATOR_PATTERN,
    HORIZONTAL_BORDER,
)
from xgen_gridtable.core.processor.grid_helper.grid_errors import (
    IncomparableTuplesError,
    MalformedTableError,
)

logger = logging.getLogger("document-processor")

_HEAD_BODY_SEPARATOR_RE = re.compile(HEAD_BODY_SEPARATOR_PATTERN)


def split_to_codepoints(line: str) -> List[str]:
    """
    Split a text line into code points so that every character takes
    exactly one grid column, whatever its encoded length.
    """
    return list(line)


def find_head_body_separator(lines: List[str]) -> Optional[int]:
    """
    Look for the head/body row separator line (+===+===+).

    The matching line is rewritten in place with '=' replaced by '-', so that
    cell tracing treats it as an ordinary row separator.

    Args:
        lines: Table lines (modified in place)

    Returns:
        Index of the separator line, or None if the table has no head

    Raises:
        MalformedTableError: More than one separator, or the separator is the
            first or last line of the table
    """
    head_body_sep = None
    for i, line in enumerate(lines):
        if not _HEAD_BODY_SEPARATOR_RE.match(line):
            continue
        if head_body_sep is not None:
            raise MalformedTableError(
                f"Multiple head/body row separators (table lines {head_body_sep + 1} "
                f"and {i + 1}), only one allowed",
                position=(head_body_sep, i),
            )
        head_body_sep = i
        lines[i] = line.replace(HEAD_BODY_BORDER, HORIZONTAL_BORDER)

    if head_body_sep is not None and head_body_sep in (0, len(lines) - 1):
        raise MalformedTableError(
            "The head/body row separator may not be the first or last line of the table",
            position=(head_body_sep,),
        )
    return head_body_sep


def extract_cell_block(
    grid: Sequence[Sequence[str]],
    top: int,
    left: int,
    bottom: int,
    right: int,
    strip_indent: bool = True,
) -> List[str]:
    """
    Cut the text of a cell out of the character grid.

    Rows [top, bottom) and columns [left, right) are joined and right-trimmed.
    If strip_indent is set, the common leading whitespace of the non-empty
    lines is removed.

    Args:
        grid: Character grid
        top: First content row
        left: First content column
        bottom: Row after the last content row
        right: Column after the last content column
        strip_indent: Whether to dedent the cell content

    Returns:
        Cell content lines
    """
    width = right - left
    block = []
    indent = width
    for row in grid[top:bottom]:
        line = "".join(row[left:right]).rstrip()
        block.append(line)
        if line:
            indent = min(indent, len(line) - len(line.lstrip()))

    if strip_indent and 0 < indent < width:
        block = [line[indent:] for line in block]
    return block


def compare_tuples(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Compare two equal-length tuples element by element.

    Returns:
        -1, 0 or 1

    Raises:
        IncomparableTuplesError: If the tuples differ in length
    """
    if len(a) != len(b):
        raise IncomparableTuplesError(
            f"Can only compare tuples of same length, got {len(a)} and {len(b)}"
        )
    for x, y in zip(a, b):
        if x > y:
            return 1
        if x < y:
            return -1
    return 0


def merge_boundary_sets(master: Dict[int, List[int]], additions: Dict[int, List[int]]) -> None:
    """Extend the coordinate lists of master with those from additions."""
    for key, values in additions.items():
        master.setdefault(key, []).extend(values)


__all__ = [
    "split_to_codepoints",
    "find_head_body_separator",
    "extract_cell_block",
    "compare_tuples",
    "merge_boundary_sets",
]
