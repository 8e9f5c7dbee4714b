# grid_helper/grid_block_detector.py
"""
Grid Table Block Detector

Finds the line ranges of grid tables inside a larger text. A block starts at
a row separator line (+---+---+), extends over the following lines that start
with '|' or '+', and ends at the last row separator of that run. Every line of
the block must end with '|' or '+' and have the same width and indentation as
the first one.

The detector only decides where a table is. Whether the block is a
well-formed table is up to the parser.
"""
import logging
import re
from typing import List, Optional, Sequence

from xgen_gridtable.core.functions.table_extractor import TableRegion
from xgen_gridtable.core.processor.grid_helper.grid_constants import (
    CORNER,
    LEFT_EDGE_PATTERN,
    RIGHT_EDGE_PATTERN,
    ROW_SEPARATOR_PATTERN,
)

logger = logging.getLogger("document-processor")


class GridTableBlockDetector:
    """
    Locates grid table blocks in a list of text lines.

    Example:
        detector = GridTableBlockDetector()
        for region in detector.find_regions(lines):
            block = get_block_lines(lines, region)
    """

    def __init__(self):
        self._row_separator = re.compile(ROW_SEPARATOR_PATTERN)
        self._left_edge = re.compile(LEFT_EDGE_PATTERN)
        self._right_edge = re.compile(RIGHT_EDGE_PATTERN)

    def is_row_separator(self, line: str) -> bool:
        return bool(self._row_separator.match(line))

    def identify(self, lines: Sequence[str], start: int) -> Optional[TableRegion]:
        """
        Check whether a grid table starts at the given line.

        Args:
            lines: Document lines
            start: Index of the candidate first line

        Returns:
            TableRegion covering the block, or None
        """
        if start >= len(lines) or not self.is_row_separator(lines[start]):
            return None

        first = lines[start]
        width = len(first.strip())
        indent = len(first) - len(first.lstrip())

        current = start
        while current < len(lines) and self._has_left_edge(lines[current]):
            current += 1
        end = current - 1
        missing_bottom = False

        # Tables without a bottom line end at their last complete row
        if not self.is_row_separator(lines[end]):
            missing_bottom = True
            for i in range(end - 1, start, -1):
                if self.is_row_separator(lines[i]):
                    end = i
                    break
        if end == start:
            return None

        for i in range(start, end + 1):
            line = lines[i].rstrip()
            if not self._right_edge.search(line):
                logger.debug(f"Grid table candidate at line {start + 1}: line {i + 1} has no right edge")
                return None
            if len(line.strip()) != width or len(line) - len(line.lstrip()) != indent:
                logger.debug(f"Grid table candidate at line {start + 1}: line {i + 1} width mismatch")
                return None

        return TableRegion(
            start_line=start,
            end_line=end,
            indent=indent,
            width=width,
            col_count=first.strip().count(CORNER) - 1,
            missing_bottom=missing_bottom,
        )

    def find_regions(self, lines: Sequence[str]) -> List[TableRegion]:
        """Return all grid table regions of the document, in order."""
        regions = []
        i = 0
        while i < len(lines):
            region = self.identify(lines, i)
            if region is None:
                i += 1
                continue
            regions.append(region)
            i = region.end_line + 1
        return regions

    def _has_left_edge(self, line: str) -> bool:
        stripped = line.lstrip()
        return bool(stripped) and bool(self._left_edge.match(stripped))


def get_block_lines(lines: Sequence[str], region: TableRegion) -> List[str]:
    """Return the lines of a region without indentation or trailing whitespace."""
    return [line.strip() for line in lines[region.start_line:region.end_line + 1]]


def identify_grid_table(lines: Sequence[str], start: int) -> Optional[TableRegion]:
    """Check whether a grid table starts at lines[start]. See GridTableBlockDetector."""
    return GridTableBlockDetector().identify(lines, start)


def find_grid_table_regions(lines: Sequence[str]) -> List[TableRegion]:
    """Find every grid table region in the document lines."""
    return GridTableBlockDetector().find_regions(lines)


__all__ = [
    "GridTableBlockDetector",
    "get_block_lines",
    "identify_grid_table",
    "find_grid_table_regions",
]
