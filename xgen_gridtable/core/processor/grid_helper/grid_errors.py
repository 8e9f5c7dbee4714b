# grid_helper/grid_errors.py
"""
Grid Table Errors

Every problem found while parsing a grid table is reported as a
MalformedTableError. Callers catch it and keep the block as literal text.
"""
from typing import Optional, Tuple


class MalformedTableError(ValueError):
    """
    Raised when a text block cannot be parsed as a grid table.

    Attributes:
        reason: Human-readable description of the problem
        position: Offending coordinates (line, column) if known
    """

    def __init__(self, reason: str, position: Optional[Tuple[int, ...]] = None):
        super().__init__(reason)
        self.reason = reason
        self.position = position


class DuplicateCellError(MalformedTableError):
    """A cell slot of the table was claimed by more than one traced cell."""


class IncomparableTuplesError(MalformedTableError):
    """Two corner tuples of different length were compared."""


__all__ = [
    "MalformedTableError",
    "DuplicateCellError",
    "IncomparableTuplesError",
]
