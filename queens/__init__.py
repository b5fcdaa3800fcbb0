"""N-Queens placements where no three queens lie on one line."""

from .solver import UNPLACED, InvalidArgument, QueenSolver, prettify, twice_area

__all__ = [
    "UNPLACED",
    "InvalidArgument",
    "QueenSolver",
    "prettify",
    "twice_area",
]
