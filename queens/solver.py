from itertools import combinations
import sys

from loguru import logger

UNPLACED = -1


class InvalidArgument(ValueError):
    """Raised for board sizes, limits or placements the solver cannot use."""


def twice_area(p1: tuple[int, int], p2: tuple[int, int], p3: tuple[int, int]) -> int:
    """
    Twice the signed area of the triangle p1, p2, p3.

    Zero means the three points are collinear. Integer points only, so the
    result is exact.

    Examples:
        >>> twice_area((0, 0), (1, 2), (2, 4))
        0
        >>> twice_area((0, 1), (1, 3), (2, 0))
        -5
    """
    x1, y1 = p1
    x2, y2 = p2
    x3, y3 = p3
    return x1 * (y2 - y3) + x2 * (y3 - y1) + x3 * (y1 - y2)


def prettify(placement, queen: str = "Q", empty: str = "#") -> str:
    """
    Convert a complete placement into a human-readable board string.

    Args:
        placement (list[int]): placement[row] = column of the queen in that row.
        queen (str): Marker for a queen.
        empty (str): Marker for an empty square.

    Returns:
        str: Multi-line string, one line per row.

    Examples:
        >>> print(prettify([1, 3, 0, 2]))
        #Q##
        ###Q
        Q###
        ##Q#
    """
    n = len(placement)
    if any(not 0 <= col < n for col in placement):
        raise InvalidArgument(f"Not a complete placement: {list(placement)}")

    rows = []
    for col in placement:
        cells = [empty] * n
        cells[col] = queen
        rows.append("".join(cells))
    return "\n".join(rows)


class QueenSolver:
    """
    N-Queens solver with the extra rule that no three queens share a line.

    Lines are taken at any angle, so queens on (0, 0), (1, 2) and (2, 4)
    do not attack each other but are still rejected.

    Each level of the search tree is a row of the board. The partial
    placement and the two diagonal trackers are copied for every accepted
    branch, so sibling branches never see each other's queens.
    """

    def __init__(self, size: int):
        """
        Initialize a solver for a size x size board.

        Args:
            size (int): Board dimension, must be positive.
        """
        if isinstance(size, bool) or not isinstance(size, int):
            raise InvalidArgument(f"The size must be an integer, got {size!r}")
        if size <= 0:
            raise InvalidArgument("The size must be greater than 0")

        self.size = size
        self._solutions = []
        self._limit = None

    @property
    def solutions(self) -> tuple[tuple[int, ...], ...]:
        """Solutions found by the last launch, in enumeration order."""
        return tuple(self._solutions)

    def count(self) -> int:
        """Number of solutions found by the last launch."""
        return len(self._solutions)

    def empty_state(self) -> tuple[list[int], list[bool], list[bool]]:
        """Return an unplaced board and two cleared diagonal trackers."""
        diagonals = 2 * self.size - 1
        return [UNPLACED] * self.size, [False] * diagonals, [False] * diagonals

    def launch(self, limit: int | None = None) -> None:
        """
        Run the search from row 0 and collect every solution.

        Launching again discards the previous results first.

        Args:
            limit (int | None): Stop after this many solutions.
        """
        if limit is not None and limit <= 0:
            raise InvalidArgument("The limit must be greater than 0")

        self._solutions = []
        self._limit = limit
        logger.debug("Searching {n}x{n} board (limit={limit})", n=self.size, limit=limit)
        self._search(0, *self.empty_state())
        logger.info("{n}-Queens without three in line: {count} solutions",
                    n=self.size, count=self.count())

    def _search(self, row: int, placement: list[int],
                diag_down: list[bool], diag_up: list[bool]) -> None:
        if self._limit is not None and len(self._solutions) >= self._limit:
            return

        # Base case: every row holds a queen
        if row == self.size:
            self._solutions.append(tuple(placement))
            return

        for col in range(self.size):
            if not self.is_valid(row, col, placement, diag_down, diag_up):
                continue

            new_placement = list(placement)
            new_placement[row] = col
            new_diag_down = list(diag_down)
            new_diag_down[row - col + self.size - 1] = True
            new_diag_up = list(diag_up)
            new_diag_up[row + col] = True

            self._search(row + 1, new_placement, new_diag_down, new_diag_up)

    def is_valid(self, row: int, col: int, placement: list[int],
                 diag_down: list[bool], diag_up: list[bool]) -> bool:
        """
        Check whether a queen can go on (row, col).

        Rows 0..row-1 of `placement` must already hold queens, and the
        trackers must mark exactly their diagonals. The candidate queen is
        never written into `placement`.

        Rules checked:
          - no earlier queen in the same column
          - no earlier queen on either diagonal
          - from the third queen on, no three queens on one line

        Args:
            row (int): Row of the candidate queen.
            col (int): Column of the candidate queen.
            placement (list[int]): placement[row] = column, or -1 if unplaced.
            diag_down (list[bool]): Occupied diagonals, index row - col + size - 1.
            diag_up (list[bool]): Occupied anti-diagonals, index row + col.

        Returns:
            bool: True if the candidate breaks none of the rules.

        Examples:
            >>> solver = QueenSolver(4)
            >>> placement, down, up = solver.empty_state()
            >>> placement[:2] = [1, 3]
            >>> down[2] = down[1] = up[1] = up[4] = True
            >>> solver.is_valid(2, 3, placement, down, up)
            False
            >>> solver.is_valid(2, 0, placement, down, up)
            True
        """
        assert 0 <= row < self.size, f"row {row} outside board of size {self.size}"
        assert 0 <= col < self.size, f"col {col} outside board of size {self.size}"

        if col in placement[:row]:
            return False

        if diag_down[row - col + self.size - 1] or diag_up[row + col]:
            return False

        if row >= 2:
            points = [(placement[r], r) for r in range(row)]
            points.append((col, row))
            for p1, p2, p3 in combinations(points, 3):
                if twice_area(p1, p2, p3) == 0:
                    return False

        return True

    def print_solutions(self, file=None) -> None:
        """Print every solution as a board, each followed by a blank line."""
        file = file or sys.stdout
        for solution in self._solutions:
            print(prettify(solution), end="\n\n", file=file)

    def __str__(self) -> str:
        return f"{self.size}-Queens without three in line has {self.count()} solutions"
