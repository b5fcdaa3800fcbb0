from itertools import combinations

from ..solver import UNPLACED, twice_area


class Board:
    """
    Read-only view of a placement for display.
    Renders queens as text or as an HTML table.
    """

    def __init__(self, placement, queen="Q", empty="#"):
        """
        Args:
            placement (list[int]): placement[row] = column, or -1 if unplaced.
            queen (str): Marker for a queen.
            empty (str): Marker for an empty square.
        """
        self.n = len(placement)
        self.__placement = tuple(placement)
        self.symbols = {True: queen, False: empty}

    @property
    def placement(self):
        """
        Get the wrapped placement.

        Returns:
            tuple[int]: placement[row] = column of the queen.
        """
        return self.__placement

    def queens(self):
        """
        List the placed queens.

        Returns:
            list[tuple[int, int]]: (row, col) for every placed queen.
        """
        return [(row, col) for row, col in enumerate(self.__placement) if col != UNPLACED]

    def cell(self, row, col):
        return self.symbols[self.__placement[row] == col]

    def html(self):
        """
        Generate an HTML table representing the board.

        Returns:
            str: HTML markup string.
        """
        board_str = "<table>"
        for i in range(self.n):
            board_str += "<tr>"
            for c in range(self.n):
                board_str += f"<td id='{i}_{c}'>" + self.cell(i, c) + "</td>"
            board_str += "</tr>"
        board_str += "</table>"
        return board_str

    def __str__(self):
        """
        Return a printable ASCII version of the board.

        Returns:
            str: Multi-line text grid representing the board.
        """
        board_str = ""
        for i in range(self.n):
            for c in range(self.n):
                board_str += self.cell(i, c)
                board_str += "|" if c < self.n - 1 else "\n"
            if i < self.n - 1:
                board_str += "-" * (2 * self.n - 1) + "\n"
        return board_str


def find_violations(placement):
    """
    Describe every rule a placement breaks.

    Args:
        placement (list[int]): placement[row] = column of the queen.

    Returns:
        list[str]: One message per problem, empty if the placement is a solution.
    """
    n = len(placement)
    violations = []
    seen_cols, seen_diag1, seen_diag2 = {}, {}, {}
    points = []

    for row, col in enumerate(placement):
        if col == UNPLACED:
            violations.append(f"row {row} has no queen")
            continue
        if not 0 <= col < n:
            violations.append(f"row {row}: column {col} is off the board")
            continue

        if col in seen_cols:
            violations.append(f"rows {seen_cols[col]} and {row} share column {col}")
        if (row - col) in seen_diag1:
            violations.append(f"rows {seen_diag1[row - col]} and {row} share a diagonal")
        if (row + col) in seen_diag2:
            violations.append(f"rows {seen_diag2[row + col]} and {row} share an anti-diagonal")

        seen_cols.setdefault(col, row)
        seen_diag1.setdefault(row - col, row)
        seen_diag2.setdefault(row + col, row)
        points.append((col, row))

    for p1, p2, p3 in combinations(points, 3):
        if twice_area(p1, p2, p3) == 0:
            rows = ", ".join(str(y) for _, y in (p1, p2, p3))
            violations.append(f"rows {rows} are in line")

    return violations


def validate_solution(placement):
    """
    Validate whether a placement is a full solution.

    Args:
        placement (list[int]): placement[row] = column of the queen.

    Returns:
        bool: True if valid, False otherwise.
    """
    return len(placement) > 0 and not find_violations(placement)
