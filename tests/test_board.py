from queens import UNPLACED
from queens.helpers.board import Board, find_violations, validate_solution


def test_text_board():
    board = Board([1, 3, 0, 2])
    assert str(board) == (
        "#|Q|#|#\n-------\n"
        "#|#|#|Q\n-------\n"
        "Q|#|#|#\n-------\n"
        "#|#|Q|#\n"
    )


def test_html_board():
    assert Board([0]).html() == "<table><tr><td id='0_0'>Q</td></tr></table>"

    html = Board([1, 3, 0, 2], queen="*", empty=".").html()
    assert html.count("<tr>") == 4
    assert "<td id='0_1'>*</td>" in html
    assert "<td id='0_0'>.</td>" in html


def test_queens_skip_unplaced_rows():
    board = Board([2, UNPLACED, 0])
    assert board.queens() == [(0, 2), (2, 0)]
    assert board.placement == (2, UNPLACED, 0)


def test_solution_has_no_violations():
    assert find_violations([1, 3, 0, 2]) == []
    assert validate_solution([1, 3, 0, 2])
    assert validate_solution([0])


def test_empty_placement_is_not_a_solution():
    assert not validate_solution([])


def test_column_and_diagonal_clashes():
    assert find_violations([0, 0]) == ["rows 0 and 1 share column 0"]
    assert find_violations([0, 1]) == ["rows 0 and 1 share a diagonal"]
    assert find_violations([1, 0]) == ["rows 0 and 1 share an anti-diagonal"]


def test_unplaced_and_off_board_rows():
    assert find_violations([0, UNPLACED]) == ["row 1 has no queen"]
    assert find_violations([0, 5]) == ["row 1: column 5 is off the board"]


def test_classic_solution_with_queens_in_line():
    # A valid 5-Queens answer, but (0, 0), (1, 2) and (2, 4) are in line
    violations = find_violations([0, 2, 4, 1, 3])
    assert "rows 0, 1, 2 are in line" in violations
    assert not any("share" in v for v in violations)
    assert not validate_solution([0, 2, 4, 1, 3])
