from functools import lru_cache

from flask import Flask, jsonify, request
from loguru import logger

from . import config
from .helpers.board import Board, find_violations, validate_solution
from .solver import InvalidArgument, QueenSolver

app = Flask(__name__)


# ---------------- Solver Helpers ---------------- #

@lru_cache(maxsize=32)
def load_solutions(size, limit=None):
    """Solve a board once per (size, limit) and keep the result."""
    if size > config.MAX_BOARD_SIZE:
        raise InvalidArgument(f"Board size {size} is above the limit of {config.MAX_BOARD_SIZE}")

    solver = QueenSolver(size)
    solver.launch(limit=limit)
    return solver.solutions


def parse_placement(data):
    """Pull a list of integer columns out of a request body."""
    placement = data.get("placement")
    if not isinstance(placement, list):
        raise InvalidArgument("Expected a 'placement' list")
    if any(isinstance(col, bool) or not isinstance(col, int) for col in placement):
        raise InvalidArgument("Placement entries must be integers")
    return placement


@app.errorhandler(InvalidArgument)
def invalid_argument(error):
    logger.warning("Rejected {method} {path}: {error}",
                   method=request.method, path=request.path, error=error)
    return jsonify({"error": str(error)}), 400


# ---------------- Routes ---------------- #

@app.route("/solve/<int:size>")
def solve(size):
    limit = request.args.get("limit", type=int)
    solutions = load_solutions(size, limit)
    return jsonify({
        "size": size,
        "count": len(solutions),
        "solutions": [list(s) for s in solutions],
    })


@app.route("/solve/<int:size>/<int:index>")
def show_solution(size, index):
    solutions = load_solutions(size)
    if index >= len(solutions):
        return jsonify({"error": f"Solution {index} not found for size {size}"}), 404

    board = Board(solutions[index])
    if request.args.get("format") == "text":
        return str(board), 200, {"Content-Type": "text/plain; charset=utf-8"}
    return board.html()


@app.route("/validate", methods=["POST"])
def validate():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidArgument("Expected a JSON object")

    placement = parse_placement(data)
    return jsonify({
        "valid": validate_solution(placement),
        "violations": find_violations(placement),
    })


if __name__ == "__main__":
    app.run(debug=config.DEBUG, port=config.PORT)
