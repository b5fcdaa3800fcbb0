import sys

from .solver import QueenSolver


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    size = int(argv[0]) if argv else 4

    solver = QueenSolver(size)
    solver.launch()
    solver.print_solutions()
    print(f"Solutions found: {solver.count()}")


if __name__ == "__main__":
    main()
