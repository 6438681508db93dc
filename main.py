"""Read a sudoku board as JSON from stdin and write the solved board to stdout.

The board is a flat JSON array of 81 integers, row by row, with 0 for an
empty cell. On any error a single line is written to stderr, nothing is
written to stdout and the exit status is 1.
"""
import logging
import sys

from models.errors import SudokuError
from models.grid import Grid
from models.sudoku_solver import SudokuSolver
from utils.json_io import decode_grid, encode_grid, read_input

log = logging.getLogger(__name__)


class SudokuApp:
    def __init__(self, stdin=None, stdout=None, stderr=None, solver=None,
                 log_level=logging.WARNING):
        self.stdin = stdin if stdin is not None else sys.stdin.buffer
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self.sudoku_solver = solver if solver is not None else SudokuSolver()
        self.log_level = log_level

    def run(self):
        """Solve the board on stdin, return the process exit status"""
        root = logging.getLogger()
        previous_level = root.level
        handler = logging.StreamHandler(self.stderr)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        root.addHandler(handler)
        root.setLevel(self.log_level)

        try:
            result = self.process(self.stdin)
        except SudokuError as e:
            print(f"Error: {e}", file=self.stderr)
            return 1
        finally:
            root.removeHandler(handler)
            root.setLevel(previous_level)

        print(result, file=self.stdout)
        return 0

    def process(self, stream):
        """read -> decode -> validate -> solve -> encode, raising SudokuError"""
        data = read_input(stream)
        values = decode_grid(data)
        grid = Grid(values)
        log.debug("Puzzle:\n%s", grid)

        solution = self.sudoku_solver.solve_or_raise(grid)
        log.debug("Solution:\n%s", solution)

        return encode_grid(solution)


def main():
    sys.exit(SudokuApp().run())


if __name__ == "__main__":
    main()
