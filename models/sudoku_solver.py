import logging

from models.errors import DuplicateDigitError, SudokuError, UnsolvableError
from models.grid import BOX, CELLS, EMPTY, SIZE, Grid, index

log = logging.getLogger(__name__)


class SudokuSolver:
    def __init__(self):
        # Statistics of the last search
        self.placements = 0
        self.backtracks = 0

    def check(self, grid, value, x, y):
        """Check if placing value at column x, row y is valid"""
        # Check row
        for col in range(SIZE):
            if col != x and grid[index(col, y)] == value:
                return False

        # Check column
        for row in range(SIZE):
            if row != y and grid[index(x, row)] == value:
                return False

        # Check 3x3 box
        start_row = (y // BOX) * BOX
        start_col = (x // BOX) * BOX

        for row in range(start_row, start_row + BOX):
            for col in range(start_col, start_col + BOX):
                if (row != y or col != x) and grid[index(col, row)] == value:
                    return False

        return True

    def solve(self, grid):
        """Solve Sudoku using backtracking, None if it cannot be solved"""
        try:
            return self.solve_or_raise(grid)
        except (SudokuError, TypeError) as e:
            log.debug("No solution: %s", e)
            return None

    def solve_or_raise(self, grid):
        """Like solve(), but raise the reason a board has no solution"""
        # Validates, and keeps the caller's grid untouched
        grid = Grid(grid)

        conflicts = grid.duplicates()
        if conflicts:
            raise DuplicateDigitError(conflicts)

        self.placements = 0
        self.backtracks = 0
        board = grid.to_list()
        log.debug("Searching %d empty cells", grid.empty_count())

        if not self._backtrack(board, 0):
            log.debug("Search exhausted after %d placements", self.placements)
            raise UnsolvableError()

        log.debug("Solved with %d placements, %d backtracks",
                  self.placements, self.backtracks)
        return Grid(board)

    def _backtrack(self, board, position):
        """Recursive helper, fills cells in row-major order from position"""
        if position == CELLS:
            return True

        # Skip positions with existing data
        if board[position] != EMPTY:
            return self._backtrack(board, position + 1)

        y, x = divmod(position, SIZE)
        for num in range(1, SIZE + 1):
            if self.check(board, num, x, y):
                board[position] = num
                self.placements += 1

                if self._backtrack(board, position + 1):
                    return True

                board[position] = EMPTY  # Backtrack
                self.backtracks += 1

        return False

    def is_valid_sudoku(self, grid):
        """Check that no fixed digit repeats within a row, column or box"""
        return not Grid(grid).duplicates()
