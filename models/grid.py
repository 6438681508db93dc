import numpy as np

from models.errors import OutOfRangeError, WrongSizeError

SIZE = 9
BOX = 3
CELLS = SIZE * SIZE
EMPTY = 0

DIGITS = np.arange(1, SIZE + 1)


def index(x, y):
    """Flat position of the cell in column x, row y"""
    return y * SIZE + x


def validate(values):
    """Check the board shape and cell range.

    Raises WrongSizeError when there are not exactly 81 cells and
    OutOfRangeError for the first cell outside 0-9. Repeated digits in a
    row, column or box are not looked at here.
    """
    if len(values) != CELLS:
        raise WrongSizeError(len(values))

    for i, value in enumerate(values):
        if value < EMPTY or value > SIZE:
            raise OutOfRangeError(i, value)


class Grid:
    """A 9x9 sudoku board stored row-major as 81 cells, 0 meaning empty"""

    def __init__(self, values):
        if isinstance(values, Grid):
            values = values.cells
        validate(values)
        self.cells = np.array(values, dtype=np.int8)

    def __len__(self):
        return CELLS

    def __getitem__(self, i):
        return int(self.cells[i])

    def __iter__(self):
        return iter(self.to_list())

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return np.array_equal(self.cells, other.cells)

    def __repr__(self):
        return f"Grid({self.to_list()!r})"

    def __str__(self):
        lines = []
        for y, row in enumerate(self.rows()):
            if y > 0 and y % BOX == 0:
                lines.append("---+---+---")
            line = ""
            for x, value in enumerate(row):
                if x > 0 and x % BOX == 0:
                    line += "|"
                line += str(value) if value != EMPTY else "."
            lines.append(line)
        return "\n".join(lines)

    def copy(self):
        return Grid(self.cells.copy())

    def to_list(self):
        return self.cells.tolist()

    def cell(self, x, y):
        return int(self.cells[index(x, y)])

    def rows(self):
        return self.cells.reshape(SIZE, SIZE)

    def columns(self):
        return self.rows().T

    def boxes(self):
        # Row b of the result holds box b, read left to right, top to bottom
        return (self.rows()
                .reshape(BOX, BOX, BOX, BOX)
                .transpose(0, 2, 1, 3)
                .reshape(SIZE, SIZE))

    def empty_count(self):
        return int(np.count_nonzero(self.cells == EMPTY))

    def is_complete(self):
        return self.empty_count() == 0

    def is_solved(self):
        """True when every row, column and box is a permutation of 1-9"""
        if not self.is_complete():
            return False
        units = np.concatenate([self.rows(), self.columns(), self.boxes()])
        return bool(np.all(np.sort(units, axis=1) == DIGITS))

    def duplicates(self):
        """List (unit, number, digit) for every digit fixed twice in one unit"""
        conflicts = []
        for unit, block in (("row", self.rows()),
                            ("column", self.columns()),
                            ("box", self.boxes())):
            for number, values in enumerate(block):
                counts = np.bincount(values, minlength=SIZE + 1)
                for digit in np.flatnonzero(counts[1:] > 1) + 1:
                    conflicts.append((unit, number, int(digit)))
        return conflicts
