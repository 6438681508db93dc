class SudokuError(Exception):
    """Base class for every failure of the solve pass"""


class InputReadError(SudokuError):
    pass


class EmptyInputError(SudokuError):
    def __init__(self):
        super().__init__("No input")


class DecodeError(SudokuError):
    pass


class WrongSizeError(SudokuError):
    def __init__(self, size):
        super().__init__(f"Board is not 9x9 (got {size} cells, expected 81)")
        self.size = size


class OutOfRangeError(SudokuError):
    def __init__(self, index, value):
        super().__init__(
            f"Cell value {value!r} is not between 0 and 9 at position: {index}")
        self.index = index
        self.value = value


class UnsolvableError(SudokuError):
    def __init__(self, message="Puzzle has no solution"):
        super().__init__(message)


class DuplicateDigitError(UnsolvableError):
    def __init__(self, conflicts):
        # conflicts: list of (unit, number, digit), e.g. ("row", 0, 5)
        details = ", ".join(f"{digit} in {unit} {number}"
                            for unit, number, digit in conflicts)
        super().__init__(f"Puzzle has duplicate digits: {details}")
        self.conflicts = conflicts


class EncodeError(SudokuError):
    pass
