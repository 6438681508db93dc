import json
import logging

from models.errors import DecodeError, EmptyInputError, EncodeError, InputReadError

log = logging.getLogger(__name__)


def read_input(stream):
    """Read the whole binary stream, failing on empty input"""
    try:
        data = stream.read()
    except OSError as e:
        raise InputReadError(f"Could not read input: {e}") from e

    if not data:
        raise EmptyInputError()

    log.debug("Read %d bytes", len(data))
    return data


def decode_grid(data):
    """Decode a JSON array of integers.

    Size and value range are left to models.grid.validate; this only
    guarantees a flat list of Python ints.
    """
    try:
        values = json.loads(data)
    except ValueError as e:
        raise DecodeError(f"Invalid JSON: {e}") from e

    if not isinstance(values, list):
        raise DecodeError(
            f"Expected a JSON array of integers, got {type(values).__name__}")

    for i, value in enumerate(values):
        # bool is an int subclass, but true/false are not cell values
        if isinstance(value, bool) or not isinstance(value, int):
            raise DecodeError(
                f"Element at position {i} is not an integer: {value!r}")

    return values


def encode_grid(grid):
    """Compact JSON array for a solved grid, e.g. [5,3,4,...]"""
    try:
        return json.dumps(list(grid), separators=(",", ":"))
    except (TypeError, ValueError) as e:
        raise EncodeError(f"Could not encode board: {e}") from e
