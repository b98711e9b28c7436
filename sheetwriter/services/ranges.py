"""A1 range grammar accepted by the write endpoint."""

import re
from enum import Enum

from sheetwriter.exceptions import RangeFormatError
from sheetwriter.models.common import InvalidRangeResponse

_CELL_PATTERN = re.compile(r"[A-Za-z]+\d+(?::[A-Za-z]+\d+)?")
_SHEET_CELL_PATTERN = re.compile(r"[^!]+![A-Za-z]+\d+(?::[A-Za-z]+\d+)?")
_SHEET_PATTERN = re.compile(r"[^!]+")
_ROW_NUMBER_PATTERN = re.compile(r"\d+")

RANGE_EXAMPLES = [
    "A1 - Single cell",
    "B5 - Single cell",
    "A1:B10 - Range of cells",
    "Sheet1!A1 - Specific sheet and cell",
    "Tasks - Sheet name (for append mode)",
    'Data!A1 - Sheet named "Data"',
]


class RangeShape(str, Enum):
    CELL = "cell"
    SHEET_CELL = "sheet_cell"
    SHEET = "sheet"


def classify_range(range: str) -> RangeShape | None:
    """Return which accepted shape the expression has, or None.

    A bare cell reference is also a valid sheet name, so CELL is tried first.
    """
    if _CELL_PATTERN.fullmatch(range):
        return RangeShape.CELL
    if _SHEET_CELL_PATTERN.fullmatch(range):
        return RangeShape.SHEET_CELL
    if _SHEET_PATTERN.fullmatch(range):
        return RangeShape.SHEET
    return None


def validate_range(range: str, sheet_names: list[str]) -> RangeShape:
    shape = classify_range(range)
    if shape is None:
        raise RangeFormatError(InvalidRangeResponse(
            message="Invalid range format",
            help='Use A1 notation like "A1", "B5", "A1:B10", "Sheet1!A1", or just "Sheet1" for append mode',
            examples=RANGE_EXAMPLES,
            available_sheets=sheet_names,
        ))
    return shape


def append_target(range: str) -> str:
    """Appending works on a whole sheet, so keep only the part before '!'."""
    if "!" in range:
        return range.split("!", 1)[0]
    return range


def insert_row_number(range: str) -> int:
    """First integer anywhere in the expression, as a 1-based row number (default 1).

    Digits inside a sheet name count too: "Sheet2!B7" yields 2.
    """
    match = _ROW_NUMBER_PATTERN.search(range)
    return int(match.group()) if match else 1
