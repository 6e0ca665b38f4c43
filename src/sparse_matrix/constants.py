import re

DEFAULT_FIELD_WIDTH = 8  # rendered cell width, trailing space included

ROWS_PATTERN = re.compile(r'rows=(\d+)', re.ASCII)
COLS_PATTERN = re.compile(r'cols=(\d+)', re.ASCII)
ENTRY_PATTERN = re.compile(r'\((\d+),\s*(\d+),\s*(-?\d+)\)', re.ASCII)

class FormatReason:
    HEADER_MISSING = "rows or cols not found"
    WRONG_FORMAT = "Input file has wrong format"
    OUT_OF_BOUNDS = "entry out of bounds"

class Operation:
    ADD = "addition"
    SUBTRACT = "subtraction"
    MULTIPLY = "multiplication"
