from dataclasses import dataclass, field
from typing import Optional

from .config import MatrixConfig
from .constants import ROWS_PATTERN, COLS_PATTERN, ENTRY_PATTERN, FormatReason
from .matrix_errors import MatrixFormatError, MatrixLoadError


@dataclass
class ParsedMatrix:
    rows: int
    cols: int
    entries: dict[tuple[int, int], int] = field(default_factory=dict)  # non-zero entries only
    source: Optional[str] = None  # file the matrix was read from, if any


def parse_matrix(text: str, config: Optional[MatrixConfig] = None, source: Optional[str] = None) -> ParsedMatrix:
    """Parse the textual matrix format.

    The first line carries ``rows=<n>`` and the second ``cols=<n>``. Every
    following non-blank line is one ``(row, col, value)`` entry. A repeated
    coordinate overwrites the earlier value and a zero value removes it.
    Lines are separated by ``\\n`` only; a trailing ``\\r`` is stripped.

    Args:
        text: Full file contents.
        config: MatrixConfig; with ``strict_bounds`` entries outside
            ``rows`` x ``cols`` are rejected.
        source: Name reported in errors, usually the file path.

    Returns:
        The parsed dimensions and non-zero entries.

    Raises:
        MatrixFormatError: If the header or any data line is malformed. Nothing
            is returned for a partially valid file.
    """
    config = config if config is not None else MatrixConfig()
    config.validate()

    lines = text.split('\n')
    if len(lines) < 2:
        raise MatrixFormatError(source, FormatReason.HEADER_MISSING)

    row_match = ROWS_PATTERN.search(lines[0])
    col_match = COLS_PATTERN.search(lines[1])
    if row_match is None or col_match is None:
        raise MatrixFormatError(source, FormatReason.HEADER_MISSING)

    dims = []
    for line_number, match in enumerate((row_match, col_match), start=1):
        try:
            dims.append(int(match.group(1)))
        except ValueError:
            # digit strings past the interpreter's int conversion limit
            raise MatrixFormatError(source, FormatReason.WRONG_FORMAT, line_number, lines[line_number - 1].strip())
    parsed = ParsedMatrix(rows=dims[0], cols=dims[1], source=source)

    for line_number, raw_line in enumerate(lines[2:], start=3):
        line = raw_line.strip()
        if not line:
            continue
        match = ENTRY_PATTERN.fullmatch(line)
        if match is None:
            raise MatrixFormatError(source, FormatReason.WRONG_FORMAT, line_number, line)

        try:
            row, col, value = (int(g) for g in match.groups())
        except ValueError:
            raise MatrixFormatError(source, FormatReason.WRONG_FORMAT, line_number, line)
        if config.strict_bounds and not (row < parsed.rows and col < parsed.cols):
            raise MatrixFormatError(source, FormatReason.OUT_OF_BOUNDS, line_number, line)

        if value == 0:
            parsed.entries.pop((row, col), None)
        else:
            parsed.entries[(row, col)] = value

    return parsed


def read_matrix_file(path, config: Optional[MatrixConfig] = None) -> ParsedMatrix:
    """Read and parse a matrix file.

    Raises:
        MatrixLoadError: If the file cannot be read, chained to the underlying error.
        MatrixFormatError: If the contents are malformed.
    """
    try:
        with open(path, 'r', encoding='utf-8', newline='') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise MatrixLoadError(path, e) from e

    return parse_matrix(text, config=config, source=str(path))
