import sys
import numpy as np
from collections import defaultdict
from typing import Iterable, Mapping, Optional, Union

from .config import MatrixConfig
from .constants import Operation
from .matrix_errors import DimensionMismatchError, IndexOutOfBoundsError, NonIntegerValueError
from .matrix_io import read_matrix_file


def _as_int(value, context: str = "value") -> int:
    # numpy integer scalars are accepted and stored as plain ints
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise NonIntegerValueError(value, context)
    return int(value)


class SparseMatrix:
    """
    Integer matrix that stores only its non-zero entries.

    Entries live in ``data_store``, a dict keyed by ``(row, col)`` tuples. A
    missing key reads as 0 and storing 0 removes the key, so the dict never
    holds a zero. Arithmetic never modifies an operand; every operation
    returns a new matrix that owns its own entries.
    """

    def __init__(self, rows: int, cols: int, config: Optional[MatrixConfig] = None):
        """
        Initialize an empty matrix.

        Args:
            rows: Number of rows. Not validated.
            cols: Number of columns. Not validated.
            config: MatrixConfig controlling bounds checking and rendering.
        """
        self._rows = _as_int(rows, "row count")
        self._cols = _as_int(cols, "column count")
        self.config = config if config is not None else MatrixConfig()
        self.config.validate()
        self.data_store: dict[tuple[int, int], int] = {}

    @property
    def rows(self) -> int:
        """Number of rows, fixed at construction."""
        return self._rows

    @property
    def cols(self) -> int:
        """Number of columns, fixed at construction."""
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        """The (rows, cols) pair."""
        return self._rows, self._cols

    # ************************************
    # construction helpers
    # ************************************
    @classmethod
    def from_file(cls, path, config: Optional[MatrixConfig] = None) -> 'SparseMatrix':
        """Load a matrix from a ``rows=/cols=/(row, col, value)`` text file.

        Raises:
            MatrixFormatError: If the header or a data line is malformed.
            MatrixLoadError: If the file cannot be read.
        """
        config = config if config is not None else MatrixConfig()
        parsed = read_matrix_file(path, config)
        result = cls(parsed.rows, parsed.cols, config)
        result.data_store.update(parsed.entries)
        return result

    @classmethod
    def from_entries(cls, rows: int, cols: int,
                     entries: Union[Mapping[tuple[int, int], int], Iterable[tuple[int, int, int]]],
                     config: Optional[MatrixConfig] = None) -> 'SparseMatrix':
        """Build a matrix from a ``{(row, col): value}`` mapping or ``(row, col, value)`` triples."""
        result = cls(rows, cols, config)
        if isinstance(entries, Mapping):
            entries = ((i, j, v) for (i, j), v in entries.items())
        for i, j, v in entries:
            result.set_element(i, j, v)
        return result

    @classmethod
    def zeros(cls, rows: int, cols: int, config: Optional[MatrixConfig] = None) -> 'SparseMatrix':
        """Returns an all-zero matrix of the given shape."""
        return cls(rows, cols, config)

    @classmethod
    def identity(cls, size: int, config: Optional[MatrixConfig] = None) -> 'SparseMatrix':
        """Returns the size x size identity matrix."""
        result = cls(size, size, config)
        for i in range(size):
            result.data_store[(i, i)] = 1
        return result

    # ************************************
    # element access
    # ************************************
    def _key(self, row, col) -> tuple[int, int]:
        i = _as_int(row, "row index")
        j = _as_int(col, "column index")
        if self.config.strict_bounds and not (0 <= i < self._rows and 0 <= j < self._cols):
            raise IndexOutOfBoundsError(i, j, self.shape)
        return i, j

    def _put(self, key: tuple[int, int], value: int) -> None:
        if value == 0:
            self.data_store.pop(key, None)
        else:
            self.data_store[key] = value

    def get_element(self, row: int, col: int) -> int:
        """Get the value at position (row, col), or 0 if nothing is stored there."""
        return self.data_store.get(self._key(row, col), 0)

    def set_element(self, row: int, col: int, value: int) -> None:
        """Set the value at position (row, col). Setting 0 removes the entry."""
        self._put(self._key(row, col), _as_int(value))

    def _split_key(self, key) -> tuple[int, int]:
        if isinstance(key, tuple) and len(key) == 2:
            return key
        raise KeyError("SparseMatrix indices must be a tuple of length 2")

    def __getitem__(self, key) -> int:
        return self.get_element(*self._split_key(key))

    def __setitem__(self, key, value: int) -> None:
        self.set_element(*self._split_key(key), value)

    def __delitem__(self, key) -> None:
        self.data_store.pop(self._key(*self._split_key(key)), None)

    def __contains__(self, key) -> bool:
        """Checks whether a non-zero value is stored at position (i, j)."""
        if isinstance(key, tuple) and len(key) == 2:
            return key in self.data_store
        return False

    def __len__(self) -> int:
        """Returns the number of non-zero elements."""
        return len(self.data_store)

    def __iter__(self):
        """Allows iteration over the position tuples with non-zero values."""
        return iter(self.data_store.keys())

    def keys(self):
        """Returns the keys (position tuples) of non-zero elements."""
        return self.data_store.keys()

    def values(self):
        """Returns the values of non-zero elements."""
        return self.data_store.values()

    def items(self) -> list[tuple[tuple[int, int], int]]:
        """Returns the ((row, col), value) pairs of non-zero elements in coordinate order."""
        return sorted(self.data_store.items())

    def clear(self) -> None:
        """Removes all elements from the matrix."""
        self.data_store.clear()

    def copy(self) -> 'SparseMatrix':
        """Returns a copy of the matrix with its own entry store."""
        result = type(self)(self._rows, self._cols, self.config)
        result.data_store = self.data_store.copy()
        return result

    # ************************************
    # arithmetic
    # ************************************
    def _check_same_shape(self, other: 'SparseMatrix', operation: str) -> None:
        if self._rows != other.rows or self._cols != other.cols:
            raise DimensionMismatchError(operation, self.shape, other.shape)

    def add(self, other: 'SparseMatrix') -> 'SparseMatrix':
        """Returns self + other as a new matrix.

        Raises:
            DimensionMismatchError: If the shapes differ.
        """
        self._check_same_shape(other, Operation.ADD)
        result = type(self)(self._rows, self._cols, self.config)
        for key in self.data_store.keys() | other.data_store.keys():
            result._put(key, self.data_store.get(key, 0) + other.data_store.get(key, 0))
        return result

    def subtract(self, other: 'SparseMatrix') -> 'SparseMatrix':
        """Returns self - other as a new matrix.

        Raises:
            DimensionMismatchError: If the shapes differ.
        """
        self._check_same_shape(other, Operation.SUBTRACT)
        result = type(self)(self._rows, self._cols, self.config)
        for key in self.data_store.keys() | other.data_store.keys():
            result._put(key, self.data_store.get(key, 0) - other.data_store.get(key, 0))
        return result

    def multiply(self, other: 'SparseMatrix') -> 'SparseMatrix':
        """Returns the matrix product self x other as a new matrix.

        The right operand is indexed by row so each non-zero (r1, k) of self
        only meets the non-zeros of row k in other. Products are summed per
        output cell and a cell is kept only if its final sum is non-zero.

        Raises:
            DimensionMismatchError: If self.cols != other.rows.
        """
        if self._cols != other.rows:
            raise DimensionMismatchError(Operation.MULTIPLY, self.shape, other.shape)

        other_by_row = defaultdict(list)
        for (r2, c2), v2 in other.data_store.items():
            other_by_row[r2].append((c2, v2))

        sums = defaultdict(int)
        for (r1, c1), v1 in self.data_store.items():
            for c2, v2 in other_by_row.get(c1, ()):
                sums[(r1, c2)] += v1 * v2

        result = type(self)(self._rows, other.cols, self.config)
        for key, v in sums.items():
            result._put(key, v)
        return result

    def transpose(self) -> 'SparseMatrix':
        """Returns a new matrix with rows and columns swapped."""
        result = type(self)(self._cols, self._rows, self.config)
        result.data_store = {(j, i): v for (i, j), v in self.data_store.items()}
        return result

    def density(self) -> float:
        """Percentage of cells holding a non-zero value, 0 for an empty shape."""
        total = self._rows * self._cols
        return len(self.data_store) / total * 100 if total > 0 else 0.0

    def __add__(self, other):
        """Adds another SparseMatrix, returning a new matrix. See add."""
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        """Subtracts another SparseMatrix, returning a new matrix. See subtract."""
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        return self.subtract(other)

    def __matmul__(self, other):
        """Matrix product with another SparseMatrix. See multiply."""
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        return self.multiply(other)

    def __eq__(self, other) -> bool:
        """Matrices are equal when their shapes and non-zero entries match."""
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        return self.shape == other.shape and self.data_store == other.data_store

    # ************************************
    # rendering
    # ************************************
    def format(self) -> str:
        """Render every cell, zeros included, one line per row.

        Each cell is the value followed by a space, right-justified to
        ``config.field_width``.
        """
        width = self.config.field_width
        lines = []
        for i in range(self._rows):
            lines.append("".join(f"{self.data_store.get((i, j), 0)} ".rjust(width) for j in range(self._cols)))
        return "\n".join(lines)

    def print(self, file=None) -> None:
        file = file if file is not None else sys.stdout
        print(f"Matrix ({self._rows}x{self._cols}):", file=file)
        if self._rows > 0:
            print(self.format(), file=file)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        items_str = ", ".join(f"{k}: {v}" for k, v in self.items())
        return f"SparseMatrix({self._rows}x{self._cols}, {{{items_str}}})"
