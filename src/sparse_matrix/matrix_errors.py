
class MatrixConfigError(ValueError):
    """Base class for matrix configuration errors."""
    pass

class MatrixRuntimeError(ValueError):
    """Base class for matrix runtime errors."""
    pass



class InvalidFieldWidthError(MatrixConfigError):
    """Raised when the rendering field width is not a positive integer."""

    def __init__(self, field_width):
        self.field_width = field_width
        message = f"field_width must be a positive integer, got {field_width!r}"
        super().__init__(message)


class MatrixLoadError(MatrixRuntimeError):
    """Raised when a matrix cannot be loaded from a file."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        message = f"Error loading matrix from file: {reason}"
        super().__init__(message)


class MatrixFormatError(MatrixLoadError):
    """Raised when a matrix file header or data line is malformed."""

    def __init__(self, path, reason: str, line_number: int = None, line: str = None):
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            reason = f"{reason} (line {line_number}: {line!r})"
        super().__init__(path, reason)


class DimensionMismatchError(MatrixRuntimeError):
    """Raised when operand shapes are incompatible for an arithmetic operation."""

    def __init__(self, operation: str, left_shape: tuple[int, int], right_shape: tuple[int, int]):
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape

        if operation == 'multiplication':
            message = ('Number of columns in the first matrix must be equal to the number of rows in the second matrix: '
                       f'{left_shape[1]} columns vs {right_shape[0]} rows')
        else:
            message = (f'Matrices must have the same dimensions for {operation}: '
                       f'{left_shape[0]}x{left_shape[1]} vs {right_shape[0]}x{right_shape[1]}')
        super().__init__(message)


class IndexOutOfBoundsError(MatrixRuntimeError):
    """Raised in strict mode when a coordinate falls outside the matrix shape."""

    def __init__(self, row: int, col: int, shape: tuple[int, int]):
        self.row = row
        self.col = col
        self.shape = shape
        message = f"Index ({row}, {col}) out of bounds for matrix of shape {shape[0]}x{shape[1]}"
        super().__init__(message)


class NonIntegerValueError(MatrixRuntimeError):
    """Raised when a value or index is not an integer."""

    def __init__(self, value, context: str = "value"):
        self.value = value
        self.context = context
        message = f"Sparse matrix {context} must be an integer, got {type(value).__name__}: {value!r}"
        super().__init__(message)
