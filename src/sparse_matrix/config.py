from dataclasses import dataclass

from .constants import DEFAULT_FIELD_WIDTH
from .matrix_errors import InvalidFieldWidthError


@dataclass(frozen=True)
class MatrixConfig:
    """
    Configuration for sparse matrix behaviour.

    This class controls coordinate bounds checking, how matrices are rendered
    as text, and how much the driver reports while it runs. Instances are
    frozen, so matrices produced from one another can share a config.
    """

    strict_bounds: bool = False
    """Whether get/set reject coordinates outside the matrix shape.
    - False: out-of-range reads return 0 and out-of-range writes are stored
    - True: both raise IndexOutOfBoundsError, and loading a file with an
      out-of-range entry fails
    """

    field_width: int = DEFAULT_FIELD_WIDTH
    """Width each rendered cell is right-justified to."""

    verbose: bool = False
    """Whether the driver prints per-step timings."""

    def validate(self) -> None:
        """Validate configuration parameters."""
        if isinstance(self.field_width, bool) or not isinstance(self.field_width, int) or self.field_width < 1:
            raise InvalidFieldWidthError(self.field_width)
