import argparse
import os
import sys
import time
from typing import Optional

from .config import MatrixConfig
from .constants import Operation
from .matrix_errors import MatrixLoadError, MatrixRuntimeError
from .sparse_matrix import SparseMatrix


DEFAULT_INPUTS = (os.path.join('sample_inputs', 'matrixfile1.txt'),
                  os.path.join('sample_inputs', 'matrixfile3.txt'))

# (operation, header symbol, error label, method name)
OPERATIONS = [
    (Operation.ADD, '+', 'Addition', 'add'),
    (Operation.SUBTRACT, '-', 'Subtraction', 'subtract'),
    (Operation.MULTIPLY, '*', 'Multiplication', 'multiply'),
]


def run_operations(path_a: str, path_b: str, config: Optional[MatrixConfig] = None,
                   out=None, err=None) -> dict[str, object]:
    """
    Load two matrices, print them, then print the sum, difference and product.

    Each operation is attempted independently: a DimensionMismatchError in one
    is printed and the remaining operations still run.

    Args:
        path_a: File for the left operand.
        path_b: File for the right operand.
        config: MatrixConfig applied to both matrices.
        out: Stream for results, stdout by default.
        err: Stream for errors, stderr by default.

    Returns:
        Mapping from operation name to the result matrix or the error it raised.

    Raises:
        MatrixLoadError: If either file cannot be loaded.
    """
    config = config if config is not None else MatrixConfig()
    config.validate()
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr
    name_a, name_b = os.path.basename(path_a), os.path.basename(path_b)

    print("Loading matrices...", file=out)
    st = time.time()
    try:
        matrix_a = SparseMatrix.from_file(path_a, config)
        matrix_b = SparseMatrix.from_file(path_b, config)
    except MatrixLoadError as e:
        print(f"Error: {e}", file=err)
        raise
    if config.verbose:
        print(f"  took: {time.time() - st} seconds", file=out)

    print(f"\nMatrix 1 (from {name_a}):", file=out)
    matrix_a.print(file=out)
    print(f"\nMatrix 2 (from {name_b}):", file=out)
    matrix_b.print(file=out)

    print("\nPerforming matrix operations...", file=out)
    results = {}
    for operation, symbol, label, method in OPERATIONS:
        print(f"\n{label} Result (Matrix 1 {symbol} Matrix 2):", file=out)
        st = time.time()
        try:
            result = getattr(matrix_a, method)(matrix_b)
        except MatrixRuntimeError as e:
            print(f"{label} Error: {e}", file=err)
            results[operation] = e
            continue
        result.print(file=out)
        if config.verbose:
            print(f"  took: {time.time() - st} seconds", file=out)
        results[operation] = result

    return results


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog='sparse-matrix',
        description='Load two sparse matrix files and print their sum, difference and product',
    )
    parser.add_argument(
        'matrix_a',
        nargs='?',
        help=f'Left operand file (default: {DEFAULT_INPUTS[0]})',
    )
    parser.add_argument(
        'matrix_b',
        nargs='?',
        help=f'Right operand file (default: {DEFAULT_INPUTS[1]})',
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Print per-step timings',
    )
    args = parser.parse_args(argv)

    if (args.matrix_a is None) != (args.matrix_b is None):
        parser.error('give both matrix files or neither')
    if args.matrix_a is None:
        args.matrix_a, args.matrix_b = DEFAULT_INPUTS

    try:
        run_operations(args.matrix_a, args.matrix_b, config=MatrixConfig(verbose=args.verbose))
    except MatrixLoadError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
