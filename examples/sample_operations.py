import os
import sys

# Add the src directory to Python path to import local sparse_matrix
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))


from sparse_matrix import SparseMatrix, MatrixConfig, MatrixRuntimeError, run_operations



def sample_path(fn: str) -> str:
    # Get the directory where this script is located
    script_dir = os.path.dirname(os.path.abspath(__file__))
    return os.path.join(script_dir, 'sample_inputs', fn)


def sample_operations():
    """Run the three operations on the bundled sample matrices."""

    config = MatrixConfig(verbose=True)
    run_operations(sample_path('matrixfile1.txt'), sample_path('matrixfile3.txt'), config=config)

    # a 4x4 and a 3x2 matrix: every operation fails, and each failure is reported on its own
    print("\n=== Mismatched shapes ===")
    results = run_operations(sample_path('matrixfile1.txt'), sample_path('matrixfile2.txt'))
    for operation, result in results.items():
        status = "failed" if isinstance(result, MatrixRuntimeError) else "ok"
        print(f"{operation}: {status}")

    tall = SparseMatrix.from_file(sample_path('matrixfile2.txt'))
    print("\nGram matrix of matrixfile2 (A^T A):")
    (tall.transpose() @ tall).print()
    print(f"density: {tall.density():.2f}%")


if __name__ == "__main__":

    sample_operations()
