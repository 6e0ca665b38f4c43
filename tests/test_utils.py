import os


DATA_DIR = os.path.join(os.path.dirname(__file__), 'data')


def data_path(fn: str) -> str:
    return os.path.join(DATA_DIR, fn)


def write_matrix_file(directory, fn: str, lines: list[str]) -> str:
    fp = os.path.join(str(directory), fn)
    with open(fp, 'w') as f:
        f.write("\n".join(lines) + "\n")
    return fp


def validate_entries(matrix, expected: dict, shape: tuple = None):
    """Raise AssertionError unless the matrix stores exactly the expected non-zero entries."""
    failed = []
    if shape is not None and matrix.shape != shape:
        failed.append(f"shape {matrix.shape} != {shape}")

    for key, value in expected.items():
        if matrix.get_element(*key) != value:
            failed.append(f"{key}: {matrix.get_element(*key)} != {value}")
    extra = set(matrix.keys()) - set(expected.keys())
    if extra:
        failed.append(f"unexpected entries at {sorted(extra)}")
    if 0 in matrix.values():
        failed.append("zero value stored")

    if len(failed) > 0:
        raise AssertionError(f"Matrix check failed: {failed}")
