import pytest
import os
import sys

# Add the src directory to Python path to import local sparse_matrix
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from sparse_matrix import (SparseMatrix, MatrixConfig, MatrixFormatError, MatrixLoadError, parse_matrix,
                           read_matrix_file)
from test_utils import data_path, write_matrix_file, validate_entries


class TestParseMatrix:
    """Parsing of the rows=/cols=/(row, col, value) text format."""

    def test_parse_valid_file(self, tmp_path):
        fp = write_matrix_file(tmp_path, 'm.txt', ['rows=2', 'cols=2', '(0,0,5)', '(1,1,-3)'])
        m = SparseMatrix.from_file(fp)
        assert m.shape == (2, 2)
        assert m.get_element(0, 0) == 5
        assert m.get_element(1, 1) == -3
        assert m.get_element(0, 1) == 0

    def test_blank_lines_and_whitespace(self):
        text = "rows=3\ncols=4\n\n   (0, 3, 2)   \n\t\n(2,\t1, -8)\n"
        parsed = parse_matrix(text)
        assert (parsed.rows, parsed.cols) == (3, 4)
        assert parsed.entries == {(0, 3): 2, (2, 1): -8}

    def test_windows_line_endings(self):
        parsed = parse_matrix("rows=1\r\ncols=1\r\n(0, 0, 4)\r\n")
        assert parsed.entries == {(0, 0): 4}

    def test_zero_values_not_stored_and_repeats_overwrite(self):
        parsed = parse_matrix("rows=2\ncols=2\n(0, 0, 0)\n(1, 0, 3)\n(1, 0, 6)\n(0, 1, 2)\n(0, 1, 0)\n")
        assert parsed.entries == {(1, 0): 6}

    def test_header_only(self):
        parsed = parse_matrix("rows=0\ncols=0")
        assert (parsed.rows, parsed.cols, parsed.entries) == (0, 0, {})

    def test_sample_file(self):
        m = SparseMatrix.from_file(data_path('tall.txt'))
        validate_entries(m, {(0, 1): 6, (2, 0): -1}, shape=(3, 2))

    @pytest.mark.parametrize("text", [
        "rows=2\n(0, 0, 1)\n",
        "cols=2\nrows=2\n",
        "rows=2\n",
        "",
        "rows=-1\ncols=2\n",
        "rows=\uff12\ncols=2\n",
        "rows=2\ncols=\u0662\n",
        "rows=1\rcols=1\r(0, 0, 4)\r",
    ])
    def test_missing_header(self, text):
        with pytest.raises(MatrixFormatError) as exc:
            parse_matrix(text)
        assert "rows or cols not found" in str(exc.value)
        assert exc.value.line_number is None

    @pytest.mark.parametrize("line", [
        "0, 0, 1",
        "(0, 0)",
        "(a, 0, 1)",
        "(-1, 0, 1)",
        "(0, 0, 1.5)",
        "[0, 0, 1]",
        "(0, 0, 1) trailing",
        "(\u0661, 0, 5)",
        "(0, 0, \uff15)",
    ])
    def test_malformed_data_line(self, line):
        with pytest.raises(MatrixFormatError) as exc:
            parse_matrix(f"rows=2\ncols=2\n(1, 1, 1)\n{line}\n")
        assert "Input file has wrong format" in str(exc.value)
        assert exc.value.line_number == 4
        assert exc.value.line == line

    def test_format_error_is_load_error(self):
        with pytest.raises(MatrixLoadError) as exc:
            parse_matrix("rows=1\n", source='x.txt')
        assert str(exc.value).startswith("Error loading matrix from file: ")
        assert exc.value.path == 'x.txt'

    def test_strict_bounds_rejects_out_of_range_entry(self, tmp_path):
        fp = write_matrix_file(tmp_path, 'm.txt', ['rows=2', 'cols=2', '(2, 0, 1)'])
        with pytest.raises(MatrixFormatError):
            SparseMatrix.from_file(fp, MatrixConfig(strict_bounds=True))
        # accepted when permissive
        assert SparseMatrix.from_file(fp).get_element(2, 0) == 1

    def test_config_argument(self):
        text = "rows=1\ncols=1\n(3, 3, 1)\n"
        with pytest.raises(MatrixFormatError) as exc:
            parse_matrix(text, MatrixConfig(strict_bounds=True))
        assert exc.value.path is None
        assert "entry out of bounds" in str(exc.value)
        assert parse_matrix(text, MatrixConfig()).entries == {(3, 3): 1}

    @pytest.mark.skipif(not hasattr(sys, 'get_int_max_str_digits'),
                        reason="interpreter has no int string conversion limit")
    @pytest.mark.parametrize("text, line_number", [
        ("rows=1\ncols=1\n(0, 0, " + "1" * 5000 + ")\n", 3),
        ("rows=" + "1" * 5000 + "\ncols=1\n", 1),
        ("rows=1\ncols=" + "9" * 5000 + "\n", 2),
    ])
    def test_values_past_int_conversion_limit(self, text, line_number):
        with pytest.raises(MatrixFormatError) as exc:
            parse_matrix(text)
        assert "Input file has wrong format" in str(exc.value)
        assert exc.value.line_number == line_number


class TestReadMatrixFile:

    def test_missing_file(self, tmp_path):
        fp = os.path.join(str(tmp_path), 'does_not_exist.txt')
        with pytest.raises(MatrixLoadError) as exc:
            read_matrix_file(fp)
        assert not isinstance(exc.value, MatrixFormatError)
        assert isinstance(exc.value.__cause__, FileNotFoundError)
        assert str(exc.value).startswith("Error loading matrix from file: ")

    def test_directory_is_load_error(self, tmp_path):
        with pytest.raises(MatrixLoadError) as exc:
            SparseMatrix.from_file(str(tmp_path))
        assert isinstance(exc.value.__cause__, OSError)

    def test_missing_cols_line(self, tmp_path):
        fp = write_matrix_file(tmp_path, 'm.txt', ['rows=2', '(0, 0, 1)'])
        with pytest.raises(MatrixFormatError):
            SparseMatrix.from_file(fp)

    def test_carriage_return_only_file(self, tmp_path):
        fp = os.path.join(str(tmp_path), 'cr.txt')
        with open(fp, 'w', newline='') as f:
            f.write("rows=1\rcols=1\r(0, 0, 4)\r")
        with pytest.raises(MatrixFormatError) as exc:
            read_matrix_file(fp)
        assert "rows or cols not found" in str(exc.value)

    def test_crlf_file(self, tmp_path):
        fp = os.path.join(str(tmp_path), 'crlf.txt')
        with open(fp, 'w', newline='') as f:
            f.write("rows=2\r\ncols=2\r\n(1, 0, 7)\r\n")
        assert read_matrix_file(fp).entries == {(1, 0): 7}
