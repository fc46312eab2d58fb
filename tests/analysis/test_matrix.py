"""Tests for conflict matrix reading and comparison."""

import pytest

from henshin_cypher.analysis.errors import MatrixParseError
from henshin_cypher.analysis.matrix import (
    ConflictMatrix,
    compare_matrices,
    read_matrix,
    read_matrix_file,
)


class TestReadMatrix:
    def test_reads_rows_after_marker(self):
        text = """preamble mentioning nothing
Conflict matrix (binary):
0 1 | first
1 0 | second

trailing 1 1 | ignored
"""

        matrix = read_matrix(text)

        assert matrix.rules == ["first", "second"]
        assert matrix.rows["first"] == [False, True]
        assert matrix.pairs() == [("first", "second"), ("second", "first")]

    def test_custom_keyword(self):
        matrix = read_matrix("Dependencies:\n1 | only\n", keyword="Dependencies")

        assert matrix.pairs() == [("only", "only")]

    def test_missing_section(self):
        with pytest.raises(MatrixParseError) as exc_info:
            read_matrix("no matrix here\n")

        assert "binary" in str(exc_info.value)

    def test_malformed_row(self):
        with pytest.raises(MatrixParseError) as exc_info:
            read_matrix("binary\n0 2 | broken\n")

        assert exc_info.value.line == 2

    def test_empty_section(self):
        assert read_matrix("binary\n").rules == []


class TestReadMatrixFile:
    def test_reads_example(self, examples_dir):
        matrix = read_matrix_file(examples_dir / "matrices" / "critical_pairs.log")

        assert matrix.rules == ["createAccount", "deleteAccount", "addManager"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(MatrixParseError) as exc_info:
            read_matrix_file(tmp_path / "absent.log")

        assert exc_info.value.path.endswith("absent.log")

    def test_parse_error_carries_path(self, tmp_path):
        path = tmp_path / "bad.log"
        path.write_text("binary\nyes | r\n")

        with pytest.raises(MatrixParseError) as exc_info:
            read_matrix_file(path)

        assert exc_info.value.path == str(path)


class TestCompareMatrices:
    def test_example_logs(self, examples_dir):
        reference = read_matrix_file(examples_dir / "matrices" / "critical_pairs.log")
        candidate = read_matrix_file(examples_dir / "matrices" / "chat_answer.log")

        comparison = compare_matrices(reference, candidate)

        assert comparison.both == [
            ("createAccount", "deleteAccount"),
            ("deleteAccount", "deleteAccount"),
            ("addManager", "addManager"),
        ]
        assert comparison.only_reference == [("deleteAccount", "createAccount")]
        assert comparison.only_candidate == [("createAccount", "addManager")]
        assert not comparison.agrees

    def test_identical_matrices_agree(self):
        matrix = ConflictMatrix(rows={"a": [True, False], "b": [False, True]})

        assert compare_matrices(matrix, matrix).agrees

    def test_missing_candidate_row_counts_as_zeros(self):
        reference = ConflictMatrix(rows={"a": [True, False], "b": [False, True]})
        candidate = ConflictMatrix(rows={"a": [True, False]})

        comparison = compare_matrices(reference, candidate)

        assert comparison.only_reference == [("b", "b")]

    def test_row_length_mismatch(self):
        reference = ConflictMatrix(rows={"a": [True, False], "b": [False, True]})
        candidate = ConflictMatrix(rows={"a": [True], "b": [False, True]})

        with pytest.raises(MatrixParseError):
            compare_matrices(reference, candidate)
