"""Reading and comparing binary conflict/dependency matrices.

Critical pair analysis tools log their result as a binary matrix, one row per
rule, introduced by a marker line::

    Conflict matrix (binary):
    0 1 0 | createAccount
    0 0 1 | deleteAccount
    1 0 0 | addManager

Column ``j`` of a row stands for the ``j``-th rule. The same layout is asked
of any second opinion, so two matrices can be compared cell by cell.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path

from ..config import MATRIX_KEYWORD
from .errors import MatrixParseError

# Pattern for a row: cells of 0/1 separated by whitespace, a bar, the rule name
ROW_PATTERN = re.compile(r"^\s*([01](?:\s+[01])*)\s*\|\s*(\S.*?)\s*$")


@dataclass
class ConflictMatrix:
    """A square-ish binary relation between rules, in row order."""

    rows: dict[str, list[bool]] = field(default_factory=dict)

    @property
    def rules(self) -> list[str]:
        """Rule names in row order."""
        return list(self.rows.keys())

    def pairs(self) -> list[tuple[str, str]]:
        """All ``(rule, other_rule)`` pairs marked 1."""
        rules = self.rules
        return [
            (rule, rules[j])
            for rule, row in self.rows.items()
            for j, flagged in enumerate(row)
            if flagged and j < len(rules)
        ]


@dataclass
class MatrixComparison:
    """Agreement between a reference matrix and a candidate matrix."""

    both: list[tuple[str, str]] = field(default_factory=list)
    only_reference: list[tuple[str, str]] = field(default_factory=list)
    only_candidate: list[tuple[str, str]] = field(default_factory=list)

    @property
    def agrees(self) -> bool:
        """Check if both matrices flag exactly the same pairs."""
        return not self.only_reference and not self.only_candidate


def read_matrix(text: str, keyword: str | None = None) -> ConflictMatrix:
    """Parse the matrix section of an analysis log.

    The section starts after the first line containing ``keyword`` and ends
    at the first blank line (or the end of the text).

    Args:
        text: The log text.
        keyword: Marker of the section; defaults to config.

    Returns:
        The parsed ConflictMatrix.

    Raises:
        MatrixParseError: If the section is missing or a row is malformed.
    """
    if keyword is None:
        keyword = MATRIX_KEYWORD

    lines = text.splitlines()
    start = next(
        (number for number, line in enumerate(lines) if keyword in line.strip()),
        None,
    )
    if start is None:
        raise MatrixParseError(f"No matrix section marked '{keyword}' found")

    matrix = ConflictMatrix()
    for number, line in enumerate(lines[start + 1 :], start=start + 2):
        if not line.strip():
            break

        match = ROW_PATTERN.match(line)
        if not match:
            raise MatrixParseError(f"Malformed matrix row: {line.strip()!r}", line=number)

        cells, rule = match.groups()
        matrix.rows[rule] = [cell == "1" for cell in cells.split()]

    return matrix


def read_matrix_file(path: str | Path, keyword: str | None = None) -> ConflictMatrix:
    """Read the matrix section of an analysis log file.

    Raises:
        MatrixParseError: If the file cannot be read or parsed.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise MatrixParseError(f"Cannot read file: {e}", path=str(path)) from e

    try:
        return read_matrix(text, keyword)
    except MatrixParseError as e:
        e.path = str(path)
        raise


def compare_matrices(reference: ConflictMatrix, candidate: ConflictMatrix) -> MatrixComparison:
    """Compare two matrices over the reference's rules.

    A rule missing from the candidate counts as a row of zeros.

    Args:
        reference: The matrix taken as ground truth.
        candidate: The matrix being checked.

    Returns:
        MatrixComparison listing pairs flagged by both, or only by one side.

    Raises:
        MatrixParseError: If a candidate row has a different length than the
            reference row for the same rule.
    """
    comparison = MatrixComparison()
    rules = reference.rules

    for rule in rules:
        expected = reference.rows[rule]
        actual = candidate.rows.get(rule, [False] * len(expected))
        if len(actual) != len(expected):
            raise MatrixParseError(
                f"Row for rule '{rule}' has {len(actual)} cells, expected {len(expected)}"
            )

        for j, (in_reference, in_candidate) in enumerate(zip(expected, actual)):
            if j >= len(rules):
                break
            pair = (rule, rules[j])
            if in_reference and in_candidate:
                comparison.both.append(pair)
            elif in_reference:
                comparison.only_reference.append(pair)
            elif in_candidate:
                comparison.only_candidate.append(pair)

    return comparison
