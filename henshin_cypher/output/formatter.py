"""Output formatting for compilation reports, validation results and comparisons."""

import json
from typing import Literal

from ..analysis.matrix import MatrixComparison
from ..compiler.report import CompilationReport
from ..validators.base import Severity, ValidationIssue, ValidationResult

OutputFormat = Literal["text", "json"]


def format_report(report: CompilationReport, format: OutputFormat = "text") -> str:
    """Format a compilation report for output.

    Args:
        report: The compilation report to format.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return _report_json(report)
    return _report_text(report)


def _report_text(report: CompilationReport) -> str:
    """Format a report as one query block per rule, then failures."""
    lines: list[str] = []

    for result in report.succeeded:
        lines.append(f"Cypher Query for rule {result.rule}:")
        lines.append(result.query or "(empty)")
        lines.append("")

    if report.failed:
        lines.append("FAILURES:")
        for result in report.failed:
            lines.append(f"  ✘ {result.error_code}: [{result.rule}] {result.error}")
        lines.append("")

    compiled = len(report.succeeded)
    summary = f"Compiled {compiled} of {len(report.results)} rule(s) in {report.total_ms:.2f} ms"
    if report.failed:
        summary += f", {len(report.failed)} failed"
    lines.append(summary)

    return "\n".join(lines)


def _report_json(report: CompilationReport) -> str:
    data = {
        "module": report.module,
        "compiled": len(report.succeeded),
        "failed": len(report.failed),
        "rules": [
            {
                "rule": result.rule,
                "ok": result.ok,
                "query": result.query,
                "error_code": result.error_code,
                "error": result.error,
                "element": result.element,
                "duration_ms": round(result.duration_ms, 3),
            }
            for result in report.results
        ],
    }
    return json.dumps(data, indent=2)


def format_validation_result(
    result: ValidationResult,
    format: OutputFormat = "text",
) -> str:
    """Format a validation result for output.

    Args:
        result: The validation result to format.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return _validation_json(result)
    return _validation_text(result)


def _validation_text(result: ValidationResult) -> str:
    """Format result as human-readable text."""
    lines: list[str] = []

    sections = (
        ("ERRORS:", result.errors),
        ("WARNINGS:", result.warnings),
    )
    for title, issues in sections:
        lines.append(title)
        if issues:
            for issue in issues:
                lines.append(f"  {_format_issue_text(issue)}")
        else:
            lines.append("  (none)")
        lines.append("")

    if result.infos:
        lines.append("NOTES:")
        for issue in result.infos:
            lines.append(f"  {_format_issue_text(issue)}")
        lines.append("")

    errors = result.errors
    warnings = result.warnings
    if result.is_valid:
        if warnings:
            lines.append(f"Validation passed with {len(warnings)} warning(s)")
        else:
            lines.append("Validation passed")
    else:
        lines.append(
            f"Validation failed: {len(errors)} error(s), {len(warnings)} warning(s)"
        )

    return "\n".join(lines)


def _format_issue_text(issue: ValidationIssue) -> str:
    """Format a single issue as text."""
    location = f"[{issue.rule}] " if issue.rule else ""

    if issue.severity == Severity.ERROR:
        symbol = "✘"
    elif issue.severity == Severity.WARNING:
        symbol = "⚠"
    else:
        symbol = "ℹ"

    return f"{symbol} {issue.code}: {location}{issue.message}"


def _validation_json(result: ValidationResult) -> str:
    data = {
        "valid": result.is_valid,
        "error_count": len(result.errors),
        "warning_count": len(result.warnings),
        "issues": [
            {
                "code": issue.code,
                "message": issue.message,
                "severity": issue.severity.value,
                "rule": issue.rule,
                "element": issue.element,
                "details": issue.details,
            }
            for issue in result.issues
        ],
    }
    return json.dumps(data, indent=2)


def format_comparison(
    comparison: MatrixComparison,
    format: OutputFormat = "text",
    reference_name: str = "reference",
    candidate_name: str = "candidate",
) -> str:
    """Format a matrix comparison for output.

    Args:
        comparison: The comparison to format.
        format: Output format ("text" or "json").
        reference_name: Label for the reference matrix.
        candidate_name: Label for the candidate matrix.

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return json.dumps(
            {
                "agrees": comparison.agrees,
                "both": [list(pair) for pair in comparison.both],
                f"only_{reference_name}": [list(pair) for pair in comparison.only_reference],
                f"only_{candidate_name}": [list(pair) for pair in comparison.only_candidate],
            },
            indent=2,
        )

    rule = "-" * 49
    lines: list[str] = []
    sections = (
        ("both", comparison.both),
        (f"only in {reference_name}", comparison.only_reference),
        (f"only in {candidate_name}", comparison.only_candidate),
    )
    for title, pairs in sections:
        lines.append(f"Pairs found {title}:")
        lines.append(rule)
        for first, second in pairs:
            lines.append(f"{first} -> {second}")
        lines.append(f"Total found {title}: {len(pairs)}.")
        lines.append("")

    return "\n".join(lines).rstrip("\n")
