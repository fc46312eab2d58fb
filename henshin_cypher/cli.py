"""Command-line interface for henshin-cypher."""

import logging
import sys

import click

from .config import MATRIX_KEYWORD, MAX_INDEX_LENGTH
from .logger import LOGGER
from .output.formatter import format_comparison, format_report, format_validation_result
from .schema.errors import SchemaLoadError, SchemaValidationError

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _load_module(module_file: str):
    """Parse a module file, exiting with code 2 on file or schema errors."""
    from .schema.loader import parse_module

    try:
        return parse_module(module_file)
    except SchemaLoadError as e:
        click.echo(f"Error loading file: {e}", err=True)
        sys.exit(2)
    except SchemaValidationError as e:
        click.echo(f"Schema validation error: {e}", err=True)
        for err in e.errors:
            click.echo(f"  - {err['loc']}: {err['msg']}", err=True)
        sys.exit(2)


@click.group()
@click.version_option(package_name="henshin-cypher")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (defaults to HENSHIN_CYPHER_LOG_LEVEL or WARNING)",
)
def main(log_level: str | None):
    """henshin-cypher: compile graph transformation rules to Cypher queries."""
    if log_level:
        LOGGER.setLevel(getattr(logging, log_level.upper()))


@main.command("compile")
@click.argument("module_file", type=click.Path(exists=True))
@click.option(
    "--rule",
    "rule_names",
    multiple=True,
    help="Only compile this rule (repeatable)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option(
    "--max-index-length",
    type=click.IntRange(min=1),
    default=MAX_INDEX_LENGTH,
    show_default=True,
    help="Longest generated edge index token",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Treat rules that compile to an empty query as failures",
)
def compile_cmd(
    module_file: str,
    rule_names: tuple[str, ...],
    output_format: str,
    max_index_length: int,
    strict: bool,
):
    """Compile the rules of a module file to Cypher queries.

    MODULE_FILE is the path to a YAML rule module.

    Exit codes:
      0 - All rules compiled
      1 - At least one rule failed
      2 - File or schema error
    """
    from .compiler.assembler import compile_module

    module = _load_module(module_file)
    report = compile_module(
        module,
        rule_names=list(rule_names) or None,
        max_index_length=max_index_length,
    )

    click.echo(format_report(report, output_format))  # type: ignore

    if report.has_failures:
        sys.exit(1)
    elif strict and report.empty:
        sys.exit(1)
    else:
        sys.exit(0)


@main.command()
@click.argument("module_file", type=click.Path(exists=True))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Treat warnings as errors",
)
def validate(module_file: str, output_format: str, strict: bool):
    """Validate the rules of a module file.

    MODULE_FILE is the path to a YAML rule module.

    Exit codes:
      0 - Validation passed
      1 - Validation failed (errors found)
      2 - File or schema error
    """
    from .validators.runner import run_validators

    module = _load_module(module_file)
    result = run_validators(module)

    click.echo(format_validation_result(result, output_format))  # type: ignore

    if result.has_errors:
        sys.exit(1)
    elif strict and result.has_warnings:
        sys.exit(1)
    else:
        sys.exit(0)


@main.command()
@click.argument("reference_file", type=click.Path(exists=True))
@click.argument("candidate_file", type=click.Path(exists=True))
@click.option(
    "--keyword",
    default=MATRIX_KEYWORD,
    show_default=True,
    help="Marker line that introduces the matrix in each file",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
def compare(reference_file: str, candidate_file: str, keyword: str, output_format: str):
    """Compare two conflict or dependency matrices.

    REFERENCE_FILE holds the matrix taken as ground truth (for example a
    critical pair analysis log); CANDIDATE_FILE holds the matrix to check.

    Exit codes:
      0 - Comparison printed
      2 - A matrix could not be read
    """
    from .analysis.errors import MatrixParseError
    from .analysis.matrix import compare_matrices, read_matrix_file

    try:
        reference = read_matrix_file(reference_file, keyword)
        candidate = read_matrix_file(candidate_file, keyword)
        comparison = compare_matrices(reference, candidate)
    except MatrixParseError as e:
        location = f" ({e.path}, line {e.line})" if e.path and e.line else ""
        click.echo(f"Matrix error: {e}{location}", err=True)
        sys.exit(2)

    click.echo(format_comparison(comparison, output_format))  # type: ignore
    sys.exit(0)


if __name__ == "__main__":
    main()
