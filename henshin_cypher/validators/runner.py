"""Validation runner that orchestrates all validators."""

from pathlib import Path

from ..schema.loader import parse_module
from ..schema.models import RuleModule
from .base import ValidationResult
from .mappings import check_mappings
from .nacs import check_nacs
from .structure import resolve_rules


def run_validators(module: RuleModule) -> ValidationResult:
    """Run all validators on a rule module.

    Rules that fail to resolve are reported once and skipped by the other
    validators.

    Args:
        module: The parsed rule module.

    Returns:
        Combined ValidationResult from all validators.
    """
    # Structure first; the other checks need resolved rules
    rules, result = resolve_rules(module)

    result.merge(check_mappings(rules))
    result.merge(check_nacs(rules))

    return result


def validate_module_file(path: str | Path) -> ValidationResult:
    """Load and validate a rule module file.

    Args:
        path: Path to the YAML module file.

    Returns:
        ValidationResult from all validators.

    Raises:
        SchemaLoadError: If the file cannot be loaded.
        SchemaValidationError: If the module fails schema validation.
    """
    return run_validators(parse_module(path))
