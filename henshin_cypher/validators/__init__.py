"""Validators for structural checks of rule modules."""

from .base import Severity, ValidationIssue, ValidationResult
from .mappings import check_mappings
from .nacs import check_nacs
from .structure import check_rule_structure, resolve_rules
from .runner import run_validators, validate_module_file

__all__ = [
    "Severity",
    "ValidationIssue",
    "ValidationResult",
    "check_mappings",
    "check_nacs",
    "check_rule_structure",
    "resolve_rules",
    "run_validators",
    "validate_module_file",
]
