"""Compilation of graph transformation rules to Cypher queries."""

from .assembler import check_actions, compile_module, compile_rule, render_rule
from .errors import CapacityExceededError, InvalidRuleError, MissingActionError, RuleError
from .match import build_match_clause
from .mutation import build_create_clause, build_delete_clause
from .naming import NameScope, assign_identifiers, assign_rule_identifiers, index_tokens
from .report import CompilationReport, RuleResult
from .where_not import build_where_not_clause

__all__ = [
    # Assembly
    "check_actions",
    "compile_module",
    "compile_rule",
    "render_rule",
    # Errors
    "RuleError",
    "InvalidRuleError",
    "MissingActionError",
    "CapacityExceededError",
    # Clauses
    "build_match_clause",
    "build_where_not_clause",
    "build_delete_clause",
    "build_create_clause",
    # Naming
    "NameScope",
    "assign_identifiers",
    "assign_rule_identifiers",
    "index_tokens",
    # Reports
    "CompilationReport",
    "RuleResult",
]
