"""Rule structure validator."""

from ..compiler.assembler import check_actions
from ..graph.builder import build_rule_graphs
from ..graph.errors import RuleError
from ..graph.rule_graph import RuleGraphs
from ..schema.models import RuleModule
from .base import ValidationResult


def resolve_rules(module: RuleModule) -> tuple[dict[str, RuleGraphs], ValidationResult]:
    """Resolve every rule of a module, collecting the ones that cannot compile.

    A rule fails when it does not resolve (missing types, dangling edge or
    mapping references) or when one of its elements has no action.

    Args:
        module: The rule module.

    Returns:
        The resolved rules by name, and a ValidationResult with one error per
        failing rule (code taken from the rule error).
    """
    resolved: dict[str, RuleGraphs] = {}
    result = ValidationResult()

    for name, rule in module.rules.items():
        try:
            graphs = build_rule_graphs(rule)
            check_actions(graphs)
        except RuleError as e:
            result.add_error(
                code=e.code,
                message=str(e),
                rule=name,
                element=e.element,
            )
            continue
        resolved[name] = graphs

    return resolved, result


def check_rule_structure(module: RuleModule) -> ValidationResult:
    """Check that every rule resolves and every element carries an action."""
    return resolve_rules(module)[1]
