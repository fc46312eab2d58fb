"""Negative application condition validators."""

from ..graph.rule_graph import RuleGraphs
from ..schema.models import Action
from .base import ValidationResult


def check_nacs(rules: dict[str, RuleGraphs]) -> ValidationResult:
    """Check that each NAC forbids something the WHERE NOT clause can express.

    A NAC with no forbidden element never blocks the rule. A NAC edge whose
    endpoints are both bound is not translated, which is worth knowing when
    reading the query.

    Args:
        rules: Resolved rules by name.

    Returns:
        ValidationResult with warnings for empty NACs and infos for skipped edges.
    """
    result = ValidationResult()

    for name, graphs in rules.items():
        for nac in graphs.nacs:
            graph = nac.conclusion
            forbidden_nodes = [n for n in graph.nodes() if n.action == Action.FORBID]
            forbidden_edges = [e for e in graph.edges() if e.action == Action.FORBID]

            if not forbidden_nodes and not forbidden_edges:
                result.add_warning(
                    code="EMPTY_NAC",
                    message=f"NAC {graph.label} forbids no element",
                    rule=name,
                )
                continue

            for edge in graph.edges():
                source = graph.source(edge)
                target = graph.target(edge)
                if source.action != Action.FORBID and target.action != Action.FORBID:
                    result.add_info(
                        code="SKIPPED_NAC_EDGE",
                        message=(
                            f"{edge.describe()} in {graph.label} joins two bound "
                            "nodes and is not part of the WHERE NOT clause"
                        ),
                        rule=name,
                        element=edge.describe(),
                    )

    return result
