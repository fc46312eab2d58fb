"""WHERE NOT clause construction from negative application conditions."""

from ..graph.rule_graph import NacGraph
from ..schema.models import Action, Node
from .rendering import anonymous_node, node_reference, relationship_type, require_action


def build_where_not_clause(nacs: list[NacGraph], rule_name: str | None = None) -> str:
    """Build the WHERE NOT clause for the rule's NACs.

    Every NAC edge with at least one forbidden endpoint becomes a pattern.
    Forbidden endpoints are anonymous and carry their properties; the other
    endpoint refers to the variable bound by MATCH. Edges between two bound
    nodes say nothing forbidden and are left out.

    Returns:
        ``\\nWHERE NOT <pattern> AND <pattern> ...`` or an empty string.
    """
    patterns: list[str] = []

    for nac in nacs:
        graph = nac.conclusion
        for edge in graph.edges():
            source = graph.source(edge)
            target = graph.target(edge)
            source_forbidden = _is_forbidden(source, graph.label, rule_name)
            target_forbidden = _is_forbidden(target, graph.label, rule_name)
            if not (source_forbidden or target_forbidden):
                continue

            patterns.append(
                f"{_nac_node(source, source_forbidden)}"
                f"-[:{relationship_type(edge)}]->"
                f"{_nac_node(target, target_forbidden)}"
            )

    if not patterns:
        return ""
    return "\nWHERE NOT " + " AND ".join(patterns)


def _is_forbidden(node: Node, where: str, rule_name: str | None) -> bool:
    return require_action(node, where, rule_name) == Action.FORBID


def _nac_node(node: Node, forbidden: bool) -> str:
    if forbidden:
        return anonymous_node(node, with_attributes=True)
    return node_reference(node)
