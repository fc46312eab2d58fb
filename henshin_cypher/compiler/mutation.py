"""DELETE and CREATE clause construction."""

from ..graph.rule_graph import RuleGraph
from ..schema.models import Action
from .rendering import labelled_node, relationship_type, require_action


def build_delete_clause(lhs: RuleGraph, rule_name: str | None = None) -> str:
    """Build the DELETE clause from deleted LHS edges and nodes.

    Edges are referred to by index and nodes by name; edges come first so a
    node is never removed while a relationship still names it.

    Returns:
        ``\\nDELETE <handle>, ...`` or an empty string.
    """
    handles: list[str] = []

    for edge in lhs.edges():
        if require_action(edge, lhs.label, rule_name) == Action.DELETE:
            handles.append(edge.index)

    for node in lhs.nodes():
        if require_action(node, lhs.label, rule_name) == Action.DELETE:
            handles.append(node.name)

    # Parallel edges share an index; emit each handle once.
    handles = list(dict.fromkeys(handles))

    if not handles:
        return ""
    return "\nDELETE " + ", ".join(handles)


def build_create_clause(rhs: RuleGraph, rule_name: str | None = None) -> str:
    """Build the CREATE clause from created RHS nodes and edges.

    Returns:
        ``\\nCREATE <element>, ...`` or an empty string.
    """
    elements: list[str] = []

    for node in rhs.nodes():
        if require_action(node, rhs.label, rule_name) == Action.CREATE:
            elements.append(labelled_node(node))

    for edge in rhs.edges():
        if require_action(edge, rhs.label, rule_name) == Action.CREATE:
            source = rhs.source(edge)
            target = rhs.target(edge)
            elements.append(
                f"({source.name})-[{edge.index}:{relationship_type(edge)}]->({target.name})"
            )

    if not elements:
        return ""
    return "\nCREATE " + ", ".join(elements)
