"""MATCH clause construction from the left-hand side."""

from dataclasses import dataclass, field

from ..graph.rule_graph import RuleGraph
from ..schema.models import Action, Edge, Node
from .rendering import (
    anonymous_node,
    labelled_node,
    node_reference,
    relationship_type,
    require_action,
)


@dataclass
class MatchState:
    """What one MATCH construction has emitted so far."""

    visited_edges: set[tuple[str, str, str]] = field(default_factory=set)
    bound_names: set[str] = field(default_factory=set)


def build_match_clause(lhs: RuleGraph, rule_name: str | None = None) -> str:
    """Build the MATCH clause for an identifier-assigned LHS.

    Each not yet visited edge seeds a path that follows the first unvisited
    outgoing edge of its current end node until none is left, so the clause
    is a list of forward chains. Branches start their own chain later in edge
    order. Nodes without edges follow as single-node patterns.

    Args:
        lhs: The left-hand side graph.
        rule_name: Name of the owning rule, used in error messages.

    Returns:
        ``MATCH <pattern>, <pattern>, ...`` or an empty string.
    """
    state = MatchState()
    patterns: list[str] = []

    for edge in lhs.edges():
        identifier = _edge_identifier(lhs, edge)
        if identifier in state.visited_edges:
            continue
        state.visited_edges.add(identifier)
        patterns.append(_linear_path(lhs, edge, state, rule_name))

    for node in lhs.isolated_nodes():
        patterns.append(_match_node(node, state, lhs.label, rule_name))

    if not patterns:
        return ""
    return "MATCH " + ", ".join(patterns)


def _linear_path(
    lhs: RuleGraph, start: Edge, state: MatchState, rule_name: str | None
) -> str:
    parts = [_match_node(lhs.source(start), state, lhs.label, rule_name)]

    edge: Edge | None = start
    while edge is not None:
        parts.append(f"-[{edge.index}:{relationship_type(edge)}]->")
        target = lhs.target(edge)
        parts.append(_match_node(target, state, lhs.label, rule_name))

        edge = next(
            (
                candidate
                for candidate in lhs.outgoing(target)
                if _edge_identifier(lhs, candidate) not in state.visited_edges
            ),
            None,
        )
        if edge is not None:
            state.visited_edges.add(_edge_identifier(lhs, edge))

    return "".join(parts)


def _match_node(node: Node, state: MatchState, where: str, rule_name: str | None) -> str:
    """Label a variable on first use only; forbidden nodes stay anonymous."""
    action = require_action(node, where, rule_name)
    first_use = node.name not in state.bound_names
    state.bound_names.add(node.name)

    if action == Action.FORBID:
        return anonymous_node(node)
    if not first_use:
        return node_reference(node)
    return labelled_node(node, with_attributes=True)


def _edge_identifier(graph: RuleGraph, edge: Edge) -> tuple[str, str, str]:
    return (graph.source(edge).name, relationship_type(edge), graph.target(edge).name)
