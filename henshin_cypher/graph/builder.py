"""Builder for resolving a Rule into RuleGraphs."""

from ..schema.models import Graph, Mapping, Rule
from .errors import InvalidRuleError
from .rule_graph import NacGraph, ResolvedMapping, RuleGraph, RuleGraphs


def build_graph(graph: Graph, label: str, rule_name: str | None = None) -> RuleGraph:
    """Build a RuleGraph from one graph of a rule.

    Args:
        graph: The LHS, RHS or NAC conclusion graph.
        label: Where the graph sits in its rule, used in error messages.
        rule_name: Name of the owning rule, used in error messages.

    Returns:
        A RuleGraph over the graph's nodes and edges.

    Raises:
        InvalidRuleError: If a node or edge has no type, a node reference is
            duplicated, or an edge endpoint does not resolve.
    """
    rule_graph = RuleGraph(label)
    refs: set[str] = set()

    for node in graph.nodes:
        if not node.type or not node.type.strip():
            raise InvalidRuleError(
                f"{node.describe()} in {label} has no type",
                rule=rule_name,
                element=node.describe(),
            )
        if node.ref is not None:
            if node.ref in refs:
                raise InvalidRuleError(
                    f"Duplicate node reference '{node.ref}' in {label}",
                    rule=rule_name,
                    element=node.describe(),
                )
            refs.add(node.ref)
        rule_graph.add_node(node)

    for edge in graph.edges:
        if not edge.type or not edge.type.strip():
            raise InvalidRuleError(
                f"{edge.describe()} in {label} has no type",
                rule=rule_name,
                element=edge.describe(),
            )

        source = rule_graph.find(edge.source)
        target = rule_graph.find(edge.target)
        for ref, node in ((edge.source, source), (edge.target, target)):
            if node is None:
                raise InvalidRuleError(
                    f"{edge.describe()} in {label} references undefined node '{ref}'",
                    rule=rule_name,
                    element=edge.describe(),
                )

        rule_graph.add_edge(edge, source, target)

    return rule_graph


def build_rule_graphs(rule: Rule) -> RuleGraphs:
    """Resolve every graph and mapping of a rule.

    Args:
        rule: The rule to resolve.

    Returns:
        RuleGraphs holding LHS, RHS, NAC conclusions and resolved mappings.

    Raises:
        InvalidRuleError: If any graph or mapping fails to resolve.
    """
    lhs = build_graph(rule.lhs, "lhs", rule.name)
    rhs = build_graph(rule.rhs, "rhs", rule.name)

    nacs = []
    for position, nac in enumerate(rule.nacs, start=1):
        label = f"nac:{nac.name or position}"
        conclusion = build_graph(nac.conclusion, label, rule.name)
        nacs.append(
            NacGraph(
                name=nac.name,
                conclusion=conclusion,
                mappings=_resolve_mappings(nac.mappings, lhs, conclusion, rule.name),
            )
        )

    return RuleGraphs(
        rule=rule,
        lhs=lhs,
        rhs=rhs,
        nacs=nacs,
        mappings=_resolve_mappings(rule.mappings, lhs, rhs, rule.name),
    )


def _resolve_mappings(
    mappings: list[Mapping],
    origins: RuleGraph,
    images: RuleGraph,
    rule_name: str | None,
) -> list[ResolvedMapping]:
    """Resolve mapping references against the origin and image graphs."""
    resolved = []

    for mapping in mappings:
        origin = origins.find(mapping.origin)
        if origin is None:
            raise InvalidRuleError(
                f"Mapping origin '{mapping.origin}' is not a node of {origins.label}",
                rule=rule_name,
                element=f"mapping {mapping.origin}->{mapping.image}",
            )

        image = images.find(mapping.image)
        if image is None:
            raise InvalidRuleError(
                f"Mapping image '{mapping.image}' is not a node of {images.label}",
                rule=rule_name,
                element=f"mapping {mapping.origin}->{mapping.image}",
            )

        resolved.append(ResolvedMapping(origin=origin, image=image))

    return resolved
