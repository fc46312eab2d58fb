"""RuleGraph wrapper around networkx for rule graphs."""

from dataclasses import dataclass, field
from typing import Iterator

import networkx as nx

from ..schema.models import Edge, Node, Rule


class RuleGraph:
    """A directed multigraph over the nodes and edges of one rule graph.

    Nodes are keyed by their position in the source graph and edges by their
    position among the graph's edges, so iteration follows definition order.
    The schema objects themselves are stored on the graph: names and indices
    written to them later are visible through this view.
    """

    def __init__(self, label: str):
        """Initialize an empty rule graph.

        Args:
            label: Where the graph sits in its rule ("lhs", "rhs", "nac:<name>").
        """
        self.label = label
        self._graph = nx.MultiDiGraph()
        self._edges: list[Edge] = []
        self._node_keys: dict[int, int] = {}
        self._edge_ends: dict[int, tuple[int, int]] = {}

    @property
    def graph(self) -> nx.MultiDiGraph:
        """Get the underlying networkx graph."""
        return self._graph

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    def add_node(self, node: Node) -> int:
        """Add a node and return its key."""
        key = self._graph.number_of_nodes()
        self._graph.add_node(key, node=node)
        self._node_keys[id(node)] = key
        return key

    def add_edge(self, edge: Edge, source: Node, target: Node) -> None:
        """Add an edge between two nodes already in this graph."""
        ends = (self._node_keys[id(source)], self._node_keys[id(target)])
        self._graph.add_edge(*ends, key=len(self._edges), edge=edge)
        self._edge_ends[id(edge)] = ends
        self._edges.append(edge)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def nodes(self) -> list[Node]:
        """Get all nodes in definition order."""
        return [data for _, data in self._graph.nodes(data="node")]

    def edges(self) -> list[Edge]:
        """Get all edges in definition order."""
        return list(self._edges)

    def find(self, ref: str) -> Node | None:
        """Get the node whose id (or, lacking one, name) is ``ref``."""
        for node in self.nodes():
            if node.ref == ref:
                return node
        return None

    def source(self, edge: Edge) -> Node:
        """Get the source node of an edge."""
        return self._graph.nodes[self._edge_ends[id(edge)][0]]["node"]

    def target(self, edge: Edge) -> Node:
        """Get the target node of an edge."""
        return self._graph.nodes[self._edge_ends[id(edge)][1]]["node"]

    def outgoing(self, node: Node) -> list[Edge]:
        """Get the edges leaving a node, in definition order."""
        out_edges = self._graph.out_edges(self._node_keys[id(node)], keys=True, data="edge")
        return [edge for _, _, _, edge in sorted(out_edges, key=lambda e: e[2])]

    def incoming(self, node: Node) -> list[Edge]:
        """Get the edges entering a node, in definition order."""
        in_edges = self._graph.in_edges(self._node_keys[id(node)], keys=True, data="edge")
        return [edge for _, _, _, edge in sorted(in_edges, key=lambda e: e[2])]

    def is_isolated(self, node: Node) -> bool:
        """Check if a node has neither incoming nor outgoing edges."""
        return self._graph.degree(self._node_keys[id(node)]) == 0

    def isolated_nodes(self) -> list[Node]:
        """Get all nodes without edges, in definition order."""
        return [node for node in self.nodes() if self.is_isolated(node)]


@dataclass
class ResolvedMapping:
    """A mapping with both ends resolved to nodes."""

    origin: Node
    image: Node


@dataclass
class NacGraph:
    """A negative application condition with its conclusion resolved."""

    name: str | None
    conclusion: RuleGraph
    mappings: list[ResolvedMapping] = field(default_factory=list)


@dataclass
class RuleGraphs:
    """All resolved graphs of one rule."""

    rule: Rule
    lhs: RuleGraph
    rhs: RuleGraph
    nacs: list[NacGraph] = field(default_factory=list)
    mappings: list[ResolvedMapping] = field(default_factory=list)

    @property
    def name(self) -> str:
        """The rule name."""
        return self.rule.name

    def all_mappings(self) -> list[ResolvedMapping]:
        """Rule mappings followed by the mappings of every NAC."""
        mappings = list(self.mappings)
        for nac in self.nacs:
            mappings.extend(nac.mappings)
        return mappings

    def graphs(self) -> Iterator[RuleGraph]:
        """Iterate over LHS, RHS and every NAC conclusion."""
        yield self.lhs
        yield self.rhs
        for nac in self.nacs:
            yield nac.conclusion
