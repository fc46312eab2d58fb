"""Identifier assignment for anonymous rule nodes and edges.

Henshin-style rules leave most nodes and edges unnamed. Queries need a
variable for every bound node and a handle for every edge that is deleted or
created, so before compiling, each unnamed node gets ``<type>N`` (``account1``)
and each unindexed edge gets a short letter token (``a``, ``b``, ...).

Names live in scopes. The LHS and RHS share one scope, so a node created on
the RHS never reuses a name bound on the LHS. Each NAC gets a scope of its own
that is discarded once the NAC is named. Scopes are plain values built per
call; nothing is kept between rules.
"""

from itertools import product
from string import ascii_lowercase
from typing import Iterable, Iterator

from ..config import MAX_INDEX_LENGTH
from ..graph.builder import build_rule_graphs
from ..graph.rule_graph import NacGraph, ResolvedMapping, RuleGraph, RuleGraphs
from ..logger import LOGGER
from ..schema.models import Action, Edge, Node, Rule
from .errors import CapacityExceededError


class NameScope:
    """The set of node names taken within one naming scope."""

    def __init__(self, taken: Iterable[str] = ()):
        self._taken: set[str] = set(taken)

    @classmethod
    def of(cls, *graphs: RuleGraph) -> "NameScope":
        """Build a scope seeded with every name already present in ``graphs``."""
        return cls(node.name for graph in graphs for node in graph.nodes() if node.name)

    def __contains__(self, name: str) -> bool:
        return name in self._taken

    def add(self, name: str) -> None:
        """Mark a name as taken."""
        self._taken.add(name)

    def unique_name(self, label: str) -> str:
        """Take and return ``label`` followed by the smallest free positive suffix."""
        suffix = 1
        while f"{label}{suffix}" in self._taken:
            suffix += 1

        name = f"{label}{suffix}"
        self._taken.add(name)
        return name


def index_tokens(max_length: int) -> Iterator[str]:
    """Yield ``a`` .. ``z``, then ``aa`` .. ``zz``, up to ``max_length`` letters."""
    for length in range(1, max_length + 1):
        for letters in product(ascii_lowercase, repeat=length):
            yield "".join(letters)


def index_capacity(max_length: int) -> int:
    """Number of distinct tokens ``index_tokens(max_length)`` yields."""
    return sum(len(ascii_lowercase) ** length for length in range(1, max_length + 1))


class EdgeIndexer:
    """Hands out edge index tokens, one per (type, source, target) key."""

    def __init__(self, max_length: int, rule_name: str | None = None):
        self.max_length = max_length
        self.rule_name = rule_name
        self._tokens = index_tokens(max_length)
        self._taken: set[str] = set()
        self._by_key: dict[tuple[str, str, str], str] = {}

    def reserve(self, key: tuple[str, str, str], index: str) -> None:
        """Record an index that an edge already carries."""
        self._taken.add(index)
        self._by_key.setdefault(key, index)

    def index_for(self, key: tuple[str, str, str], edge: Edge) -> str:
        """Return the token for ``key``, generating a fresh one if it is new."""
        if key in self._by_key:
            return self._by_key[key]

        for token in self._tokens:
            if token not in self._taken:
                self._taken.add(token)
                self._by_key[key] = token
                return token

        capacity = index_capacity(self.max_length)
        raise CapacityExceededError(
            f"Rule needs more than {capacity} edge index tokens "
            f"(max index length {self.max_length})",
            rule=self.rule_name,
            element=edge.describe(),
            capacity=capacity,
        )


def assign_identifiers(graphs: RuleGraphs, max_index_length: int | None = None) -> None:
    """Name every unnamed node and index every unindexed edge of a rule, in place.

    Already named nodes and indexed edges are left alone, so running this
    twice is the same as running it once. If edge indices run out, node
    names are restored and no edge is indexed.

    Args:
        graphs: The resolved rule.
        max_index_length: Longest edge token to generate; defaults to config.

    Raises:
        CapacityExceededError: If the rule has more distinct unindexed edge
            keys than tokens are available.
    """
    if max_index_length is None:
        max_index_length = MAX_INDEX_LENGTH

    original_names = _node_names(graphs)
    scope = NameScope.of(graphs.lhs, graphs.rhs)
    _name_nodes(graphs.lhs.nodes(), scope)

    for nac in graphs.nacs:
        _name_nac_nodes(nac, nac.mappings + graphs.mappings)

    _propagate_mapped_names(graphs.mappings)
    _name_nodes(graphs.rhs.nodes(), scope)

    try:
        _index_edges(graphs, EdgeIndexer(max_index_length, graphs.name))
    except CapacityExceededError:
        for node, name in original_names:
            node.name = name
        raise


def assign_rule_identifiers(rule: Rule, max_index_length: int | None = None) -> RuleGraphs:
    """Resolve a rule and assign its identifiers.

    Raises:
        InvalidRuleError: If the rule does not resolve.
        CapacityExceededError: If edge index tokens run out.
    """
    graphs = build_rule_graphs(rule)
    assign_identifiers(graphs, max_index_length)
    return graphs


def _label(node: Node) -> str:
    return node.type.lower()


def _name_nodes(nodes: list[Node], scope: NameScope) -> None:
    for node in nodes:
        if not node.name:
            node.name = scope.unique_name(_label(node))
            LOGGER.debug("Named %s node %s", node.type, node.name)


def _propagate_mapped_names(mappings: list[ResolvedMapping]) -> None:
    """Give unnamed mapping images the name of their origin."""
    for mapping in mappings:
        if mapping.origin.name and not mapping.image.name:
            mapping.image.name = mapping.origin.name
            LOGGER.debug("Mapped name %s onto %s node", mapping.origin.name, mapping.image.type)


def _name_nac_nodes(nac: NacGraph, mappings: list[ResolvedMapping]) -> None:
    """Name NAC nodes after the LHS nodes they stand for, else freshly.

    Passes run over the whole conclusion: mapping images first, then
    non-forbidden nodes matched by type, then fresh names for the rest.
    """
    scope = NameScope.of(nac.conclusion)
    unnamed = [node for node in nac.conclusion.nodes() if not node.name]

    for lookup in (_mapped_nac_name, _typed_nac_name):
        for node in unnamed:
            if node.name or (lookup is _typed_nac_name and node.action == Action.FORBID):
                continue
            name = lookup(node, mappings, scope)
            if name is not None:
                scope.add(name)
                node.name = name
                LOGGER.debug("Named NAC %s node %s after LHS variable", node.type, name)

    for node in unnamed:
        if not node.name:
            node.name = scope.unique_name(_label(node))
            LOGGER.debug("Named NAC %s node %s", node.type, node.name)


def _mapped_nac_name(
    node: Node, mappings: list[ResolvedMapping], scope: NameScope
) -> str | None:
    for mapping in mappings:
        if mapping.image is node and mapping.origin.name and mapping.origin.name not in scope:
            return mapping.origin.name
    return None


def _typed_nac_name(
    node: Node, mappings: list[ResolvedMapping], scope: NameScope
) -> str | None:
    for mapping in mappings:
        if (
            mapping.image.type == node.type
            and mapping.origin.name
            and mapping.origin.name not in scope
        ):
            return mapping.origin.name
    return None


def _index_edges(graphs: RuleGraphs, indexer: EdgeIndexer) -> None:
    """Index LHS and RHS edges as one sequence, writing only once all fit."""
    keyed_edges = [
        (edge, _edge_key(graph, edge))
        for graph in (graphs.lhs, graphs.rhs)
        for edge in graph.edges()
    ]

    for edge, key in keyed_edges:
        if edge.index:
            indexer.reserve(key, edge.index)

    assigned = [
        (edge, indexer.index_for(key, edge)) for edge, key in keyed_edges if not edge.index
    ]
    for edge, index in assigned:
        edge.index = index
        LOGGER.debug("Indexed %s as %s", edge.describe(), index)


def _edge_key(graph: RuleGraph, edge: Edge) -> tuple[str, str, str]:
    return (edge.type, graph.source(edge).name, graph.target(edge).name)


def _node_names(graphs: RuleGraphs) -> list[tuple[Node, str | None]]:
    return [(node, node.name) for graph in graphs.graphs() for node in graph.nodes()]
