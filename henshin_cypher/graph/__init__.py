"""Graph layer for resolving rules into networkx-backed views."""

from .errors import InvalidRuleError, RuleError
from .rule_graph import NacGraph, ResolvedMapping, RuleGraph, RuleGraphs
from .builder import build_graph, build_rule_graphs

__all__ = [
    "InvalidRuleError",
    "RuleError",
    "NacGraph",
    "ResolvedMapping",
    "RuleGraph",
    "RuleGraphs",
    "build_graph",
    "build_rule_graphs",
]
