"""Schema layer for parsing and validating rule modules."""

from .errors import SchemaLoadError, SchemaValidationError
from .models import (
    Action,
    Attribute,
    Edge,
    Graph,
    Mapping,
    NestedCondition,
    Node,
    Rule,
    RuleModule,
)
from .loader import load_yaml, parse_module, parse_module_from_string

__all__ = [
    "SchemaLoadError",
    "SchemaValidationError",
    "Action",
    "Attribute",
    "Edge",
    "Graph",
    "Mapping",
    "NestedCondition",
    "Node",
    "Rule",
    "RuleModule",
    "load_yaml",
    "parse_module",
    "parse_module_from_string",
]
