"""Pydantic models for graph transformation rule modules."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator


class Action(str, Enum):
    """Role of a rule element in the rewrite."""

    CREATE = "create"
    DELETE = "delete"
    PRESERVE = "preserve"
    FORBID = "forbid"
    REQUIRE = "require"


def _normalize_action(value: Any) -> Any:
    """Accept PRESERVE, Preserve, ... as well as preserve."""
    if isinstance(value, str):
        return value.strip().lower()
    return value


class Attribute(BaseModel):
    """A name/value pair attached to a node."""

    name: str
    value: str

    @field_validator("value", mode="before")
    @classmethod
    def coerce_value(cls, value: Any) -> Any:
        """YAML scalars such as 0 or true are kept as their string form."""
        if isinstance(value, bool):
            return str(value).lower()
        if isinstance(value, (int, float)):
            return str(value)
        return value


class Node(BaseModel):
    """A typed node of a rule graph."""

    id: str | None = None
    name: str | None = None
    type: str | None = None
    attributes: list[Attribute] = Field(default_factory=list)
    action: Action | None = None

    @field_validator("action", mode="before")
    @classmethod
    def normalize_action(cls, value: Any) -> Any:
        return _normalize_action(value)

    @model_validator(mode="before")
    @classmethod
    def normalize_attributes(cls, data: Any) -> Any:
        """Normalize shorthand attribute syntax.

        Both ``attributes: {balance: 0}`` and ``attributes: [{balance: 0}]``
        become ``[{name: balance, value: 0}]``.
        """
        if not isinstance(data, dict):
            return data

        attributes = data.get("attributes")
        if isinstance(attributes, dict):
            data["attributes"] = [
                {"name": key, "value": value} for key, value in attributes.items()
            ]
        elif isinstance(attributes, list):
            normalized = []
            for attr in attributes:
                if isinstance(attr, dict) and "name" not in attr and len(attr) == 1:
                    key, value = next(iter(attr.items()))
                    normalized.append({"name": key, "value": value})
                else:
                    normalized.append(attr)
            data["attributes"] = normalized

        return data

    @property
    def ref(self) -> str | None:
        """The key edges and mappings use to refer to this node."""
        return self.id or self.name

    def describe(self) -> str:
        """Human-readable handle for error messages."""
        if self.name:
            return f"node '{self.name}'"
        if self.id:
            return f"node '{self.id}'"
        return f"unnamed {self.type or 'untyped'} node"


class Edge(BaseModel):
    """A typed, directed edge between two nodes of the same graph."""

    index: str | None = None
    type: str | None = None
    source: str
    target: str
    action: Action | None = None

    @field_validator("action", mode="before")
    @classmethod
    def normalize_action(cls, value: Any) -> Any:
        return _normalize_action(value)

    def describe(self) -> str:
        """Human-readable handle for error messages."""
        return f"edge {self.source}-[{self.type or '?'}]->{self.target}"


class Mapping(BaseModel):
    """Correspondence between an LHS node and its RHS or NAC counterpart."""

    origin: str
    image: str

    @model_validator(mode="before")
    @classmethod
    def normalize_mapping(cls, data: Any) -> Any:
        """Accept ``{origin_ref: image_ref}`` shorthand."""
        if isinstance(data, dict) and len(data) == 1:
            key, value = next(iter(data.items()))
            if key not in ("origin", "image"):
                return {"origin": key, "image": value}
        return data


class Graph(BaseModel):
    """An ordered set of nodes and edges."""

    nodes: list[Node] = Field(default_factory=list)
    edges: list[Edge] = Field(default_factory=list)


class NestedCondition(BaseModel):
    """A negative application condition."""

    name: str | None = None
    conclusion: Graph = Field(default_factory=Graph)
    mappings: list[Mapping] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def normalize_conclusion(cls, data: Any) -> Any:
        """Move ``nodes``/``edges`` given on the NAC itself under ``conclusion``."""
        if not isinstance(data, dict):
            return data

        if "conclusion" not in data and ("nodes" in data or "edges" in data):
            data["conclusion"] = {
                "nodes": data.pop("nodes", []),
                "edges": data.pop("edges", []),
            }
        return data


class Rule(BaseModel):
    """A graph transformation rule."""

    name: str = ""  # Will be set from the key
    lhs: Graph = Field(default_factory=Graph)
    rhs: Graph = Field(default_factory=Graph)
    nacs: list[NestedCondition] = Field(default_factory=list)
    mappings: list[Mapping] = Field(default_factory=list)

    def all_mappings(self) -> list[Mapping]:
        """Rule mappings followed by the mappings of every NAC."""
        mappings = list(self.mappings)
        for nac in self.nacs:
            mappings.extend(nac.mappings)
        return mappings


class RuleModule(BaseModel):
    """Root model for a rule module file."""

    name: str | None = None
    rules: dict[str, Rule] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def normalize_module(cls, data: Any) -> Any:
        """Set rule names from their keys."""
        if not isinstance(data, dict):
            return data

        rules = data.get("rules", {})
        if isinstance(rules, dict):
            for name, rule_data in rules.items():
                if rule_data is None:
                    rules[name] = rule_data = {}
                if isinstance(rule_data, dict):
                    rule_data["name"] = name

        return data

    def get_rule(self, name: str) -> Rule | None:
        """Get a rule by name."""
        return self.rules.get(name)

    def get_all_rule_names(self) -> list[str]:
        """Get all rule names in definition order."""
        return list(self.rules.keys())
