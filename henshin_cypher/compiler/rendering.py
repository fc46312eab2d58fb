"""Shared pieces of Cypher syntax for nodes and relationships."""

from ..schema.models import Action, Edge, Node
from .errors import MissingActionError


def require_action(element: Node | Edge, where: str, rule_name: str | None = None) -> Action:
    """Return the element's action, which must be set at compile time.

    Raises:
        MissingActionError: If the element has no action.
    """
    if element.action is None:
        raise MissingActionError(
            f"{element.describe()} in {where} has no action",
            rule=rule_name,
            element=element.describe(),
        )
    return element.action


def relationship_type(edge: Edge) -> str:
    """Relationship types are upper-cased (``owns`` becomes ``OWNS``)."""
    return edge.type.upper()


def render_attributes(node: Node) -> str:
    """Render attributes as a property map, or an empty string if there are none."""
    if not node.attributes:
        return ""

    properties = ", ".join(
        f"{attr.name}: '{_quote(attr.value)}'" for attr in node.attributes
    )
    return "{" + properties + "}"


def anonymous_node(node: Node, with_attributes: bool = False) -> str:
    """Render ``(:Type)``, optionally with the node's property map."""
    attributes = render_attributes(node) if with_attributes else ""
    return f"(:{node.type}{attributes})"


def labelled_node(node: Node, with_attributes: bool = False) -> str:
    """Render ``(name:Type)``, optionally with the node's property map."""
    attributes = render_attributes(node) if with_attributes else ""
    return f"({node.name}:{node.type}{attributes})"


def node_reference(node: Node) -> str:
    """Render ``(name)``, a reference to an already bound variable."""
    return f"({node.name})"


def _quote(value: str) -> str:
    return value.replace("\\", "\\\\").replace("'", "\\'")
