"""Mapping consistency validator."""

from ..graph.rule_graph import RuleGraphs
from ..schema.models import Action
from .base import ValidationResult


def check_mappings(rules: dict[str, RuleGraphs]) -> ValidationResult:
    """Check that mappings relate like nodes and cover preserved RHS nodes.

    - A mapping between nodes of different types cannot preserve identity.
    - An RHS node that is preserved (or deleted) but not the image of any
      mapping gets a fresh name instead of the LHS variable, so the compiled
      query loses track of it.

    Args:
        rules: Resolved rules by name.

    Returns:
        ValidationResult with warnings for inconsistent mappings.
    """
    result = ValidationResult()

    for name, graphs in rules.items():
        for mapping in graphs.all_mappings():
            if mapping.origin.type != mapping.image.type:
                result.add_warning(
                    code="MAPPING_TYPE_MISMATCH",
                    message=(
                        f"Mapping relates {mapping.origin.type} node to "
                        f"{mapping.image.type} node"
                    ),
                    rule=name,
                    element=mapping.origin.describe(),
                    origin_type=mapping.origin.type,
                    image_type=mapping.image.type,
                )

        images = {id(mapping.image) for mapping in graphs.mappings}
        for node in graphs.rhs.nodes():
            if node.action in (Action.PRESERVE, Action.DELETE) and id(node) not in images:
                result.add_warning(
                    code="UNMAPPED_PRESERVED_NODE",
                    message=f"RHS {node.describe()} is {node.action.value} but has no mapping from the LHS",
                    rule=name,
                    element=node.describe(),
                )

    return result
