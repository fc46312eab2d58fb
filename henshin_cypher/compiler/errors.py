"""Exceptions raised while compiling rules to queries."""

from ..graph.errors import InvalidRuleError, RuleError

__all__ = [
    "RuleError",
    "InvalidRuleError",
    "MissingActionError",
    "CapacityExceededError",
]


class MissingActionError(RuleError):
    """Raised when a node or edge carries no action at compile time."""

    code = "MISSING_ACTION"


class CapacityExceededError(RuleError):
    """Raised when a rule needs more edge index tokens than can be generated."""

    code = "CAPACITY_EXCEEDED"

    def __init__(
        self,
        message: str,
        rule: str | None = None,
        element: str | None = None,
        capacity: int | None = None,
    ):
        self.capacity = capacity
        super().__init__(message, rule=rule, element=element)
