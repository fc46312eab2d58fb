"""Exceptions for structurally invalid rules."""


class RuleError(Exception):
    """Base exception for a rule that cannot be compiled.

    Attributes:
        code: Stable identifier used in reports.
        rule: Name of the offending rule, when known.
        element: Description of the offending node or edge, when known.
    """

    code = "RULE_ERROR"

    def __init__(self, message: str, rule: str | None = None, element: str | None = None):
        self.rule = rule
        self.element = element
        super().__init__(message)


class InvalidRuleError(RuleError):
    """Raised when a rule element has no type or refers to an unknown node."""

    code = "INVALID_RULE"
