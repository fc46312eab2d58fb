"""Results of compiling a rule module."""

from dataclasses import dataclass, field


@dataclass
class RuleResult:
    """Outcome of compiling a single rule."""

    rule: str
    query: str | None = None
    error_code: str | None = None
    error: str | None = None
    element: str | None = None
    duration_ms: float = 0.0

    @property
    def ok(self) -> bool:
        """Check if the rule compiled."""
        return self.error_code is None

    @property
    def is_empty(self) -> bool:
        """Check if the rule compiled to an empty query."""
        return self.ok and not self.query


@dataclass
class CompilationReport:
    """Per-rule results for one module, in rule order."""

    module: str | None = None
    results: list[RuleResult] = field(default_factory=list)

    @property
    def succeeded(self) -> list[RuleResult]:
        """Get the results of rules that compiled."""
        return [r for r in self.results if r.ok]

    @property
    def failed(self) -> list[RuleResult]:
        """Get the results of rules that failed."""
        return [r for r in self.results if not r.ok]

    @property
    def empty(self) -> list[RuleResult]:
        """Get the results of rules that compiled to an empty query."""
        return [r for r in self.results if r.is_empty]

    @property
    def has_failures(self) -> bool:
        """Check if any rule failed."""
        return len(self.failed) > 0

    @property
    def total_ms(self) -> float:
        """Total compile time across rules."""
        return sum(r.duration_ms for r in self.results)

    def get(self, rule: str) -> RuleResult | None:
        """Get the result for a rule by name."""
        for result in self.results:
            if result.rule == rule:
                return result
        return None

    def queries(self) -> dict[str, str]:
        """Map each compiled rule to its query text."""
        return {r.rule: r.query for r in self.succeeded}
