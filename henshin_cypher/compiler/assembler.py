"""Query assembly and module-level compilation."""

import time

from ..graph.builder import build_rule_graphs
from ..graph.errors import RuleError
from ..graph.rule_graph import RuleGraphs
from ..logger import LOGGER
from ..schema.models import Rule, RuleModule
from .match import build_match_clause
from .mutation import build_create_clause, build_delete_clause
from .naming import assign_identifiers
from .rendering import require_action
from .report import CompilationReport, RuleResult
from .where_not import build_where_not_clause


def check_actions(graphs: RuleGraphs) -> None:
    """Verify every node and edge of a rule carries an action.

    Raises:
        MissingActionError: For the first element without one.
    """
    for graph in graphs.graphs():
        for node in graph.nodes():
            require_action(node, graph.label, graphs.name)
        for edge in graph.edges():
            require_action(edge, graph.label, graphs.name)


def render_rule(graphs: RuleGraphs) -> str:
    """Render an identifier-assigned rule as query text.

    Clauses appear in the order MATCH, WHERE NOT, DELETE, CREATE; empty ones
    are left out. The rule is only read.

    Raises:
        MissingActionError: If an element has no action.
    """
    check_actions(graphs)
    return "".join(
        [
            build_match_clause(graphs.lhs, graphs.name),
            build_where_not_clause(graphs.nacs, graphs.name),
            build_delete_clause(graphs.lhs, graphs.name),
            build_create_clause(graphs.rhs, graphs.name),
        ]
    )


def compile_rule(rule: Rule, max_index_length: int | None = None) -> str:
    """Assign identifiers to a rule and compile it to query text.

    Args:
        rule: The rule to compile; its unnamed nodes and edges are named in place.
        max_index_length: Longest edge index token to generate.

    Returns:
        The query text, possibly empty.

    Raises:
        InvalidRuleError: If the rule does not resolve.
        MissingActionError: If an element has no action.
        CapacityExceededError: If edge index tokens run out.
    """
    graphs = build_rule_graphs(rule)
    check_actions(graphs)
    assign_identifiers(graphs, max_index_length)
    return render_rule(graphs)


def compile_module(
    module: RuleModule,
    rule_names: list[str] | None = None,
    max_index_length: int | None = None,
) -> CompilationReport:
    """Compile the rules of a module one by one.

    A rule that fails is recorded in the report and the remaining rules are
    still compiled.

    Args:
        module: The rule module.
        rule_names: Only compile these rules, in this order. Unknown names
            are reported as failures.
        max_index_length: Longest edge index token to generate.

    Returns:
        CompilationReport with one result per rule.
    """
    report = CompilationReport(module=module.name)
    names = rule_names if rule_names is not None else module.get_all_rule_names()

    for name in names:
        rule = module.get_rule(name)
        if rule is None:
            LOGGER.warning("Rule %s is not defined in module %s", name, module.name)
            report.results.append(
                RuleResult(
                    rule=name,
                    error_code="UNKNOWN_RULE",
                    error=f"Rule '{name}' is not defined",
                )
            )
            continue

        started = time.perf_counter()
        try:
            query = compile_rule(rule, max_index_length)
        except RuleError as e:
            elapsed = (time.perf_counter() - started) * 1000
            LOGGER.warning("Rule %s failed: %s: %s", name, e.code, e)
            report.results.append(
                RuleResult(
                    rule=name,
                    error_code=e.code,
                    error=str(e),
                    element=e.element,
                    duration_ms=elapsed,
                )
            )
            continue

        elapsed = (time.perf_counter() - started) * 1000
        LOGGER.info("Compiled rule %s in %.2f ms", name, elapsed)
        report.results.append(RuleResult(rule=name, query=query, duration_ms=elapsed))

    return report
