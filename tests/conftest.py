"""Shared fixtures for tests."""

from pathlib import Path

import pytest

from henshin_cypher.graph.builder import build_rule_graphs
from henshin_cypher.schema.loader import parse_module, parse_module_from_string


@pytest.fixture
def examples_dir() -> Path:
    """Return the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def bank_module(examples_dir):
    """Return the parsed bank example module."""
    return parse_module(examples_dir / "bank.yaml")


@pytest.fixture
def owns_rule_yaml() -> str:
    """Return a module with one preserved Bank -OWNS-> Account edge."""
    return """
rules:
  owns:
    lhs:
      nodes:
        - {id: bank, type: Bank, action: preserve}
        - {id: account, type: Account, action: preserve}
      edges:
        - {type: OWNS, source: bank, target: account, action: preserve}
"""


@pytest.fixture
def owns_rule(owns_rule_yaml):
    """Return the parsed OWNS rule."""
    return parse_module_from_string(owns_rule_yaml).rules["owns"]


@pytest.fixture
def forbid_manager_yaml() -> str:
    """Return a module whose NAC forbids a manager for bank ``b``."""
    return """
rules:
  appointManager:
    lhs:
      nodes:
        - {name: b, type: Bank, action: preserve}
    rhs:
      nodes:
        - {id: bank_r, type: Bank, action: preserve}
    nacs:
      - name: hasManager
        conclusion:
          nodes:
            - {id: bank_n, type: Bank, action: preserve}
            - {id: manager_n, type: Manager, action: forbid}
          edges:
            - {type: MANAGES, source: bank_n, target: manager_n, action: forbid}
        mappings:
          - {origin: b, image: bank_n}
    mappings:
      - {origin: b, image: bank_r}
"""


@pytest.fixture
def forbid_manager_rule(forbid_manager_yaml):
    """Return the parsed rule with a manager NAC."""
    return parse_module_from_string(forbid_manager_yaml).rules["appointManager"]


@pytest.fixture
def rule_from_yaml():
    """Return a helper that parses a single-rule module and returns the rule."""

    def _parse(yaml_string: str, name: str | None = None):
        module = parse_module_from_string(yaml_string)
        if name is None:
            name = module.get_all_rule_names()[0]
        return module.rules[name]

    return _parse


@pytest.fixture
def graphs_from_yaml(rule_from_yaml):
    """Return a helper that parses a single-rule module and resolves it."""

    def _build(yaml_string: str, name: str | None = None):
        return build_rule_graphs(rule_from_yaml(yaml_string, name))

    return _build


@pytest.fixture
def rules_from_yaml():
    """Return a helper that parses a module and resolves all of its rules."""
    from henshin_cypher.validators.structure import resolve_rules

    def _resolve(yaml_string: str):
        rules, result = resolve_rules(parse_module_from_string(yaml_string))
        assert result.is_valid, result.errors
        return rules

    return _resolve
