"""Tests for rule structure validator."""

from henshin_cypher.schema.loader import parse_module, parse_module_from_string
from henshin_cypher.validators.structure import check_rule_structure, resolve_rules


class TestResolveRules:
    def test_returns_resolved_rules(self, bank_module):
        rules, result = resolve_rules(bank_module)

        assert list(rules) == bank_module.get_all_rule_names()
        assert result.is_valid

    def test_failing_rules_are_left_out(self, examples_dir):
        module = parse_module(examples_dir / "invalid" / "mixed.yaml")

        rules, result = resolve_rules(module)

        assert list(rules) == ["createBank", "deleteClient"]
        assert len(result.errors) == 2

    def test_does_not_name_nodes(self, bank_module):
        rules, _ = resolve_rules(bank_module)

        assert rules["createAccount"].lhs.find("bank").name is None


class TestCheckRuleStructure:
    def test_dangling_mapping(self):
        module = parse_module_from_string(
            """
rules:
  r:
    lhs:
      nodes:
        - {id: bank, type: Bank, action: preserve}
    mappings:
      - {origin: bank, image: nowhere}
"""
        )

        result = check_rule_structure(module)

        assert result.errors[0].code == "INVALID_RULE"
        assert "nowhere" in result.errors[0].message

    def test_missing_edge_action(self):
        module = parse_module_from_string(
            """
rules:
  r:
    lhs:
      nodes:
        - {id: a, type: A, action: preserve}
        - {id: b, type: B, action: preserve}
      edges:
        - {type: link, source: a, target: b}
"""
        )

        result = check_rule_structure(module)

        assert result.errors[0].code == "MISSING_ACTION"
        assert result.errors[0].element == "edge a-[link]->b"
