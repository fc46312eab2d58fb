"""Tests for mapping consistency validator."""

from henshin_cypher.schema.loader import parse_module
from henshin_cypher.validators.mappings import check_mappings
from henshin_cypher.validators.structure import resolve_rules


class TestCheckMappings:
    def test_consistent_mappings(self, bank_module):
        rules, _ = resolve_rules(bank_module)

        result = check_mappings(rules)

        assert result.issues == []

    def test_type_mismatch(self, examples_dir):
        rules, _ = resolve_rules(parse_module(examples_dir / "invalid" / "lint.yaml"))

        result = check_mappings(rules)

        mismatches = [w for w in result.warnings if w.code == "MAPPING_TYPE_MISMATCH"]
        assert len(mismatches) == 1
        assert mismatches[0].rule == "looseMapping"
        assert mismatches[0].details == {"origin_type": "Client", "image_type": "Account"}

    def test_unmapped_preserved_node(self, examples_dir):
        rules, _ = resolve_rules(parse_module(examples_dir / "invalid" / "lint.yaml"))

        result = check_mappings(rules)

        unmapped = [w for w in result.warnings if w.code == "UNMAPPED_PRESERVED_NODE"]
        assert len(unmapped) == 1
        assert unmapped[0].element == "node 'bank_r'"

    def test_nac_mappings_are_checked(self, rules_from_yaml):
        rules = rules_from_yaml(
            """
rules:
  r:
    lhs:
      nodes:
        - {id: bank, type: Bank, action: preserve}
    nacs:
      - nodes:
          - {id: client_n, type: Client, action: forbid}
        mappings:
          - {origin: bank, image: client_n}
"""
        )

        result = check_mappings(rules)

        assert [w.code for w in result.warnings] == ["MAPPING_TYPE_MISMATCH"]
