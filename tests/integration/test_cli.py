"""Integration tests for CLI."""

import json

import pytest
from click.testing import CliRunner

from henshin_cypher.cli import main


@pytest.fixture
def runner():
    return CliRunner()


class TestCompileCommand:
    def test_compile_bank(self, runner, examples_dir):
        result = runner.invoke(main, ["compile", str(examples_dir / "bank.yaml")])

        assert result.exit_code == 0
        assert "Cypher Query for rule createAccount:" in result.output
        assert "MATCH (client1:Client)-[a:ACCOUNTS]->(account1:Account)\nDELETE a, account1" in result.output
        assert "Compiled 5 of 5 rule(s)" in result.output

    def test_compile_single_rule(self, runner, examples_dir):
        result = runner.invoke(
            main,
            ["compile", str(examples_dir / "bank.yaml"), "--rule", "addManager"],
        )

        assert result.exit_code == 0
        assert "WHERE NOT (b)-[:MANAGES]->(:Manager)" in result.output
        assert "createAccount" not in result.output

    def test_compile_json_output(self, runner, examples_dir):
        result = runner.invoke(
            main,
            ["compile", str(examples_dir / "bank.yaml"), "--format", "json"],
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["module"] == "bank"
        assert data["compiled"] == 5
        queries = {r["rule"]: r["query"] for r in data["rules"]}
        assert queries["createBank"] == "\nCREATE (bank1:Bank)"

    def test_compile_with_failures(self, runner, examples_dir):
        result = runner.invoke(
            main, ["compile", str(examples_dir / "invalid" / "mixed.yaml")]
        )

        # Failing rules are listed after the ones that compiled
        assert result.exit_code == 1
        assert "Cypher Query for rule deleteClient:" in result.output
        assert "INVALID_RULE: [brokenEdge]" in result.output
        assert "2 failed" in result.output

    def test_compile_missing_action(self, runner, examples_dir):
        result = runner.invoke(
            main, ["compile", str(examples_dir / "invalid" / "missing_action.yaml")]
        )

        assert result.exit_code == 1
        assert "MISSING_ACTION" in result.output

    def test_compile_index_length_too_small(self, runner, examples_dir):
        result = runner.invoke(
            main,
            ["compile", str(examples_dir / "bank.yaml"), "--max-index-length", "0"],
        )

        assert result.exit_code == 2

    def test_compile_strict_empty_rule(self, runner, tmp_path):
        module_file = tmp_path / "empty.yaml"
        module_file.write_text("rules:\n  nothing: {}\n")

        lenient = runner.invoke(main, ["compile", str(module_file)])
        strict = runner.invoke(main, ["compile", str(module_file), "--strict"])

        assert lenient.exit_code == 0
        assert "(empty)" in lenient.output
        assert strict.exit_code == 1

    def test_compile_invalid_yaml(self, runner, tmp_path):
        module_file = tmp_path / "broken.yaml"
        module_file.write_text("rules: [unclosed\n")

        result = runner.invoke(main, ["compile", str(module_file)])

        assert result.exit_code == 2

    def test_compile_schema_error(self, runner, tmp_path):
        module_file = tmp_path / "wrong.yaml"
        module_file.write_text(
            "rules:\n  r:\n    lhs:\n      nodes:\n        - {type: A, action: explode}\n"
        )

        result = runner.invoke(main, ["compile", str(module_file)])

        assert result.exit_code == 2
        assert "Schema validation error" in result.output

    def test_compile_nonexistent_file(self, runner):
        result = runner.invoke(main, ["compile", "/nonexistent/file.yaml"])

        assert result.exit_code == 2


class TestValidateCommand:
    def test_validate_valid_file(self, runner, examples_dir):
        result = runner.invoke(main, ["validate", str(examples_dir / "bank.yaml")])

        assert result.exit_code == 0
        assert "Validation passed" in result.output

    def test_validate_with_errors(self, runner, examples_dir):
        result = runner.invoke(
            main, ["validate", str(examples_dir / "invalid" / "dangling_edge.yaml")]
        )

        assert result.exit_code == 1
        assert "INVALID_RULE" in result.output

    def test_validate_with_warnings(self, runner, examples_dir):
        result = runner.invoke(
            main, ["validate", str(examples_dir / "invalid" / "lint.yaml")]
        )

        # Warnings don't cause failure by default
        assert result.exit_code == 0
        assert "EMPTY_NAC" in result.output
        assert "Validation passed with 3 warning(s)" in result.output

    def test_validate_strict_mode(self, runner, examples_dir):
        result = runner.invoke(
            main,
            ["validate", str(examples_dir / "invalid" / "lint.yaml"), "--strict"],
        )

        assert result.exit_code == 1

    def test_validate_json_output(self, runner, examples_dir):
        result = runner.invoke(
            main,
            ["validate", str(examples_dir / "invalid" / "lint.yaml"), "--format", "json"],
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["valid"] is True
        assert data["warning_count"] == 3
        assert {issue["rule"] for issue in data["issues"]} == {"looseMapping", "toothlessNac"}

    def test_validate_nonexistent_file(self, runner):
        result = runner.invoke(main, ["validate", "/nonexistent/file.yaml"])

        assert result.exit_code == 2


class TestCompareCommand:
    def test_compare_logs(self, runner, examples_dir):
        matrices = examples_dir / "matrices"
        result = runner.invoke(
            main,
            ["compare", str(matrices / "critical_pairs.log"), str(matrices / "chat_answer.log")],
        )

        assert result.exit_code == 0
        assert "Total found both: 3." in result.output
        assert "deleteAccount -> createAccount" in result.output
        assert "Total found only in candidate: 1." in result.output

    def test_compare_json_output(self, runner, examples_dir):
        matrices = examples_dir / "matrices"
        result = runner.invoke(
            main,
            [
                "compare",
                str(matrices / "critical_pairs.log"),
                str(matrices / "critical_pairs.log"),
                "--format",
                "json",
            ],
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["agrees"] is True
        assert data["only_reference"] == []
        assert len(data["both"]) == 4

    def test_compare_missing_section(self, runner, examples_dir, tmp_path):
        empty = tmp_path / "empty.log"
        empty.write_text("nothing to see\n")

        result = runner.invoke(
            main,
            ["compare", str(examples_dir / "matrices" / "critical_pairs.log"), str(empty)],
        )

        assert result.exit_code == 2
        assert "Matrix error" in result.output

    def test_compare_custom_keyword(self, runner, tmp_path):
        reference = tmp_path / "reference.log"
        reference.write_text("Dependencies:\n1 | r\n")

        result = runner.invoke(
            main,
            ["compare", str(reference), str(reference), "--keyword", "Dependencies"],
        )

        assert result.exit_code == 0
        assert "Total found both: 1." in result.output


class TestMainCommand:
    def test_help(self, runner):
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "compile" in result.output
        assert "compare" in result.output

    def test_log_level_option(self, runner, examples_dir):
        result = runner.invoke(
            main,
            ["--log-level", "error", "compile", str(examples_dir / "bank.yaml")],
        )

        assert result.exit_code == 0
