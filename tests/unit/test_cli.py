"""
Tests for the command line interface.
"""

from __future__ import annotations

import pytest

from rotating_csrf.app_shell.cli import main
from rotating_csrf.core.services.derivation import derive_hash


def _run(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return int(exc_info.value.code or 0)


class TestGenerate:
    def test_generate_prints_token_and_hash(self, clean_env, capsys) -> None:
        clean_env.setenv("CSRF_SALTS", "thesalt")
        assert _run(["generate"]) == 0

        out = capsys.readouterr().out
        lines = dict(line.split(": ", 1) for line in out.strip().splitlines())
        assert len(lines["Token"]) == 32
        assert lines["Hash"] == derive_hash(lines["Token"], "thesalt")

    def test_generate_without_salts(self, clean_env, capsys) -> None:
        assert _run(["generate"]) == 1
        out = capsys.readouterr().out
        assert out.startswith("Token: ")
        assert "Hash" not in out


class TestValidate:
    def test_valid(self, clean_env, capsys) -> None:
        clean_env.setenv("CSRF_SALTS", "thesalt")
        h = derive_hash("thetoken", "thesalt")
        assert _run(["validate", "thetoken", h]) == 0
        assert "valid (salt index 0)" in capsys.readouterr().out

    def test_retired_salt(self, clean_env, capsys) -> None:
        clean_env.setenv("CSRF_SALTS", "newsalt,thesalt")
        h = derive_hash("thetoken", "thesalt")
        assert _run(["validate", "thetoken", h]) == 0
        out = capsys.readouterr().out
        assert "valid (salt index 1)" in out
        assert "retired salt" in out

    def test_invalid(self, clean_env, capsys) -> None:
        clean_env.setenv("CSRF_SALTS", "thesalt")
        assert _run(["validate", "thetoken", "bogus"]) == 1
        assert capsys.readouterr().out.strip() == "invalid"


class TestSalts:
    def test_reports_count_not_values(self, clean_env, capsys) -> None:
        clean_env.setenv("CSRF_SALTS", "secret-one,secret-two")
        assert _run(["salts"]) == 0
        out = capsys.readouterr().out
        assert "2 salt(s)" in out
        assert "secret-one" not in out

    def test_none_configured(self, clean_env, capsys) -> None:
        assert _run(["salts"]) == 1
        assert "0 salt(s)" in capsys.readouterr().out


class TestRulesOption:
    def test_custom_env_key(self, clean_env, tmp_path, capsys) -> None:
        rules = tmp_path / "rules.yaml"
        rules.write_text("csrf:\n  salts:\n    env_key: APP_SALTS\n")
        clean_env.setenv("APP_SALTS", "a,b,c")
        assert _run(["--rules", str(rules), "salts"]) == 0
        assert "3 salt(s) configured in APP_SALTS" in capsys.readouterr().out

    def test_missing_rules_file(self, clean_env, tmp_path) -> None:
        assert _run(["--rules", str(tmp_path / "missing.yaml"), "salts"]) == 1


class TestStartupCheck:
    @pytest.fixture
    def strict_rules(self, tmp_path):
        rules = tmp_path / "rules.yaml"
        rules.write_text("csrf:\n  salts:\n    require_at_startup: true\n")
        return str(rules)

    def test_generate_refuses_without_salts(self, clean_env, strict_rules, capsys) -> None:
        assert _run(["--rules", strict_rules, "generate"]) == 1
        captured = capsys.readouterr()
        assert "CRITICAL" in captured.err
        assert "CSRF_SALTS" in captured.err
        assert "Token" not in captured.out

    def test_validate_refuses_without_salts(self, clean_env, strict_rules, capsys) -> None:
        assert _run(["--rules", strict_rules, "validate", "thetoken", "x"]) == 1
        captured = capsys.readouterr()
        assert "CRITICAL" in captured.err
        assert "invalid" not in captured.out

    def test_generate_runs_when_salts_present(self, clean_env, strict_rules, capsys) -> None:
        clean_env.setenv("CSRF_SALTS", "thesalt")
        assert _run(["--rules", strict_rules, "generate"]) == 0
        assert "Hash: " in capsys.readouterr().out
