# document_renamer/K_tests/K15_test_cli.py
"""
Tests for the rename_documents command-line runner.
"""

from __future__ import annotations

import json
import sys

import pytest

import rename_documents
from G_config.G01_renamer_config import CONFIG_PATH_ENV


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch):
    monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)


def run_cli(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["rename_documents.py", *args])
    rename_documents.main()


class TestNames:
    def test_prints_canonical_names(self, monkeypatch, capsys):
        run_cli(monkeypatch, "01.15.2025 appt notice", "4-2-24 QME report.pdf")
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "2025.01.15 - notice - appointment",
            "2024.04.02 - med-legal - QME report.pdf",
        ]

    def test_failure_exit_code(self, monkeypatch, capsys):
        with pytest.raises(SystemExit) as exc_info:
            run_cli(monkeypatch, "01.15.2025 appt notice", "no date here")
        assert exc_info.value.code == 1
        assert "no date found" in capsys.readouterr().err

    def test_json_output(self, monkeypatch, capsys):
        with pytest.raises(SystemExit):
            run_cli(monkeypatch, "--json", "4-2-24 QME report", "undated")
        results = json.loads(capsys.readouterr().out)
        assert results[0]["output"] == "2024.04.02 - med-legal - QME report"
        assert results[1]["output"] is None
        assert results[1]["error"] == "no date found"

    def test_century_policy_override(self, monkeypatch, capsys):
        run_cli(monkeypatch, "--century-policy", "always_2000", "1/2/85 report")
        assert capsys.readouterr().out.strip() == "2085.01.02 - medical - report"

    def test_missing_date_today(self, monkeypatch, capsys):
        run_cli(monkeypatch, "--missing-date", "today", "PT report")
        assert capsys.readouterr().out.strip().endswith(" - medical - PT report")


class TestArguments:
    def test_nothing_to_do(self, monkeypatch):
        with pytest.raises(SystemExit) as exc_info:
            run_cli(monkeypatch)
        assert exc_info.value.code == 2

    def test_apply_requires_dir(self, monkeypatch):
        with pytest.raises(SystemExit) as exc_info:
            run_cli(monkeypatch, "--apply", "x")
        assert exc_info.value.code == 2

    def test_bad_config_file(self, monkeypatch, tmp_path, capsys):
        config = tmp_path / "bad.yaml"
        config.write_text("renamer:\n  century_pivot: 500\n", encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            run_cli(monkeypatch, "--config", str(config), "4-2-24 QME report")
        assert exc_info.value.code == 1
        assert "century_pivot" in capsys.readouterr().err


class TestDirectory:
    def test_dry_run_apply_and_undo(self, monkeypatch, tmp_path, capsys):
        (tmp_path / "4-2-24 QME report.pdf").write_text("x", encoding="utf-8")
        journal = tmp_path.parent / f"{tmp_path.name}_journal.json"

        run_cli(monkeypatch, "--dir", str(tmp_path))
        assert "2024.04.02 - med-legal - QME report.pdf" in capsys.readouterr().out
        assert (tmp_path / "4-2-24 QME report.pdf").exists()

        run_cli(monkeypatch, "--dir", str(tmp_path), "--apply", "--journal", str(journal))
        assert (tmp_path / "2024.04.02 - med-legal - QME report.pdf").exists()
        assert journal.exists()

        run_cli(monkeypatch, "--undo", str(journal))
        assert (tmp_path / "4-2-24 QME report.pdf").exists()
        assert not (tmp_path / "2024.04.02 - med-legal - QME report.pdf").exists()

    def test_skipped_file_fails_run(self, monkeypatch, tmp_path):
        (tmp_path / "undated.pdf").write_text("x", encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            run_cli(monkeypatch, "--dir", str(tmp_path))
        assert exc_info.value.code == 1
