# document_renamer/K_tests/K12_test_rename_journal.py
"""
Tests for J_export.J01_rename_journal module.

Uses a temporary directory of real files.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from A_core.A02_exceptions import FileRenameError
from J_export.J01_rename_journal import (
    RenameJournal,
    RenameProposal,
    RenameStatus,
    apply_renames,
    journal_path_for,
    load_journal,
    plan_renames,
    rename_file,
    undo_renames,
    write_journal,
)


@pytest.fixture
def inbox(tmp_path) -> Path:
    directory = tmp_path / "inbox"
    directory.mkdir()
    for name in (
        "4-2-24 QME report.pdf",
        "01.15.2025 appt notice.pdf",
        "no date.txt",
        "2024.04.02 - letter.pdf",
        ".hidden",
    ):
        (directory / name).write_text(name, encoding="utf-8")
    (directory / "subdir").mkdir()
    return directory


def by_name(proposals):
    return {Path(p.source).name: p for p in proposals}


class TestPlan:
    def test_statuses(self, inbox, normalizer):
        proposals = by_name(plan_renames(inbox, normalizer))
        assert set(proposals) == {
            "4-2-24 QME report.pdf",
            "01.15.2025 appt notice.pdf",
            "no date.txt",
            "2024.04.02 - letter.pdf",
        }
        assert proposals["4-2-24 QME report.pdf"].status == RenameStatus.PLANNED
        assert Path(proposals["4-2-24 QME report.pdf"].target).name == "2024.04.02 - med-legal - QME report.pdf"
        assert proposals["no date.txt"].status == RenameStatus.SKIPPED
        assert proposals["no date.txt"].failed
        assert proposals["2024.04.02 - letter.pdf"].status == RenameStatus.UNCHANGED

    def test_dry_run_touches_nothing(self, inbox, normalizer):
        before = sorted(p.name for p in inbox.iterdir())
        plan_renames(inbox, normalizer)
        assert sorted(p.name for p in inbox.iterdir()) == before

    def test_journals_ignored(self, inbox, normalizer):
        journal_path_for(inbox).write_text("{}", encoding="utf-8")
        names = set(by_name(plan_renames(inbox, normalizer)))
        assert not any(name.startswith("rename_journal_") for name in names)

    def test_not_a_directory(self, tmp_path, normalizer):
        with pytest.raises(FileRenameError):
            plan_renames(tmp_path / "missing", normalizer)


class TestApply:
    def test_renames_files(self, inbox, normalizer):
        results = by_name(apply_renames(plan_renames(inbox, normalizer)))
        assert results["4-2-24 QME report.pdf"].status == RenameStatus.RENAMED
        assert (inbox / "2024.04.02 - med-legal - QME report.pdf").exists()
        assert (inbox / "2025.01.15 - notice - appointment.pdf").exists()
        assert not (inbox / "4-2-24 QME report.pdf").exists()
        assert results["no date.txt"].status == RenameStatus.SKIPPED

    def test_existing_target_not_overwritten(self, inbox, normalizer):
        existing = inbox / "2024.04.02 - med-legal - QME report.pdf"
        proposals = plan_renames(inbox, normalizer)
        existing.write_text("keep me", encoding="utf-8")

        results = by_name(apply_renames(proposals))
        failed = results["4-2-24 QME report.pdf"]
        assert failed.status == RenameStatus.FAILED
        assert "already exists" in failed.error
        assert existing.read_text(encoding="utf-8") == "keep me"
        assert (inbox / "4-2-24 QME report.pdf").exists()
        # The rest of the batch continues
        assert results["01.15.2025 appt notice.pdf"].status == RenameStatus.RENAMED

    def test_rename_file_missing_source(self, tmp_path):
        with pytest.raises(FileRenameError):
            rename_file(tmp_path / "gone.pdf", tmp_path / "new.pdf")


class TestJournal:
    def test_write_load_undo(self, inbox, normalizer, tmp_path):
        applied = apply_renames(plan_renames(inbox, normalizer))
        path = write_journal(applied, tmp_path / "journals" / "journal.json")

        journal = load_journal(path)
        assert len(journal.renamed) == 2

        restored = undo_renames(journal)
        assert all(r.status == RenameStatus.RESTORED for r in restored)
        assert (inbox / "4-2-24 QME report.pdf").exists()
        assert (inbox / "01.15.2025 appt notice.pdf").exists()
        assert not (inbox / "2024.04.02 - med-legal - QME report.pdf").exists()

    def test_undo_reports_missing_file(self, tmp_path):
        journal = RenameJournal(entries=[
            RenameProposal(
                source=str(tmp_path / "old.pdf"),
                target=str(tmp_path / "new.pdf"),
                status=RenameStatus.RENAMED,
            ),
        ])
        results = undo_renames(journal)
        assert results[0].status == RenameStatus.FAILED

    def test_load_missing(self, tmp_path):
        with pytest.raises(FileRenameError):
            load_journal(tmp_path / "absent.json")

    def test_load_malformed(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text('{"entries": [{"status": "exploded"}]}', encoding="utf-8")
        with pytest.raises(FileRenameError):
            load_journal(path)
