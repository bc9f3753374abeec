# document_renamer/J_export/J01_rename_journal.py
"""
Directory renames with an undo journal.

Renames are planned first (a dry run that never touches the disk), then
applied. Every applied batch can be written to a JSON journal; undoing a
journal restores the original names in reverse order.

An existing target is never overwritten: the entry is marked failed and
the batch continues.

Example:
    >>> proposals = plan_renames("inbox", IdentifierNormalizer())
    >>> applied = apply_renames(proposals)
    >>> write_journal(applied, "inbox/rename_journal_20250115_093000.json")
    >>> undo_renames(load_journal("inbox/rename_journal_20250115_093000.json"))
"""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from A_core.A00_logging import get_logger
from A_core.A02_exceptions import FileRenameError, NoDateFoundError

if TYPE_CHECKING:
    from H_pipeline.H01_identifier_pipeline import IdentifierNormalizer

logger = get_logger(__name__)

JOURNAL_PREFIX = "rename_journal_"


class RenameStatus(str, Enum):
    PLANNED = "planned"
    UNCHANGED = "unchanged"
    SKIPPED = "skipped"
    RENAMED = "renamed"
    RESTORED = "restored"
    FAILED = "failed"


class RenameProposal(BaseModel):
    """One file and the name it should get."""

    source: str
    target: Optional[str] = None
    status: RenameStatus = RenameStatus.PLANNED
    error: Optional[str] = None

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def failed(self) -> bool:
        return self.status in (RenameStatus.FAILED, RenameStatus.SKIPPED)


class RenameJournal(BaseModel):
    created_at: datetime = Field(default_factory=datetime.now)
    entries: List[RenameProposal] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    @property
    def renamed(self) -> List[RenameProposal]:
        return [e for e in self.entries if e.status == RenameStatus.RENAMED]


def journal_path_for(directory: Union[str, Path]) -> Path:
    """Timestamped journal path inside directory."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return Path(directory) / f"{JOURNAL_PREFIX}{timestamp}.json"


def plan_renames(
    directory: Union[str, Path],
    normalizer: "IdentifierNormalizer",
) -> List[RenameProposal]:
    """
    Propose a canonical name for every regular file in directory.

    Hidden files and rename journals are ignored. Files without a date are
    returned as skipped; nothing on disk is changed.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise FileRenameError("Not a directory", file_path=str(directory))

    proposals: List[RenameProposal] = []
    for path in sorted(directory.iterdir()):
        if not path.is_file() or path.name.startswith(".") or path.name.startswith(JOURNAL_PREFIX):
            continue
        try:
            new_name = normalizer.normalize_filename(path.name)
        except NoDateFoundError as e:
            logger.info(f"Skipping {path.name}: {e.message}")
            proposals.append(RenameProposal(source=str(path), status=RenameStatus.SKIPPED, error=str(e)))
            continue

        target = path.with_name(new_name)
        status = RenameStatus.UNCHANGED if new_name == path.name else RenameStatus.PLANNED
        proposals.append(RenameProposal(source=str(path), target=str(target), status=status))

    logger.debug(f"Planned {len(proposals)} file(s) in {directory}")
    return proposals


def rename_file(source: Union[str, Path], target: Union[str, Path]) -> None:
    """
    Rename source to target without overwriting.

    Raises:
        FileRenameError: If the source is missing, the target exists, or the
            operating system refuses the rename.
    """
    source, target = Path(source), Path(target)
    if not source.exists():
        raise FileRenameError("Source file not found", file_path=str(source), target_path=str(target))
    # A case-only rename on a case-insensitive filesystem resolves to the same file
    if target.exists() and not source.samefile(target):
        raise FileRenameError("Target already exists", file_path=str(source), target_path=str(target))
    try:
        source.rename(target)
    except OSError as e:
        raise FileRenameError(f"Rename failed: {e}", file_path=str(source), target_path=str(target)) from e


def apply_renames(proposals: Iterable[RenameProposal]) -> List[RenameProposal]:
    """Perform planned renames and return the proposals with their outcome."""
    results: List[RenameProposal] = []
    for proposal in proposals:
        if proposal.status != RenameStatus.PLANNED:
            results.append(proposal)
            continue
        try:
            rename_file(proposal.source, proposal.target)
        except FileRenameError as e:
            logger.error(str(e))
            results.append(proposal.model_copy(update={"status": RenameStatus.FAILED, "error": str(e)}))
            continue
        logger.info(f"Renamed {Path(proposal.source).name} -> {Path(proposal.target).name}")
        results.append(proposal.model_copy(update={"status": RenameStatus.RENAMED}))
    return results


def write_journal(proposals: Iterable[RenameProposal], path: Union[str, Path]) -> Path:
    """Write a batch outcome as a JSON journal."""
    path = Path(path)
    journal = RenameJournal(entries=list(proposals))
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(journal.model_dump_json(indent=2))
    logger.info(f"Journal written: {path} ({len(journal.renamed)} rename(s))")
    return path


def load_journal(path: Union[str, Path]) -> RenameJournal:
    """
    Raises:
        FileRenameError: If the journal cannot be read or is malformed.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return RenameJournal.model_validate_json(f.read())
    except OSError as e:
        raise FileRenameError(f"Cannot read journal: {e}", file_path=str(path)) from e
    except ValidationError as e:
        raise FileRenameError(f"Malformed journal: {e.error_count()} error(s)", file_path=str(path)) from e


def undo_renames(journal: RenameJournal) -> List[RenameProposal]:
    """Restore original names of every renamed entry, newest first."""
    results: List[RenameProposal] = []
    for entry in reversed(journal.renamed):
        try:
            rename_file(entry.target, entry.source)
        except FileRenameError as e:
            logger.error(str(e))
            results.append(entry.model_copy(update={"status": RenameStatus.FAILED, "error": str(e)}))
            continue
        logger.info(f"Restored {Path(entry.source).name}")
        results.append(entry.model_copy(update={"status": RenameStatus.RESTORED}))
    return results


__all__ = [
    "RenameStatus",
    "RenameProposal",
    "RenameJournal",
    "JOURNAL_PREFIX",
    "journal_path_for",
    "plan_renames",
    "rename_file",
    "apply_renames",
    "write_journal",
    "load_journal",
    "undo_renames",
]
