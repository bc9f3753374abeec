#!/usr/bin/env python3
# document_renamer/rename_documents.py
"""
Command-line runner for the document renamer.

Usage:
    # Print canonical names
    python rename_documents.py "4-2-24 QME report" "01.15.2025 appt notice.pdf"

    # Machine-readable output
    python rename_documents.py "4-2-24 QME report" --json

    # Preview renames for every file in a directory (dry run)
    python rename_documents.py --dir ./inbox

    # Perform them and write an undo journal
    python rename_documents.py --dir ./inbox --apply

    # Restore the original names
    python rename_documents.py --undo ./inbox/rename_journal_20250115_093000.json

    # Options
    python rename_documents.py --dir ./inbox --century-policy always_2000 --missing-date today

Exit status is 1 when any name or file could not be processed.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from A_core.A00_logging import LogContext, configure_logging, get_logger
from A_core.A02_exceptions import ConfigurationError, FileRenameError, NoDateFoundError
from G_config.G01_renamer_config import CenturyPolicy, MissingDatePolicy, RenamerConfig, load_config
from H_pipeline.H01_identifier_pipeline import IdentifierNormalizer
from J_export.J01_rename_journal import (
    RenameProposal,
    apply_renames,
    journal_path_for,
    load_journal,
    plan_renames,
    undo_renames,
    write_journal,
)

logger = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        description="Normalize document descriptions to 'YYYY.MM.DD - type - description'.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "names",
        nargs="*",
        help="Descriptions or file names to normalize",
    )

    files_group = parser.add_argument_group("File Operations")
    mode = files_group.add_mutually_exclusive_group()
    mode.add_argument(
        "--dir", "-d",
        type=Path,
        help="Propose renames for every file in this directory",
    )
    mode.add_argument(
        "--undo",
        type=Path,
        metavar="JOURNAL",
        help="Restore the original names recorded in a journal",
    )
    files_group.add_argument(
        "--apply",
        action="store_true",
        help="Perform the renames proposed by --dir",
    )
    files_group.add_argument(
        "--journal",
        type=Path,
        help="Journal path for --apply (default: timestamped file in --dir)",
    )

    options_group = parser.add_argument_group("Normalization Options")
    options_group.add_argument(
        "--config", "-c",
        type=Path,
        help="YAML configuration file (default: G_config/config.yaml)",
    )
    options_group.add_argument(
        "--century-policy",
        choices=[p.value for p in CenturyPolicy],
        help="Expansion of two-digit years",
    )
    options_group.add_argument(
        "--missing-date",
        choices=[p.value for p in MissingDatePolicy],
        help="Fail, or use today's date, when no date is found",
    )

    output_group = parser.add_argument_group("Output Options")
    output_group.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON",
    )
    output_group.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Debug logging",
    )
    output_group.add_argument(
        "--log-dir",
        type=Path,
        help="Also write a log file to this directory",
    )

    return parser


def build_config(args: argparse.Namespace) -> RenamerConfig:
    """Load the YAML configuration and apply command-line overrides."""
    config = load_config(args.config)

    overrides: Dict[str, Any] = {}
    if args.century_policy:
        overrides["century_policy"] = CenturyPolicy(args.century_policy)
    if args.missing_date:
        overrides["missing_date_policy"] = MissingDatePolicy(args.missing_date)
    if overrides:
        config = config.with_overrides(**overrides)
    return config


def normalize_names(names: List[str], normalizer: IdentifierNormalizer) -> List[Dict[str, Optional[str]]]:
    """Normalize each name; failures are reported per item."""
    results: List[Dict[str, Optional[str]]] = []
    for name in names:
        try:
            results.append({"input": name, "output": normalizer.normalize_filename(name), "error": None})
        except NoDateFoundError as e:
            logger.info(f"{name!r}: {e.message}")
            results.append({"input": name, "output": None, "error": e.message})
    return results


def print_name_results(results: List[Dict[str, Optional[str]]], as_json: bool) -> None:
    if as_json:
        print(json.dumps(results, indent=2, ensure_ascii=False))
        return
    for result in results:
        if result["error"]:
            print(f"ERROR  {result['input']}: {result['error']}", file=sys.stderr)
        else:
            print(result["output"])


def print_proposals(proposals: List[RenameProposal], as_json: bool) -> None:
    if as_json:
        print(json.dumps([p.model_dump(mode="json") for p in proposals], indent=2, ensure_ascii=False))
        return
    for p in proposals:
        source = Path(p.source).name
        target = Path(p.target).name if p.target else ""
        line = f"{p.status.value:<9}  {source}"
        if target and target != source:
            line += f"  ->  {target}"
        if p.error:
            line += f"  ({p.error})"
        print(line)


def run_directory(args: argparse.Namespace, normalizer: IdentifierNormalizer) -> List[RenameProposal]:
    with LogContext(logger, f"plan renames in {args.dir}", level=logging.DEBUG):
        proposals = plan_renames(args.dir, normalizer)

    if args.apply:
        with LogContext(logger, f"apply renames in {args.dir}"):
            proposals = apply_renames(proposals)
        journal_path = args.journal or journal_path_for(args.dir)
        write_journal(proposals, journal_path)
        if not args.json:
            print(f"Journal: {journal_path}")
    return proposals


def main():
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    configure_logging(
        log_dir=args.log_dir,
        log_level=logging.DEBUG if args.verbose else logging.WARNING,
        enable_file_logging=args.log_dir is not None,
    )

    if not args.names and not args.dir and not args.undo:
        parser.error("give names to normalize, --dir or --undo")
    if args.apply and not args.dir:
        parser.error("--apply requires --dir")

    try:
        if args.undo:
            with LogContext(logger, f"undo {args.undo}"):
                proposals = undo_renames(load_journal(args.undo))
            print_proposals(proposals, args.json)
            if any(p.failed for p in proposals):
                sys.exit(1)
            return

        normalizer = IdentifierNormalizer(build_config(args))

        failed = False
        if args.names:
            results = normalize_names(args.names, normalizer)
            print_name_results(results, args.json)
            failed = any(r["error"] for r in results)
        if args.dir:
            proposals = run_directory(args, normalizer)
            print_proposals(proposals, args.json)
            failed = failed or any(p.failed for p in proposals)
    except (ConfigurationError, FileRenameError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
