"""
Advent of Code setup tool.

    setup_aoc.py year 2024
    setup_aoc.py puzzle 2024 1
    setup_aoc.py language 2024 1 Python
    setup_aoc.py validate --report outputs/tree_report.json

All folders live under <root>/src, where <root> is the directory holding
the '.project-root' marker unless --root is given.
A relative --report path is taken relative to <root> as well.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

from folder_manager import create_language_folder, create_puzzle_folder, create_year_folder
from input_validation import ValidationError
from paths import SOURCE_DIRNAME, get_path, get_project_root
from validate_tree import TreeError, collect_tree_errors, write_report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Advent of Code setup tool.")
    parser.add_argument("--root", default=None, help="project root (default: marker lookup)")
    sub = parser.add_subparsers(dest="command", required=True)

    year = sub.add_parser("year", help="create a year folder")
    year.add_argument("year")

    puzzle = sub.add_parser("puzzle", help="create a puzzle folder")
    puzzle.add_argument("year")
    puzzle.add_argument("day")

    language = sub.add_parser("language", help="create a language-specific solution folder")
    language.add_argument("year")
    language.add_argument("day")
    language.add_argument("language")

    validate = sub.add_parser("validate", help="validate the folder structure")
    validate.add_argument(
        "--report", default=None, help="write a JSON report (relative paths are under the root)"
    )

    return parser


def run_validate(base_dir: Path, report: Optional[Path]) -> int:
    checked, errors = collect_tree_errors(base_dir)

    if report is not None:
        report_path = write_report(report, base_dir, checked, errors)
        print(f"Report written to: {report_path}")

    if errors:
        print(f"ERROR: tree_invalid folders={checked} failures={len(errors)}")
        for e in errors:
            print(f"ERROR: {e}")
        return 1

    print(f"METRIC: tree_valid folders={checked} failures=0")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    root = Path(args.root) if args.root else get_project_root()

    try:
        base_dir = get_path(SOURCE_DIRNAME, create=True, root=root)

        if args.command == "year":
            path = create_year_folder(base_dir, args.year)
            print(f"✓ Created year folder: {path}")
        elif args.command == "puzzle":
            path = create_puzzle_folder(base_dir, args.year, args.day)
            print(f"✓ Created puzzle folder: {path}")
        elif args.command == "language":
            path = create_language_folder(base_dir, args.year, args.day, args.language)
            print(f"✓ Created {args.language} solution folder: {path}")
        else:
            report = root / args.report if args.report else None
            return run_validate(base_dir, report)
    except (ValidationError, TreeError) as e:
        print(f"ERROR: {e}")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
