"""
=====================================================================
PUZZLE TREE VALIDATION
=====================================================================

PURPOSE
-------
Validate the SHAPE of an existing solution tree:

    <base>/<year>/README.md            H1 "Advent of Code <year>"
    <base>/<year>/dayNN/README.md      H1 "Day <n>" + link to puzzle
    <base>/<year>/dayNN/input/
    <base>/<year>/dayNN/<language>/    lowercase, at least one file

NON-GOALS
---------
- No checks on solution file contents
- No repair; the tree is never modified

DESIGN PRINCIPLES
-----------------
- Each folder check is fail-fast on its first violated invariant
- The tree walk collects one error per failing folder
- Folder names are parsed through the identifier value objects

=====================================================================
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from markdown_it import MarkdownIt

from folder_manager import INPUT_DIRNAME, README_FILENAME, puzzle_url
from identifiers import DAY_FOLDER_PREFIX, Day, Language, Year
from input_validation import ValidationError


class TreeError(Exception):
    def __init__(self, location: str, invariant_id: str, message: str):
        super().__init__(f"{location} [{invariant_id}]: {message}")
        self.location = location
        self.invariant_id = invariant_id
        self.message = message


@dataclass(frozen=True)
class ReadmeHeader:
    title: Optional[str]
    links: List[str]


# ---------------------------
# Markdown parsing
# ---------------------------

md = MarkdownIt("commonmark")

DAY_FOLDER_RE = re.compile(rf"{DAY_FOLDER_PREFIX}(?P<num>[0-9]{{2}})")


def read_readme(path: Path) -> ReadmeHeader:
    tokens = md.parse(path.read_text(encoding="utf-8"))
    title = None
    links: List[str] = []

    for i, t in enumerate(tokens):
        if title is None and t.type == "heading_open" and t.tag == "h1":
            title = tokens[i + 1].content.strip()

        if t.type == "inline" and t.children:
            for child in t.children:
                if child.type == "link_open":
                    href = child.attrGet("href")
                    if href:
                        links.append(str(href))

    return ReadmeHeader(title=title, links=links)


def _require_readme(folder: Path, location: str, prefix: str) -> ReadmeHeader:
    readme = folder / README_FILENAME
    if not readme.is_file():
        raise TreeError(location, f"{prefix}-README-MISSING", f"{README_FILENAME} not found")

    try:
        return read_readme(readme)
    except (UnicodeDecodeError, OSError) as e:
        raise TreeError(
            location, f"{prefix}-README-UNREADABLE", f"{README_FILENAME} could not be read: {e}"
        ) from e


def _visible_dirs(folder: Path) -> List[Path]:
    return sorted(p for p in folder.iterdir() if p.is_dir() and not p.name.startswith("."))


# ---------------------------
# Folder validators
# ---------------------------

def validate_year_folder(folder: Path) -> Year:
    location = folder.name
    try:
        year = Year(folder.name)
    except ValidationError as e:
        raise TreeError(location, "YR-NAME", str(e)) from e

    header = _require_readme(folder, location, "YR")
    expected = f"Advent of Code {year}"
    if header.title != expected:
        raise TreeError(
            location,
            "YR-README-TITLE",
            f"Expected H1 '{expected}', found '{header.title}'",
        )

    return year


def validate_puzzle_folder(folder: Path, year: Year) -> Day:
    location = f"{year}/{folder.name}"
    m = DAY_FOLDER_RE.fullmatch(folder.name)
    if m is None:
        raise TreeError(
            location,
            "DY-NAME",
            f"Expected folder name '{DAY_FOLDER_PREFIX}NN', found '{folder.name}'",
        )

    try:
        day = Day(m.group("num"))
    except ValidationError as e:
        raise TreeError(location, "DY-NAME", str(e)) from e

    if not (folder / INPUT_DIRNAME).is_dir():
        raise TreeError(location, "DY-INPUT-MISSING", f"'{INPUT_DIRNAME}' folder not found")

    header = _require_readme(folder, location, "DY")
    expected = f"Day {day.value}"
    if header.title != expected:
        raise TreeError(
            location,
            "DY-README-TITLE",
            f"Expected H1 '{expected}', found '{header.title}'",
        )

    url = puzzle_url(year, day)
    if url not in header.links:
        raise TreeError(location, "DY-README-LINK", f"Missing link to {url}")

    return day


def validate_language_folder(folder: Path, year: Year, day: Day) -> Language:
    location = f"{year}/{day.folder_name}/{folder.name}"
    try:
        language = Language(folder.name)
    except ValidationError as e:
        raise TreeError(location, "LG-NAME", str(e)) from e

    if folder.name != language.folder_name:
        raise TreeError(
            location,
            "LG-NAME-CASE",
            f"Language folder must be lowercase ('{language.folder_name}')",
        )

    if not any(p.is_file() for p in folder.iterdir()):
        raise TreeError(location, "LG-EMPTY", "Language folder contains no files")

    return language


# ---------------------------
# Tree walk
# ---------------------------

def collect_tree_errors(base_dir: Path) -> tuple[int, List[TreeError]]:
    """
    Walk <base>/<year>/<day>/<language> and return
    (folders_checked, errors). A folder that fails is not descended into.
    """
    errors: List[TreeError] = []
    checked = 0

    for year_dir in _visible_dirs(base_dir):
        checked += 1
        try:
            year = validate_year_folder(year_dir)
        except TreeError as e:
            errors.append(e)
            continue

        for day_dir in _visible_dirs(year_dir):
            checked += 1
            try:
                day = validate_puzzle_folder(day_dir, year)
            except TreeError as e:
                errors.append(e)
                continue

            for lang_dir in _visible_dirs(day_dir):
                if lang_dir.name == INPUT_DIRNAME:
                    continue
                checked += 1
                try:
                    validate_language_folder(lang_dir, year, day)
                except TreeError as e:
                    errors.append(e)

    return checked, errors


def write_report(path: Path, base_dir: Path, checked: int, errors: List[TreeError]) -> Path:
    report = {
        "summary": {
            "status": "OK" if not errors else "FAILED",
            "base_dir": str(base_dir),
            "folders_checked": checked,
            "failures": len(errors),
        },
        "errors": [
            {
                "location": e.location,
                "invariant_id": e.invariant_id,
                "message": e.message,
            }
            for e in errors
        ],
    }

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(report, indent=2), encoding="utf-8")
    return path
