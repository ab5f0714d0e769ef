"""
PUZZLE TREE SCAFFOLDING

Creates the standard layout under an explicit base directory:

    <base>/<year>/README.md
    <base>/<year>/dayNN/README.md
    <base>/<year>/dayNN/input/.gitkeep
    <base>/<year>/dayNN/<language>/<template files>

Every raw identifier is parsed into its value object and every path is
built through SafePath before anything touches the disk. Existing files
are left untouched, so re-running a command is safe.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from identifiers import Day, Language, Year, parse_day, parse_language, parse_year
from language_templates import get_generic_template, get_language_template
from safe_path import SafePath

README_FILENAME = "README.md"
INPUT_DIRNAME = "input"
INPUT_PLACEHOLDER = ".gitkeep"
PUZZLE_URL = "https://adventofcode.com/{year}/day/{day}"

SUPPORTED_LANGUAGES = ("JavaScript", "Python", "Go", "Rust", "Java", "C++", "TypeScript")


# ---------------------------
# README bodies
# ---------------------------

def year_readme(year: Year) -> str:
    return f"# Advent of Code {year}\n\nSolutions for Advent of Code {year}.\n"


def puzzle_url(year: Year, day: Day) -> str:
    return PUZZLE_URL.format(year=year.value, day=day.value)


def puzzle_readme(year: Year, day: Day) -> str:
    return (
        f"# Day {day.value}\n"
        "\n"
        "## Problem\n"
        "\n"
        f"[Link to problem]({puzzle_url(year, day)})\n"
        "\n"
        "## Solutions\n"
        "\n"
        "Solutions can be implemented in multiple languages.\n"
    )


def _write_if_absent(target: SafePath, content: str) -> None:
    path = target.path
    if not path.exists():
        path.write_text(content, encoding="utf-8")


# ---------------------------
# Public API
# ---------------------------

def pad_day(day: Day | int | str) -> str:
    return parse_day(day).padded


def get_supported_languages() -> List[str]:
    return list(SUPPORTED_LANGUAGES)


def create_year_folder(base_dir: str | Path, year: Year | int | str) -> SafePath:
    year = parse_year(year)
    year_path = SafePath(base_dir, year)
    year_path.path.mkdir(parents=True, exist_ok=True)

    _write_if_absent(year_path.append(README_FILENAME), year_readme(year))
    return year_path


def create_puzzle_folder(
    base_dir: str | Path,
    year: Year | int | str,
    day: Day | int | str,
) -> SafePath:
    year = parse_year(year)
    day = parse_day(day)
    puzzle_path = SafePath(base_dir, year, day)
    puzzle_path.path.mkdir(parents=True, exist_ok=True)

    _write_if_absent(puzzle_path.append(README_FILENAME), puzzle_readme(year, day))

    input_path = puzzle_path.append(INPUT_DIRNAME)
    input_path.path.mkdir(exist_ok=True)
    _write_if_absent(input_path.append(INPUT_PLACEHOLDER), "")

    return puzzle_path


def create_language_folder(
    base_dir: str | Path,
    year: Year | int | str,
    day: Day | int | str,
    language: Language | str,
) -> SafePath:
    year = parse_year(year)
    day = parse_day(day)
    language = parse_language(language)
    language_path = SafePath(base_dir, year, day, language)
    language_path.path.mkdir(parents=True, exist_ok=True)

    template = get_language_template(language.normalized) or get_generic_template(language.value)
    for file in template:
        _write_if_absent(language_path.append(file.filename), file.content)

    return language_path


def year_folder_exists(base_dir: str | Path, year: Year | int | str) -> bool:
    return SafePath(base_dir, parse_year(year)).path.is_dir()


def puzzle_folder_exists(
    base_dir: str | Path,
    year: Year | int | str,
    day: Day | int | str,
) -> bool:
    return SafePath(base_dir, parse_year(year), parse_day(day)).path.is_dir()
