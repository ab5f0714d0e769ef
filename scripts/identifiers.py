"""
Identifier Value Objects

Purpose:
- Turn raw CLI / caller input into Year, Day and Language instances
  whose validity is guaranteed by construction
- Expose the canonical folder name used as a path segment

Design Constraints:
- Instances are frozen; a constructed instance is permanently valid
- Raw input (str or int) is parsed once in __post_init__; the stored
  value is always the canonical form
- Every type is os.PathLike, so it can be handed straight to SafePath
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from input_validation import (
    CharacterWhitelistError,
    FormatError,
    validate_no_path_traversal,
    validate_number_in_range,
)

YEAR_MIN = 2015
YEAR_MAX = 2099
DAY_MIN = 1
DAY_MAX = 25
DAY_FOLDER_PREFIX = "day"
MAX_LANGUAGE_LENGTH = 50

YEAR_FORMAT_RE = re.compile(r"[0-9]{4}")
LANGUAGE_CHARSET_RE = re.compile(r"[A-Za-z0-9+#_-]+")


@dataclass(frozen=True)
class Year:
    value: int

    def __post_init__(self):
        raw = self.value
        year = validate_number_in_range(raw, YEAR_MIN, YEAR_MAX, "year")

        if not YEAR_FORMAT_RE.fullmatch(str(raw).strip()):
            raise FormatError(
                "year", raw, f'Invalid year format: "{raw}" must be exactly 4 digits'
            )

        validate_no_path_traversal(raw, "year")
        object.__setattr__(self, "value", year)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"{self.value:04d}"

    def __fspath__(self) -> str:
        return self.folder_name

    @property
    def folder_name(self) -> str:
        return str(self)


@dataclass(frozen=True)
class Day:
    value: int

    def __post_init__(self):
        raw = self.value
        day = validate_number_in_range(raw, DAY_MIN, DAY_MAX, "day")
        validate_no_path_traversal(raw, "day")
        object.__setattr__(self, "value", day)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return self.padded

    def __fspath__(self) -> str:
        return self.folder_name

    @property
    def padded(self) -> str:
        """Two-digit form, e.g. "01", "15"."""
        return f"{self.value:02d}"

    @property
    def folder_name(self) -> str:
        return f"{DAY_FOLDER_PREFIX}{self.padded}"


@dataclass(frozen=True)
class Language:
    """
    Programming-language label, e.g. "Python", "C++", "F#".

    Equality ignores case: Language("Python") == Language("python").
    """

    value: str = field(compare=False)
    normalized: str = field(init=False)

    def __post_init__(self):
        raw = self.value
        if not isinstance(raw, str) or not raw.strip():
            raise FormatError("language", raw, "Invalid language: must be a non-empty string")

        trimmed = raw.strip()

        if not LANGUAGE_CHARSET_RE.fullmatch(trimmed):
            raise CharacterWhitelistError(
                "language",
                raw,
                f'Invalid language: "{raw}" contains illegal characters. '
                "Only alphanumeric, +, #, -, and _ are allowed",
            )

        if trimmed.startswith((".", "-")):
            raise CharacterWhitelistError(
                "language", raw, f'Invalid language: "{raw}" cannot start with . or -'
            )

        if len(trimmed) > MAX_LANGUAGE_LENGTH:
            raise FormatError(
                "language",
                raw,
                f'Invalid language: "{raw}" is too long (max {MAX_LANGUAGE_LENGTH} characters)',
            )

        object.__setattr__(self, "value", trimmed)
        object.__setattr__(self, "normalized", trimmed.lower())

    def __str__(self) -> str:
        return self.value

    def __fspath__(self) -> str:
        return self.folder_name

    @property
    def folder_name(self) -> str:
        return self.normalized


# ---------------------------
# Boundary helpers
# ---------------------------

def parse_year(value: Year | int | str) -> Year:
    return value if isinstance(value, Year) else Year(value)


def parse_day(value: Day | int | str) -> Day:
    return value if isinstance(value, Day) else Day(value)


def parse_language(value: Language | str) -> Language:
    return value if isinstance(value, Language) else Language(value)
