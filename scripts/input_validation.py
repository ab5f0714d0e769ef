"""
=====================================================================
INPUT VALIDATION PRIMITIVES
=====================================================================

PURPOSE
-------
Shared gates used by every identifier value object before any
filesystem path is built from user input.

    - validate_number_in_range : numeric coercion + inclusive bounds
    - validate_no_path_traversal : rejects '/', '\\' and '..'

DESIGN PRINCIPLES
-----------------
- Fail-fast: first violated rule raises
- Strict parsing: "12abc", "1_5" and "1.5" are NOT numbers
- No recovery, no defaults, no silent correction
- No I/O

=====================================================================
"""

from __future__ import annotations

import math
import re


# ---------------------------
# Error taxonomy
# ---------------------------

class ValidationError(Exception):
    def __init__(self, kind: str, value: object, message: str):
        super().__init__(message)
        self.kind = kind
        self.value = value
        self.message = message


class RangeError(ValidationError):
    """Missing, non-numeric, or out-of-bounds value."""


class FormatError(ValidationError):
    """Value fails a type-specific shape check."""


class CharacterWhitelistError(ValidationError):
    """Value contains characters outside what its type allows."""


class PathTraversalError(ValidationError):
    """Resolved path escapes its base directory."""


# ---------------------------
# Regex
# ---------------------------

INTEGER_RE = re.compile(r"[+-]?[0-9]+")

PATH_TRAVERSAL_TOKENS = ("/", "\\", "..")


# ---------------------------
# Validators
# ---------------------------

def _coerce_integer(value: object, kind: str) -> int:
    if value is None or isinstance(value, bool):
        raise RangeError(kind, value, f'Invalid {kind}: "{value}" is not a valid number')

    if isinstance(value, int):
        return value

    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            raise RangeError(kind, value, f'Invalid {kind}: "{value}" is not a valid number')
        return int(value)

    if isinstance(value, str):
        text = value.strip()
        if not INTEGER_RE.fullmatch(text):
            raise RangeError(kind, value, f'Invalid {kind}: "{value}" is not a valid number')
        try:
            return int(text, 10)
        except ValueError as e:
            # digit count above the interpreter's int conversion limit
            raise RangeError(
                kind, value, f"Invalid {kind}: {len(text)}-digit value is out of range"
            ) from e

    raise RangeError(kind, value, f'Invalid {kind}: "{value}" is not a valid number')


def validate_number_in_range(value: object, minimum: int, maximum: int, kind: str) -> int:
    """
    Coerce `value` (int, integral float, or decimal string) and check
    minimum <= value <= maximum.

    Returns the integer; raises RangeError otherwise.
    """
    number = _coerce_integer(value, kind)

    if number < minimum or number > maximum:
        raise RangeError(
            kind,
            value,
            f"Invalid {kind}: {number} must be between {minimum} and {maximum}",
        )

    return number


def validate_no_path_traversal(value: object, kind: str) -> None:
    text = str(value).strip()
    if any(token in text for token in PATH_TRAVERSAL_TOKENS):
        raise CharacterWhitelistError(
            kind,
            value,
            f'Invalid {kind}: "{value}" contains illegal path characters',
        )
