"""
=====================================================================
SAFE PATH CONSTRUCTION
=====================================================================

PURPOSE
-------
Build filesystem paths from untrusted segments while guaranteeing
the result stays inside a trusted base directory.

RULES
-----
1. Base and candidate are made absolute and normalized independently
   ('.' and '..' collapsed; symlinks are NOT resolved)
2. Candidate must equal base, or start with base + separator
3. Absolute segments override the join and are therefore caught by (2)
4. append() re-validates from scratch against the original base
5. No path that failed (2) is ever exposed

NON-GOALS
---------
- No filesystem access
- No symlink resolution

=====================================================================
"""

from __future__ import annotations

import os
from dataclasses import FrozenInstanceError
from pathlib import Path
from typing import Union

from input_validation import PathTraversalError

Segment = Union[str, os.PathLike]


def _within_base(resolved: str, base: str) -> bool:
    prefix = base if base.endswith(os.sep) else base + os.sep
    return resolved == base or resolved.startswith(prefix)


class SafePath:
    """
    Absolute path guaranteed to be `base_path` or one of its descendants.

        SafePath("/base", "2024", "day01")       -> /base/2024/day01
        SafePath("/base", "..", "etc")           -> PathTraversalError
    """

    __slots__ = ("_base_path", "_resolved_path")

    def __init__(self, base_path: Segment, *segments: Segment):
        base = os.path.abspath(os.fspath(base_path))
        candidate = os.path.join(base, *(os.fspath(s) for s in segments))
        resolved = os.path.abspath(candidate)

        if not _within_base(resolved, base):
            raise PathTraversalError(
                "path",
                candidate,
                f'Path traversal detected: resolved path "{resolved}" '
                f'is outside base path "{base}"',
            )

        object.__setattr__(self, "_base_path", base)
        object.__setattr__(self, "_resolved_path", resolved)

    def __setattr__(self, name, value):
        raise FrozenInstanceError(f"cannot assign to field '{name}'")

    def __delattr__(self, name):
        raise FrozenInstanceError(f"cannot delete field '{name}'")

    # ---------------------------
    # Accessors
    # ---------------------------

    @property
    def value(self) -> str:
        return self._resolved_path

    @property
    def base_path(self) -> str:
        return self._base_path

    @property
    def path(self) -> Path:
        return Path(self._resolved_path)

    @property
    def relative(self) -> str:
        return os.path.relpath(self._resolved_path, self._base_path)

    def append(self, *segments: Segment) -> SafePath:
        return SafePath(self._base_path, self.relative, *segments)

    # ---------------------------
    # Protocols
    # ---------------------------

    def __fspath__(self) -> str:
        return self._resolved_path

    def __str__(self) -> str:
        return self._resolved_path

    def __repr__(self) -> str:
        return f"SafePath({self._resolved_path!r}, base={self._base_path!r})"

    def __eq__(self, other):
        if not isinstance(other, SafePath):
            return NotImplemented
        return self._resolved_path == other._resolved_path

    def __hash__(self):
        return hash(self._resolved_path)
