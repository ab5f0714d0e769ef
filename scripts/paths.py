"""
Project Root + Solution Tree Location

Purpose:
- Locate the checkout that holds the Advent of Code solution tree
  (<root>/src) without depending on the current working directory
- Give the CLI one explicit base directory to hand to SafePath

Design Constraints:
- Root = nearest ancestor of this file carrying '.project-root',
  unless the caller names one (--root, tests)
- A missing tree is an error unless creation is asked for (create=True)
- Anything other than a directory at <root>/<name> is an error
"""

from pathlib import Path
from functools import lru_cache

PROJECT_MARKER = ".project-root"
SOURCE_DIRNAME = "src"


@lru_cache(maxsize=1)
def get_project_root() -> Path:
    """Walk up from scripts/ to the directory holding PROJECT_MARKER."""
    start = Path(__file__).resolve().parent

    for parent in [start] + list(start.parents):
        if (parent / PROJECT_MARKER).is_file():
            return parent

    raise FileNotFoundError(
        f"Project root not found (expected '{PROJECT_MARKER}' marker file)"
    )


def get_path(name: str, *, create: bool = False, root: Path | None = None) -> Path:
    """
    Return <root>/<name> as a directory, e.g. get_path(SOURCE_DIRNAME).

    With create=True the directory (and parents) is made first.
    """
    base = Path(root) if root is not None else get_project_root()
    path = base / name

    if create:
        path.mkdir(parents=True, exist_ok=True)

    if not path.exists():
        raise FileNotFoundError(f"Required path not found: {path}")

    if not path.is_dir():
        raise NotADirectoryError(f"Expected directory, found file: {path}")

    return path
