from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from paths import PROJECT_MARKER, SOURCE_DIRNAME, get_path, get_project_root


REPO_ROOT = Path(__file__).resolve().parent.parent


class PathsTest(unittest.TestCase):
    def test_project_root_is_found_by_marker(self) -> None:
        root = get_project_root()
        self.assertEqual(root, REPO_ROOT)
        self.assertTrue((root / PROJECT_MARKER).is_file())

    def test_missing_directory_fails_fast(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            with self.assertRaises(FileNotFoundError):
                get_path(SOURCE_DIRNAME, root=Path(tmp_dir))

    def test_file_instead_of_directory_fails(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            root = Path(tmp_dir)
            (root / SOURCE_DIRNAME).write_text("", encoding="utf-8")
            with self.assertRaises(NotADirectoryError):
                get_path(SOURCE_DIRNAME, root=root)

    def test_create_makes_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            root = Path(tmp_dir)
            path = get_path(SOURCE_DIRNAME, create=True, root=root)
            self.assertEqual(path, root / SOURCE_DIRNAME)
            self.assertTrue(path.is_dir())
            self.assertEqual(get_path(SOURCE_DIRNAME, root=root), path)


if __name__ == "__main__":
    unittest.main()
