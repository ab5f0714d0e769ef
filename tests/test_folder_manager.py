from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from folder_manager import (
    create_language_folder,
    create_puzzle_folder,
    create_year_folder,
    get_supported_languages,
    pad_day,
    puzzle_folder_exists,
    year_folder_exists,
)
from identifiers import Day, Year
from input_validation import ValidationError
from language_templates import TEMPLATES, get_generic_template, get_language_template
from safe_path import SafePath


class FolderManagerTest(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.base = Path(self._tmp.name) / "src"
        self.base.mkdir()

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_create_year_folder_writes_readme(self) -> None:
        created = create_year_folder(self.base, "2024")
        self.assertIsInstance(created, SafePath)
        self.assertTrue((self.base / "2024").is_dir())
        readme = (self.base / "2024" / "README.md").read_text(encoding="utf-8")
        self.assertTrue(readme.startswith("# Advent of Code 2024\n"))
        self.assertTrue(year_folder_exists(self.base, "2024"))
        self.assertFalse(year_folder_exists(self.base, 2023))

    def test_create_puzzle_folder_has_standard_structure(self) -> None:
        create_year_folder(self.base, "2024")
        created = create_puzzle_folder(self.base, "2024", "1")
        puzzle = self.base / "2024" / "day01"

        self.assertEqual(created.path, puzzle)
        self.assertTrue((puzzle / "input").is_dir())
        self.assertTrue((puzzle / "input" / ".gitkeep").is_file())
        readme = (puzzle / "README.md").read_text(encoding="utf-8")
        self.assertIn("# Day 1\n", readme)
        self.assertIn("https://adventofcode.com/2024/day/1", readme)
        self.assertTrue(puzzle_folder_exists(self.base, "2024", 1))

    def test_day_folders_are_zero_padded(self) -> None:
        for day in ("1", "5", "15"):
            create_puzzle_folder(self.base, "2024", day)
        names = sorted(p.name for p in (self.base / "2024").iterdir())
        self.assertEqual(names, ["day01", "day05", "day15"])
        self.assertEqual(pad_day("5"), "05")
        self.assertEqual(pad_day(Day(25)), "25")

    def test_create_language_folder_uses_python_template(self) -> None:
        created = create_language_folder(self.base, "2024", "1", "Python")
        folder = self.base / "2024" / "day01" / "python"
        self.assertEqual(created.path.name, "python")
        self.assertTrue((folder / "solution.py").is_file())
        self.assertTrue((folder / "test_solution.py").is_file())

    def test_known_templates(self) -> None:
        expected = {
            "JavaScript": {"solution.js", "solution.test.js"},
            "Go": {"solution.go", "solution_test.go"},
            "TypeScript": {"solution.ts", "solution.test.ts"},
        }
        for language, files in expected.items():
            with self.subTest(language=language):
                folder = create_language_folder(self.base, 2024, 2, language).path
                self.assertEqual({p.name for p in folder.iterdir()}, files)

    def test_template_table_is_read_only(self) -> None:
        with self.assertRaises(TypeError):
            TEMPLATES["cobol"] = get_generic_template("COBOL")
        with self.assertRaises(TypeError):
            del TEMPLATES["python"]
        self.assertIsNone(get_language_template("cobol"))
        self.assertIsNotNone(get_language_template("Python"))

    def test_unknown_language_gets_generic_template(self) -> None:
        folder = create_language_folder(self.base, 2024, 3, "C++").path
        self.assertEqual(folder.name, "c++")
        self.assertEqual(
            (folder / "solution.txt").read_text(encoding="utf-8"),
            "Solution for this puzzle in C++\n",
        )

    def test_existing_files_are_not_overwritten(self) -> None:
        folder = create_language_folder(self.base, 2024, 1, "Python").path
        (folder / "solution.py").write_text("answer = 42\n", encoding="utf-8")
        readme = self.base / "2024" / "README.md"
        create_year_folder(self.base, 2024)
        readme.write_text("# Advent of Code 2024\n\nnotes\n", encoding="utf-8")

        create_year_folder(self.base, 2024)
        create_language_folder(self.base, 2024, 1, "python")

        self.assertEqual((folder / "solution.py").read_text(encoding="utf-8"), "answer = 42\n")
        self.assertIn("notes", readme.read_text(encoding="utf-8"))

    def test_accepts_value_objects(self) -> None:
        created = create_puzzle_folder(self.base, Year(2023), Day(9))
        self.assertEqual(created.path.name, "day09")

    def test_invalid_input_touches_nothing(self) -> None:
        bad_calls = (
            lambda: create_year_folder(self.base, "../2024"),
            lambda: create_year_folder(self.base, "1999"),
            lambda: create_puzzle_folder(self.base, "2024", "26"),
            lambda: create_puzzle_folder(self.base, "2024", "../../etc"),
            lambda: create_language_folder(self.base, "2024", "1", "../../etc"),
            lambda: create_language_folder(self.base, "2024", "1", ".git"),
            lambda: year_folder_exists(self.base, "20/24"),
            lambda: puzzle_folder_exists(self.base, "2024", "0"),
        )
        for call in bad_calls:
            with self.assertRaises(ValidationError):
                call()
        self.assertEqual(list(self.base.iterdir()), [])
        self.assertEqual(sorted(p.name for p in self.base.parent.iterdir()), ["src"])

    def test_supported_languages(self) -> None:
        languages = get_supported_languages()
        for name in ("JavaScript", "Python", "Go"):
            self.assertIn(name, languages)
        self.assertGreater(len(languages), 3)


if __name__ == "__main__":
    unittest.main()
