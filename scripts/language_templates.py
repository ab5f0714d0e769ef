"""
Starter files written into a new language folder.

Lookup is by lowercase language name; unknown languages fall back to a
single placeholder file.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


@dataclass(frozen=True)
class TemplateFile:
    filename: str
    content: str


TEMPLATES: Mapping[str, Tuple[TemplateFile, ...]] = MappingProxyType({
    "javascript": (
        TemplateFile(
            "solution.js",
            "// Solution for this puzzle\n"
            "\n"
            "function solve(input) {\n"
            "  // Implement your solution here\n"
            "  return null;\n"
            "}\n"
            "\n"
            "module.exports = { solve };\n",
        ),
        TemplateFile(
            "solution.test.js",
            "const { solve } = require('./solution');\n"
            "\n"
            "test('sample test', () => {\n"
            "  // Add your tests here\n"
            "});\n",
        ),
    ),
    "python": (
        TemplateFile(
            "solution.py",
            "# Solution for this puzzle\n"
            "\n"
            "def solve(input_data):\n"
            '    """Implement your solution here"""\n'
            "    pass\n"
            "\n"
            'if __name__ == "__main__":\n'
            '    with open("../input/input.txt") as f:\n'
            "        data = f.read()\n"
            "    result = solve(data)\n"
            "    print(result)\n",
        ),
        TemplateFile(
            "test_solution.py",
            "from solution import solve\n"
            "\n"
            "def test_sample():\n"
            "    # Add your tests here\n"
            "    pass\n",
        ),
    ),
    "go": (
        TemplateFile(
            "solution.go",
            "package main\n"
            "\n"
            "import (\n"
            '\t"fmt"\n'
            '\t"os"\n'
            ")\n"
            "\n"
            "func solve(input string) interface{} {\n"
            "\t// Implement your solution here\n"
            "\treturn nil\n"
            "}\n"
            "\n"
            "func main() {\n"
            '\tdata, _ := os.ReadFile("../input/input.txt")\n'
            "\tresult := solve(string(data))\n"
            "\tfmt.Println(result)\n"
            "}\n",
        ),
        TemplateFile(
            "solution_test.go",
            "package main\n"
            "\n"
            'import "testing"\n'
            "\n"
            "func TestSample(t *testing.T) {\n"
            "\t// Add your tests here\n"
            "}\n",
        ),
    ),
    "typescript": (
        TemplateFile(
            "solution.ts",
            "// Solution for this puzzle\n"
            "\n"
            "export function solve(input: string): number | null {\n"
            "  // Implement your solution here\n"
            "  return null;\n"
            "}\n",
        ),
        TemplateFile(
            "solution.test.ts",
            "import { solve } from './solution';\n"
            "\n"
            "test('sample test', () => {\n"
            "  // Add your tests here\n"
            "});\n",
        ),
    ),
})


def get_language_template(language: str) -> Optional[Tuple[TemplateFile, ...]]:
    return TEMPLATES.get(str(language).lower())


def get_generic_template(language: str) -> Tuple[TemplateFile, ...]:
    return (TemplateFile("solution.txt", f"Solution for this puzzle in {language}\n"),)
