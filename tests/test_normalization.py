import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_engine.normalize.text import normalize_text  # noqa: E402


class TextNormalizationTests(unittest.TestCase):
    def test_collapses_line_endings_blank_runs_and_spaces(self):
        dirty = "This   is\r\n\r\n\r\na   test\n\n\nwith   extra   spaces"
        self.assertEqual(normalize_text(dirty), "This is\n\na test\n\nwith extra spaces")

    def test_bare_carriage_returns_and_tabs(self):
        self.assertEqual(normalize_text("Skills\rPython\t\tDjango"), "Skills\nPython Django")

    def test_whitespace_only_lines_count_as_blank(self):
        self.assertEqual(normalize_text("Header\n \n \n \nBody"), "Header\n\nBody")

    def test_trims_and_handles_empty_input(self):
        self.assertEqual(normalize_text("   Jane Doe  \n\n"), "Jane Doe")
        self.assertEqual(normalize_text(""), "")
        self.assertEqual(normalize_text(None), "")

    def test_is_idempotent(self):
        samples = [
            "This   is\r\n\r\n\r\na   test",
            "\t\tIndented\r\rtext \n\n\n\n\n  end  ",
            "a\n\n\x0b\n\nb",
            "Skills:\nJavaScript,  Python , React\n\n\n\nEducation:\nB.Tech",
            " \n\n\n lead",
        ]
        for sample in samples:
            once = normalize_text(sample)
            self.assertEqual(normalize_text(once), once)
            self.assertNotIn("\r", once)
            self.assertNotIn("\n\n\n", once)
            self.assertEqual(once, once.strip())


if __name__ == "__main__":
    unittest.main()
