import io
import json
import sys
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from docx import Document  # noqa: E402

from scripts import parse_resume as cli  # noqa: E402


class ParseResumeCliTests(unittest.TestCase):
    def setUp(self):
        self._tmp_dir = tempfile.TemporaryDirectory()
        self.tmp_path = Path(self._tmp_dir.name)

    def tearDown(self):
        self._tmp_dir.cleanup()

    def _run(self, *args: str) -> tuple[int, str]:
        stdout = io.StringIO()
        with patch.object(sys, "argv", ["parse_resume.py", *args]), redirect_stdout(stdout):
            code = cli.main()
        return code, stdout.getvalue()

    def test_writes_profile_without_text(self):
        resume_path = self.tmp_path / "resume.docx"
        document = Document()
        document.add_paragraph("Jane Doe")
        document.add_paragraph("Skills: Python, Docker")
        document.save(str(resume_path))
        out_path = self.tmp_path / "out" / "profile.json"

        code, _ = self._run("--file", str(resume_path), "--out", str(out_path))

        self.assertEqual(code, 0)
        payload = json.loads(out_path.read_text(encoding="utf-8"))
        self.assertEqual(payload["source_format"], "docx")
        self.assertEqual(payload["skills"], ["Docker", "Python"])
        self.assertNotIn("cleaned_text", payload)
        self.assertNotIn("original_text", payload["raw"])

    def test_unsupported_file_prints_failure(self):
        resume_path = self.tmp_path / "resume.txt"
        resume_path.write_text("Jane Doe", encoding="utf-8")

        code, output = self._run("--file", str(resume_path))

        self.assertEqual(code, 1)
        self.assertEqual(json.loads(output)["kind"], "UnsupportedFormat")


if __name__ == "__main__":
    unittest.main()
