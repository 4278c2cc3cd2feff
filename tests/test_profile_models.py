import sys
import unittest
from datetime import datetime, timezone
from pathlib import Path

from pydantic import ValidationError

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_engine.features.text_stats import build_raw_meta  # noqa: E402
from resume_engine.schemas import ParseFailure, ProjectRecord, ResumeProfile  # noqa: E402


def _profile(**overrides) -> ResumeProfile:
    fields = {
        "cleaned_text": "Jane Doe",
        "experience": "Experience level not specified",
        "raw": build_raw_meta("Jane Doe"),
        "source_format": "pdf",
        "extracted_at": datetime(2026, 1, 15, tzinfo=timezone.utc),
    }
    fields.update(overrides)
    return ResumeProfile(**fields)


class ProfileModelTests(unittest.TestCase):
    def test_can_instantiate_profile(self):
        profile = _profile(skills=["Python"], projects=[ProjectRecord(title="Tracker")])
        self.assertEqual(profile.projects[0].summary, "")
        self.assertEqual(profile.contact.emails, [])

    def test_project_technologies_are_deduplicated(self):
        record = ProjectRecord(title="Tracker", technologies=["Python", "Docker", "Python"])
        self.assertEqual(record.technologies, ["Python", "Docker"])

    def test_project_summary_is_bounded(self):
        with self.assertRaises(ValidationError):
            ProjectRecord(title="Tracker", summary="x" * 301)

    def test_cleaned_text_must_be_normalized(self):
        for bad in ("a\r\nb", "a\n\n\nb", " padded"):
            with self.assertRaises(ValidationError):
                _profile(cleaned_text=bad)

    def test_collection_caps(self):
        with self.assertRaises(ValidationError):
            _profile(education=[f"Degree {index}" for index in range(6)])
        with self.assertRaises(ValidationError):
            _profile(projects=[ProjectRecord(title=f"Project {index}") for index in range(9)])

    def test_failure_kind_is_closed(self):
        self.assertEqual(ParseFailure(kind="DecodeError", message="bad").kind, "DecodeError")
        with self.assertRaises(ValidationError):
            ParseFailure(kind="Timeout", message="bad")


if __name__ == "__main__":
    unittest.main()
