import sys
import unittest
from datetime import date
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_engine.features.experience import (  # noqa: E402
    FRESHER_LABEL,
    UNSPECIFIED_LABEL,
    estimate_experience,
)

TODAY = date(2026, 1, 15)


class ExperienceEstimatorTests(unittest.TestCase):
    def test_explicit_mention_is_returned_verbatim(self):
        text = "I have 3 years of experience in software development"
        self.assertEqual(estimate_experience(text, today=TODAY), "3 years of experience")

    def test_explicit_formats(self):
        cases = {
            "5 years experience in web development": "5 years experience",
            "Experience: 2 years": "Experience: 2 years",
            "4+ years of experience": "4+ years of experience",
            "3 yrs experience": "3 yrs experience",
        }
        for text, expected in cases.items():
            self.assertEqual(estimate_experience(text, today=TODAY), expected)

    def test_explicit_mention_outranks_date_range(self):
        text = "Backend engineer, 2010 - 2018.\n3 years of experience with Python."
        self.assertEqual(estimate_experience(text, today=TODAY), "3 years of experience")

    def test_infers_from_distinct_years(self):
        text = "Engineer at Acme 2015 - 2020\nAnalyst at Initech 2020 - 2022"
        self.assertEqual(estimate_experience(text, today=TODAY), "Approximately 11 years")

    def test_repeated_single_year_is_not_a_range(self):
        text = "Joined in 2020. Promoted in 2020."
        self.assertEqual(estimate_experience(text, today=TODAY), UNSPECIFIED_LABEL)

    def test_implausible_span_is_ignored(self):
        text = "Family business founded 1950, relocated 1960"
        self.assertEqual(estimate_experience(text, today=TODAY), UNSPECIFIED_LABEL)

    def test_fresher_signal(self):
        self.assertEqual(estimate_experience("Recent graduate seeking internship opportunities", today=TODAY), FRESHER_LABEL)
        self.assertEqual(estimate_experience("Completed an internship at a startup", today=TODAY), FRESHER_LABEL)

    def test_fallback(self):
        self.assertEqual(estimate_experience("Jane Doe\nBackend engineer", today=TODAY), UNSPECIFIED_LABEL)
        self.assertEqual(estimate_experience("", today=TODAY), UNSPECIFIED_LABEL)


if __name__ == "__main__":
    unittest.main()
