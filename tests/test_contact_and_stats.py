import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_engine.features.contact import extract_contact, redact_pii  # noqa: E402
from resume_engine.features.text_stats import build_raw_meta, count_syllables, readability_score  # noqa: E402


class ContactExtractionTests(unittest.TestCase):
    def test_extracts_email_phone_and_url(self):
        contact = extract_contact(
            "John Doe\njohn.doe@email.com | +1-234-567-8900 | https://github.com/johndoe\njohn.doe@email.com"
        )
        self.assertEqual(contact.emails, ["john.doe@email.com"])
        self.assertIn("+1-234-567-8900", contact.phones)
        self.assertEqual(contact.urls, ["https://github.com/johndoe"])

    def test_no_contact_details(self):
        contact = extract_contact("Jane Doe\nBackend engineer")
        self.assertEqual(contact.emails, [])
        self.assertEqual(contact.phones, [])
        self.assertEqual(contact.urls, [])

    def test_redacts_personal_information(self):
        redacted = redact_pii("Reach me at john@example.com or 555-123-4567, 12 Baker Street")
        self.assertIn("[EMAIL]", redacted)
        self.assertIn("[PHONE]", redacted)
        self.assertIn("[ADDRESS]", redacted)
        self.assertNotIn("john@example.com", redacted)
        self.assertNotIn("4567", redacted)


class TextStatsTests(unittest.TestCase):
    def test_syllables(self):
        self.assertEqual(count_syllables("cat"), 1)
        self.assertGreaterEqual(count_syllables("development"), 3)

    def test_readability_is_bounded(self):
        self.assertEqual(readability_score(""), 0)
        for text in (
            "Built APIs. Led a team.",
            "Internationalization infrastructure modernization responsibilities encompassed organizational transformation.",
        ):
            score = readability_score(text)
            self.assertGreaterEqual(score, 0)
            self.assertLessEqual(score, 100)

    def test_raw_meta_counts(self):
        meta = build_raw_meta("one two\nthree")
        self.assertEqual(meta.original_text, "one two\nthree")
        self.assertEqual(meta.char_count, 13)
        self.assertEqual(meta.word_count, 3)
        self.assertEqual(meta.line_count, 2)


if __name__ == "__main__":
    unittest.main()
