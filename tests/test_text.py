"""
Tests for folder-label and title normalisation.
"""

import unittest

from thorn_crawler.utils.text import clean_title, format_filename, normalise_label


class TestNormaliseLabel(unittest.TestCase):
    def test_icon_symbols_and_spaces(self):
        self.assertEqual(normalise_label("📁 Clinics & Facilities!!"), "clinics_facilities")

    def test_plain_label_lowercased(self):
        self.assertEqual(normalise_label("Billing"), "billing")

    def test_whitespace_runs_collapse(self):
        self.assertEqual(normalise_label("Calendar   for\tnon  doctors"), "calendar_for_non_doctors")

    def test_hyphens_kept(self):
        self.assertEqual(normalise_label("Non-Doctors"), "non-doctors")

    def test_only_first_symbol_run_stripped(self):
        # The second run is removed by the character filter, not the prefix rule
        self.assertEqual(normalise_label("★★ Tips ★ Tricks"), "tips_tricks")

    def test_surrounding_whitespace_ignored(self):
        self.assertEqual(normalise_label("   Reports  "), "reports")

    def test_symbols_only_is_none(self):
        self.assertIsNone(normalise_label("📁 !!"))

    def test_empty_is_none(self):
        self.assertIsNone(normalise_label(""))
        self.assertIsNone(normalise_label(None))

    def test_result_has_only_safe_characters(self):
        label = normalise_label("Über/Setup: Step #1 (draft)")
        self.assertRegex(label, r"^[\w-]+$")
        self.assertNotIn("/", label)


class TestCleanTitle(unittest.TestCase):
    def test_case_preserved(self):
        self.assertEqual(clean_title("How To Book", 80), "How_To_Book")

    def test_truncated(self):
        self.assertEqual(clean_title("a" * 100, 50), "a" * 50)

    def test_empty_becomes_untitled(self):
        self.assertEqual(clean_title("?!", 80), "untitled")
        self.assertEqual(clean_title(None, 80), "untitled")


class TestFormatFilename(unittest.TestCase):
    def test_zero_padded_sequence(self):
        self.assertEqual(format_filename(1, "Intro", "md", 80), "001_Intro.md")

    def test_sequence_beyond_padding(self):
        self.assertEqual(format_filename(1234, "Intro", "pdf", 50), "1234_Intro.pdf")

    def test_title_cleaned(self):
        self.assertEqual(
            format_filename(7, "Invoices & Payments | Thorn", "md", 80),
            "007_Invoices_Payments_Thorn.md",
        )


if __name__ == "__main__":
    unittest.main()
