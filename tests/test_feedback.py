import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cvmatch.features.feedback import build_ats_tips, build_market_notes, build_summary, match_band  # noqa: E402
from cvmatch.features.markets import TARGET_MARKETS, resolve_market  # noqa: E402
from cvmatch.schemas.analysis import KeywordMatchSet  # noqa: E402


class MatchBandTests(unittest.TestCase):
    def test_band_edges(self):
        self.assertEqual(match_band(70), "high")
        self.assertEqual(match_band(69), "medium")
        self.assertEqual(match_band(40), "medium")
        self.assertEqual(match_band(39), "low")


class SummaryTests(unittest.TestCase):
    def test_job_match_summary_mentions_mismatch(self):
        summary = build_summary(5, has_job_description=True, cv_industry="technology", job_industry="hospitality")
        self.assertTrue(summary.startswith("5% compatibility"))
        self.assertIn("Limited match", summary)
        self.assertIn("technology", summary)

    def test_quality_summary(self):
        summary = build_summary(82, has_job_description=False)
        self.assertTrue(summary.startswith("Your CV scores 82/100"))


class AtsTipsTests(unittest.TestCase):
    def test_missing_headings_and_keywords_add_tips(self):
        tips = build_ats_tips("plain text", KeywordMatchSet(missing=["python"]))
        self.assertEqual(tips[0], 'Use standard section headings like "Experience", "Education", "Skills"')
        self.assertEqual(tips[1], "Include relevant keywords from the job description naturally")

    def test_general_tips_always_present(self):
        tips = build_ats_tips("Experience and Skills", KeywordMatchSet(found=["python"]))
        self.assertEqual(tips[0], "Use bullet points for easy scanning")
        self.assertEqual(len(tips), 3)


class MarketTests(unittest.TestCase):
    def test_lookup_by_id_or_name(self):
        self.assertEqual(resolve_market("south-africa").name, "South Africa")
        self.assertEqual(resolve_market("SOUTH AFRICA").id, "south-africa")

    def test_default_and_unknown_markets(self):
        self.assertEqual(resolve_market(None).name, "Global")
        unknown = resolve_market("Mars Colony")
        self.assertEqual(unknown.name, "Mars Colony")
        self.assertEqual(unknown.ats_preferences, TARGET_MARKETS[-1].ats_preferences)

    def test_market_notes(self):
        notes = build_market_notes(resolve_market("germany"), True)
        self.assertEqual(notes[:2], ["CV optimized for Germany market standards", "Analysis includes job-specific requirements"])
        self.assertIn("Tabular CV format common", notes)


if __name__ == "__main__":
    unittest.main()
