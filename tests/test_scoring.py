import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cvmatch.features.scoring import (  # noqa: E402
    ats_score,
    is_industry_mismatch,
    job_match_score,
    keyword_density,
    quality_score,
)
from cvmatch.schemas.analysis import KeywordMatchSet, SectionAnalysis, SectionScores  # noqa: E402


def _sections(*scores):
    names = ("contact", "summary", "experience", "skills", "education")
    return SectionScores(**{name: SectionAnalysis(score=score) for name, score in zip(names, scores)})


class QualityScoreTests(unittest.TestCase):
    def test_mean_of_section_scores(self):
        self.assertEqual(quality_score(_sections(100, 80, 70, 60, 85)), 79)
        self.assertEqual(quality_score(_sections(10, 60, 50, 60, 75)), 51)


class JobMatchScoreTests(unittest.TestCase):
    REQUIRED = ["python", "react", "sql", "docker"]
    CV = "Python and React developer who knows SQL"

    def test_ratio_of_required_keywords(self):
        self.assertEqual(job_match_score(self.CV, self.REQUIRED, "technology", "technology"), 75)

    def test_mismatch_costs_exactly_fifty_points(self):
        matched = job_match_score(self.CV, self.REQUIRED, "technology", "technology")
        mismatched = job_match_score(self.CV, self.REQUIRED, "technology", "hospitality")
        self.assertEqual(matched - mismatched, 50)

    def test_score_is_capped_and_floored(self):
        full = "python react sql docker"
        self.assertEqual(job_match_score(full, self.REQUIRED, "technology", "technology"), 95)
        self.assertEqual(job_match_score("nothing useful", self.REQUIRED, "technology", "hospitality"), 5)

    def test_experience_bonus_only_without_matches(self):
        self.assertEqual(job_match_score("Ten years of experience", self.REQUIRED, "", ""), 10)
        self.assertEqual(job_match_score("No relevant background", self.REQUIRED, "", ""), 5)
        self.assertEqual(job_match_score("Ten years of experience", [], "", ""), 10)

    def test_missing_industry_is_not_a_mismatch(self):
        self.assertFalse(is_industry_mismatch("", "hospitality"))
        self.assertFalse(is_industry_mismatch("technology", ""))
        self.assertTrue(is_industry_mismatch("technology", "hospitality"))


class AtsScoreTests(unittest.TestCase):
    def test_density(self):
        self.assertEqual(keyword_density(KeywordMatchSet()), 0.0)
        self.assertAlmostEqual(keyword_density(KeywordMatchSet(found=["a"], missing=["b", "c", "d"])), 0.25)

    def test_standard_sections_with_keywords_score_full_marks(self):
        keywords = KeywordMatchSet(found=["python", "sql"], missing=["docker"])
        self.assertEqual(ats_score("Experience ... Skills ...", keywords), 100)

    def test_every_deduction_stops_at_floor(self):
        self.assertEqual(ats_score("plain words", KeywordMatchSet(missing=["python"])), 40)

    def test_partial_deductions(self):
        keywords = KeywordMatchSet(found=["python"], missing=["sql", "docker", "aws", "react"])
        self.assertEqual(ats_score("Experience section only", keywords), 60)


if __name__ == "__main__":
    unittest.main()
