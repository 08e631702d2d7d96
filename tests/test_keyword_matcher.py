import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cv_samples import HOSPITALITY_JD, TECH_CV  # noqa: E402
from cvmatch.features.keyword_matcher import (  # noqa: E402
    COMMON_SOFT_SKILLS,
    industry_keyword_universe,
    job_description_keywords,
    match_keywords,
)


class KeywordMatcherTests(unittest.TestCase):
    def test_universe_is_industry_keywords_then_soft_skills(self):
        universe = industry_keyword_universe("hospitality")
        self.assertEqual(universe[0], "steward")
        self.assertEqual(universe[-1], "multitasking")
        # "customer service" is in both lists and appears once
        self.assertEqual(universe.count("customer service"), 1)

    def test_unknown_industry_falls_back_to_soft_skills(self):
        self.assertEqual(industry_keyword_universe(""), list(COMMON_SOFT_SKILLS))

    def test_found_and_missing_partition_the_universe(self):
        universe = industry_keyword_universe("technology")
        result = match_keywords(TECH_CV, universe)

        self.assertEqual(set(result.found) | set(result.missing), set(universe))
        self.assertEqual(set(result.found) & set(result.missing), set())
        self.assertEqual(len(result.found) + len(result.missing), len(universe))
        self.assertIn("react", result.found)
        self.assertIn("teamwork", result.found)
        self.assertIn("leadership", result.missing)

    def test_duplicates_are_collapsed_case_insensitively(self):
        result = match_keywords("Python developer", ["Python", "python", "SQL", "sql"])
        self.assertEqual(result.found, ["python"])
        self.assertEqual(result.missing, ["sql"])

    def test_job_description_keywords_only_include_terms_present(self):
        required = job_description_keywords(HOSPITALITY_JD, "hospitality")
        self.assertEqual(required, ["steward", "hospitality", "restaurant", "food service", "cleaning"])

    def test_job_description_soft_skills_are_required(self):
        jd = "Looking for a developer with strong communication and teamwork."
        self.assertEqual(job_description_keywords(jd, "technology"), ["developer", "communication", "teamwork"])


if __name__ == "__main__":
    unittest.main()
