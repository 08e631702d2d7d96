import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cvmatch.features.improvements import generate_improvements  # noqa: E402
from cvmatch.features.issues import ISSUE_TEMPLATES, IssueKind  # noqa: E402
from cvmatch.schemas.analysis import SectionAnalysis, SectionScores  # noqa: E402


def _sections(**overrides):
    base = {name: SectionAnalysis(score=100) for name in ("contact", "summary", "experience", "skills", "education")}
    base.update(overrides)
    return SectionScores(**base)


class IssueCatalogTests(unittest.TestCase):
    def test_every_issue_kind_has_a_template(self):
        self.assertEqual(set(ISSUE_TEMPLATES), set(IssueKind))
        for kind in IssueKind:
            self.assertTrue(kind.template.before)
            self.assertTrue(kind.template.after)
            self.assertNotEqual(kind.template.before, kind.template.after)


class GenerateImprovementsTests(unittest.TestCase):
    def test_clean_sections_produce_nothing(self):
        self.assertEqual(generate_improvements(_sections(), []), [])

    def test_sorted_by_severity_then_catalog_order(self):
        sections = _sections(
            education=SectionAnalysis(score=85, issues=[IssueKind.EDUCATION_MISSING_DATES.value]),
            summary=SectionAnalysis(score=80, issues=[IssueKind.SUMMARY_NOT_QUANTIFIED.value]),
            contact=SectionAnalysis(score=80, issues=[IssueKind.MISSING_PHONE.value]),
        )
        suggestions = generate_improvements(sections, [])

        self.assertEqual([item.id for item in suggestions], ["contact-phone", "summary-metrics", "education-dates"])
        self.assertEqual([item.severity for item in suggestions], ["critical", "important", "nice-to-have"])
        priorities = [item.priority for item in suggestions]
        self.assertEqual(priorities, sorted(priorities))

    def test_later_issues_in_a_section_are_less_severe(self):
        sections = _sections(
            skills=SectionAnalysis(
                score=55,
                issues=[IssueKind.SKILLS_FEW_INDUSTRY_KEYWORDS.value, IssueKind.SKILLS_NO_SOFT_SKILLS.value],
            )
        )
        severities = {item.id: item.severity for item in generate_improvements(sections, [])}
        self.assertEqual(severities, {"skills-industry": "important", "skills-soft": "nice-to-have"})

    def test_excerpt_replaces_before_text(self):
        content = "Responsible for the daily running of the company website and its content.\n- Updated pages"
        sections = _sections(
            experience=SectionAnalysis(score=70, issues=[IssueKind.EXPERIENCE_NOT_QUANTIFIED.value], content=content)
        )
        (suggestion,) = generate_improvements(sections, [])
        self.assertEqual(
            suggestion.before,
            "Responsible for the daily running of the company website and its content.",
        )
        self.assertEqual(suggestion.after, ISSUE_TEMPLATES[IssueKind.EXPERIENCE_NOT_QUANTIFIED].after)

    def test_missing_keywords_suggestion_lists_five(self):
        missing = ["docker", "aws", "sql", "react", "python", "go"]
        (suggestion,) = generate_improvements(_sections(), missing)

        self.assertEqual(suggestion.id, "keywords-missing")
        self.assertEqual(suggestion.severity, "important")
        self.assertIn("docker, aws, sql, react, python.", suggestion.description)
        self.assertNotIn("go", suggestion.description.split(": ")[-1])

    def test_unknown_issue_text_gets_generic_suggestion(self):
        sections = _sections(education=SectionAnalysis(score=90, issues=["Unusual certificate format"]))
        (suggestion,) = generate_improvements(sections, [])
        self.assertEqual(suggestion.section, "education")
        self.assertEqual(suggestion.title, "Unusual certificate format")

    def test_result_is_capped(self):
        sections = _sections(
            contact=SectionAnalysis(
                score=10,
                issues=[
                    IssueKind.MISSING_EMAIL.value,
                    IssueKind.MISSING_PHONE.value,
                    IssueKind.MISSING_LINKEDIN.value,
                    IssueKind.MISSING_LOCATION.value,
                ],
            ),
            summary=SectionAnalysis(score=60, issues=[IssueKind.SUMMARY_MISSING.value]),
            experience=SectionAnalysis(score=50, issues=[IssueKind.EXPERIENCE_MISSING.value]),
            skills=SectionAnalysis(score=60, issues=[IssueKind.SKILLS_MISSING.value]),
            education=SectionAnalysis(score=75, issues=[IssueKind.EDUCATION_MISSING.value]),
        )
        suggestions = generate_improvements(sections, ["communication"])

        self.assertEqual(len(suggestions), 8)
        self.assertNotIn("education-missing", [item.id for item in suggestions])
        self.assertEqual(len(generate_improvements(sections, ["communication"], max_count=3)), 3)


if __name__ == "__main__":
    unittest.main()
