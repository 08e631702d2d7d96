from __future__ import annotations

import re

from cvmatch.core.scoring_config import get_scoring_int
from cvmatch.features.industry_classifier import count_keywords, industry_keywords
from cvmatch.features.issues import IssueKind
from cvmatch.normalize.utils import contains_any, count_bullet_lines
from cvmatch.schemas.analysis import ContactFields, SectionAnalysis

_DIGIT_RE = re.compile(r"\d")
_YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")
_QUANTIFIED_RE = re.compile(
    r"\d+(?:\.\d+)?\s?%"
    r"|\d+\s*years?\b"
    r"|\d+\+"
    r"|[$€£¥]\s?\d[\d,.]*"
    r"|\b\d[\d,.]*\s?(?:usd|eur|gbp|dollars|euros|pounds)\b",
    re.IGNORECASE,
)
_WEAK_VERB_RE = re.compile(r"\b(?:worked|helped|assisted|was responsible)\b", re.IGNORECASE)
_SOFT_SKILL_MARKERS = ("communication", "leadership")


def _analysis(score: int, issues: list[IssueKind], content: str) -> SectionAnalysis:
    return SectionAnalysis(score=max(score, 0), issues=[issue.value for issue in issues], content=content)


def _section_value(section: str, name: str, default: int) -> int:
    return get_scoring_int(f"sections.{section}.{name}", default)


def score_contact(contact: ContactFields, content: str = "") -> SectionAnalysis:
    score = 100
    issues: list[IssueKind] = []
    if not contact.email:
        score -= _section_value("contact", "missing_email", 30)
        issues.append(IssueKind.MISSING_EMAIL)
    if not contact.phone:
        score -= _section_value("contact", "missing_phone", 25)
        issues.append(IssueKind.MISSING_PHONE)
    if not contact.linkedin:
        score -= _section_value("contact", "missing_linkedin", 20)
        issues.append(IssueKind.MISSING_LINKEDIN)
    if not contact.location:
        score -= _section_value("contact", "missing_location", 15)
        issues.append(IssueKind.MISSING_LOCATION)
    return _analysis(score, issues, content)


def score_summary(content: str) -> SectionAnalysis:
    score = 100
    issues: list[IssueKind] = []
    text = (content or "").strip()
    if len(text) < _section_value("summary", "min_chars", 50):
        score -= _section_value("summary", "missing", 40)
        issues.append(IssueKind.SUMMARY_MISSING)
        return _analysis(score, issues, text)

    if not _DIGIT_RE.search(text):
        score -= _section_value("summary", "not_quantified", 20)
        issues.append(IssueKind.SUMMARY_NOT_QUANTIFIED)
    if len(text) > _section_value("summary", "max_chars", 300):
        score -= _section_value("summary", "too_long", 15)
        issues.append(IssueKind.SUMMARY_TOO_LONG)
    return _analysis(score, issues, text)


def score_experience(content: str) -> SectionAnalysis:
    score = 100
    issues: list[IssueKind] = []
    text = (content or "").strip()
    if len(text) < _section_value("experience", "min_chars", 100):
        score -= _section_value("experience", "missing", 50)
        issues.append(IssueKind.EXPERIENCE_MISSING)
        return _analysis(score, issues, text)

    if count_bullet_lines(text) < _section_value("experience", "min_bullets", 3):
        score -= _section_value("experience", "few_bullets", 25)
        issues.append(IssueKind.EXPERIENCE_FEW_BULLETS)
    if not _QUANTIFIED_RE.search(text):
        score -= _section_value("experience", "not_quantified", 30)
        issues.append(IssueKind.EXPERIENCE_NOT_QUANTIFIED)
    if _WEAK_VERB_RE.search(text):
        score -= _section_value("experience", "weak_verbs", 20)
        issues.append(IssueKind.EXPERIENCE_WEAK_VERBS)
    return _analysis(score, issues, text)


def score_skills(content: str, industry: str = "") -> SectionAnalysis:
    """Score the skills section; ``industry`` activates the core-keyword check."""
    score = 100
    issues: list[IssueKind] = []
    text = (content or "").strip()
    if len(text) < _section_value("skills", "min_chars", 20):
        score -= _section_value("skills", "missing", 40)
        issues.append(IssueKind.SKILLS_MISSING)
        return _analysis(score, issues, text)

    keywords = industry_keywords(industry) if industry else ()
    if keywords and count_keywords(text, keywords) < _section_value("skills", "min_industry_keywords", 2):
        score -= _section_value("skills", "few_industry_keywords", 25)
        issues.append(IssueKind.SKILLS_FEW_INDUSTRY_KEYWORDS)
    if not contains_any(text, _SOFT_SKILL_MARKERS):
        score -= _section_value("skills", "missing_soft_skills", 20)
        issues.append(IssueKind.SKILLS_NO_SOFT_SKILLS)
    return _analysis(score, issues, text)


def score_education(content: str) -> SectionAnalysis:
    score = 100
    issues: list[IssueKind] = []
    text = (content or "").strip()
    if len(text) < _section_value("education", "min_chars", 20):
        score -= _section_value("education", "missing", 25)
        issues.append(IssueKind.EDUCATION_MISSING)
        return _analysis(score, issues, text)

    if not _YEAR_RE.search(text):
        score -= _section_value("education", "missing_dates", 15)
        issues.append(IssueKind.EDUCATION_MISSING_DATES)
    return _analysis(score, issues, text)
