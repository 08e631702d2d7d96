"""Combined scores: CV quality, job match and ATS readability.

The job-match score is clamped to [5, 95], the quality score to [0, 100]
and the ATS score to [40, 100].
"""

from __future__ import annotations

from cvmatch.core.scoring_config import get_scoring_int, get_scoring_value
from cvmatch.schemas.analysis import KeywordMatchSet, SectionScores

_EXPERIENCE_SIGNALS = ("year", "experience")


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def quality_score(sections: SectionScores) -> int:
    scores = [analysis.score for _, analysis in sections.items()]
    if not scores:
        return 0
    return _clamp(round(sum(scores) / len(scores)), 0, 100)


def has_experience_signal(text: str) -> bool:
    lowered = (text or "").lower()
    return any(signal in lowered for signal in _EXPERIENCE_SIGNALS)


def job_match_score(
    cv_text: str,
    required_keywords: list[str],
    cv_industry: str,
    job_industry: str,
) -> int:
    lowered = (cv_text or "").lower()
    matching = [keyword for keyword in required_keywords if keyword in lowered]
    if matching:
        base = round(len(matching) / len(required_keywords) * 100)
    else:
        base = get_scoring_int("matching.experience_bonus", 10) if has_experience_signal(cv_text) else 0

    if is_industry_mismatch(cv_industry, job_industry):
        base -= get_scoring_int("matching.mismatch_penalty", 50)

    return _clamp(base, get_scoring_int("matching.floor", 5), get_scoring_int("matching.cap", 95))


def is_industry_mismatch(cv_industry: str, job_industry: str) -> bool:
    return bool(cv_industry and job_industry and cv_industry != job_industry)


def keyword_density(keywords: KeywordMatchSet) -> float:
    total = len(keywords.found) + len(keywords.missing)
    if total == 0:
        return 0.0
    return len(keywords.found) / total


def ats_score(text: str, keywords: KeywordMatchSet) -> int:
    lowered = (text or "").lower()
    score = 100
    if keyword_density(keywords) < float(get_scoring_value("ats.min_keyword_density", 0.30)):
        score -= get_scoring_int("ats.low_keyword_density", 25)
    if "experience" not in lowered:
        score -= get_scoring_int("ats.missing_experience", 20)
    if "skills" not in lowered:
        score -= get_scoring_int("ats.missing_skills", 15)
    return _clamp(score, get_scoring_int("ats.floor", 40), 100)
