from __future__ import annotations

from cvmatch.features.industry_classifier import industry_keywords
from cvmatch.schemas.analysis import KeywordMatchSet

COMMON_SOFT_SKILLS: tuple[str, ...] = (
    "communication",
    "teamwork",
    "leadership",
    "problem solving",
    "time management",
    "customer service",
    "attention to detail",
    "organizational",
    "multitasking",
)


def _dedupe(values: list[str]) -> list[str]:
    seen: set[str] = set()
    ordered: list[str] = []
    for value in values:
        key = value.lower()
        if key in seen:
            continue
        seen.add(key)
        ordered.append(key)
    return ordered


def industry_keyword_universe(industry: str) -> list[str]:
    """Keywords of ``industry`` followed by the common soft skills, without duplicates."""
    return _dedupe([*industry_keywords(industry), *COMMON_SOFT_SKILLS])


def job_description_keywords(job_description: str, job_industry: str) -> list[str]:
    lowered = (job_description or "").lower()
    return [keyword for keyword in industry_keyword_universe(job_industry) if keyword in lowered]


def match_keywords(text: str, universe: list[str]) -> KeywordMatchSet:
    lowered = (text or "").lower()
    found: list[str] = []
    missing: list[str] = []
    for keyword in _dedupe(universe):
        if keyword in lowered:
            found.append(keyword)
        else:
            missing.append(keyword)
    return KeywordMatchSet(found=found, missing=missing)
