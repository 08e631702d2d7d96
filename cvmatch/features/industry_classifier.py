from __future__ import annotations

from dataclasses import dataclass

from cvmatch.schemas.analysis import IndustryClassification


@dataclass(frozen=True)
class IndustryCategory:
    name: str
    keywords: tuple[str, ...]


# Table order is the tie-break: on equal counts the earlier category wins.
INDUSTRY_CATEGORIES: tuple[IndustryCategory, ...] = (
    IndustryCategory(
        "hospitality",
        (
            "steward",
            "hospitality",
            "restaurant",
            "food service",
            "customer service",
            "cleaning",
            "waiter",
            "bartender",
        ),
    ),
    IndustryCategory(
        "technology",
        (
            "software",
            "engineer",
            "developer",
            "programming",
            "coding",
            "javascript",
            "python",
            "react",
            "node.js",
        ),
    ),
    IndustryCategory("management", ("manager", "lead", "supervisor", "director", "coordinator")),
    IndustryCategory("sales", ("sales", "marketing", "business development", "account")),
    IndustryCategory("finance", ("accounting", "finance", "analyst", "bookkeeping")),
    IndustryCategory("healthcare", ("nurse", "doctor", "medical", "healthcare", "clinical")),
    IndustryCategory("education", ("teacher", "instructor", "educator", "training")),
)

_CATEGORY_BY_NAME: dict[str, IndustryCategory] = {category.name: category for category in INDUSTRY_CATEGORIES}
_ALIASES: dict[str, str] = {"tech": "technology", "it": "technology"}

INDUSTRY_NAMES: tuple[str, ...] = tuple(category.name for category in INDUSTRY_CATEGORIES)


def resolve_industry(name: str | None) -> str:
    """Map a user-supplied industry name onto the table, or return ``""``."""
    key = (name or "").strip().lower()
    key = _ALIASES.get(key, key)
    return key if key in _CATEGORY_BY_NAME else ""


def industry_keywords(name: str) -> tuple[str, ...]:
    category = _CATEGORY_BY_NAME.get(name)
    return category.keywords if category else ()


def count_keywords(text: str, keywords: tuple[str, ...]) -> int:
    lowered = (text or "").lower()
    return sum(1 for keyword in keywords if keyword in lowered)


def _industry_scores(text: str) -> dict[str, int]:
    return {category.name: count_keywords(text, category.keywords) for category in INDUSTRY_CATEGORIES}


def classify_industry(text: str) -> IndustryClassification:
    scores = _industry_scores(text)
    best_name = ""
    best_count = 0
    for category in INDUSTRY_CATEGORIES:
        count = scores[category.name]
        if count > best_count:
            best_name = category.name
            best_count = count
    return IndustryClassification(industry=best_name, match_count=best_count, scores=scores)


def classify_job_description(job_description: str) -> IndustryClassification:
    return classify_industry(job_description)
