from __future__ import annotations

import logging

from cvmatch.core.scoring_config import get_scoring_int
from cvmatch.features.issues import IssueKind
from cvmatch.normalize.utils import first_long_sentence
from cvmatch.schemas.analysis import ImprovementSuggestion, SectionScores

logger = logging.getLogger(__name__)

_SEVERITY_RANK = {"critical": 0, "important": 1, "nice-to-have": 2}
_PRIORITY_STEP = 100
_CATALOG_ORDER: dict[IssueKind, int] = {kind: index for index, kind in enumerate(IssueKind)}
_KEYWORDS_ORDER = len(_CATALOG_ORDER)
_GENERIC_ORDER = _KEYWORDS_ORDER + 1

_GENERIC_BEFORE = "Responsible for various tasks"
_GENERIC_AFTER = "Delivered 3 measurable improvements that saved the team 10 hours per week"


def _severity(section: str, position: int) -> str:
    if section in {"contact", "experience"}:
        return "critical"
    if section in {"summary", "skills"}:
        return "important" if position == 0 else "nice-to-have"
    return "nice-to-have"


def _priority(severity: str, order: int) -> int:
    return _SEVERITY_RANK[severity] * _PRIORITY_STEP + order


def _from_template(
    kind: IssueKind,
    *,
    position: int,
    content: str,
    min_excerpt_chars: int,
) -> ImprovementSuggestion:
    template = kind.template
    severity = _severity(template.section, position)
    before = template.before
    if template.uses_excerpt:
        before = first_long_sentence(content, min_excerpt_chars) or template.before
    return ImprovementSuggestion(
        id=template.slug,
        section=template.section,
        severity=severity,
        title=template.title,
        description=template.description,
        before=before,
        after=template.after,
        priority=_priority(severity, _CATALOG_ORDER[kind]),
    )


def _generic(section: str, message: str, position: int) -> ImprovementSuggestion:
    severity = _severity(section, position)
    slug = "-".join(message.lower().split())[:60]
    return ImprovementSuggestion(
        id=f"{section}-{slug}",
        section=section,
        severity=severity,
        title=message,
        description=f"Review your {section} section: {message.lower()}.",
        before=_GENERIC_BEFORE,
        after=_GENERIC_AFTER,
        priority=_priority(severity, _GENERIC_ORDER),
    )


def _missing_keywords_suggestion(
    missing_keywords: list[str],
    skills_content: str,
    *,
    max_listed: int,
    min_excerpt_chars: int,
) -> ImprovementSuggestion:
    listed = missing_keywords[:max_listed]
    before = first_long_sentence(skills_content, min_excerpt_chars) or "Programming, databases, web development"
    additions = ", ".join(keyword.title() for keyword in listed)
    return ImprovementSuggestion(
        id="keywords-missing",
        section="skills",
        severity="important",
        title="Add missing keywords",
        description=f"Work these keywords into your CV where they are true for you: {', '.join(listed)}.",
        before=before,
        after=f"{before.rstrip('. ')}, {additions}",
        priority=_priority("important", _KEYWORDS_ORDER),
    )


def generate_improvements(
    sections: SectionScores,
    missing_keywords: list[str],
    *,
    max_count: int | None = None,
) -> list[ImprovementSuggestion]:
    """Turn section issues and missing keywords into suggestions, most urgent first."""
    min_excerpt_chars = get_scoring_int("suggestions.min_excerpt_chars", 40)
    suggestions: list[ImprovementSuggestion] = []
    seen: set[str] = set()

    for section, analysis in sections.items():
        for position, message in enumerate(analysis.issues):
            if message in seen:
                continue
            seen.add(message)
            try:
                kind = IssueKind(message)
            except ValueError:
                logger.debug("improvement_unknown_issue section=%s issue=%s", section, message)
                suggestions.append(_generic(section, message, position))
                continue
            suggestions.append(
                _from_template(
                    kind,
                    position=position,
                    content=analysis.content,
                    min_excerpt_chars=min_excerpt_chars,
                )
            )

    if missing_keywords:
        suggestions.append(
            _missing_keywords_suggestion(
                missing_keywords,
                sections.skills.content,
                max_listed=get_scoring_int("suggestions.max_listed_keywords", 5),
                min_excerpt_chars=min_excerpt_chars,
            )
        )

    suggestions.sort(key=lambda item: item.priority)
    limit = max_count if max_count is not None else get_scoring_int("suggestions.max_count", 8)
    return suggestions[: max(limit, 0)]
