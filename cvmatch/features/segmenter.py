"""Split raw CV text into contact, summary, experience, skills and education.

Two strategies are available. ``segment_by_headings`` classifies each line
against a closed heading vocabulary and is the default. ``segment_by_anchors``
keeps the earlier anchor-keyword search, where the maximum anchor index wins;
a late anchor inside prose moves the section start.
"""

from __future__ import annotations

import re

from cvmatch.core.config import settings
from cvmatch.normalize.utils import is_bullet_like, normalize_line, strip_bullet_prefix, strip_heading_decoration
from cvmatch.schemas.analysis import Segments

PIPELINE_ORDER: tuple[str, ...] = ("summary", "experience", "skills", "education")

_ANCHORS: dict[str, tuple[str, ...]] = {
    "summary": ("summary", "objective", "profile"),
    "experience": ("experience", "employment", "work"),
    "skills": ("skills", "technical skills"),
    "education": ("education", "qualifications"),
}

_HEADINGS: dict[str, tuple[str, ...]] = {
    "summary": (
        "summary",
        "professional summary",
        "career summary",
        "executive summary",
        "objective",
        "career objective",
        "profile",
        "professional profile",
        "personal statement",
        "about me",
    ),
    "experience": (
        "experience",
        "work experience",
        "professional experience",
        "relevant experience",
        "employment",
        "employment history",
        "work history",
        "career history",
    ),
    "skills": (
        "skills",
        "technical skills",
        "core skills",
        "key skills",
        "skills & tools",
        "core competencies",
        "competencies",
    ),
    "education": (
        "education",
        "qualifications",
        "academic background",
        "education & training",
        "academic qualifications",
    ),
}

_MAX_HEADING_WORDS = 4
_MAX_HEADING_CHARS = 40

# Words that may surround a vocabulary entry in a mixed-case heading line.
_HEADING_QUALIFIERS = frozenset(
    {
        "professional",
        "work",
        "relevant",
        "technical",
        "core",
        "key",
        "career",
        "academic",
        "additional",
        "selected",
        "recent",
        "tools",
        "and",
        "&",
    }
)


def segment_by_anchors(text: str) -> Segments:
    raw = text or ""
    lowered = raw.lower()
    starts: dict[str, int] = {}
    for section in PIPELINE_ORDER:
        index = max(lowered.find(anchor) for anchor in _ANCHORS[section])
        if index >= 0:
            starts[section] = index

    content: dict[str, str] = {}
    for position, section in enumerate(PIPELINE_ORDER):
        if section not in starts:
            content[section] = ""
            continue
        end = len(raw)
        for following in PIPELINE_ORDER[position + 1 :]:
            if following in starts:
                end = starts[following]
                break
        # An earlier-ordered section can start after a later one; the slice is then empty.
        content[section] = raw[starts[section] : end] if end > starts[section] else ""

    first_start = min(starts.values()) if starts else len(raw)
    return Segments(contact=raw[:first_start], **content)


def _is_uppercase(value: str) -> bool:
    return any(char.isalpha() for char in value) and value == value.upper()


def _heading_section(candidate: str, *, allow_partial: bool) -> str | None:
    lowered = strip_heading_decoration(candidate).lower()
    if not lowered:
        return None
    for section, vocabulary in _HEADINGS.items():
        if lowered in vocabulary:
            return section
    if not allow_partial:
        return None
    if len(lowered) > _MAX_HEADING_CHARS or len(lowered.split()) > _MAX_HEADING_WORDS:
        return None
    if re.search(r"[\d@/]", lowered):
        return None
    core = " ".join(word for word in lowered.split() if word not in _HEADING_QUALIFIERS)
    for section, vocabulary in _HEADINGS.items():
        if core in vocabulary:
            return section
    # Job titles such as "Education Manager" only count as headings when set in capitals.
    if not _is_uppercase(strip_heading_decoration(candidate)):
        return None
    for section, vocabulary in _HEADINGS.items():
        for entry in vocabulary:
            if re.search(rf"(?<![a-z]){re.escape(entry)}(?![a-z])", lowered):
                return section
    return None


def classify_heading(line: str) -> tuple[str | None, str]:
    """Return ``(section, inline_content)`` when the line is a heading."""
    stripped = normalize_line(line)
    if not stripped:
        return None, ""
    if is_bullet_like(stripped):
        return _heading_section(strip_bullet_prefix(stripped), allow_partial=False), ""
    if ":" in stripped:
        head, _, rest = stripped.partition(":")
        return _heading_section(head, allow_partial=False), rest.strip()
    return _heading_section(stripped, allow_partial=True), ""


def segment_by_headings(text: str) -> Segments:
    buckets: dict[str, list[str]] = {"contact": [], **{section: [] for section in PIPELINE_ORDER}}
    current = "contact"
    for line in (text or "").splitlines():
        section, inline = classify_heading(line)
        if section is not None:
            current = section
            if inline:
                buckets[current].append(inline)
            continue
        buckets[current].append(line)
    return Segments(**{name: "\n".join(lines).strip() for name, lines in buckets.items()})


def segment_sections(text: str, mode: str | None = None) -> Segments:
    selected = (mode or settings.segmentation_mode).strip().lower()
    if selected == "anchors":
        return segment_by_anchors(text)
    return segment_by_headings(text)
