from __future__ import annotations

import re

_BULLET_CHARS = "•◦▪▫●○■□◆◇▶►‣⁃-–—*·"
_BULLET_PATTERN = re.compile(rf"^\s*(?:[{re.escape(_BULLET_CHARS)}]|(?:\d+[\.\)]))\s+")
_HEADING_DECORATION_RE = re.compile(r"^[\s#=*_\-–—|:]+|[\s#=*_\-–—|]+$")
_SENTENCE_SPLIT_RE = re.compile(r"(?<=[.!?])\s+|\n+")
_SCRIPT_TAG_RE = re.compile(r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>", re.IGNORECASE)
_JS_URI_RE = re.compile(r"javascript:", re.IGNORECASE)


def normalize_line(line: str) -> str:
    return re.sub(r"\s+", " ", line or "").strip()


def is_bullet_like(line: str) -> bool:
    return bool(_BULLET_PATTERN.match(line or ""))


def strip_bullet_prefix(line: str) -> str:
    return _BULLET_PATTERN.sub("", line or "").strip()


def strip_heading_decoration(line: str) -> str:
    return _HEADING_DECORATION_RE.sub("", normalize_line(line))


def count_bullet_lines(text: str) -> int:
    return sum(1 for line in (text or "").splitlines() if is_bullet_like(line))


def contains_any(text: str, markers: tuple[str, ...]) -> bool:
    lowered = (text or "").lower()
    return any(marker in lowered for marker in markers)


def first_long_sentence(text: str, min_chars: int) -> str:
    for chunk in _SENTENCE_SPLIT_RE.split(text or ""):
        sentence = strip_bullet_prefix(normalize_line(chunk))
        if len(sentence) >= min_chars:
            return sentence
    return ""


def sanitize_input(value: str, max_chars: int) -> str:
    """Remove script blocks and javascript: URIs, trim, and truncate."""
    cleaned = _SCRIPT_TAG_RE.sub("", value or "")
    cleaned = _JS_URI_RE.sub("", cleaned)
    return cleaned.strip()[:max_chars]
