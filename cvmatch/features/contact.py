from __future__ import annotations

import re

from cvmatch.schemas.analysis import ContactFields

_EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
_PHONE_RE = re.compile(r"(?:\+\d{1,3}[ \t.-]?)?(?:\(\d{1,4}\)[ \t.-]?)?\d{2,4}(?:[ \t.-]?\d{2,4}){1,4}")
_YEAR_RANGE_RE = re.compile(r"^(?:19|20)\d{2}(?:\s*[-–./]?\s*(?:19|20)\d{2})+$")
_LINKEDIN_RE = re.compile(r"linkedin\.com/in/[A-Za-z0-9_-]+/?", re.IGNORECASE)
_MIN_PHONE_DIGITS = 7
_MAX_PHONE_DIGITS = 15

# Ordered so multi-word names win over the countries they contain.
LOCATIONS: tuple[str, ...] = (
    "Port Louis",
    "Mauritius",
    "Cape Town",
    "Johannesburg",
    "Durban",
    "South Africa",
    "New York",
    "San Francisco",
    "Los Angeles",
    "Chicago",
    "Seattle",
    "Boston",
    "Austin",
    "United States",
    "USA",
    "London",
    "Manchester",
    "Birmingham",
    "Edinburgh",
    "United Kingdom",
    "UK",
    "Toronto",
    "Vancouver",
    "Montreal",
    "Canada",
    "Sydney",
    "Melbourne",
    "Brisbane",
    "Australia",
    "Berlin",
    "Munich",
    "Hamburg",
    "Frankfurt",
    "Germany",
    "Singapore",
    "Dubai",
    "Abu Dhabi",
    "United Arab Emirates",
    "UAE",
    "Paris",
    "Amsterdam",
    "Dublin",
)

# "Remote" only counts as a location when it is a whole field of a contact-style line.
_REMOTE_FIELD_RE = re.compile(r"^(?:fully\s+)?remote(?:\s*\([^)]*\))?$", re.IGNORECASE)
_FIELD_SPLIT_RE = re.compile(r"[|,•·]")

_LOCATION_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = tuple(
    (name, re.compile(rf"\b{re.escape(name)}\b", re.IGNORECASE if len(name) > 3 else 0))
    for name in LOCATIONS
)


def _digit_count(value: str) -> int:
    return sum(1 for char in value if char.isdigit())


def extract_email(text: str) -> str:
    match = _EMAIL_RE.search(text or "")
    return match.group(0) if match else ""


def extract_phone(text: str) -> str:
    for match in _PHONE_RE.finditer(text or ""):
        candidate = match.group(0).strip()
        if _YEAR_RANGE_RE.match(candidate):
            continue
        if _MIN_PHONE_DIGITS <= _digit_count(candidate) <= _MAX_PHONE_DIGITS:
            return candidate
    return ""


def extract_linkedin(text: str) -> str:
    match = _LINKEDIN_RE.search(text or "")
    return match.group(0).rstrip("/") if match else ""


def extract_location(text: str) -> str:
    for name, pattern in _LOCATION_PATTERNS:
        if pattern.search(text or ""):
            return name
    for line in (text or "").splitlines():
        if any(_REMOTE_FIELD_RE.match(field.strip()) for field in _FIELD_SPLIT_RE.split(line)):
            return "Remote"
    return ""


def extract_contact(text: str) -> ContactFields:
    return ContactFields(
        email=extract_email(text),
        phone=extract_phone(text),
        linkedin=extract_linkedin(text),
        location=extract_location(text),
    )
