from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TargetMarket:
    id: str
    name: str
    ats_preferences: tuple[str, ...]


TARGET_MARKETS: tuple[TargetMarket, ...] = (
    TargetMarket(
        "mauritius",
        "Mauritius",
        ("Standard chronological format preferred", "Clear section headers in English", "Keep to 2 pages maximum"),
    ),
    TargetMarket(
        "south-africa",
        "South Africa",
        ("Chronological format standard", "Clear contact information", "Skills section prominent"),
    ),
    TargetMarket(
        "united-states",
        "United States",
        (
            "ATS-friendly formatting crucial",
            "Reverse chronological order",
            "One page for entry-level, 2 pages for experienced",
        ),
    ),
    TargetMarket(
        "united-kingdom",
        "United Kingdom",
        ("Chronological format preferred", "Professional summary essential", "2 pages standard length"),
    ),
    TargetMarket(
        "canada",
        "Canada",
        ("Chronological format standard", "Skills summary at top", "1-2 pages preferred"),
    ),
    TargetMarket(
        "australia",
        "Australia",
        ("Reverse chronological preferred", "Skills summary prominent", "2-3 pages acceptable"),
    ),
    TargetMarket(
        "germany",
        "Germany",
        ("Tabular CV format common", "Chronological order important", "1-2 pages standard"),
    ),
    TargetMarket(
        "singapore",
        "Singapore",
        ("Professional summary important", "Skills section prominent", "2 pages maximum"),
    ),
    TargetMarket(
        "uae",
        "United Arab Emirates",
        ("Chronological format standard", "Clear contact information", "2-3 pages acceptable"),
    ),
    TargetMarket(
        "global",
        "Global",
        ("ATS-optimized formatting", "Clear, simple layout", "1-2 pages preferred"),
    ),
)

_DEFAULT_MARKET = TARGET_MARKETS[-1]


def resolve_market(value: str | None) -> TargetMarket:
    """Find a market by id or display name; unknown names keep their label with Global preferences."""
    key = (value or "").strip().lower()
    if not key:
        return _DEFAULT_MARKET
    for market in TARGET_MARKETS:
        if key in {market.id, market.name.lower()}:
            return market
    return TargetMarket(id=key, name=(value or "").strip(), ats_preferences=_DEFAULT_MARKET.ats_preferences)
