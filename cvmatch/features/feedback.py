from __future__ import annotations

from cvmatch.features.markets import TargetMarket
from cvmatch.schemas.analysis import ImprovementSuggestion, KeywordMatchSet, SectionScores

HIGH_MATCH = 70
MEDIUM_MATCH = 40
STRONG_SECTION = 80

_SECTION_STRENGTHS: dict[str, str] = {
    "contact": "Complete contact information",
    "summary": "Clear, quantified professional summary",
    "experience": "Well-structured experience with measurable results",
    "skills": "Relevant skills section",
    "education": "Education history with dates",
}

_GENERAL_ATS_TIPS: tuple[str, ...] = (
    "Use bullet points for easy scanning",
    "Avoid complex formatting that ATS systems might not read properly",
    "Save in both PDF and Word formats for different ATS systems",
)


def match_band(score: int) -> str:
    if score >= HIGH_MATCH:
        return "high"
    if score >= MEDIUM_MATCH:
        return "medium"
    return "low"


def build_strengths(sections: SectionScores, keywords: KeywordMatchSet, ats: int) -> list[str]:
    strengths = [
        _SECTION_STRENGTHS[name] for name, analysis in sections.items() if analysis.score >= STRONG_SECTION
    ]
    if keywords.found:
        strengths.append(f"Includes relevant keywords: {', '.join(keywords.found[:5])}")
    if ats >= STRONG_SECTION:
        strengths.append("ATS-friendly structure with standard sections")
    return strengths


def build_weaknesses(sections: SectionScores) -> list[str]:
    weaknesses: list[str] = []
    for _, analysis in sections.items():
        for issue in analysis.issues:
            if issue not in weaknesses:
                weaknesses.append(issue)
    return weaknesses


def build_suggestions(improvements: list[ImprovementSuggestion]) -> list[str]:
    return [f"{item.title}: {item.description}" for item in improvements]


def build_ats_tips(text: str, keywords: KeywordMatchSet) -> list[str]:
    lowered = (text or "").lower()
    tips: list[str] = []
    if "experience" not in lowered or "skills" not in lowered:
        tips.append('Use standard section headings like "Experience", "Education", "Skills"')
    if keywords.missing:
        tips.append("Include relevant keywords from the job description naturally")
    tips.extend(_GENERAL_ATS_TIPS)
    return tips


def build_market_notes(market: TargetMarket, has_job_description: bool) -> list[str]:
    notes = [f"CV optimized for {market.name} market standards"]
    notes.append(
        "Analysis includes job-specific requirements" if has_job_description else "General market optimization applied"
    )
    notes.extend(market.ats_preferences)
    return notes


def build_summary(score: int, *, has_job_description: bool, cv_industry: str = "", job_industry: str = "") -> str:
    band = match_band(score)
    if not has_job_description:
        focus = {
            "high": "Fine-tune the remaining details to stand out.",
            "medium": "Focus on adding quantifiable achievements and optimizing for ATS systems.",
            "low": "Several core sections need work before you apply.",
        }[band]
        return f"Your CV scores {score}/100 for overall quality. {focus}"

    verdict = {
        "high": "Strong match - you appear well-qualified for this role.",
        "medium": "Moderate match - consider highlighting relevant transferable skills.",
        "low": "Limited match - this role may require different skills than your current background.",
    }[band]
    summary = f"{score}% compatibility with the target position. {verdict}"
    if cv_industry and job_industry and cv_industry != job_industry:
        summary += f" Your CV reads as {cv_industry} while the role is in {job_industry}."
    return summary
