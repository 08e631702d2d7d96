"""Deterministic CV analysis.

``analyze_cv`` runs the whole rule pipeline over plain text: segmentation,
contact extraction, industry classification, per-section scoring, keyword
matching, the combined scores and the ranked improvement list. It keeps no
state between calls, so identical inputs always produce identical results.
"""

from __future__ import annotations

import logging
from typing import Any

from cvmatch.core.scoring_config import get_scoring_int
from cvmatch.features.contact import extract_contact
from cvmatch.features.feedback import (
    build_ats_tips,
    build_market_notes,
    build_strengths,
    build_suggestions,
    build_summary,
    build_weaknesses,
)
from cvmatch.features.improvements import generate_improvements
from cvmatch.features.industry_classifier import classify_industry, classify_job_description, resolve_industry
from cvmatch.features.keyword_matcher import industry_keyword_universe, job_description_keywords, match_keywords
from cvmatch.features.markets import resolve_market
from cvmatch.features.scoring import ats_score, job_match_score, quality_score
from cvmatch.features.section_scorers import (
    score_contact,
    score_education,
    score_experience,
    score_skills,
    score_summary,
)
from cvmatch.features.segmenter import segment_sections
from cvmatch.schemas.analysis import AnalysisResult, CVDocument, SectionScores

logger = logging.getLogger(__name__)


def _text(value: Any) -> str:
    if isinstance(value, CVDocument):
        return value.raw_text
    return value if isinstance(value, str) else ""


def has_job_description(job_description: Any) -> bool:
    min_chars = get_scoring_int("matching.min_job_description_chars", 50)
    return len(_text(job_description).strip()) > min_chars


def analyze_cv(
    cv_text: Any,
    *,
    job_description: Any = None,
    target_market: Any = None,
    industry: Any = None,
    segmentation_mode: str | None = None,
) -> AnalysisResult:
    text = _text(cv_text)
    jd = _text(job_description).strip()
    with_job = has_job_description(jd)

    segments = segment_sections(text, segmentation_mode)
    contact = extract_contact(text)
    cv_class = classify_industry(text)
    skills_industry = resolve_industry(_text(industry)) or cv_class.industry

    sections = SectionScores(
        contact=score_contact(contact, segments.contact),
        summary=score_summary(segments.summary),
        experience=score_experience(segments.experience),
        skills=score_skills(segments.skills, skills_industry),
        education=score_education(segments.education),
    )

    job_industry = ""
    if with_job:
        job_industry = classify_job_description(jd).industry
        required = job_description_keywords(jd, job_industry)
        keywords = match_keywords(text, required)
        score = job_match_score(text, required, cv_class.industry, job_industry)
    else:
        keywords = match_keywords(text, industry_keyword_universe(cv_class.industry))
        score = quality_score(sections)

    ats = ats_score(text, keywords)
    improvements = generate_improvements(sections, keywords.missing)
    market = resolve_market(_text(target_market))

    logger.debug(
        "cv_analyzed mode=%s score=%s ats=%s industry=%s job_industry=%s",
        "job-match" if with_job else "cv-only",
        score,
        ats,
        cv_class.industry or "-",
        job_industry or "-",
    )

    return AnalysisResult(
        score=score,
        ats_score=ats,
        analysis_type="job-match" if with_job else "cv-only",
        industry=cv_class.industry,
        job_industry=job_industry,
        sections=sections,
        contact=contact,
        strengths=build_strengths(sections, keywords, ats),
        weaknesses=build_weaknesses(sections),
        suggestions=build_suggestions(improvements),
        keywords=keywords,
        improvements=improvements,
        ats_optimization=build_ats_tips(text, keywords),
        market_specific=build_market_notes(market, with_job),
        summary=build_summary(
            score,
            has_job_description=with_job,
            cv_industry=cv_class.industry,
            job_industry=job_industry,
        ),
    )
