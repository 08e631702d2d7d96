from .contact import extract_contact
from .engine import analyze_cv, has_job_description
from .improvements import generate_improvements
from .industry_classifier import INDUSTRY_CATEGORIES, IndustryCategory, classify_industry, classify_job_description
from .issues import ISSUE_TEMPLATES, IssueKind, IssueTemplate
from .keyword_matcher import COMMON_SOFT_SKILLS, industry_keyword_universe, job_description_keywords, match_keywords
from .markets import TARGET_MARKETS, TargetMarket, resolve_market
from .scoring import ats_score, job_match_score, quality_score
from .section_scorers import score_contact, score_education, score_experience, score_skills, score_summary
from .segmenter import classify_heading, segment_by_anchors, segment_by_headings, segment_sections

__all__ = [
    "analyze_cv",
    "has_job_description",
    "extract_contact",
    "generate_improvements",
    "INDUSTRY_CATEGORIES",
    "IndustryCategory",
    "classify_industry",
    "classify_job_description",
    "ISSUE_TEMPLATES",
    "IssueKind",
    "IssueTemplate",
    "COMMON_SOFT_SKILLS",
    "industry_keyword_universe",
    "job_description_keywords",
    "match_keywords",
    "TARGET_MARKETS",
    "TargetMarket",
    "resolve_market",
    "ats_score",
    "job_match_score",
    "quality_score",
    "score_contact",
    "score_education",
    "score_experience",
    "score_skills",
    "score_summary",
    "classify_heading",
    "segment_by_anchors",
    "segment_by_headings",
    "segment_sections",
]
