from .analysis import (
    SECTION_NAMES,
    AnalysisResult,
    ContactFields,
    CVDocument,
    ImprovementSuggestion,
    IndustryClassification,
    KeywordMatchSet,
    SectionAnalysis,
    SectionScores,
    Segments,
)
from .api import AnalysisMetadata, AnalyzeCVRequest, AnalyzeCVResponse, ErrorMetadata, ErrorResponse

__all__ = [
    "SECTION_NAMES",
    "AnalysisMetadata",
    "AnalysisResult",
    "AnalyzeCVRequest",
    "AnalyzeCVResponse",
    "ContactFields",
    "CVDocument",
    "ErrorMetadata",
    "ErrorResponse",
    "ImprovementSuggestion",
    "IndustryClassification",
    "KeywordMatchSet",
    "SectionAnalysis",
    "SectionScores",
    "Segments",
]
