from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

SectionName = Literal["contact", "summary", "experience", "skills", "education"]
Severity = Literal["critical", "important", "nice-to-have"]
AnalysisType = Literal["cv-only", "job-match"]

SECTION_NAMES: tuple[SectionName, ...] = ("contact", "summary", "experience", "skills", "education")


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class CVDocument(_Frozen):
    raw_text: str = ""


class Segments(_Frozen):
    contact: str = ""
    summary: str = ""
    experience: str = ""
    skills: str = ""
    education: str = ""

    def get(self, section: SectionName) -> str:
        return getattr(self, section)


class ContactFields(_Frozen):
    email: str = ""
    phone: str = ""
    linkedin: str = ""
    location: str = ""


class IndustryClassification(_Frozen):
    industry: str = ""
    match_count: int = Field(default=0, ge=0)
    scores: dict[str, int] = Field(default_factory=dict)


class SectionAnalysis(_Frozen):
    score: int = Field(ge=0, le=100)
    issues: list[str] = Field(default_factory=list)
    content: str = ""


class SectionScores(_Frozen):
    contact: SectionAnalysis
    summary: SectionAnalysis
    experience: SectionAnalysis
    skills: SectionAnalysis
    education: SectionAnalysis

    def get(self, section: SectionName) -> SectionAnalysis:
        return getattr(self, section)

    def items(self) -> list[tuple[SectionName, SectionAnalysis]]:
        return [(name, self.get(name)) for name in SECTION_NAMES]


class KeywordMatchSet(_Frozen):
    found: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)


class ImprovementSuggestion(_Frozen):
    id: str
    section: str
    severity: Severity
    title: str
    description: str
    before: str
    after: str
    priority: int = Field(ge=0)
    applied: bool = False


class AnalysisResult(_Frozen):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    score: int = Field(ge=0, le=100)
    ats_score: int = Field(ge=0, le=100, alias="atsScore")
    analysis_type: AnalysisType = Field(default="cv-only", alias="analysisType")
    industry: str = ""
    job_industry: str = Field(default="", alias="jobIndustry")
    sections: SectionScores
    contact: ContactFields = Field(default_factory=ContactFields)
    strengths: list[str] = Field(default_factory=list)
    weaknesses: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
    keywords: KeywordMatchSet = Field(default_factory=KeywordMatchSet)
    improvements: list[ImprovementSuggestion] = Field(default_factory=list)
    ats_optimization: list[str] = Field(default_factory=list, alias="atsOptimization")
    market_specific: list[str] = Field(default_factory=list, alias="marketSpecific")
    summary: str = ""
