from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from cvmatch.schemas.analysis import AnalysisResult


class AnalyzeCVRequest(BaseModel):
    # Field types stay loose so a wrong type is reported as a 400 by the service
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    cv_text: Any = Field(default=None, alias="cvText")
    target_market: Any = Field(default=None, alias="targetMarket")
    job_description: Any = Field(default=None, alias="jobDescription")
    industry: Any = None


class AnalysisMetadata(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    timestamp: str
    target_market: str = Field(alias="targetMarket")
    has_job_description: bool = Field(alias="hasJobDescription")
    analysis_type: Literal["job-match", "cv-only"] = Field(alias="analysisType")
    cv_length: int = Field(ge=0, alias="cvLength")
    job_description_length: int = Field(ge=0, alias="jobDescriptionLength")
    source: Literal["rules", "llm"] = "rules"


class AnalyzeCVResponse(BaseModel):
    success: Literal[True] = True
    analysis: AnalysisResult
    metadata: AnalysisMetadata


class ErrorMetadata(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    timestamp: str
    error_type: str = Field(alias="errorType")


class ErrorResponse(BaseModel):
    success: Literal[False] = False
    error: str
    metadata: ErrorMetadata
