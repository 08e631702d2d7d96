from __future__ import annotations

import json
import logging
import os
import time
from functools import lru_cache

from openai import OpenAI
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from cvmatch.core.errors import UpstreamAnalysisError
from cvmatch.core.scoring_config import get_scoring_int
from cvmatch.features.feedback import build_summary
from cvmatch.schemas.analysis import AnalysisResult

logger = logging.getLogger(__name__)

_BASE_SYSTEM_PROMPT = (
    "You are an expert CV analyzer specializing in job matching and ATS optimization. "
    "Analyze the CV and provide detailed feedback."
)
_JOB_MATCH_INSTRUCTION = "Compare the CV against the provided job description and calculate an accurate match percentage."
_RESPONSE_SHAPE = """Return a JSON object with this EXACT structure:
{
  "score": number (0-100 representing overall quality or job match percentage),
  "strengths": string[],
  "improvements": string[],
  "atsOptimization": string[],
  "keywords": string[],
  "marketSpecific": string[],
  "summary": "string"
}"""


class LLMAnalysisPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    score: int = Field(ge=0, le=100)
    strengths: list[str] = Field(default_factory=list, max_length=20)
    improvements: list[str] = Field(default_factory=list, max_length=20)
    ats_optimization: list[str] = Field(default_factory=list, alias="atsOptimization", max_length=20)
    keywords: list[str] = Field(default_factory=list, max_length=50)
    market_specific: list[str] = Field(default_factory=list, alias="marketSpecific", max_length=20)
    summary: str = Field(default="", max_length=2000)


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "y", "on"}


def _looks_like_placeholder(value: str) -> bool:
    lower = value.strip().lower()
    return lower.startswith("your_") or lower.startswith("replace_") or lower in {"changeme", "todo"}


def llm_enabled() -> bool:
    if not _env_bool("LLM_ANALYSIS_ENABLED", True):
        return False
    provider = (os.getenv("AI_PROVIDER") or "openai").strip().lower()
    if provider != "openai":
        return False
    api_key = (os.getenv("OPENAI_API_KEY") or "").strip()
    return bool(api_key) and not _looks_like_placeholder(api_key)


@lru_cache(maxsize=1)
def _client() -> OpenAI:
    return OpenAI(
        api_key=(os.getenv("OPENAI_API_KEY") or "").strip(),
        base_url=(os.getenv("OPENAI_BASE_URL") or None),
        timeout=float(os.getenv("LLM_ANALYSIS_TIMEOUT_S", "20")),
        max_retries=int(os.getenv("OPENAI_MAX_RETRIES", "2")),
    )


def _model() -> str:
    return (os.getenv("AI_MODEL") or os.getenv("OPENAI_MODEL") or "gpt-4o-mini").strip()


def build_prompts(cv_text: str, job_description: str = "") -> tuple[str, str]:
    system_parts = [_BASE_SYSTEM_PROMPT]
    if job_description:
        system_parts.append(_JOB_MATCH_INSTRUCTION)
    system_prompt = " ".join(system_parts) + "\n\n" + _RESPONSE_SHAPE

    if job_description:
        user_prompt = (
            f"CV Content:\n{cv_text}\n\nJob Description:\n{job_description}\n\n"
            "Provide detailed job match analysis with accurate scoring."
        )
    else:
        user_prompt = f"CV Content:\n{cv_text}\n\nProvide detailed CV analysis and improvement suggestions."
    return system_prompt, user_prompt


def request_llm_analysis(cv_text: str, job_description: str = "") -> LLMAnalysisPayload:
    """Ask the configured model for an analysis.

    Every failure mode (disabled, transport error, empty reply, malformed
    JSON, schema mismatch) raises ``UpstreamAnalysisError``.
    """
    if not llm_enabled():
        raise UpstreamAnalysisError("Language model analysis is not configured.", code="llm_disabled")

    system_prompt, user_prompt = build_prompts(cv_text, job_description)
    started = time.perf_counter()
    try:
        response = _client().chat.completions.create(
            model=_model(),
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            temperature=0.3,
            response_format={"type": "json_object"},
            max_tokens=1500,
        )
    except Exception as exc:  # noqa: BLE001 - any SDK failure falls back
        logger.warning("llm_analysis_failed model=%s prompt_len=%s: %s", _model(), len(user_prompt), exc)
        raise UpstreamAnalysisError("Language model request failed.", code="llm_exception") from exc

    content = response.choices[0].message.content if response.choices else ""
    if not content:
        raise UpstreamAnalysisError("Language model returned an empty response.", code="empty_response")

    try:
        payload = LLMAnalysisPayload.model_validate(json.loads(content))
    except (json.JSONDecodeError, ValidationError) as exc:
        logger.warning("llm_analysis_invalid model=%s: %s", _model(), exc)
        raise UpstreamAnalysisError("Language model returned an invalid analysis.", code="invalid_schema") from exc

    logger.info(
        "llm_analysis_completed model=%s score=%s latency_ms=%s",
        _model(),
        payload.score,
        int((time.perf_counter() - started) * 1000),
    )
    return payload


def overlay_llm_analysis(result: AnalysisResult, payload: LLMAnalysisPayload) -> AnalysisResult:
    """Replace the narrative fields of ``result`` with the model's, keeping empty ones deterministic."""
    score = payload.score
    with_job = result.analysis_type == "job-match"
    if with_job:
        floor = get_scoring_int("matching.floor", 5)
        cap = get_scoring_int("matching.cap", 95)
        score = max(floor, min(cap, score))
    update: dict[str, object] = {"score": score}
    if payload.strengths:
        update["strengths"] = payload.strengths
    if payload.improvements:
        update["suggestions"] = payload.improvements
    if payload.ats_optimization:
        update["ats_optimization"] = payload.ats_optimization
    if payload.market_specific:
        update["market_specific"] = payload.market_specific
    if payload.summary.strip():
        update["summary"] = payload.summary.strip()
    else:
        update["summary"] = build_summary(
            score,
            has_job_description=with_job,
            cv_industry=result.industry,
            job_industry=result.job_industry,
        )
    return result.model_copy(update=update)
