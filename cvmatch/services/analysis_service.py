from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Any

from cvmatch.core.config import settings
from cvmatch.core.errors import UpstreamAnalysisError, ValidationError
from cvmatch.features.engine import analyze_cv, has_job_description
from cvmatch.normalize.utils import sanitize_input
from cvmatch.schemas.api import AnalysisMetadata, AnalyzeCVRequest, AnalyzeCVResponse
from cvmatch.services.llm_analysis import overlay_llm_analysis, request_llm_analysis

logger = logging.getLogger(__name__)


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def _optional_text(value: Any) -> str:
    if not isinstance(value, str):
        return ""
    return sanitize_input(value, settings.max_input_chars)


def validate_cv_text(value: Any) -> str:
    if not value or not isinstance(value, str):
        raise ValidationError("CV text is required and must be a string")
    cleaned = sanitize_input(value, settings.max_input_chars)
    if len(cleaned) < settings.min_cv_chars:
        raise ValidationError("CV text is too short. Please provide more details.")
    return cleaned


def run_cv_analysis(payload: AnalyzeCVRequest) -> AnalyzeCVResponse:
    cv_text = validate_cv_text(payload.cv_text)
    job_description = _optional_text(payload.job_description)
    target_market = _optional_text(payload.target_market) or settings.default_target_market
    industry = _optional_text(payload.industry)
    with_job = has_job_description(job_description)

    logger.info(
        "analysis_requested cv_len=%s jd_len=%s market=%s",
        len(cv_text),
        len(job_description),
        target_market,
    )

    started = time.perf_counter()
    result = analyze_cv(
        cv_text,
        job_description=job_description,
        target_market=target_market,
        industry=industry,
    )

    source = "rules"
    try:
        llm_payload = request_llm_analysis(cv_text, job_description if with_job else "")
    except UpstreamAnalysisError as exc:
        logger.info("analysis_llm_fallback code=%s", exc.code)
    else:
        result = overlay_llm_analysis(result, llm_payload)
        source = "llm"

    logger.info(
        "analysis_completed score=%s ats=%s type=%s source=%s latency_ms=%s",
        result.score,
        result.ats_score,
        result.analysis_type,
        source,
        int((time.perf_counter() - started) * 1000),
    )

    metadata = AnalysisMetadata(
        timestamp=utc_timestamp(),
        target_market=target_market,
        has_job_description=with_job,
        analysis_type=result.analysis_type,
        cv_length=len(cv_text),
        job_description_length=len(job_description),
        source=source,
    )
    return AnalyzeCVResponse(analysis=result, metadata=metadata)
