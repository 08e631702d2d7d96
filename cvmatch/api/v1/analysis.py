from fastapi import APIRouter, Depends, Request

from cvmatch.core.rate_limit import SlidingWindowRateLimiter, client_key, get_analysis_rate_limiter, rate_limit
from cvmatch.schemas.api import AnalyzeCVRequest, AnalyzeCVResponse, ErrorResponse
from cvmatch.services.analysis_service import run_cv_analysis

router = APIRouter()

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid or too-short CV text"},
    429: {"model": ErrorResponse, "description": "Too many analyses from this client"},
    500: {"model": ErrorResponse, "description": "Analysis failed"},
}


@router.post(
    "/ai/analyze-cv",
    response_model=AnalyzeCVResponse,
    responses=_ERROR_RESPONSES,
    summary="Analyze CV",
    description="Score a CV on its own or against a job description.",
)
@rate_limit()
def analyze_cv_endpoint(
    request: Request,
    payload: AnalyzeCVRequest,
    rate_limiter: SlidingWindowRateLimiter = Depends(get_analysis_rate_limiter),
):
    rate_limiter.check(client_key(request), request.url.path)
    return run_cv_analysis(payload)
