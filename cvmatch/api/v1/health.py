from fastapi import APIRouter

from cvmatch.core.config import settings
from cvmatch.features.industry_classifier import INDUSTRY_NAMES
from cvmatch.services.llm_analysis import llm_enabled

router = APIRouter()


@router.get("/health", summary="Health Check", description="Check the health status of the application.")
async def health_check():
    return {
        "status": "healthy",
        "segmentation_mode": settings.segmentation_mode,
        "llm_enabled": llm_enabled(),
        "industries": list(INDUSTRY_NAMES),
        "analysis_rate_limit": {
            "requests": settings.analysis_rate_limit_requests,
            "window_seconds": settings.analysis_rate_limit_window_seconds,
        },
    }
