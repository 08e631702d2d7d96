from contextlib import asynccontextmanager
import logging

from cvmatch.core.config import settings
from cvmatch.core.rate_limit import get_analysis_rate_limiter
from cvmatch.core.scoring_config import get_scoring_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    scoring = get_scoring_config()
    logger.info(
        "startup segmentation_mode=%s scoring_sections=%s analysis_limit=%s/%ss",
        settings.segmentation_mode,
        len(scoring.get("sections", {})),
        settings.analysis_rate_limit_requests,
        settings.analysis_rate_limit_window_seconds,
    )
    try:
        yield
    finally:
        get_analysis_rate_limiter().close()
