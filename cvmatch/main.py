import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded as SlowAPIRateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
import sentry_sdk

from cvmatch.api.v1.analysis import router as analysis_router
from cvmatch.api.v1.health import router as health_router
from cvmatch.core.config import settings
from cvmatch.core.cors import cors_allow_credentials, cors_allowed_origins
from cvmatch.core.errors import CVMatchError, InternalError, RateLimitExceeded, ValidationError
from cvmatch.core.lifespan import lifespan
from cvmatch.core.rate_limit import limiter
from cvmatch.schemas.api import ErrorMetadata, ErrorResponse
from cvmatch.services.analysis_service import utc_timestamp
from dotenv import load_dotenv

load_dotenv()
logging.basicConfig(level=settings.log_level, format="%(message)s")
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn)

logger = logging.getLogger(__name__)


def _error_response(exc: CVMatchError) -> JSONResponse:
    body = ErrorResponse(
        error=exc.message,
        metadata=ErrorMetadata(timestamp=utc_timestamp(), error_type=exc.error_type),
    )
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(by_alias=True))


async def cvmatch_error_handler(request: Request, exc: CVMatchError) -> JSONResponse:
    logger.info("request_failed path=%s status=%s type=%s", request.url.path, exc.status_code, exc.error_type)
    return _error_response(exc)


async def burst_limit_handler(request: Request, exc: SlowAPIRateLimitExceeded) -> JSONResponse:
    logger.info("request_throttled path=%s limit=%s", request.url.path, exc.detail)
    return _error_response(RateLimitExceeded())


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("request_invalid path=%s errors=%s", request.url.path, len(exc.errors()))
    return _error_response(ValidationError("Request body must be a JSON object with a cvText string"))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("request_crashed path=%s", request.url.path)
    return _error_response(InternalError())


app = FastAPI(title="CV Match API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_allowed_origins(),
    allow_credentials=cors_allow_credentials(),
    allow_methods=["POST", "GET", "OPTIONS"],
    allow_headers=["*"],
)
app.state.limiter = limiter
app.add_exception_handler(SlowAPIRateLimitExceeded, burst_limit_handler)
app.add_exception_handler(CVMatchError, cvmatch_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_error_handler)
app.add_exception_handler(Exception, unhandled_error_handler)
app.add_middleware(SlowAPIMiddleware)

app.include_router(health_router, prefix="/v1", tags=["Health"])
app.include_router(analysis_router, prefix="/v1", tags=["Analysis"])
