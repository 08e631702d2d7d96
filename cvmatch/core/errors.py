from __future__ import annotations

from fastapi import status


class CVMatchError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_type: str = "server_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(CVMatchError):
    status_code = status.HTTP_400_BAD_REQUEST
    error_type = "validation_error"


class RateLimitExceeded(CVMatchError):
    status_code = status.HTTP_429_TOO_MANY_REQUESTS
    error_type = "rate_limit_exceeded"

    def __init__(self, message: str = "Rate limit exceeded. Please try again later."):
        super().__init__(message)


class UpstreamAnalysisError(CVMatchError):
    """The optional language-model call failed; callers recover locally."""

    error_type = "upstream_analysis_error"

    def __init__(self, message: str, *, code: str = "llm_unavailable"):
        super().__init__(message)
        self.code = code


class InternalError(CVMatchError):
    def __init__(self, message: str = "Analysis temporarily unavailable. Please try again later."):
        super().__init__(message)
