from examlens.analysis.exceptions import (
    AuthorizationError,
    ConfigurationError,
    RateLimitError,
    ResponseFormatError,
    ServiceUnavailableError,
)
from examlens.upload.exceptions import InputReadError

GENERIC_FAILURE_MESSAGE = (
    "The AI analysis service is unavailable or could not recognise this image, "
    "please retry."
)
CONFIGURATION_MESSAGE = (
    "Configuration error: no AI service API key is set. "
    "Check the deployment environment and redeploy."
)
RATE_LIMIT_MESSAGE = "Too many requests: please try again later."
SERVICE_UNAVAILABLE_MESSAGE = (
    "The AI service is temporarily unavailable, please try again later."
)
RESPONSE_FORMAT_MESSAGE = "Analysis failed, please retry."
INPUT_READ_MESSAGE = "The file could not be read."


def user_message(exc: Exception) -> str:
    """Convert a pipeline failure into the one message shown to the user."""
    if isinstance(exc, ConfigurationError):
        return CONFIGURATION_MESSAGE
    if isinstance(exc, AuthorizationError):
        return f"Permission error: the API key is invalid or its quota is exhausted. ({exc})"
    if isinstance(exc, RateLimitError):
        return RATE_LIMIT_MESSAGE
    if isinstance(exc, ServiceUnavailableError):
        return SERVICE_UNAVAILABLE_MESSAGE
    if isinstance(exc, ResponseFormatError):
        return RESPONSE_FORMAT_MESSAGE
    if isinstance(exc, InputReadError):
        return INPUT_READ_MESSAGE
    return GENERIC_FAILURE_MESSAGE
