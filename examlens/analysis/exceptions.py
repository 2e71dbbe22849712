class AnalysisError(Exception):
    """Raised when an exam analysis request fails."""


class ConfigurationError(AnalysisError):
    """Raised when the AI provider credential is missing."""


class AuthorizationError(AnalysisError):
    """Raised when the provider rejects the credential or the quota is exhausted."""


class RateLimitError(AnalysisError):
    """Raised when the provider reports too many requests."""


class ServiceUnavailableError(AnalysisError):
    """Raised when the provider is unreachable or fails on its side."""


class ResponseFormatError(AnalysisError):
    """Raised when the provider reply is empty or does not match the schema."""


def error_for_status(status: int | None, detail: str) -> AnalysisError:
    """Map an HTTP status returned by a provider to the matching error."""
    if status in (401, 403):
        return AuthorizationError(detail)
    if status == 429:
        return RateLimitError(detail)
    if status is not None and status >= 500:
        return ServiceUnavailableError(detail)
    return AnalysisError(detail)
