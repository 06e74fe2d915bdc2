"""Custom exceptions for the Google Ads MCP server."""


class GoogleAdsMCPError(Exception):
    """Base exception for all Google Ads MCP errors."""

    pass


class ValidationError(GoogleAdsMCPError):
    """Raised when caller-supplied input fails validation."""

    pass


class ConfigurationError(GoogleAdsMCPError):
    """Raised when configuration is missing or invalid."""

    pass


class APIError(GoogleAdsMCPError):
    """Raised when the Google Ads API returns an error response.

    Attributes:
        status_code: HTTP status returned by the API, if a response was received
        body: Raw response body, kept for diagnosis
    """

    def __init__(
        self, message: str, status_code: int | None = None, body: str = ""
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class AuthenticationError(APIError):
    """Raised when authentication fails."""

    pass


class RateLimitError(APIError):
    """Raised when API rate limits are exceeded."""

    pass


class TransportError(APIError):
    """Raised when the API cannot be reached after all retries."""

    pass


class ResponseFormatError(APIError):
    """Raised when an API response cannot be parsed."""

    pass
