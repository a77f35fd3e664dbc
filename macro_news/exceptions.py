class NewsAPIError(Exception):
    """Base class for failures talking to the news provider."""


class NewsAPIStatusError(NewsAPIError):
    """Raised when the provider answers with a non-success HTTP status."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"NewsAPI returned {status_code}")
        self.status_code = status_code


class MalformedPayloadError(NewsAPIError):
    """Raised when the response body is not the expected JSON object."""
