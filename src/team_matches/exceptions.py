"""Match data fetch errors."""

from typing import Optional


class FetchError(Exception):
    """Base exception for match data fetch failures."""

    kind = "fetch"

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class NetworkError(FetchError):
    """Transport failure or non-success HTTP status."""

    kind = "network"

    def __init__(self, message: str, url: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message, url)
        self.status_code = status_code


class ParseError(FetchError):
    """Response body is not valid JSON."""

    kind = "parse"


class InvalidShapeError(FetchError):
    """JSON is valid but does not have the expected shape."""

    kind = "invalid_shape"
