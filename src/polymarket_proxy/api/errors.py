"""Errors raised by the Gamma API client."""


class GammaError(Exception):
    """Base class for every failure of a Gamma API call."""


class ConfigurationError(GammaError):
    """The client's base URL cannot be turned into a request URL."""


class TransportError(GammaError):
    """The request could not be sent or its body could not be read."""


class UpstreamError(GammaError):
    """Gamma answered with a status other than 200."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"API returned status {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class DecodeError(GammaError):
    """The response body is not a JSON array of events."""
