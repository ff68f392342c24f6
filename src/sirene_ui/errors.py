"""
Error taxonomy for the Sirene UI.

Every upstream call classifies its failure into one of these exceptions.
They never reach the presentation layer: the API boundary converts them
into failed OperationResult values carrying the exception message.
"""


class SireneUIError(Exception):
    """Base exception for all Sirene UI errors."""


class ValidationError(SireneUIError):
    """Missing or empty user input, detected before any network call."""


class ConfigurationError(SireneUIError):
    """A required setting (the registry credential) is not configured."""

    def __init__(self, message: str = "API key not configured"):
        super().__init__(message)


class ApiError(SireneUIError):
    """The upstream service answered with a non-2xx status."""

    def __init__(self, status: int):
        self.status = status
        super().__init__(f"API request failed with status: {status}")


class NotFoundError(SireneUIError):
    """The upstream answer was well formed but contained no result."""

    def __init__(self, message: str = "no address found"):
        super().__init__(message)


class TransportError(SireneUIError):
    """The network call or the decoding of its body failed."""
