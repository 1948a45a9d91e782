"""Error taxonomy for the generation pipeline.

Every error carries the HTTP status the pipeline boundary answers with.
"""
from screen2code.constants import (
    MSG_ERR_UPSTREAM,
    MSG_ERR_UPSTREAM_UNAVAILABLE,
    STATUS_BAD_REQUEST,
    STATUS_SERVER_ERROR,
)


class GenerationError(Exception):
    status_code: int = STATUS_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(GenerationError):
    """Bad or missing request fields. The caller can fix the input."""

    status_code = STATUS_BAD_REQUEST


class MissingFieldError(ValidationError):
    pass


class UnsupportedFrameworkError(ValidationError):
    pass


class MalformedImageError(GenerationError):
    """The image payload is not a data:image/<subtype>;base64,<data> URL."""

    status_code = STATUS_BAD_REQUEST


class ConfigurationError(GenerationError):
    """The vision provider credential is missing. Operator action required."""


class UpstreamUnavailableError(GenerationError):
    """Network or transport failure talking to the vision model."""

    def __init__(self, message: str = MSG_ERR_UPSTREAM_UNAVAILABLE) -> None:
        super().__init__(message)


class UpstreamError(GenerationError):
    """The vision model answered with a non-success status."""

    def __init__(self, status: object, message: str | None = None) -> None:
        super().__init__(message or MSG_ERR_UPSTREAM % status)
        self.upstream_status = status
        match status:
            case bool():
                pass
            case int() as code:
                self.status_code = code
            case _:
                pass
