"""Error taxonomy shared by the validator, generator and HTTP API."""

from __future__ import annotations


class InterviewPrepError(Exception):
    """Base error carrying a machine-readable code and an HTTP status."""

    status_code: int = 500

    def __init__(self, code: str, message: str | None = None):
        self.code = code
        self.message = message or code
        super().__init__(self.message)


class ValidationError(InterviewPrepError):
    """Client input is malformed. User-correctable."""

    status_code = 400


class ConfigurationError(InterviewPrepError):
    """Deployment misconfiguration, e.g. a missing credential."""


class UpstreamError(InterviewPrepError):
    """The model provider failed or returned nothing."""


class ParseError(InterviewPrepError):
    """The model output could not be decoded as a JSON object."""
