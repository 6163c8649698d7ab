from __future__ import annotations


class FactCheckError(Exception):
    """Base error for the fact-check server."""


class ValidationError(FactCheckError):
    """Raised when user input is invalid."""


class RateLimitedError(FactCheckError):
    """Raised when a client has exceeded its request budget."""


class ExternalServiceError(FactCheckError):
    """Raised when the fact-check backend fails."""


class MalformedResultError(FactCheckError):
    """Raised when the backend returns a payload that is not a valid result list."""
