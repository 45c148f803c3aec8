"""Exceptions for PokeAPI."""


class PokeApiError(Exception):
    """Base exception for PokeAPI errors."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class TransportError(PokeApiError):
    """The HTTP request itself failed (connection, DNS, TLS, timeout)."""


class DecodeError(PokeApiError):
    """Response body could not be decoded into the expected model."""


class ResourceNotFoundError(DecodeError):
    """Server answered 404 for the requested resource."""

    def __init__(self, url: str):
        super().__init__(f"Resource not found: {url}", 404)
        self.url = url


class UnknownError(PokeApiError):
    """Failure that does not fit any other category."""
