"""Custom exceptions for the Container Registry OpenAPI client."""

from typing import Any


class ClientError(Exception):
    """Base exception for all client errors."""

    pass


class ValidationError(ClientError):
    """Raised when a request is missing a required field."""

    pass


class ConfigurationError(ClientError):
    """Raised when endpoint, region or credentials are not usable."""

    pass


class TransportError(ClientError):
    """Raised when the HTTP request cannot be completed."""

    pass


class ResponseParseError(ClientError):
    """Raised when a response body is not valid JSON."""

    pass


class CredentialError(ClientError):
    """Raised when registry credentials cannot be obtained."""

    pass


class ServiceError(ClientError):
    """Raised when the API answers with a 4xx or 5xx status."""

    def __init__(
        self,
        code: str | None,
        message: str,
        status_code: int,
        request_id: str | None = None,
        data: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = status_code
        self.request_id = request_id
        self.data = data or {}

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"
