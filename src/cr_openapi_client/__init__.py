"""Container Registry OpenAPI Client - Async Python client for the 2018-12-01 API."""

__version__ = "0.1.0"

from . import models
from .client import API_VERSION, Client
from .core.config import Config, RuntimeOptions
from .exceptions import (
    ClientError,
    ConfigurationError,
    CredentialError,
    ResponseParseError,
    ServiceError,
    TransportError,
    ValidationError,
)
from .helpers import (
    RegistryCredentials,
    RegistryDomain,
    get_authorization_credentials,
    get_instance_id,
    get_registry_credentials,
    parse_registry_domain,
)

__all__ = [
    "API_VERSION",
    "Client",
    "Config",
    "RuntimeOptions",
    "models",
    # Exceptions
    "ClientError",
    "ConfigurationError",
    "CredentialError",
    "ResponseParseError",
    "ServiceError",
    "TransportError",
    "ValidationError",
    # Helpers
    "RegistryCredentials",
    "RegistryDomain",
    "get_authorization_credentials",
    "get_instance_id",
    "get_registry_credentials",
    "parse_registry_domain",
]
