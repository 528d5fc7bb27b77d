"""Client configuration types."""

import os
from dataclasses import dataclass, field
from typing import Any

ENV_ACCESS_KEY_ID = "ALIBABA_CLOUD_ACCESS_KEY_ID"
ENV_ACCESS_KEY_ID_LEGACY = "ALIBABA_CLOUD_ACCESS_KEY_Id"
ENV_ACCESS_KEY_SECRET = "ALIBABA_CLOUD_ACCESS_KEY_SECRET"
ENV_SECURITY_TOKEN = "ALIBABA_CLOUD_SECURITY_TOKEN"
ENV_REGION_ID = "ALIBABA_CLOUD_REGION_ID"

DEFAULT_CONNECT_TIMEOUT = 5000
DEFAULT_READ_TIMEOUT = 10000


@dataclass
class Config:
    """Connection and credential settings (timeouts in milliseconds)."""

    access_key_id: str | None = None
    access_key_secret: str | None = None
    security_token: str | None = None
    region_id: str | None = None
    endpoint: str | None = None
    endpoint_map: dict[str, str] = field(default_factory=dict)
    network: str | None = None
    suffix: str | None = None
    protocol: str | None = None
    user_agent: str | None = None
    read_timeout: int = DEFAULT_READ_TIMEOUT
    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT
    http_proxy: str | None = None
    https_proxy: str | None = None

    @classmethod
    def from_env(cls, **overrides: Any) -> "Config":
        """Build a config from the standard Alibaba Cloud environment variables.

        Args:
            **overrides: Explicit field values, taking precedence over the environment

        Returns:
            Config instance

        Examples:
            # Credentials from the environment, region given explicitly
            config = Config.from_env(region_id="cn-hangzhou")
        """
        values: dict[str, Any] = {
            "access_key_id": os.getenv(ENV_ACCESS_KEY_ID)
            or os.getenv(ENV_ACCESS_KEY_ID_LEGACY),
            "access_key_secret": os.getenv(ENV_ACCESS_KEY_SECRET),
            "security_token": os.getenv(ENV_SECURITY_TOKEN),
            "region_id": os.getenv(ENV_REGION_ID),
        }
        values.update(overrides)
        return cls(**values)


@dataclass
class RuntimeOptions:
    """Per-call overrides of the client settings."""

    read_timeout: int | None = None
    connect_timeout: int | None = None
    ignore_ssl: bool = False
    http_proxy: str | None = None
    https_proxy: str | None = None


@dataclass
class Params:
    """Fixed parameters of one API operation."""

    action: str
    version: str
    protocol: str = "HTTPS"
    pathname: str = "/"
    method: str = "POST"
    auth_type: str = "AK"
    style: str = "RPC"
    body_type: str = "json"
