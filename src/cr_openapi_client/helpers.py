"""Registry login helpers built on the instance operations."""

import logging
import os
import re
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from urllib.parse import urlparse

from .client import Client
from .core.config import Config
from .exceptions import CredentialError
from .models import GetAuthorizationTokenRequest, ListInstanceRequest

logger = logging.getLogger(__name__)

ENV_INSTANCE_ID = "DOCKER_CREDENTIAL_ACR_HELPER_INSTANCE_ID"
ENV_REGION = "DOCKER_CREDENTIAL_ACR_HELPER_REGION"
HOST_NAME_SUFFIX = ".aliyuncs.com"

DOMAIN_PATTERN = re.compile(
    r"^(?:(?P<instance_name>[^.\s]+)-)?registry(?:-intl)?(?:-vpc)?(?:-internal)?"
    r"(?:\.distributed)?\.(?P<region>[^.]+)\.(?:cr\.)?aliyuncs\.com"
)


@dataclass
class RegistryDomain:
    """Registry host split into region and instance."""

    domain: str
    region: str
    instance_name: str = ""
    instance_id: str = ""
    is_enterprise: bool = False


@dataclass
class RegistryCredentials:
    """Temporary docker login credentials."""

    username: str
    password: str
    expire_time: datetime


def parse_registry_domain(server_url: str) -> RegistryDomain:
    """Parse a registry address into region and instance information.

    Args:
        server_url: Registry host or URL
            (e.g. "myinstance-registry.cn-hangzhou.cr.aliyuncs.com")

    Returns:
        RegistryDomain; ``is_enterprise`` follows the instance name whenever
        the domain has to be parsed, otherwise the environment instance id

    Raises:
        CredentialError: If the domain is not a Container Registry domain
    """
    instance_id = os.getenv(ENV_INSTANCE_ID, "")
    if not instance_id and HOST_NAME_SUFFIX not in server_url:
        raise CredentialError(f"Unknown registry domain: {server_url}")

    if not server_url.startswith("https://"):
        server_url = f"https://{server_url}"
    try:
        domain = urlparse(server_url).hostname or ""
    except ValueError as e:
        raise CredentialError(f"Invalid registry address {server_url}: {e}") from e

    if not instance_id and not domain.endswith(HOST_NAME_SUFFIX):
        raise CredentialError(f"Unknown registry domain: {domain}")

    registry = RegistryDomain(
        domain=domain,
        region=os.getenv(ENV_REGION, ""),
        instance_id=instance_id,
        is_enterprise=bool(instance_id),
    )

    if not registry.instance_id or not registry.region:
        match = DOMAIN_PATTERN.match(domain)
        if match is None:
            raise CredentialError(f"Unknown registry domain: {domain}")
        registry.instance_name = match.group("instance_name") or ""
        registry.region = match.group("region")
        registry.is_enterprise = bool(registry.instance_name)

    return registry


async def get_instance_id(client: Client, instance_name: str) -> str:
    """Look up the id of an instance by its name.

    Raises:
        CredentialError: If the call fails or no instance has this name
    """
    resp = await client.list_instance(ListInstanceRequest(instance_name=instance_name))
    body = resp.body
    if body is None or not body.is_success:
        raise CredentialError(
            f"get instance id for name {instance_name!r} failed: {body or resp}"
        )
    if not body.instances:
        raise CredentialError(
            f"get instance id for name {instance_name!r} failed: instance name is not found"
        )
    return body.instances[0].instance_id or ""


async def get_authorization_credentials(
    client: Client, instance_id: str
) -> RegistryCredentials:
    """Get temporary docker login credentials for an instance.

    Raises:
        CredentialError: If the call does not succeed
    """
    resp = await client.get_authorization_token(
        GetAuthorizationTokenRequest(instance_id=instance_id)
    )
    body = resp.body
    if body is None or not body.is_success:
        raise CredentialError(f"get credentials failed: {body or resp}")

    expire_time = datetime.fromtimestamp(
        (body.expire_time or 0) // 1000, tz=timezone.utc
    )
    return RegistryCredentials(
        username=body.temp_username or "",
        password=body.authorization_token or "",
        expire_time=expire_time,
    )


async def get_registry_credentials(
    server_url: str, config: Config | None = None
) -> RegistryCredentials:
    """Get docker login credentials for an enterprise registry address.

    Args:
        server_url: Registry host or URL
        config: Client config; credentials default to the environment and
            the region to the one parsed from the domain

    Returns:
        RegistryCredentials

    Raises:
        CredentialError: If the domain is unknown, is a personal edition
            registry, or the API calls fail

    Examples:
        creds = await get_registry_credentials(
            "myinstance-registry.cn-hangzhou.cr.aliyuncs.com"
        )
        print(creds.username, creds.expire_time)
    """
    registry = parse_registry_domain(server_url)
    if not registry.is_enterprise:
        raise CredentialError(
            f"{registry.domain} is a personal edition registry, which this API does not serve"
        )

    if config is None:
        config = Config.from_env(region_id=registry.region)
    elif not config.region_id:
        config = replace(config, region_id=registry.region)

    async with Client(config) as client:
        instance_id = registry.instance_id
        if not instance_id:
            logger.debug("Resolving instance id for %s", registry.instance_name)
            instance_id = await get_instance_id(client, registry.instance_name)
        return await get_authorization_credentials(client, instance_id)
