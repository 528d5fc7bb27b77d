"""Base OpenAPI client: endpoint resolution, session lifecycle and dispatch."""

import logging
from typing import Any, TypeVar

from ..exceptions import ConfigurationError
from .config import Config, Params, RuntimeOptions
from .endpoint import resolve_endpoint
from .model import ApiResponse, Model
from .transport import RpcTransport

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=ApiResponse)


class OpenApiClient:
    """Shared machinery of a product client.

    Subclasses set ``product_id``, ``api_version``, ``endpoint_rule`` and
    ``endpoint_map``.
    """

    product_id = ""
    api_version = ""
    endpoint_rule: str | None = None
    endpoint_map: dict[str, str] = {}

    def __init__(self, config: Config, transport: Any = None) -> None:
        """Initialize the client.

        Args:
            config: Client configuration
            transport: Object with an async ``do_rpc_request`` method;
                defaults to an aiohttp ``RpcTransport``

        Raises:
            ConfigurationError: If config is missing or no endpoint can be resolved
        """
        if config is None:
            raise ConfigurationError("'config' can not be unset")

        self.config = config
        self.endpoint = self.get_endpoint()
        self.transport = transport or RpcTransport(config, self.endpoint)

    async def __aenter__(self) -> "OpenApiClient":
        """Open a session shared by every call inside the block."""
        if hasattr(self.transport, "open"):
            await self.transport.open()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager."""
        await self.close()

    async def close(self) -> None:
        """Close the shared session, if any."""
        if hasattr(self.transport, "close"):
            await self.transport.close()

    def get_endpoint(self) -> str:
        """Resolve the endpoint host for the configured region."""
        endpoint_map = {**self.endpoint_map, **self.config.endpoint_map}
        return resolve_endpoint(
            self.product_id,
            self.config.region_id,
            self.endpoint_rule,
            self.config.network,
            self.config.suffix,
            endpoint_map,
            self.config.endpoint,
        )

    async def call_api(
        self,
        params: Params,
        request: Model,
        response_type: type[R],
        runtime: RuntimeOptions | None = None,
    ) -> R:
        """Validate, send and decode one operation.

        Args:
            params: Fixed operation parameters
            request: Request model
            response_type: Response class to decode into
            runtime: Per-call options

        Returns:
            Decoded response
        """
        request.validate()
        result = await self.transport.do_rpc_request(
            params, request.to_query(), runtime or RuntimeOptions()
        )
        return response_type.from_map(result)

    async def do_action(
        self,
        action: str,
        request: Model,
        response_type: type[R],
        runtime: RuntimeOptions | None = None,
        method: str = "POST",
    ) -> R:
        """Call an RPC action of this product's API version."""
        params = Params(action=action, version=self.api_version, method=method)
        return await self.call_api(params, request, response_type, runtime)
