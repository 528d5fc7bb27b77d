"""Delivery chain operations."""

from .. import models
from ..core.config import RuntimeOptions


class ChainOperations:
    """Delivery chain calls, mixed into ``Client``."""

    async def create_chain_with_options(
        self,
        request: models.CreateChainRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.CreateChainResponse:
        return await self.do_action(
            "CreateChain", request, models.CreateChainResponse, runtime, method="POST"
        )

    async def create_chain(
        self, request: models.CreateChainRequest
    ) -> models.CreateChainResponse:
        """Create a delivery chain for a namespace or repository."""
        return await self.create_chain_with_options(request, RuntimeOptions())

    async def delete_chain_with_options(
        self,
        request: models.DeleteChainRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.DeleteChainResponse:
        return await self.do_action(
            "DeleteChain", request, models.DeleteChainResponse, runtime, method="POST"
        )

    async def delete_chain(
        self, request: models.DeleteChainRequest
    ) -> models.DeleteChainResponse:
        return await self.delete_chain_with_options(request, RuntimeOptions())

    async def get_chain_with_options(
        self,
        request: models.GetChainRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.GetChainResponse:
        return await self.do_action(
            "GetChain", request, models.GetChainResponse, runtime, method="GET"
        )

    async def get_chain(
        self, request: models.GetChainRequest
    ) -> models.GetChainResponse:
        """Get a delivery chain with its node configuration."""
        return await self.get_chain_with_options(request, RuntimeOptions())

    async def list_chain_with_options(
        self,
        request: models.ListChainRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.ListChainResponse:
        return await self.do_action(
            "ListChain", request, models.ListChainResponse, runtime, method="GET"
        )

    async def list_chain(
        self, request: models.ListChainRequest
    ) -> models.ListChainResponse:
        return await self.list_chain_with_options(request, RuntimeOptions())

    async def update_chain_with_options(
        self,
        request: models.UpdateChainRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.UpdateChainResponse:
        return await self.do_action(
            "UpdateChain", request, models.UpdateChainResponse, runtime, method="POST"
        )

    async def update_chain(
        self, request: models.UpdateChainRequest
    ) -> models.UpdateChainResponse:
        """Update a delivery chain."""
        return await self.update_chain_with_options(request, RuntimeOptions())

    async def list_chain_instance_with_options(
        self,
        request: models.ListChainInstanceRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.ListChainInstanceResponse:
        return await self.do_action(
            "ListChainInstance",
            request,
            models.ListChainInstanceResponse,
            runtime,
            method="GET",
        )

    async def list_chain_instance(
        self, request: models.ListChainInstanceRequest
    ) -> models.ListChainInstanceResponse:
        """List the executions of delivery chains."""
        return await self.list_chain_instance_with_options(request, RuntimeOptions())
