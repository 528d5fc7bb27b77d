"""Namespace operations."""

from .. import models
from ..core.config import RuntimeOptions


class NamespaceOperations:
    """Namespace management calls, mixed into ``Client``."""

    async def create_namespace_with_options(
        self,
        request: models.CreateNamespaceRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.CreateNamespaceResponse:
        return await self.do_action(
            "CreateNamespace",
            request,
            models.CreateNamespaceResponse,
            runtime,
            method="POST",
        )

    async def create_namespace(
        self, request: models.CreateNamespaceRequest
    ) -> models.CreateNamespaceResponse:
        """Create a namespace in an instance."""
        return await self.create_namespace_with_options(request, RuntimeOptions())

    async def delete_namespace_with_options(
        self,
        request: models.DeleteNamespaceRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.DeleteNamespaceResponse:
        return await self.do_action(
            "DeleteNamespace",
            request,
            models.DeleteNamespaceResponse,
            runtime,
            method="POST",
        )

    async def delete_namespace(
        self, request: models.DeleteNamespaceRequest
    ) -> models.DeleteNamespaceResponse:
        """Delete a namespace and every repository in it."""
        return await self.delete_namespace_with_options(request, RuntimeOptions())

    async def get_namespace_with_options(
        self,
        request: models.GetNamespaceRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.GetNamespaceResponse:
        return await self.do_action(
            "GetNamespace", request, models.GetNamespaceResponse, runtime, method="GET"
        )

    async def get_namespace(
        self, request: models.GetNamespaceRequest
    ) -> models.GetNamespaceResponse:
        """Get a namespace by id or name."""
        return await self.get_namespace_with_options(request, RuntimeOptions())

    async def list_namespace_with_options(
        self,
        request: models.ListNamespaceRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.ListNamespaceResponse:
        return await self.do_action(
            "ListNamespace",
            request,
            models.ListNamespaceResponse,
            runtime,
            method="GET",
        )

    async def list_namespace(
        self, request: models.ListNamespaceRequest
    ) -> models.ListNamespaceResponse:
        return await self.list_namespace_with_options(request, RuntimeOptions())

    async def update_namespace_with_options(
        self,
        request: models.UpdateNamespaceRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.UpdateNamespaceResponse:
        return await self.do_action(
            "UpdateNamespace",
            request,
            models.UpdateNamespaceResponse,
            runtime,
            method="POST",
        )

    async def update_namespace(
        self, request: models.UpdateNamespaceRequest
    ) -> models.UpdateNamespaceResponse:
        """Update the repository defaults of a namespace."""
        return await self.update_namespace_with_options(request, RuntimeOptions())
