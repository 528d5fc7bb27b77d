"""Helm chart operations."""

from .. import models
from ..core.config import RuntimeOptions


class ChartOperations:
    """Chart namespace, repository and release calls, mixed into ``Client``."""

    async def create_chart_namespace_with_options(
        self,
        request: models.CreateChartNamespaceRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.CreateChartNamespaceResponse:
        return await self.do_action(
            "CreateChartNamespace",
            request,
            models.CreateChartNamespaceResponse,
            runtime,
            method="POST",
        )

    async def create_chart_namespace(
        self, request: models.CreateChartNamespaceRequest
    ) -> models.CreateChartNamespaceResponse:
        """Create a chart namespace."""
        return await self.create_chart_namespace_with_options(request, RuntimeOptions())

    async def delete_chart_namespace_with_options(
        self,
        request: models.DeleteChartNamespaceRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.DeleteChartNamespaceResponse:
        return await self.do_action(
            "DeleteChartNamespace",
            request,
            models.DeleteChartNamespaceResponse,
            runtime,
            method="POST",
        )

    async def delete_chart_namespace(
        self, request: models.DeleteChartNamespaceRequest
    ) -> models.DeleteChartNamespaceResponse:
        return await self.delete_chart_namespace_with_options(request, RuntimeOptions())

    async def get_chart_namespace_with_options(
        self,
        request: models.GetChartNamespaceRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.GetChartNamespaceResponse:
        return await self.do_action(
            "GetChartNamespace",
            request,
            models.GetChartNamespaceResponse,
            runtime,
            method="GET",
        )

    async def get_chart_namespace(
        self, request: models.GetChartNamespaceRequest
    ) -> models.GetChartNamespaceResponse:
        """Get a chart namespace."""
        return await self.get_chart_namespace_with_options(request, RuntimeOptions())

    async def list_chart_namespace_with_options(
        self,
        request: models.ListChartNamespaceRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.ListChartNamespaceResponse:
        return await self.do_action(
            "ListChartNamespace",
            request,
            models.ListChartNamespaceResponse,
            runtime,
            method="GET",
        )

    async def list_chart_namespace(
        self, request: models.ListChartNamespaceRequest
    ) -> models.ListChartNamespaceResponse:
        return await self.list_chart_namespace_with_options(request, RuntimeOptions())

    async def update_chart_namespace_with_options(
        self,
        request: models.UpdateChartNamespaceRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.UpdateChartNamespaceResponse:
        return await self.do_action(
            "UpdateChartNamespace",
            request,
            models.UpdateChartNamespaceResponse,
            runtime,
            method="POST",
        )

    async def update_chart_namespace(
        self, request: models.UpdateChartNamespaceRequest
    ) -> models.UpdateChartNamespaceResponse:
        return await self.update_chart_namespace_with_options(request, RuntimeOptions())

    async def create_chart_repository_with_options(
        self,
        request: models.CreateChartRepositoryRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.CreateChartRepositoryResponse:
        return await self.do_action(
            "CreateChartRepository",
            request,
            models.CreateChartRepositoryResponse,
            runtime,
            method="POST",
        )

    async def create_chart_repository(
        self, request: models.CreateChartRepositoryRequest
    ) -> models.CreateChartRepositoryResponse:
        """Create a chart repository."""
        return await self.create_chart_repository_with_options(request, RuntimeOptions())

    async def delete_chart_repository_with_options(
        self,
        request: models.DeleteChartRepositoryRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.DeleteChartRepositoryResponse:
        return await self.do_action(
            "DeleteChartRepository",
            request,
            models.DeleteChartRepositoryResponse,
            runtime,
            method="POST",
        )

    async def delete_chart_repository(
        self, request: models.DeleteChartRepositoryRequest
    ) -> models.DeleteChartRepositoryResponse:
        return await self.delete_chart_repository_with_options(request, RuntimeOptions())

    async def get_chart_repository_with_options(
        self,
        request: models.GetChartRepositoryRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.GetChartRepositoryResponse:
        return await self.do_action(
            "GetChartRepository",
            request,
            models.GetChartRepositoryResponse,
            runtime,
            method="GET",
        )

    async def get_chart_repository(
        self, request: models.GetChartRepositoryRequest
    ) -> models.GetChartRepositoryResponse:
        """Get a chart repository."""
        return await self.get_chart_repository_with_options(request, RuntimeOptions())

    async def list_chart_repository_with_options(
        self,
        request: models.ListChartRepositoryRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.ListChartRepositoryResponse:
        return await self.do_action(
            "ListChartRepository",
            request,
            models.ListChartRepositoryResponse,
            runtime,
            method="GET",
        )

    async def list_chart_repository(
        self, request: models.ListChartRepositoryRequest
    ) -> models.ListChartRepositoryResponse:
        return await self.list_chart_repository_with_options(request, RuntimeOptions())

    async def update_chart_repository_with_options(
        self,
        request: models.UpdateChartRepositoryRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.UpdateChartRepositoryResponse:
        return await self.do_action(
            "UpdateChartRepository",
            request,
            models.UpdateChartRepositoryResponse,
            runtime,
            method="POST",
        )

    async def update_chart_repository(
        self, request: models.UpdateChartRepositoryRequest
    ) -> models.UpdateChartRepositoryResponse:
        return await self.update_chart_repository_with_options(request, RuntimeOptions())

    async def list_chart_release_with_options(
        self,
        request: models.ListChartReleaseRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.ListChartReleaseResponse:
        return await self.do_action(
            "ListChartRelease",
            request,
            models.ListChartReleaseResponse,
            runtime,
            method="GET",
        )

    async def list_chart_release(
        self, request: models.ListChartReleaseRequest
    ) -> models.ListChartReleaseResponse:
        """List the releases of a chart repository."""
        return await self.list_chart_release_with_options(request, RuntimeOptions())

    async def delete_chart_release_with_options(
        self,
        request: models.DeleteChartReleaseRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.DeleteChartReleaseResponse:
        return await self.do_action(
            "DeleteChartRelease",
            request,
            models.DeleteChartReleaseResponse,
            runtime,
            method="POST",
        )

    async def delete_chart_release(
        self, request: models.DeleteChartReleaseRequest
    ) -> models.DeleteChartReleaseResponse:
        """Delete one chart release."""
        return await self.delete_chart_release_with_options(request, RuntimeOptions())
