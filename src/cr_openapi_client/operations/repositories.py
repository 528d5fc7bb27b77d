"""Repository, tag and manifest operations."""

from .. import models
from ..core.config import RuntimeOptions


class RepositoryOperations:
    """Image repository calls, mixed into ``Client``."""

    async def create_repository_with_options(
        self,
        request: models.CreateRepositoryRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.CreateRepositoryResponse:
        return await self.do_action(
            "CreateRepository",
            request,
            models.CreateRepositoryResponse,
            runtime,
            method="POST",
        )

    async def create_repository(
        self, request: models.CreateRepositoryRequest
    ) -> models.CreateRepositoryResponse:
        """Create an image repository."""
        return await self.create_repository_with_options(request, RuntimeOptions())

    async def delete_repository_with_options(
        self,
        request: models.DeleteRepositoryRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.DeleteRepositoryResponse:
        return await self.do_action(
            "DeleteRepository",
            request,
            models.DeleteRepositoryResponse,
            runtime,
            method="POST",
        )

    async def delete_repository(
        self, request: models.DeleteRepositoryRequest
    ) -> models.DeleteRepositoryResponse:
        """Delete an image repository."""
        return await self.delete_repository_with_options(request, RuntimeOptions())

    async def get_repository_with_options(
        self,
        request: models.GetRepositoryRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.GetRepositoryResponse:
        return await self.do_action(
            "GetRepository",
            request,
            models.GetRepositoryResponse,
            runtime,
            method="GET",
        )

    async def get_repository(
        self, request: models.GetRepositoryRequest
    ) -> models.GetRepositoryResponse:
        """Get a repository by id, or by namespace and name."""
        return await self.get_repository_with_options(request, RuntimeOptions())

    async def list_repository_with_options(
        self,
        request: models.ListRepositoryRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.ListRepositoryResponse:
        return await self.do_action(
            "ListRepository",
            request,
            models.ListRepositoryResponse,
            runtime,
            method="GET",
        )

    async def list_repository(
        self, request: models.ListRepositoryRequest
    ) -> models.ListRepositoryResponse:
        return await self.list_repository_with_options(request, RuntimeOptions())

    async def update_repository_with_options(
        self,
        request: models.UpdateRepositoryRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.UpdateRepositoryResponse:
        return await self.do_action(
            "UpdateRepository",
            request,
            models.UpdateRepositoryResponse,
            runtime,
            method="POST",
        )

    async def update_repository(
        self, request: models.UpdateRepositoryRequest
    ) -> models.UpdateRepositoryResponse:
        """Update the type, summary or tag immutability of a repository."""
        return await self.update_repository_with_options(request, RuntimeOptions())

    async def create_repo_tag_with_options(
        self,
        request: models.CreateRepoTagRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.CreateRepoTagResponse:
        return await self.do_action(
            "CreateRepoTag",
            request,
            models.CreateRepoTagResponse,
            runtime,
            method="POST",
        )

    async def create_repo_tag(
        self, request: models.CreateRepoTagRequest
    ) -> models.CreateRepoTagResponse:
        """Copy an existing tag to a new tag."""
        return await self.create_repo_tag_with_options(request, RuntimeOptions())

    async def delete_repo_tag_with_options(
        self,
        request: models.DeleteRepoTagRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.DeleteRepoTagResponse:
        return await self.do_action(
            "DeleteRepoTag",
            request,
            models.DeleteRepoTagResponse,
            runtime,
            method="POST",
        )

    async def delete_repo_tag(
        self, request: models.DeleteRepoTagRequest
    ) -> models.DeleteRepoTagResponse:
        return await self.delete_repo_tag_with_options(request, RuntimeOptions())

    async def get_repo_tag_with_options(
        self,
        request: models.GetRepoTagRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.GetRepoTagResponse:
        return await self.do_action(
            "GetRepoTag", request, models.GetRepoTagResponse, runtime, method="GET"
        )

    async def get_repo_tag(
        self, request: models.GetRepoTagRequest
    ) -> models.GetRepoTagResponse:
        """Get one image tag."""
        return await self.get_repo_tag_with_options(request, RuntimeOptions())

    async def list_repo_tag_with_options(
        self,
        request: models.ListRepoTagRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.ListRepoTagResponse:
        return await self.do_action(
            "ListRepoTag", request, models.ListRepoTagResponse, runtime, method="GET"
        )

    async def list_repo_tag(
        self, request: models.ListRepoTagRequest
    ) -> models.ListRepoTagResponse:
        """List the image tags of a repository."""
        return await self.list_repo_tag_with_options(request, RuntimeOptions())

    async def get_repo_tag_layers_with_options(
        self,
        request: models.GetRepoTagLayersRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.GetRepoTagLayersResponse:
        return await self.do_action(
            "GetRepoTagLayers",
            request,
            models.GetRepoTagLayersResponse,
            runtime,
            method="GET",
        )

    async def get_repo_tag_layers(
        self, request: models.GetRepoTagLayersRequest
    ) -> models.GetRepoTagLayersResponse:
        """Get the layers of an image tag."""
        return await self.get_repo_tag_layers_with_options(request, RuntimeOptions())

    async def get_repo_tag_manifest_with_options(
        self,
        request: models.GetRepoTagManifestRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.GetRepoTagManifestResponse:
        """Call GetRepoTagManifest; set ``SchemaVersion`` to 1 for a schema 1 manifest."""
        return await self.do_action(
            "GetRepoTagManifest",
            request,
            models.GetRepoTagManifestResponse,
            runtime,
            method="GET",
        )

    async def get_repo_tag_manifest(
        self, request: models.GetRepoTagManifestRequest
    ) -> models.GetRepoTagManifestResponse:
        """Get the manifest of an image tag."""
        return await self.get_repo_tag_manifest_with_options(request, RuntimeOptions())
