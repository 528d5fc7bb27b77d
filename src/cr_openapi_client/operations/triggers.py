"""Repository trigger operations."""

from .. import models
from ..core.config import RuntimeOptions


class TriggerOperations:
    """Webhook trigger calls, mixed into ``Client``."""

    async def create_repo_trigger_with_options(
        self,
        request: models.CreateRepoTriggerRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.CreateRepoTriggerResponse:
        return await self.do_action(
            "CreateRepoTrigger",
            request,
            models.CreateRepoTriggerResponse,
            runtime,
            method="POST",
        )

    async def create_repo_trigger(
        self, request: models.CreateRepoTriggerRequest
    ) -> models.CreateRepoTriggerResponse:
        """Create a webhook fired when matching tags are pushed."""
        return await self.create_repo_trigger_with_options(request, RuntimeOptions())

    async def delete_repo_trigger_with_options(
        self,
        request: models.DeleteRepoTriggerRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.DeleteRepoTriggerResponse:
        return await self.do_action(
            "DeleteRepoTrigger",
            request,
            models.DeleteRepoTriggerResponse,
            runtime,
            method="POST",
        )

    async def delete_repo_trigger(
        self, request: models.DeleteRepoTriggerRequest
    ) -> models.DeleteRepoTriggerResponse:
        return await self.delete_repo_trigger_with_options(request, RuntimeOptions())

    async def update_repo_trigger_with_options(
        self,
        request: models.UpdateRepoTriggerRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.UpdateRepoTriggerResponse:
        return await self.do_action(
            "UpdateRepoTrigger",
            request,
            models.UpdateRepoTriggerResponse,
            runtime,
            method="POST",
        )

    async def update_repo_trigger(
        self, request: models.UpdateRepoTriggerRequest
    ) -> models.UpdateRepoTriggerResponse:
        return await self.update_repo_trigger_with_options(request, RuntimeOptions())

    async def list_repo_trigger_with_options(
        self,
        request: models.ListRepoTriggerRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.ListRepoTriggerResponse:
        return await self.do_action(
            "ListRepoTrigger",
            request,
            models.ListRepoTriggerResponse,
            runtime,
            method="GET",
        )

    async def list_repo_trigger(
        self, request: models.ListRepoTriggerRequest
    ) -> models.ListRepoTriggerResponse:
        """List the triggers of a repository."""
        return await self.list_repo_trigger_with_options(request, RuntimeOptions())
