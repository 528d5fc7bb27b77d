"""Image synchronization operations."""

from .. import models
from ..core.config import RuntimeOptions


class SyncOperations:
    """Sync rule and sync task calls, mixed into ``Client``."""

    async def create_repo_sync_rule_with_options(
        self,
        request: models.CreateRepoSyncRuleRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.CreateRepoSyncRuleResponse:
        return await self.do_action(
            "CreateRepoSyncRule",
            request,
            models.CreateRepoSyncRuleResponse,
            runtime,
            method="POST",
        )

    async def create_repo_sync_rule(
        self, request: models.CreateRepoSyncRuleRequest
    ) -> models.CreateRepoSyncRuleResponse:
        """Create a rule that syncs images to another instance."""
        return await self.create_repo_sync_rule_with_options(request, RuntimeOptions())

    async def delete_repo_sync_rule_with_options(
        self,
        request: models.DeleteRepoSyncRuleRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.DeleteRepoSyncRuleResponse:
        return await self.do_action(
            "DeleteRepoSyncRule",
            request,
            models.DeleteRepoSyncRuleResponse,
            runtime,
            method="POST",
        )

    async def delete_repo_sync_rule(
        self, request: models.DeleteRepoSyncRuleRequest
    ) -> models.DeleteRepoSyncRuleResponse:
        return await self.delete_repo_sync_rule_with_options(request, RuntimeOptions())

    async def list_repo_sync_rule_with_options(
        self,
        request: models.ListRepoSyncRuleRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.ListRepoSyncRuleResponse:
        return await self.do_action(
            "ListRepoSyncRule",
            request,
            models.ListRepoSyncRuleResponse,
            runtime,
            method="GET",
        )

    async def list_repo_sync_rule(
        self, request: models.ListRepoSyncRuleRequest
    ) -> models.ListRepoSyncRuleResponse:
        """List the sync rules of an instance."""
        return await self.list_repo_sync_rule_with_options(request, RuntimeOptions())

    async def create_repo_sync_task_with_options(
        self,
        request: models.CreateRepoSyncTaskRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.CreateRepoSyncTaskResponse:
        return await self.do_action(
            "CreateRepoSyncTask",
            request,
            models.CreateRepoSyncTaskResponse,
            runtime,
            method="POST",
        )

    async def create_repo_sync_task(
        self, request: models.CreateRepoSyncTaskRequest
    ) -> models.CreateRepoSyncTaskResponse:
        """Sync one image tag to another instance."""
        return await self.create_repo_sync_task_with_options(request, RuntimeOptions())

    async def create_repo_sync_task_by_rule_with_options(
        self,
        request: models.CreateRepoSyncTaskByRuleRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.CreateRepoSyncTaskByRuleResponse:
        return await self.do_action(
            "CreateRepoSyncTaskByRule",
            request,
            models.CreateRepoSyncTaskByRuleResponse,
            runtime,
            method="POST",
        )

    async def create_repo_sync_task_by_rule(
        self, request: models.CreateRepoSyncTaskByRuleRequest
    ) -> models.CreateRepoSyncTaskByRuleResponse:
        """Sync one image tag using an existing sync rule."""
        return await self.create_repo_sync_task_by_rule_with_options(request, RuntimeOptions())

    async def get_repo_sync_task_with_options(
        self,
        request: models.GetRepoSyncTaskRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.GetRepoSyncTaskResponse:
        return await self.do_action(
            "GetRepoSyncTask",
            request,
            models.GetRepoSyncTaskResponse,
            runtime,
            method="GET",
        )

    async def get_repo_sync_task(
        self, request: models.GetRepoSyncTaskRequest
    ) -> models.GetRepoSyncTaskResponse:
        """Get a sync task with its image descriptors and layer progress."""
        return await self.get_repo_sync_task_with_options(request, RuntimeOptions())

    async def list_repo_sync_task_with_options(
        self,
        request: models.ListRepoSyncTaskRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.ListRepoSyncTaskResponse:
        return await self.do_action(
            "ListRepoSyncTask",
            request,
            models.ListRepoSyncTaskResponse,
            runtime,
            method="GET",
        )

    async def list_repo_sync_task(
        self, request: models.ListRepoSyncTaskRequest
    ) -> models.ListRepoSyncTaskResponse:
        return await self.list_repo_sync_task_with_options(request, RuntimeOptions())
