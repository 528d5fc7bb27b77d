"""Image build operations."""

from .. import models
from ..core.config import RuntimeOptions


class BuildOperations:
    """Build rule, build record and artifact build calls, mixed into ``Client``."""

    async def create_repo_build_rule_with_options(
        self,
        request: models.CreateRepoBuildRuleRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.CreateRepoBuildRuleResponse:
        return await self.do_action(
            "CreateRepoBuildRule",
            request,
            models.CreateRepoBuildRuleResponse,
            runtime,
            method="POST",
        )

    async def create_repo_build_rule(
        self, request: models.CreateRepoBuildRuleRequest
    ) -> models.CreateRepoBuildRuleResponse:
        """Create a build rule for a repository bound to source code."""
        return await self.create_repo_build_rule_with_options(request, RuntimeOptions())

    async def delete_repo_build_rule_with_options(
        self,
        request: models.DeleteRepoBuildRuleRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.DeleteRepoBuildRuleResponse:
        return await self.do_action(
            "DeleteRepoBuildRule",
            request,
            models.DeleteRepoBuildRuleResponse,
            runtime,
            method="POST",
        )

    async def delete_repo_build_rule(
        self, request: models.DeleteRepoBuildRuleRequest
    ) -> models.DeleteRepoBuildRuleResponse:
        return await self.delete_repo_build_rule_with_options(request, RuntimeOptions())

    async def update_repo_build_rule_with_options(
        self,
        request: models.UpdateRepoBuildRuleRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.UpdateRepoBuildRuleResponse:
        return await self.do_action(
            "UpdateRepoBuildRule",
            request,
            models.UpdateRepoBuildRuleResponse,
            runtime,
            method="POST",
        )

    async def update_repo_build_rule(
        self, request: models.UpdateRepoBuildRuleRequest
    ) -> models.UpdateRepoBuildRuleResponse:
        """Update a build rule."""
        return await self.update_repo_build_rule_with_options(request, RuntimeOptions())

    async def list_repo_build_rule_with_options(
        self,
        request: models.ListRepoBuildRuleRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.ListRepoBuildRuleResponse:
        return await self.do_action(
            "ListRepoBuildRule",
            request,
            models.ListRepoBuildRuleResponse,
            runtime,
            method="GET",
        )

    async def list_repo_build_rule(
        self, request: models.ListRepoBuildRuleRequest
    ) -> models.ListRepoBuildRuleResponse:
        """List the build rules of a repository."""
        return await self.list_repo_build_rule_with_options(request, RuntimeOptions())

    async def create_build_record_by_rule_with_options(
        self,
        request: models.CreateBuildRecordByRuleRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.CreateBuildRecordByRuleResponse:
        return await self.do_action(
            "CreateBuildRecordByRule",
            request,
            models.CreateBuildRecordByRuleResponse,
            runtime,
            method="POST",
        )

    async def create_build_record_by_rule(
        self, request: models.CreateBuildRecordByRuleRequest
    ) -> models.CreateBuildRecordByRuleResponse:
        """Start a build from a build rule."""
        return await self.create_build_record_by_rule_with_options(request, RuntimeOptions())

    async def create_build_record_by_record_with_options(
        self,
        request: models.CreateBuildRecordByRecordRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.CreateBuildRecordByRecordResponse:
        return await self.do_action(
            "CreateBuildRecordByRecord",
            request,
            models.CreateBuildRecordByRecordResponse,
            runtime,
            method="POST",
        )

    async def create_build_record_by_record(
        self, request: models.CreateBuildRecordByRecordRequest
    ) -> models.CreateBuildRecordByRecordResponse:
        """Re-run a previous build."""
        return await self.create_build_record_by_record_with_options(request, RuntimeOptions())

    async def cancel_repo_build_record_with_options(
        self,
        request: models.CancelRepoBuildRecordRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.CancelRepoBuildRecordResponse:
        return await self.do_action(
            "CancelRepoBuildRecord",
            request,
            models.CancelRepoBuildRecordResponse,
            runtime,
            method="POST",
        )

    async def cancel_repo_build_record(
        self, request: models.CancelRepoBuildRecordRequest
    ) -> models.CancelRepoBuildRecordResponse:
        """Cancel a running build."""
        return await self.cancel_repo_build_record_with_options(request, RuntimeOptions())

    async def get_repo_build_record_with_options(
        self,
        request: models.GetRepoBuildRecordRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.GetRepoBuildRecordResponse:
        return await self.do_action(
            "GetRepoBuildRecord",
            request,
            models.GetRepoBuildRecordResponse,
            runtime,
            method="GET",
        )

    async def get_repo_build_record(
        self, request: models.GetRepoBuildRecordRequest
    ) -> models.GetRepoBuildRecordResponse:
        return await self.get_repo_build_record_with_options(request, RuntimeOptions())

    async def get_repo_build_record_status_with_options(
        self,
        request: models.GetRepoBuildRecordStatusRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.GetRepoBuildRecordStatusResponse:
        return await self.do_action(
            "GetRepoBuildRecordStatus",
            request,
            models.GetRepoBuildRecordStatusResponse,
            runtime,
            method="GET",
        )

    async def get_repo_build_record_status(
        self, request: models.GetRepoBuildRecordStatusRequest
    ) -> models.GetRepoBuildRecordStatusResponse:
        """Get the status of a build."""
        return await self.get_repo_build_record_status_with_options(request, RuntimeOptions())

    async def list_repo_build_record_with_options(
        self,
        request: models.ListRepoBuildRecordRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.ListRepoBuildRecordResponse:
        return await self.do_action(
            "ListRepoBuildRecord",
            request,
            models.ListRepoBuildRecordResponse,
            runtime,
            method="GET",
        )

    async def list_repo_build_record(
        self, request: models.ListRepoBuildRecordRequest
    ) -> models.ListRepoBuildRecordResponse:
        """List the builds of a repository."""
        return await self.list_repo_build_record_with_options(request, RuntimeOptions())

    async def list_repo_build_record_log_with_options(
        self,
        request: models.ListRepoBuildRecordLogRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.ListRepoBuildRecordLogResponse:
        """Call ListRepoBuildRecordLog; ``Offset`` skips already fetched lines."""
        return await self.do_action(
            "ListRepoBuildRecordLog",
            request,
            models.ListRepoBuildRecordLogResponse,
            runtime,
            method="GET",
        )

    async def list_repo_build_record_log(
        self, request: models.ListRepoBuildRecordLogRequest
    ) -> models.ListRepoBuildRecordLogResponse:
        """Get the log lines of a build."""
        return await self.list_repo_build_record_log_with_options(request, RuntimeOptions())

    async def create_repo_source_code_repo_with_options(
        self,
        request: models.CreateRepoSourceCodeRepoRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.CreateRepoSourceCodeRepoResponse:
        return await self.do_action(
            "CreateRepoSourceCodeRepo",
            request,
            models.CreateRepoSourceCodeRepoResponse,
            runtime,
            method="POST",
        )

    async def create_repo_source_code_repo(
        self, request: models.CreateRepoSourceCodeRepoRequest
    ) -> models.CreateRepoSourceCodeRepoResponse:
        """Bind a source code repository to an image repository."""
        return await self.create_repo_source_code_repo_with_options(request, RuntimeOptions())

    async def get_repo_source_code_repo_with_options(
        self,
        request: models.GetRepoSourceCodeRepoRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.GetRepoSourceCodeRepoResponse:
        return await self.do_action(
            "GetRepoSourceCodeRepo",
            request,
            models.GetRepoSourceCodeRepoResponse,
            runtime,
            method="GET",
        )

    async def get_repo_source_code_repo(
        self, request: models.GetRepoSourceCodeRepoRequest
    ) -> models.GetRepoSourceCodeRepoResponse:
        return await self.get_repo_source_code_repo_with_options(request, RuntimeOptions())

    async def update_repo_source_code_repo_with_options(
        self,
        request: models.UpdateRepoSourceCodeRepoRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.UpdateRepoSourceCodeRepoResponse:
        return await self.do_action(
            "UpdateRepoSourceCodeRepo",
            request,
            models.UpdateRepoSourceCodeRepoResponse,
            runtime,
            method="POST",
        )

    async def update_repo_source_code_repo(
        self, request: models.UpdateRepoSourceCodeRepoRequest
    ) -> models.UpdateRepoSourceCodeRepoResponse:
        """Update the source code binding of a repository."""
        return await self.update_repo_source_code_repo_with_options(request, RuntimeOptions())

    async def create_artifact_build_rule_with_options(
        self,
        request: models.CreateArtifactBuildRuleRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.CreateArtifactBuildRuleResponse:
        return await self.do_action(
            "CreateArtifactBuildRule",
            request,
            models.CreateArtifactBuildRuleResponse,
            runtime,
            method="POST",
        )

    async def create_artifact_build_rule(
        self, request: models.CreateArtifactBuildRuleRequest
    ) -> models.CreateArtifactBuildRuleResponse:
        """Create an artifact build rule (e.g. image acceleration)."""
        return await self.create_artifact_build_rule_with_options(request, RuntimeOptions())

    async def get_artifact_build_rule_with_options(
        self,
        request: models.GetArtifactBuildRuleRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.GetArtifactBuildRuleResponse:
        return await self.do_action(
            "GetArtifactBuildRule",
            request,
            models.GetArtifactBuildRuleResponse,
            runtime,
            method="GET",
        )

    async def get_artifact_build_rule(
        self, request: models.GetArtifactBuildRuleRequest
    ) -> models.GetArtifactBuildRuleResponse:
        """Get an artifact build rule."""
        return await self.get_artifact_build_rule_with_options(request, RuntimeOptions())

    async def get_artifact_build_task_with_options(
        self,
        request: models.GetArtifactBuildTaskRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.GetArtifactBuildTaskResponse:
        return await self.do_action(
            "GetArtifactBuildTask",
            request,
            models.GetArtifactBuildTaskResponse,
            runtime,
            method="GET",
        )

    async def get_artifact_build_task(
        self, request: models.GetArtifactBuildTaskRequest
    ) -> models.GetArtifactBuildTaskResponse:
        """Get an artifact build task."""
        return await self.get_artifact_build_task_with_options(request, RuntimeOptions())

    async def cancel_artifact_build_task_with_options(
        self,
        request: models.CancelArtifactBuildTaskRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.CancelArtifactBuildTaskResponse:
        return await self.do_action(
            "CancelArtifactBuildTask",
            request,
            models.CancelArtifactBuildTaskResponse,
            runtime,
            method="POST",
        )

    async def cancel_artifact_build_task(
        self, request: models.CancelArtifactBuildTaskRequest
    ) -> models.CancelArtifactBuildTaskResponse:
        return await self.cancel_artifact_build_task_with_options(request, RuntimeOptions())

    async def list_artifact_build_task_log_with_options(
        self,
        request: models.ListArtifactBuildTaskLogRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.ListArtifactBuildTaskLogResponse:
        return await self.do_action(
            "ListArtifactBuildTaskLog",
            request,
            models.ListArtifactBuildTaskLogResponse,
            runtime,
            method="GET",
        )

    async def list_artifact_build_task_log(
        self, request: models.ListArtifactBuildTaskLogRequest
    ) -> models.ListArtifactBuildTaskLogResponse:
        """Get the log lines of an artifact build task."""
        return await self.list_artifact_build_task_log_with_options(request, RuntimeOptions())
