"""Image security scan operations."""

from .. import models
from ..core.config import RuntimeOptions


class ScanOperations:
    """Vulnerability scan calls, mixed into ``Client``."""

    async def create_repo_tag_scan_task_with_options(
        self,
        request: models.CreateRepoTagScanTaskRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.CreateRepoTagScanTaskResponse:
        return await self.do_action(
            "CreateRepoTagScanTask",
            request,
            models.CreateRepoTagScanTaskResponse,
            runtime,
            method="POST",
        )

    async def create_repo_tag_scan_task(
        self, request: models.CreateRepoTagScanTaskRequest
    ) -> models.CreateRepoTagScanTaskResponse:
        """Start a vulnerability scan of an image tag."""
        return await self.create_repo_tag_scan_task_with_options(request, RuntimeOptions())

    async def get_repo_tag_scan_status_with_options(
        self,
        request: models.GetRepoTagScanStatusRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.GetRepoTagScanStatusResponse:
        return await self.do_action(
            "GetRepoTagScanStatus",
            request,
            models.GetRepoTagScanStatusResponse,
            runtime,
            method="GET",
        )

    async def get_repo_tag_scan_status(
        self, request: models.GetRepoTagScanStatusRequest
    ) -> models.GetRepoTagScanStatusResponse:
        """Get the status of a scan."""
        return await self.get_repo_tag_scan_status_with_options(request, RuntimeOptions())

    async def get_repo_tag_scan_summary_with_options(
        self,
        request: models.GetRepoTagScanSummaryRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.GetRepoTagScanSummaryResponse:
        return await self.do_action(
            "GetRepoTagScanSummary",
            request,
            models.GetRepoTagScanSummaryResponse,
            runtime,
            method="GET",
        )

    async def get_repo_tag_scan_summary(
        self, request: models.GetRepoTagScanSummaryRequest
    ) -> models.GetRepoTagScanSummaryResponse:
        """Count vulnerabilities per severity."""
        return await self.get_repo_tag_scan_summary_with_options(request, RuntimeOptions())

    async def list_repo_tag_scan_result_with_options(
        self,
        request: models.ListRepoTagScanResultRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.ListRepoTagScanResultResponse:
        return await self.do_action(
            "ListRepoTagScanResult",
            request,
            models.ListRepoTagScanResultResponse,
            runtime,
            method="GET",
        )

    async def list_repo_tag_scan_result(
        self, request: models.ListRepoTagScanResultRequest
    ) -> models.ListRepoTagScanResultResponse:
        """List the vulnerabilities found by a scan."""
        return await self.list_repo_tag_scan_result_with_options(request, RuntimeOptions())
