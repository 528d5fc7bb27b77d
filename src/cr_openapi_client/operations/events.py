"""Event center operations."""

from .. import models
from ..core.config import RuntimeOptions


class EventOperations:
    """Event center calls, mixed into ``Client``."""

    async def list_event_center_record_with_options(
        self,
        request: models.ListEventCenterRecordRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.ListEventCenterRecordResponse:
        return await self.do_action(
            "ListEventCenterRecord",
            request,
            models.ListEventCenterRecordResponse,
            runtime,
            method="GET",
        )

    async def list_event_center_record(
        self, request: models.ListEventCenterRecordRequest
    ) -> models.ListEventCenterRecordResponse:
        """List the events recorded for an instance."""
        return await self.list_event_center_record_with_options(request, RuntimeOptions())

    async def delete_event_center_rule_with_options(
        self,
        request: models.DeleteEventCenterRuleRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.DeleteEventCenterRuleResponse:
        return await self.do_action(
            "DeleteEventCenterRule",
            request,
            models.DeleteEventCenterRuleResponse,
            runtime,
            method="POST",
        )

    async def delete_event_center_rule(
        self, request: models.DeleteEventCenterRuleRequest
    ) -> models.DeleteEventCenterRuleResponse:
        return await self.delete_event_center_rule_with_options(request, RuntimeOptions())
