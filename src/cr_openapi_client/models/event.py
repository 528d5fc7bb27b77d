"""Event center models."""

from dataclasses import dataclass

from ..core.model import ApiResponse, Model, ResponseBody, wire


@dataclass
class EventRecord(Model):
    rule_id: str | None = wire("RuleId")
    rule_name: str | None = wire("RuleName")
    event_type: str | None = wire("EventType")
    event_scope: str | None = wire("EventScope")
    event_channel: str | None = wire("EventChannel")
    instance_id: str | None = wire("InstanceId")
    create_time: int | None = wire("CreateTime")
    modified_time: int | None = wire("ModifiedTime")


# ListEventCenterRecord


@dataclass
class ListEventCenterRecordRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    rule_id: str | None = wire("RuleId")
    event_type: str | None = wire("EventType")
    page_no: int | None = wire("PageNo")
    page_size: int | None = wire("PageSize")


@dataclass
class ListEventCenterRecordResponseBody(ResponseBody):
    records: list[EventRecord] | None = wire("Records")
    page_no: int | None = wire("PageNo")
    page_size: int | None = wire("PageSize")
    total_count: int | None = wire("TotalCount")


@dataclass
class ListEventCenterRecordResponse(ApiResponse):
    body: ListEventCenterRecordResponseBody | None = wire("body", required=True)


# DeleteEventCenterRule


@dataclass
class DeleteEventCenterRuleRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    rule_id: str | None = wire("RuleId", required=True)


@dataclass
class DeleteEventCenterRuleResponseBody(ResponseBody):
    pass


@dataclass
class DeleteEventCenterRuleResponse(ApiResponse):
    body: DeleteEventCenterRuleResponseBody | None = wire("body", required=True)
