"""Repository webhook trigger models."""

from dataclasses import dataclass

from ..core.model import ApiResponse, Model, ResponseBody, wire


@dataclass
class Trigger(Model):
    trigger_id: str | None = wire("TriggerId")
    trigger_name: str | None = wire("TriggerName")
    trigger_url: str | None = wire("TriggerUrl")
    # ALL, TAG_LISTING or TAG_REG_EXP
    trigger_type: str | None = wire("TriggerType")
    trigger_tag: str | None = wire("TriggerTag")


# CreateRepoTrigger


@dataclass
class CreateRepoTriggerRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_id: str | None = wire("RepoId", required=True)
    trigger_name: str | None = wire("TriggerName", required=True)
    trigger_url: str | None = wire("TriggerUrl", required=True)
    trigger_type: str | None = wire("TriggerType", required=True)
    trigger_tag: str | None = wire("TriggerTag")


@dataclass
class CreateRepoTriggerResponseBody(ResponseBody):
    trigger_id: str | None = wire("TriggerId")


@dataclass
class CreateRepoTriggerResponse(ApiResponse):
    body: CreateRepoTriggerResponseBody | None = wire("body", required=True)


# DeleteRepoTrigger


@dataclass
class DeleteRepoTriggerRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_id: str | None = wire("RepoId", required=True)
    trigger_id: str | None = wire("TriggerId", required=True)


@dataclass
class DeleteRepoTriggerResponseBody(ResponseBody):
    pass


@dataclass
class DeleteRepoTriggerResponse(ApiResponse):
    body: DeleteRepoTriggerResponseBody | None = wire("body", required=True)


# UpdateRepoTrigger


@dataclass
class UpdateRepoTriggerRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_id: str | None = wire("RepoId", required=True)
    trigger_id: str | None = wire("TriggerId", required=True)
    trigger_name: str | None = wire("TriggerName")
    trigger_url: str | None = wire("TriggerUrl")
    trigger_type: str | None = wire("TriggerType")
    trigger_tag: str | None = wire("TriggerTag")


@dataclass
class UpdateRepoTriggerResponseBody(ResponseBody):
    pass


@dataclass
class UpdateRepoTriggerResponse(ApiResponse):
    body: UpdateRepoTriggerResponseBody | None = wire("body", required=True)


# ListRepoTrigger


@dataclass
class ListRepoTriggerRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_id: str | None = wire("RepoId", required=True)


@dataclass
class ListRepoTriggerResponseBody(ResponseBody):
    triggers: list[Trigger] | None = wire("Triggers")


@dataclass
class ListRepoTriggerResponse(ApiResponse):
    body: ListRepoTriggerResponseBody | None = wire("body", required=True)
