"""Image vulnerability scan models."""

from dataclasses import dataclass

from ..core.model import ApiResponse, Model, ResponseBody, wire


@dataclass
class Vulnerability(Model):
    cve_name: str | None = wire("CveName")
    cve_level: str | None = wire("CveLevel")
    cve_link: str | None = wire("CveLink")
    description: str | None = wire("Description")
    added_by: str | None = wire("AddedBy")
    feature: str | None = wire("Feature")
    version: str | None = wire("Version")
    version_fixed: str | None = wire("VersionFixed")
    version_format: str | None = wire("VersionFormat")
    fix_cmd: str | None = wire("FixCmd")


# CreateRepoTagScanTask


@dataclass
class CreateRepoTagScanTaskRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_id: str | None = wire("RepoId", required=True)
    tag: str | None = wire("Tag", required=True)
    digest: str | None = wire("Digest")
    scan_service: str | None = wire("ScanService")


@dataclass
class CreateRepoTagScanTaskResponseBody(ResponseBody):
    pass


@dataclass
class CreateRepoTagScanTaskResponse(ApiResponse):
    body: CreateRepoTagScanTaskResponseBody | None = wire("body", required=True)


# GetRepoTagScanStatus


@dataclass
class GetRepoTagScanStatusRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_id: str | None = wire("RepoId")
    tag: str | None = wire("Tag")
    digest: str | None = wire("Digest")
    scan_task_id: str | None = wire("ScanTaskId")


@dataclass
class GetRepoTagScanStatusResponseBody(ResponseBody):
    status: str | None = wire("Status")
    scan_service: str | None = wire("ScanService")


@dataclass
class GetRepoTagScanStatusResponse(ApiResponse):
    body: GetRepoTagScanStatusResponseBody | None = wire("body", required=True)


# GetRepoTagScanSummary


@dataclass
class GetRepoTagScanSummaryRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_id: str | None = wire("RepoId")
    tag: str | None = wire("Tag")
    digest: str | None = wire("Digest")
    scan_task_id: str | None = wire("ScanTaskId")


@dataclass
class GetRepoTagScanSummaryResponseBody(ResponseBody):
    total_count: int | None = wire("TotalCount")
    high_severity: int | None = wire("HighSeverity")
    medium_severity: int | None = wire("MediumSeverity")
    low_severity: int | None = wire("LowSeverity")
    unknown_severity: int | None = wire("UnknownSeverity")


@dataclass
class GetRepoTagScanSummaryResponse(ApiResponse):
    body: GetRepoTagScanSummaryResponseBody | None = wire("body", required=True)


# ListRepoTagScanResult


@dataclass
class ListRepoTagScanResultRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_id: str | None = wire("RepoId")
    tag: str | None = wire("Tag")
    digest: str | None = wire("Digest")
    scan_task_id: str | None = wire("ScanTaskId")
    scan_type: str | None = wire("ScanType")
    severity: str | None = wire("Severity")
    filter_value: str | None = wire("FilterValue")
    page_no: int | None = wire("PageNo")
    page_size: int | None = wire("PageSize")


@dataclass
class ListRepoTagScanResultResponseBody(ResponseBody):
    vulnerabilities: list[Vulnerability] | None = wire("Vulnerabilities")
    page_no: int | None = wire("PageNo")
    page_size: int | None = wire("PageSize")
    total_count: int | None = wire("TotalCount")


@dataclass
class ListRepoTagScanResultResponse(ApiResponse):
    body: ListRepoTagScanResultResponseBody | None = wire("body", required=True)
