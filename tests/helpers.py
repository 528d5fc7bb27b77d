"""Test helpers: fake transports and isolation for live tests."""

import json
import os
import time
import uuid
from typing import Any

from cr_openapi_client import Client, ClientError
from cr_openapi_client.models import DeleteNamespaceRequest


def generate_test_id() -> str:
    """Generate unique test identifier."""
    timestamp = int(time.time() * 1000) % 10000  # Last 4 digits of ms timestamp
    uuid_part = str(uuid.uuid4())[:8]
    worker_id = os.getenv("PYTEST_XDIST_WORKER", "main")
    return f"{worker_id}-{timestamp}-{uuid_part}"


def make_namespace_name(base_name: str, test_id: str) -> str:
    """Create isolated namespace name."""
    return f"test-{test_id}-{base_name}".lower()


class RecordingTransport:
    """Transport double that records calls and returns a canned response."""

    def __init__(self, body: dict[str, Any] | None = None, status: int = 200):
        self.body = body if body is not None else {
            "Code": "success",
            "IsSuccess": True,
            "RequestId": "req-1",
        }
        self.status = status
        self.calls: list[dict[str, Any]] = []

    async def do_rpc_request(self, params, query, runtime, headers=None):
        self.calls.append({"params": params, "query": query, "runtime": runtime})
        return {
            "headers": {"x-acs-request-id": "req-1"},
            "statusCode": self.status,
            "body": self.body,
        }

    @property
    def last(self) -> dict[str, Any]:
        return self.calls[-1]


class FakeApi:
    """Canned answer for the in-process API server, plus what it received."""

    def __init__(self):
        self.status = 200
        self.text = json.dumps(
            {"Code": "success", "IsSuccess": True, "RequestId": "req-1"}
        )
        self.content_type = "application/json"
        self.delay = 0.0
        self.endpoint = ""
        self.requests: list[dict[str, Any]] = []

    def respond(self, status: int = 200, body: Any = None, text: str | None = None):
        self.status = status
        self.text = text if text is not None else json.dumps(body)

    @property
    def last(self) -> dict[str, Any]:
        return self.requests[-1]


class IntegrationContext:
    """Context manager that deletes the namespaces a live test created."""

    def __init__(self, client: Client, instance_id: str):
        self.client = client
        self.instance_id = instance_id
        self.test_id = generate_test_id()
        self.created_namespaces: list[str] = []

    def namespace_name(self, base_name: str) -> str:
        """Get isolated namespace name."""
        name = make_namespace_name(base_name, self.test_id)
        self.created_namespaces.append(name)
        return name

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        for name in self.created_namespaces:
            try:
                await self.client.delete_namespace(
                    DeleteNamespaceRequest(
                        instance_id=self.instance_id, namespace_name=name
                    )
                )
            except ClientError:
                pass  # Ignore cleanup errors


class CapturingResponse:
    status = 200
    headers = {"X-Acs-Request-Id": "req-1"}

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return None

    async def text(self):
        return json.dumps({"IsSuccess": True, "RequestId": "req-1"})


class CapturingSession:
    """Session double that records the options of each request."""

    closed = False

    def __init__(self):
        self.requests: list[dict[str, Any]] = []

    def request(self, method, url, **options):
        self.requests.append({"method": method, "url": url, "options": options})
        return CapturingResponse()

    @property
    def last(self) -> dict[str, Any]:
        return self.requests[-1]
