"""Test configuration and fixtures."""

import asyncio
import os

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from cr_openapi_client import Config
from tests.helpers import FakeApi, RecordingTransport


@pytest.fixture
def config():
    """Config with static credentials for unit tests."""
    return Config(
        access_key_id="test-key-id",
        access_key_secret="test-key-secret",
        region_id="cn-hangzhou",
    )


@pytest.fixture
def transport():
    """Recording transport returning a successful empty body."""
    return RecordingTransport()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep real credentials and helper overrides out of unit tests."""
    if os.getenv("CR_INTEGRATION", "false").lower() == "true":
        return
    for name in (
        "ALIBABA_CLOUD_ACCESS_KEY_ID",
        "ALIBABA_CLOUD_ACCESS_KEY_Id",
        "ALIBABA_CLOUD_ACCESS_KEY_SECRET",
        "ALIBABA_CLOUD_SECURITY_TOKEN",
        "ALIBABA_CLOUD_REGION_ID",
        "DOCKER_CREDENTIAL_ACR_HELPER_INSTANCE_ID",
        "DOCKER_CREDENTIAL_ACR_HELPER_REGION",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest_asyncio.fixture
async def fake_api():
    """In-process HTTP server standing in for the OpenAPI gateway."""
    api = FakeApi()

    async def handler(request: web.Request) -> web.Response:
        api.requests.append(
            {
                "method": request.method,
                "path": request.path,
                "query": dict(request.query),
                "headers": {k.lower(): v for k, v in request.headers.items()},
            }
        )
        if api.delay:
            await asyncio.sleep(api.delay)
        return web.Response(
            status=api.status,
            text=api.text,
            content_type=api.content_type,
            headers={"X-Acs-Request-Id": "req-1"},
        )

    app = web.Application()
    app.router.add_route("*", "/", handler)
    server = TestServer(app)
    await server.start_server()
    api.endpoint = f"{server.host}:{server.port}"
    try:
        yield api
    finally:
        await server.close()


@pytest.fixture
def server_config(fake_api):
    """Config pointing at the in-process server over plain HTTP."""
    return Config(
        access_key_id="test-key-id",
        access_key_secret="test-key-secret",
        region_id="cn-hangzhou",
        endpoint=fake_api.endpoint,
        protocol="http",
    )


# Pytest configuration
def pytest_configure(config):
    """Configure pytest markers and settings."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test requiring a live instance"
    )
    config.addinivalue_line("markers", "unit: mark test as unit test (default)")


def pytest_collection_modifyitems(config, items):
    """Modify test collection."""
    # Skip integration tests unless explicitly enabled
    skip_integration = pytest.mark.skip(reason="CR_INTEGRATION is not enabled")

    for item in items:
        if (
            "integration" in item.keywords
            and os.getenv("CR_INTEGRATION", "false").lower() != "true"
        ):
            item.add_marker(skip_integration)
