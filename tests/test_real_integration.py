"""Real integration tests against a live Container Registry instance.

Requires ``CR_INTEGRATION=true``, Alibaba Cloud credentials and region in the
environment, and ``CR_INSTANCE_ID`` naming an Enterprise Edition instance.
"""

import os

import pytest
import pytest_asyncio

pytestmark = pytest.mark.integration  # Mark all tests in this file as integration

from cr_openapi_client import Client, Config, ServiceError, models
from tests.helpers import IntegrationContext


@pytest.fixture
def instance_id():
    value = os.getenv("CR_INSTANCE_ID")
    if not value:
        pytest.skip("CR_INSTANCE_ID is not set")
    return value


@pytest_asyncio.fixture
async def live_client():
    config = Config.from_env()
    if not config.access_key_id or not config.region_id:
        pytest.skip("Alibaba Cloud credentials or region not configured")
    async with Client(config) as client:
        yield client


@pytest.mark.asyncio
async def test_list_instances(live_client):
    """Test listing instances."""
    response = await live_client.list_instance(models.ListInstanceRequest(page_size=10))
    assert response.status_code == 200
    assert response.body.is_success is True
    assert isinstance(response.body.instances or [], list)


@pytest.mark.asyncio
async def test_get_instance(live_client, instance_id):
    response = await live_client.get_instance(
        models.GetInstanceRequest(instance_id=instance_id)
    )
    assert response.body.instance_id == instance_id


@pytest.mark.asyncio
async def test_namespace_lifecycle(live_client, instance_id):
    """Test create, get and list of an isolated namespace."""
    async with IntegrationContext(live_client, instance_id) as ctx:
        name = ctx.namespace_name("ns")

        created = await live_client.create_namespace(
            models.CreateNamespaceRequest(
                instance_id=instance_id, namespace_name=name, auto_create_repo=False
            )
        )
        assert created.body.is_success is True

        fetched = await live_client.get_namespace(
            models.GetNamespaceRequest(instance_id=instance_id, namespace_name=name)
        )
        assert fetched.body.namespace_name == name

        listed = await live_client.list_namespace(
            models.ListNamespaceRequest(instance_id=instance_id, namespace_name=name)
        )
        assert name in [ns.namespace_name for ns in listed.body.namespaces or []]


@pytest.mark.asyncio
async def test_get_missing_namespace(live_client, instance_id):
    with pytest.raises(ServiceError) as exc_info:
        await live_client.get_namespace(
            models.GetNamespaceRequest(
                instance_id=instance_id, namespace_name="does-not-exist-namespace"
            )
        )
    assert exc_info.value.status_code >= 400
    assert exc_info.value.request_id


@pytest.mark.asyncio
async def test_authorization_token(live_client, instance_id):
    response = await live_client.get_authorization_token(
        models.GetAuthorizationTokenRequest(instance_id=instance_id)
    )
    assert response.body.authorization_token
    assert response.body.temp_username
    assert response.body.expire_time > 0
