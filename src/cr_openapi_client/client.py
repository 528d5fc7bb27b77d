"""Container Registry API (2018-12-01) client."""

from .core.client import OpenApiClient
from .operations import (
    BuildOperations,
    ChainOperations,
    ChartOperations,
    EventOperations,
    InstanceOperations,
    NamespaceOperations,
    RepositoryOperations,
    ScanOperations,
    SyncOperations,
    TriggerOperations,
)

API_VERSION = "2018-12-01"


class Client(
    InstanceOperations,
    NamespaceOperations,
    RepositoryOperations,
    BuildOperations,
    SyncOperations,
    TriggerOperations,
    ScanOperations,
    ChainOperations,
    ChartOperations,
    EventOperations,
    OpenApiClient,
):
    """Async client for Container Registry Enterprise Edition.

    Every operation exists as ``<op>(request)`` and
    ``<op>_with_options(request, runtime)``.

    Examples:
        async with Client(Config.from_env(region_id="cn-hangzhou")) as client:
            resp = await client.list_instance(ListInstanceRequest(page_size=10))
            for instance in resp.body.instances or []:
                print(instance.instance_id, instance.instance_name)
    """

    product_id = "cr"
    api_version = API_VERSION
    endpoint_rule = "regional"
    endpoint_map: dict[str, str] = {}
