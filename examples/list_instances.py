"""Example usage of the async Container Registry client."""

import asyncio
import logging
import sys

# Add parent directory to path
sys.path.insert(0, "src")

from cr_openapi_client import Client, ClientError, Config, ServiceError, models

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def main():
    """List instances and the namespaces of the first few."""
    # Credentials from ALIBABA_CLOUD_ACCESS_KEY_ID / ALIBABA_CLOUD_ACCESS_KEY_SECRET
    config = Config.from_env(region_id="cn-hangzhou")

    try:
        async with Client(config) as client:
            logger.info("Listing instances...")
            resp = await client.list_instance(models.ListInstanceRequest(page_size=10))
            instances = resp.body.instances or []
            logger.info(f"Found {len(instances)} instances")

            for instance in instances[:3]:  # Show first 3 instances
                logger.info(
                    f"Instance {instance.instance_name} ({instance.instance_id}): "
                    f"{instance.instance_status}"
                )
                ns_resp = await client.list_namespace(
                    models.ListNamespaceRequest(instance_id=instance.instance_id)
                )
                names = [ns.namespace_name for ns in ns_resp.body.namespaces or []]
                logger.info(f"  Namespaces: {names}")

    except ServiceError as e:
        logger.error(f"API error {e.code} (request id {e.request_id}): {e.message}")
    except ClientError as e:
        logger.error(f"Client error: {e}")


async def concurrent_operations():
    """Fetch repositories of several namespaces concurrently."""
    config = Config.from_env(region_id="cn-hangzhou")
    instance_id = "cri-xxxxxxxx"

    try:
        async with Client(config) as client:
            ns_resp = await client.list_namespace(
                models.ListNamespaceRequest(instance_id=instance_id)
            )
            names = [ns.namespace_name for ns in ns_resp.body.namespaces or []][:3]

            tasks = [
                client.list_repository(
                    models.ListRepositoryRequest(
                        instance_id=instance_id, repo_namespace_name=name
                    )
                )
                for name in names
            ]
            results = await asyncio.gather(*tasks)

            for name, repo_resp in zip(names, results, strict=False):
                repos = [repo.repo_name for repo in repo_resp.body.repositories or []]
                logger.info(f"Namespace {name}: {repos}")

    except ClientError as e:
        logger.error(f"Client error: {e}")


if __name__ == "__main__":
    print("=== Basic Async Operations ===")
    asyncio.run(main())

    print("\n=== Concurrent Async Operations ===")
    asyncio.run(concurrent_operations())
