"""Print docker login credentials for an Enterprise Edition registry."""

import asyncio
import logging
import sys

# Add parent directory to path
sys.path.insert(0, "src")

from cr_openapi_client import ClientError, get_registry_credentials

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def main(server_url: str):
    try:
        creds = await get_registry_credentials(server_url)
    except ClientError as e:
        logger.error(f"Cannot get credentials for {server_url}: {e}")
        return 1

    logger.info(f"Credentials valid until {creds.expire_time.isoformat()}")
    print(f"docker login --username={creds.username} {server_url}")
    return 0


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("usage: docker_login.py <instance>-registry.<region>.cr.aliyuncs.com")
        sys.exit(2)
    sys.exit(asyncio.run(main(sys.argv[1])))
