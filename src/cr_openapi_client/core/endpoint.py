"""Service endpoint resolution."""

from ..exceptions import ConfigurationError


def get_endpoint_rules(
    product: str,
    region_id: str | None,
    endpoint_rule: str | None,
    network: str | None = None,
    suffix: str | None = None,
) -> str:
    """Build an endpoint host from the product naming rule.

    Args:
        product: Product code (e.g. "cr")
        region_id: Region (e.g. "cn-hangzhou")
        endpoint_rule: "regional" or "central"
        network: Network type ("public", "vpc", "share", ...)
        suffix: Optional product suffix

    Returns:
        Endpoint host (e.g. "cr.cn-hangzhou.aliyuncs.com")

    Raises:
        ConfigurationError: If the rule is regional and no region is set
    """
    if endpoint_rule == "regional":
        if not region_id:
            raise ConfigurationError("RegionId is empty, please set a valid RegionId")
        host = f"<product><suffix><network>.{region_id}.aliyuncs.com"
    else:
        host = "<product><suffix><network>.aliyuncs.com"

    host = host.replace("<product>", product.lower(), 1)
    host = host.replace(
        "<network>", "" if not network or network == "public" else f"-{network}", 1
    )
    return host.replace("<suffix>", f"-{suffix}" if suffix else "", 1)


def resolve_endpoint(
    product: str,
    region_id: str | None,
    endpoint_rule: str | None,
    network: str | None = None,
    suffix: str | None = None,
    endpoint_map: dict[str, str] | None = None,
    endpoint: str | None = None,
) -> str:
    """Pick the endpoint: explicit value, then per-region override, then rule."""
    if endpoint:
        return endpoint

    if endpoint_map and region_id and endpoint_map.get(region_id):
        return endpoint_map[region_id]

    return get_endpoint_rules(product, region_id, endpoint_rule, network, suffix)
