"""Utility functions for the Container Registry OpenAPI client."""

from .query import array_to_string, flatten_query, to_query_value
from .signature import get_nonce, get_rpc_signature, get_timestamp

__all__ = [
    "array_to_string",
    "flatten_query",
    "to_query_value",
    "get_nonce",
    "get_rpc_signature",
    "get_timestamp",
]
