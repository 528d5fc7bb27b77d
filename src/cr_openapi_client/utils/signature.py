"""RPC request signing (HMAC-SHA1, signature version 1.0)."""

import base64
import hashlib
import hmac
import uuid
from datetime import datetime, timezone
from urllib.parse import quote

SIGNATURE_METHOD = "HMAC-SHA1"
SIGNATURE_VERSION = "1.0"


def percent_encode(value: str) -> str:
    """Percent-encode a value per RFC 3986 (``~`` stays, space is ``%20``)."""
    return quote(value, safe="~")


def get_timestamp() -> str:
    """Current UTC time in the format the gateway expects."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def get_nonce() -> str:
    """Random nonce, unique per request."""
    return uuid.uuid4().hex


def build_string_to_sign(signed_params: dict[str, str], method: str) -> str:
    """Build the canonical string to sign.

    Args:
        signed_params: All query parameters except ``Signature``
        method: HTTP method, e.g. ``GET``

    Returns:
        ``METHOD&%2F&<encoded canonical query>``
    """
    canonical = "&".join(
        f"{percent_encode(key)}={percent_encode(signed_params[key])}"
        for key in sorted(signed_params)
    )
    return f"{method.upper()}&{percent_encode('/')}&{percent_encode(canonical)}"


def get_rpc_signature(signed_params: dict[str, str], method: str, secret: str) -> str:
    """Sign RPC query parameters with an AccessKey secret.

    Args:
        signed_params: Query parameters to sign
        method: HTTP method
        secret: AccessKey secret

    Returns:
        Base64 encoded HMAC-SHA1 signature
    """
    string_to_sign = build_string_to_sign(signed_params, method)
    digest = hmac.new(
        f"{secret}&".encode("utf-8"),
        string_to_sign.encode("utf-8"),
        hashlib.sha1,
    ).digest()
    return base64.b64encode(digest).decode("utf-8")
