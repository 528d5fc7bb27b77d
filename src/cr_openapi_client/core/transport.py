"""RPC-style HTTP transport for the OpenAPI gateway."""

import asyncio
import logging
import platform
from typing import Any

import aiohttp
from yarl import URL

from ..exceptions import ConfigurationError, ServiceError, TransportError
from ..utils.signature import (
    SIGNATURE_METHOD,
    SIGNATURE_VERSION,
    get_nonce,
    get_rpc_signature,
    get_timestamp,
    percent_encode,
)
from .config import Config, Params, RuntimeOptions
from .session import build_timeout, create_session, parse_json_response

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = (
    f"AlibabaCloud ({platform.system()}; {platform.machine()}) "
    f"Python/{platform.python_version()} Core/0.01 TeaDSL/1"
)


def get_user_agent(user_agent: str | None = None) -> str:
    """Default user agent, with the configured one appended."""
    if user_agent:
        return f"{DEFAULT_USER_AGENT} {user_agent}"
    return DEFAULT_USER_AGENT


def _first(data: dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


class RpcTransport:
    """Sends signed RPC requests to one endpoint."""

    def __init__(self, config: Config, endpoint: str) -> None:
        """Initialize the transport.

        Args:
            config: Client configuration (credentials, timeouts, proxies)
            endpoint: Endpoint host, optionally with port
        """
        self.config = config
        self.endpoint = endpoint
        self.session: aiohttp.ClientSession | None = None

    async def open(self) -> None:
        """Open a session shared by subsequent calls."""
        if not self.session or self.session.closed:
            self.session = await create_session(
                self.config.connect_timeout, self.config.read_timeout
            )

    async def close(self) -> None:
        """Close the shared session."""
        if self.session and not self.session.closed:
            await self.session.close()
        self.session = None

    def build_query(
        self, params: Params, query: dict[str, str], method: str
    ) -> dict[str, str]:
        """Merge common parameters into the request query and sign it."""
        full_query = {
            "Action": params.action,
            "Format": "json",
            "Version": params.version,
            "Timestamp": get_timestamp(),
            "SignatureNonce": get_nonce(),
        }
        full_query.update(query)

        if params.auth_type != "Anonymous":
            if not self.config.access_key_id or not self.config.access_key_secret:
                raise ConfigurationError(
                    "AccessKeyId and AccessKeySecret are required for AK authentication"
                )

            if self.config.security_token:
                full_query["SecurityToken"] = self.config.security_token
            full_query["SignatureMethod"] = SIGNATURE_METHOD
            full_query["SignatureVersion"] = SIGNATURE_VERSION
            full_query["AccessKeyId"] = self.config.access_key_id
            full_query["Signature"] = get_rpc_signature(
                full_query, method, self.config.access_key_secret
            )

        return full_query

    def build_url(self, params: Params, query: dict[str, str]) -> URL:
        protocol = (self.config.protocol or params.protocol).lower()
        encoded_query = "&".join(
            f"{percent_encode(key)}={percent_encode(value)}"
            for key, value in query.items()
        )
        return URL(
            f"{protocol}://{self.endpoint}{params.pathname}?{encoded_query}",
            encoded=True,
        )

    async def do_rpc_request(
        self,
        params: Params,
        query: dict[str, str],
        runtime: RuntimeOptions,
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        """Send one RPC request.

        Args:
            params: Fixed operation parameters
            query: Flattened request query
            runtime: Per-call options
            headers: Extra request headers

        Returns:
            Map with "headers", "statusCode" and "body" keys

        Raises:
            ConfigurationError: If credentials are missing
            TransportError: If the request cannot be completed
            ResponseParseError: If the body is not JSON
            ServiceError: If the API answers with a 4xx or 5xx status
        """
        method = params.method.upper()
        url = self.build_url(params, self.build_query(params, query, method))

        request_headers = {
            "host": self.endpoint,
            "x-acs-version": params.version,
            "x-acs-action": params.action,
            "user-agent": get_user_agent(self.config.user_agent),
        }
        if headers:
            request_headers.update(headers)

        if self.session and not self.session.closed:
            return await self._send(self.session, params, url, request_headers, runtime)

        async with await create_session(
            self.config.connect_timeout, self.config.read_timeout
        ) as session:
            return await self._send(session, params, url, request_headers, runtime)

    async def _send(
        self,
        session: aiohttp.ClientSession,
        params: Params,
        url: URL,
        headers: dict[str, str],
        runtime: RuntimeOptions,
    ) -> dict[str, Any]:
        timeout = build_timeout(
            runtime.connect_timeout or self.config.connect_timeout,
            runtime.read_timeout or self.config.read_timeout,
        )
        options: dict[str, Any] = {"headers": headers, "timeout": timeout}

        if url.scheme == "https":
            proxy = runtime.https_proxy or self.config.https_proxy
        else:
            proxy = runtime.http_proxy or self.config.http_proxy
        if proxy:
            options["proxy"] = proxy
        if runtime.ignore_ssl:
            options["ssl"] = False

        logger.debug(
            "Calling %s (%s %s://%s)",
            params.action,
            params.method,
            url.scheme,
            self.endpoint,
        )

        try:
            async with session.request(params.method.upper(), url, **options) as resp:
                status = resp.status
                response_headers = {
                    key.lower(): value for key, value in resp.headers.items()
                }
                text = await resp.text()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"Failed to call {params.action}: {e!r}") from e

        if status >= 400:
            raise self._service_error(params, status, text)

        body = parse_json_response(text)
        logger.debug(
            "%s returned %s (request id %s)",
            params.action,
            status,
            body.get("RequestId") if isinstance(body, dict) else None,
        )
        return {"headers": response_headers, "statusCode": status, "body": body}

    def _service_error(self, params: Params, status: int, text: str) -> ServiceError:
        data = parse_json_response(text)
        if not isinstance(data, dict):
            data = {"body": data}

        request_id = _first(data, "RequestId", "requestId")
        code = _first(data, "Code", "code")
        message = _first(data, "Message", "message")
        logger.warning(
            "%s failed with status %s, code %s (request id %s)",
            params.action,
            status,
            code,
            request_id,
        )
        return ServiceError(
            code=None if code is None else str(code),
            message=f"code: {status}, {message} request id: {request_id}",
            status_code=status,
            request_id=request_id,
            data=data,
        )
