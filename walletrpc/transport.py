"""JSON-RPC transports: plain HTTP via requests, or any web3.py provider.

Environment variables (all overridable via constructor args):
    WALLET_RPC_URL          – JSON-RPC endpoint  (default http://localhost:8545)
    WALLET_RPC_TIMEOUT      – request timeout in seconds (default 30)
    WALLET_RPC_RETRY_COUNT  – retries for transient failures (default 3)
    WALLET_RPC_RETRY_DELAY  – base backoff in seconds (default 0.15)
"""

from __future__ import annotations

import itertools
import logging
import os
import time
from typing import Any, Protocol

import requests
from web3.types import RPCEndpoint

from .errors import HttpRequestError, RequestTimeoutError, rpc_error_from_response

_LOG = logging.getLogger(__name__)

RETRYABLE_HTTP_CODES = frozenset({429, 502, 503, 504})


class Transport(Protocol):
    """Sends one named JSON-RPC method and returns its decoded ``result``."""

    def request(self, method: str, params: list[Any] | dict[str, Any], retry_count: int | None = None) -> Any:
        ...


class HttpTransport:
    """JSON-RPC 2.0 over HTTP POST with bounded retries for transient failures."""

    def __init__(
        self,
        url: str | None = None,
        timeout: float | None = None,
        retry_count: int | None = None,
        retry_delay: float | None = None,
        headers: dict[str, str] | None = None,
        session: requests.Session | None = None,
    ):
        self.url = url or os.environ.get("WALLET_RPC_URL", "http://localhost:8545")
        if timeout is None:
            timeout = float(os.environ.get("WALLET_RPC_TIMEOUT", "30"))
        self.timeout = timeout
        if retry_count is None:
            retry_count = int(os.environ.get("WALLET_RPC_RETRY_COUNT", "3"))
        if retry_count < 0:
            raise ValueError(f"retry_count must be non-negative, got {retry_count}")
        self.retry_count = retry_count
        if retry_delay is None:
            retry_delay = float(os.environ.get("WALLET_RPC_RETRY_DELAY", "0.15"))
        self.retry_delay = retry_delay
        self.headers = {"Content-Type": "application/json", **(headers or {})}
        self.session = session or requests.Session()
        self._ids = itertools.count(1)

    @classmethod
    def from_env(cls) -> "HttpTransport":
        """Build transport from environment variables."""
        return cls()

    def request(self, method: str, params: list[Any] | dict[str, Any], retry_count: int | None = None) -> Any:
        """POST one JSON-RPC call and return its ``result``.

        Args:
            method: RPC method name, e.g. ``wallet_grantPermissions``.
            params: Positional params list, or a single params object.
            retry_count: Retries for this call; ``None`` uses the transport default.

        Raises:
            RpcError: The wallet answered with a JSON-RPC error (never retried).
            HttpRequestError: Non-2xx status or a non-JSON body.
            RequestTimeoutError: The request timed out on the last attempt.
            ValueError: If the effective retry count is negative.
        """
        retries = self.retry_count if retry_count is None else retry_count
        if retries < 0:
            raise ValueError(f"retry_count must be non-negative, got {retries}")
        payload = {"jsonrpc": "2.0", "id": next(self._ids), "method": method, "params": params}
        _LOG.debug("rpc request method=%s id=%s retry=%s", method, payload["id"], retries)

        attempt = 0
        while True:
            try:
                resp = self.session.post(
                    self.url, json=payload, headers=self.headers, timeout=self.timeout
                )
            except requests.Timeout as e:
                if attempt >= retries:
                    raise RequestTimeoutError(url=self.url, timeout=self.timeout) from e
                self._backoff(method, attempt, e)
            except requests.RequestException as e:
                if attempt >= retries:
                    raise HttpRequestError(f"POST {self.url} failed: {e}", url=self.url) from e
                self._backoff(method, attempt, e)
            else:
                if resp.status_code not in RETRYABLE_HTTP_CODES or attempt >= retries:
                    return self._parse(resp)
                self._backoff(method, attempt, f"http {resp.status_code}")
            attempt += 1

    def _backoff(self, method: str, attempt: int, reason: Any) -> None:
        _LOG.warning("rpc retry method=%s attempt=%s reason=%s", method, attempt + 1, reason)
        time.sleep(self.retry_delay * (attempt + 1))

    def _parse(self, resp: requests.Response) -> Any:
        if resp.status_code != 200:
            raise HttpRequestError(
                f"RPC endpoint returned HTTP {resp.status_code}",
                url=self.url,
                status=resp.status_code,
                body=resp.text,
            )
        try:
            data = resp.json()
        except ValueError as e:
            raise HttpRequestError(
                "RPC endpoint returned non-json response",
                url=self.url,
                status=resp.status_code,
                body=resp.text,
            ) from e
        if not isinstance(data, dict):
            raise HttpRequestError(
                "RPC endpoint returned a malformed response",
                url=self.url,
                status=resp.status_code,
                body=resp.text,
            )
        if data.get("error") is not None:
            raise rpc_error_from_response(data["error"])
        return data.get("result")


class Web3ProviderTransport:
    """Dispatch through an existing web3.py provider (HTTP, IPC, WebSocket...).

    Retries are the provider's business: ``retry_count`` is accepted for
    interface compatibility but not applied.  Mutating actions ask for
    ``retry_count=0``; they only go out unretried if the provider is
    configured that way, e.g. ``HTTPProvider(url,
    exception_retry_configuration=None)``.
    """

    def __init__(self, provider):
        self.provider = provider

    def request(self, method: str, params: list[Any] | dict[str, Any], retry_count: int | None = None) -> Any:
        _LOG.debug("provider request method=%s", method)
        if retry_count is not None:
            _LOG.debug(
                "provider request method=%s retry_count=%s not applied, provider settings govern",
                method,
                retry_count,
            )
        response = self.provider.make_request(RPCEndpoint(method), params)
        if response.get("error") is not None:
            raise rpc_error_from_response(response["error"])
        return response.get("result")
