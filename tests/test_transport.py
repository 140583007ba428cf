"""Tests for the HTTP and web3-provider transports (no live node needed)."""

import logging

import pytest
import requests

from walletrpc.errors import (
    HttpRequestError,
    RequestTimeoutError,
    UserRejectedRequestError,
)
from walletrpc.transport import HttpTransport, Web3ProviderTransport

RPC_URL = "http://wallet.test/rpc"


@pytest.fixture
def transport():
    return HttpTransport(url=RPC_URL, timeout=5, retry_count=2, retry_delay=0)


class TestHttpTransport:
    def test_returns_result(self, transport, requests_mock):
        requests_mock.post(RPC_URL, json={"jsonrpc": "2.0", "id": 1, "result": "0xabc"})
        assert transport.request("wallet_sendPreparedCalls", [{}]) == "0xabc"

        body = requests_mock.last_request.json()
        assert body["jsonrpc"] == "2.0"
        assert body["method"] == "wallet_sendPreparedCalls"
        assert body["params"] == [{}]

    def test_object_params_sent_as_is(self, transport, requests_mock):
        requests_mock.post(RPC_URL, json={"jsonrpc": "2.0", "id": 1, "result": {}})
        transport.request("wallet_grantPermissions", {"permissions": []})
        assert requests_mock.last_request.json()["params"] == {"permissions": []}

    def test_ids_increase(self, transport, requests_mock):
        requests_mock.post(RPC_URL, json={"jsonrpc": "2.0", "id": 1, "result": None})
        transport.request("a", [])
        transport.request("b", [])
        ids = [r.json()["id"] for r in requests_mock.request_history]
        assert ids[1] > ids[0]

    def test_rpc_error_is_raised_not_retried(self, transport, requests_mock):
        requests_mock.post(
            RPC_URL,
            json={"jsonrpc": "2.0", "id": 1, "error": {"code": 4001, "message": "User rejected"}},
        )
        with pytest.raises(UserRejectedRequestError):
            transport.request("wallet_grantPermissions", {})
        assert requests_mock.call_count == 1

    def test_retries_transient_status(self, transport, requests_mock):
        requests_mock.post(
            RPC_URL,
            [
                {"status_code": 503, "text": "unavailable"},
                {"status_code": 200, "json": {"jsonrpc": "2.0", "id": 1, "result": "ok"}},
            ],
        )
        assert transport.request("wallet_getActivePermissions", ["0x0"]) == "ok"
        assert requests_mock.call_count == 2

    def test_retry_count_zero_disables_retry(self, transport, requests_mock):
        requests_mock.post(
            RPC_URL,
            [
                {"status_code": 503, "text": "unavailable"},
                {"status_code": 200, "json": {"jsonrpc": "2.0", "id": 1, "result": "ok"}},
            ],
        )
        with pytest.raises(HttpRequestError) as exc_info:
            transport.request("wallet_sendPreparedCalls", [{}], retry_count=0)
        assert exc_info.value.status == 503
        assert requests_mock.call_count == 1

    def test_gives_up_after_retry_count(self, transport, requests_mock):
        requests_mock.post(RPC_URL, status_code=502, text="bad gateway")
        with pytest.raises(HttpRequestError):
            transport.request("x", [])
        assert requests_mock.call_count == 3

    def test_non_json_body(self, transport, requests_mock):
        requests_mock.post(RPC_URL, text="<html>oops</html>")
        with pytest.raises(HttpRequestError, match="non-json"):
            transport.request("x", [])

    def test_timeout(self, transport, requests_mock):
        requests_mock.post(RPC_URL, exc=requests.exceptions.ReadTimeout)
        with pytest.raises(RequestTimeoutError):
            transport.request("x", [], retry_count=0)

    def test_connection_error(self, transport, requests_mock):
        requests_mock.post(RPC_URL, exc=requests.exceptions.ConnectionError("refused"))
        with pytest.raises(HttpRequestError, match="failed"):
            transport.request("x", [])
        assert requests_mock.call_count == 3


class TestHttpTransportConfig:
    def test_env_fallbacks(self, monkeypatch):
        monkeypatch.setenv("WALLET_RPC_URL", "http://env.test")
        monkeypatch.setenv("WALLET_RPC_TIMEOUT", "12")
        monkeypatch.setenv("WALLET_RPC_RETRY_COUNT", "0")
        monkeypatch.setenv("WALLET_RPC_RETRY_DELAY", "1.5")
        t = HttpTransport.from_env()
        assert t.url == "http://env.test"
        assert t.timeout == 12.0
        assert t.retry_count == 0
        assert t.retry_delay == 1.5

    def test_constructor_args_win(self, monkeypatch):
        monkeypatch.setenv("WALLET_RPC_URL", "http://env.test")
        monkeypatch.setenv("WALLET_RPC_RETRY_COUNT", "9")
        t = HttpTransport(url=RPC_URL, retry_count=1)
        assert t.url == RPC_URL
        assert t.retry_count == 1

    def test_negative_retry_count_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            HttpTransport(url=RPC_URL, retry_count=-1)

    def test_negative_retry_count_from_env_rejected(self, monkeypatch):
        monkeypatch.setenv("WALLET_RPC_RETRY_COUNT", "-1")
        with pytest.raises(ValueError, match="non-negative"):
            HttpTransport.from_env()

    def test_negative_per_request_retry_count_sends_nothing(self, transport, requests_mock):
        requests_mock.post(RPC_URL, json={"jsonrpc": "2.0", "id": 1, "result": "ok"})
        with pytest.raises(ValueError, match="non-negative"):
            transport.request("x", [], retry_count=-1)
        assert requests_mock.call_count == 0

    def test_explicit_zero_timeout_kept(self, monkeypatch):
        monkeypatch.setenv("WALLET_RPC_TIMEOUT", "12")
        assert HttpTransport(url=RPC_URL, timeout=0).timeout == 0

    def test_defaults(self, monkeypatch):
        for var in ("WALLET_RPC_URL", "WALLET_RPC_TIMEOUT", "WALLET_RPC_RETRY_COUNT", "WALLET_RPC_RETRY_DELAY"):
            monkeypatch.delenv(var, raising=False)
        t = HttpTransport()
        assert t.url == "http://localhost:8545"
        assert t.timeout == 30.0
        assert t.retry_count == 3


class FakeProvider:
    def __init__(self, response):
        self.response = response
        self.requests = []

    def make_request(self, method, params):
        self.requests.append((method, params))
        return self.response


class TestWeb3ProviderTransport:
    def test_returns_result(self):
        provider = FakeProvider({"jsonrpc": "2.0", "id": 1, "result": {"permissions": []}})
        t = Web3ProviderTransport(provider)
        assert t.request("wallet_getActivePermissions", ["0x0"]) == {"permissions": []}
        assert provider.requests == [("wallet_getActivePermissions", ["0x0"])]

    def test_unapplied_retry_count_logged(self, caplog):
        provider = FakeProvider({"jsonrpc": "2.0", "id": 1, "result": "0xbundle"})
        with caplog.at_level(logging.DEBUG, logger="walletrpc.transport"):
            Web3ProviderTransport(provider).request("wallet_sendPreparedCalls", [{}], retry_count=0)
        assert "retry_count=0 not applied" in caplog.text

    def test_error_mapped(self):
        provider = FakeProvider({"jsonrpc": "2.0", "id": 1, "error": {"code": 4001, "message": "no"}})
        with pytest.raises(UserRejectedRequestError):
            Web3ProviderTransport(provider).request("wallet_grantPermissions", {}, retry_count=0)
