"""Shared fixtures: a transport spy that records every request it receives."""

import pytest

from walletrpc import Chain, WalletClient

ANVIL_ACCOUNT_0 = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
ANVIL_ACCOUNT_1 = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"


class SpyTransport:
    """Returns a canned result (or raises a canned error) and records calls."""

    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    def request(self, method, params, retry_count=None):
        self.calls.append({"method": method, "params": params, "retry_count": retry_count})
        if self.error is not None:
            raise self.error
        return self.result

    @property
    def last(self):
        return self.calls[-1]


@pytest.fixture
def spy():
    return SpyTransport()


@pytest.fixture
def client(spy):
    return WalletClient(spy, account=ANVIL_ACCOUNT_0, chain=Chain(id=1, name="mainnet"))


@pytest.fixture
def bare_client(spy):
    """Client without default account or chain."""
    return WalletClient(spy)
