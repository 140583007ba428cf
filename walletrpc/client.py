"""Wallet client: a transport plus the default account and chain for actions."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Union

from .accounts import AccountLike
from .errors import ChainNotFoundError
from .transport import HttpTransport, Transport


@dataclass(frozen=True)
class Chain:
    id: int
    name: str = ""


ChainLike = Union[Chain, int]


def resolve_chain(explicit: ChainLike | None, default: ChainLike | None) -> Chain:
    """Explicit chain first, then the client default.

    Raises:
        ChainNotFoundError: If neither is set.
    """
    chain = explicit if explicit is not None else default
    if chain is None:
        raise ChainNotFoundError()
    if isinstance(chain, Chain):
        return chain
    if isinstance(chain, int) and not isinstance(chain, bool):
        return Chain(id=chain)
    chain_id = getattr(chain, "id", None)
    if isinstance(chain_id, int):
        return Chain(id=chain_id, name=str(getattr(chain, "name", "") or ""))
    raise ChainNotFoundError()


class WalletClient:
    """Holds the transport and the ambient defaults every action falls back to.

    Actions never read shared state; the client is passed to each one
    explicitly and an explicit ``account``/``chain`` argument always wins
    over the defaults stored here.
    """

    def __init__(
        self,
        transport: Transport,
        account: AccountLike | None = None,
        chain: ChainLike | None = None,
    ):
        self.transport = transport
        self.account = account
        self.chain = chain

    @classmethod
    def from_env(cls) -> "WalletClient":
        """Build client from environment variables.

        Reads the HttpTransport variables plus ``WALLET_ACCOUNT`` and
        ``WALLET_CHAIN_ID``.
        """
        chain_id = os.environ.get("WALLET_CHAIN_ID")
        return cls(
            transport=HttpTransport.from_env(),
            account=os.environ.get("WALLET_ACCOUNT") or None,
            chain=int(chain_id, 0) if chain_id else None,
        )

    def request(self, method: str, params: list[Any] | dict[str, Any], retry_count: int | None = None) -> Any:
        return self.transport.request(method, params, retry_count=retry_count)

    # -- action shortcuts --

    def get_active_permissions(self, **kwargs):
        from .erc7715.actions import get_active_permissions

        return get_active_permissions(self, **kwargs)

    def grant_permissions(self, permissions, **kwargs):
        from .erc7715.actions import grant_permissions

        return grant_permissions(self, permissions, **kwargs)

    def prepare_calls(self, calls, **kwargs):
        from .eip5792.actions import prepare_calls

        return prepare_calls(self, calls, **kwargs)

    def send_prepared_calls(self, prepared_calls, signature_data, **kwargs):
        from .eip5792.actions import send_prepared_calls

        return send_prepared_calls(self, prepared_calls, signature_data, **kwargs)
