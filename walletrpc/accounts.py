"""Account handles: parse and checksum whatever the caller passes as an account."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from eth_account.signers.base import BaseAccount
from eth_utils import is_address, to_checksum_address

from .errors import AccountNotFoundError, InvalidAddressError


@dataclass(frozen=True)
class JsonRpcAccount:
    """An account the wallet holds; only its address is known locally."""

    address: str
    type: str = "json-rpc"


AccountLike = Union[str, JsonRpcAccount, BaseAccount]


def _checksum(address: Any) -> str:
    if not isinstance(address, str) or not is_address(address):
        raise InvalidAddressError(address)
    try:
        return to_checksum_address(address)
    except ValueError as e:
        raise InvalidAddressError(address) from e


def parse_account(account: AccountLike) -> Any:
    """Return an account handle with a checksummed ``.address``.

    Plain address strings become a :class:`JsonRpcAccount`.  Objects that
    already expose ``.address`` (for example an ``eth_account`` LocalAccount)
    are returned unchanged once their address validates.

    Raises:
        InvalidAddressError: If the address is malformed.
    """
    if isinstance(account, str):
        return JsonRpcAccount(address=_checksum(account))
    address = getattr(account, "address", None)
    if address is None:
        raise InvalidAddressError(account)
    _checksum(address)
    return account


def resolve_account(explicit: AccountLike | None, default: AccountLike | None, docs_path: str | None = None) -> Any:
    """Explicit account first, then the client default.

    Raises:
        AccountNotFoundError: If neither is set.
    """
    account = explicit if explicit is not None else default
    if not account:
        raise AccountNotFoundError(docs_path=docs_path)
    return parse_account(account)
