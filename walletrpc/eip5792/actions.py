"""EIP-5792 actions: have the wallet prepare a call bundle, then submit it signed.

``prepare_calls`` and ``send_prepared_calls`` are independent requests; the
caller feeds the ``preparedCalls`` bundle from the first, plus a signature
over its ``signatureRequest.hash``, into the second.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from ..accounts import AccountLike, resolve_account
from ..client import ChainLike, resolve_chain
from ..encoding import bytes_to_hex, number_to_hex
from ..errors import FormatError, get_transaction_error
from .types import (
    Call,
    Capabilities,
    PermissionsSignatureData,
    PrepareCallsResultItem,
    PreparedCalls,
)

_LOG = logging.getLogger(__name__)

DOCS_PATH = "https://eips.ethereum.org/EIPS/eip-5792"
DEFAULT_VERSION = "1.0"


def format_call(call: Call) -> dict:
    """Shallow-copy *call*, hex-encoding ``value``, ``data`` and ``chainId``.

    A zero or missing ``value`` is dropped from the output entirely.
    """
    if not isinstance(call, dict):
        raise FormatError(f"call must be an object, got {call!r}")
    out: dict[str, Any] = dict(call)
    value = out.pop("value", None)
    try:
        if value:
            hexed = number_to_hex(value)
            if hexed != "0x0":
                out["value"] = hexed
        if out.get("data") is not None:
            out["data"] = bytes_to_hex(out["data"])
        if out.get("chainId") is not None:
            out["chainId"] = number_to_hex(out["chainId"])
    except ValueError as e:
        raise FormatError(f"invalid call to {call.get('to')!r}: {e}") from e
    return out


def format_calls(calls: Iterable[Call]) -> list[dict]:
    return [format_call(c) for c in calls]


def prepare_calls(
    client,
    calls: Iterable[Call],
    capabilities: Optional[Capabilities] = None,
    account: Optional[AccountLike] = None,
    chain: Optional[ChainLike] = None,
    version: str = DEFAULT_VERSION,
) -> list[PrepareCallsResultItem]:
    """Ask the wallet to prepare a batch of calls for signing.

    Sends ``wallet_prepareCalls`` with the transport's default retry policy.

    Returns:
        A list of ``{"preparedCalls": ..., "signatureRequest": {"hash": ..., "wrapper"?: ...}}``.

    Raises:
        AccountNotFoundError: If no account is passed and the client has none.
        ChainNotFoundError: If no chain is passed and the client has none.
        FormatError: If a call value, data or chain id is not encodable.
        TransactionRequestError: If the request fails.
    """
    resolved_account = resolve_account(account, client.account, docs_path=DOCS_PATH)
    resolved_chain = resolve_chain(chain, client.chain)
    calls = list(calls)

    params: dict[str, Any] = {
        "from": resolved_account.address,
        "calls": format_calls(calls),
        "chainId": number_to_hex(resolved_chain.id),
        "version": version,
    }
    if capabilities is not None:
        params["capabilities"] = capabilities

    try:
        return client.request("wallet_prepareCalls", [params])
    except Exception as e:
        raise get_transaction_error(
            e,
            account=resolved_account,
            chain=resolved_chain,
            params={"calls": calls, "capabilities": capabilities, "version": version},
        ) from e


def send_prepared_calls(
    client,
    prepared_calls: PreparedCalls,
    signature_data: PermissionsSignatureData,
    account: Optional[AccountLike] = None,
    chain: Optional[ChainLike] = None,
    version: str = DEFAULT_VERSION,
) -> str:
    """Submit a signed bundle from :func:`prepare_calls`.

    ``prepared_calls`` and ``signature_data`` are forwarded untouched.  The
    request is never retried.

    Returns:
        The wallet's call-bundle identifier.

    Raises:
        AccountNotFoundError: If no account is passed and the client has none.
        ChainNotFoundError: If no chain is passed and the client has none.
        TransactionRequestError: If the request fails.
    """
    resolved_account = resolve_account(account, client.account, docs_path=DOCS_PATH)
    resolved_chain = resolve_chain(chain, client.chain)

    params = {
        "signatureData": signature_data,
        "preparedCalls": prepared_calls,
        "from": resolved_account.address,
        "version": version,
    }
    try:
        bundle_id = client.request("wallet_sendPreparedCalls", [params], retry_count=0)
    except Exception as e:
        raise get_transaction_error(
            e,
            account=resolved_account,
            chain=resolved_chain,
            params={
                "prepared_calls": prepared_calls,
                "signature_data": signature_data,
                "version": version,
            },
        ) from e
    _LOG.info("sent prepared calls from=%s bundle=%s", resolved_account.address, bundle_id)
    return bundle_id
