"""ERC-7715 actions: read and grant wallet permissions."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..accounts import AccountLike, parse_account, resolve_account
from ..client import resolve_chain
from ..errors import get_transaction_error
from .format import format_grant_permissions_parameters
from .types import ActivePermissionsResult, GrantPermissionsResult, PermissionRequest

_LOG = logging.getLogger(__name__)


def get_active_permissions(client, account: Optional[AccountLike] = None) -> ActivePermissionsResult:
    """Return the permissions the wallet currently holds for *account*.

    Sends ``wallet_getActivePermissions`` with the transport's default
    retry policy.

    Raises:
        AccountNotFoundError: If no account is passed and the client has none.
        TransactionRequestError: If the request fails.
    """
    resolved = resolve_account(account, client.account)
    try:
        return client.request("wallet_getActivePermissions", [resolved.address])
    except Exception as e:
        raise get_transaction_error(e, account=resolved, params={"account": resolved.address}) from e


def grant_permissions(client, permissions: Iterable[PermissionRequest]) -> GrantPermissionsResult:
    """Request permissions from a wallet to act on behalf of a user.

    Each permission's ``chainId`` and numeric policy amounts are hex
    encoded before sending; ``chainId`` and ``account`` default to the
    client's chain and account when a permission omits them.  The request
    is never retried.

    Example::

        grant_permissions(client, [
            {
                "type": "native-token-transfer",
                "data": {"ticker": "ETH"},
                "policies": [
                    {"type": "token-allowance", "data": {"allowance": 10**18}},
                ],
                "required": True,
                "chainId": 1,
                "expiry": 1716846083,
            },
        ])

    Returns:
        ``{"context": ..., "permissions": [...]}`` as sent by the wallet.

    Raises:
        ChainNotFoundError: If a permission has no chain id and the client has none.
        FormatError: If a permission, policy or signer cannot be encoded.
        TransactionRequestError: If the request fails.
    """
    permissions = list(permissions)
    default_account = parse_account(client.account) if client.account else None
    default_chain = resolve_chain(None, client.chain) if client.chain is not None else None
    params = format_grant_permissions_parameters(
        permissions, default_chain=default_chain, default_account=default_account
    )
    try:
        result = client.request("wallet_grantPermissions", params, retry_count=0)
    except Exception as e:
        raise get_transaction_error(
            e, account=default_account, chain=default_chain, params={"permissions": permissions}
        ) from e
    _LOG.info("granted permissions requested=%s", len(permissions))
    return result
