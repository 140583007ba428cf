"""Format ERC-7715 permission requests into ``wallet_grantPermissions`` params.

Formatting is additive: each formatter rewrites only the fields it owns
(numeric amounts to hex, tags to strings) and copies every other field
through unchanged.  Dispatch is by tag; an unknown string tag raises
instead of falling through to the custom branch.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional

from ..accounts import AccountLike, parse_account
from ..client import ChainLike, resolve_chain
from ..encoding import is_custom_tag, normalize_tag, number_to_hex
from ..errors import FormatError

DataFormatter = Callable[[Any], Any]


def _passthrough(data: Any) -> Any:
    return data


def _hex_fields(*keys: str) -> DataFormatter:
    def fmt(data: Any) -> Any:
        if not isinstance(data, dict):
            raise FormatError(f"expected data object with {', '.join(keys)}, got {data!r}")
        out = dict(data)
        for key in keys:
            if key not in out:
                raise FormatError(f"data is missing {key!r}")
            out[key] = _hex(out[key], key)
        return out

    return fmt


def _hex(value: Any, field: str) -> str:
    try:
        return number_to_hex(value)
    except ValueError as e:
        raise FormatError(f"{field}: {e}") from e


POLICY_FORMATTERS: dict[str, DataFormatter] = {
    "token-allowance": _hex_fields("allowance"),
    "gas-limit": _hex_fields("limit"),
    "rate-limit": _passthrough,
    "native-token-spend-limit": _hex_fields("allowance"),
}

PERMISSION_FORMATTERS: dict[str, DataFormatter] = {
    "native-token-transfer": _passthrough,
    "erc20-token-transfer": _passthrough,
    "contract-call": _passthrough,
    "call-with-permission": _passthrough,
    "native-token-recurring-allowance": _hex_fields("allowance"),
    "allowed-contract": _passthrough,
    "allowed-selector": _passthrough,
    "allowed-contract-selector": _passthrough,
}

SIGNER_TYPES = frozenset({"account", "key", "keys", "wallet", "p256"})


def _format_variant(item: Any, formatters: dict[str, DataFormatter], kind: str) -> dict:
    if not isinstance(item, dict) or "type" not in item:
        raise FormatError(f"{kind} must be an object with a 'type' tag, got {item!r}")
    tag = item["type"]
    out = dict(item)
    if is_custom_tag(tag):
        try:
            out["type"] = normalize_tag(tag)
        except ValueError as e:
            raise FormatError(f"{kind}: {e}") from e
        return out
    formatter = formatters.get(tag) if isinstance(tag, str) else None
    if formatter is None:
        raise FormatError(f"unknown {kind} type: {tag!r}")
    if "data" in out:
        out["data"] = formatter(out["data"])
    return out


def format_policy(policy: Any) -> dict:
    return _format_variant(policy, POLICY_FORMATTERS, "policy")


def format_permission_type(permission: Any) -> dict:
    return _format_variant(permission, PERMISSION_FORMATTERS, "permission")


def format_signer(signer: Any) -> dict:
    if not isinstance(signer, dict) or signer.get("type") not in SIGNER_TYPES:
        raise FormatError(f"unknown signer: {signer!r}")
    return dict(signer)


def format_permission(
    permission: Any,
    default_chain: Optional[ChainLike] = None,
    default_account: Optional[AccountLike] = None,
) -> dict:
    """Format one permission request for the wire.

    ``chainId`` falls back to *default_chain* and ``account`` to
    *default_account* when the request leaves them out.

    Raises:
        ChainNotFoundError: If no chain id is available.
        FormatError: On unknown tags or non-quantity amounts.
    """
    if not isinstance(permission, dict):
        raise FormatError(f"permission request must be an object, got {permission!r}")
    out = dict(permission)

    chain_id = permission.get("chainId")
    if chain_id is None:
        chain_id = resolve_chain(None, default_chain).id
    out["chainId"] = _hex(chain_id, "chainId")

    if out.get("account") is None and default_account is not None:
        out["account"] = parse_account(default_account).address

    if "permission" in out:
        out["permission"] = format_permission_type(out["permission"])
    if "type" in out:
        flat = format_permission_type({k: out[k] for k in ("type", "data") if k in out})
        out.update(flat)

    out["policies"] = [format_policy(p) for p in permission.get("policies") or ()]

    if "signer" in out:
        out["signer"] = format_signer(out["signer"])
    return out


def format_grant_permissions_parameters(
    permissions: Iterable[Any],
    default_chain: Optional[ChainLike] = None,
    default_account: Optional[AccountLike] = None,
) -> dict:
    """Build the single params object for ``wallet_grantPermissions``."""
    return {
        "permissions": [
            format_permission(p, default_chain=default_chain, default_account=default_account)
            for p in permissions
        ]
    }
