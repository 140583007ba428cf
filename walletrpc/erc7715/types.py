"""Typed dictionaries for ERC-7715 permissions, policies and signers.

Every variant is discriminated on its ``type`` key.  Custom variants carry
``{"custom": "<name>"}`` as their tag.  Amounts are ints on the caller side
and hex text on the wire.
"""

from typing import Any, Literal, TypedDict, Union


class CustomTag(TypedDict):
    custom: str


# -- policies ---------------------------------------------------------------


class TokenAllowanceData(TypedDict):
    allowance: int  # wei


class TokenAllowancePolicy(TypedDict):
    type: Literal["token-allowance"]
    data: TokenAllowanceData


class GasLimitData(TypedDict):
    limit: int


class GasLimitPolicy(TypedDict):
    type: Literal["gas-limit"]
    data: GasLimitData


class RateLimitData(TypedDict):
    count: int
    interval: int  # seconds


class RateLimitPolicy(TypedDict):
    type: Literal["rate-limit"]
    data: RateLimitData


class NativeTokenSpendLimitPolicy(TypedDict):
    type: Literal["native-token-spend-limit"]
    data: TokenAllowanceData


class CustomPolicy(TypedDict):
    type: CustomTag
    data: Any


Policy = Union[
    TokenAllowancePolicy,
    GasLimitPolicy,
    RateLimitPolicy,
    NativeTokenSpendLimitPolicy,
    CustomPolicy,
]


# -- permissions ------------------------------------------------------------


class NativeTokenTransferPermission(TypedDict):
    type: Literal["native-token-transfer"]
    data: dict  # {"ticker": "ETH"}


class Erc20TokenTransferPermission(TypedDict):
    type: Literal["erc20-token-transfer"]
    data: dict  # {"address": ..., "ticker": ...}


class ContractCallPermission(TypedDict):
    type: Literal["contract-call"]
    data: dict  # {"address": ..., "calls": [signature, ...]}


class CallWithPermissionPermission(TypedDict):
    type: Literal["call-with-permission"]
    data: dict  # {"allowedContract": ..., "permissionArgs": "0x..."}


class RecurringAllowanceData(TypedDict):
    allowance: int
    start: int  # unix seconds
    period: int  # seconds


class RecurringAllowancePermission(TypedDict):
    type: Literal["native-token-recurring-allowance"]
    data: RecurringAllowanceData


class AllowedContractPermission(TypedDict):
    type: Literal["allowed-contract"]
    data: dict  # {"address": ...}


class AllowedSelectorPermission(TypedDict):
    type: Literal["allowed-selector"]
    data: dict  # {"selector": "0x12345678"}


class AllowedContractSelectorPermission(TypedDict):
    type: Literal["allowed-contract-selector"]
    data: dict  # {"address": ..., "selector": ...}


class CustomPermission(TypedDict):
    type: CustomTag
    data: Any


PermissionType = Union[
    NativeTokenTransferPermission,
    Erc20TokenTransferPermission,
    ContractCallPermission,
    CallWithPermissionPermission,
    RecurringAllowancePermission,
    AllowedContractPermission,
    AllowedSelectorPermission,
    AllowedContractSelectorPermission,
    CustomPermission,
]


# -- signers ----------------------------------------------------------------


class AccountSigner(TypedDict):
    type: Literal["account"]
    data: dict  # {"id": address}


class KeySignerData(TypedDict):
    type: Literal["secp256r1", "secp256k1"]
    publicKey: str


class KeySigner(TypedDict):
    type: Literal["key"]
    data: KeySignerData


class MultiKeySigner(TypedDict):
    type: Literal["keys"]
    data: dict  # {"ids": [...]}


class WalletSigner(TypedDict):
    type: Literal["wallet"]


class P256Signer(TypedDict):
    type: Literal["p256"]
    data: dict  # {"publicKey": "0x..."}


Signer = Union[AccountSigner, KeySigner, MultiKeySigner, WalletSigner, P256Signer]


# -- requests ---------------------------------------------------------------


class _PermissionRequestBase(TypedDict):
    policies: list[Policy]
    chainId: int
    expiry: int


class PermissionRequest(_PermissionRequestBase, total=False):
    permission: PermissionType
    # flat draft: tag and data sit on the request itself
    type: Union[str, CustomTag]
    data: Any
    required: bool
    account: str
    signer: Signer


class GrantPermissionsResult(TypedDict):
    context: str
    permissions: list[dict]


class ActivePermissionsResult(TypedDict, total=False):
    permissions: list[dict]
