"""Typed dictionaries for EIP-5792 prepared calls."""

from typing import Any, Literal, TypedDict, Union


class Call(TypedDict, total=False):
    to: str
    data: Union[str, bytes]
    value: int
    chainId: int  # per-call chain override


class PaymasterServiceCapability(TypedDict):
    url: str


class PermissionsCapability(TypedDict):
    context: str


class Capabilities(TypedDict, total=False):
    paymasterService: PaymasterServiceCapability
    permissions: PermissionsCapability


class PreparedCalls(TypedDict):
    """Opaque bundle returned by ``wallet_prepareCalls``; send it back as is."""

    type: str
    values: Any


class SignatureRequest(TypedDict, total=False):
    hash: str
    wrapper: dict[str, Any]


class PrepareCallsResultItem(TypedDict):
    preparedCalls: PreparedCalls
    signatureRequest: SignatureRequest


class PermissionsSignatureValues(TypedDict):
    signature: str
    context: str


class PermissionsSignatureData(TypedDict):
    type: Literal["permissions"]
    values: PermissionsSignatureValues
