"""walletrpc: client helpers for ERC-7715 permissions and EIP-5792 prepared calls."""

from .accounts import JsonRpcAccount, parse_account
from .client import Chain, WalletClient
from .transport import HttpTransport, Transport, Web3ProviderTransport
from .encoding import number_to_hex
from .erc7715 import get_active_permissions, grant_permissions
from .eip5792 import prepare_calls, send_prepared_calls
from .errors import (
    WalletRpcError,
    AccountNotFoundError,
    ChainNotFoundError,
    InvalidAddressError,
    FormatError,
    TransportError,
    HttpRequestError,
    RequestTimeoutError,
    RpcError,
    UserRejectedRequestError,
    TransactionRequestError,
)

__all__ = [
    "JsonRpcAccount",
    "parse_account",
    "Chain",
    "WalletClient",
    "HttpTransport",
    "Transport",
    "Web3ProviderTransport",
    "number_to_hex",
    "get_active_permissions",
    "grant_permissions",
    "prepare_calls",
    "send_prepared_calls",
    "WalletRpcError",
    "AccountNotFoundError",
    "ChainNotFoundError",
    "InvalidAddressError",
    "FormatError",
    "TransportError",
    "HttpRequestError",
    "RequestTimeoutError",
    "RpcError",
    "UserRejectedRequestError",
    "TransactionRequestError",
]
