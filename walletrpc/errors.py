"""Machine-readable error categories for wallet JSON-RPC failures."""

from __future__ import annotations

from typing import Any


class WalletRpcError(Exception):
    """Base exception for all walletrpc errors."""


class AccountNotFoundError(WalletRpcError):
    """No account was passed and the client has no default account."""

    def __init__(self, docs_path: str | None = None):
        msg = "Could not find an account to execute with this action."
        if docs_path:
            msg += f" See {docs_path}"
        super().__init__(msg)
        self.docs_path = docs_path


class ChainNotFoundError(WalletRpcError):
    """No chain was passed and the client has no default chain."""

    def __init__(self):
        super().__init__("No chain was provided to the request.")


class InvalidAddressError(WalletRpcError):
    """Account reference is not a valid 20-byte address."""

    def __init__(self, address: Any):
        super().__init__(f"Address {address!r} is invalid.")
        self.address = address


class FormatError(WalletRpcError):
    """A permission, policy or signer could not be formatted for the wire."""


# ---------------------------------------------------------------------------
# Dispatch failures
# ---------------------------------------------------------------------------
class TransportError(WalletRpcError):
    """Base for failures raised while sending a request."""


class HttpRequestError(TransportError):
    """Non-2xx HTTP status or an unreadable response body."""

    def __init__(self, message: str, *, url: str, status: int | None = None, body: str | None = None):
        super().__init__(message)
        self.url = url
        self.status = status
        self.body = body


class RequestTimeoutError(TransportError):
    def __init__(self, *, url: str, timeout: float):
        super().__init__(f"Request to {url} timed out after {timeout}s")
        self.url = url
        self.timeout = timeout


class RpcError(TransportError):
    """JSON-RPC ``error`` member returned by the wallet."""

    code: int = -1

    def __init__(self, message: str, *, code: int | None = None, data: Any = None):
        super().__init__(message)
        if code is not None:
            self.code = code
        self.data = data

    def __str__(self) -> str:
        return f"[{self.code}] {self.args[0]}"


class ParseRpcError(RpcError):
    code = -32700


class InvalidRequestRpcError(RpcError):
    code = -32600


class MethodNotFoundRpcError(RpcError):
    code = -32601


class InvalidParamsRpcError(RpcError):
    code = -32602


class InternalRpcError(RpcError):
    code = -32603


class LimitExceededRpcError(RpcError):
    code = -32005


class UserRejectedRequestError(RpcError):
    code = 4001


class UnauthorizedProviderError(RpcError):
    code = 4100


class UnsupportedProviderMethodError(RpcError):
    code = 4200


class ProviderDisconnectedError(RpcError):
    code = 4900


class ChainDisconnectedError(RpcError):
    code = 4901


class UnsupportedNonOptionalCapabilityError(RpcError):
    code = 5700


class UnsupportedChainIdError(RpcError):
    code = 5710


class BundleTooLargeError(RpcError):
    code = 5740


_RPC_ERRORS_BY_CODE: dict[int, type[RpcError]] = {
    cls.code: cls
    for cls in (
        ParseRpcError,
        InvalidRequestRpcError,
        MethodNotFoundRpcError,
        InvalidParamsRpcError,
        InternalRpcError,
        LimitExceededRpcError,
        UserRejectedRequestError,
        UnauthorizedProviderError,
        UnsupportedProviderMethodError,
        ProviderDisconnectedError,
        ChainDisconnectedError,
        UnsupportedNonOptionalCapabilityError,
        UnsupportedChainIdError,
        BundleTooLargeError,
    )
}


def rpc_error_from_response(error: Any) -> RpcError:
    """Build the matching RpcError subclass from a JSON-RPC ``error`` object."""
    if not isinstance(error, dict):
        return RpcError(str(error) or "Unknown RPC error")
    code = error.get("code")
    message = str(error.get("message") or "Unknown RPC error")
    data = error.get("data")
    cls = _RPC_ERRORS_BY_CODE.get(code) if isinstance(code, int) else None
    if cls is None:
        return RpcError(message, code=code if isinstance(code, int) else None, data=data)
    return cls(message, data=data)


# ---------------------------------------------------------------------------
# Translated action error
# ---------------------------------------------------------------------------
class TransactionRequestError(WalletRpcError):
    """A wallet request failed.  Carries the cause and the request context."""

    def __init__(
        self,
        cause: BaseException,
        *,
        account: Any = None,
        chain: Any = None,
        params: dict[str, Any] | None = None,
    ):
        details = [str(cause) or type(cause).__name__]
        address = getattr(account, "address", None)
        if address:
            details.append(f"from: {address}")
        chain_id = getattr(chain, "id", chain)
        if chain_id is not None:
            details.append(f"chain: {chain_id}")
        super().__init__("Request failed. " + " | ".join(details))
        self.cause = cause
        self.account = account
        self.chain = chain
        self.params = params or {}

    @property
    def code(self) -> int | None:
        return getattr(self.cause, "code", None)

    def walk(self, predicate=None) -> BaseException | None:
        """Follow the cause chain.

        Without *predicate* returns the innermost error.  With one, returns
        the first error it accepts, or None.
        """
        err: BaseException = self
        while True:
            if predicate is not None and predicate(err):
                return err
            nxt = getattr(err, "cause", None) or err.__cause__
            if nxt is None:
                return None if predicate is not None else err
            err = nxt


def get_transaction_error(
    err: BaseException,
    *,
    account: Any = None,
    chain: Any = None,
    params: dict[str, Any] | None = None,
) -> TransactionRequestError:
    """Wrap a dispatch failure together with the request that caused it."""
    return TransactionRequestError(err, account=account, chain=chain, params=params)
