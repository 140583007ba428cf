"""EIP-5792 prepared-calls actions (draft standard)."""

from .actions import format_calls, prepare_calls, send_prepared_calls

__all__ = [
    "format_calls",
    "prepare_calls",
    "send_prepared_calls",
]
