"""ERC-7715 permission actions (draft standard)."""

from .actions import get_active_permissions, grant_permissions
from .format import format_grant_permissions_parameters, format_permission, format_policy

__all__ = [
    "format_grant_permissions_parameters",
    "format_permission",
    "format_policy",
    "get_active_permissions",
    "grant_permissions",
]
