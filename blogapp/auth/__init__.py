"""Authentication and authorization module."""

from blogapp.auth.permissions import ADMIN_ROLE, AdminUserDep, require_admin

__all__ = ["ADMIN_ROLE", "AdminUserDep", "require_admin"]
