"""Role-based access control for the super-admin surface."""

from typing import Annotated

from fastapi import Depends, HTTPException
from starlette.status import HTTP_403_FORBIDDEN

from blogapp.dependencies.dependencies import get_current_user
from blogapp.models import UserDB

ADMIN_ROLE = "admin"


async def require_admin(
    user: Annotated[UserDB, Depends(get_current_user)],
) -> UserDB:
    """
    Dependency that requires admin role.

    Parameters
    ----------
    user : UserDB
        Current authenticated user.

    Returns
    -------
    UserDB
        The user if they have admin role.

    Raises
    ------
    HTTPException
        If user is not an admin.
    """
    if user.role != ADMIN_ROLE:
        raise HTTPException(
            status_code=HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return user


AdminUserDep = Annotated[UserDB, Depends(require_admin)]
