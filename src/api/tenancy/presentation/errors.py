"""Translation of authorization denials into HTTP errors.

Unauthenticated callers always get 401. Other denials get 403, except on
resource lookups, where they read as 404 so that a caller outside the
tenant (or not owning the resource) cannot confirm the resource exists.
"""

from __future__ import annotations

from typing import NoReturn

from fastapi import HTTPException, status

from shared_kernel.authorization import ReasonCode
from tenancy.ports.exceptions import UnauthorizedError


def raise_for_denial(
    error: UnauthorizedError,
    conceal: bool = False,
    not_found_detail: str = "Not found",
) -> NoReturn:
    """Raise the HTTPException matching a guard denial.

    Args:
        error: The denial raised by an application service
        conceal: Whether denials other than Unauthenticated read as 404
        not_found_detail: Detail used when the denial is concealed

    Raises:
        HTTPException: 401, 403 or 404
    """
    if error.reason_code == ReasonCode.UNAUTHENTICATED:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        ) from error

    if conceal:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=not_found_detail,
        ) from error

    raise HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail="You do not have access to this resource",
    ) from error
