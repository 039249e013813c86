"""Authentication shared kernel module."""

from shared_kernel.auth.identity import SessionIdentity, SessionRole
from shared_kernel.auth.observability import (
    DefaultSessionValidatorProbe,
    SessionValidatorProbe,
)
from shared_kernel.auth.session_validator import (
    InvalidSessionTokenError,
    SessionTokenValidator,
)

__all__ = [
    "DefaultSessionValidatorProbe",
    "InvalidSessionTokenError",
    "SessionIdentity",
    "SessionRole",
    "SessionTokenValidator",
    "SessionValidatorProbe",
]
