"""Session token validation.

Sessions are issued by an external identity provider as signed JWTs. This
module verifies the signature and expiry and turns the claims into a
``SessionIdentity``. Nothing beyond ``{user_id, role}`` is consumed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from jose import JWTError, jwt
from jose.exceptions import ExpiredSignatureError, JWTClaimsError

from shared_kernel.auth.identity import SessionIdentity, SessionRole

if TYPE_CHECKING:
    from shared_kernel.auth.observability import SessionValidatorProbe


class InvalidSessionTokenError(Exception):
    """Raised when a session token fails validation."""

    pass


class SessionTokenValidator:
    """Validates signed session tokens against a shared secret.

    The validator is stateless and safe to share across requests.
    """

    def __init__(
        self,
        secret: str,
        probe: SessionValidatorProbe,
        algorithm: str = "HS256",
        issuer: str | None = None,
        user_id_claim: str = "sub",
        role_claim: str = "role",
    ):
        """Initialize the session validator.

        Args:
            secret: Shared secret used to sign session tokens.
            probe: Observability probe for logging events.
            algorithm: JWS algorithm the provider signs with (default: HS256).
            issuer: Expected issuer claim, or None to skip issuer checks.
            user_id_claim: Claim holding the user ID (default: sub).
            role_claim: Claim holding the platform role (default: role).
        """
        self._secret = secret
        self._probe = probe
        self._algorithm = algorithm
        self._issuer = issuer
        self._user_id_claim = user_id_claim
        self._role_claim = role_claim

    def validate(self, token: str) -> SessionIdentity:
        """Validate a session token and return the identity it carries.

        Args:
            token: The encoded session token.

        Returns:
            SessionIdentity built from the token claims.

        Raises:
            InvalidSessionTokenError: If the token is malformed, expired, badly
                signed, or lacks the user id or role claims.
        """
        if not self._secret:
            self._probe.session_validation_failed(reason="Session secret not configured")
            raise InvalidSessionTokenError("Session secret is not configured")

        try:
            claims: dict[str, Any] = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                issuer=self._issuer,
                options={
                    "verify_signature": True,
                    "verify_aud": False,
                    "verify_iss": self._issuer is not None,
                    "verify_exp": True,
                },
            )
        except ExpiredSignatureError as e:
            self._probe.session_validation_failed(reason="Token expired")
            raise InvalidSessionTokenError("Session has expired") from e
        except JWTClaimsError as e:
            self._probe.session_validation_failed(reason=f"Claims error: {e}")
            raise InvalidSessionTokenError(f"Invalid session claims: {e}") from e
        except JWTError as e:
            self._probe.session_validation_failed(reason=f"JWT error: {e}")
            raise InvalidSessionTokenError(f"Invalid session token: {e}") from e

        user_id = claims.get(self._user_id_claim)
        if user_id is None or not str(user_id).strip():
            self._probe.session_validation_failed(
                reason=f"Missing {self._user_id_claim} claim"
            )
            raise InvalidSessionTokenError(
                f"Missing required claim: {self._user_id_claim}"
            )

        raw_role = claims.get(self._role_claim)
        if raw_role is None:
            self._probe.session_validation_failed(
                reason=f"Missing {self._role_claim} claim"
            )
            raise InvalidSessionTokenError(
                f"Missing required claim: {self._role_claim}"
            )

        try:
            role = SessionRole.from_claim(str(raw_role))
        except ValueError as e:
            self._probe.session_validation_failed(reason=f"Unknown role: {raw_role}")
            raise InvalidSessionTokenError(f"Unknown role: {raw_role}") from e

        # An anonymous role with a user id is contradictory
        if role == SessionRole.ANONYMOUS:
            self._probe.session_validation_failed(reason="Anonymous role in session")
            raise InvalidSessionTokenError("Session may not carry the anonymous role")

        identity = SessionIdentity(user_id=str(user_id).strip(), role=role)
        self._probe.session_validated(user_id=identity.user_id, role=role.value)
        return identity
