"""Port-level exceptions for the tenancy bounded context.

These exceptions represent errors that can occur during repository and
application service operations. They are handled by the presentation
layer and mapped to HTTP responses.
"""

from __future__ import annotations

from shared_kernel.authorization.types import AuthorizationDecision, ReasonCode


class DuplicateTenantSlugError(Exception):
    """Raised when onboarding a tenant with a subdomain that is already taken.

    Slugs are globally unique; the check is case-insensitive because slugs
    are stored lower-cased.
    """

    pass


class DuplicateMembershipError(Exception):
    """Raised when a user already holds a membership in the tenant."""

    pass


class TeamMemberNotFoundError(Exception):
    """Raised when a team membership cannot be found in the current tenant."""

    pass


class InvitationNotFoundError(Exception):
    """Raised when an invite token does not match any membership."""

    pass


class TenantNotFoundError(Exception):
    """Raised when a request's subdomain does not name an enabled tenant.

    This is a terminal condition for the request: no guard is evaluated and
    the client receives a not-found response.
    """

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"No tenant for subdomain '{slug}'")


class UnauthorizedError(Exception):
    """Raised when the authorization guard denies an operation.

    Carries the guard's reason code so the presentation layer can choose
    between 401, 403 and a concealing 404.
    """

    def __init__(self, decision: AuthorizationDecision, message: str | None = None):
        self.decision = decision
        super().__init__(message or f"Access denied: {decision.reason_code}")

    @property
    def reason_code(self) -> ReasonCode | None:
        return self.decision.reason_code
