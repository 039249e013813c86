"""Domain exceptions for the tenancy bounded context.

These exceptions are raised by aggregates when a business rule would be
violated. The presentation layer maps them to HTTP responses.
"""


class OwnerMembershipImmutableError(Exception):
    """Raised when attempting to demote or remove the tenant owner's membership.

    The owner membership is created at onboarding and cannot be changed
    through team management, not even by an admin member.
    """

    pass


class InvalidTeamRoleError(Exception):
    """Raised when assigning a role that team management may not grant.

    Only ``admin`` and ``member`` can be granted; ``owner`` is reserved for
    the landlord who onboarded the tenant.
    """

    pass


class InvitationExpiredError(Exception):
    """Raised when accepting an invitation past its expiry time."""

    pass


class InvitationAlreadyUsedError(Exception):
    """Raised when accepting an invitation that is no longer pending."""

    pass
