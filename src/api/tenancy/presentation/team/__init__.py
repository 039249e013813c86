"""Team presentation: members and invitations."""

from tenancy.presentation.team.routes import router

__all__ = ["router"]
