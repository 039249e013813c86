"""Super-admin presentation."""

from tenancy.presentation.super_admin.routes import router

__all__ = ["router"]
