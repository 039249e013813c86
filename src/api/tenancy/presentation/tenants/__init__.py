"""Tenant presentation: current tenant profile and onboarding."""

from tenancy.presentation.tenants.routes import router

__all__ = ["router"]
