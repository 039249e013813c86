"""Tenancy presentation layer - aggregate-based organization.

Organizes presentation concerns by aggregate (tenants, team, properties,
applications, super_admin). Each package contains its own routes and
models. Authorization is enforced by the application services through the
guard; routes only translate outcomes into HTTP responses.
"""

from __future__ import annotations

from fastapi import APIRouter

from tenancy.presentation import applications, properties, super_admin, team, tenants

router = APIRouter()

router.include_router(tenants.router)
router.include_router(team.router)
router.include_router(properties.router)
router.include_router(applications.router)
router.include_router(super_admin.router)

__all__ = ["router"]
