"""Rental application presentation."""

from tenancy.presentation.applications.routes import router

__all__ = ["router"]
