"""Property presentation."""

from tenancy.presentation.properties.routes import router

__all__ = ["router"]
