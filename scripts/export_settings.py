"""Render the RENTALS_* environment variable reference as Markdown.

Usage:
    python scripts/export_settings.py > docs/env-vars.md
"""

import sys
from pathlib import Path
from typing import Type

from pydantic import SecretStr
from pydantic_core import PydanticUndefined
from pydantic_settings import BaseSettings

root_path = Path(__file__).parent.parent
sys.path.insert(0, str(root_path / "src" / "api"))

from infrastructure.settings import (  # noqa: E402
    DatabaseSettings,
    SessionSettings,
    Settings,
    TenancySettings,
)


def describe_field(prefix: str, name: str, field) -> tuple[str, str, str, str]:
    """Return (env var, type, default, description) for one settings field."""
    default = field.get_default(call_default_factory=True)
    type_name = getattr(field.annotation, "__name__", str(field.annotation))

    # Empty secrets are effectively required
    required = default is PydanticUndefined or (
        isinstance(default, SecretStr) and default.get_secret_value() == ""
    )

    if required:
        shown = "*required*"
    elif isinstance(default, SecretStr):
        shown = "`********`"
    elif default is None:
        shown = "unset"
    else:
        shown = f"`{default}`"

    return (
        f"`{prefix}{name.upper()}`",
        "Secret" if "Secret" in type_name else type_name,
        shown,
        field.description or "",
    )


def render(settings_class: Type[BaseSettings]) -> str:
    prefix = settings_class.model_config.get("env_prefix", "")
    lines = [
        f"## {settings_class.__name__}",
        "",
        (settings_class.__doc__ or "").strip().splitlines()[0],
        "",
        "| Variable | Type | Default | Description |",
        "| --- | --- | --- | --- |",
    ]
    for name, field in settings_class.model_fields.items():
        lines.append("| " + " | ".join(describe_field(prefix, name, field)) + " |")
    return "\n".join(lines)


def export_settings() -> None:
    classes = [Settings, TenancySettings, SessionSettings, DatabaseSettings]
    print("# Environment variables\n")
    print("\n\n".join(render(cls) for cls in classes))


if __name__ == "__main__":
    export_settings()
