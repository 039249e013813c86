"""Host header to tenant slug resolution.

Every landlord is served on its own subdomain of the root application
domain. Resolution is a pure string operation; whether the slug names an
existing tenant is decided later, when the tenant context is assembled.
"""

from __future__ import annotations

from collections.abc import Iterable


def resolve(host: str, root_domain: str) -> str | None:
    """Extract the tenant slug from a Host header.

    Args:
        host: Raw Host header value, optionally carrying a port
        root_domain: The configured root application domain

    Returns:
        The leading label(s) before ``.root_domain``, lower-cased, or None
        for the root domain itself and for foreign hosts

    Examples:
        >>> resolve("Acme.rentals.app:8443", "rentals.app")
        'acme'
        >>> resolve("a.b.rentals.app", "rentals.app")
        'a.b'
        >>> resolve("rentals.app", "rentals.app") is None
        True
    """
    # A fully-qualified name may end with the root label's dot
    hostname = _strip_port(host.strip()).lower().removesuffix(".")
    root = root_domain.strip().lower().removesuffix(".")

    if not hostname or not root or hostname == root:
        return None

    suffix = "." + root
    if not hostname.endswith(suffix):
        return None

    slug = hostname[: -len(suffix)]
    return slug or None


def is_reserved(slug: str, reserved: Iterable[str]) -> bool:
    """Check whether a resolved slug is a reserved subdomain such as ``www``.

    Reserved subdomains are served as the root application, never as a
    tenant.
    """
    return slug.lower() in {label.lower() for label in reserved}


def _strip_port(host: str) -> str:
    # Bracketed IPv6 literal, e.g. "[::1]:8000"
    if host.startswith("["):
        end = host.find("]")
        return host[1:end] if end != -1 else host

    name, sep, port = host.rpartition(":")
    if sep and port.isdigit():
        return name
    return host
