"""License type and attribution line for the README footer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass
class LicenseInfo:
    """Display-ready license details."""

    type: str
    author_with_url: str = ""


def license_type(value: Any) -> str:
    # Older manifests use {"type": "MIT", "url": ...}.
    if isinstance(value, Mapping):
        value = value.get("type")
    return value if isinstance(value, str) else ""


def resolve_license(license_value: Any, author: Any) -> LicenseInfo:
    """Return the license type plus a copyright line for MIT projects.

    Attribution is only rendered for MIT; every other license gets an empty line.
    """
    kind = license_type(license_value)
    if kind.lower() != "mit":
        return LicenseInfo(type=kind)

    if isinstance(author, Mapping):
        name = author.get("name")
        url = author.get("url")
        if name and url:
            return LicenseInfo(type=kind, author_with_url=f"© [{name}]({url})")
        if name:
            return LicenseInfo(type=kind, author_with_url=f"© {name}")
        return LicenseInfo(type=kind)

    if isinstance(author, str) and author.strip():
        return LicenseInfo(type=kind, author_with_url=f"© {author.strip()}")
    return LicenseInfo(type=kind)


__all__ = ["LicenseInfo", "license_type", "resolve_license"]
