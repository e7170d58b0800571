"""Rendering context assembly: manifest, overrides, flags and derived facts."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .badges import compose_badges
from .config import (
    CONTEXT_FIELDS,
    DEFAULT_BADGE_STYLE,
    DEFAULT_REPOSITORY,
    default_context,
    has_travis_marker,
    load_manifest,
    load_override_config,
)
from .files import CodeBlock, discover_files, read_clean
from .github import parse_repository, repository_url
from .license import resolve_license
from .logging import get_logger
from .registry import RegistryClient

_LOGGER = get_logger("context")


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Return ``base`` updated with ``override``.

    Nested mappings merge key by key, lists and scalars from ``override`` replace
    the base value, and ``None`` in ``override`` leaves the base value untouched.
    """
    merged = copy.deepcopy(dict(base))
    for key, value in override.items():
        if value is None:
            continue
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def merge_known_fields(context: Mapping[str, Any], source: Mapping[str, Any], *, origin: str) -> Dict[str, Any]:
    """Deep-merge only the top-level keys the README template knows about."""
    known = {key: value for key, value in source.items() if key in CONTEXT_FIELDS}
    ignored = sorted(set(source) - CONTEXT_FIELDS)
    if ignored:
        _LOGGER.debug("Ignoring %s fields not used by the template: %s", origin, ", ".join(ignored))
    return deep_merge(context, known)


def truthy_flags(flags: Mapping[str, Any]) -> Dict[str, Any]:
    """Drop falsy CLI flags so they never clear values set by earlier steps."""
    return {key: value for key, value in flags.items() if value}


def resolve_documentation(context: Dict[str, Any], root: Path) -> Dict[str, Any]:
    """Turn a documentation URL into a link line and a path into file contents."""
    documentation = context.get("documentation")
    if not isinstance(documentation, str) or not documentation:
        return context

    if documentation.startswith("http"):
        context["documentation"] = f"- [{context['name']} developer docs]({documentation})"
    elif documentation.startswith(("./", "/")):
        context["documentation"] = read_clean(root / documentation)
    return context


def check_test_script(context: Dict[str, Any]) -> Dict[str, Any]:
    """Treat the npm ``echo "Error: no test specified"`` placeholder as no tests."""
    scripts = context.get("scripts")
    if not isinstance(scripts, dict):
        context["scripts"] = scripts = {"test": False}
    test = scripts.get("test")
    if not test or (isinstance(test, str) and test.startswith("echo")):
        scripts["test"] = False
    return context


def _code_block(value: Any) -> Optional[CodeBlock]:
    if isinstance(value, CodeBlock):
        return value
    if isinstance(value, Mapping) and value.get("content"):
        return CodeBlock(language=str(value.get("language") or ""), content=str(value["content"]))
    return None


class ContextBuilder:
    """Builds the template context for one project root.

    Steps run in a fixed order because later ones read fields set by earlier ones.
    """

    def __init__(self, root: Path, *, registry: RegistryClient | None = None) -> None:
        self.root = root
        self.registry = registry or RegistryClient()
        self.logger = _LOGGER

    async def build(self, flags: Mapping[str, Any] | None = None) -> Dict[str, Any]:
        context = default_context()
        context = merge_known_fields(context, load_manifest(self.root), origin="package.json")

        override = load_override_config(self.root)
        if override is not None:
            self.logger.debug("Applying override configuration")
            context = merge_known_fields(context, override, origin="override config")

        self._detect_features(context)
        context = merge_known_fields(context, truthy_flags(flags or {}), origin="CLI")

        repository = context.get("repository")
        if repository_url(repository) == DEFAULT_REPOSITORY:
            # Placeholder from the default context; the manifest names no repository.
            context["gh"] = None
        else:
            context["gh"] = parse_repository(repository)
        if context["gh"] is None:
            self.logger.debug("Repository %r is not a recognised GitHub URL", context.get("repository"))

        context = self._apply_discovered_files(context)
        context["license"] = resolve_license(context.get("license"), context.get("author"))
        context = resolve_documentation(context, self.root)
        context = check_test_script(context)
        badges = context["badges"] if isinstance(context.get("badges"), dict) else {}
        context["badges"] = {"style": DEFAULT_BADGE_STYLE, **badges, "list": compose_badges(context)}

        context["dependencies"] = await self.registry.describe(_dependency_names(context.get("dependencies")))
        context["devDependencies"] = await self.registry.describe(
            _dependency_names(context.get("devDependencies"))
        )
        context["related"] = await self.registry.describe(_dependency_names(context.get("related")))
        return context

    def _detect_features(self, context: Dict[str, Any]) -> None:
        if has_travis_marker(self.root):
            context["travis"] = True
        if "xo" in (context.get("devDependencies") or {}):
            context["xo"] = True
        if "atom" in (context.get("engines") or {}):
            context["atom"] = True

    def _apply_discovered_files(self, context: Dict[str, Any]) -> Dict[str, Any]:
        discovered = discover_files(self.root, context["name"])
        if discovered.documentation is not None:
            context["documentation"] = str(discovered.documentation)
        context["example"] = discovered.example or _code_block(context.get("example"))
        context["usage"] = discovered.usage or _code_block(context.get("usage"))
        return context


def _dependency_names(value: Any) -> list[str]:
    if isinstance(value, Mapping):
        return [str(key) for key in value]
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value if isinstance(item, str)]
    return []


__all__ = [
    "ContextBuilder",
    "check_test_script",
    "deep_merge",
    "merge_known_fields",
    "resolve_documentation",
    "truthy_flags",
]
