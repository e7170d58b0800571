"""Manifest and override configuration loading (package.json, .gen-readme.json)."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

MANIFEST_FILENAME = "package.json"
OVERRIDE_FILENAMES = (".gen-readme.json", ".gen-readme.yml", ".gen-readme.yaml")
TRAVIS_FILENAME = ".travis.yml"
README_FILENAME = "README.md"

DEFAULT_BADGE_STYLE = "flat-square"
DEFAULT_REPOSITORY = "https://github.com/user/repo.git"

_DEFAULT_CONTEXT: Dict[str, Any] = {
    "name": "",
    "description": "",
    "version": "",
    "homepage": "",
    "keywords": [],
    "scripts": {"test": False},
    "author": "",
    "license": "",
    "repository": DEFAULT_REPOSITORY,
    "dependencies": {},
    "devDependencies": {},
    "engines": {},
    "features": [],
    "thanks": [],
    "related": [],
    "badges": {"style": DEFAULT_BADGE_STYLE, "list": []},
    "preferGlobal": False,
    "documentation": False,
    "example": None,
    "usage": None,
    "gh": None,
    "travis": False,
    "atom": False,
    "write": False,
    "xo": False,
}

CONTEXT_FIELDS = frozenset(_DEFAULT_CONTEXT)


class GenReadmeError(RuntimeError):
    """Base class for errors that abort a README run."""


class ManifestError(GenReadmeError):
    """Raised when package.json is missing, unreadable or unusable."""


class ConfigError(GenReadmeError):
    """Raised when the override configuration file cannot be parsed."""


def default_context() -> Dict[str, Any]:
    """Return a fresh copy of the baseline rendering context."""
    return copy.deepcopy(_DEFAULT_CONTEXT)


def resolve_project_root(path: Path) -> Path:
    """Accept either a project directory or a path to its package.json."""
    path = path.expanduser()
    if path.name == MANIFEST_FILENAME and not path.is_dir():
        return path.parent.resolve()
    return path.resolve()


def load_manifest(root: Path) -> Dict[str, Any]:
    """Load package.json from the project root."""
    manifest_path = root / MANIFEST_FILENAME
    if not manifest_path.is_file():
        raise ManifestError(f"{MANIFEST_FILENAME} not found in {root}")

    try:
        data = json.loads(manifest_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Failed to parse {MANIFEST_FILENAME}: {exc}") from exc

    if not isinstance(data, dict):
        raise ManifestError(f"{MANIFEST_FILENAME} must contain a JSON object at the root")

    name = data.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ManifestError(f"{MANIFEST_FILENAME} must define a non-empty 'name'")
    return data


def find_override_config(root: Path) -> Optional[Path]:
    for filename in OVERRIDE_FILENAMES:
        candidate = root / filename
        if candidate.is_file():
            return candidate
    return None


def load_override_config(root: Path) -> Optional[Dict[str, Any]]:
    """Load .gen-readme.json (or its YAML variants); ``None`` when absent."""
    config_path = find_override_config(root)
    if config_path is None:
        return None

    text = config_path.read_text(encoding="utf-8")
    if not text.strip():
        return {}

    try:
        if config_path.suffix == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigError(f"Failed to parse {config_path.name}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path.name} must contain a mapping at the root")
    return data


def has_travis_marker(root: Path) -> bool:
    return (root / TRAVIS_FILENAME).exists()


__all__ = [
    "CONTEXT_FIELDS",
    "ConfigError",
    "DEFAULT_BADGE_STYLE",
    "GenReadmeError",
    "ManifestError",
    "MANIFEST_FILENAME",
    "OVERRIDE_FILENAMES",
    "README_FILENAME",
    "TRAVIS_FILENAME",
    "default_context",
    "find_override_config",
    "has_travis_marker",
    "load_manifest",
    "load_override_config",
    "resolve_project_root",
]
