"""Discovery of documentation, example and usage files near the project."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from .text import clean

DOCUMENTATION_BASENAMES = ("docs", "documentation", "doc", "usage")
DOCUMENTATION_EXTENSIONS = ("md",)
EXAMPLE_BASENAMES = ("example",)
EXAMPLE_EXTENSIONS = ("js", "sh", "md", "vue", "ts")
USAGE_BASENAMES = ("usage",)
USAGE_EXTENSIONS = ("sh", "bash")

_REQUIRE_SELF = re.compile(r"""require\((['"])\.\/?\1\)""")
_IMPORT_SELF = re.compile(r"""(\bfrom\s+)(['"])\.\/?\2""")


@dataclass
class CodeBlock:
    """Fenced snippet injected into the README (example or usage)."""

    language: str
    content: str


@dataclass
class DiscoveredFiles:
    """Files located for the documentation, example and usage sections."""

    documentation: Optional[Path] = None
    example: Optional[CodeBlock] = None
    usage: Optional[CodeBlock] = None


def add_extensions(bases: Sequence[str], extensions: Sequence[str]) -> List[str]:
    """Combine base names and extensions, grouped by extension first.

    The ordering is the lookup priority used by :func:`find_up`.
    """
    return [f"{base}.{ext}" for ext in extensions for base in bases]


def get_extension(path: Path | str) -> str:
    return str(path).rsplit(".", 1)[-1]


def find_up(candidates: Iterable[str], start: Path) -> Optional[Path]:
    """Return the first existing candidate in ``start`` or its ancestors."""
    names = list(candidates)
    directory = start.resolve()
    for folder in (directory, *directory.parents):
        for name in names:
            path = folder / name
            if path.is_file():
                return path
    return None


def read_clean(path: Path) -> str:
    # Undecodable bytes become U+FFFD.
    return clean(path.read_text(encoding="utf-8", errors="replace"))


def rewrite_self_imports(content: str, package_name: str) -> str:
    """Point ``require('./')`` style self references at the published package."""
    content = _REQUIRE_SELF.sub(
        lambda match: f"require({match.group(1)}{package_name}{match.group(1)})",
        content,
    )
    return _IMPORT_SELF.sub(
        lambda match: f"{match.group(1)}{match.group(2)}{package_name}{match.group(2)}",
        content,
    )


def discover_files(start: Path, package_name: str) -> DiscoveredFiles:
    """Locate documentation, example and usage files starting at ``start``."""
    found = DiscoveredFiles()

    documentation = find_up(add_extensions(DOCUMENTATION_BASENAMES, DOCUMENTATION_EXTENSIONS), start)
    if documentation:
        found.documentation = documentation

    example = find_up(add_extensions(EXAMPLE_BASENAMES, EXAMPLE_EXTENSIONS), start)
    if example:
        content = rewrite_self_imports(read_clean(example), package_name)
        found.example = CodeBlock(language=get_extension(example), content=content)

    usage = find_up(add_extensions(USAGE_BASENAMES, USAGE_EXTENSIONS), start)
    if usage:
        found.usage = CodeBlock(language=get_extension(usage), content=read_clean(usage))

    return found


__all__ = [
    "CodeBlock",
    "DiscoveredFiles",
    "add_extensions",
    "discover_files",
    "find_up",
    "get_extension",
    "read_clean",
    "rewrite_self_imports",
]
