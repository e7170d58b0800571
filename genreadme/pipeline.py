"""End-to-end README generation for a single project root."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .config import README_FILENAME, resolve_project_root
from .context import ContextBuilder
from .logging import get_logger
from .registry import RegistryClient
from .renderer import ReadmeRenderer


@dataclass
class ReadmeResult:
    """Rendered README text and, when written, the file it was saved to."""

    text: str
    path: Optional[Path] = None


class ReadmePipeline:
    """Builds the context, renders the template and optionally writes README.md."""

    def __init__(
        self,
        *,
        registry: RegistryClient | None = None,
        renderer: ReadmeRenderer | None = None,
    ) -> None:
        self.registry = registry or RegistryClient()
        self.renderer = renderer or ReadmeRenderer()
        self.logger = get_logger("pipeline")

    async def generate(self, path: str | Path, flags: Mapping[str, Any] | None = None) -> ReadmeResult:
        root = resolve_project_root(Path(path))
        self.logger.debug("Generating README for %s", root)

        context = await self.build_context(root, flags)
        self.logger.debug("Rendering context: %r", context)

        readme = self.renderer.render(context)
        self.logger.debug("Rendered README:\n%s", readme)

        written: Optional[Path] = None
        if context.get("write"):
            written = root / README_FILENAME
            written.write_text(readme, encoding="utf-8")
            self.logger.info("README written to %s", written)
        return ReadmeResult(text=readme, path=written)

    async def build_context(self, root: Path, flags: Mapping[str, Any] | None = None) -> Dict[str, Any]:
        return await ContextBuilder(root, registry=self.registry).build(flags)

    def run(self, path: str | Path, flags: Mapping[str, Any] | None = None) -> ReadmeResult:
        """Synchronous wrapper around :meth:`generate`."""
        return asyncio.run(self.generate(path, flags))


__all__ = ["ReadmePipeline", "ReadmeResult"]
