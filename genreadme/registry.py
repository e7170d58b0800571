"""npm registry lookups used to describe dependencies in the README."""

from __future__ import annotations

import asyncio
import json
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Dict, Iterable, List, Optional
from urllib.error import HTTPError, URLError
from urllib.parse import quote
from urllib.request import Request, urlopen

from .logging import get_logger

REGISTRY_URL = "https://registry.npmjs.org"
REPOSITORY_SHORTCUT = "https://ghub.io"

_METADATA_FIELDS = ("name", "version", "description", "license", "homepage", "author")

PackageFetcher = Callable[[str], Dict[str, Any]]


class RegistryError(RuntimeError):
    """Raised when package metadata cannot be retrieved from the registry."""


def repository_shortcut(name: str) -> str:
    return f"{REPOSITORY_SHORTCUT}/{name}"


class RegistryClient:
    """Fetches package metadata and decorates it for the dependency sections."""

    def __init__(
        self,
        *,
        registry_url: str = REGISTRY_URL,
        request_timeout: Optional[float] = None,
        fetcher: PackageFetcher | None = None,
    ) -> None:
        self.registry_url = registry_url.rstrip("/")
        self.request_timeout = request_timeout
        self._fetch = fetcher or self.fetch_package
        self.logger = get_logger("registry")

    def fetch_package(self, name: str) -> Dict[str, Any]:
        """Return the latest published metadata for ``name``."""
        endpoint = f"{self.registry_url}/{quote(name, safe='@')}"
        request = Request(endpoint, headers={"Accept": "application/json"})
        try:
            # No timeout unless one is configured: a stalled lookup blocks only its own list.
            with urlopen(request, timeout=self.request_timeout) as response:  # type: ignore[arg-type]
                raw = response.read()
        except HTTPError as exc:
            raise RegistryError(f"Registry lookup for {name} failed with status {exc.code}") from exc
        except URLError as exc:
            raise RegistryError(f"Registry lookup for {name} failed: {exc.reason}") from exc

        try:
            document = json.loads(raw.decode("utf-8"))
        except json.JSONDecodeError as exc:
            raise RegistryError(f"Registry returned invalid JSON for {name}") from exc

        return self._latest_metadata(document)

    async def describe(self, names: Iterable[str]) -> List[Dict[str, Any]]:
        """Describe each package concurrently, preserving the input order.

        A failed lookup degrades to a record holding only ``name`` and ``repository``.
        """
        ordered = list(names)
        if not ordered:
            return []

        loop = asyncio.get_running_loop()
        # One worker per package so the whole list is in flight at once.
        with ThreadPoolExecutor(max_workers=len(ordered), thread_name_prefix="genreadme-registry") as executor:
            results = await asyncio.gather(
                *(loop.run_in_executor(executor, self._fetch, name) for name in ordered),
                return_exceptions=True,
            )

        described: List[Dict[str, Any]] = []
        for name, result in zip(ordered, results):
            if isinstance(result, BaseException):
                self.logger.debug("Metadata lookup failed for %s: %s", name, result)
                metadata: Dict[str, Any] = {}
            else:
                metadata = dict(result or {})
            described.append({**metadata, "name": name, "repository": repository_shortcut(name)})
        return described

    @staticmethod
    def _latest_metadata(document: Any) -> Dict[str, Any]:
        if not isinstance(document, dict):
            raise RegistryError("Registry document must be a JSON object")

        latest = (document.get("dist-tags") or {}).get("latest")
        versions = document.get("versions") or {}
        manifest = versions.get(latest) if isinstance(versions, dict) and latest else None
        if not isinstance(manifest, dict):
            # Abbreviated or single-version documents carry the fields at the top level.
            manifest = document

        return {field: manifest[field] for field in _METADATA_FIELDS if manifest.get(field) is not None}


__all__ = ["RegistryClient", "RegistryError", "repository_shortcut"]
