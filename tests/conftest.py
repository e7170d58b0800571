from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import pytest

from genreadme.registry import RegistryClient
from tests._fixtures.project_builder import ProjectBuilder


class StubFetcher:
    """Registry stand-in: returns canned metadata and fails for unknown packages."""

    def __init__(self, packages: Dict[str, Dict[str, Any]] | None = None) -> None:
        self.packages = packages or {}
        self.calls: list[str] = []

    def __call__(self, name: str) -> Dict[str, Any]:
        self.calls.append(name)
        if name not in self.packages:
            raise LookupError(f"unknown package {name}")
        return dict(self.packages[name])


@pytest.fixture
def project_builder(tmp_path: Path) -> ProjectBuilder:
    """Provide a reusable project builder rooted at the pytest tmp_path."""
    return ProjectBuilder(tmp_path)


@pytest.fixture
def stub_fetcher() -> StubFetcher:
    return StubFetcher()


@pytest.fixture
def registry(stub_fetcher: StubFetcher) -> RegistryClient:
    """Registry client that never touches the network."""
    return RegistryClient(fetcher=stub_fetcher)
