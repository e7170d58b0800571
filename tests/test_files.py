"""Tests for genreadme.files."""

from __future__ import annotations

from pathlib import Path

from genreadme.files import (
    CodeBlock,
    add_extensions,
    discover_files,
    find_up,
    get_extension,
    rewrite_self_imports,
)


def test_add_extensions_groups_by_extension_first() -> None:
    assert add_extensions(["docs", "doc"], ["md", "txt"]) == [
        "docs.md",
        "doc.md",
        "docs.txt",
        "doc.txt",
    ]


def test_get_extension_returns_last_suffix() -> None:
    assert get_extension("example.test.js") == "js"
    assert get_extension(Path("/tmp/usage.bash")) == "bash"


def test_find_up_prefers_candidate_order_within_directory(tmp_path: Path) -> None:
    (tmp_path / "doc.md").write_text("doc", encoding="utf-8")
    (tmp_path / "docs.md").write_text("docs", encoding="utf-8")

    assert find_up(["docs.md", "doc.md"], tmp_path) == tmp_path / "docs.md"


def test_find_up_walks_parent_directories(tmp_path: Path) -> None:
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    (tmp_path / "example.js").write_text("x", encoding="utf-8")

    assert find_up(["example.js"], nested) == tmp_path / "example.js"


def test_find_up_nearest_directory_wins(tmp_path: Path) -> None:
    nested = tmp_path / "pkg"
    nested.mkdir()
    (tmp_path / "docs.md").write_text("outer", encoding="utf-8")
    (nested / "doc.md").write_text("inner", encoding="utf-8")

    assert find_up(["docs.md", "doc.md"], nested) == nested / "doc.md"


def test_find_up_ignores_directories(tmp_path: Path) -> None:
    (tmp_path / "docs.md").mkdir()
    assert find_up(["docs.md"], tmp_path) is None


def test_rewrite_self_imports_handles_require_and_import() -> None:
    content = "\n".join(
        [
            "const pkg = require('./')",
            'const again = require(".")',
            "import pkg2 from './'",
            'import { a } from "."',
            "const other = require('./lib')",
        ]
    )

    rewritten = rewrite_self_imports(content, "my-pkg")

    assert "require('my-pkg')" in rewritten
    assert 'require("my-pkg")' in rewritten
    assert "from 'my-pkg'" in rewritten
    assert 'from "my-pkg"' in rewritten
    assert "require('./lib')" in rewritten


def test_discover_files_builds_blocks(tmp_path: Path) -> None:
    (tmp_path / "example.js").write_text(
        "const myPkg = require('./')\n\n\n\nmyPkg()\n\n", encoding="utf-8"
    )
    (tmp_path / "usage.sh").write_text("$ my-pkg --help\n", encoding="utf-8")
    (tmp_path / "docs.md").write_text("# Docs\n", encoding="utf-8")

    found = discover_files(tmp_path, "my-pkg")

    assert found.documentation == tmp_path / "docs.md"
    assert found.example == CodeBlock(language="js", content="const myPkg = require('my-pkg')\n\nmyPkg()")
    assert found.usage == CodeBlock(language="sh", content="$ my-pkg --help")


def test_discover_files_example_priority_follows_extension_order(tmp_path: Path) -> None:
    (tmp_path / "example.ts").write_text("ts", encoding="utf-8")
    (tmp_path / "example.sh").write_text("sh", encoding="utf-8")

    found = discover_files(tmp_path, "my-pkg")

    assert found.example is not None
    assert found.example.language == "sh"


def test_discover_files_replaces_undecodable_bytes(tmp_path: Path) -> None:
    (tmp_path / "example.sh").write_bytes(b"echo caf\xe9\n")

    found = discover_files(tmp_path, "my-pkg")

    assert found.example == CodeBlock(language="sh", content="echo caf\ufffd")
