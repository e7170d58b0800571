"""Tests for genreadme.pipeline."""

from __future__ import annotations

from genreadme.pipeline import ReadmePipeline


def test_run_returns_text_without_writing(project_builder, registry) -> None:
    project_builder.manifest(description="Tiny helper", license="MIT", author="Ada")

    result = ReadmePipeline(registry=registry).run(project_builder.path())

    assert result.path is None
    assert result.text.startswith("# My pkg")
    assert "MIT © Ada" in result.text
    assert not (project_builder.path() / "README.md").exists()


def test_run_writes_readme_when_flag_set(project_builder, registry) -> None:
    manifest = project_builder.manifest()

    result = ReadmePipeline(registry=registry).run(manifest, {"write": True})

    readme = project_builder.path() / "README.md"
    assert result.path == readme
    assert readme.read_text(encoding="utf-8") == result.text


def test_run_overwrites_existing_readme(project_builder, registry) -> None:
    project_builder.manifest()
    project_builder.write({"README.md": "stale"})

    ReadmePipeline(registry=registry).run(project_builder.path(), {"write": True})

    assert "stale" not in (project_builder.path() / "README.md").read_text(encoding="utf-8")


def test_readme_without_repository_omits_github_sections(project_builder, registry) -> None:
    project_builder.manifest(license="MIT", author="Ada")
    project_builder.write({".travis.yml": "language: node_js\n"})

    result = ReadmePipeline(registry=registry).run(project_builder.path())

    assert "## Contribute" not in result.text
    assert "github.com/user/repo" not in result.text
    assert "travis" not in result.text
