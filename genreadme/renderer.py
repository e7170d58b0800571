"""Jinja2 rendering of the README template."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Mapping

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .text import clean

DEFAULT_TEMPLATE = "readme.md.j2"

_SCHEME = re.compile(r"htt[ps]*://", re.IGNORECASE)


def beautiful(name: str) -> str:
    """``my-cool-pkg`` -> ``My cool pkg``."""
    if not name:
        return name
    return (name[0].upper() + name[1:]).replace("-", " ")


def show_text_if(value: Any, text: str) -> str:
    return text if value else ""


def usage_show(content: str, kind: str) -> str:
    # Usage given as a URL renders as a link item instead of a code block.
    if kind == "url":
        return f"- [{_SCHEME.sub('', content, count=1)}]({content})"
    return content


def usage_show_code(kind: str, text: str) -> str:
    if kind == "url":
        return ""
    return text


class ReadmeRenderer:
    """Renders the README template for a fully built context."""

    def __init__(self, template_path: Path | None = None) -> None:
        if template_path is not None:
            template_path = template_path.expanduser().resolve()
            self.templates_dir = template_path.parent
            self.template_name = template_path.name
        else:
            self.templates_dir = Path(__file__).with_name("templates")
            self.template_name = DEFAULT_TEMPLATE
        self._env = self._create_env(self.templates_dir)

    def render(self, context: Mapping[str, Any]) -> str:
        template = self._env.get_template(self.template_name)
        return clean(template.render(**context))

    @staticmethod
    def _create_env(templates_dir: Path) -> Environment:
        env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        env.filters["beautiful"] = beautiful
        env.globals.update(
            beautiful=beautiful,
            show_text_if=show_text_if,
            usage_show=usage_show,
            usage_show_code=usage_show_code,
        )
        return env


__all__ = ["ReadmeRenderer", "beautiful", "show_text_if", "usage_show", "usage_show_code"]
