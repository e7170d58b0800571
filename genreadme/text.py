"""Whitespace normalisation for text injected into README output."""

from __future__ import annotations

import re

_BLANK_RUN = re.compile(r"\n[ \t\f\v]*\n(?:[ \t\f\v]*\n)*")


def collapse_blank_lines(text: str) -> str:
    """Collapse each run of blank (or whitespace-only) lines into one blank line."""
    return _BLANK_RUN.sub("\n\n", text)


def strip_trailing(text: str) -> str:
    return text.rstrip()


def clean(text: str) -> str:
    """Normalise line endings, collapse blank-line runs and trim the tail.

    ``clean(clean(text)) == clean(text)`` for any input.
    """
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    return strip_trailing(collapse_blank_lines(normalized))


__all__ = ["clean", "collapse_blank_lines", "strip_trailing"]
