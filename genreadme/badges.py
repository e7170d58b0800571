"""Badge composition for the README header."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping

from .config import DEFAULT_BADGE_STYLE
from .logging import get_logger

_LOGGER = get_logger("badges")

SHIELDS_URL = "https://img.shields.io"
NPM_PACKAGE_URL = "https://npmjs.org/package"
XO_URL = "https://github.com/xojs/xo"


@dataclass
class Badge:
    """Single shields.io badge: title, image URL and link target."""

    title: str
    badge: str
    url: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Badge":
        return cls(
            title=str(data.get("title") or ""),
            badge=str(data.get("badge") or ""),
            url=str(data.get("url") or ""),
        )


def compose_badges(context: Mapping[str, Any]) -> List[Badge]:
    """Return computed badges followed by badges supplied in the override config.

    Conditional badges come first (Travis, XO, Node), then Version and Downloads.
    """
    name = context["name"]
    badges_config = context.get("badges")
    if not isinstance(badges_config, Mapping):
        badges_config = {}
    style = badges_config.get("style") or DEFAULT_BADGE_STYLE
    package_url = f"{NPM_PACKAGE_URL}/{name}"

    computed: List[Badge] = []
    if context.get("travis"):
        gh = context.get("gh")
        if gh is None:
            _LOGGER.warning("Travis badge skipped: repository is not a recognised GitHub URL")
        else:
            computed.append(
                Badge(
                    title="Travis",
                    badge=f"{SHIELDS_URL}/travis/{gh.user}/{gh.repo}.svg?branch={gh.branch}&style={style}",
                    url=gh.travis_url,
                )
            )

    if context.get("xo"):
        computed.append(
            Badge(
                title="XO code style",
                badge=f"{SHIELDS_URL}/badge/code%20style-XO-red.svg?style={style}",
                url=XO_URL,
            )
        )

    engines = context.get("engines")
    # Legacy manifests list engines as strings; only the mapping form names a node range.
    if isinstance(engines, Mapping) and engines.get("node"):
        computed.append(
            Badge(
                title="Node",
                badge=f"{SHIELDS_URL}/node/v/{name}.svg?style={style}",
                url=package_url,
            )
        )

    computed.append(
        Badge(title="Version", badge=f"{SHIELDS_URL}/npm/v/{name}.svg?style={style}", url=package_url)
    )
    computed.append(
        Badge(title="Downloads", badge=f"{SHIELDS_URL}/npm/dt/{name}.svg?style={style}", url=package_url)
    )

    extra = [
        item if isinstance(item, Badge) else Badge.from_mapping(item)
        for item in badges_config.get("list") or []
        if isinstance(item, (Badge, Mapping))
    ]
    return computed + extra


__all__ = ["Badge", "compose_badges"]
