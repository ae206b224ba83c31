"""Per-page head overrides inserted at the shell's head injection point."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Mapping

from markupsafe import Markup

DEFAULT_TITLE = "Just Use Fucking Laravel"

_ATTRIBUTE_NAME = re.compile(r"^[A-Za-z_:][-A-Za-z0-9_:.]*$")
_SEPARATOR = Markup("\n        ")


@dataclass(frozen=True)
class HeadPayload:
    """Title override plus extra ``<meta>`` and ``<link>`` elements for one page.

    ``meta`` and ``links`` hold one attribute mapping per element; a single
    mapping is accepted for a lone element.
    """

    title: str | None = None
    meta: tuple[Mapping[str, str], ...] = ()
    links: tuple[Mapping[str, str], ...] = ()

    def __post_init__(self) -> None:
        for field_name in ("meta", "links"):
            value = getattr(self, field_name)
            if isinstance(value, Mapping):
                object.__setattr__(self, field_name, (value,))
            else:
                object.__setattr__(self, field_name, tuple(value))


def _element(tag: str, attributes: Mapping[str, str]) -> Markup:
    parts = []
    for name, value in attributes.items():
        if not _ATTRIBUTE_NAME.match(name):
            raise ValueError(f"Invalid attribute name for <{tag}>: {name!r}")
        parts.append(Markup(' {}="{}"').format(Markup(name), value))
    return Markup("<{}{}>").format(Markup(tag), Markup("").join(parts))


def render_head(payload: HeadPayload | None) -> Markup:
    """Render the extra head elements; an absent payload renders nothing."""
    if payload is None:
        return Markup("")
    elements = [_element("meta", attrs) for attrs in payload.meta]
    elements.extend(_element("link", attrs) for attrs in payload.links)
    return _SEPARATOR.join(elements)


def page_title(payload: HeadPayload | None) -> str:
    if payload is not None and payload.title:
        return payload.title
    return DEFAULT_TITLE
