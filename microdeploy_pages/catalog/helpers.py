"""Utility helpers shared by the catalog loader."""

from __future__ import annotations

import typing as typ

from .models import CatalogConfigError, NavLink


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _required_str(
    payload: typ.Mapping[str, object], key: str, *, context: str
) -> str:
    """Return ``payload[key]`` as text, raising when missing, blank or not text."""
    match payload.get(key):
        case str() as text if text.strip():
            return text
        case None | str():
            msg = f"{context} is missing '{key}'."
        case other:
            msg = (
                f"{context} field '{key}' must be text, "
                f"got {type(other).__name__}."
            )
    raise CatalogConfigError(msg)


def _require_mapping(value: object, *, context: str) -> typ.Mapping[str, object]:
    """Return ``value`` when it is a mapping, otherwise raise."""
    match value:
        case dict() as data:
            return data
        case _:
            msg = f"{context} must be a mapping."
            raise CatalogConfigError(msg)


def _require_list(value: object, *, context: str) -> list[object]:
    """Return ``value`` when it is a non-empty list, otherwise raise."""
    match value:
        case list() as items if items:
            return items
        case _:
            msg = f"{context} requires at least one entry."
            raise CatalogConfigError(msg)


def _build_links(
    entries: object, *, context: str, default_external: bool
) -> tuple[NavLink, ...]:
    """Build header or footer links from a list of mappings."""
    links: list[NavLink] = []
    for entry in _require_list(entries, context=context):
        match entry:
            case {
                "label": str() as label,
                "href": str() as href,
                **rest,
            } if label.strip() and href.strip():
                pass
            case _:
                msg = f"{context} entries require 'label' and 'href'."
                raise CatalogConfigError(msg)
        external = rest.get("external")
        if external is None:
            external = default_external
        links.append(
            NavLink(
                label=label,
                href=href,
                glyph_name=_optional_str(rest.get("glyph")),
                external=bool(external),
            )
        )
    return tuple(links)


__all__ = [
    "_build_links",
    "_optional_str",
    "_require_list",
    "_require_mapping",
    "_required_str",
]
