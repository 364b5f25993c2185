"""Conversion between theme definitions and plain structured data."""
from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from stylecomposer.core.attribute_registry import AttributeRegistry, default_registry
from stylecomposer.core.errors import CyclicThemeError, ThemeError, UnknownParentThemeError
from stylecomposer.core.theme_models import ThemeDefinition, override_to_data
from stylecomposer.services.themes import define_theme

logger = logging.getLogger(__name__)


def definition_to_data(definition: ThemeDefinition) -> dict[str, Any]:
    return {
        "parent": definition.parent.name if definition.parent is not None else None,
        "overrides": {key: override_to_data(value) for key, value in definition.overrides.items()},
    }


def themes_to_data(definitions: Iterable[ThemeDefinition]) -> dict[str, dict[str, Any]]:
    data: dict[str, dict[str, Any]] = {}
    for definition in definitions:
        if definition.name in data:
            raise ThemeError(f"Theme '{definition.name}' is listed twice", theme_name=definition.name)
        data[definition.name] = definition_to_data(definition)
    return data


def _normalize_entries(data: Mapping[str, Any]) -> dict[str, dict[str, Any]]:
    entries: dict[str, dict[str, Any]] = {}
    for raw_name, raw_entry in data.items():
        name = str(raw_name).strip()
        if not name:
            raise ThemeError("Theme name must be a non-empty string")
        if not isinstance(raw_entry, Mapping):
            raise ThemeError(f"Theme '{name}' must be a mapping", theme_name=name)
        parent = raw_entry.get("parent")
        if parent is not None and not isinstance(parent, str):
            raise ThemeError(f"Theme '{name}' parent must be a theme name", theme_name=name)
        overrides = raw_entry.get("overrides") or {}
        if not isinstance(overrides, Mapping):
            raise ThemeError(f"Theme '{name}' overrides must be a mapping", theme_name=name)
        entries[name] = {"parent": parent.strip() if parent else None, "overrides": dict(overrides)}
    return entries


def _pending_chain(
    name: str,
    entries: Mapping[str, Mapping[str, Any]],
    built: Mapping[str, ThemeDefinition],
) -> tuple[list[str], str | None]:
    """Walk parent names from ``name`` until a built theme or a name outside ``entries``.

    Returns the unbuilt names, leaf first, and the name the walk stopped on.
    """

    path: list[str] = []
    seen: set[str] = set()
    current: str | None = name
    while current is not None and current in entries and current not in built:
        if current in seen:
            raise CyclicThemeError(name, repeated=current, chain=path)
        seen.add(current)
        path.append(current)
        current = entries[current]["parent"]
    return path, current


def load_themes(
    data: Mapping[str, Any],
    *,
    registry: AttributeRegistry | None = None,
    known: Mapping[str, ThemeDefinition] | None = None,
) -> dict[str, ThemeDefinition]:
    """Build theme definitions from ``{name: {"parent": ..., "overrides": {...}}}``.

    Parents are looked up by name in ``data`` first, then in ``known``. Parent
    cycles are reported before any definition is built.
    """

    known = dict(known or {})
    if registry is None:
        registry = next(iter(known.values())).registry if known else default_registry
    entries = _normalize_entries(data)

    for name in entries:
        _pending_chain(name, entries, {})

    built: dict[str, ThemeDefinition] = {}
    for name in entries:
        path, stop = _pending_chain(name, entries, built)
        if not path:
            continue
        if stop is None:
            parent = None
        elif stop in built:
            parent = built[stop]
        elif stop in known:
            parent = known[stop]
        else:
            raise UnknownParentThemeError(path[-1], parent_name=stop)
        for pending in reversed(path):
            parent = define_theme(pending, parent, entries[pending]["overrides"], registry=registry)
            built[pending] = parent

    logger.debug("Loaded %d theme definition(s) from plain data", len(built))
    return {name: built[name] for name in entries}


__all__ = ["definition_to_data", "load_themes", "themes_to_data"]
