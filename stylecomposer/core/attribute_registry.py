"""Registry of the style attributes a theme may set."""
from __future__ import annotations

import sys
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator

from stylecomposer.core.elements import ElementKind
from stylecomposer.core.errors import UnknownAttributeKeyError


@dataclass(frozen=True)
class AttributeSlot:
    key: str
    kind: ElementKind
    label: str = ""


DEFAULT_ATTRIBUTE_SLOTS: tuple[AttributeSlot, ...] = (
    AttributeSlot(key="plot.title", kind=ElementKind.TEXT, label="Plot title"),
    AttributeSlot(key="plot.subtitle", kind=ElementKind.TEXT, label="Plot subtitle"),
    AttributeSlot(key="plot.caption", kind=ElementKind.TEXT, label="Plot caption"),
    AttributeSlot(key="plot.background", kind=ElementKind.RECT, label="Plot background"),
    AttributeSlot(key="panel.background", kind=ElementKind.RECT, label="Panel background"),
    AttributeSlot(key="panel.border", kind=ElementKind.RECT, label="Panel border"),
    AttributeSlot(key="panel.gridline.major", kind=ElementKind.LINE, label="Major grid lines"),
    AttributeSlot(key="panel.gridline.minor", kind=ElementKind.LINE, label="Minor grid lines"),
    AttributeSlot(key="axis.line", kind=ElementKind.LINE, label="Axis lines"),
    AttributeSlot(key="axis.ticks", kind=ElementKind.LINE, label="Axis ticks"),
    AttributeSlot(key="axis.title", kind=ElementKind.TEXT, label="Axis titles"),
    AttributeSlot(key="axis.title.x", kind=ElementKind.TEXT, label="X axis title"),
    AttributeSlot(key="axis.title.y", kind=ElementKind.TEXT, label="Y axis title"),
    AttributeSlot(key="axis.text", kind=ElementKind.TEXT, label="Tick labels"),
    AttributeSlot(key="axis.text.x", kind=ElementKind.TEXT, label="X tick labels"),
    AttributeSlot(key="axis.text.y", kind=ElementKind.TEXT, label="Y tick labels"),
    AttributeSlot(key="legend.background", kind=ElementKind.RECT, label="Legend background"),
    AttributeSlot(key="legend.key", kind=ElementKind.RECT, label="Legend key background"),
    AttributeSlot(key="legend.title", kind=ElementKind.TEXT, label="Legend title"),
    AttributeSlot(key="legend.text", kind=ElementKind.TEXT, label="Legend labels"),
    AttributeSlot(key="strip.background", kind=ElementKind.RECT, label="Facet strip background"),
    AttributeSlot(key="strip.text", kind=ElementKind.TEXT, label="Facet strip labels"),
)


class AttributeRegistry:
    """Closed set of attribute keys and the element kind each one expects.

    The key set is fixed when the registry is built; it cannot grow afterwards.
    """

    def __init__(self, slots: Iterable[AttributeSlot]) -> None:
        items: dict[str, AttributeSlot] = {}
        for slot in slots:
            key = sys.intern(str(slot.key))
            if not key:
                raise ValueError("Attribute keys must be non-empty strings")
            if key in items:
                raise ValueError(f"Attribute '{key}' is registered twice")
            items[key] = AttributeSlot(key=key, kind=ElementKind(slot.kind), label=slot.label or key)
        if not items:
            raise ValueError("An attribute registry needs at least one attribute")
        self._slots = MappingProxyType(items)

    def __contains__(self, key: object) -> bool:
        return key in self._slots

    def __iter__(self) -> Iterator[str]:
        return iter(self._slots)

    def __len__(self) -> int:
        return len(self._slots)

    def __repr__(self) -> str:
        return f"AttributeRegistry({len(self._slots)} attributes)"

    def keys(self) -> frozenset[str]:
        return frozenset(self._slots)

    def slot(self, key: str, *, theme_name: str | None = None) -> AttributeSlot:
        try:
            return self._slots[key]
        except KeyError:
            raise UnknownAttributeKeyError(key, theme_name=theme_name) from None

    def kind_of(self, key: str, *, theme_name: str | None = None) -> ElementKind:
        return self.slot(key, theme_name=theme_name).kind

    def label(self, key: str) -> str:
        return self.slot(key).label

    def entries(self) -> list[dict[str, str]]:
        return [
            {"key": slot.key, "kind": slot.kind.value, "label": slot.label}
            for slot in self._slots.values()
        ]


default_registry = AttributeRegistry(DEFAULT_ATTRIBUTE_SLOTS)
"""Registry of the chart attributes known to the built-in themes."""


__all__ = ["AttributeRegistry", "AttributeSlot", "DEFAULT_ATTRIBUTE_SLOTS", "default_registry"]
