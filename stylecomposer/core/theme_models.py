"""Theme definitions and resolved styles."""
from __future__ import annotations

import hashlib
import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterator, Union

from stylecomposer.core.attribute_registry import AttributeRegistry
from stylecomposer.core.errors import UnknownAttributeKeyError
from stylecomposer.core.elements import (
    BlankElement,
    LineElement,
    RectElement,
    TextElement,
    element_to_data,
    is_element,
)

Element = Union[TextElement, LineElement, RectElement, BlankElement]


class InheritMarker(Enum):
    """Explicit "keep the parent's value" entry of an override map."""

    INHERIT = "inherit"

    def __repr__(self) -> str:
        return "INHERIT"


INHERIT = InheritMarker.INHERIT

OverrideValue = Union[Element, InheritMarker]


def override_to_data(value: object) -> Any:
    if value is INHERIT:
        return INHERIT.value
    if is_element(value):
        return element_to_data(value)  # type: ignore[arg-type]
    return repr(value)


@dataclass(frozen=True, eq=False)
class ThemeDefinition:
    """A possibly partial theme built on at most one parent.

    Definitions compare and hash by identity. Use ``define_theme`` to build
    one; it validates the override map against the registry.
    """

    name: str
    parent: ThemeDefinition | None
    overrides: Mapping[str, OverrideValue]
    registry: AttributeRegistry
    fingerprint: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "overrides", MappingProxyType(dict(self.overrides)))
        object.__setattr__(self, "fingerprint", self._compute_fingerprint())

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def _compute_fingerprint(self) -> str:
        payload = {
            "name": self.name,
            "parent": self.parent.fingerprint if self.parent is not None else None,
            "overrides": {key: override_to_data(value) for key, value in self.overrides.items()},
        }
        token = json.dumps(payload, sort_keys=True, separators=(",", ":"))
        return hashlib.sha256(token.encode("utf-8")).hexdigest()


@dataclass(frozen=True, eq=False)
class ResolvedStyle(Mapping[str, Element]):
    """Flattened output of a resolved theme chain.

    Covers every registry key exactly once. Instances are sealed by the
    compositor and never changed afterwards; two styles are equal when their
    entries are equal.
    """

    name: str
    entries: Mapping[str, Element]
    chain: tuple[str, ...]
    fingerprint: str
    registry: AttributeRegistry = field(repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def __getitem__(self, key: str) -> Element:
        try:
            return self.entries[key]
        except KeyError:
            raise UnknownAttributeKeyError(key, theme_name=self.name) from None

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def get(self, key: str) -> Element:  # type: ignore[override]
        """Return the element for ``key``; unknown keys raise instead of defaulting."""

        return self[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def to_data(self) -> dict[str, Any]:
        return {key: element_to_data(value) for key, value in self.entries.items()}


__all__ = [
    "Element",
    "INHERIT",
    "InheritMarker",
    "OverrideValue",
    "ResolvedStyle",
    "ThemeDefinition",
    "override_to_data",
]
