"""Read-only access to resolved styles for the rendering layer."""
from __future__ import annotations

from stylecomposer.core.attribute_registry import AttributeRegistry
from stylecomposer.core.errors import UnknownAttributeKeyError
from stylecomposer.core.theme_models import Element, ResolvedStyle


def get(style: ResolvedStyle, key: str, *, registry: AttributeRegistry | None = None) -> Element:
    """Return the element resolved for ``key``.

    There is no fallback: a key outside the registry, or missing from a style
    built against another registry, raises ``UnknownAttributeKeyError``.
    """

    registry = registry if registry is not None else style.registry
    if key not in registry:
        raise UnknownAttributeKeyError(key, theme_name=style.name)
    return style[key]


__all__ = ["get"]
