"""Construction of validated theme definitions."""
from __future__ import annotations

import logging
from typing import Any, Mapping

from pydantic import ValidationError

from stylecomposer.core.attribute_registry import AttributeRegistry, default_registry
from stylecomposer.core.elements import is_element, parse_element
from stylecomposer.core.errors import InvalidElementSpecError, ThemeError
from stylecomposer.core.theme_models import INHERIT, OverrideValue, ThemeDefinition
from stylecomposer.services.validator import validate_definition

logger = logging.getLogger(__name__)


def _coerce_override(key: str, value: Any, *, theme_name: str) -> OverrideValue:
    if value is INHERIT or is_element(value):
        return value
    if isinstance(value, str) and value.strip().lower() == INHERIT.value:
        return INHERIT
    if isinstance(value, Mapping):
        try:
            return parse_element(dict(value))
        except ValidationError as exc:
            raise InvalidElementSpecError(key, theme_name=theme_name, reason=str(exc)) from exc
    raise InvalidElementSpecError(
        key,
        theme_name=theme_name,
        reason=f"expected an element, INHERIT or a mapping, got {type(value).__name__}",
    )


def define_theme(
    name: str,
    parent: ThemeDefinition | None = None,
    overrides: Mapping[str, Any] | None = None,
    *,
    registry: AttributeRegistry | None = None,
) -> ThemeDefinition:
    """Create a theme definition and validate it immediately.

    Parameters
    ----------
    name:
        Display name of the theme, used in error messages.
    parent:
        Theme this one builds on; ``None`` makes a root theme, which must set
        every registry key.
    overrides:
        Attribute key to element, ``INHERIT``/``"inherit"`` or plain element
        data.
    registry:
        Attribute registry; defaults to the parent's, else the default one.
    """

    if not isinstance(name, str) or not name.strip():
        raise ThemeError("Theme name must be a non-empty string")
    name = name.strip()
    if parent is not None and not isinstance(parent, ThemeDefinition):
        raise ThemeError(
            f"Parent of theme '{name}' must be a theme definition, got {type(parent).__name__}",
            theme_name=name,
        )
    if registry is None:
        registry = parent.registry if parent is not None else default_registry

    coerced: dict[str, OverrideValue] = {}
    for key, value in (overrides or {}).items():
        coerced[str(key)] = _coerce_override(str(key), value, theme_name=name)

    definition = ThemeDefinition(name=name, parent=parent, overrides=coerced, registry=registry)
    validate_definition(definition)
    logger.debug(
        "Defined theme '%s' (parent=%s, overrides=%d)",
        name,
        parent.name if parent is not None else None,
        len(coerced),
    )
    return definition


__all__ = ["define_theme"]
