"""Validation of theme definitions and resolved entries."""
from __future__ import annotations

import logging
from typing import Mapping

from stylecomposer.core import config
from stylecomposer.core.attribute_registry import AttributeRegistry
from stylecomposer.core.elements import ElementKind, is_element, kind_tag
from stylecomposer.core.errors import (
    IncompleteRootThemeError,
    InvalidElementSpecError,
    KindMismatchError,
    RegistryMismatchError,
    UnknownAttributeKeyError,
)
from stylecomposer.core.theme_models import INHERIT, ThemeDefinition

logger = logging.getLogger(__name__)


def validate_keys(definition: ThemeDefinition) -> None:
    registry = definition.registry
    for key, value in definition.overrides.items():
        if key not in registry:
            raise UnknownAttributeKeyError(key, theme_name=definition.name)
        if value is not INHERIT and not is_element(value):
            raise InvalidElementSpecError(
                key,
                theme_name=definition.name,
                reason=f"expected an element or INHERIT, got {type(value).__name__}",
            )


def validate_root(definition: ThemeDefinition) -> None:
    if not definition.is_root:
        return
    registry_keys = definition.registry.keys()
    missing = registry_keys - set(definition.overrides)
    inherited = [key for key, value in definition.overrides.items() if value is INHERIT]
    if missing or inherited:
        raise IncompleteRootThemeError(definition.name, missing_keys=missing, inherited_keys=inherited)


def validate_kinds(definition: ThemeDefinition, *, strict: bool | None = None) -> None:
    """Check each overriding element against the kind its key is registered for.

    ``BlankElement`` fits every key. With ``strict`` off a mismatch is only
    logged.
    """

    if strict is None:
        strict = config.settings.STRICT_KIND_CHECKS
    registry = definition.registry
    for key, value in definition.overrides.items():
        if value is INHERIT:
            continue
        actual = kind_tag(value)  # type: ignore[arg-type]
        if actual is ElementKind.BLANK:
            continue
        expected = registry.kind_of(key, theme_name=definition.name)
        if actual is expected:
            continue
        if strict:
            raise KindMismatchError(
                key,
                expected=expected.value,
                actual=actual.value,
                theme_name=definition.name,
            )
        logger.warning(
            "Theme '%s' sets %s element on '%s' registered as %s",
            definition.name,
            actual.value,
            key,
            expected.value,
        )


def validate_parent(definition: ThemeDefinition) -> None:
    parent = definition.parent
    if parent is not None and parent.registry is not definition.registry:
        raise RegistryMismatchError(definition.name, parent_name=parent.name)


def validate_definition(definition: ThemeDefinition, *, strict: bool | None = None) -> None:
    """Run every per-definition check: keys, root completeness, parent, kinds."""

    validate_keys(definition)
    validate_root(definition)
    validate_parent(definition)
    validate_kinds(definition, strict=strict)


def validate_resolved(entries: Mapping[str, object], registry: AttributeRegistry, *, theme_name: str) -> None:
    for key in entries:
        if key not in registry:
            raise UnknownAttributeKeyError(key, theme_name=theme_name)
    missing = registry.keys() - set(entries)
    inherited = [key for key, value in entries.items() if value is INHERIT]
    if missing or inherited:
        raise IncompleteRootThemeError(theme_name, missing_keys=missing, inherited_keys=inherited)


__all__ = [
    "validate_definition",
    "validate_keys",
    "validate_kinds",
    "validate_parent",
    "validate_resolved",
    "validate_root",
]
