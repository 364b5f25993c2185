"""Declarative style-theme composition engine."""
from __future__ import annotations

from stylecomposer.core.attribute_registry import AttributeRegistry, AttributeSlot, default_registry
from stylecomposer.core.elements import (
    BLANK,
    BlankElement,
    ElementKind,
    LineElement,
    RectElement,
    TextElement,
    blank,
    kind_tag,
    line,
    merge_element,
    parse_element,
    rect,
    text,
)
from stylecomposer.core.errors import (
    CyclicThemeError,
    IncompleteRootThemeError,
    InvalidElementSpecError,
    KindMismatchError,
    RegistryMismatchError,
    ThemeChainTooDeepError,
    ThemeError,
    UnknownAttributeKeyError,
    UnknownParentThemeError,
    UnknownThemeError,
)
from stylecomposer.core.theme_models import INHERIT, InheritMarker, ResolvedStyle, ThemeDefinition
from stylecomposer.services.builtin_themes import builtin_theme, builtin_themes
from stylecomposer.services.compositor import ResolutionCache, resolve
from stylecomposer.services.query import get
from stylecomposer.services.theme_data import definition_to_data, load_themes, themes_to_data
from stylecomposer.services.themes import define_theme

__version__ = "0.1.0"

__all__ = [
    "AttributeRegistry",
    "AttributeSlot",
    "BLANK",
    "BlankElement",
    "CyclicThemeError",
    "ElementKind",
    "INHERIT",
    "IncompleteRootThemeError",
    "InheritMarker",
    "InvalidElementSpecError",
    "KindMismatchError",
    "LineElement",
    "RectElement",
    "RegistryMismatchError",
    "ResolutionCache",
    "ResolvedStyle",
    "TextElement",
    "ThemeChainTooDeepError",
    "ThemeDefinition",
    "ThemeError",
    "UnknownAttributeKeyError",
    "UnknownParentThemeError",
    "UnknownThemeError",
    "blank",
    "builtin_theme",
    "builtin_themes",
    "default_registry",
    "define_theme",
    "definition_to_data",
    "get",
    "kind_tag",
    "line",
    "load_themes",
    "merge_element",
    "parse_element",
    "rect",
    "resolve",
    "text",
    "themes_to_data",
]
