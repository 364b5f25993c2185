"""Errors raised while defining or resolving themes.

All of them signal an authoring mistake: they are synchronous and never
retried, and the engine never corrects them on the caller's behalf.
"""
from __future__ import annotations

from typing import Iterable


class ThemeError(ValueError):
    """Base class for theme authoring errors."""

    def __init__(self, message: str, *, theme_name: str | None = None) -> None:
        super().__init__(message)
        self.theme_name = theme_name


class UnknownAttributeKeyError(ThemeError):
    def __init__(self, key: str, *, theme_name: str | None = None) -> None:
        where = f" in theme '{theme_name}'" if theme_name else ""
        super().__init__(f"Unknown attribute key '{key}'{where}", theme_name=theme_name)
        self.key = key


class IncompleteRootThemeError(ThemeError):
    def __init__(
        self,
        theme_name: str,
        *,
        missing_keys: Iterable[str] = (),
        inherited_keys: Iterable[str] = (),
    ) -> None:
        self.missing_keys = tuple(sorted(missing_keys))
        self.inherited_keys = tuple(sorted(inherited_keys))
        details: list[str] = []
        if self.missing_keys:
            details.append(f"missing keys: {', '.join(self.missing_keys)}")
        if self.inherited_keys:
            details.append(f"keys marked inherit: {', '.join(self.inherited_keys)}")
        super().__init__(
            f"Root theme '{theme_name}' must define every attribute ({'; '.join(details)})",
            theme_name=theme_name,
        )


class KindMismatchError(ThemeError):
    def __init__(self, key: str, *, expected: str, actual: str, theme_name: str | None = None) -> None:
        super().__init__(
            f"Attribute '{key}' in theme '{theme_name}' expects a {expected} element, got {actual}",
            theme_name=theme_name,
        )
        self.key = key
        self.expected = expected
        self.actual = actual


class CyclicThemeError(ThemeError):
    def __init__(self, theme_name: str, *, repeated: str, chain: Iterable[str] = ()) -> None:
        self.repeated = repeated
        self.chain = tuple(chain)
        path = " -> ".join((*self.chain, repeated))
        super().__init__(
            f"Theme '{theme_name}' has a cyclic parent chain: '{repeated}' is visited twice ({path})",
            theme_name=theme_name,
        )


class ThemeChainTooDeepError(ThemeError):
    def __init__(self, theme_name: str, *, limit: int) -> None:
        super().__init__(
            f"Theme '{theme_name}' has a parent chain longer than {limit} themes",
            theme_name=theme_name,
        )
        self.limit = limit


class RegistryMismatchError(ThemeError):
    def __init__(self, theme_name: str, *, parent_name: str) -> None:
        super().__init__(
            f"Theme '{theme_name}' and its parent '{parent_name}' use different attribute registries",
            theme_name=theme_name,
        )
        self.parent_name = parent_name


class UnknownParentThemeError(ThemeError):
    def __init__(self, theme_name: str, *, parent_name: str) -> None:
        super().__init__(
            f"Theme '{theme_name}' refers to unknown parent theme '{parent_name}'",
            theme_name=theme_name,
        )
        self.parent_name = parent_name


class UnknownThemeError(ThemeError):
    def __init__(self, theme_name: str) -> None:
        super().__init__(f"Unknown built-in theme '{theme_name}'", theme_name=theme_name)


class InvalidElementSpecError(ThemeError):
    def __init__(self, key: str, *, theme_name: str | None = None, reason: str = "") -> None:
        suffix = f": {reason}" if reason else ""
        super().__init__(
            f"Invalid element for attribute '{key}' in theme '{theme_name}'{suffix}",
            theme_name=theme_name,
        )
        self.key = key


__all__ = [
    "CyclicThemeError",
    "IncompleteRootThemeError",
    "InvalidElementSpecError",
    "KindMismatchError",
    "RegistryMismatchError",
    "ThemeChainTooDeepError",
    "ThemeError",
    "UnknownAttributeKeyError",
    "UnknownParentThemeError",
    "UnknownThemeError",
]
