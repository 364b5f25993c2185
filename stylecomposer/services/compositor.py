"""Resolution of theme chains into flat styles."""
from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from typing import Callable

from stylecomposer.core import config
from stylecomposer.core.errors import CyclicThemeError, ThemeChainTooDeepError
from stylecomposer.core.theme_models import INHERIT, Element, ResolvedStyle, ThemeDefinition
from stylecomposer.services.validator import validate_definition, validate_resolved

logger = logging.getLogger(__name__)

_DEFAULT = object()


def ancestor_chain(definition: ThemeDefinition, *, max_depth: int | None = None) -> list[ThemeDefinition]:
    """Return the definitions from the root down to ``definition``."""

    limit = max_depth if max_depth is not None else config.settings.MAX_CHAIN_DEPTH
    chain: list[ThemeDefinition] = []
    visited: set[int] = set()
    current: ThemeDefinition | None = definition
    while current is not None:
        if id(current) in visited:
            raise CyclicThemeError(
                definition.name,
                repeated=current.name,
                chain=[item.name for item in chain],
            )
        if len(chain) >= limit:
            raise ThemeChainTooDeepError(definition.name, limit=limit)
        visited.add(id(current))
        chain.append(current)
        current = current.parent
    chain.reverse()
    return chain


def compose(definition: ThemeDefinition) -> ResolvedStyle:
    """Resolve ``definition`` without consulting any cache."""

    chain = ancestor_chain(definition)
    root = chain[0]
    validate_definition(root)
    working: dict[str, Element] = dict(root.overrides)  # type: ignore[arg-type]

    for step in chain[1:]:
        validate_definition(step)
        for key, value in step.overrides.items():
            if value is INHERIT:
                continue
            working[key] = value

    registry = definition.registry
    validate_resolved(working, registry, theme_name=definition.name)
    ordered = {key: working[key] for key in registry}
    style = ResolvedStyle(
        name=definition.name,
        entries=ordered,
        chain=tuple(item.name for item in chain),
        fingerprint=definition.fingerprint,
        registry=registry,
    )
    logger.debug("Resolved theme '%s' through %s", definition.name, " -> ".join(style.chain))
    return style


class ResolutionCache:
    """Bounded memo of resolved styles keyed by definition identity and fingerprint.

    Lookups share one lock; each missing entry gets its own lock so at most one
    resolution per definition runs at a time. Failures are not stored.
    """

    def __init__(self, maxsize: int | None = None) -> None:
        self._maxsize = maxsize if maxsize is not None else config.settings.RESOLUTION_CACHE_SIZE
        if self._maxsize < 1:
            raise ValueError("maxsize must be at least 1")
        self._lock = threading.Lock()
        self._entries: OrderedDict[tuple[int, str], tuple[ThemeDefinition, ResolvedStyle]] = OrderedDict()
        self._pending: dict[tuple[int, str], threading.Lock] = {}
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _lookup(self, key: tuple[int, str], definition: ThemeDefinition) -> ResolvedStyle | None:
        entry = self._entries.get(key)
        if entry is None or entry[0] is not definition:
            return None
        self._entries.move_to_end(key)
        self.hits += 1
        return entry[1]

    def get_or_compute(
        self,
        definition: ThemeDefinition,
        compute: Callable[[ThemeDefinition], ResolvedStyle],
    ) -> ResolvedStyle:
        key = (id(definition), definition.fingerprint)
        with self._lock:
            cached = self._lookup(key, definition)
            if cached is not None:
                return cached
            slot = self._pending.setdefault(key, threading.Lock())

        with slot:
            with self._lock:
                cached = self._lookup(key, definition)
                if cached is not None:
                    return cached
            try:
                style = compute(definition)
            except BaseException:
                with self._lock:
                    self._pending.pop(key, None)
                raise
            with self._lock:
                self.misses += 1
                self._entries[key] = (definition, style)
                self._entries.move_to_end(key)
                while len(self._entries) > self._maxsize:
                    self._entries.popitem(last=False)
                self._pending.pop(key, None)
        return style

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0


default_cache = ResolutionCache()


def resolve(definition: ThemeDefinition, *, cache: ResolutionCache | None | object = _DEFAULT) -> ResolvedStyle:
    """Resolve a theme chain into a complete style.

    The module cache is used when ``RESOLUTION_CACHE`` is enabled; pass
    ``cache=None`` to bypass caching or a ``ResolutionCache`` of your own.
    """

    if cache is _DEFAULT:
        cache = default_cache if config.settings.RESOLUTION_CACHE else None
    if cache is None:
        return compose(definition)
    return cache.get_or_compute(definition, compose)  # type: ignore[union-attr]


__all__ = ["ResolutionCache", "ancestor_chain", "compose", "default_cache", "resolve"]
