"""Built-in chart themes for the default attribute registry."""
from __future__ import annotations

from functools import lru_cache

from stylecomposer.core.attribute_registry import default_registry
from stylecomposer.core.elements import BLANK, line, rect, text
from stylecomposer.core.errors import UnknownThemeError
from stylecomposer.core.theme_models import INHERIT, ThemeDefinition
from stylecomposer.services.themes import define_theme

BASE_FONT_FAMILY = "sans"
BASE_FONT_SIZE = 11.0


def _grey_elements() -> dict[str, object]:
    small = BASE_FONT_SIZE * 0.8
    return {
        "plot.title": text(BASE_FONT_FAMILY, BASE_FONT_SIZE * 1.2, h_align="start", v_align_offset=5.5),
        "plot.subtitle": text(BASE_FONT_FAMILY, BASE_FONT_SIZE, h_align="start", v_align_offset=5.5),
        "plot.caption": text(BASE_FONT_FAMILY, small, h_align="end", v_align_offset=5.5),
        "plot.background": rect("white", "white"),
        "panel.background": rect("grey92"),
        "panel.border": BLANK,
        "panel.gridline.major": line(0.5, "white"),
        "panel.gridline.minor": line(0.25, "white"),
        "axis.line": BLANK,
        "axis.ticks": line(0.5, "grey20"),
        "axis.title": text(BASE_FONT_FAMILY, BASE_FONT_SIZE),
        "axis.title.x": text(BASE_FONT_FAMILY, BASE_FONT_SIZE, v_align_offset=2.75),
        "axis.title.y": text(BASE_FONT_FAMILY, BASE_FONT_SIZE, v_align_offset=2.75),
        "axis.text": text(BASE_FONT_FAMILY, small),
        "axis.text.x": text(BASE_FONT_FAMILY, small, v_align_offset=2.2),
        "axis.text.y": text(BASE_FONT_FAMILY, small, h_align="end"),
        "legend.background": rect("white"),
        "legend.key": rect("grey95"),
        "legend.title": text(BASE_FONT_FAMILY, BASE_FONT_SIZE, h_align="start"),
        "legend.text": text(BASE_FONT_FAMILY, small, h_align="start"),
        "strip.background": rect("grey85"),
        "strip.text": text(BASE_FONT_FAMILY, small, v_align_offset=4.4),
    }


def build_builtin_themes() -> dict[str, ThemeDefinition]:
    grey = define_theme("grey", None, _grey_elements(), registry=default_registry)
    bw = define_theme(
        "bw",
        grey,
        {
            "panel.background": rect("white"),
            "panel.border": rect("transparent", "grey20"),
            "panel.gridline.major": line(0.5, "grey92"),
            "panel.gridline.minor": line(0.25, "grey92"),
            "strip.background": rect("grey85", "grey20"),
            "legend.key": rect("white"),
        },
    )
    linedraw = define_theme(
        "linedraw",
        bw,
        {
            "axis.ticks": line(0.5, "black"),
            "panel.border": rect("transparent", "black"),
            "panel.gridline.major": line(0.1, "black"),
            "panel.gridline.minor": line(0.05, "black"),
            "strip.background": rect("black"),
        },
    )
    minimal = define_theme(
        "minimal",
        bw,
        {
            "axis.ticks": BLANK,
            "legend.background": BLANK,
            "legend.key": BLANK,
            "panel.background": BLANK,
            "panel.border": BLANK,
            "strip.background": BLANK,
            "plot.background": BLANK,
        },
    )
    classic = define_theme(
        "classic",
        bw,
        {
            "panel.border": BLANK,
            "panel.gridline.major": BLANK,
            "panel.gridline.minor": BLANK,
            "axis.line": line(0.5, "black"),
            "strip.background": rect("white", "black"),
            "legend.key": BLANK,
        },
    )
    void = define_theme(
        "void",
        minimal,
        {
            "axis.ticks": INHERIT,
            "axis.title": BLANK,
            "axis.title.x": BLANK,
            "axis.title.y": BLANK,
            "axis.text": BLANK,
            "axis.text.x": BLANK,
            "axis.text.y": BLANK,
            "panel.gridline.major": BLANK,
            "panel.gridline.minor": BLANK,
        },
    )
    return {
        theme.name: theme
        for theme in (grey, bw, linedraw, minimal, classic, void)
    }


@lru_cache(maxsize=1)
def _cached_builtin_themes() -> dict[str, ThemeDefinition]:
    return build_builtin_themes()


def builtin_themes() -> dict[str, ThemeDefinition]:
    return dict(_cached_builtin_themes())


def builtin_theme(name: str) -> ThemeDefinition:
    try:
        return _cached_builtin_themes()[name]
    except KeyError:
        raise UnknownThemeError(name) from None


__all__ = ["BASE_FONT_FAMILY", "BASE_FONT_SIZE", "build_builtin_themes", "builtin_theme", "builtin_themes"]
