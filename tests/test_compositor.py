from __future__ import annotations

import pytest

from stylecomposer.core import config
from stylecomposer.core.elements import BLANK, line, text
from stylecomposer.core.errors import CyclicThemeError, ThemeChainTooDeepError, UnknownAttributeKeyError
from stylecomposer.core.theme_models import INHERIT, ResolvedStyle, ThemeDefinition
from stylecomposer.services.compositor import ancestor_chain, compose, resolve
from stylecomposer.services.query import get
from stylecomposer.services.themes import define_theme


def test_branded_example(base_theme, branded_theme, branded_title) -> None:
    style = resolve(branded_theme)

    assert get(style, "panel.gridline.major") == BLANK
    assert get(style, "axis.line") == BLANK
    assert get(style, "plot.title") == branded_title
    assert get(style, "axis.title") == base_theme.overrides["axis.title"]
    assert style.chain == ("Base", "Minimal", "Branded")
    assert style.name == "Branded"


def test_resolution_is_complete(base_theme, branded_theme) -> None:
    style = resolve(branded_theme)
    assert set(style) == set(base_theme.registry)
    assert len(style) == len(base_theme.registry)
    assert INHERIT not in style.values()
    assert list(style) == list(base_theme.registry)


def test_root_resolves_to_its_own_overrides(base_theme) -> None:
    assert dict(resolve(base_theme)) == dict(base_theme.overrides)


def test_latest_override_wins(base_theme) -> None:
    first = define_theme("A", base_theme, {"axis.line": line(2, "red")})
    second = define_theme("B", first, {"axis.line": line(3, "blue")})
    assert get(resolve(second), "axis.line") == line(3, "blue")
    assert get(resolve(first), "axis.line") == line(2, "red")


def test_unmentioned_keys_pass_through(base_theme) -> None:
    first = define_theme("A", base_theme, {"axis.line": line(2, "red")})
    second = define_theme("B", first, {"plot.title": text("serif", 16)})
    first_style = resolve(first)
    second_style = resolve(second)
    for key in first_style:
        if key != "plot.title":
            assert get(second_style, key) == get(first_style, key)


def test_inherit_marker_behaves_like_absence(base_theme) -> None:
    first = define_theme("A", base_theme, {"axis.line": line(2, "red")})
    explicit = define_theme("Explicit", first, {"axis.line": INHERIT})
    silent = define_theme("Silent", first, {})
    assert dict(resolve(explicit)) == dict(resolve(silent))
    assert get(resolve(explicit), "axis.line") == line(2, "red")


def test_replacement_is_whole_element(base_theme) -> None:
    bold = define_theme("Bold", base_theme, {"plot.title": text("serif", 20, weight_bold=True, h_align="end")})
    plain = define_theme("Plain", bold, {"plot.title": text("mono", 9)})
    title = get(resolve(plain), "plot.title")
    assert title == text("mono", 9)
    assert title.weight_bold is False
    assert title.h_align == "center"


def test_blank_can_be_replaced_again(base_theme) -> None:
    hidden = define_theme("Hidden", base_theme, {"axis.line": BLANK})
    shown = define_theme("Shown", hidden, {"axis.line": line(0.75, "black")})
    assert get(resolve(hidden), "axis.line") == BLANK
    assert get(resolve(shown), "axis.line") == line(0.75, "black")


def test_resolution_is_deterministic(branded_theme) -> None:
    first = resolve(branded_theme, cache=None)
    second = resolve(branded_theme, cache=None)
    assert first is not second
    assert first == second
    assert first.fingerprint == second.fingerprint == branded_theme.fingerprint
    assert first.to_data() == second.to_data()


def test_parent_style_is_never_mutated(base_theme) -> None:
    before = dict(resolve(base_theme, cache=None))
    resolve(define_theme("Child", base_theme, {"axis.line": BLANK}), cache=None)
    assert dict(resolve(base_theme, cache=None)) == before
    assert dict(base_theme.overrides)["axis.line"] == line(1, "Grey")


def test_resolved_style_is_sealed(branded_theme) -> None:
    style = resolve(branded_theme)
    assert isinstance(style, ResolvedStyle)
    with pytest.raises(TypeError):
        style.entries["axis.line"] = line(1, "grey")  # type: ignore[index]
    with pytest.raises(AttributeError):
        style.name = "Other"  # type: ignore[misc]


def test_ancestor_chain_is_root_first(base_theme, minimal_theme, branded_theme) -> None:
    assert ancestor_chain(branded_theme) == [base_theme, minimal_theme, branded_theme]
    assert ancestor_chain(base_theme) == [base_theme]


def test_cycle_is_detected_during_walk(base_theme) -> None:
    first = define_theme("A", base_theme, {})
    second = define_theme("B", first, {})
    object.__setattr__(first, "parent", second)

    with pytest.raises(CyclicThemeError) as excinfo:
        compose(second)
    assert excinfo.value.repeated == "B"
    assert excinfo.value.theme_name == "B"
    assert excinfo.value.chain == ("B", "A")


def test_chain_depth_is_limited(monkeypatch, base_theme) -> None:
    monkeypatch.setattr(config, "settings", config.Settings(MAX_CHAIN_DEPTH=3))
    first = define_theme("T1", base_theme, {})
    second = define_theme("T2", first, {})
    assert resolve(second, cache=None).chain == ("Base", "T1", "T2")

    third = define_theme("T3", second, {})
    with pytest.raises(ThemeChainTooDeepError) as excinfo:
        resolve(third, cache=None)
    assert excinfo.value.limit == 3
    assert "longer than 3 themes" in str(excinfo.value)


def test_resolution_revalidates_hand_built_definitions(base_theme) -> None:
    rogue = ThemeDefinition(
        name="Rogue",
        parent=base_theme,
        overrides={"no.such.key": BLANK},
        registry=base_theme.registry,
    )
    with pytest.raises(UnknownAttributeKeyError):
        resolve(rogue)
