from __future__ import annotations

import pytest

from stylecomposer.core.elements import BLANK, text
from stylecomposer.core.errors import (
    CyclicThemeError,
    IncompleteRootThemeError,
    ThemeError,
    UnknownParentThemeError,
)
from stylecomposer.core.theme_models import INHERIT
from stylecomposer.services import theme_data
from stylecomposer.services.builtin_themes import builtin_themes
from stylecomposer.services.compositor import resolve
from stylecomposer.services.query import get
from stylecomposer.services.theme_data import definition_to_data, load_themes, themes_to_data


def test_definition_to_data(branded_theme) -> None:
    data = definition_to_data(branded_theme)
    assert data["parent"] == "Minimal"
    assert data["overrides"]["axis.line"] == {"kind": "blank"}
    assert data["overrides"]["plot.title"]["family"] == "Georgia"


def test_load_themes_on_top_of_known_themes() -> None:
    loaded = load_themes(
        {
            "brand": {
                "parent": "minimal",
                "overrides": {
                    "plot.title": {"kind": "text", "family": "Georgia", "size_pt": 20, "h_align": "start"},
                    "axis.ticks": "inherit",
                },
            },
        },
        known=builtin_themes(),
    )
    brand = loaded["brand"]
    assert brand.parent is builtin_themes()["minimal"]
    assert brand.overrides["axis.ticks"] is INHERIT
    assert get(resolve(brand), "plot.title") == text("Georgia", 20, h_align="start")


def test_children_may_be_listed_before_parents() -> None:
    loaded = load_themes(
        {
            "child": {"parent": "middle", "overrides": {"axis.line": {"kind": "blank"}}},
            "middle": {"parent": "bw"},
        },
        known=builtin_themes(),
    )
    assert list(loaded) == ["child", "middle"]
    assert loaded["child"].parent is loaded["middle"]
    assert get(resolve(loaded["child"]), "axis.line") == BLANK


def test_parent_cycle_is_rejected_before_building(monkeypatch) -> None:
    def _fail(*args, **kwargs):
        raise AssertionError("no definition should be built")

    monkeypatch.setattr(theme_data, "define_theme", _fail)
    with pytest.raises(CyclicThemeError) as excinfo:
        load_themes(
            {
                "A": {"parent": "B", "overrides": {}},
                "B": {"parent": "A", "overrides": {}},
            },
            known=builtin_themes(),
        )
    assert excinfo.value.repeated == "A"
    assert excinfo.value.chain == ("A", "B")


def test_self_parent_is_a_cycle() -> None:
    with pytest.raises(CyclicThemeError):
        load_themes({"loop": {"parent": "loop"}}, known=builtin_themes())


def test_unknown_parent_is_reported() -> None:
    with pytest.raises(UnknownParentThemeError) as excinfo:
        load_themes({"orphan": {"parent": "missing"}}, known=builtin_themes())
    assert excinfo.value.theme_name == "orphan"
    assert excinfo.value.parent_name == "missing"


def test_roots_in_data_must_be_complete() -> None:
    with pytest.raises(IncompleteRootThemeError):
        load_themes({"root": {"parent": None, "overrides": {"plot.title": {"kind": "blank"}}}})


@pytest.mark.parametrize(
    "payload",
    [
        {"bad": ["not", "a", "mapping"]},
        {"bad": {"parent": 3}},
        {"bad": {"parent": "bw", "overrides": ["axis.line"]}},
        {"": {"parent": "bw"}},
    ],
)
def test_malformed_entries(payload) -> None:
    with pytest.raises(ThemeError):
        load_themes(payload, known=builtin_themes())


def test_builtin_themes_survive_plain_data() -> None:
    originals = builtin_themes()
    data = themes_to_data(originals.values())
    reloaded = load_themes(data)
    assert set(reloaded) == set(originals)
    for name, definition in originals.items():
        assert dict(resolve(reloaded[name])) == dict(resolve(definition))
        assert reloaded[name].fingerprint == definition.fingerprint


def test_duplicate_names_cannot_be_exported(base_theme) -> None:
    with pytest.raises(ThemeError):
        themes_to_data([base_theme, base_theme])
