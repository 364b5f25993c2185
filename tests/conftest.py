from __future__ import annotations

import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from stylecomposer.core.elements import BLANK, line, text  # noqa: E402
from stylecomposer.services import builtin_themes, compositor  # noqa: E402
from stylecomposer.services.themes import define_theme  # noqa: E402


@pytest.fixture(autouse=True)
def _clear_resolution_cache():
    compositor.default_cache.clear()
    yield
    compositor.default_cache.clear()


@pytest.fixture
def base_theme():
    elements = builtin_themes._grey_elements()
    elements["axis.line"] = line(1, "Grey")
    elements["panel.gridline.major"] = line(0.5, "LightGrey")
    return define_theme("Base", None, elements)


@pytest.fixture
def minimal_theme(base_theme):
    return define_theme("Minimal", base_theme, {"panel.gridline.major": BLANK})


@pytest.fixture
def branded_title():
    return text("Georgia", 20, weight_bold=True, h_align="start", v_align_offset=2)


@pytest.fixture
def branded_theme(minimal_theme, branded_title):
    return define_theme(
        "Branded",
        minimal_theme,
        {"axis.line": BLANK, "plot.title": branded_title},
    )
