"""Pydantic models for the style element kinds."""
from __future__ import annotations

import re
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

_HEX_COLOR_RE = re.compile(r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_NAMED_COLOR_RE = re.compile(r"^[A-Za-z][A-Za-z0-9_\-]*$")


class ElementKind(str, Enum):
    TEXT = "text"
    LINE = "line"
    RECT = "rect"
    BLANK = "blank"


def validate_color_token(value: str) -> str:
    """Check that ``value`` is a color token.

    Accepted forms:
    - #RGB, #RRGGBB, #RRGGBBAA
    - a palette name such as ``grey20`` or ``LightGrey``

    The token is kept as written; it is never converted to a color.
    """
    if not isinstance(value, str):
        raise ValueError("Color token must be a string.")
    token = value.strip()
    if not token:
        raise ValueError("Empty color token.")
    if _HEX_COLOR_RE.match(token) or _NAMED_COLOR_RE.match(token):
        return token
    raise ValueError(f"Invalid color token '{value}'. Accepted: #RGB, #RRGGBB, #RRGGBBAA or a palette name.")


class _Element(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class TextElement(_Element):
    kind: Literal["text"] = "text"
    family: str = Field(min_length=1)
    size_pt: float = Field(gt=0)
    weight_bold: bool = False
    h_align: Literal["start", "center", "end"] = "center"
    v_align_offset: float = 0.0


class LineElement(_Element):
    kind: Literal["line"] = "line"
    width_pt: float = Field(ge=0)
    color_ref: str

    @field_validator("color_ref")
    @classmethod
    def validate_color(cls, value: str) -> str:
        return validate_color_token(value)


class RectElement(_Element):
    kind: Literal["rect"] = "rect"
    fill_color_ref: str
    border_color_ref: str | None = None

    @field_validator("fill_color_ref", "border_color_ref")
    @classmethod
    def validate_colors(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return validate_color_token(value)


class BlankElement(_Element):
    kind: Literal["blank"] = "blank"


ElementSpec = Annotated[
    Union[TextElement, LineElement, RectElement, BlankElement],
    Field(discriminator="kind"),
]

ELEMENT_TYPES: tuple[type[BaseModel], ...] = (TextElement, LineElement, RectElement, BlankElement)

_ELEMENT_ADAPTER: TypeAdapter[Any] = TypeAdapter(ElementSpec)

BLANK = BlankElement()


def text(
    family: str,
    size_pt: float,
    *,
    weight_bold: bool = False,
    h_align: Literal["start", "center", "end"] = "center",
    v_align_offset: float = 0.0,
) -> TextElement:
    return TextElement(
        family=family,
        size_pt=size_pt,
        weight_bold=weight_bold,
        h_align=h_align,
        v_align_offset=v_align_offset,
    )


def line(width_pt: float, color_ref: str) -> LineElement:
    return LineElement(width_pt=width_pt, color_ref=color_ref)


def rect(fill_color_ref: str, border_color_ref: str | None = None) -> RectElement:
    return RectElement(fill_color_ref=fill_color_ref, border_color_ref=border_color_ref)


def blank() -> BlankElement:
    return BLANK


def is_element(value: object) -> bool:
    return isinstance(value, ELEMENT_TYPES)


def kind_tag(spec: TextElement | LineElement | RectElement | BlankElement) -> ElementKind:
    return ElementKind(spec.kind)


def parse_element(data: Any) -> TextElement | LineElement | RectElement | BlankElement:
    """Build an element from plain data such as ``{"kind": "line", ...}``."""

    return _ELEMENT_ADAPTER.validate_python(data)


def merge_element(base: TextElement | LineElement | RectElement | BlankElement, **changes: Any):
    """Return a copy of ``base`` with some fields replaced.

    This is the field-level merge; theme resolution itself only ever replaces
    whole elements. The result is validated again, so unknown fields or a
    change of kind fail with ``pydantic.ValidationError``.
    """

    if not changes:
        return base
    return type(base).model_validate({**base.model_dump(), **changes})


def element_to_data(spec: TextElement | LineElement | RectElement | BlankElement) -> dict[str, Any]:
    return spec.model_dump(mode="json")


__all__ = [
    "BLANK",
    "BlankElement",
    "ELEMENT_TYPES",
    "ElementKind",
    "ElementSpec",
    "LineElement",
    "RectElement",
    "TextElement",
    "blank",
    "element_to_data",
    "is_element",
    "kind_tag",
    "line",
    "merge_element",
    "parse_element",
    "rect",
    "text",
    "validate_color_token",
]
