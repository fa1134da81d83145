"""Typed VectorDrawable document model.

Numeric attributes are kept as the strings authored in the source so they can
be copied into the SVG output unchanged. Absent attributes stay ``None``.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# ── Colors ────────────────────────────────────────────────────────────────


class PlainColor(_Frozen):
    kind: Literal["color"] = "color"
    value: str


class GradientStop(_Frozen):
    offset: str | None = None
    color: str | None = None


class _GradientBase(_Frozen):
    start_color: str | None = None
    center_color: str | None = None
    end_color: str | None = None
    tile_mode: str | None = None
    items: tuple[GradientStop, ...] = ()


class LinearGradient(_GradientBase):
    kind: Literal["linear"] = "linear"
    start_x: str | None = None
    start_y: str | None = None
    end_x: str | None = None
    end_y: str | None = None


class RadialGradient(_GradientBase):
    kind: Literal["radial"] = "radial"
    center_x: str | None = None
    center_y: str | None = None
    gradient_radius: str | None = None


class SweepGradient(_GradientBase):
    kind: Literal["sweep"] = "sweep"
    center_x: str | None = None
    center_y: str | None = None


Gradient = Annotated[
    Union[LinearGradient, RadialGradient, SweepGradient],
    Field(discriminator="kind"),
]

ColorSpec = Annotated[
    Union[PlainColor, LinearGradient, RadialGradient, SweepGradient],
    Field(discriminator="kind"),
]


# ── Nodes ─────────────────────────────────────────────────────────────────


class Path(_Frozen):
    kind: Literal["path"] = "path"
    name: str | None = None
    path_data: str | None = None
    fill_color: ColorSpec | None = None
    fill_alpha: str | None = None
    stroke_color: ColorSpec | None = None
    stroke_alpha: str | None = None
    stroke_width: str | None = None
    stroke_line_cap: str | None = None  # "butt", "round", "square"
    stroke_line_join: str | None = None  # "miter", "round", "bevel"
    stroke_miter_limit: str | None = None
    trim_path_start: str | None = None
    trim_path_end: str | None = None
    trim_path_offset: str | None = None
    fill_type: str | None = None  # "nonZero", "evenOdd"


class ClipPath(_Frozen):
    kind: Literal["clip-path"] = "clip-path"
    name: str | None = None
    path_data: str | None = None


class Group(_Frozen):
    kind: Literal["group"] = "group"
    name: str | None = None
    rotation: str | None = None
    pivot_x: str | None = None
    pivot_y: str | None = None
    scale_x: str | None = None
    scale_y: str | None = None
    translate_x: str | None = None
    translate_y: str | None = None
    children: tuple[Node, ...] = ()


Node = Annotated[Union[Group, Path, ClipPath], Field(discriminator="kind")]

Group.model_rebuild()


class Drawable(_Frozen):
    """Root ``<vector>`` element."""

    name: str | None = None
    viewport_width: str
    viewport_height: str
    tint: str | None = None
    tint_mode: str | None = None
    alpha: str | None = None
    children: tuple[Node, ...] = ()
