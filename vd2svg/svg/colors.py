"""Color and gradient resolution — VectorDrawable color specs → SVG paint attributes.

Plain colors map straight onto a paint attribute, splitting an ``#AARRGGBB``
alpha byte into the matching opacity attribute. Gradients become
``<linearGradient>``/``<radialGradient>`` definitions appended to the
document-wide list and referenced by ``url(#id)``.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from typing import assert_never

from vd2svg.errors import UnsupportedFeatureError
from vd2svg.models.drawable import (
    ColorSpec,
    Gradient,
    LinearGradient,
    PlainColor,
    RadialGradient,
    SweepGradient,
)
from vd2svg.utils.ids import unique_id
from vd2svg.utils.numbers import format_number, to_float

logger = logging.getLogger(__name__)

_ARGB_RE = re.compile(r"#[0-9a-fA-F]{8}")

# Resource (@color/…) and theme attribute (?attr/…) references
_REFERENCE_PREFIXES = ("@", "?")

# (offset, GradientBase field) for gradients without explicit <item> stops
_CONVENIENCE_STOPS = (
    ("0%", "start_color"),
    ("50%", "center_color"),
    ("100%", "end_color"),
)


def resolve_color(
    spec: ColorSpec,
    opacity: str | None,
    color_attr: str,
    opacity_attr: str,
    gradients: list[ET.Element],
    used_ids: set[str] | None = None,
) -> dict[str, str]:
    """Resolve a color spec into paint attributes.

    ``opacity`` is the path's fillAlpha/strokeAlpha, if authored. Gradient
    definitions are appended to ``gradients``; their ids are registered in
    ``used_ids`` when given.
    """
    if isinstance(spec, PlainColor):
        return resolve_plain_color(spec.value, opacity, color_attr, opacity_attr)
    return resolve_gradient(spec, opacity, color_attr, opacity_attr, gradients, used_ids)


def resolve_plain_color(
    value: str,
    opacity: str | None,
    color_attr: str,
    opacity_attr: str,
) -> dict[str, str]:
    if value.startswith(_REFERENCE_PREFIXES):
        raise UnsupportedFeatureError(f"Colors from resources are not supported: {value!r}")

    if not _ARGB_RE.fullmatch(value):
        attributes = {color_attr: value}
        if opacity is not None:
            attributes[opacity_attr] = opacity
        return attributes

    # VectorDrawable puts alpha first (#AARRGGBB); SVG wants it separate.
    attributes = {color_attr: "#" + value[3:]}
    alpha = int(value[1:3], 16) / 255.0
    if opacity is not None:
        alpha *= to_float(opacity, opacity_attr)
    if alpha != 1.0:
        attributes[opacity_attr] = format_number(alpha)
    return attributes


def resolve_gradient(
    gradient: Gradient,
    opacity: str | None,
    color_attr: str,
    opacity_attr: str,
    gradients: list[ET.Element],
    used_ids: set[str] | None = None,
) -> dict[str, str]:
    gradient_id = f"gradient_{len(gradients) + 1}"
    if used_ids is not None:
        # A clip path may already be named gradient_<n>.
        gradient_id = unique_id(gradient_id, used_ids)
    attrs = {"id": gradient_id, "gradientUnits": "userSpaceOnUse"}

    if isinstance(gradient, LinearGradient):
        tag = "linearGradient"
        copy_present(attrs, {"x1": gradient.start_x, "y1": gradient.start_y,
                             "x2": gradient.end_x, "y2": gradient.end_y})
    elif isinstance(gradient, RadialGradient):
        tag = "radialGradient"
        copy_present(attrs, {"cx": gradient.center_x, "cy": gradient.center_y,
                             "r": gradient.gradient_radius})
    elif isinstance(gradient, SweepGradient):
        raise UnsupportedFeatureError("Sweep gradients have no SVG equivalent")
    else:
        assert_never(gradient)

    element = ET.Element(tag, attrs)
    for stop_attrs in _gradient_stops(gradient):
        ET.SubElement(element, "stop", stop_attrs)

    gradients.append(element)
    logger.debug("Registered %s #%s (%d stops)", tag, gradient_id, len(element))

    attributes = {color_attr: f"url(#{gradient_id})"}
    if opacity is not None:
        # Stops carry their own opacity; the path alpha applies on top.
        attributes[opacity_attr] = opacity
    return attributes


def _gradient_stops(gradient: LinearGradient | RadialGradient) -> list[dict[str, str]]:
    if gradient.items:
        stops = []
        for item in gradient.items:
            stop: dict[str, str] = {}
            if item.offset is not None:
                stop["offset"] = item.offset
            if item.color is not None:
                stop.update(resolve_plain_color(item.color, None, "stop-color", "stop-opacity"))
            stops.append(stop)
        return stops

    stops = []
    for offset, field_name in _CONVENIENCE_STOPS:
        color = getattr(gradient, field_name)
        if color is not None:
            stops.append({
                "offset": offset,
                **resolve_plain_color(color, None, "stop-color", "stop-opacity"),
            })
    return stops


def copy_present(attrs: dict[str, str], values: dict[str, str | None]) -> None:
    """Copy only the values that were authored."""
    for name, value in values.items():
        if value is not None:
            attrs[name] = value
