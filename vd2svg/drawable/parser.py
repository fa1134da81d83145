"""VectorDrawable parser — facade over xml.etree.

Converts raw VectorDrawable XML → typed ``Drawable`` model. Attribute values are
carried through as authored; nothing is defaulted here.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from vd2svg.errors import StructuralError, UnknownVariantError
from vd2svg.models.drawable import (
    ClipPath,
    ColorSpec,
    Drawable,
    Gradient,
    GradientStop,
    Group,
    LinearGradient,
    Node,
    Path,
    PlainColor,
    RadialGradient,
    SweepGradient,
)

logger = logging.getLogger(__name__)

ANDROID_NS = "http://schemas.android.com/apk/res/android"
AAPT_NS = "http://schemas.android.com/aapt"

_AAPT_ATTR_TAG = f"{{{AAPT_NS}}}attr"

# aapt:attr name → Path field it overrides
_AAPT_COLOR_FIELDS = {
    "android:fillColor": "fill_color",
    "android:strokeColor": "stroke_color",
}


def parse_drawable_text(xml_text: str | bytes) -> Drawable:
    """Parse raw VectorDrawable XML text into a ``Drawable``."""
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as e:
        raise StructuralError(f"Malformed XML: {e}") from e
    return parse_drawable(root)


def parse_drawable(root: ET.Element) -> Drawable:
    """Build a ``Drawable`` from the ``<vector>`` root element."""
    _require_tag(root, "vector")

    tint = _opt(root, "tint")
    tint_mode = _opt(root, "tintMode")
    if tint is not None or tint_mode is not None:
        logger.debug("Ignoring tint=%r tintMode=%r", tint, tint_mode)

    drawable = Drawable(
        name=_opt(root, "name"),
        viewport_width=_require(root, "viewportWidth"),
        viewport_height=_require(root, "viewportHeight"),
        tint=tint,
        tint_mode=tint_mode,
        alpha=_opt(root, "alpha"),
        children=tuple(parse_node(child) for child in root),
    )
    logger.debug("Parsed drawable: %d top-level nodes", len(drawable.children))
    return drawable


def parse_node(element: ET.Element) -> Node:
    """Dispatch a ``<vector>``/``<group>`` child to its node type."""
    tag = element.tag

    if tag == "group":
        return Group(
            name=_opt(element, "name"),
            rotation=_opt(element, "rotation"),
            pivot_x=_opt(element, "pivotX"),
            pivot_y=_opt(element, "pivotY"),
            scale_x=_opt(element, "scaleX"),
            scale_y=_opt(element, "scaleY"),
            translate_x=_opt(element, "translateX"),
            translate_y=_opt(element, "translateY"),
            children=tuple(parse_node(child) for child in element),
        )

    if tag == "path":
        return _parse_path(element)

    if tag == "clip-path":
        return ClipPath(
            name=_opt(element, "name"),
            path_data=_opt(element, "pathData"),
        )

    raise UnknownVariantError(
        f'"group", "path" or "clip-path" element expected: {_describe(element)}'
    )


def _parse_path(element: ET.Element) -> Path:
    fields: dict[str, object] = {
        "name": _opt(element, "name"),
        "path_data": _opt(element, "pathData"),
        "fill_color": _plain(_opt(element, "fillColor")),
        "fill_alpha": _opt(element, "fillAlpha"),
        "stroke_color": _plain(_opt(element, "strokeColor")),
        "stroke_alpha": _opt(element, "strokeAlpha"),
        "stroke_width": _opt(element, "strokeWidth"),
        "stroke_line_cap": _opt(element, "strokeLineCap"),
        "stroke_line_join": _opt(element, "strokeLineJoin"),
        "stroke_miter_limit": _opt(element, "strokeMiterLimit"),
        "trim_path_start": _opt(element, "trimPathStart"),
        "trim_path_end": _opt(element, "trimPathEnd"),
        "trim_path_offset": _opt(element, "trimPathOffset"),
        "fill_type": _opt(element, "fillType"),
    }

    # Inline gradients: <aapt:attr name="android:fillColor"><gradient .../></aapt:attr>
    overridden: set[str] = set()
    for child in element:
        _require_tag(child, _AAPT_ATTR_TAG)
        attr_name = child.get("name")
        if attr_name is None:
            raise StructuralError(f'Failed to get "name" attribute: {_describe(child)}')

        field_name = _AAPT_COLOR_FIELDS.get(attr_name)
        if field_name is None:
            raise UnknownVariantError(f"Unsupported aapt attribute: {_describe(child)}")
        if field_name in overridden:
            raise StructuralError(f"Duplicate aapt attribute {attr_name!r} on path")

        overridden.add(field_name)
        fields[field_name] = parse_gradient(_require_single_child(child, "gradient"))

    return Path(**fields)


def parse_gradient(element: ET.Element) -> Gradient:
    """Parse a ``<gradient>`` element into the variant named by its type."""
    gradient_type = _require(element, "type")

    common = {
        "start_color": _opt(element, "startColor"),
        "center_color": _opt(element, "centerColor"),
        "end_color": _opt(element, "endColor"),
        "tile_mode": _opt(element, "tileMode"),
        "items": tuple(_parse_stop(child) for child in element),
    }
    if common["tile_mode"] is not None:
        logger.debug("Ignoring gradient tileMode=%r", common["tile_mode"])

    if gradient_type == "linear":
        return LinearGradient(
            start_x=_opt(element, "startX"),
            start_y=_opt(element, "startY"),
            end_x=_opt(element, "endX"),
            end_y=_opt(element, "endY"),
            **common,
        )
    if gradient_type == "radial":
        return RadialGradient(
            center_x=_opt(element, "centerX"),
            center_y=_opt(element, "centerY"),
            gradient_radius=_opt(element, "gradientRadius"),
            **common,
        )
    if gradient_type == "sweep":
        return SweepGradient(
            center_x=_opt(element, "centerX"),
            center_y=_opt(element, "centerY"),
            **common,
        )

    raise UnknownVariantError(f"Unknown gradient type {gradient_type!r}: {_describe(element)}")


def _parse_stop(element: ET.Element) -> GradientStop:
    _require_tag(element, "item")
    return GradientStop(offset=_opt(element, "offset"), color=_opt(element, "color"))


# ── Element helpers ───────────────────────────────────────────────────────


def _plain(value: str | None) -> ColorSpec | None:
    return None if value is None else PlainColor(value=value)


def _opt(element: ET.Element, name: str) -> str | None:
    return element.get(f"{{{ANDROID_NS}}}{name}")


def _require(element: ET.Element, name: str) -> str:
    value = _opt(element, name)
    if value is None:
        raise StructuralError(f'Failed to get "android:{name}" attribute: {_describe(element)}')
    return value


def _require_tag(element: ET.Element, tag: str) -> None:
    if element.tag != tag:
        raise StructuralError(f'"{_qualified(tag)}" element expected: {_describe(element)}')


def _require_single_child(element: ET.Element, tag: str) -> ET.Element:
    children = list(element)
    if len(children) != 1:
        raise StructuralError(f"Single element expected, got {len(children)}: {_describe(element)}")
    _require_tag(children[0], tag)
    return children[0]


def _qualified(name: str) -> str:
    """Render a Clark-notation name with its conventional prefix."""
    return (
        name.replace(f"{{{ANDROID_NS}}}", "android:")
        .replace(f"{{{AAPT_NS}}}", "aapt:")
    )


def _describe(element: ET.Element) -> str:
    attrs = " ".join(f'{_qualified(k)}="{v}"' for k, v in element.attrib.items())
    tag = _qualified(element.tag)
    return f"<{tag} {attrs}>" if attrs else f"<{tag}>"
