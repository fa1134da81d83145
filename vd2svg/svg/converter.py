"""Tree converter — VectorDrawable nodes → SVG elements.

Two kinds of state flow through a conversion:

- ``ConversionState`` is shared by reference across the whole document: the set
  of clip and gradient ids already used, the anonymous clip counter and the gradient
  definitions destined for ``<defs>``.
- ``ClipScope`` is an immutable value threaded through one sibling sequence. A
  ``<clip-path>`` replaces it for every later sibling; a ``<group>`` starts its
  children from an empty scope.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import assert_never

from vd2svg.models.drawable import ClipPath, Group, Node, Path
from vd2svg.svg.colors import copy_present, resolve_color
from vd2svg.utils.ids import unique_id
from vd2svg.utils.numbers import clamp, format_number, to_float

logger = logging.getLogger(__name__)


@dataclass
class ConversionState:
    """Document-wide registries for one conversion."""

    # Clip and gradient ids already in the document
    used_ids: set[str] = field(default_factory=set)
    # Last auto-generated clip_<n> index
    clip_counter: int = 0
    # <linearGradient>/<radialGradient> definitions in registration order
    gradients: list[ET.Element] = field(default_factory=list)

    def allocate_clip_id(self, name: str | None) -> str:
        """Return an unused clip id based on ``name`` (or ``clip_<n>``) and register it."""
        if name is None:
            self.clip_counter += 1
            base = f"clip_{self.clip_counter}"
        else:
            base = name
        return unique_id(base, self.used_ids)


@dataclass(frozen=True)
class ClipScope:
    """Clip applied to the following siblings at one nesting level."""

    clip_id: str | None = None

    def reference(self) -> str | None:
        return None if self.clip_id is None else f"url(#{self.clip_id})"


def convert_children(nodes: Iterable[Node], state: ConversionState) -> list[ET.Element]:
    """Convert one sibling sequence, starting with no active clip."""
    scope = ClipScope()
    elements: list[ET.Element] = []
    for node in nodes:
        converted, scope = convert_node(node, scope, state)
        elements.extend(converted)
    return elements


def convert_node(
    node: Node,
    scope: ClipScope,
    state: ConversionState,
) -> tuple[list[ET.Element], ClipScope]:
    """Convert a single node.

    Returns the produced elements (possibly none) and the scope the next
    sibling should see.
    """
    if isinstance(node, Group):
        return _convert_group(node, scope, state), scope
    if isinstance(node, Path):
        return _convert_path(node, scope, state), scope
    if isinstance(node, ClipPath):
        return _convert_clip_path(node, scope, state)
    assert_never(node)


def _convert_group(group: Group, scope: ClipScope, state: ConversionState) -> list[ET.Element]:
    children = convert_children(group.children, state)
    if not children:
        # Clip ids registered by descendants stay registered.
        logger.debug("Dropping empty group %r", group.name)
        return []

    element = ET.Element("g")

    clip_ref = scope.reference()
    if clip_ref is not None:
        element.set("clip-path", clip_ref)

    transform = group_transform(group)
    if transform:
        element.set("transform", transform)

    element.extend(children)
    return [element]


def group_transform(group: Group) -> str:
    """Compose translate → rotate → scale into one SVG transform list."""
    parts: list[str] = []

    if group.translate_x is not None or group.translate_y is not None:
        tx = _or_default(group.translate_x, "0")
        ty = _or_default(group.translate_y, "0")
        parts.append(f"translate({tx}, {ty})")

    if group.rotation is not None:
        if group.pivot_x is not None or group.pivot_y is not None:
            px = _or_default(group.pivot_x, "0")
            py = _or_default(group.pivot_y, "0")
            parts.append(f"rotate({group.rotation}, {px}, {py})")
        else:
            parts.append(f"rotate({group.rotation})")

    if group.scale_x is not None or group.scale_y is not None:
        sx = _or_default(group.scale_x, "1")
        sy = _or_default(group.scale_y, "1")
        parts.append(f"scale({sx}, {sy})")

    return " ".join(parts)


def _convert_path(path: Path, scope: ClipScope, state: ConversionState) -> list[ET.Element]:
    if path.path_data is None:
        return []

    attrs: dict[str, str] = {"d": path.path_data}

    clip_ref = scope.reference()
    if clip_ref is not None:
        attrs["clip-path"] = clip_ref

    if path.fill_color is not None:
        attrs.update(
            resolve_color(
                path.fill_color, path.fill_alpha, "fill", "fill-opacity", state.gradients, state.used_ids
            )
        )

    if path.fill_type is not None:
        attrs["fill-rule"] = path.fill_type.lower()

    if path.stroke_color is not None:
        attrs.update(
            resolve_color(
                path.stroke_color, path.stroke_alpha, "stroke", "stroke-opacity", state.gradients, state.used_ids
            )
        )

    copy_present(
        attrs,
        {
            "stroke-width": path.stroke_width,
            "stroke-linecap": path.stroke_line_cap,
            "stroke-linejoin": path.stroke_line_join,
            "stroke-miterlimit": path.stroke_miter_limit,
        },
    )

    attrs.update(trim_attributes(path))

    return [ET.Element("path", attrs)]


def trim_attributes(path: Path) -> dict[str, str]:
    """Emulate trimPathStart/End/Offset with a dash pattern on a unit-length path.

    Start and end are clamped to 0..1. A wrap-around trim (start > end) cannot
    be expressed this way and is left out.
    """
    if path.trim_path_start is None and path.trim_path_end is None:
        return {}

    start = 0.0 if path.trim_path_start is None else to_float(path.trim_path_start, "trimPathStart")
    end = 1.0 if path.trim_path_end is None else to_float(path.trim_path_end, "trimPathEnd")
    start, end = clamp(start), clamp(end)

    if start > end:
        logger.debug("Ignoring wrap-around trim %s..%s on path %r", start, end, path.name)
        return {}

    dashes = ["0", format_number(start), format_number(end - start), format_number(1.0 - end)]
    attrs = {
        "pathLength": "1",
        "stroke-dasharray": " ".join(dashes),
    }
    if path.trim_path_offset is not None:
        attrs["stroke-dashoffset"] = path.trim_path_offset
    return attrs


def _convert_clip_path(
    clip_path: ClipPath,
    scope: ClipScope,
    state: ConversionState,
) -> tuple[list[ET.Element], ClipScope]:
    if clip_path.path_data is None:
        return [], scope

    clip_id = state.allocate_clip_id(clip_path.name)

    element = ET.Element("clipPath", {"id": clip_id})
    ET.SubElement(element, "path", {"d": clip_path.path_data})

    return [element], replace(scope, clip_id=clip_id)


def _or_default(value: str | None, default: str) -> str:
    return default if value is None else value
