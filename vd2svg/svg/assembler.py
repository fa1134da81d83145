"""Wrap converted content and gradient definitions in the ``<svg>`` root."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from vd2svg.models.drawable import Drawable

SVG_NS = "http://www.w3.org/2000/svg"


def assemble_svg(
    drawable: Drawable,
    elements: list[ET.Element],
    gradients: list[ET.Element],
) -> ET.Element:
    """Build the ``<svg>`` root sized to the drawable viewport.

    ``<defs>`` is appended after all content, and only when a gradient was used.
    """
    width = drawable.viewport_width
    height = drawable.viewport_height

    root = ET.Element(
        "svg",
        {
            "xmlns": SVG_NS,
            "width": width,
            "height": height,
            "viewBox": f"0 0 {width} {height}",
        },
    )

    if drawable.name is not None:
        root.set("id", drawable.name)

    if drawable.alpha is not None:
        root.set("opacity", drawable.alpha)

    root.extend(elements)

    if gradients:
        defs = ET.SubElement(root, "defs")
        defs.extend(gradients)

    return root
