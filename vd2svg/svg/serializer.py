"""Write indented SVG text from an element tree."""

from __future__ import annotations

import copy
import xml.etree.ElementTree as ET

from vd2svg.config import settings

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


def serialize_svg(
    root: ET.Element,
    indent: int | None = None,
    xml_declaration: bool | None = None,
) -> str:
    """Render ``root`` as text, ``indent`` spaces per nesting level."""
    if indent is None:
        indent = settings.vd2svg_indent
    if xml_declaration is None:
        xml_declaration = settings.vd2svg_xml_declaration

    # ET.indent rewrites text/tail in place; keep the caller's tree untouched.
    tree = copy.deepcopy(root)
    ET.indent(tree, space=" " * indent)
    body = ET.tostring(tree, encoding="unicode")

    lines = [XML_DECLARATION, body] if xml_declaration else [body]
    return "\n".join(lines) + "\n"
