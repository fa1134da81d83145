"""Conversion orchestrator — parse → convert → assemble → serialize."""

from __future__ import annotations

import logging
import time
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path

from vd2svg.drawable.parser import parse_drawable_text
from vd2svg.models.drawable import Drawable
from vd2svg.svg.assembler import assemble_svg
from vd2svg.svg.converter import ConversionState, convert_children
from vd2svg.svg.serializer import serialize_svg

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    root: ET.Element
    # Top-level content elements (excluding <defs>)
    element_count: int = 0
    gradient_count: int = 0
    clip_path_count: int = 0


def convert_drawable(drawable: Drawable) -> ConversionResult:
    """Convert a parsed drawable into an ``<svg>`` element tree."""
    start = time.perf_counter()

    state = ConversionState()
    elements = convert_children(drawable.children, state)
    root = assemble_svg(drawable, elements, state.gradients)

    result = ConversionResult(
        root=root,
        element_count=len(elements),
        gradient_count=len(state.gradients),
        clip_path_count=sum(1 for _ in root.iter("clipPath")),
    )

    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "Converted drawable: %d elements, %d gradients, %d clip paths in %.1fms",
        result.element_count,
        result.gradient_count,
        result.clip_path_count,
        elapsed,
    )
    return result


def convert_text(
    xml_text: str | bytes,
    indent: int | None = None,
    xml_declaration: bool | None = None,
) -> str:
    """Convert VectorDrawable XML text into SVG text."""
    result = convert_drawable(parse_drawable_text(xml_text))
    return serialize_svg(result.root, indent=indent, xml_declaration=xml_declaration)


def convert_file(input_path: str | Path, output_path: str | Path) -> ConversionResult:
    """Read a VectorDrawable file and write the converted SVG.

    The output file is only written once conversion has fully succeeded.
    """
    xml_bytes = Path(input_path).read_bytes()
    result = convert_drawable(parse_drawable_text(xml_bytes))
    Path(output_path).write_text(serialize_svg(result.root), encoding="utf-8")
    logger.info("Wrote %s", output_path)
    return result
