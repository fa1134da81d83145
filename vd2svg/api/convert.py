"""POST /api/convert — VectorDrawable XML in, SVG text out."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from vd2svg.drawable.parser import parse_drawable_text
from vd2svg.errors import ConversionError
from vd2svg.models.requests import ConvertRequest
from vd2svg.models.responses import ConvertResponse
from vd2svg.pipeline import convert_drawable
from vd2svg.svg.serializer import serialize_svg

logger = logging.getLogger(__name__)

router = APIRouter()


# Plain def: FastAPI runs it in its threadpool, off the event loop
@router.post("/convert", response_model=ConvertResponse)
def convert(req: ConvertRequest) -> ConvertResponse:
    try:
        result = convert_drawable(parse_drawable_text(req.xml))
    except ConversionError as e:
        logger.warning("Conversion failed (%s): %s", e.kind.value, e)
        raise HTTPException(status_code=422, detail=e.to_dict()) from e

    return ConvertResponse(
        svg=serialize_svg(result.root, indent=req.indent),
        element_count=result.element_count,
        gradient_count=result.gradient_count,
        clip_path_count=result.clip_path_count,
    )
