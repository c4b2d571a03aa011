"""Alignment, canvas alignment and distribution routes."""

import logging
from typing import Callable

from fastapi import APIRouter, HTTPException, status

from alignkit.api.config import get_settings
from alignkit.api.schemas import (
    AlignRequest,
    AlignResponse,
    CanvasAlignRequest,
    ChangeSchema,
    DistributeRequest,
)
from alignkit.constraints.alignment import AlignType
from alignkit.constraints.errors import AlignmentError, ResolutionError
from alignkit.dsl.schema import Axis, PositionChange
from alignkit.engine import Aligner, SceneAccessor

logger = logging.getLogger(__name__)

router = APIRouter()


def _respond(request: AlignRequest, operation: Callable[[Aligner], list[PositionChange]]) -> AlignResponse:
    """Run an operation against the request scene and map failures to HTTP errors."""
    settings = get_settings()
    aligner = Aligner(SceneAccessor(request.scene), include_node=settings.include_node_reference)

    try:
        records = operation(aligner)
    except ResolutionError as e:
        logger.warning(f"Selector did not resolve: {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except AlignmentError as e:
        logger.warning(f"Rejected alignment request: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    return AlignResponse(
        changes=[ChangeSchema.from_record(record) for record in records],
        scene=request.scene,
    )


@router.post("/align/{align_type}", response_model=AlignResponse)
async def align(align_type: AlignType, request: AlignRequest):
    """Align elements to the group's own edge, center or middle."""
    return _respond(request, lambda aligner: aligner.align(request.selectors, align_type))


@router.post("/canvas/{align_type}", response_model=AlignResponse)
async def align_to_canvas(align_type: AlignType, request: CanvasAlignRequest):
    """Translate elements so the group meets the canvas edge, center or middle."""
    include_border = request.include_border
    if include_border is None:
        include_border = get_settings().include_border

    return _respond(
        request,
        lambda aligner: aligner.align_to_canvas(
            request.selectors,
            request.canvas,
            align_type,
            include_border=include_border,
        ),
    )


@router.post("/distribute/{axis}", response_model=AlignResponse)
async def distribute(axis: Axis, request: DistributeRequest):
    """Lay elements out in a row (horizontal) or column (vertical)."""
    if axis == Axis.HORIZONTAL:
        return _respond(request, lambda aligner: aligner.sort_center(request.selectors, request.spacing))
    return _respond(request, lambda aligner: aligner.sort_vertical(request.selectors, request.spacing))
