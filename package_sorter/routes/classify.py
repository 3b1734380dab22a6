"""
Package Sorter — Classification Route Handlers
================================================

What:  GET  /api/v1/packages/classify?width=&height=&length=&mass=
       GET  /api/v1/packages/classify/{width}/{height}/{length}/{mass}
       POST /api/v1/packages/classify   (JSON body)
Why:   Three spellings of the same call, for browsers, curl one-liners and
       programmatic clients respectively.
How:   FastAPI parses the numbers; ClassifierService validates and
       classifies; invalid packages raise ValidationError, which the global
       handler in main.py turns into a 400 response.
"""

import logging

from fastapi import APIRouter, Path, Query

from package_sorter.schemas.package import (
    ClassificationRequest,
    ClassificationResponse,
    ErrorResponse,
)
from package_sorter.services.classifier import classifier_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/packages", tags=["Classification"])

_RESPONSES = {
    200: {"description": "Package classified", "model": ClassificationResponse},
    400: {"description": "Invalid dimensions or mass", "model": ErrorResponse},
}


def _classify(width: int, height: int, length: int, mass: float) -> ClassificationResponse:
    result = classifier_service.evaluate(width, height, length, mass)
    return ClassificationResponse.from_result(result)


@router.get(
    "/classify",
    response_model=ClassificationResponse,
    responses=_RESPONSES,
    summary="Classify a package (query parameters)",
    description=(
        "Classifies a package as STANDARD, SPECIAL or REJECTED. "
        "BULKY: any side >= 150 cm or volume >= 1,000,000 cm³. HEAVY: mass >= 20,000 g."
    ),
)
async def classify_by_query(
    width: int = Query(..., description="Package width in centimetres"),
    height: int = Query(..., description="Package height in centimetres"),
    length: int = Query(..., description="Package length in centimetres"),
    mass: float = Query(..., description="Package mass in grams"),
) -> ClassificationResponse:
    return _classify(width, height, length, mass)


@router.get(
    "/classify/{width}/{height}/{length}/{mass}",
    response_model=ClassificationResponse,
    responses=_RESPONSES,
    summary="Classify a package (path segments)",
)
async def classify_by_path(
    width: int = Path(..., description="Package width in centimetres"),
    height: int = Path(..., description="Package height in centimetres"),
    length: int = Path(..., description="Package length in centimetres"),
    mass: float = Path(..., description="Package mass in grams"),
) -> ClassificationResponse:
    return _classify(width, height, length, mass)


@router.post(
    "/classify",
    response_model=ClassificationResponse,
    responses=_RESPONSES,
    summary="Classify a package (JSON body)",
)
async def classify_by_body(request: ClassificationRequest) -> ClassificationResponse:
    return _classify(request.width, request.height, request.length, request.mass)
