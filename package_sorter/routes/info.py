"""
Package Sorter — API Info Route
=================================

What:  GET /api/v1/packages/info, a self-description with endpoint
       templates, ready-made example URLs and the rules in plain words.
Who:   Humans exploring the API without opening /docs.
"""

from fastapi import APIRouter

from package_sorter import __version__
from package_sorter.config import settings
from package_sorter.schemas.package import ApiInfoResponse
from package_sorter.services.classifier import (
    BULKY_VOLUME_LIMIT_CM3,
    DIMENSION_LIMIT_CM,
    HEAVY_MASS_LIMIT_G,
)

router = APIRouter(prefix="/api/v1/packages", tags=["Info"])

_BASE = "/api/v1/packages"


@router.get("/info", response_model=ApiInfoResponse, summary="API information and usage examples")
async def api_info() -> ApiInfoResponse:
    return ApiInfoResponse(
        name=settings.app_name,
        version=__version__,
        description="Classifies packages and assigns stack types based on dimensions and mass",
        endpoints={
            "classify": f"{_BASE}/classify?width={{width}}&height={{height}}&length={{length}}&mass={{mass}}",
            "classify_path": f"{_BASE}/classify/{{width}}/{{height}}/{{length}}/{{mass}}",
            "classify_body": f"POST {_BASE}/classify",
            "info": f"{_BASE}/info",
            "health": "/health",
        },
        examples={
            "standard": f"{_BASE}/classify?width=50&height=30&length=20&mass=5000",
            "bulky": f"{_BASE}/classify?width=150&height=30&length=20&mass=5000",
            "heavy": f"{_BASE}/classify?width=50&height=30&length=20&mass=25000",
            "rejected": f"{_BASE}/classify?width=150&height=30&length=20&mass=25000",
        },
        rules={
            "bulky": (
                f"Any dimension >= {DIMENSION_LIMIT_CM}cm "
                f"OR volume >= {BULKY_VOLUME_LIMIT_CM3:,} cm³"
            ),
            "heavy": f"Mass >= {HEAVY_MASS_LIMIT_G:,} grams ({HEAVY_MASS_LIMIT_G // 1000} kg)",
            "standard": "Neither bulky nor heavy",
            "special": "Bulky OR heavy (not both)",
            "rejected": "Both bulky AND heavy",
        },
    )
