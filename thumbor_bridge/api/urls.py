import re
from fastapi import APIRouter, Depends, HTTPException, Query, Request

from typing import List, Optional
from thumbor_bridge.core.exceptions import InvalidSource
from thumbor_bridge.models.data_models import SizePreset, TransformMode
from thumbor_bridge.models.image_metadata import Asset, DownsizedImage
from thumbor_bridge.services.thumbor_service import ThumborService

router = APIRouter()

_PAIR = re.compile(r"^(\d+)x(\d+)$")


def get_thumbor_service(request: Request) -> ThumborService:
    return request.app.state.thumbor


@router.get(
    "/urls",
    summary="Build URL",
    description="Build a Thumbor URL for an arbitrary source image.",
    response_description="The signed (or unsafe) Thumbor URL.",
)
def build_image_url(
    src: str,
    width: int = Query(0, ge=0),
    height: int = Query(0, ge=0),
    mode: TransformMode = TransformMode.FIT,
    format: Optional[str] = None,
    smart: Optional[bool] = None,
    service: ThumborService = Depends(get_thumbor_service),
):
    extra = {}
    if format:
        extra["format"] = format
    if smart is not None:
        extra["smart_crop"] = smart
    try:
        url = service.get_image(
            src, width, height, mode == TransformMode.CROP, extra
        )
    except InvalidSource as e:
        raise HTTPException(status_code=422, detail=str(e))
    return {"url": url}


@router.get("/presets", summary="List size presets")
def list_presets(
    service: ThumborService = Depends(get_thumbor_service),
) -> List[SizePreset]:
    return list(service.registry.values())


@router.post("/assets/{asset_id}", summary="Register asset metadata")
def register_asset(
    asset_id: str,
    asset: Asset,
    service: ThumborService = Depends(get_thumbor_service),
) -> Asset:
    service.provider.register(asset_id, asset)
    return asset


@router.get(
    "/assets/{asset_id}/sizes/{size}",
    summary="Get sized image",
    description="Resolve a named size, or WIDTHxHEIGHT, for a registered asset.",
)
def get_sized_image(
    asset_id: str,
    size: str,
    format: Optional[str] = None,
    service: ThumborService = Depends(get_thumbor_service),
) -> DownsizedImage:
    if service.provider.get_asset(asset_id) is None:
        raise HTTPException(status_code=404, detail="Asset not found")

    match = _PAIR.match(size)
    if match:
        requested = (int(match.group(1)), int(match.group(2)))
    elif size in service.registry:
        requested = size
    else:
        raise HTTPException(status_code=404, detail="Size not found")

    image = service.downsize(asset_id, requested, format)
    if image is None:
        raise HTTPException(
            status_code=422, detail="Image cannot be transformed"
        )
    return image


@router.get("/assets/{asset_id}/srcset", summary="Get srcset")
def get_srcset(
    asset_id: str,
    format: Optional[str] = None,
    service: ThumborService = Depends(get_thumbor_service),
):
    if service.provider.get_asset(asset_id) is None:
        raise HTTPException(status_code=404, detail="Asset not found")

    srcset = service.srcset(asset_id, format)
    if srcset is None:
        raise HTTPException(
            status_code=422, detail="Image cannot be transformed"
        )
    return {"srcset": srcset}
