"""System-level routes for diagnostics."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from ..config import Settings, get_app_settings
from ..schemas import ApiResponse

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health", response_model=ApiResponse[None])
async def healthcheck() -> ApiResponse[None]:
    return ApiResponse[None](message="I am healthy!")


@router.get("", response_model=dict[str, str])
def api_info(settings: Settings = Depends(get_app_settings)) -> dict[str, str]:
    return {"service": settings.app_name, "version": settings.api_version}
