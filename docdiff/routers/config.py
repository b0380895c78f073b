"""Configuration API endpoints"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from docdiff.models.diff import DiffMode, TieBreak
from docdiff.routers import diff
from docdiff.services.config_manager import ConfigManager

router = APIRouter()


class DiffSettingsUpdate(BaseModel):
    """Partial update of the diff settings"""

    mode: str | None = None
    tieBreak: str | None = None
    maxLines: int | None = None
    cacheSize: int | None = None


class ConfigUpdateRequest(BaseModel):
    """Request to update configuration"""

    diff: DiffSettingsUpdate | None = None


class ConfigResponse(BaseModel):
    """Configuration response"""

    diff: dict
    server: dict
    cache: dict


def validate_diff_settings(update: DiffSettingsUpdate) -> dict[str, Any]:
    """Check a settings update and return only the provided fields"""
    values = update.model_dump(exclude_none=True)

    if "mode" in values:
        try:
            DiffMode(values["mode"])
        except ValueError:
            allowed = ", ".join(m.value for m in DiffMode)
            raise HTTPException(status_code=400, detail=f"Unknown diff mode (expected one of: {allowed})")

    if "tieBreak" in values:
        try:
            TieBreak(values["tieBreak"])
        except ValueError:
            allowed = ", ".join(t.value for t in TieBreak)
            raise HTTPException(status_code=400, detail=f"Unknown tie-break (expected one of: {allowed})")

    for key in ("maxLines", "cacheSize"):
        if key in values and values[key] < 0:
            raise HTTPException(status_code=400, detail=f"{key} must be >= 0")

    return values


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current configuration"""
    config = ConfigManager.get_instance().get_config()

    return ConfigResponse(
        diff=config.get("diff", {}),
        server=config.get("server", {}),
        cache={
            "entries": len(diff.diff_cache),
            "maxEntries": diff.diff_cache.max_entries,
            "hits": diff.diff_cache.hits,
            "misses": diff.diff_cache.misses,
        },
    )


@router.put("")
async def update_config(request: ConfigUpdateRequest) -> dict[str, Any]:
    """Update configuration"""
    if request.diff is None:
        return {"status": "success", "message": "Nothing to update"}

    values = validate_diff_settings(request.diff)

    config_manager = ConfigManager.get_instance()
    try:
        config_manager.save_config({"diff": values})
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))

    # Cached results depend on the settings
    diff.diff_cache.clear()
    if "cacheSize" in values:
        diff.diff_cache.resize(values["cacheSize"])

    return {"status": "success", "message": "Configuration updated"}


@router.delete("/cache")
async def clear_cache() -> dict[str, Any]:
    """Drop all cached diff results"""
    dropped = len(diff.diff_cache)
    diff.diff_cache.clear()
    return {"status": "success", "cleared": dropped}
