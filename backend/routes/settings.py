"""Health check, settings and generator connection check endpoints."""

import httpx
from fastapi import APIRouter, HTTPException

from backend import config

from .models import CheckConnectionBody

router = APIRouter()


@router.get("/health")
async def health():
    """Health check."""
    return {"status": "ok"}


@router.post("/check-connection")
async def check_connection(body: CheckConnectionBody):
    """Quick reachability probe of the hosted generator URL."""
    settings = config.get_config()
    url = body.generator_url or settings["generator_url"]
    api_key = body.generator_api_key or settings["generator_api_key"]
    if not url:
        return {"ok": False}
    headers: dict[str, str] = {}
    if api_key:
        headers["Authorization"] = f"Bearer {api_key}"
    try:
        async with httpx.AsyncClient(timeout=5) as client:
            resp = await client.options(url, headers=headers)
            resp.raise_for_status()
        return {"ok": True}
    except httpx.HTTPError:
        return {"ok": False}


@router.get("/settings")
async def get_settings():
    """Current settings (API key masked)."""
    return config.public_config()


@router.patch("/settings")
async def update_settings(body: dict):
    """Update settings for this process (partial merge)."""
    try:
        config.update_config(body)
    except (TypeError, ValueError) as e:
        raise HTTPException(400, f"Invalid setting: {e}")
    return config.public_config()
