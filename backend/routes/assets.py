"""Asset bank lookups, Kenney pack catalog and the Kenney download proxy."""

import logging
from urllib.parse import urlparse

import httpx
from fastapi import APIRouter, HTTPException, Response

from backend.config import get_config
from blueprint_forge.banks import AssetBankCatalog
from blueprint_forge.kenney import (
    KENNEY_PACKS,
    PackCategory,
    packs_by_category,
    recommend_packs,
    search_packs,
)

logger = logging.getLogger(__name__)

router = APIRouter()

_catalog = AssetBankCatalog()


def _dump(packs) -> list[dict]:
    return [p.model_dump(mode="json", by_alias=True) for p in packs]


@router.get("/assets/sources")
async def asset_sources(label: str = "", category: str = "", keywords: str = "", limit: int = 3):
    """Bank search links for one asset label. `keywords` is comma-separated."""
    words = [k.strip() for k in keywords.split(",") if k.strip()]
    sources = _catalog.lookup(label, category, words, limit)
    return [s.model_dump(mode="json", by_alias=True) for s in sources]


@router.get("/assets/banks")
async def asset_banks():
    """The configured asset banks."""
    return [b.model_dump(mode="json") for b in _catalog.banks]


@router.get("/assets/packs")
async def kenney_packs(query: str = "", category: PackCategory | None = None):
    """Kenney catalog, optionally filtered by text query and category."""
    packs = search_packs(query) if query.strip() else list(KENNEY_PACKS)
    if category is not None:
        in_category = {p.slug for p in packs_by_category(category)}
        packs = [p for p in packs if p.slug in in_category]
    return _dump(packs)


@router.get("/assets/packs/recommended")
async def recommended_packs(description: str = ""):
    """Packs recommended for a game description."""
    return _dump(recommend_packs(description))


def is_allowed_asset_url(url: str) -> bool:
    """Only https://kenney.nl/content/... downloads may be proxied."""
    parsed = urlparse(url)
    return (
        parsed.scheme == "https"
        and parsed.hostname == "kenney.nl"
        and parsed.path.startswith("/content/")
    )


@router.get("/proxy-asset")
async def proxy_asset(url: str = ""):
    """Relay a Kenney download so the browser can fetch it without CORS issues."""
    if not url:
        raise HTTPException(400, "Missing 'url' query parameter")
    if not is_allowed_asset_url(url):
        raise HTTPException(400, "URL not allowed")

    timeout = get_config()["proxy_timeout"]
    try:
        async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
            resp = await client.get(url)
            resp.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.warning(f"Upstream fetch failed for {url}: {e.response.status_code}")
        raise HTTPException(502, f"Upstream error {e.response.status_code}")
    except httpx.HTTPError as e:
        logger.warning(f"Upstream fetch failed for {url}: {e}")
        raise HTTPException(502, "Upstream unreachable")

    media_type = resp.headers.get("content-type", "application/octet-stream")
    return Response(content=resp.content, media_type=media_type)
