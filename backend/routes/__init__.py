"""FastAPI API endpoints under /api.

Endpoint groups: settings (health, settings, check-connection), blueprints
(generate, refine, playtest, preview) and assets (bank sources, Kenney packs,
download proxy).
"""

from fastapi import APIRouter

from .assets import router as assets_router
from .blueprints import router as blueprints_router
from .settings import router as settings_router

router = APIRouter()
router.include_router(settings_router)
router.include_router(blueprints_router)
router.include_router(assets_router)
