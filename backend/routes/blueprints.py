"""Blueprint generation, refinement, play-test and preview endpoints."""

import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse

from backend.config import get_config
from blueprint_forge.emitter import emit_game_code, playtest
from blueprint_forge.generator import GeneratorError, HttpGenerator
from blueprint_forge.kenney import find_packs
from blueprint_forge.pipeline import (
    generate_blueprint,
    generate_with_generator,
    interpret,
    merge_updates,
    refine_brief,
)

from .models import GenerateBody, PlaytestBody, PreviewBody, RefineBody

logger = logging.getLogger(__name__)

router = APIRouter()

# The preview is served as an isolated document: scripts run, nothing else.
PREVIEW_CSP = "sandbox allow-scripts"


def get_generator() -> HttpGenerator | None:
    """Build the hosted generator client from config, or None if unconfigured."""
    config = get_config()
    if not config["generator_url"]:
        return None
    return HttpGenerator(
        config["generator_url"],
        config["generator_api_key"],
        timeout=config["generator_timeout"],
    )


@router.post("/blueprints")
async def create_blueprint(body: GenerateBody):
    """Derive a blueprint from a brief, optionally with AI-generated game code."""
    config = get_config()
    limits = {
        "max_assets": config["max_assets"],
        "sources_per_asset": config["sources_per_asset"],
    }
    if not body.use_generator:
        blueprint = generate_blueprint(
            body.brief, instruction=body.instruction, seed=body.seed, **limits
        )
        return blueprint.to_json_dict()

    generator = get_generator()
    if generator is None:
        raise HTTPException(400, "No generator configured")
    try:
        blueprint = await generate_with_generator(
            body.brief,
            generator,
            instruction=body.instruction,
            packs=find_packs(body.kenney_packs) or None,
            **limits,
        )
    except GeneratorError as e:
        logger.warning(f"Generator failed: {e}")
        raise HTTPException(502, str(e))
    return blueprint.to_json_dict()


@router.post("/blueprints/refine")
async def refine_blueprint(body: RefineBody):
    """Apply a player instruction: rewrite the brief, regenerate, merge the log."""
    instruction = body.instruction.strip()
    if not instruction:
        raise HTTPException(400, "Instruction is required")
    config = get_config()
    brief = refine_brief(body.brief, body.summary, instruction)
    blueprint = generate_blueprint(
        brief,
        instruction=instruction,
        seed=body.seed,
        max_assets=config["max_assets"],
        sources_per_asset=config["sources_per_asset"],
    )
    return {
        "brief": brief.model_dump(mode="json"),
        "blueprint": blueprint.to_json_dict(),
        "updates": merge_updates(instruction, blueprint.updates, body.previous_updates),
    }


@router.post("/blueprints/playtest")
async def playtest_blueprint(body: PlaytestBody):
    """Run the scripted playthrough of the emitted game for a brief."""
    return playtest(interpret(body.brief), seed=body.seed).model_dump()


@router.post("/blueprints/preview", response_class=HTMLResponse)
async def preview_blueprint(body: PreviewBody):
    """Return the playable page itself, sandboxed."""
    code = emit_game_code(interpret(body.brief), seed=body.seed)
    return HTMLResponse(code, headers={"Content-Security-Policy": PREVIEW_CSP})
