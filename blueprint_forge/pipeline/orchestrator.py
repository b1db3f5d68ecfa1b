"""Blueprint orchestration: one call from brief to GameBlueprint.

generate_blueprint       — synchronous, pure over the brief and the lookup
generate_with_generator  — async; same blueprint, but the playable page is
                           replaced by code from the hosted generator
"""

import logging

from blueprint_forge.banks import DEFAULT_SOURCE_LIMIT, AssetBankCatalog, AssetLookup
from blueprint_forge.emitter import emit_game_code
from blueprint_forge.generator import Generator, GeneratorError
from blueprint_forge.kenney import KenneyPack
from blueprint_forge.models import GameBlueprint, GameBrief
from blueprint_forge.prompts import build_game_prompt

from .assembler import assemble
from .assets import MAX_ASSETS, synthesize
from .interpreter import interpret

logger = logging.getLogger(__name__)

GAME_CATEGORY = "game"


def generate_blueprint(
    brief: GameBrief,
    *,
    instruction: str | None = None,
    lookup: AssetLookup | None = None,
    seed: int | None = None,
    max_assets: int = MAX_ASSETS,
    sources_per_asset: int = DEFAULT_SOURCE_LIMIT,
    code: str | None = None,
) -> GameBlueprint:
    """Run interpret → synthesize → emit → assemble for one brief.

    `code` overrides the emitted page (used when a generator supplied it).
    Each call builds a fresh blueprint; nothing is shared between calls.
    """
    world = interpret(brief)
    assets = synthesize(
        world,
        lookup or AssetBankCatalog(),
        max_assets=max_assets,
        sources_per_asset=sources_per_asset,
    )
    if code is None:
        code = emit_game_code(world, seed=seed)
    blueprint = assemble(brief, world, assets, code, instruction=instruction)
    logger.info("blueprint generated title=%r assets=%d", world.title, len(assets))
    return blueprint


async def generate_with_generator(
    brief: GameBrief,
    generator: Generator,
    *,
    instruction: str | None = None,
    packs: list[KenneyPack] | None = None,
    lookup: AssetLookup | None = None,
    max_assets: int = MAX_ASSETS,
    sources_per_asset: int = DEFAULT_SOURCE_LIMIT,
) -> GameBlueprint:
    """Ask the hosted generator for game code, then assemble the blueprint.

    Raises GeneratorError when the generator fails or returns no code.
    """
    prompt = build_game_prompt(brief, instruction)
    result = await generator(prompt, GAME_CATEGORY, packs=packs)
    code = result.game_code
    if code is None:
        raise GeneratorError("Aucun code généré par le modèle IA")
    logger.info("generator supplied %d chars of game code", len(code))
    return generate_blueprint(
        brief,
        instruction=instruction,
        lookup=lookup,
        max_assets=max_assets,
        sources_per_asset=sources_per_asset,
        code=code,
    )
