"""Blueprint assembler: world model + assets + game code → GameBlueprint.

Also hosts the helpers of the refinement loop: the merged update log shown
to the player and the brief rewritten from a refinement instruction.
"""

import logging

from blueprint_forge.banks import summarize_sources
from blueprint_forge.models import GameBlueprint, GameBrief, GameSummary, GeneratedAsset, WorldModel
from blueprint_forge.text import strip_label

logger = logging.getLogger(__name__)

MAX_HIGHLIGHTS = 2
SELECTED_ASSETS = 3
MAX_LOG_UPDATES = 10

FALLBACK_BANKS = "Kenney Asset Packs & OpenGameArt"
CALL_TO_ACTION = "Testez le gameplay interactif directement dans le previewer."


def _objective_loop(world: WorldModel) -> str:
    return " / ".join(strip_label(o) for o in world.objectives)


def _palette_line(world: WorldModel) -> str:
    return " → ".join(world.palette)


def build_updates(world: WorldModel, highlights: list[str]) -> list[str]:
    """Ordered change log: bank highlights, ambiance, roster, loops, palette, identity."""
    updates: list[str] = []
    if highlights:
        updates.append(f"Sources d'assets connectées : {' • '.join(highlights[:MAX_HIGHLIGHTS])}")
    updates.append(f"Ambiance : {world.environment}")
    if world.enemies:
        updates.append(f"Systèmes d'opposition : {', '.join(world.enemies)}")
    if world.companions:
        updates.append(f"Alliés / Soutiens : {', '.join(world.companions)}")
    updates.append(f"Boucles de jeu : {_objective_loop(world)}")
    updates.append(f"Palette dynamique : {_palette_line(world)}")
    updates.append(f"Identité : {world.theme}")
    return updates


def build_assistant_message(
    world: WorldModel, highlights: list[str], instruction: str | None = None
) -> str:
    directive = f"Instruction appliquée : {instruction}" if instruction else "Prototype initial généré"
    banks = " & ".join(highlights[:MAX_HIGHLIGHTS]) or FALLBACK_BANKS
    return (
        f"{directive}. {world.title} vous plonge dans {world.environment.lower()}. "
        f"Objectifs clés : {_objective_loop(world)}. "
        f"Palette utilisée : {_palette_line(world)}. "
        f"Banques d'assets recommandées : {banks}. "
        f"{CALL_TO_ACTION}"
    )


def assemble(
    brief: GameBrief,
    world: WorldModel,
    assets: list[GeneratedAsset],
    code: str,
    instruction: str | None = None,
) -> GameBlueprint:
    """Bundle every derived piece into the blueprint handed to the UI."""
    instruction = (instruction or "").strip() or None
    highlights = summarize_sources(assets)
    summary = GameSummary(
        title=world.title,
        theme=world.theme,
        elevator_pitch=world.description,
        objectives=list(world.objectives),
        environment=world.environment,
    )
    logger.debug(
        "assembling blueprint title=%r assets=%d highlights=%d references=%d",
        world.title, len(assets), len(highlights), len(brief.references),
    )
    return GameBlueprint(
        summary=summary,
        updates=build_updates(world, highlights),
        code=code,
        assets=assets,
        selected_asset_ids=[a.id for a in assets[:SELECTED_ASSETS]],
        assistant_message=build_assistant_message(world, highlights, instruction),
    )


# ── Refinement loop ──────────────────────────────────────


def merge_updates(
    instruction: str | None,
    new_updates: list[str],
    previous: list[str],
    limit: int = MAX_LOG_UPDATES,
) -> list[str]:
    """Merge a refinement's updates into the running log.

    The instruction line comes first, then the new updates, then the previous
    log. Duplicates keep their first position; the result is capped at `limit`.
    """
    lines: list[str] = []
    if instruction and instruction.strip():
        lines.append(f"Instruction joueur : {instruction.strip()}")
    lines.extend(new_updates)
    lines.extend(previous)
    return list(dict.fromkeys(lines))[:limit]


def refine_brief(brief: GameBrief, summary: GameSummary, instruction: str) -> GameBrief:
    """Fold a refinement instruction into the brief for the next generation.

    Title and theme are pinned to the resolved summary so a refinement never
    renames the game; the instruction is appended to the description.
    """
    instruction = instruction.strip()
    description = brief.description.strip()
    if instruction:
        description = f"{description}\n{instruction}" if description else instruction
    return GameBrief(
        title=summary.title,
        theme=summary.theme,
        description=description,
        references=list(brief.references),
    )
