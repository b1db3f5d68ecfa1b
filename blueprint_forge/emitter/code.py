"""Game code emitter: world model → self-contained playable HTML page."""

import json
import logging

from blueprint_forge.models import WorldModel
from blueprint_forge.templating import render
from blueprint_forge.text import strip_label

from .layout import build_layout, default_seed
from .template import GAME_TEMPLATE

logger = logging.getLogger(__name__)

DECOR_FALLBACK = ["création", "monde", "action"]
SNIPPET_LENGTH = 48

VICTORY_MESSAGE = "Victoire ! Tous les objectifs sont accomplis."
GAME_OVER_MESSAGE = "Game over ! Appuyez sur R pour recommencer."


def escape_for_script(text: str) -> str:
    """Make `text` safe to inline inside a <script> element.

    Neutralises every "</" (so no "</script>" can close the element early)
    and "<!--". Both replacements stay valid inside JS string literals.
    """
    return text.replace("<!--", "<\\!--").replace("</", "<\\/")


def snippet(text: str, length: int = SNIPPET_LENGTH) -> str:
    if len(text) <= length:
        return text
    return text[:length - 1].rstrip() + "…"


def build_game_config(world: WorldModel, seed: int) -> dict:
    """Everything the runtime script needs, as plain JSON data."""
    layout = build_layout(world.collectibles, world.enemies, seed)
    return {
        "title": world.title,
        "theme": world.theme,
        "environment": world.environment,
        "environmentSnippet": snippet(world.environment),
        "palette": list(world.palette),
        "keywords": list(world.keywords) or list(DECOR_FALLBACK),
        "messages": {"victory": VICTORY_MESSAGE, "gameOver": GAME_OVER_MESSAGE},
        **layout.to_config(),
    }


def emit_game_code(world: WorldModel, seed: int | None = None) -> str:
    """Render the playable page for `world`.

    The layout is seeded: `seed` when given, else a hash of the world model.
    """
    if seed is None:
        seed = default_seed(world)
    config = build_game_config(world, seed)
    dark, mid, light = world.palette
    context = {
        "title": world.title,
        "theme": world.theme,
        "environment": world.environment,
        "description": world.description,
        "color_dark": dark,
        "color_mid": mid,
        "color_light": light,
        "objectives": [
            {"number": f"{i:02d}", "label": strip_label(o)}
            for i, o in enumerate(world.objectives, start=1)
        ],
        "config": escape_for_script(json.dumps(config, ensure_ascii=False)),
    }
    code = render(GAME_TEMPLATE, context)
    logger.debug("emitted game seed=%d pickups=%d enemies=%d bytes=%d",
                 seed, len(config["pickups"]), len(config["enemies"]), len(code))
    return code
