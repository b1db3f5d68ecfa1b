"""Brief interpreter: raw GameBrief → WorldModel.

Fallback chain (every step degrades to fixed defaults, never raises):
  keywords     description, else theme, else title
  title        brief title → first two keywords → "Prototype IA"
  theme        brief theme → "Univers {keyword}" → "Univers généré"
  environment  environment table over theme + description
  palette      palette table over theme + description
  objectives   first 3 clauses with positional labels → 3 fixed objectives
  enemies      clauses matching ENEMY_PATTERN → keywords[0:3]
  companions   clauses matching COMPANION_PATTERN → keywords[3:6]
  collectibles objective labels + unrepresented keywords, capped at 6
"""

import logging

from blueprint_forge.models import GameBrief, WorldModel
from blueprint_forge.text import fold, sanitize_sentence, split_clauses, strip_label, title_case

from .keywords import extract_keywords
from .rules import (
    COMPANION_PATTERN,
    ENEMY_PATTERN,
    choose_palette,
    extract_feature_labels,
    guess_environment,
)

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Prototype IA"
DEFAULT_THEME = "Univers généré"
MAX_OBJECTIVES = 3
MAX_COLLECTIBLES = 6

OBJECTIVE_PREFIXES = ("Boucle principale", "Progression", "Ambiance")

FALLBACK_OBJECTIVES = [
    "Boucle principale : Explorer l'espace de jeu généré",
    "Progression : Intégrer vos directives pour enrichir le gameplay",
    "Ambiance : Expérience immersive générée en canvas 2D",
]

FALLBACK_COLLECTIBLES = ["artefacts", "fragments", "souvenirs"]

FALLBACK_DESCRIPTION = (
    "Prototype généré automatiquement à partir de votre brief pour démonstration immédiate."
)


def build_objectives(description: str) -> list[str]:
    sentences = [s for s in (sanitize_sentence(c) for c in split_clauses(description)) if s]
    if not sentences:
        return list(FALLBACK_OBJECTIVES)
    return [
        f"{prefix} : {sentence}"
        for prefix, sentence in zip(OBJECTIVE_PREFIXES, sentences[:MAX_OBJECTIVES])
    ]


def build_collectibles(objectives: list[str], keywords: list[str]) -> list[str]:
    labels = [strip_label(o) for o in objectives]
    folded = [fold(label) for label in labels]
    extras = [k for k in keywords if not any(fold(k) in label for label in folded)]
    collectibles = [label for label in labels if label] + extras
    return collectibles[:MAX_COLLECTIBLES] or list(FALLBACK_COLLECTIBLES)


def interpret(brief: GameBrief) -> WorldModel:
    """Derive the world model for a brief. Pure: same brief, same model."""
    title = sanitize_sentence(brief.title)
    theme = sanitize_sentence(brief.theme)
    description = sanitize_sentence(brief.description)

    keywords = extract_keywords(description or theme or title)

    if not title:
        title = title_case(" ".join(keywords[:2])) if keywords else DEFAULT_TITLE
    if not theme:
        theme = f"Univers {keywords[0]}" if keywords else DEFAULT_THEME

    objectives = build_objectives(description)
    world = WorldModel(
        title=title,
        theme=theme,
        description=description or FALLBACK_DESCRIPTION,
        environment=guess_environment(description, theme),
        palette=choose_palette(description, theme),
        objectives=objectives,
        enemies=extract_feature_labels(
            description, ENEMY_PATTERN, [title_case(k) for k in keywords[0:3]]
        ),
        companions=extract_feature_labels(
            description, COMPANION_PATTERN, [title_case(k) for k in keywords[3:6]]
        ),
        collectibles=build_collectibles(objectives, keywords or FALLBACK_COLLECTIBLES),
        keywords=keywords,
    )
    logger.debug(
        "interpreted brief title=%r keywords=%d enemies=%d collectibles=%d",
        world.title, len(keywords), len(world.enemies), len(world.collectibles),
    )
    return world
