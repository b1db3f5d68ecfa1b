"""Asset synthesizer: world model entities → GeneratedAsset list.

Candidate priority is fixed: objectives, enemies, companions, then one decor
entry per keyword. Only the first `max_assets` candidates are kept, never
more than MAX_ASSETS.
"""

import logging
from collections.abc import Sequence

from blueprint_forge.banks import DEFAULT_SOURCE_LIMIT, AssetLookup, AssetLookupError
from blueprint_forge.models import AssetCategory, AssetSource, GeneratedAsset, WorldModel
from blueprint_forge.text import slugify, strip_label, title_case

logger = logging.getLogger(__name__)

MAX_ASSETS = 8


def asset_candidates(world: WorldModel) -> list[tuple[str, AssetCategory]]:
    candidates: list[tuple[str, AssetCategory]] = []
    candidates.extend((strip_label(o), "Objet interactif") for o in world.objectives)
    candidates.extend((e, "Personnage") for e in world.enemies)
    candidates.extend((c, "Personnage") for c in world.companions)
    candidates.extend((title_case(k), "Décor") for k in world.keywords)
    return candidates


def _safe_lookup(
    lookup: AssetLookup, label: str, category: str, keywords: Sequence[str], limit: int
) -> list[AssetSource]:
    """Query the bank collaborator; an AssetLookupError degrades to no sources."""
    try:
        sources = lookup.lookup(label, category, keywords, limit)
    except AssetLookupError as e:
        logger.warning(f"Asset bank lookup failed for {label!r}: {e}")
        return []
    return list(sources)[:max(0, limit)]


def describe_asset(label: str, sources: list[AssetSource]) -> str:
    parts = [f"Asset généré automatiquement pour représenter {label.lower()}"]
    if sources:
        banks = " / ".join(f"{s.bank_name} ({s.license})" for s in sources)
        parts.append(f"Suggestions de banques : {banks}")
    return ". ".join(parts)


def synthesize(
    world: WorldModel,
    lookup: AssetLookup,
    *,
    max_assets: int = MAX_ASSETS,
    sources_per_asset: int = DEFAULT_SOURCE_LIMIT,
) -> list[GeneratedAsset]:
    """Build up to `max_assets` assets with bank suggestions for each.

    `max_assets` is clamped to 0..MAX_ASSETS.
    """
    cap = max(0, min(max_assets, MAX_ASSETS))
    assets: list[GeneratedAsset] = []
    for index, (label, category) in enumerate(asset_candidates(world)[:cap]):
        sources = _safe_lookup(lookup, label, category, world.keywords, sources_per_asset)
        assets.append(GeneratedAsset(
            id=f"{index + 1:02d}-{slugify(label)}",
            name=label,
            category=category,
            description=describe_asset(label, sources),
            sources=sources,
        ))
    logger.debug("synthesized %d assets for %r", len(assets), world.title)
    return assets
