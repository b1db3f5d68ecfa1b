"""Asset bank catalog — maps a label/category/keywords query to search links.

The catalog is a read-only table injected into the synthesizer. Lookups are
deterministic: same inputs, same sources in the same order with the same
query encoding.

Matching rules for a bank, in catalog order:
  1. the normalised category is one of the bank's categories, or
  2. the category is "Généraliste" (every bank qualifies), or
  3. one of the bank's tags is a substring of a folded keyword.
If nothing matches, the banks declaring "Généraliste" are used instead.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from typing import Protocol
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict

from blueprint_forge.models import AssetCategory, AssetSource, GeneratedAsset
from blueprint_forge.text import fold

DEFAULT_SOURCE_LIMIT = 3


class AssetBank(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    homepage: str
    description: str
    license: str
    categories: tuple[AssetCategory, ...]
    search_url_template: str  # contains "{query}"
    tags: tuple[str, ...] = ()

    def source_for(self, query: str) -> AssetSource:
        return AssetSource(
            bank_id=self.id,
            bank_name=self.name,
            url=self.search_url_template.replace("{query}", query),
            license=self.license,
            description=self.description,
        )


DEFAULT_BANKS: tuple[AssetBank, ...] = (
    AssetBank(
        id="kenney",
        name="Kenney Asset Packs",
        homepage="https://kenney.nl/assets",
        description="Bibliothèque d'assets 2D/3D libres de droits idéale pour prototyper rapidement.",
        license="CC0 (domaine public)",
        categories=("Décor", "Personnage", "Objet interactif", "Interface", "Généraliste"),
        search_url_template="https://kenney.nl/assets?search={query}",
        tags=("pixel", "low poly", "platformer", "space", "rpg"),
    ),
    AssetBank(
        id="opengameart",
        name="OpenGameArt",
        homepage="https://opengameart.org/",
        description=(
            "Plateforme communautaire regroupant des sprites, tilesets, "
            "effets sonores et musiques libres."
        ),
        license="Multiples licences libres (CC0, CC-BY, GPL)",
        categories=("Décor", "Personnage", "Objet interactif", "Audio", "Généraliste"),
        search_url_template="https://opengameart.org/art-search?keys={query}",
        tags=("fantasy", "rpg", "roguelike", "retro"),
    ),
    AssetBank(
        id="poly-pizza",
        name="Poly Pizza",
        homepage="https://poly.pizza/",
        description=(
            "Collection de modèles 3D low poly compatibles WebGL idéale "
            "pour les environnements stylisés."
        ),
        license="CC-BY 3.0",
        categories=("Décor", "Objet interactif", "Personnage"),
        search_url_template="https://poly.pizza/search?q={query}",
        tags=("low poly", "3d", "stylized"),
    ),
    AssetBank(
        id="ambientcg",
        name="AmbientCG",
        homepage="https://ambientcg.com/",
        description="Textures PBR en haute résolution utilisables pour les décors et surfaces.",
        license="CC0 (domaine public)",
        categories=("Texture", "Décor"),
        search_url_template="https://ambientcg.com/list?search={query}",
        tags=("texture", "pbr", "material"),
    ),
    AssetBank(
        id="itch-asset-store",
        name="Itch.io Asset Store",
        homepage="https://itch.io/game-assets",
        description=(
            "Marketplace riche en assets premium et gratuits couvrant une "
            "grande variété de styles artistiques."
        ),
        license="Variable selon les créateurs",
        categories=("Décor", "Personnage", "Objet interactif", "Interface", "Audio", "Généraliste"),
        search_url_template="https://itch.io/game-assets/tag-{query}",
        tags=("metroidvania", "cyberpunk", "horror", "ui"),
    ),
    AssetBank(
        id="game-icons",
        name="Game-Icons.net",
        homepage="https://game-icons.net/",
        description="Plus de 4000 icônes vectorielles libres parfaites pour les objets et interfaces.",
        license="CC-BY 3.0",
        categories=("Objet interactif", "Interface"),
        search_url_template="https://game-icons.net/tags/{query}.html",
        tags=("icon", "abilities", "items"),
    ),
)

CATEGORY_SYNONYMS: dict[str, AssetCategory] = {
    "decor": "Décor",
    "environnement": "Décor",
    "environment": "Décor",
    "personnage": "Personnage",
    "adversaire": "Personnage",
    "ennemi": "Personnage",
    "allie": "Personnage",
    "npc": "Personnage",
    "objet": "Objet interactif",
    "artefact": "Objet interactif",
    "collectible": "Objet interactif",
    "item": "Objet interactif",
    "texture": "Texture",
    "interface": "Interface",
    "ui": "Interface",
    "hud": "Interface",
    "audio": "Audio",
}

_QUERY_CHARS_RE = re.compile(r"[^a-z0-9\s-]")
_SPACES_RE = re.compile(r"\s+")


def normalize_category(category: str) -> AssetCategory:
    """Map a free-form category name onto one of the bank categories."""
    normalized = fold(category).strip()
    direct = CATEGORY_SYNONYMS.get(normalized)
    if direct:
        return direct
    if "person" in normalized:
        return "Personnage"
    if "decor" in normalized or "env" in normalized:
        return "Décor"
    if "obj" in normalized:
        return "Objet interactif"
    if "texture" in normalized:
        return "Texture"
    if "ui" in normalized or "interface" in normalized:
        return "Interface"
    return "Généraliste"


def encode_query(value: str) -> str:
    """URL-safe search query: "Épée de Feu!" → "epee+de+feu"."""
    text = _QUERY_CHARS_RE.sub(" ", fold(value.strip()))
    text = _SPACES_RE.sub(" ", text).strip()
    return quote(text.replace(" ", "+"), safe="+")


class AssetLookupError(RuntimeError):
    """Raised by a lookup collaborator that cannot reach its catalog."""


class AssetLookup(Protocol):
    def lookup(
        self, label: str, category: str, keywords: Sequence[str] = (), limit: int = ...
    ) -> list[AssetSource]: ...


class AssetBankCatalog:
    """Static, deterministic asset bank lookup over an injected bank table."""

    def __init__(self, banks: Iterable[AssetBank] = DEFAULT_BANKS) -> None:
        self._banks = tuple(banks)

    @property
    def banks(self) -> tuple[AssetBank, ...]:
        return self._banks

    def _matches(self, bank: AssetBank, category: AssetCategory, keywords: list[str]) -> bool:
        if category in bank.categories or category == "Généraliste":
            return True
        return any(tag in keyword for tag in bank.tags for keyword in keywords)

    def lookup(
        self,
        label: str,
        category: str,
        keywords: Sequence[str] = (),
        limit: int = DEFAULT_SOURCE_LIMIT,
    ) -> list[AssetSource]:
        """Return up to `limit` sources for the label, one per bank."""
        if limit <= 0:
            return []
        normalized = normalize_category(category)
        folded = [fold(k) for k in keywords]
        candidate = next((v.strip() for v in (label, *keywords) if v.strip()), category)
        query = encode_query(candidate)

        banks = [b for b in self._banks if self._matches(b, normalized, folded)]
        if not banks:
            banks = [b for b in self._banks if "Généraliste" in b.categories]

        sources: dict[str, AssetSource] = {}
        for bank in banks:
            sources.setdefault(bank.id, bank.source_for(query))
            if len(sources) >= limit:
                break
        return list(sources.values())


def summarize_sources(assets: Iterable[GeneratedAsset]) -> list[str]:
    """Unique "Bank (license)" highlights across assets, first-seen order."""
    seen: dict[str, AssetSource] = {}
    for asset in assets:
        for source in asset.sources:
            seen.setdefault(source.bank_id, source)
    return [f"{s.bank_name} ({s.license})" for s in seen.values()]
