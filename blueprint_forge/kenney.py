"""Kenney asset pack catalog — search and genre-based recommendations."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

PackCategory = Literal["2D", "3D", "UI", "Audio", "Fonts"]

_CONTENT_ROOT = "https://kenney.nl/content/3-assets"


class KenneyPack(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    slug: str
    description: str
    category: PackCategory
    download_url: str = Field(alias="downloadUrl")
    thumbnail_url: str = Field(alias="thumbnailUrl")
    file_size: str = Field(alias="fileSize")
    tags: tuple[str, ...]


def _pack(
    name: str, slug: str, description: str, category: PackCategory,
    folder: str, archive: str, file_size: str, tags: tuple[str, ...],
) -> KenneyPack:
    return KenneyPack(
        name=name,
        slug=slug,
        description=description,
        category=category,
        download_url=f"{_CONTENT_ROOT}/{folder}/{archive}",
        thumbnail_url=f"{_CONTENT_ROOT}/{folder}/preview.png",
        file_size=file_size,
        tags=tags,
    )


KENNEY_PACKS: tuple[KenneyPack, ...] = (
    # 2D — platform & characters
    _pack("Pixel Platformer", "pixel-platformer",
          "Complete platformer asset pack with tiles, characters, and objects", "2D",
          "9-platformer-pack-redux", "platformer_pack_redux.zip", "2.1 MB",
          ("platformer", "pixel", "retro", "character", "tiles")),
    _pack("Shape Characters", "shape-characters", "Geometric character sprites for games", "2D",
          "445-shape-characters", "shapecharacters.zip", "1.8 MB",
          ("character", "shapes", "simple", "colorful")),
    _pack("Retro Medieval Kit", "retro-medieval-kit", "Medieval themed pixel art assets", "2D",
          "495-retro-medieval-kit", "retro_medieval.zip", "1.5 MB",
          ("medieval", "retro", "pixel", "fantasy", "rpg")),
    _pack("Blocky Characters", "blocky-characters", "3D-style blocky character sprites", "2D",
          "449-blocky-characters", "blocky_characters.zip", "2.3 MB",
          ("character", "blocky", "3d-style", "modern")),
    # 2D — space & sci-fi
    _pack("Planets", "planets", "Planet sprites for space games", "2D",
          "28-planets", "planets.zip", "0.8 MB",
          ("space", "planets", "sci-fi", "astronomy")),
    _pack("Space Shooter Redux", "space-shooter-redux", "Complete space shooter asset pack", "2D",
          "13-space-shooter-redux", "spaceshooterredux_sample.zip", "3.2 MB",
          ("space", "shooter", "sci-fi", "ships", "bullets")),
    # 2D — desert & western
    _pack("Desert Shooter Pack", "desert-shooter-pack", "Western/desert themed shooter assets", "2D",
          "496-desert-shooter-pack", "desert_shooter.zip", "1.9 MB",
          ("desert", "western", "shooter", "cowboy")),
    _pack("Pixel Platformer Blocks", "pixel-platformer-blocks", "Block-based platformer tiles", "2D",
          "503-pixel-platformer-blocks", "pixel_platformer_blocks.zip", "0.5 MB",
          ("platformer", "blocks", "tiles", "pixel")),
    _pack("Pixel Shmup", "pixel-shmup", "Shoot 'em up pixel art pack", "2D",
          "146-pixel-shmup", "pixelshmup_sample.zip", "1.2 MB",
          ("shmup", "shooter", "pixel", "arcade")),
    _pack("Tiny Dungeon", "tiny-dungeon", "Tiny pixel dungeon crawler assets", "2D",
          "383-tiny-dungeon", "tiny_dungeon.zip", "0.3 MB",
          ("dungeon", "rpg", "tiny", "pixel", "fantasy")),
    _pack("Tiny Town", "tiny-town", "Tiny pixel town building assets", "2D",
          "384-tiny-town", "tiny_town.zip", "0.4 MB",
          ("town", "city", "tiny", "pixel", "buildings")),
    _pack("Platformer Art Deluxe", "platformer-art-deluxe", "Deluxe platformer art collection", "2D",
          "5-platformer-art-deluxe", "platformer_art_deluxe.zip", "4.5 MB",
          ("platformer", "deluxe", "complete", "tiles", "characters")),
    _pack("Toon Characters", "toon-characters", "Cartoon style character pack", "2D",
          "8-toon-characters-1", "toon_characters.zip", "5.1 MB",
          ("toon", "cartoon", "characters", "animated")),
    _pack("Abstract Platformer", "abstract-platformer", "Abstract geometric platformer pack", "2D",
          "32-abstract-platformer", "abstract_platformer.zip", "0.9 MB",
          ("abstract", "platformer", "geometric", "modern")),
    _pack("Jumper Pack", "jumper-pack", "Complete jumping game asset pack", "2D",
          "7-jumper-pack", "jumper_pack.zip", "2.8 MB",
          ("jumper", "platformer", "vertical", "endless")),
    # UI
    _pack("UI Pack", "ui-pack", "Complete UI elements pack", "UI",
          "1-ui-pack", "uipack_sample.zip", "1.7 MB",
          ("ui", "interface", "buttons", "panels")),
    _pack("UI Pack - Space Expansion", "ui-pack-space", "Sci-fi themed UI elements", "UI",
          "12-ui-pack-space-expansion", "uipack_space_sample.zip", "1.4 MB",
          ("ui", "space", "sci-fi", "futuristic")),
    _pack("UI Pack - RPG Expansion", "ui-pack-rpg", "Fantasy RPG UI elements", "UI",
          "11-ui-pack-rpg-expansion", "uipack_rpg_sample.zip", "1.5 MB",
          ("ui", "rpg", "fantasy", "medieval")),
    _pack("Game Icons", "game-icons", "Collection of game UI icons", "UI",
          "6-game-icons", "game_icons.zip", "3.6 MB",
          ("icons", "ui", "symbols", "interface")),
    _pack("Input Prompts", "input-prompts", "Controller and keyboard input icons", "UI",
          "22-input-prompts", "input_prompts.zip", "2.1 MB",
          ("input", "controller", "keyboard", "prompts")),
    # Audio
    _pack("Digital Audio", "digital-audio", "Digital sound effects collection", "Audio",
          "16-digital-audio", "digitalaudio_sample.zip", "8.5 MB",
          ("audio", "sfx", "digital", "electronic")),
    _pack("Impact Sounds", "impact-sounds", "Impact and collision sound effects", "Audio",
          "17-impact-sounds", "impactsounds_sample.zip", "3.2 MB",
          ("audio", "sfx", "impact", "collision")),
    _pack("RPG Audio", "rpg-audio", "RPG themed sound effects", "Audio",
          "25-rpg-audio", "rpgaudio_sample.zip", "12.1 MB",
          ("audio", "sfx", "rpg", "fantasy")),
    # Fonts
    _pack("Kenney Fonts", "kenney-fonts", "Collection of pixel and game fonts", "Fonts",
          "140-kenney-fonts", "kenney_fonts.zip", "1.2 MB",
          ("fonts", "text", "pixel", "display")),
    # 3D
    _pack("Platformer Kit", "platformer-kit-3d", "3D platformer asset kit", "3D",
          "15-platformer-kit", "platformer_kit.zip", "18.3 MB",
          ("3d", "platformer", "low-poly", "models")),
    _pack("Nature Kit", "nature-kit", "3D nature environment assets", "3D",
          "14-nature-kit", "nature_kit.zip", "21.7 MB",
          ("3d", "nature", "environment", "trees", "rocks")),
    _pack("Castle Kit", "castle-kit", "3D medieval castle assets", "3D",
          "18-castle-kit", "castle_kit.zip", "15.4 MB",
          ("3d", "castle", "medieval", "fantasy", "buildings")),
    _pack("City Kit", "city-kit", "3D modern city building assets", "3D",
          "19-city-kit-commercial", "city_kit_commercial.zip", "19.2 MB",
          ("3d", "city", "urban", "buildings", "modern")),
)

# (genre keywords, recommended pack slugs) — evaluated in order, all matches kept
GENRE_RECOMMENDATIONS: list[tuple[tuple[str, ...], tuple[str, ...]]] = [
    (("platformer", "jump", "mario", "side-scroll"),
     ("pixel-platformer", "platformer-art-deluxe", "jumper-pack", "abstract-platformer")),
    (("space", "asteroid", "galaxy", "alien", "rocket"),
     ("planets", "space-shooter-redux", "pixel-shmup")),
    (("rpg", "dungeon", "fantasy", "medieval", "quest"),
     ("retro-medieval-kit", "tiny-dungeon", "ui-pack-rpg")),
    (("shooter", "shoot", "gun", "bullet"),
     ("desert-shooter-pack", "space-shooter-redux", "pixel-shmup")),
]

ALWAYS_RECOMMENDED = ("ui-pack", "input-prompts", "game-icons")


def packs_by_category(
    category: PackCategory, packs: tuple[KenneyPack, ...] = KENNEY_PACKS
) -> list[KenneyPack]:
    return [p for p in packs if p.category == category]


def search_packs(query: str, packs: tuple[KenneyPack, ...] = KENNEY_PACKS) -> list[KenneyPack]:
    """Case-insensitive substring search over name, description and tags."""
    q = query.lower()
    return [
        p for p in packs
        if q in p.name.lower()
        or q in p.description.lower()
        or any(q in tag.lower() for tag in p.tags)
    ]


def recommend_packs(
    description: str, packs: tuple[KenneyPack, ...] = KENNEY_PACKS
) -> list[KenneyPack]:
    """Recommend packs for a game description.

    Every genre group whose keywords appear in the description contributes
    its packs; the UI trio is always appended. Duplicates keep their first
    position.
    """
    text = description.lower()
    wanted: list[str] = []
    for keywords, slugs in GENRE_RECOMMENDATIONS:
        if any(k in text for k in keywords):
            wanted.extend(slugs)
    wanted.extend(ALWAYS_RECOMMENDED)

    by_slug = {p.slug: p for p in packs}
    result: dict[str, KenneyPack] = {}
    for slug in wanted:
        if slug in by_slug:
            result.setdefault(slug, by_slug[slug])
    return list(result.values())


def find_packs(slugs: list[str], packs: tuple[KenneyPack, ...] = KENNEY_PACKS) -> list[KenneyPack]:
    """Resolve pack slugs in the given order; unknown slugs are skipped."""
    by_slug = {p.slug: p for p in packs}
    return [by_slug[s] for s in dict.fromkeys(slugs) if s in by_slug]
