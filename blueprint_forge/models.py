"""Core domain models.

Every derivation stage consumes and produces these types. Pydantic is used
for validation and serialisation at every data boundary; JSON output uses
the camelCase aliases expected by the browser client.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

AssetCategory = Literal[
    "Décor",
    "Personnage",
    "Objet interactif",
    "Texture",
    "Interface",
    "Audio",
    "Généraliste",
]

Palette = tuple[str, str, str]


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class GameBrief(_Record):
    """Raw user input submitted from the brief form."""

    title: str = ""
    theme: str = ""
    description: str = ""
    references: list[str] = Field(default_factory=list)  # carried, not derived from


class WorldModel(_Record):
    """Structured game concept derived from a brief."""

    title: str
    theme: str
    description: str
    environment: str
    palette: Palette
    objectives: list[str] = Field(min_length=1, max_length=3)
    enemies: list[str] = Field(default_factory=list)
    companions: list[str] = Field(default_factory=list)
    collectibles: list[str] = Field(default_factory=list, max_length=6)
    keywords: list[str] = Field(default_factory=list, max_length=12)


class AssetSource(_Record):
    """One external asset bank search link."""

    bank_id: str = Field(alias="bankId")
    bank_name: str = Field(alias="bankName")
    url: str
    license: str
    description: str


class GeneratedAsset(_Record):
    id: str
    name: str
    category: AssetCategory
    description: str
    sources: list[AssetSource] = Field(default_factory=list)


class GameSummary(_Record):
    title: str
    theme: str
    elevator_pitch: str = Field(alias="elevatorPitch")
    objectives: list[str]
    environment: str


class GameBlueprint(_Record):
    """Final output handed to the UI layer."""

    summary: GameSummary
    updates: list[str]
    code: str
    assets: list[GeneratedAsset]
    selected_asset_ids: list[str] = Field(alias="selectedAssetIds")
    assistant_message: str = Field(alias="assistantMessage")

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
