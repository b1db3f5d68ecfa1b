"""Pydantic request/response models for API endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from blueprint_forge.models import GameBrief, GameSummary


class _Body(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class GenerateBody(_Body):
    brief: GameBrief
    instruction: str | None = None
    seed: int | None = None
    use_generator: bool = Field(default=False, alias="useGenerator")
    kenney_packs: list[str] = Field(default_factory=list, alias="kenneyPacks")


class RefineBody(_Body):
    brief: GameBrief
    summary: GameSummary
    instruction: str
    previous_updates: list[str] = Field(default_factory=list, alias="previousUpdates")
    seed: int | None = None


class PlaytestBody(BaseModel):
    brief: GameBrief
    seed: int | None = None


class PreviewBody(BaseModel):
    brief: GameBrief
    seed: int | None = None


class CheckConnectionBody(BaseModel):
    generator_url: str = ""
    generator_api_key: str = ""
