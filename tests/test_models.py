"""Tests for the domain models: aliases, immutability and list bounds."""

import pytest
from pydantic import ValidationError

from blueprint_forge.models import (
    AssetSource,
    GameBlueprint,
    GameBrief,
    GameSummary,
    GeneratedAsset,
    WorldModel,
)


def _world(**overrides) -> WorldModel:
    fields = dict(
        title="T",
        theme="Th",
        description="D",
        environment="E",
        palette=("#000000", "#111111", "#222222"),
        objectives=["Explorer"],
    )
    fields.update(overrides)
    return WorldModel(**fields)


# ── GameBrief ────────────────────────────────────────────────


def test_brief_defaults_are_empty():
    brief = GameBrief()
    assert brief.title == ""
    assert brief.references == []


def test_brief_is_frozen():
    brief = GameBrief(title="A")
    with pytest.raises(ValidationError):
        brief.title = "B"


# ── WorldModel ───────────────────────────────────────────────


def test_world_requires_an_objective():
    with pytest.raises(ValidationError):
        _world(objectives=[])


def test_world_caps_objectives_at_three():
    with pytest.raises(ValidationError):
        _world(objectives=["a", "b", "c", "d"])


def test_world_caps_collectibles_at_six():
    with pytest.raises(ValidationError):
        _world(collectibles=[str(i) for i in range(7)])


def test_world_allows_empty_enemies_and_companions():
    world = _world()
    assert world.enemies == []
    assert world.companions == []


# ── Aliases ──────────────────────────────────────────────────


def test_asset_source_dumps_camel_case():
    source = AssetSource(bankId="kenney", bankName="Kenney", url="u", license="CC0", description="d")
    data = source.model_dump(by_alias=True)
    assert data["bankId"] == "kenney"
    assert data["bankName"] == "Kenney"


def test_asset_source_accepts_field_names():
    source = AssetSource(bank_id="k", bank_name="K", url="u", license="l", description="d")
    assert source.bank_id == "k"


def test_generated_asset_rejects_unknown_category():
    with pytest.raises(ValidationError):
        GeneratedAsset(id="01-x", name="x", category="Arme", description="d")


def test_blueprint_json_dict_uses_aliases():
    summary = GameSummary(
        title="T", theme="Th", elevatorPitch="P", objectives=["o"], environment="E"
    )
    blueprint = GameBlueprint(
        summary=summary,
        updates=["u"],
        code="<html></html>",
        assets=[],
        selectedAssetIds=[],
        assistantMessage="m",
    )
    data = blueprint.to_json_dict()
    assert data["summary"]["elevatorPitch"] == "P"
    assert data["selectedAssetIds"] == []
    assert data["assistantMessage"] == "m"
