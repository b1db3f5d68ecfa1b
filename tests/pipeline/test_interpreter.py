"""Tests for the brief interpreter."""

from blueprint_forge.models import GameBrief
from blueprint_forge.pipeline.interpreter import (
    DEFAULT_THEME,
    DEFAULT_TITLE,
    FALLBACK_COLLECTIBLES,
    FALLBACK_DESCRIPTION,
    FALLBACK_OBJECTIVES,
    build_collectibles,
    build_objectives,
    interpret,
    strip_label,
)
from blueprint_forge.pipeline.rules import DEFAULT_PALETTE

QUEST = "Explorer les ruines. Vaincre le gardien! Trouver la relique? Fuir."


# ── Empty brief ──────────────────────────────


class TestEmptyBrief:
    def test_every_step_falls_back(self) -> None:
        world = interpret(GameBrief())
        assert world.title == DEFAULT_TITLE == "Prototype IA"
        assert world.theme == DEFAULT_THEME == "Univers généré"
        assert world.description == FALLBACK_DESCRIPTION
        assert world.environment == (
            "Monde inspiré par univers généré, enrichi d'effets atmosphériques procéduraux"
        )
        assert world.palette == DEFAULT_PALETTE
        assert world.objectives == FALLBACK_OBJECTIVES
        assert world.keywords == []

    def test_required_fields_are_populated(self) -> None:
        world = interpret(GameBrief(title="  ", theme="\n", description="   ", references=[]))
        assert len(world.palette) == 3
        assert len(world.objectives) >= 1
        assert len(world.collectibles) >= 1
        for text in (world.title, world.theme, world.description, world.environment):
            assert text

    def test_fallback_objectives_describe_generated_content(self) -> None:
        assert all("généré" in o or "Intégrer" in o for o in FALLBACK_OBJECTIVES)

    def test_collectibles_use_fallback_nouns(self) -> None:
        world = interpret(GameBrief())
        assert world.collectibles[-3:] == FALLBACK_COLLECTIBLES


# ── Title / theme resolution ──────────────────────────────


def test_title_and_theme_from_keywords():
    world = interpret(GameBrief(description="Dragons volcaniques et chevaliers"))
    assert world.keywords == ["dragons", "volcaniques", "chevaliers"]
    assert world.title == "Dragons Volcaniques"
    assert world.theme == "Univers dragons"


def test_explicit_title_and_theme_are_sanitized():
    world = interpret(GameBrief(title='  "Mon   jeu" ', theme="Space  opera"))
    assert world.title == "Mon jeu"
    assert world.theme == "Space opera"


def test_keywords_fall_back_to_theme_then_title():
    assert interpret(GameBrief(theme="Pirates galactiques")).keywords == ["pirates", "galactiques"]
    assert interpret(GameBrief(title="Citadelle oubliée")).keywords == ["citadelle", "oubliee"]


# ── Objectives / roster / collectibles ──────────────────────────────


def test_objectives_are_first_three_clauses_with_positional_labels():
    world = interpret(GameBrief(description=QUEST))
    assert world.objectives == [
        "Boucle principale : Explorer les ruines",
        "Progression : Vaincre le gardien",
        "Ambiance : Trouver la relique",
    ]


def test_enemies_fall_back_to_first_keywords():
    world = interpret(GameBrief(description=QUEST))
    assert world.enemies == ["Explorer", "Ruines", "Vaincre"]


def test_companions_from_matching_clause():
    world = interpret(GameBrief(description=QUEST))
    assert world.companions == ["Vaincre Gardien"]


def test_collectibles_append_unrepresented_keywords():
    world = interpret(GameBrief(description=QUEST))
    assert world.collectibles == [
        "Explorer les ruines",
        "Vaincre le gardien",
        "Trouver la relique",
        "fuir",
    ]


def test_collectibles_capped_at_six():
    objectives = ["Boucle principale : Courir"]
    keywords = ["alpha", "bravo", "charlie", "delta", "echo", "foxtrot", "golf"]
    assert build_collectibles(objectives, keywords) == [
        "Courir", "alpha", "bravo", "charlie", "delta", "echo",
    ]


def test_collectible_representation_ignores_accents():
    objectives = ["Boucle principale : Traverser la forêt"]
    assert build_collectibles(objectives, ["foret", "lune"]) == ["Traverser la forêt", "lune"]


def test_build_objectives_fallback():
    assert build_objectives("") == FALLBACK_OBJECTIVES
    assert build_objectives("...!?") == FALLBACK_OBJECTIVES


def test_strip_label():
    assert strip_label("Progression : Vaincre le gardien.") == "Vaincre le gardien"
    assert strip_label("Sans préfixe") == "Sans préfixe"


def test_references_do_not_change_derivation():
    plain = interpret(GameBrief(description=QUEST))
    with_refs = interpret(GameBrief(description=QUEST, references=["https://example.com/a.png"]))
    assert plain == with_refs


def test_interpret_is_deterministic():
    brief = GameBrief(title="Néon", description="Des drones patrouillent dans la ville cyber.")
    assert interpret(brief) == interpret(brief)
