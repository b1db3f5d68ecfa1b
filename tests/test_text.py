"""Tests for blueprint_forge.text."""

from blueprint_forge.text import (
    fold,
    sanitize_sentence,
    slugify,
    split_clauses,
    strip_label,
    title_case,
)


def test_fold_strips_accents_and_lowercases():
    assert fold("Forêt Épique") == "foret epique"


def test_fold_keeps_plain_ascii():
    assert fold("neon 2077") == "neon 2077"


def test_sanitize_sentence_drops_quotes_and_collapses_whitespace():
    assert sanitize_sentence('  "Le  jeu"  \n de `test` ') == "Le jeu de test"


def test_sanitize_sentence_empty():
    assert sanitize_sentence("   ") == ""


def test_title_case_upper_cases_each_word():
    assert title_case("gardien des ruines") == "Gardien Des Ruines"


def test_title_case_accented_initial():
    assert title_case("élan vital") == "Élan Vital"


def test_split_clauses_on_punctuation_and_newlines():
    assert split_clauses("A. B! C?\nD") == ["A", " B", " C", "", "D"]


def test_slugify():
    assert slugify("Gardien des Ruines") == "gardien-des-ruines"


def test_slugify_accents_and_apostrophes():
    assert slugify("Forêt d'Émeraude") == "foret-demeraude"


def test_slugify_fallback():
    assert slugify("!!!") == "asset"


def test_strip_label_drops_prefix_and_period():
    assert strip_label("Boucle principale : Explorer les ruines.") == "Explorer les ruines"


def test_strip_label_without_prefix_drops_period():
    assert strip_label("Sans préfixe.") == "Sans préfixe"
