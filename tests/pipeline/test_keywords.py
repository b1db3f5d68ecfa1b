"""Tests for keyword extraction."""

from blueprint_forge.pipeline.keywords import MAX_KEYWORDS, STOP_WORDS, extract_keywords, is_stop_word


# ── extract_keywords ──────────────────────────────


def test_deduplicates_in_first_seen_order():
    text = "forêt forêt sombre dense sombre mystique brumeux ancien"
    assert extract_keywords(text) == ["foret", "sombre", "dense", "mystique", "brumeux", "ancien"]


def test_caps_at_twelve_distinct_words():
    words = (
        "alpha bravo charlie delta echo foxtrot golf hotel india kilo "
        "lima mike november oscar papa quebec romeo sierra tango uniform"
    )
    result = extract_keywords(words)
    assert len(result) == MAX_KEYWORDS == 12
    assert result == words.split()[:12]


def test_custom_limit():
    assert extract_keywords("alpha bravo charlie delta", limit=2) == ["alpha", "bravo"]


def test_short_words_skipped():
    assert extract_keywords("le roi de la mer") == []


def test_stop_words_filtered():
    result = extract_keywords("Explorer dans la vallée avec les dragons pour toujours")
    assert result == ["explorer", "vallee", "dragons"]
    assert not any(is_stop_word(w) for w in result)


def test_accented_stop_words_filtered_after_folding():
    assert extract_keywords("être très également après") == []


def test_empty_input():
    assert extract_keywords("") == []
    assert extract_keywords("   \n ") == []


def test_punctuation_splits_tokens():
    assert extract_keywords("dragon,chevalier;princesse!") == ["dragon", "chevalier", "princesse"]


# ── is_stop_word ──────────────────────────────


def test_is_stop_word_matches_folded_form():
    assert is_stop_word("être")
    assert is_stop_word("etre")
    assert not is_stop_word("dragon")


def test_stop_word_set_size():
    assert len(STOP_WORDS) >= 80
