"""Tests for the asset bank catalog."""

from blueprint_forge.banks import (
    DEFAULT_BANKS,
    AssetBank,
    AssetBankCatalog,
    encode_query,
    normalize_category,
    summarize_sources,
)
from blueprint_forge.models import AssetSource, GeneratedAsset


def _bank(bank_id: str, categories: tuple, tags: tuple = ()) -> AssetBank:
    return AssetBank(
        id=bank_id,
        name=bank_id.title(),
        homepage=f"https://{bank_id}.test/",
        description="",
        license="CC0",
        categories=categories,
        search_url_template=f"https://{bank_id}.test/search?q={{query}}",
        tags=tags,
    )


# ── encode_query ──────────────────────────────


def test_encode_query_folds_and_joins_with_plus():
    assert encode_query("Épée de Feu!") == "epee+de+feu"


def test_encode_query_collapses_whitespace_and_symbols():
    assert encode_query("  Robot   (géant) / 2.0 ") == "robot+geant+2+0"


def test_encode_query_keeps_hyphens():
    assert encode_query("Sous-marin") == "sous-marin"


# ── normalize_category ──────────────────────────────


def test_normalize_category_canonical_labels():
    assert normalize_category("Décor") == "Décor"
    assert normalize_category("Personnage") == "Personnage"
    assert normalize_category("Objet interactif") == "Objet interactif"
    assert normalize_category("Audio") == "Audio"


def test_normalize_category_synonyms_and_heuristics():
    assert normalize_category("ennemi") == "Personnage"
    assert normalize_category("HUD") == "Interface"
    assert normalize_category("Personnages secondaires") == "Personnage"
    assert normalize_category("Environnements") == "Décor"


def test_normalize_category_fallback():
    assert normalize_category("") == "Généraliste"
    assert normalize_category("musique") == "Généraliste"


# ── AssetBankCatalog.lookup ──────────────────────────────


class TestLookup:
    def test_category_membership_in_catalog_order(self) -> None:
        sources = AssetBankCatalog().lookup("Épée", "Objet interactif")
        assert [s.bank_id for s in sources] == ["kenney", "opengameart", "poly-pizza"]
        assert sources[0].url == "https://kenney.nl/assets?search=epee"
        assert sources[0].bank_name == "Kenney Asset Packs"

    def test_limit(self) -> None:
        catalog = AssetBankCatalog()
        assert len(catalog.lookup("Épée", "Objet interactif", limit=1)) == 1
        assert catalog.lookup("Épée", "Objet interactif", limit=0) == []

    def test_texture_category(self) -> None:
        sources = AssetBankCatalog().lookup("Mur", "Texture")
        assert [s.bank_id for s in sources] == ["ambientcg"]

    def test_tag_overlap_adds_banks(self) -> None:
        sources = AssetBankCatalog().lookup("Mur", "Texture", ["cyberpunk"])
        assert [s.bank_id for s in sources] == ["ambientcg", "itch-asset-store"]

    def test_generalist_fallback(self) -> None:
        catalog = AssetBankCatalog([_bank("tex", ("Texture",)), _bank("all", ("Généraliste",))])
        assert [s.bank_id for s in catalog.lookup("x", "Audio")] == ["all"]

    def test_no_match_and_no_generalist(self) -> None:
        catalog = AssetBankCatalog([_bank("tex", ("Texture",))])
        assert catalog.lookup("x", "Audio") == []

    def test_query_falls_back_to_keywords_then_category(self) -> None:
        catalog = AssetBankCatalog([_bank("all", ("Généraliste", "Décor"))])
        assert catalog.lookup("", "Décor", ["forêt"])[0].url == "https://all.test/search?q=foret"
        assert catalog.lookup(" ", "Décor")[0].url == "https://all.test/search?q=decor"

    def test_one_source_per_bank(self) -> None:
        catalog = AssetBankCatalog([_bank("a", ("Décor",)), _bank("a", ("Décor",))])
        assert len(catalog.lookup("x", "Décor")) == 1

    def test_deterministic(self) -> None:
        catalog = AssetBankCatalog()
        args = ("Golem de pierre", "Personnage", ["ruines", "rpg"], 3)
        assert catalog.lookup(*args) == catalog.lookup(*args)

    def test_default_table(self) -> None:
        assert [b.id for b in AssetBankCatalog().banks] == [b.id for b in DEFAULT_BANKS]
        assert len(DEFAULT_BANKS) == 6


# ── summarize_sources ──────────────────────────────


def test_summarize_sources_unique_first_seen():
    kenney = AssetSource(bank_id="kenney", bank_name="Kenney", url="u", license="CC0", description="")
    oga = AssetSource(bank_id="oga", bank_name="OGA", url="u", license="GPL", description="")
    assets = [
        GeneratedAsset(id="1", name="a", category="Décor", description="", sources=[oga, kenney]),
        GeneratedAsset(id="2", name="b", category="Décor", description="", sources=[kenney]),
    ]
    assert summarize_sources(assets) == ["OGA (GPL)", "Kenney (CC0)"]


def test_summarize_sources_empty():
    assert summarize_sources([]) == []
