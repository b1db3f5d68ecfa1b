"""Ordered keyword → label rule tables (environment, palette, roster).

Each table is evaluated first-match-wins: the first rule with any keyword
appearing as a substring of the lowercased haystack decides the label.
"""

import re
from dataclasses import dataclass
from typing import Generic, TypeVar

from blueprint_forge.text import sanitize_sentence, split_clauses, title_case

from .keywords import is_stop_word

T = TypeVar("T")


@dataclass(frozen=True)
class Rule(Generic[T]):
    keywords: tuple[str, ...]
    label: T


def first_match(rules: list[Rule[T]], haystack: str) -> T | None:
    """Return the label of the first rule matching `haystack`, or None."""
    text = haystack.lower()
    for rule in rules:
        if any(keyword in text for keyword in rule.keywords):
            return rule.label
    return None


ENVIRONMENT_RULES: list[Rule[str]] = [
    Rule(("forêt", "forest", "bois", "boisé", "arbres", "jungle"),
         "Forêt dense ponctuée de clairières lumineuses"),
    Rule(("désert", "sable", "dune", "canyon"),
         "Désert sculpté par le vent et les canyons vertigineux"),
    Rule(("neige", "glace", "glacial", "arctique", "hiver"),
         "Toundra glacée avec cristaux lumineux et tempêtes de neige"),
    Rule(("cyber", "néon", "futuriste", "holographique", "synthwave"),
         "Mégalopole néon avec brume holographique"),
    Rule(("espace", "stellaire", "galaxie", "orbite"),
         "Station orbitale flottant dans une nébuleuse animée"),
    Rule(("océan", "sous-marin", "abyssal", "aquatique"),
         "Cité sous-marine bioluminescente"),
    Rule(("mystique", "fantôme", "sorcier", "magie", "enchante"),
         "Sanctuaire mystique baigné de lueurs arcaniques"),
]

PALETTE_RULES: list[Rule[tuple[str, str, str]]] = [
    Rule(("forêt", "nature", "bois"), ("#0f2b1d", "#1f6f43", "#a3ffcf")),
    Rule(("désert", "sable", "soleil"), ("#3c1f03", "#c7721e", "#fbd88d")),
    Rule(("neige", "glace", "arctique", "polaire"), ("#0a1533", "#1d5fbf", "#94e5ff")),
    Rule(("cyber", "néon", "futur", "synthwave"), ("#050027", "#9c1aff", "#12d7ff")),
    Rule(("volcan", "lave", "feu"), ("#1a0505", "#872424", "#ff7847")),
]

DEFAULT_PALETTE = ("#0b1f3a", "#3b5bdb", "#9ad0ff")

ENEMY_PATTERN = re.compile(
    r"(boss|ennemi|enemie|monstre|créature|assassin|robot|démon|pirate|soldat|drone|mecha)",
    re.IGNORECASE,
)
COMPANION_PATTERN = re.compile(r"(allié|compagnon|ami|guide|esprit|gardien)", re.IGNORECASE)

_LABEL_CHARS_RE = re.compile(r"[^a-zàâäéèêëîïôöùûüç0-9\s-]")


def _haystack(description: str, theme: str) -> str:
    return f"{theme} {description}"


def guess_environment(description: str, theme: str) -> str:
    label = first_match(ENVIRONMENT_RULES, _haystack(description, theme))
    if label is not None:
        return label
    origin = f"inspiré par {theme.lower()}" if theme else "généré dynamiquement"
    return f"Monde {origin}, enrichi d'effets atmosphériques procéduraux"


def choose_palette(description: str, theme: str) -> tuple[str, str, str]:
    colors = first_match(PALETTE_RULES, _haystack(description, theme))
    return colors if colors is not None else DEFAULT_PALETTE


def extract_feature_labels(
    description: str, pattern: re.Pattern, fallback: list[str]
) -> list[str]:
    """Build short title-cased labels from clauses matching `pattern`.

    Each matching clause contributes up to 3 significant words (longer than
    3 chars, not stop words). A clause with no such word contributes its
    first 60 sanitized chars. No matching clause at all returns `fallback`.
    """
    clauses = [c.strip() for c in split_clauses(description)]
    matching = [c for c in clauses if c and pattern.search(c)]
    if not matching:
        return list(fallback)

    labels: list[str] = []
    for clause in matching:
        cleaned = _LABEL_CHARS_RE.sub("", clause.lower())
        words = [w for w in cleaned.split() if len(w) > 3 and not is_stop_word(w)][:3]
        if words:
            labels.append(title_case(" ".join(words)))
        else:
            labels.append(sanitize_sentence(clause)[:60])
    return labels
