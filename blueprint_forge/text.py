"""Text normalisation helpers shared by the pipeline and the catalogs."""

import re
import unicodedata

_CLAUSE_SPLIT_RE = re.compile(r"[\n.!?]")
_QUOTES_RE = re.compile(r"[\"'`]")
_SPACES_RE = re.compile(r"\s+")
_LABEL_PREFIX_RE = re.compile(r"^[^:]+:\s*")


def fold(text: str) -> str:
    """Strip diacritics and lowercase: "Forêt Épique" → "foret epique"."""
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(c for c in decomposed if not 0x300 <= ord(c) <= 0x36F)
    return stripped.lower()


def sanitize_sentence(text: str) -> str:
    """Drop quote characters, collapse whitespace and trim."""
    text = _QUOTES_RE.sub("", text)
    return _SPACES_RE.sub(" ", text).strip()


def title_case(text: str) -> str:
    """Upper-case the first letter of every word, leaving the rest untouched."""
    return " ".join(w[:1].upper() + w[1:] for w in text.split())


def split_clauses(text: str) -> list[str]:
    """Split free text into sentence-like clauses (newline, ., !, ?)."""
    return _CLAUSE_SPLIT_RE.split(text)


def slugify(text: str) -> str:
    """Convert a label to an id-safe slug.

    "Gardien des Ruines" → "gardien-des-ruines"
    """
    text = unicodedata.normalize("NFKD", text)
    text = text.encode("ascii", "ignore").decode("ascii")
    text = text.lower()
    text = re.sub(r"['\"]", "", text)
    text = re.sub(r"[^a-z0-9]+", "-", text)
    text = text.strip("-")
    return text or "asset"


def strip_label(objective: str) -> str:
    """Drop the positional prefix ("Progression : ") and trailing period of an objective."""
    return _LABEL_PREFIX_RE.sub("", objective).rstrip(".").strip()
