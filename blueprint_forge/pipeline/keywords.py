"""Keyword extraction for French game briefs."""

import re

from blueprint_forge.text import fold

MAX_KEYWORDS = 12

STOP_WORDS = frozenset({
    "dans", "avec", "des", "les", "une", "aux", "sur", "pour", "entre",
    "plus", "mais", "tout", "tous", "sous", "sans", "leur", "leurs", "lors",
    "cette", "comme", "afin", "être", "vous", "nous", "elles", "ils",
    "alors", "quand", "dont", "ainsi", "quel", "quelle", "quels", "quelles",
    "quelque", "chaque", "sera", "sont", "également", "pendant", "après",
    "avant", "contre", "avoir", "fait", "faire", "cet", "ces", "est", "un",
    "au", "la", "le", "de", "du", "et", "en", "se", "sa", "son", "ses",
    "qui", "que", "par", "ne", "pas", "très", "bien", "ont", "peut", "doit",
    "elle", "lui", "mon", "ton", "notre", "votre", "vers", "chez", "puis",
    "donc", "aussi", "encore", "jamais", "toujours", "depuis", "où", "ou",
})

# Stop words compared after folding so "être" also filters the folded "etre".
_FOLDED_STOP_WORDS = frozenset(fold(w) for w in STOP_WORDS)

_WORD_RE = re.compile(r"[a-zàâäéèêëîïôöùûüç]{4,}")


def is_stop_word(word: str) -> bool:
    return word in STOP_WORDS or fold(word) in _FOLDED_STOP_WORDS


def extract_keywords(text: str, limit: int = MAX_KEYWORDS) -> list[str]:
    """Return up to `limit` significant folded words in first-seen order.

    Tokens need at least 4 letters; stop words and duplicates are skipped.
    Empty or stop-word-only input yields [].
    """
    keywords: list[str] = []
    seen: set[str] = set()
    for word in _WORD_RE.findall(fold(text)):
        if word in _FOLDED_STOP_WORDS or word in seen:
            continue
        seen.add(word)
        keywords.append(word)
        if len(keywords) >= limit:
            break
    return keywords
