"""
Text canonicalisation and bigram (Dice coefficient) similarity.
"""
import re
from collections import Counter

_WHITESPACE = re.compile(r"\s+")


def normalize(text: str | None) -> str:
    """Lower-case, trim and collapse whitespace runs to a single space."""
    if not text:
        return ""
    return _WHITESPACE.sub(" ", text.lower()).strip()


def bigrams(text: str) -> Counter[str]:
    """Multiset of adjacent character pairs, ignoring whitespace."""
    compact = _WHITESPACE.sub("", normalize(text))
    return Counter(compact[i : i + 2] for i in range(len(compact) - 1))


def similarity(a: str | None, b: str | None) -> float:
    """
    Dice coefficient over character bigrams, in [0, 1].
    Identical strings score 1; anything too short to form a bigram scores 0.
    """
    first = _WHITESPACE.sub("", normalize(a))
    second = _WHITESPACE.sub("", normalize(b))
    if first == second:
        return 1.0
    if len(first) < 2 or len(second) < 2:
        return 0.0

    pairs_a = bigrams(first)
    pairs_b = bigrams(second)
    overlap = sum((pairs_a & pairs_b).values())
    return 2.0 * overlap / (sum(pairs_a.values()) + sum(pairs_b.values()))


def slugify(text: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", normalize(text)).strip("-")
