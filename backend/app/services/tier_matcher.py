"""
Three-tier portfolio matching: exact substring, then lay synonym, then fuzzy.

Tiers are tried in priority order and the first one that finds anything wins.
Exact and synonym hits all score 1.0. The fuzzy tier keeps a record only when
every query token is covered (conjunctive), and scores it 1.0 or 0.0 depending
on whether one of its specialities is a close match for a known synonym.
"""
import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Sequence

from app.schemas.portfolio import PortfolioRecord
from app.services.synonyms import SynonymDictionary
from app.utils.text import normalize, similarity

logger = logging.getLogger(__name__)

TOKEN_SIMILARITY_THRESHOLD = 0.7
RELEVANCE_SIMILARITY_THRESHOLD = 0.9


class MatchTier(IntEnum):
    EXACT = 1
    SYNONYM = 2
    FUZZY = 3


@dataclass(frozen=True)
class TierMatch:
    record: PortfolioRecord
    score: float
    tier: MatchTier


@dataclass(frozen=True)
class SpecialityText:
    """Normalized title and description of one speciality."""

    title: str
    description: str

    def contains(self, term: str) -> bool:
        return term in self.title or term in self.description

    @property
    def words(self) -> list[str]:
        return self.title.split() + self.description.split()


def speciality_texts(record: PortfolioRecord) -> list[SpecialityText]:
    return [
        SpecialityText(normalize(s.title), normalize(s.description))
        for s in record.specialities or []
    ]


class TierMatcher:
    def __init__(self, synonyms: SynonymDictionary):
        self.synonyms = synonyms

    def match(
        self,
        query_text: str,
        corpus: Sequence[PortfolioRecord],
        speciality: str | None = None,
    ) -> list[TierMatch]:
        q = normalize(query_text)
        speciality_filter = normalize(speciality)
        candidates = [r for r in corpus if self._passes_filter(r, speciality_filter)]

        tiers = (
            (MatchTier.EXACT, self.exact_matches),
            (MatchTier.SYNONYM, self.synonym_matches),
            (MatchTier.FUZZY, self.fuzzy_matches),
        )
        matches: list[TierMatch] = []
        for tier, find in tiers:
            matches = find(q, candidates)
            if matches:
                logger.debug("Tier %s matched %d of %d candidates for %r", tier.name, len(matches), len(candidates), q)
                break
        return matches

    def exact_matches(self, q: str, corpus: Sequence[PortfolioRecord]) -> list[TierMatch]:
        matches = []
        for record in corpus:
            hit = (
                not q
                or q in normalize(record.name)
                or any(text.contains(q) for text in speciality_texts(record))
            )
            if hit:
                matches.append(TierMatch(record, 1.0, MatchTier.EXACT))
        return matches

    def synonym_matches(self, q: str, corpus: Sequence[PortfolioRecord]) -> list[TierMatch]:
        terms = self.synonyms.canonical_terms_for(q) if q else []
        if not terms:
            return []
        return [
            TierMatch(record, 1.0, MatchTier.SYNONYM)
            for record in corpus
            if any(text.contains(term) for text in speciality_texts(record) for term in terms)
        ]

    def fuzzy_matches(self, q: str, corpus: Sequence[PortfolioRecord]) -> list[TierMatch]:
        tokens = q.split()
        matches = []
        for record in corpus:
            texts = speciality_texts(record)
            words = {word for text in texts for word in text.words}
            if all(self._token_covered(token, words, texts) for token in tokens):
                matches.append(TierMatch(record, self._relevance(q, texts), MatchTier.FUZZY))
        return matches

    def _related_synonyms(self, text: SpecialityText) -> Iterator[str]:
        """Synonyms of every canonical term mentioned in this speciality."""
        for term in self.synonyms.canonical_terms:
            if text.contains(term):
                yield from self.synonyms.synonyms_of(term)

    def _token_covered(self, token: str, words: set[str], texts: list[SpecialityText]) -> bool:
        if token in words:
            return True
        return any(
            similarity(token, synonym) > TOKEN_SIMILARITY_THRESHOLD
            for text in texts
            for synonym in self._related_synonyms(text)
        )

    def _relevance(self, q: str, texts: list[SpecialityText]) -> float:
        for text in texts:
            for synonym in self._related_synonyms(text):
                if q == synonym or similarity(text.title, synonym) > RELEVANCE_SIMILARITY_THRESHOLD:
                    return 1.0
        return 0.0

    @staticmethod
    def _passes_filter(record: PortfolioRecord, speciality_filter: str) -> bool:
        if not speciality_filter:
            return True
        return any(speciality_filter in text.title for text in speciality_texts(record))
