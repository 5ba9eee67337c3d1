import logging
from dataclasses import dataclass
from typing import Protocol, Sequence, TypeVar

from app.schemas.portfolio import PortfolioRecord
from app.schemas.search import SearchQuery
from app.services.synonyms import SynonymDictionary
from app.services.tier_matcher import TierMatch, TierMatcher

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CorpusUnavailableError(Exception):
    """The portfolio store could not be read."""


class CorpusProvider(Protocol):
    def get_all_portfolios(self) -> list[PortfolioRecord]: ...


@dataclass(frozen=True)
class RankedResult:
    name: str
    url: str
    image: str | None
    description: str | None
    score: float


@dataclass
class SearchResultPage:
    results: list[RankedResult]
    total_results: int


def rank(matches: Sequence[TierMatch]) -> list[TierMatch]:
    """Order by score, highest first. Equal scores keep discovery order."""
    return sorted(matches, key=lambda m: m.score, reverse=True)


def paginate(items: Sequence[T], page: int, page_size: int) -> tuple[list[T], int]:
    """
    Slice one 1-based page out of ``items``.
    Returns the slice and the total item count; a page past the end is empty.
    """
    if page < 1:
        raise ValueError("page must be >= 1")
    if page_size < 1:
        raise ValueError("page_size must be >= 1")
    start = (page - 1) * page_size
    return list(items[start : start + page_size]), len(items)


class PortfolioSearchService:
    def __init__(self, corpus: CorpusProvider, synonyms: SynonymDictionary):
        self.corpus = corpus
        self.matcher = TierMatcher(synonyms)

    def search(self, query: SearchQuery) -> SearchResultPage:
        try:
            records = self.corpus.get_all_portfolios()
        except CorpusUnavailableError as exc:
            logger.warning("Portfolio corpus unavailable, returning no results: %s", exc)
            return SearchResultPage(results=[], total_results=0)

        if not records:
            return SearchResultPage(results=[], total_results=0)

        matches = self.matcher.match(query.text, records, speciality=query.speciality)
        page, total = paginate(rank(matches), query.page, query.page_size)
        logger.info(
            "Search text=%r speciality=%r matched %d portfolios (page %d)",
            query.text, query.speciality, total, query.page,
        )
        return SearchResultPage(
            results=[
                RankedResult(
                    name=m.record.name,
                    url=m.record.url,
                    image=m.record.image,
                    description=m.record.description,
                    score=m.score,
                )
                for m in page
            ],
            total_results=total,
        )
