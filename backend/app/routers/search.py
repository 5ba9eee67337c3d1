from fastapi import APIRouter, Depends, Query

from app.config import settings
from app.dependencies import get_search_service
from app.schemas.search import (
    SearchQuery,
    SearchResponse,
    SearchResult,
    SuggestionGroup,
    SuggestionsResponse,
)
from app.services.search_service import PortfolioSearchService
from app.services.suggestions import SEARCH_SUGGESTIONS

router = APIRouter(prefix="/search", tags=["search"])


@router.get("", response_model=SearchResponse)
async def search(
    text: str = Query(""),
    speciality: str | None = Query(None),
    page: int = Query(1, ge=1),
    page_size: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    service: PortfolioSearchService = Depends(get_search_service),
):
    query = SearchQuery(text=text, speciality=speciality, page=page, page_size=page_size)
    result = service.search(query)

    return SearchResponse(
        results=[
            SearchResult(
                name=r.name,
                url=r.url,
                image=r.image,
                description=r.description,
            )
            for r in result.results
        ],
        total_results=result.total_results,
        page=page,
        page_size=page_size,
        query=text,
    )


@router.get("/suggestions", response_model=SuggestionsResponse)
async def suggestions():
    return SuggestionsResponse(
        groups=[SuggestionGroup(category=category, items=items) for category, items in SEARCH_SUGGESTIONS.items()]
    )
