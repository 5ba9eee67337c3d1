from pydantic import BaseModel, Field, field_validator

from app.config import settings


class SearchQuery(BaseModel):
    text: str = ""
    speciality: str | None = None
    page: int = Field(1, ge=1)
    page_size: int = Field(default_factory=lambda: settings.default_page_size, ge=1)

    @field_validator("text", mode="before")
    @classmethod
    def _none_is_empty(cls, value):
        return value or ""


class SearchResult(BaseModel):
    name: str
    url: str
    image: str | None
    description: str | None


class SearchResponse(BaseModel):
    results: list[SearchResult]
    total_results: int
    page: int
    page_size: int
    query: str


class SuggestionGroup(BaseModel):
    category: str
    items: list[str]


class SuggestionsResponse(BaseModel):
    groups: list[SuggestionGroup]
