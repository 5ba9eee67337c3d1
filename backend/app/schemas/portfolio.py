from pydantic import BaseModel, Field, field_validator


class Speciality(BaseModel):
    title: str = ""
    description: str | None = None
    icon: str = ""


class PortfolioRecord(BaseModel):
    """Read-only view of a portfolio as seen by search."""

    name: str
    url: str
    image: str | None = None
    description: str | None = None
    specialities: list[Speciality] = []

    @field_validator("specialities", mode="before")
    @classmethod
    def _missing_specialities(cls, value):
        return value or []


class PortfolioUpdate(BaseModel):
    name: str | None = Field(None, min_length=1)
    image: str | None = None
    description: str | None = None

    @field_validator("name")
    @classmethod
    def _name_not_null(cls, value):
        # Only runs when a name is sent; omitting it leaves the name unchanged.
        if value is None:
            raise ValueError("name cannot be null")
        return value


class SpecialitiesUpdate(BaseModel):
    specialities: list[Speciality]


class PortfolioResponse(BaseModel):
    id: int
    url: str
    name: str
    image: str | None
    description: str | None
    specialities: list[Speciality] = []
    created_at: str
    updated_at: str


class PortfolioListResponse(BaseModel):
    portfolios: list[PortfolioResponse]
    total: int
    page: int
    per_page: int
