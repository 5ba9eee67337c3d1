import logging
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import settings
from app.models.portfolio import Portfolio
from app.schemas.portfolio import PortfolioRecord, PortfolioResponse, Speciality
from app.services.search_service import CorpusUnavailableError
from app.utils.security import generate_url_suffix
from app.utils.text import slugify

logger = logging.getLogger(__name__)


def utc_now() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class PortfolioCorpus:
    """Reads the full set of portfolios for search."""

    def __init__(self, db: Session):
        self.db = db

    def get_all_portfolios(self) -> list[PortfolioRecord]:
        try:
            rows = self.db.query(Portfolio).order_by(Portfolio.id).all()
        except SQLAlchemyError as exc:
            logger.error("Could not load portfolios: %s", exc)
            raise CorpusUnavailableError(str(exc)) from exc
        return [to_record(p) for p in rows]


def to_record(portfolio: Portfolio) -> PortfolioRecord:
    return PortfolioRecord(
        name=portfolio.name,
        url=portfolio.url,
        image=portfolio.image,
        description=portfolio.description,
        specialities=portfolio.specialities,
    )


def to_response(portfolio: Portfolio) -> PortfolioResponse:
    return PortfolioResponse(
        id=portfolio.id,
        url=portfolio.url,
        name=portfolio.name,
        image=portfolio.image,
        description=portfolio.description,
        specialities=portfolio.specialities or [],
        created_at=portfolio.created_at,
        updated_at=portfolio.updated_at,
    )


def make_portfolio_url(db: Session, name: str) -> str:
    base = slugify(name) or "portfolio"
    while True:
        url = f"{base}-{generate_url_suffix()}"
        if not db.query(Portfolio.id).filter(Portfolio.url == url).first():
            return url


def create_portfolio(db: Session, account_id: int, name: str) -> Portfolio:
    """Default portfolio created alongside a new account. Caller commits."""
    now = utc_now()
    portfolio = Portfolio(
        account_id=account_id,
        url=make_portfolio_url(db, name),
        name=name,
        image=settings.default_image_url,
        description=settings.default_description,
        specialities=[],
        created_at=now,
        updated_at=now,
    )
    db.add(portfolio)
    return portfolio


def set_specialities(portfolio: Portfolio, specialities: list[Speciality]) -> None:
    # Assign a fresh list so the JSON column is flagged dirty.
    portfolio.specialities = [s.model_dump() for s in specialities]
    portfolio.updated_at = utc_now()
