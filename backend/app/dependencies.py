from fastapi import Depends, Header, HTTPException, Request
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.portfolio import Portfolio
from app.services.account_service import account_service
from app.services.portfolio_service import PortfolioCorpus
from app.services.search_service import PortfolioSearchService
from app.services.synonyms import SynonymDictionary


async def require_token(authorization: str = Header(...)) -> str:
    if not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Missing bearer token")
    return authorization[7:]


async def require_account(token: str = Depends(require_token)) -> int:
    account_id = account_service.account_for_token(token)
    if account_id is None:
        raise HTTPException(status_code=401, detail="Not signed in or session expired")
    return account_id


def get_own_portfolio(
    account_id: int = Depends(require_account),
    db: Session = Depends(get_db),
) -> Portfolio:
    portfolio = db.query(Portfolio).filter(Portfolio.account_id == account_id).first()
    if not portfolio:
        raise HTTPException(status_code=404, detail="Portfolio not found")
    return portfolio


def get_synonyms(request: Request) -> SynonymDictionary:
    return request.app.state.synonyms


def get_search_service(
    db: Session = Depends(get_db),
    synonyms: SynonymDictionary = Depends(get_synonyms),
) -> PortfolioSearchService:
    return PortfolioSearchService(PortfolioCorpus(db), synonyms)
