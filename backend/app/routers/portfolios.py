from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_own_portfolio
from app.models.portfolio import Portfolio
from app.schemas.portfolio import (
    PortfolioListResponse,
    PortfolioResponse,
    PortfolioUpdate,
    SpecialitiesUpdate,
    Speciality,
)
from app.services.portfolio_service import set_specialities, to_response, utc_now

router = APIRouter(prefix="/portfolios", tags=["portfolios"])


@router.get("", response_model=PortfolioListResponse)
async def list_portfolios(
    page: int = Query(1, ge=1),
    per_page: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db),
):
    query = db.query(Portfolio)
    total = query.count()
    portfolios = query.order_by(Portfolio.id).offset((page - 1) * per_page).limit(per_page).all()

    return PortfolioListResponse(
        portfolios=[to_response(p) for p in portfolios],
        total=total,
        page=page,
        per_page=per_page,
    )


@router.get("/me", response_model=PortfolioResponse)
async def get_my_portfolio(portfolio: Portfolio = Depends(get_own_portfolio)):
    return to_response(portfolio)


@router.put("/me", response_model=PortfolioResponse)
async def update_my_portfolio(
    req: PortfolioUpdate,
    portfolio: Portfolio = Depends(get_own_portfolio),
    db: Session = Depends(get_db),
):
    update_data = req.model_dump(exclude_unset=True)
    for key, value in update_data.items():
        setattr(portfolio, key, value)
    portfolio.updated_at = utc_now()

    db.commit()
    db.refresh(portfolio)
    return to_response(portfolio)


@router.put("/me/specialities", response_model=PortfolioResponse)
async def replace_specialities(
    req: SpecialitiesUpdate,
    portfolio: Portfolio = Depends(get_own_portfolio),
    db: Session = Depends(get_db),
):
    set_specialities(portfolio, req.specialities)
    db.commit()
    db.refresh(portfolio)
    return to_response(portfolio)


@router.post("/me/specialities", response_model=PortfolioResponse, status_code=201)
async def add_speciality(
    req: Speciality,
    portfolio: Portfolio = Depends(get_own_portfolio),
    db: Session = Depends(get_db),
):
    current = [Speciality(**s) for s in portfolio.specialities or []]
    set_specialities(portfolio, current + [req])
    db.commit()
    db.refresh(portfolio)
    return to_response(portfolio)


@router.delete("/me/specialities/{index}", response_model=PortfolioResponse)
async def remove_speciality(
    index: int,
    portfolio: Portfolio = Depends(get_own_portfolio),
    db: Session = Depends(get_db),
):
    current = [Speciality(**s) for s in portfolio.specialities or []]
    if not 0 <= index < len(current):
        raise HTTPException(status_code=404, detail="Speciality not found")
    del current[index]
    set_specialities(portfolio, current)
    db.commit()
    db.refresh(portfolio)
    return to_response(portfolio)


@router.get("/{url}", response_model=PortfolioResponse)
async def get_portfolio(url: str, db: Session = Depends(get_db)):
    portfolio = db.query(Portfolio).filter(Portfolio.url == url).first()
    if not portfolio:
        raise HTTPException(status_code=404, detail="Portfolio not found")
    return to_response(portfolio)
