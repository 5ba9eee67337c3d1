from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import require_token
from app.schemas.account import SigninRequest, SigninResponse, SignupRequest, SignupResponse
from app.services.account_service import AccountExistsError, account_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=SignupResponse, status_code=201)
async def signup(req: SignupRequest, db: Session = Depends(get_db)):
    if len(req.password) < 8:
        raise HTTPException(status_code=400, detail="Password must be at least 8 characters")
    try:
        result = account_service.signup(db, req.email, req.password, req.name)
    except AccountExistsError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return SignupResponse(**result)


@router.post("/signin", response_model=SigninResponse)
async def signin(req: SigninRequest, db: Session = Depends(get_db)):
    result = account_service.signin(db, req.email, req.password)
    if result is None:
        raise HTTPException(status_code=401, detail="Invalid email or password")
    return SigninResponse(**result)


@router.post("/signout")
async def signout(token: str = Depends(require_token)):
    account_service.signout(token)
    return {"status": "signed_out"}
