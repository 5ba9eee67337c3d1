from pydantic import BaseModel, Field


class SignupRequest(BaseModel):
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    password: str
    name: str = Field(..., min_length=1)


class SignupResponse(BaseModel):
    account_id: int
    email: str
    portfolio_url: str


class SigninRequest(BaseModel):
    email: str
    password: str


class SigninResponse(BaseModel):
    token: str
    expires_in_seconds: int
