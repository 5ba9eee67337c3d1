import time

from sqlalchemy.orm import Session

from app.config import settings
from app.models.account import Account
from app.services.portfolio_service import create_portfolio, utc_now
from app.utils.security import generate_token, hash_password, verify_password


class AccountExistsError(ValueError):
    pass


class AccountService:
    def __init__(self):
        self._active_tokens: dict[str, tuple[int, float]] = {}  # token -> (account_id, expires_at)

    def _cleanup_expired(self):
        now = time.time()
        self._active_tokens = {
            t: entry for t, entry in self._active_tokens.items() if entry[1] > now
        }

    def signup(self, db: Session, email: str, password: str, name: str) -> dict:
        email = email.strip().lower()
        if db.query(Account.id).filter(Account.email == email).first():
            raise AccountExistsError("An account with this email already exists")

        account = Account(
            email=email,
            password_hash=hash_password(password),
            name=name,
            created_at=utc_now(),
        )
        db.add(account)
        db.flush()
        portfolio = create_portfolio(db, account.id, name)
        db.commit()

        return {
            "account_id": account.id,
            "email": account.email,
            "portfolio_url": portfolio.url,
        }

    def signin(self, db: Session, email: str, password: str) -> dict | None:
        account = db.query(Account).filter(Account.email == email.strip().lower()).first()
        if not account or not verify_password(account.password_hash, password):
            return None

        token = generate_token()
        self._active_tokens[token] = (account.id, time.time() + settings.session_ttl_seconds)
        return {"token": token, "expires_in_seconds": settings.session_ttl_seconds}

    def signout(self, token: str):
        self._active_tokens.pop(token, None)

    def account_for_token(self, token: str) -> int | None:
        self._cleanup_expired()
        entry = self._active_tokens.get(token)
        return entry[0] if entry else None


account_service = AccountService()
