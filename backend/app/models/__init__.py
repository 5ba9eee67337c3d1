from app.models.account import Account
from app.models.portfolio import Portfolio

__all__ = ["Account", "Portfolio"]
