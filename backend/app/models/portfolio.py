from sqlalchemy import JSON, Column, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship
from app.database import Base


class Portfolio(Base):
    __tablename__ = "portfolios"

    id = Column(Integer, primary_key=True, autoincrement=True)
    account_id = Column(Integer, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False, unique=True)
    url = Column(Text, nullable=False, unique=True)
    name = Column(Text, nullable=False)
    image = Column(Text)
    description = Column(Text)
    # Ordered list of {"title", "description", "icon"} dicts
    specialities = Column(JSON)
    created_at = Column(Text, nullable=False)
    updated_at = Column(Text, nullable=False)

    account = relationship("Account", back_populates="portfolio")
