"""
SQLAlchemy ORM models.

Tables
------
companies  -- company business records (tax id, registration number, address)
"""

from __future__ import annotations

from sqlalchemy import Boolean, Column, Integer, String

from .database import Base


# Largest id an Integer column holds on every supported backend (PostgreSQL int4)
MAX_COMPANY_ID = 2_147_483_647


class Company(Base):
    __tablename__ = "companies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(512), nullable=False, default="")
    city = Column(String(256), nullable=False, default="")
    street = Column(String(512), nullable=False, default="")
    pib = Column(String(20), nullable=False, default="")  # tax id, 9 digits
    maticni_broj = Column(String(20), nullable=False, default="")  # registration no., 8 digits
    is_active = Column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"Company(id={self.id!r}, name={self.name!r})"


def column_names(include_primary_key: bool = False) -> list[str]:
    """Names of the mapped ``companies`` columns in declaration order."""
    return [
        col.key
        for col in Company.__table__.columns
        if include_primary_key or not col.primary_key
    ]


def company_values(company: Company) -> dict:
    """Snapshot of every column value, primary key included."""
    return {name: getattr(company, name) for name in column_names(include_primary_key=True)}
