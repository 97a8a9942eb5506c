"""Pydantic schemas for FastAPI request / response models."""

from __future__ import annotations

from typing import Optional
from pydantic import BaseModel
from pydantic.alias_generators import to_pascal


# ---------------------------------------------------------------------------
# Company
# ---------------------------------------------------------------------------

class CompanyPostModel(BaseModel):
    """Request body for create / patch / put. Every field may be omitted."""

    name: Optional[str] = None
    city: Optional[str] = None
    street: Optional[str] = None
    pib: Optional[str] = None
    maticni_broj: Optional[str] = None
    is_active: Optional[bool] = None

    class Config:
        alias_generator = to_pascal
        populate_by_name = True


class CompanyRead(BaseModel):
    id: int
    name: str = ""
    city: str = ""
    street: str = ""
    pib: str = ""
    maticni_broj: str = ""
    is_active: bool = False

    class Config:
        alias_generator = to_pascal
        populate_by_name = True
        from_attributes = True


class CompanyCreated(BaseModel):
    id: int


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class ValidationProblem(BaseModel):
    title: str = "One or more validation errors occurred."
    status: int = 400
    errors: dict[str, list[str]] = {}
