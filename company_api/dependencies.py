"""
FastAPI dependency providers.

One CompanyService per request, wired to the request's AsyncSession.
"""

from __future__ import annotations

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from company_api.database import get_session
from company_api.merge import CompanyMerger
from company_api.repository import CompanyRepository
from company_api.service import CompanyService
from company_api.validators import CompanyValidator

_merger = CompanyMerger()
_validator = CompanyValidator()


def get_merger() -> CompanyMerger:
    return _merger


def get_validator() -> CompanyValidator:
    return _validator


def get_company_service(
    session: AsyncSession = Depends(get_session),
    merger: CompanyMerger = Depends(get_merger),
) -> CompanyService:
    return CompanyService(CompanyRepository(session), merger)
