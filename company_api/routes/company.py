"""Company endpoints -- CRUD over /api/company."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Response, status

from company_api.dependencies import get_company_service, get_validator
from company_api.errors import CompanyNotFoundError
from company_api.merge import MergeStrategy
from company_api.schemas import CompanyCreated, CompanyPostModel, CompanyRead
from company_api.service import CompanyService, company_from_post_model
from company_api.validators import CompanyValidator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/company", tags=["company"])


def _require_positive_id(company_id: int, detail: str):
    if company_id <= 0:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


@router.get("", response_model=list[CompanyRead])
async def get_companies(service: CompanyService = Depends(get_company_service)):
    companies = await service.list_companies()
    if companies is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return [CompanyRead.model_validate(c) for c in companies]


@router.get("/{company_id}", response_model=CompanyRead)
async def get_company(company_id: int, service: CompanyService = Depends(get_company_service)):
    _require_positive_id(company_id, "Invalid company ID.")
    try:
        company = await service.get_company(company_id)
    except CompanyNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return CompanyRead.model_validate(company)


@router.post("", response_model=CompanyCreated, status_code=status.HTTP_201_CREATED)
async def create_company(
    payload: Optional[CompanyPostModel] = Body(default=None),
    service: CompanyService = Depends(get_company_service),
    validator: CompanyValidator = Depends(get_validator),
):
    if payload is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Company data is required.")
    # InvalidCompanyError is rendered by the app-level handler
    validator.ensure_valid(payload)

    try:
        company_id = await service.create_company(company_from_post_model(payload))
    except Exception as e:
        logger.error("Company creation failed: %s", e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    return CompanyCreated(id=company_id)


@router.delete("/{company_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_company(company_id: int, service: CompanyService = Depends(get_company_service)):
    _require_positive_id(company_id, "Invalid company ID.")
    try:
        await service.delete_company(company_id)
    except CompanyNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{company_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_company(
    company_id: int,
    payload: Optional[CompanyPostModel] = Body(default=None),
    reflection: bool = True,
    service: CompanyService = Depends(get_company_service),
):
    if payload is None or company_id <= 0:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid company data.")

    strategy = MergeStrategy.REFLECTION if reflection else MergeStrategy.MAPPING
    try:
        await service.update_company_by_merge(company_id, payload, strategy)
    except CompanyNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        logger.error("Company %s patch failed: %s", company_id, e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Internal server error: {e}",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{company_id}", status_code=status.HTTP_204_NO_CONTENT)
async def replace_company(
    company_id: int,
    payload: Optional[CompanyPostModel] = Body(default=None),
    service: CompanyService = Depends(get_company_service),
):
    if payload is None or company_id <= 0:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid company data.")

    try:
        await service.replace_company(company_id, company_from_post_model(payload))
    except CompanyNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        logger.error("Company %s replace failed: %s", company_id, e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Internal server error: {e}",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
