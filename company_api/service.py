"""Company service -- list / get / create / delete / merge / replace."""

from __future__ import annotations

import logging
from typing import Optional

from company_api.errors import CompanyNotFoundError
from company_api.merge import CompanyMerger, MergeStrategy
from company_api.models import Company, column_names
from company_api.repository import CompanyRepository
from company_api.schemas import CompanyPostModel

logger = logging.getLogger(__name__)


def company_from_post_model(payload: CompanyPostModel) -> Company:
    """Build a transient Company; omitted text becomes "" and IsActive False."""
    return Company(
        name=payload.name or "",
        city=payload.city or "",
        street=payload.street or "",
        pib=payload.pib or "",
        maticni_broj=payload.maticni_broj or "",
        is_active=bool(payload.is_active),
    )


class CompanyService:
    def __init__(self, repository: CompanyRepository, merger: CompanyMerger):
        self.repository = repository
        self.merger = merger

    async def _require(self, company_id: int) -> Company:
        company = await self.repository.get(company_id)
        if company is None:
            raise CompanyNotFoundError(company_id)
        return company

    async def list_companies(self) -> Optional[list[Company]]:
        """All companies in insertion order, or None when the table is empty."""
        companies = await self.repository.list_all()
        if not companies:
            return None
        return companies

    async def get_company(self, company_id: int) -> Company:
        return await self._require(company_id)

    async def create_company(self, company: Company) -> int:
        company.id = None
        self.repository.add(company)
        await self.repository.commit()
        logger.info("Created company %s (%s)", company.id, company.name)
        return company.id

    async def delete_company(self, company_id: int):
        company = await self._require(company_id)
        await self.repository.delete(company)
        await self.repository.commit()
        logger.info("Deleted company %s", company_id)

    async def update_company_by_merge(
        self,
        company_id: int,
        patch: CompanyPostModel,
        strategy: MergeStrategy = MergeStrategy.REFLECTION,
    ):
        company = await self._require(company_id)
        self.merger.merge(company, patch, strategy)
        await self.repository.commit()
        logger.info("Patched company %s using %s", company_id, MergeStrategy(strategy).value)

    async def replace_company(self, company_id: int, company: Company):
        existing = await self._require(company_id)
        company.id = existing.id
        for name in column_names():
            setattr(existing, name, getattr(company, name))
        await self.repository.commit()
        logger.info("Replaced company %s", company_id)
