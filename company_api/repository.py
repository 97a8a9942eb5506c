from __future__ import annotations

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from company_api.models import MAX_COMPANY_ID, Company


class CompanyRepository:
    """Entity store for Company rows on top of one AsyncSession."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, company_id: int) -> Optional[Company]:
        # Ids outside the column range cannot exist; the driver rejects them
        if not 0 < company_id <= MAX_COMPANY_ID:
            return None
        return await self.session.get(Company, company_id)

    async def list_all(self) -> list[Company]:
        result = await self.session.execute(select(Company).order_by(Company.id))
        return list(result.scalars().all())

    async def count(self) -> int:
        return (await self.session.execute(select(func.count(Company.id)))).scalar() or 0

    def add(self, company: Company):
        self.session.add(company)

    async def delete(self, company: Company):
        await self.session.delete(company)

    async def commit(self):
        await self.session.commit()
