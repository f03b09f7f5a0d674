# app/domains/invoices/services.py

"""
invoices 도메인의 서비스 계층입니다.
"""

from typing import List, Optional
from fastapi import Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.database import get_session
from app.core.identifiers import AltId, InternalId

from app.domains.invoices import crud as invoices_crud
from app.domains.invoices import models as invoices_models
from app.domains.invoices import schemas as invoices_schemas


class InvoicesService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.crud = invoices_crud.invoice

    async def find_all(self) -> List[invoices_models.Invoice]:
        return await self.crud.find_all(self.db)

    async def find_one(self, id: InternalId) -> Optional[invoices_models.Invoice]:
        return await self.crud.find_one(self.db, id)

    async def find_by_alt_id(self, alt_id: AltId) -> Optional[invoices_models.Invoice]:
        return await self.crud.find_by_alt_id(self.db, alt_id)

    async def find_by_user_id(self, user_id: AltId) -> List[invoices_models.Invoice]:
        return await self.crud.find_by_user_id(self.db, user_id)

    async def create(self, obj_in: invoices_schemas.InvoiceCreate) -> invoices_models.Invoice:
        return await self.crud.create(self.db, obj_in=obj_in)

    async def update(self, id: InternalId, obj_in: invoices_schemas.InvoiceUpdate) -> Optional[invoices_models.Invoice]:
        return await self.crud.update(self.db, id=id, obj_in=obj_in)

    async def remove(self, id: InternalId) -> None:
        await self.crud.remove(self.db, id=id)


def get_invoices_service(db: AsyncSession = Depends(get_session)) -> InvoicesService:
    return InvoicesService(db)
