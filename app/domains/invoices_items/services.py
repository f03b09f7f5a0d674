# app/domains/invoices_items/services.py

"""
invoices_items(송장-품목 연결) 도메인의 서비스 계층입니다.
참조 대상의 존재 여부는 여기서 확인하지 않습니다.
"""

from typing import List, Optional
from fastapi import Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.database import get_session
from app.core.identifiers import AltId

from app.domains.invoices_items import crud as invoices_items_crud
from app.domains.invoices_items import models as invoices_items_models
from app.domains.invoices_items import schemas as invoices_items_schemas


class InvoicesItemsService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.crud = invoices_items_crud.invoice_item

    async def find_all(self) -> List[invoices_items_models.InvoiceItem]:
        return await self.crud.find_all(self.db)

    async def find_by_invoice_id(self, invoice_id: AltId) -> List[invoices_items_models.InvoiceItem]:
        return await self.crud.find_by_invoice_id(self.db, invoice_id)

    async def find_by_item_id(self, item_id: AltId) -> List[invoices_items_models.InvoiceItem]:
        return await self.crud.find_by_item_id(self.db, item_id)

    async def find_one(self, invoice_id: AltId, item_id: AltId) -> Optional[invoices_items_models.InvoiceItem]:
        return await self.crud.find_one(self.db, invoice_id, item_id)

    async def create(self, obj_in: invoices_items_schemas.InvoiceItemCreate) -> invoices_items_models.InvoiceItem:
        return await self.crud.create(self.db, obj_in=obj_in)

    async def remove(self, invoice_id: AltId, item_id: AltId) -> None:
        await self.crud.remove(self.db, invoice_id, item_id)

    async def remove_by_invoice_id(self, invoice_id: AltId) -> None:
        await self.crud.remove_by_invoice_id(self.db, invoice_id)

    async def remove_by_item_id(self, item_id: AltId) -> None:
        await self.crud.remove_by_item_id(self.db, item_id)


def get_invoices_items_service(db: AsyncSession = Depends(get_session)) -> InvoicesItemsService:
    return InvoicesItemsService(db)
