# app/domains/invoices_items/crud.py

"""
'invoices_items' 연결 테이블의 CRUD 작업을 담당하는 저장소 모듈입니다.

- 생성 시 invoice_id / item_id 가 실제로 존재하는지 미리 확인하지 않습니다.
  참조 무결성은 DB 외래 키 제약 조건으로만 검사되며, 위반 시 IntegrityError 가 전파됩니다.
- 이미 존재하는 (invoice_id, item_id) 쌍을 다시 생성하면 복합 기본 키 위반으로 거부됩니다.
"""

import logging
from typing import List, Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.crud_base import CRUDBase
from app.core.identifiers import AltId

from app.domains.invoices_items import models as invoices_items_models
from app.domains.invoices_items import schemas as invoices_items_schemas

logger = logging.getLogger(__name__)


# =============================================================================
# invoices_items 테이블 CRUD (연결 테이블)
# =============================================================================
class CRUDInvoiceItem(CRUDBase[invoices_items_models.InvoiceItem]):
    def __init__(self):
        super().__init__(invoices_items_models.InvoiceItem)

    async def find_by_invoice_id(self, db: AsyncSession, invoice_id: AltId) -> List[invoices_items_models.InvoiceItem]:
        """특정 송장에 연결된 모든 연결 레코드를 조회합니다."""
        return await self.find_by_attribute(db, attribute="invoice_id", value=invoice_id)

    async def find_by_item_id(self, db: AsyncSession, item_id: AltId) -> List[invoices_items_models.InvoiceItem]:
        """특정 품목에 연결된 모든 연결 레코드를 조회합니다."""
        return await self.find_by_attribute(db, attribute="item_id", value=item_id)

    async def find_one(
        self, db: AsyncSession, invoice_id: AltId, item_id: AltId
    ) -> Optional[invoices_items_models.InvoiceItem]:
        """송장 alt_id 와 품목 alt_id 로 연결 정보를 조회합니다 (복합 PK)."""
        statement = self._select_pair(invoice_id, item_id)
        result = await db.execute(statement)
        return result.scalars().first()

    async def create(
        self, db: AsyncSession, *, obj_in: invoices_items_schemas.InvoiceItemCreate
    ) -> invoices_items_models.InvoiceItem:
        """주어진 쌍을 그대로 저장합니다."""
        db_obj = self.model.model_validate(obj_in.model_dump())
        db_obj = await self._insert(db, db_obj)
        logger.info("invoices_items: linked invoice %s -> item %s", db_obj.invoice_id, db_obj.item_id)
        return db_obj

    async def remove(self, db: AsyncSession, invoice_id: AltId, item_id: AltId) -> None:
        """송장과 품목 간의 특정 연결만 삭제합니다."""
        deleted = await self._delete_where(
            db,
            self.model.invoice_id == invoice_id,
            self.model.item_id == item_id,
        )
        logger.info("invoices_items: removed link %s -> %s (%d row(s))", invoice_id, item_id, deleted)

    async def remove_by_invoice_id(self, db: AsyncSession, invoice_id: AltId) -> None:
        """특정 송장을 참조하는 모든 연결을 삭제합니다."""
        deleted = await self._delete_where(db, self.model.invoice_id == invoice_id)
        logger.info("invoices_items: removed %d link(s) of invoice %s", deleted, invoice_id)

    async def remove_by_item_id(self, db: AsyncSession, item_id: AltId) -> None:
        """특정 품목을 참조하는 모든 연결을 삭제합니다."""
        deleted = await self._delete_where(db, self.model.item_id == item_id)
        logger.info("invoices_items: removed %d link(s) of item %s", deleted, item_id)

    def _select_pair(self, invoice_id: AltId, item_id: AltId):
        return select(self.model).where(
            self.model.invoice_id == invoice_id,
            self.model.item_id == item_id,
        )


# CRUD 인스턴스 생성
invoice_item = CRUDInvoiceItem()
