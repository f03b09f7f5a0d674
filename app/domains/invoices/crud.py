# app/domains/invoices/crud.py

"""
'invoices' 테이블의 CRUD(Create, Read, Update, Delete) 작업을 담당하는 저장소 모듈입니다.
total 은 모든 읽기 경로에서 Decimal 로 정규화됩니다.
"""

from typing import List
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.crud_base import CRUDEntityBase
from app.core.identifiers import AltId

from app.domains.invoices import models as invoices_models
from app.domains.invoices import schemas as invoices_schemas


# =============================================================================
# invoices 테이블 CRUD
# =============================================================================
class CRUDInvoice(CRUDEntityBase[invoices_models.Invoice, invoices_schemas.InvoiceCreate, invoices_schemas.InvoiceUpdate]):
    decimal_fields = ("total",)

    def __init__(self):
        super().__init__(invoices_models.Invoice)

    async def find_by_user_id(self, db: AsyncSession, user_id: AltId) -> List[invoices_models.Invoice]:
        """특정 사람(Person.alt_id)이 소유한 모든 송장 목록을 조회합니다."""
        return await self.find_by_attribute(db, attribute="user_id", value=user_id)


# CRUD 인스턴스 생성
invoice = CRUDInvoice()
