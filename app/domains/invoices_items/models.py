# app/domains/invoices_items/models.py

"""
'invoices_items' 도메인 (송장-품목 다대다 연결 테이블)의 ORM 모델을 정의하는 모듈입니다.

대리 키(id) 없이 (invoice_id, item_id) 복합 기본 키로만 식별됩니다.
두 컬럼은 각각 invoices.alt_id, items.alt_id 를 참조하며,
참조 대상 행이 삭제되면 연결 행도 DB 에서 함께 삭제됩니다 (ON DELETE CASCADE).
"""

import uuid
from sqlmodel import Field, SQLModel, Column
from sqlalchemy import ForeignKey, Uuid


# =============================================================================
# invoices_items 테이블 모델 (연결 테이블)
# =============================================================================
class InvoiceItem(SQLModel, table=True):
    """
    Invoice와 Item의 다대다 관계를 위한 연결(link) 테이블 모델입니다.
    """
    __tablename__ = "invoices_items"

    invoice_id: uuid.UUID = Field(
        sa_column=Column(
            Uuid,
            ForeignKey("invoices.alt_id", ondelete="CASCADE"),
            primary_key=True,
        ),
        description="송장 alt_id (FK, 복합 PK)"
    )
    item_id: uuid.UUID = Field(
        sa_column=Column(
            Uuid,
            ForeignKey("items.alt_id", ondelete="CASCADE"),
            primary_key=True,
        ),
        description="품목 alt_id (FK, 복합 PK)"
    )
