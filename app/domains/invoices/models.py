# app/domains/invoices/models.py

"""
'invoices' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

invoices.user_id 는 persons.id 가 아니라 persons.alt_id 를 참조합니다.
"""

import uuid
from decimal import Decimal
from typing import Optional
from datetime import datetime, UTC
from sqlmodel import Field, SQLModel, Column
from sqlalchemy.sql import func, expression
from sqlalchemy.types import TIMESTAMP, Boolean, Text


# =============================================================================
# invoices 테이블 모델
# =============================================================================
class InvoiceBase(SQLModel):
    """
    invoices 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    alt_id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        unique=True,
        nullable=False,
        description="외부 식별자 (엔티티 간 참조용, 변경 불가)"
    )
    total: Decimal = Field(max_digits=15, decimal_places=2, description="송장 총액")
    paid: bool = Field(
        default=False,
        sa_column=Column(Boolean, nullable=False, server_default=expression.false()),
        description="지불 여부"
    )
    user_id: uuid.UUID = Field(
        foreign_key="persons.alt_id",
        nullable=False,
        index=True,
        description="소유자 Person 의 alt_id (FK)"
    )
    created_by: str = Field(sa_column=Column(Text, nullable=False), description="생성자")

    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now()),
        description="레코드 생성 일시"
    )
    last_update: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now()),
        description="레코드 마지막 업데이트 일시"
    )
    last_changed_by: str = Field(
        default="system",
        sa_column=Column(Text, nullable=False, server_default="system"),
        description="마지막 수정자"
    )


class Invoice(InvoiceBase, table=True):
    """
    invoices 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "invoices"
