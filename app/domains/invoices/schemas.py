# app/domains/invoices/schemas.py

"""
'invoices' 도메인의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
user_id 는 Person 의 외부 식별자(alt_id)입니다.
"""

import uuid
from decimal import Decimal
from typing import Optional
from datetime import datetime
from sqlmodel import SQLModel, Field
from pydantic import field_serializer, field_validator

from app.core.identifiers import AltId


class InvoiceCreate(SQLModel):
    total: Decimal = Field(..., max_digits=15, decimal_places=2)
    paid: bool = False
    user_id: AltId
    created_by: Optional[str] = None


class InvoiceUpdate(SQLModel):
    total: Optional[Decimal] = Field(None, max_digits=15, decimal_places=2)
    paid: Optional[bool] = None
    user_id: Optional[AltId] = None
    last_changed_by: Optional[str] = None

    @field_validator("total", "paid", "user_id")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("must not be null")
        return v


class InvoiceRead(SQLModel):
    id: int
    alt_id: uuid.UUID
    total: Decimal
    paid: bool
    user_id: uuid.UUID
    created_by: str
    created_at: datetime
    last_update: datetime
    last_changed_by: str

    # 총액은 JSON 에서 문자열이 아닌 숫자로 직렬화합니다.
    @field_serializer("total", when_used="json")
    def serialize_total(self, value: Decimal) -> float:
        return float(value)
