# app/domains/items/schemas.py

"""
'items' 도메인의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
생성 요청에는 id / alt_id 가 포함되지 않으며, 둘 다 서버에서 부여됩니다.
"""

import uuid
from decimal import Decimal
from typing import Optional
from datetime import datetime
from sqlmodel import SQLModel, Field
from pydantic import field_serializer, field_validator


class ItemCreate(SQLModel):
    name: str = Field(..., max_length=255)
    description: str
    unit_price: Decimal = Field(..., max_digits=15, decimal_places=2)
    created_by: Optional[str] = None


class ItemUpdate(SQLModel):
    name: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    unit_price: Optional[Decimal] = Field(None, max_digits=15, decimal_places=2)
    last_changed_by: Optional[str] = None

    # 생략은 허용하지만 NOT NULL 컬럼에 명시적인 null 은 허용하지 않습니다.
    @field_validator("name", "description", "unit_price")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("must not be null")
        return v


class ItemRead(SQLModel):
    id: int
    alt_id: uuid.UUID
    name: str
    description: str
    unit_price: Decimal
    created_by: str
    created_at: datetime
    last_update: datetime
    last_changed_by: str

    # 단가는 JSON 에서 문자열이 아닌 숫자로 직렬화합니다.
    @field_serializer("unit_price", when_used="json")
    def serialize_unit_price(self, value: Decimal) -> float:
        return float(value)
