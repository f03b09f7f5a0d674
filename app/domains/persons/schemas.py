# app/domains/persons/schemas.py

"""
'persons' 도메인의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

import uuid
from typing import Optional
from datetime import datetime
from sqlmodel import SQLModel
from pydantic import EmailStr, field_validator


class PersonCreate(SQLModel):
    name: str
    email: EmailStr
    created_by: Optional[str] = None


class PersonUpdate(SQLModel):
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    last_changed_by: Optional[str] = None

    @field_validator("name", "email")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("must not be null")
        return v


class PersonRead(SQLModel):
    id: int
    alt_id: uuid.UUID
    name: str
    email: str
    created_by: str
    created_at: datetime
    last_update: datetime
    last_changed_by: str
