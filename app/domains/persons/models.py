# app/domains/persons/models.py

"""
'persons' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

persons.alt_id 는 invoices.user_id 의 참조 대상입니다.
email 의 유일성은 DB 제약 조건으로 보장됩니다.
"""

import uuid
from typing import Optional
from datetime import datetime, UTC
from sqlmodel import Field, SQLModel, Column
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP, Text


# =============================================================================
# persons 테이블 모델
# =============================================================================
class PersonBase(SQLModel):
    """
    persons 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    alt_id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        unique=True,
        nullable=False,
        description="외부 식별자 (엔티티 간 참조용, 변경 불가)"
    )
    name: str = Field(sa_column=Column(Text, nullable=False), description="이름")
    email: str = Field(sa_column=Column(Text, nullable=False, unique=True), description="이메일 (고유)")
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


class Person(PersonBase, table=True):
    """
    persons 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "persons"
