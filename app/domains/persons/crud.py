# app/domains/persons/crud.py

"""
'persons' 테이블의 CRUD(Create, Read, Update, Delete) 작업을 담당하는 저장소 모듈입니다.
"""

from typing import Optional
from pydantic import EmailStr, TypeAdapter, ValidationError
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.crud_base import CRUDEntityBase

from app.domains.persons import models as persons_models
from app.domains.persons import schemas as persons_schemas

# 저장 시와 같은 규칙(도메인 소문자화 등)으로 조회용 이메일을 정규화합니다.
email_adapter = TypeAdapter(EmailStr)


# =============================================================================
# persons 테이블 CRUD
# =============================================================================
class CRUDPerson(CRUDEntityBase[persons_models.Person, persons_schemas.PersonCreate, persons_schemas.PersonUpdate]):
    def __init__(self):
        super().__init__(persons_models.Person)

    async def find_by_email(self, db: AsyncSession, email: str) -> Optional[persons_models.Person]:
        """
        이메일로 사람을 조회합니다. email 은 고유하므로 최대 한 건입니다.
        형식이 올바르지 않은 이메일은 저장될 수 없으므로 None 을 반환합니다.
        """
        try:
            normalized = email_adapter.validate_python(email)
        except ValidationError:
            return None
        return await self.find_first_by_attribute(db, attribute="email", value=normalized)


# CRUD 인스턴스 생성
person = CRUDPerson()
