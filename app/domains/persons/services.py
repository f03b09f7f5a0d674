# app/domains/persons/services.py

"""
persons 도메인의 서비스 계층입니다.
"""

from typing import List, Optional
from fastapi import Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.database import get_session
from app.core.identifiers import AltId, InternalId

from app.domains.persons import crud as persons_crud
from app.domains.persons import models as persons_models
from app.domains.persons import schemas as persons_schemas


class PersonsService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.crud = persons_crud.person

    async def find_all(self) -> List[persons_models.Person]:
        return await self.crud.find_all(self.db)

    async def find_one(self, id: InternalId) -> Optional[persons_models.Person]:
        return await self.crud.find_one(self.db, id)

    async def find_by_alt_id(self, alt_id: AltId) -> Optional[persons_models.Person]:
        return await self.crud.find_by_alt_id(self.db, alt_id)

    async def find_by_email(self, email: str) -> Optional[persons_models.Person]:
        return await self.crud.find_by_email(self.db, email)

    async def create(self, obj_in: persons_schemas.PersonCreate) -> persons_models.Person:
        return await self.crud.create(self.db, obj_in=obj_in)

    async def update(self, id: InternalId, obj_in: persons_schemas.PersonUpdate) -> Optional[persons_models.Person]:
        return await self.crud.update(self.db, id=id, obj_in=obj_in)

    async def remove(self, id: InternalId) -> None:
        await self.crud.remove(self.db, id=id)


def get_persons_service(db: AsyncSession = Depends(get_session)) -> PersonsService:
    return PersonsService(db)
