# app/domains/items/services.py

"""
items 도메인의 서비스 계층입니다.
라우터와 저장소(crud) 사이에서 요청을 그대로 전달합니다.
"""

from typing import List, Optional
from fastapi import Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.database import get_session
from app.core.identifiers import AltId, InternalId

from app.domains.items import crud as items_crud
from app.domains.items import models as items_models
from app.domains.items import schemas as items_schemas


class ItemsService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.crud = items_crud.item

    async def find_all(self) -> List[items_models.Item]:
        return await self.crud.find_all(self.db)

    async def find_one(self, id: InternalId) -> Optional[items_models.Item]:
        return await self.crud.find_one(self.db, id)

    async def find_by_alt_id(self, alt_id: AltId) -> Optional[items_models.Item]:
        return await self.crud.find_by_alt_id(self.db, alt_id)

    async def create(self, obj_in: items_schemas.ItemCreate) -> items_models.Item:
        return await self.crud.create(self.db, obj_in=obj_in)

    async def update(self, id: InternalId, obj_in: items_schemas.ItemUpdate) -> Optional[items_models.Item]:
        return await self.crud.update(self.db, id=id, obj_in=obj_in)

    async def remove(self, id: InternalId) -> None:
        await self.crud.remove(self.db, id=id)


def get_items_service(db: AsyncSession = Depends(get_session)) -> ItemsService:
    return ItemsService(db)
