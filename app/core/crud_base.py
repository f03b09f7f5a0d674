# app/core/crud_base.py

"""
공통 CRUD(Create, Read, Update, Delete) 작업을 위한 기본 클래스 모듈입니다.
모든 메서드는 비동기(async) 환경에 맞게 작성되었습니다.

- CRUDBase: 모델과 테이블에 대한 공통 조회/삭제, Decimal 정규화, 커밋/롤백 처리.
- CRUDEntityBase: 내부 키(id)와 외부 식별자(alt_id)를 가진 주요 엔티티용 저장소.
  생성 시 created_by, 수정 시 last_update / last_changed_by 기본값 정책을 적용합니다.

조회 결과가 없으면 예외 대신 None(또는 빈 리스트)을 반환합니다.
DB 예외(연결 오류, 제약 조건 위반)는 세션을 롤백한 뒤 그대로 호출자에게 전파합니다.
"""

import logging
from typing import Any, Generic, List, Optional, Sequence, Tuple, Type, TypeVar
from datetime import datetime, UTC

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession
from pydantic import BaseModel

from app.core.identifiers import AltId, InternalId, SYSTEM_USER, to_money

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=SQLModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType]):
    """
    모든 저장소가 공유하는 기본 클래스를 정의합니다.
    """
    # DB 드라이버가 문자열 등으로 돌려줄 수 있는 고정 소수점 컬럼 목록
    decimal_fields: Tuple[str, ...] = ()

    def __init__(self, model: Type[ModelType]):
        self.model = model

    @property
    def table_name(self) -> str:
        return self.model.__tablename__

    def _normalize(self, db_obj: Optional[ModelType]) -> Optional[ModelType]:
        """
        읽기 경로마다 호출되어 decimal_fields 값을 Decimal 로 변환합니다.
        """
        if db_obj is None:
            return None
        for field in self.decimal_fields:
            setattr(db_obj, field, to_money(getattr(db_obj, field)))
        return db_obj

    def _normalize_all(self, db_objs: Sequence[ModelType]) -> List[ModelType]:
        return [self._normalize(db_obj) for db_obj in db_objs]

    async def _commit(self, db: AsyncSession) -> None:
        """
        커밋에 실패하면 세션을 롤백하고 원래 예외를 그대로 다시 발생시킵니다.
        """
        try:
            await db.commit()
        except SQLAlchemyError:
            await db.rollback()
            raise

    async def _insert(self, db: AsyncSession, db_obj: ModelType) -> ModelType:
        db.add(db_obj)
        await self._commit(db)
        await db.refresh(db_obj)
        return self._normalize(db_obj)

    async def _delete_where(self, db: AsyncSession, *conditions: Any) -> int:
        """
        조건에 맞는 행을 모두 삭제하고 삭제된 행 수를 반환합니다. 0건이어도 오류가 아닙니다.
        """
        statement = delete(self.model).where(*conditions)
        try:
            result = await db.execute(statement)
        except SQLAlchemyError:
            await db.rollback()
            raise
        await self._commit(db)
        return result.rowcount

    async def find_all(self, db: AsyncSession) -> List[ModelType]:
        """
        모든 레코드를 조회합니다.
        """
        result = await db.execute(select(self.model))
        return self._normalize_all(result.scalars().all())

    async def find_by_attribute(self, db: AsyncSession, *, attribute: str, value: Any) -> List[ModelType]:
        """
        특정 속성 값이 일치하는 레코드 목록을 조회합니다. 없으면 빈 리스트를 반환합니다.
        """
        statement = select(self.model).where(getattr(self.model, attribute) == value)
        result = await db.execute(statement)
        return self._normalize_all(result.scalars().all())

    async def find_first_by_attribute(self, db: AsyncSession, *, attribute: str, value: Any) -> Optional[ModelType]:
        """
        조건을 만족하는 첫 번째 레코드를 반환하며, 없으면 None 을 반환합니다.
        """
        statement = select(self.model).where(getattr(self.model, attribute) == value)
        result = await db.execute(statement)
        db_obj = result.scalars().first()
        if db_obj is None:
            logger.debug("%s: no row where %s=%s", self.table_name, attribute, value)
        return self._normalize(db_obj)


class CRUDEntityBase(CRUDBase[ModelType], Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    id / alt_id 를 가진 엔티티(items, persons, invoices)의 저장소 기본 클래스입니다.
    """

    async def find_one(self, db: AsyncSession, id: InternalId) -> Optional[ModelType]:
        """
        내부 키(id)로 단일 레코드를 조회합니다.
        """
        return await self.find_first_by_attribute(db, attribute="id", value=id)

    async def find_by_alt_id(self, db: AsyncSession, alt_id: AltId) -> Optional[ModelType]:
        """
        외부 식별자(alt_id)로 단일 레코드를 조회합니다.
        """
        return await self.find_first_by_attribute(db, attribute="alt_id", value=alt_id)

    async def create(self, db: AsyncSession, *, obj_in: CreateSchemaType) -> ModelType:
        """
        새로운 레코드를 생성합니다. id, alt_id, 타임스탬프는 저장 시 부여됩니다.
        """
        create_data = obj_in.model_dump(exclude_unset=True)
        create_data.pop("id", None)
        create_data.pop("alt_id", None)
        create_data["created_by"] = create_data.get("created_by") or SYSTEM_USER

        db_obj = self.model.model_validate(create_data)
        db_obj = await self._insert(db, db_obj)
        logger.info("%s: created id=%s alt_id=%s", self.table_name, db_obj.id, db_obj.alt_id)
        return db_obj

    async def update(
        self, db: AsyncSession, *, id: InternalId, obj_in: UpdateSchemaType
    ) -> Optional[ModelType]:
        """
        기존 레코드를 업데이트합니다. 호출자가 지정한 필드만 반영하며,
        일치하는 행이 없으면 None 을 반환합니다.
        """
        db_obj = await self.find_one(db, id)
        if db_obj is None:
            return None

        update_data = obj_in.model_dump(exclude_unset=True)
        update_data.pop("id", None)
        update_data.pop("alt_id", None)  # alt_id 는 행이 존재하는 동안 변경되지 않습니다.
        last_changed_by = update_data.pop("last_changed_by", None)

        for key, value in update_data.items():
            setattr(db_obj, key, value)
        db_obj.last_update = datetime.now(UTC)
        db_obj.last_changed_by = last_changed_by or SYSTEM_USER

        db.add(db_obj)
        await self._commit(db)
        await db.refresh(db_obj)
        logger.info("%s: updated id=%s by %s", self.table_name, id, db_obj.last_changed_by)
        return self._normalize(db_obj)

    async def remove(self, db: AsyncSession, *, id: InternalId) -> None:
        """
        내부 키(id)로 레코드를 삭제합니다. 이미 없는 행이어도 오류가 발생하지 않습니다.
        """
        deleted = await self._delete_where(db, self.model.id == id)
        logger.info("%s: removed id=%s (%d row(s))", self.table_name, id, deleted)
