# app/domains/items/routers.py

"""
'items' 도메인 (품목 관리)과 관련된 API 엔드포인트를 정의하는 모듈입니다.
"""

import uuid
from typing import List
from fastapi import APIRouter, Depends, status, HTTPException

from app.core import dependencies as deps

from . import schemas as items_schemas

# APIRouter 인스턴스 생성
router = APIRouter(
    tags=["Item Management (품목 관리)"],  # Swagger UI에 표시될 태그
    responses={404: {"description": "Not found"}},  # 이 라우터의 공통 응답 정의
)


@router.post(
    "",
    response_model=items_schemas.ItemRead,
    status_code=status.HTTP_201_CREATED,
    summary="새 품목 생성",
)
async def create_item(
    item_in: items_schemas.ItemCreate,
    service: deps.ItemsService = Depends(deps.get_items_service),
):
    """
    새로운 품목을 생성합니다.
    - **name**: 품목 이름 (필수, 최대 255자)
    - **description**: 설명 (필수)
    - **unit_price**: 단가 (필수, 소수점 2자리)
    """
    return await service.create(item_in)


@router.get(
    "",
    response_model=List[items_schemas.ItemRead],
    summary="모든 품목 조회",
)
async def read_items(service: deps.ItemsService = Depends(deps.get_items_service)):
    return await service.find_all()


@router.get(
    "/alt/{alt_id}",
    response_model=items_schemas.ItemRead,
    summary="외부 식별자(alt_id)로 품목 조회",
)
async def read_item_by_alt_id(
    alt_id: uuid.UUID,
    service: deps.ItemsService = Depends(deps.get_items_service),
):
    db_item = await service.find_by_alt_id(alt_id)
    if not db_item:
        raise HTTPException(status_code=404, detail="Item not found")
    return db_item


@router.get(
    "/{item_id}",
    response_model=items_schemas.ItemRead,
    summary="특정 품목 정보 조회",
)
async def read_item(
    item_id: int,
    service: deps.ItemsService = Depends(deps.get_items_service),
):
    """
    내부 키(id)로 특정 품목 정보를 조회합니다.
    """
    db_item = await service.find_one(item_id)
    if not db_item:
        raise HTTPException(status_code=404, detail="Item not found")
    return db_item


@router.put(
    "/{item_id}",
    response_model=items_schemas.ItemRead,
    summary="품목 정보 수정",
)
async def update_item(
    item_id: int,
    item_in: items_schemas.ItemUpdate,
    service: deps.ItemsService = Depends(deps.get_items_service),
):
    """
    내부 키(id)로 특정 품목의 정보를 수정합니다. 요청에 포함된 필드만 반영됩니다.
    """
    db_item = await service.update(item_id, item_in)
    if not db_item:
        raise HTTPException(status_code=404, detail="Item not found")
    return db_item


@router.delete(
    "/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="품목 삭제",
)
async def delete_item(
    item_id: int,
    service: deps.ItemsService = Depends(deps.get_items_service),
):
    """
    내부 키(id)로 품목을 삭제합니다.
    연결된 invoices_items 레코드는 ON DELETE CASCADE 로 함께 삭제됩니다.
    """
    await service.remove(item_id)
    return None
