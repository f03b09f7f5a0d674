# app/domains/persons/routers.py

"""
'persons' 도메인 (고객/사용자 관리)과 관련된 API 엔드포인트를 정의하는 모듈입니다.
"""

import uuid
from typing import List
from fastapi import APIRouter, Depends, status, HTTPException

from app.core import dependencies as deps

from . import schemas as persons_schemas

# APIRouter 인스턴스 생성
router = APIRouter(
    tags=["Person Management (고객 관리)"],
    responses={404: {"description": "Not found"}},
)


@router.post(
    "",
    response_model=persons_schemas.PersonRead,
    status_code=status.HTTP_201_CREATED,
    summary="새 고객 생성",
)
async def create_person(
    person_in: persons_schemas.PersonCreate,
    service: deps.PersonsService = Depends(deps.get_persons_service),
):
    """
    새로운 고객을 생성합니다.
    - **name**: 이름 (필수)
    - **email**: 이메일 (필수, 고유). 이미 등록된 이메일이면 409 를 반환합니다.
    """
    return await service.create(person_in)


@router.get(
    "",
    response_model=List[persons_schemas.PersonRead],
    summary="모든 고객 조회",
)
async def read_persons(service: deps.PersonsService = Depends(deps.get_persons_service)):
    return await service.find_all()


@router.get(
    "/alt/{alt_id}",
    response_model=persons_schemas.PersonRead,
    summary="외부 식별자(alt_id)로 고객 조회",
)
async def read_person_by_alt_id(
    alt_id: uuid.UUID,
    service: deps.PersonsService = Depends(deps.get_persons_service),
):
    db_person = await service.find_by_alt_id(alt_id)
    if not db_person:
        raise HTTPException(status_code=404, detail="Person not found")
    return db_person


@router.get(
    "/email/{email}",
    response_model=persons_schemas.PersonRead,
    summary="이메일로 고객 조회",
)
async def read_person_by_email(
    email: str,
    service: deps.PersonsService = Depends(deps.get_persons_service),
):
    db_person = await service.find_by_email(email)
    if not db_person:
        raise HTTPException(status_code=404, detail="Person not found")
    return db_person


@router.get(
    "/{person_id}",
    response_model=persons_schemas.PersonRead,
    summary="특정 고객 정보 조회",
)
async def read_person(
    person_id: int,
    service: deps.PersonsService = Depends(deps.get_persons_service),
):
    db_person = await service.find_one(person_id)
    if not db_person:
        raise HTTPException(status_code=404, detail="Person not found")
    return db_person


@router.put(
    "/{person_id}",
    response_model=persons_schemas.PersonRead,
    summary="고객 정보 수정",
)
async def update_person(
    person_id: int,
    person_in: persons_schemas.PersonUpdate,
    service: deps.PersonsService = Depends(deps.get_persons_service),
):
    db_person = await service.update(person_id, person_in)
    if not db_person:
        raise HTTPException(status_code=404, detail="Person not found")
    return db_person


@router.delete(
    "/{person_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="고객 삭제",
)
async def delete_person(
    person_id: int,
    service: deps.PersonsService = Depends(deps.get_persons_service),
):
    """
    내부 키(id)로 고객을 삭제합니다.
    해당 고객의 송장이 남아 있으면 외래 키 제약 조건 위반(409)이 발생합니다.
    """
    await service.remove(person_id)
    return None
