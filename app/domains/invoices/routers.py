# app/domains/invoices/routers.py

"""
'invoices' 도메인 (송장 관리)과 관련된 API 엔드포인트를 정의하는 모듈입니다.
"""

import uuid
from typing import List
from fastapi import APIRouter, Depends, status, HTTPException

from app.core import dependencies as deps

from . import schemas as invoices_schemas

# APIRouter 인스턴스 생성
router = APIRouter(
    tags=["Invoice Management (송장 관리)"],
    responses={404: {"description": "Not found"}},
)


@router.post(
    "",
    response_model=invoices_schemas.InvoiceRead,
    status_code=status.HTTP_201_CREATED,
    summary="새 송장 생성",
)
async def create_invoice(
    invoice_in: invoices_schemas.InvoiceCreate,
    service: deps.InvoicesService = Depends(deps.get_invoices_service),
):
    """
    새로운 송장을 생성합니다.
    - **total**: 합계 금액 (필수, 소수점 2자리)
    - **paid**: 결제 여부 (기본값 false)
    - **user_id**: 고객의 외부 식별자(Person.alt_id)
    """
    return await service.create(invoice_in)


@router.get(
    "",
    response_model=List[invoices_schemas.InvoiceRead],
    summary="모든 송장 조회",
)
async def read_invoices(service: deps.InvoicesService = Depends(deps.get_invoices_service)):
    return await service.find_all()


@router.get(
    "/alt/{alt_id}",
    response_model=invoices_schemas.InvoiceRead,
    summary="외부 식별자(alt_id)로 송장 조회",
)
async def read_invoice_by_alt_id(
    alt_id: uuid.UUID,
    service: deps.InvoicesService = Depends(deps.get_invoices_service),
):
    db_invoice = await service.find_by_alt_id(alt_id)
    if not db_invoice:
        raise HTTPException(status_code=404, detail="Invoice not found")
    return db_invoice


@router.get(
    "/user/{user_id}",
    response_model=List[invoices_schemas.InvoiceRead],
    summary="특정 고객의 송장 목록 조회",
)
async def read_invoices_by_user(
    user_id: uuid.UUID,
    service: deps.InvoicesService = Depends(deps.get_invoices_service),
):
    """
    고객의 외부 식별자(Person.alt_id)로 송장 목록을 조회합니다. 없으면 빈 목록입니다.
    """
    return await service.find_by_user_id(user_id)


@router.get(
    "/{invoice_id}",
    response_model=invoices_schemas.InvoiceRead,
    summary="특정 송장 정보 조회",
)
async def read_invoice(
    invoice_id: int,
    service: deps.InvoicesService = Depends(deps.get_invoices_service),
):
    db_invoice = await service.find_one(invoice_id)
    if not db_invoice:
        raise HTTPException(status_code=404, detail="Invoice not found")
    return db_invoice


@router.put(
    "/{invoice_id}",
    response_model=invoices_schemas.InvoiceRead,
    summary="송장 정보 수정",
)
async def update_invoice(
    invoice_id: int,
    invoice_in: invoices_schemas.InvoiceUpdate,
    service: deps.InvoicesService = Depends(deps.get_invoices_service),
):
    db_invoice = await service.update(invoice_id, invoice_in)
    if not db_invoice:
        raise HTTPException(status_code=404, detail="Invoice not found")
    return db_invoice


@router.delete(
    "/{invoice_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="송장 삭제",
)
async def delete_invoice(
    invoice_id: int,
    service: deps.InvoicesService = Depends(deps.get_invoices_service),
):
    await service.remove(invoice_id)
    return None
