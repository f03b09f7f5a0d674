# app/domains/invoices_items/routers.py

"""
'invoices_items' 도메인 (송장-품목 연결)과 관련된 API 엔드포인트를 정의하는 모듈입니다.

'/invoice/{invoice_id}', '/item/{item_id}' 경로는 '/{invoice_id}/{item_id}' 보다 먼저 선언되어야 합니다.
"""

import uuid
from typing import List
from fastapi import APIRouter, Depends, status, HTTPException

from app.core import dependencies as deps

from . import schemas as invoices_items_schemas

# APIRouter 인스턴스 생성
router = APIRouter(
    tags=["Invoice Item Links (송장-품목 연결)"],
    responses={404: {"description": "Not found"}},
)


@router.post(
    "",
    response_model=invoices_items_schemas.InvoiceItemRead,
    status_code=status.HTTP_201_CREATED,
    summary="송장에 품목 연결",
)
async def create_invoice_item(
    link_in: invoices_items_schemas.InvoiceItemCreate,
    service: deps.InvoicesItemsService = Depends(deps.get_invoices_items_service),
):
    """
    송장(alt_id)과 품목(alt_id)을 연결합니다.
    존재하지 않는 송장/품목을 참조하거나 이미 연결된 쌍이면 409 를 반환합니다.
    """
    return await service.create(link_in)


@router.get(
    "",
    response_model=List[invoices_items_schemas.InvoiceItemRead],
    summary="모든 송장-품목 연결 조회",
)
async def read_invoice_items(
    service: deps.InvoicesItemsService = Depends(deps.get_invoices_items_service),
):
    return await service.find_all()


# =============================================================================
# 1. 송장 기준 조회/삭제
# =============================================================================
@router.get(
    "/invoice/{invoice_id}",
    response_model=List[invoices_items_schemas.InvoiceItemRead],
    summary="특정 송장의 연결 목록 조회",
)
async def read_invoice_items_by_invoice(
    invoice_id: uuid.UUID,
    service: deps.InvoicesItemsService = Depends(deps.get_invoices_items_service),
):
    return await service.find_by_invoice_id(invoice_id)


@router.delete(
    "/invoice/{invoice_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="특정 송장의 모든 연결 삭제",
)
async def delete_invoice_items_by_invoice(
    invoice_id: uuid.UUID,
    service: deps.InvoicesItemsService = Depends(deps.get_invoices_items_service),
):
    await service.remove_by_invoice_id(invoice_id)
    return None


# =============================================================================
# 2. 품목 기준 조회/삭제
# =============================================================================
@router.get(
    "/item/{item_id}",
    response_model=List[invoices_items_schemas.InvoiceItemRead],
    summary="특정 품목의 연결 목록 조회",
)
async def read_invoice_items_by_item(
    item_id: uuid.UUID,
    service: deps.InvoicesItemsService = Depends(deps.get_invoices_items_service),
):
    return await service.find_by_item_id(item_id)


@router.delete(
    "/item/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="특정 품목의 모든 연결 삭제",
)
async def delete_invoice_items_by_item(
    item_id: uuid.UUID,
    service: deps.InvoicesItemsService = Depends(deps.get_invoices_items_service),
):
    await service.remove_by_item_id(item_id)
    return None


# =============================================================================
# 3. 복합 키(invoice_id, item_id) 조회/삭제
# =============================================================================
@router.get(
    "/{invoice_id}/{item_id}",
    response_model=invoices_items_schemas.InvoiceItemRead,
    summary="특정 송장-품목 연결 조회",
)
async def read_invoice_item(
    invoice_id: uuid.UUID,
    item_id: uuid.UUID,
    service: deps.InvoicesItemsService = Depends(deps.get_invoices_items_service),
):
    db_link = await service.find_one(invoice_id, item_id)
    if not db_link:
        raise HTTPException(status_code=404, detail="Invoice item link not found")
    return db_link


@router.delete(
    "/{invoice_id}/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="특정 송장-품목 연결 삭제",
)
async def delete_invoice_item(
    invoice_id: uuid.UUID,
    item_id: uuid.UUID,
    service: deps.InvoicesItemsService = Depends(deps.get_invoices_items_service),
):
    await service.remove(invoice_id, item_id)
    return None
