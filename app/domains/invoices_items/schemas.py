# app/domains/invoices_items/schemas.py

"""
'invoices_items' 도메인 (송장-품목 연결)의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
두 필드 모두 외부 식별자(alt_id)입니다.
"""

from sqlmodel import SQLModel

from app.core.identifiers import AltId


class InvoiceItemBase(SQLModel):
    invoice_id: AltId
    item_id: AltId


class InvoiceItemCreate(InvoiceItemBase):
    pass


class InvoiceItemRead(InvoiceItemBase):
    pass
