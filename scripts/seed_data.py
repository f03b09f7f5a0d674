# flake8: noqa
# scripts/seed_data.py

"""
개발용 기본 데이터를 저장소(crud)를 통해 입력하는 스크립트입니다.

- 품목 3건, 고객 3명, 고객별 송장 1건씩
- n 번째 송장을 n 번째 품목에 연결

사용 예:
    python -m scripts.seed_data --reset
"""

import asyncio
import logging
from decimal import Decimal
from typing import Dict, List

import typer
from sqlalchemy import delete
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.database import create_db_and_tables, engine, get_async_session_context
from app.domains.items import crud as items_crud
from app.domains.items import schemas as items_schemas
from app.domains.persons import crud as persons_crud
from app.domains.persons import schemas as persons_schemas
from app.domains.invoices import crud as invoices_crud
from app.domains.invoices import schemas as invoices_schemas
from app.domains.invoices_items import crud as invoices_items_crud
from app.domains.invoices_items import schemas as invoices_items_schemas
from app.domains.models import Invoice, InvoiceItem, Item, Person

logger = logging.getLogger(__name__)

cli = typer.Typer()

SEED_ITEMS: List[Dict] = [
    {"name": "Laptop", "description": "High-performance laptop for developers", "unit_price": Decimal("1299.99")},
    {"name": "Smartphone", "description": "Latest model smartphone with advanced features", "unit_price": Decimal("899.99")},
    {"name": "Headphones", "description": "Noise-cancelling wireless headphones", "unit_price": Decimal("249.99")},
]

SEED_PERSONS: List[Dict] = [
    {"name": "John Doe", "email": "john.doe@example.com"},
    {"name": "Jane Smith", "email": "jane.smith@example.com"},
    {"name": "Bob Johnson", "email": "bob.johnson@example.com"},
]

SEED_INVOICES: List[Dict] = [
    {"total": Decimal("1299.99"), "paid": False},
    {"total": Decimal("899.99"), "paid": True},
    {"total": Decimal("249.99"), "paid": False},
]


async def clear_database(db: AsyncSession) -> None:
    """연결 테이블부터 역순으로 모든 행을 삭제합니다."""
    for model in (InvoiceItem, Invoice, Person, Item):
        await db.execute(delete(model))
    await db.commit()


async def seed_database(db: AsyncSession, reset: bool = False) -> Dict[str, int]:
    """
    기본 데이터를 입력하고 테이블별 입력 건수를 반환합니다.
    """
    if reset:
        await clear_database(db)

    items = [
        await items_crud.item.create(db, obj_in=items_schemas.ItemCreate(**data, created_by="system"))
        for data in SEED_ITEMS
    ]
    persons = [
        await persons_crud.person.create(db, obj_in=persons_schemas.PersonCreate(**data, created_by="system"))
        for data in SEED_PERSONS
    ]
    invoices = [
        await invoices_crud.invoice.create(
            db,
            obj_in=invoices_schemas.InvoiceCreate(**data, user_id=person.alt_id, created_by="system"),
        )
        for data, person in zip(SEED_INVOICES, persons)
    ]
    links = [
        await invoices_items_crud.invoice_item.create(
            db,
            obj_in=invoices_items_schemas.InvoiceItemCreate(invoice_id=invoice.alt_id, item_id=item.alt_id),
        )
        for invoice, item in zip(invoices, items)
    ]

    counts = {
        "items": len(items),
        "persons": len(persons),
        "invoices": len(invoices),
        "invoices_items": len(links),
    }
    logger.info("Seed data inserted: %s", counts)
    return counts


@cli.command()
def main(
    reset: bool = typer.Option(False, "--reset", help="입력 전에 기존 데이터를 모두 삭제합니다."),
    create_tables: bool = typer.Option(False, "--create-tables", help="테이블이 없으면 생성합니다. (개발용)"),
):
    """
    인벤토리 서비스의 개발용 기본 데이터를 입력합니다.
    """
    logging.basicConfig(level=logging.INFO)

    async def run_seed():
        if create_tables:
            await create_db_and_tables()
        async with get_async_session_context() as db:
            counts = await seed_database(db, reset=reset)
        await engine.dispose()
        return counts

    counts = asyncio.run(run_seed())
    typer.echo(f"기본 데이터 입력 완료: {counts}")


if __name__ == "__main__":
    cli()
