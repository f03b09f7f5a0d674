# tests/domains/test_invoices.py

"""
'invoices' 도메인 (송장 관리) 저장소와 API 엔드포인트에 대한 테스트 모듈입니다.
"""

import uuid
from decimal import Decimal

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import IntegrityError
from sqlmodel.ext.asyncio.session import AsyncSession

from app.domains.invoices import schemas as invoices_schemas
from app.domains.invoices.crud import invoice as invoice_crud
from app.domains.persons import schemas as persons_schemas
from app.domains.persons.crud import person as person_crud


async def _create_person(db: AsyncSession, email: str = "owner@example.com"):
    return await person_crud.create(db, obj_in=persons_schemas.PersonCreate(name="Owner", email=email))


# --- 저장소(crud) 테스트 ---


@pytest.mark.asyncio
async def test_create_invoice_defaults(db_session: AsyncSession):
    owner = await _create_person(db_session)

    created = await invoice_crud.create(
        db_session, obj_in=invoices_schemas.InvoiceCreate(total=Decimal("100.50"), user_id=owner.alt_id)
    )

    assert created.paid is False
    assert created.total == Decimal("100.50")
    assert created.user_id == owner.alt_id
    assert created.created_by == "system"


@pytest.mark.asyncio
async def test_find_by_user_id(db_session: AsyncSession):
    owner = await _create_person(db_session)
    other = await _create_person(db_session, email="other@example.com")
    for total in ("1.00", "2.00"):
        await invoice_crud.create(
            db_session, obj_in=invoices_schemas.InvoiceCreate(total=Decimal(total), user_id=owner.alt_id)
        )
    await invoice_crud.create(
        db_session, obj_in=invoices_schemas.InvoiceCreate(total=Decimal("3.00"), user_id=other.alt_id)
    )

    owned = await invoice_crud.find_by_user_id(db_session, owner.alt_id)

    assert sorted(row.total for row in owned) == [Decimal("1.00"), Decimal("2.00")]
    assert await invoice_crud.find_by_user_id(db_session, uuid.uuid4()) == []


@pytest.mark.asyncio
async def test_invoice_with_unknown_owner_fails(db_session: AsyncSession):
    with pytest.raises(IntegrityError):
        await invoice_crud.create(
            db_session, obj_in=invoices_schemas.InvoiceCreate(total=Decimal("1.00"), user_id=uuid.uuid4())
        )


@pytest.mark.asyncio
async def test_update_invoice_paid(db_session: AsyncSession):
    owner = await _create_person(db_session)
    created = await invoice_crud.create(
        db_session, obj_in=invoices_schemas.InvoiceCreate(total=Decimal("5.00"), user_id=owner.alt_id)
    )

    updated = await invoice_crud.update(
        db_session, id=created.id, obj_in=invoices_schemas.InvoiceUpdate(paid=True, last_changed_by="cashier")
    )

    assert updated.paid is True
    assert updated.total == Decimal("5.00")
    assert updated.last_changed_by == "cashier"


# --- API 엔드포인트 테스트 ---


@pytest.mark.asyncio
async def test_invoice_api_round_trip(authorized_client: AsyncClient):
    owner = (await authorized_client.post("/persons", json={"name": "P", "email": "p@example.com"})).json()

    response = await authorized_client.post("/invoices", json={"total": 100.50, "user_id": owner["alt_id"]})
    print(f"Response JSON: {response.json()}")
    assert response.status_code == 201
    created = response.json()
    assert created["total"] == 100.5
    assert created["paid"] is False
    assert created["user_id"] == owner["alt_id"]

    response = await authorized_client.get(f"/invoices/{created['id']}")
    assert response.status_code == 200
    assert response.json()["total"] == 100.5

    response = await authorized_client.get(f"/invoices/alt/{created['alt_id']}")
    assert response.status_code == 200

    response = await authorized_client.get(f"/invoices/user/{owner['alt_id']}")
    assert response.status_code == 200
    assert [row["alt_id"] for row in response.json()] == [created["alt_id"]]

    response = await authorized_client.put(f"/invoices/{created['id']}", json={"paid": True})
    assert response.status_code == 200
    assert response.json()["paid"] is True

    assert (await authorized_client.delete(f"/invoices/{created['id']}")).status_code == 204
    assert (await authorized_client.get(f"/invoices/{created['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_invoice_with_unknown_owner_returns_409(authorized_client: AsyncClient):
    response = await authorized_client.post("/invoices", json={"total": 1, "user_id": str(uuid.uuid4())})
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_person_with_invoices_cannot_be_deleted(authorized_client: AsyncClient):
    owner = (await authorized_client.post("/persons", json={"name": "P", "email": "p@example.com"})).json()
    await authorized_client.post("/invoices", json={"total": 1, "user_id": owner["alt_id"]})

    response = await authorized_client.delete(f"/persons/{owner['id']}")
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_invoices_of_unknown_user_is_empty(authorized_client: AsyncClient):
    response = await authorized_client.get(f"/invoices/user/{uuid.uuid4()}")
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
@pytest.mark.parametrize("field", ["total", "paid", "user_id"])
async def test_update_invoice_with_null_returns_422(authorized_client: AsyncClient, field: str):
    owner = (await authorized_client.post("/persons", json={"name": "P", "email": "p@example.com"})).json()
    created = (await authorized_client.post("/invoices", json={"total": 20, "user_id": owner["alt_id"]})).json()

    response = await authorized_client.put(f"/invoices/{created['id']}", json={field: None})
    assert response.status_code == 422

    response = await authorized_client.get(f"/invoices/{created['id']}")
    assert response.json()["total"] == 20.0
    assert response.json()["paid"] is False
    assert response.json()["user_id"] == owner["alt_id"]
