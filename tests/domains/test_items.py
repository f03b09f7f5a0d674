# tests/domains/test_items.py

"""
'items' 도메인 (품목 관리) 저장소와 API 엔드포인트에 대한 테스트 모듈입니다.

- 저장소: 생성/조회/수정/삭제, Decimal 정규화, 기본값 정책
- API: `POST/GET /items`, `GET/PUT/DELETE /items/{id}`, `GET /items/alt/{alt_id}`
"""

import uuid
from decimal import Decimal

import pytest
from httpx import AsyncClient
from pydantic import ValidationError
from sqlmodel.ext.asyncio.session import AsyncSession

from app.domains.items import schemas as items_schemas
from app.domains.items.crud import item as item_crud


def _item_in(**overrides) -> items_schemas.ItemCreate:
    data = {"name": "Laptop", "description": "Developer laptop", "unit_price": Decimal("1299.99")}
    data.update(overrides)
    return items_schemas.ItemCreate(**data)


# --- 저장소(crud) 테스트 ---


@pytest.mark.asyncio
async def test_create_assigns_identifiers_and_defaults(db_session: AsyncSession):
    """
    생성 시 id, alt_id, 타임스탬프가 부여되고 created_by 기본값이 'system' 인지 테스트합니다.
    """
    created = await item_crud.create(db_session, obj_in=_item_in())

    assert created.id is not None
    assert isinstance(created.alt_id, uuid.UUID)
    assert created.created_by == "system"
    assert created.last_changed_by == "system"
    assert created.created_at is not None
    assert created.unit_price == Decimal("1299.99")


@pytest.mark.asyncio
async def test_create_keeps_caller_created_by(db_session: AsyncSession):
    created = await item_crud.create(db_session, obj_in=_item_in(created_by="alice"))
    assert created.created_by == "alice"


@pytest.mark.asyncio
async def test_find_one_and_find_by_alt_id_return_same_row(db_session: AsyncSession):
    created = await item_crud.create(db_session, obj_in=_item_in())

    by_id = await item_crud.find_one(db_session, created.id)
    by_alt_id = await item_crud.find_by_alt_id(db_session, created.alt_id)

    assert by_id is not None and by_alt_id is not None
    assert by_id.model_dump() == by_alt_id.model_dump()
    assert by_id.id == created.id


@pytest.mark.asyncio
async def test_find_missing_rows_return_none(db_session: AsyncSession):
    assert await item_crud.find_one(db_session, 9999) is None
    assert await item_crud.find_by_alt_id(db_session, uuid.uuid4()) is None
    assert await item_crud.find_by_attribute(db_session, attribute="name", value="nothing") == []


@pytest.mark.asyncio
async def test_find_all_normalizes_decimal(db_session: AsyncSession):
    await item_crud.create(db_session, obj_in=_item_in(unit_price=Decimal("10")))
    await item_crud.create(db_session, obj_in=_item_in(name="Mouse", unit_price=Decimal("5.5")))

    rows = await item_crud.find_all(db_session)

    assert len(rows) == 2
    assert all(isinstance(row.unit_price, Decimal) for row in rows)
    assert sorted(str(row.unit_price) for row in rows) == ["10.00", "5.50"]


@pytest.mark.asyncio
async def test_update_changes_field_and_audit_columns(db_session: AsyncSession):
    """
    수정 시 지정한 필드만 변경되고 last_update 가 증가하며 last_changed_by 가 설정되는지 테스트합니다.
    """
    created = await item_crud.create(db_session, obj_in=_item_in())
    created_id = created.id
    before = created.last_update

    updated = await item_crud.update(
        db_session, id=created_id, obj_in=items_schemas.ItemUpdate(name="Laptop Pro", last_changed_by="bob")
    )

    assert updated is not None
    assert updated.name == "Laptop Pro"
    assert updated.description == "Developer laptop"
    assert updated.last_update > before
    assert updated.last_changed_by == "bob"


@pytest.mark.asyncio
async def test_update_without_caller_sets_system(db_session: AsyncSession):
    created = await item_crud.create(db_session, obj_in=_item_in())
    updated = await item_crud.update(
        db_session, id=created.id, obj_in=items_schemas.ItemUpdate(unit_price=Decimal("1.5"))
    )
    assert updated.last_changed_by == "system"
    assert updated.unit_price == Decimal("1.50")


@pytest.mark.asyncio
async def test_update_missing_row_returns_none(db_session: AsyncSession):
    assert await item_crud.update(db_session, id=4242, obj_in=items_schemas.ItemUpdate(name="x")) is None


@pytest.mark.asyncio
async def test_remove_is_idempotent(db_session: AsyncSession):
    created = await item_crud.create(db_session, obj_in=_item_in())

    await item_crud.remove(db_session, id=created.id)
    assert await item_crud.find_one(db_session, created.id) is None

    # 이미 삭제된 행을 다시 삭제해도 오류가 발생하지 않아야 합니다.
    await item_crud.remove(db_session, id=created.id)


# --- API 엔드포인트 테스트 ---


@pytest.mark.asyncio
async def test_create_and_read_item_api(authorized_client: AsyncClient):
    payload = {"name": "Headphones", "description": "Noise-cancelling", "unit_price": 10.00}
    response = await authorized_client.post("/items", json=payload)
    print(f"Response JSON: {response.json()}")

    assert response.status_code == 201
    created = response.json()
    assert created["unit_price"] == 10.0
    assert isinstance(created["unit_price"], float)
    assert created["created_by"] == "system"

    response = await authorized_client.get(f"/items/{created['id']}")
    assert response.status_code == 200
    assert response.json()["alt_id"] == created["alt_id"]

    response = await authorized_client.get(f"/items/alt/{created['alt_id']}")
    assert response.status_code == 200
    assert response.json()["id"] == created["id"]

    response = await authorized_client.get("/items")
    assert response.status_code == 200
    assert len(response.json()) == 1


@pytest.mark.asyncio
async def test_create_item_ignores_identifiers_in_payload(authorized_client: AsyncClient):
    alt_id = str(uuid.uuid4())
    payload = {"id": 777, "alt_id": alt_id, "name": "Pen", "description": "Blue", "unit_price": 1}
    response = await authorized_client.post("/items", json=payload)

    assert response.status_code == 201
    assert response.json()["id"] != 777
    assert response.json()["alt_id"] != alt_id


@pytest.mark.asyncio
async def test_create_item_validation_error(authorized_client: AsyncClient):
    response = await authorized_client.post("/items", json={"name": "x" * 256, "description": "d", "unit_price": 1})
    assert response.status_code == 422

    response = await authorized_client.post("/items", json={"name": "Pen"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_update_item_api(authorized_client: AsyncClient):
    created = (await authorized_client.post(
        "/items", json={"name": "Pen", "description": "Blue", "unit_price": 1.25}
    )).json()

    response = await authorized_client.put(
        f"/items/{created['id']}", json={"unit_price": 2, "last_changed_by": "carol"}
    )
    assert response.status_code == 200
    assert response.json()["unit_price"] == 2.0
    assert response.json()["last_changed_by"] == "carol"
    assert response.json()["alt_id"] == created["alt_id"]


@pytest.mark.asyncio
async def test_update_item_cannot_change_alt_id(authorized_client: AsyncClient):
    created = (await authorized_client.post(
        "/items", json={"name": "Pen", "description": "Blue", "unit_price": 1}
    )).json()

    response = await authorized_client.put(f"/items/{created['id']}", json={"alt_id": str(uuid.uuid4())})
    assert response.status_code == 200
    assert response.json()["alt_id"] == created["alt_id"]


@pytest.mark.asyncio
async def test_missing_item_returns_404(authorized_client: AsyncClient):
    assert (await authorized_client.get("/items/9999")).status_code == 404
    assert (await authorized_client.get(f"/items/alt/{uuid.uuid4()}")).status_code == 404
    assert (await authorized_client.put("/items/9999", json={"name": "x"})).status_code == 404


@pytest.mark.asyncio
async def test_malformed_identifiers_return_422(authorized_client: AsyncClient):
    assert (await authorized_client.get("/items/not-a-number")).status_code == 422
    assert (await authorized_client.get("/items/alt/not-a-uuid")).status_code == 422


@pytest.mark.asyncio
async def test_delete_item_api(authorized_client: AsyncClient):
    created = (await authorized_client.post(
        "/items", json={"name": "Pen", "description": "Blue", "unit_price": 1}
    )).json()

    response = await authorized_client.delete(f"/items/{created['id']}")
    assert response.status_code == 204
    assert (await authorized_client.get(f"/items/{created['id']}")).status_code == 404

    # 두 번째 삭제도 204 를 반환합니다.
    assert (await authorized_client.delete(f"/items/{created['id']}")).status_code == 204


@pytest.mark.asyncio
@pytest.mark.parametrize("field", ["name", "description", "unit_price"])
async def test_update_item_with_null_returns_422(authorized_client: AsyncClient, field: str):
    """
    NOT NULL 컬럼에 명시적인 null 을 보내면 저장소에 도달하기 전에 422 로 거부되고, 행은 변경되지 않아야 합니다.
    """
    created = (await authorized_client.post(
        "/items", json={"name": "Pen", "description": "Blue", "unit_price": 1.25}
    )).json()

    response = await authorized_client.put(f"/items/{created['id']}", json={field: None})
    assert response.status_code == 422

    response = await authorized_client.get(f"/items/{created['id']}")
    assert response.json()["name"] == "Pen"
    assert response.json()["description"] == "Blue"
    assert response.json()["unit_price"] == 1.25
    assert response.json()["last_update"] == created["last_update"]


def test_item_update_allows_omitted_fields():
    update = items_schemas.ItemUpdate(last_changed_by="dave")
    assert update.model_dump(exclude_unset=True) == {"last_changed_by": "dave"}

    with pytest.raises(ValidationError):
        items_schemas.ItemUpdate(name=None)
