# tests/test_scripts.py

"""
운영 스크립트(scripts/)에 대한 테스트 모듈입니다.

- `seed_data.seed_database`: 기본 데이터 입력 및 --reset 동작
- `export_openapi`: OpenAPI 문서 생성 및 파일 저장
"""

import json

import pytest
from typer.testing import CliRunner
from sqlmodel.ext.asyncio.session import AsyncSession

from app.domains.invoices.crud import invoice as invoice_crud
from app.domains.invoices_items.crud import invoice_item as invoice_item_crud
from app.domains.items.crud import item as item_crud
from app.domains.persons.crud import person as person_crud
from scripts.export_openapi import build_openapi_document, cli as export_cli
from scripts.seed_data import seed_database


@pytest.mark.asyncio
async def test_seed_database_links_invoice_n_to_item_n(db_session: AsyncSession):
    counts = await seed_database(db_session)

    assert counts == {"items": 3, "persons": 3, "invoices": 3, "invoices_items": 3}

    persons = await person_crud.find_all(db_session)
    for person in persons:
        assert len(await invoice_crud.find_by_user_id(db_session, person.alt_id)) == 1

    links = await invoice_item_crud.find_all(db_session)
    item_alt_ids = {item.alt_id for item in await item_crud.find_all(db_session)}
    invoice_alt_ids = {invoice.alt_id for invoice in await invoice_crud.find_all(db_session)}
    assert {link.item_id for link in links} == item_alt_ids
    assert {link.invoice_id for link in links} == invoice_alt_ids


@pytest.mark.asyncio
async def test_seed_database_reset_replaces_rows(db_session: AsyncSession):
    await seed_database(db_session)
    counts = await seed_database(db_session, reset=True)

    assert counts["persons"] == 3
    assert len(await person_crud.find_all(db_session)) == 3
    assert len(await invoice_item_crud.find_all(db_session)) == 3


def test_build_openapi_document_lists_routes():
    document = build_openapi_document()

    assert "/authorize" in document["paths"]
    assert "/invoices-items/{invoice_id}/{item_id}" in document["paths"]
    assert "/persons/email/{email}" in document["paths"]


def test_export_openapi_writes_file(tmp_path):
    output = tmp_path / "openapi-spec.json"

    result = CliRunner().invoke(export_cli, ["--output", str(output)])

    assert result.exit_code == 0, result.output
    document = json.loads(output.read_text(encoding="utf-8"))
    assert document["info"]["version"] == "1.0.0"
