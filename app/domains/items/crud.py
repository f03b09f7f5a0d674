# app/domains/items/crud.py

"""
'items' 테이블의 CRUD(Create, Read, Update, Delete) 작업을 담당하는 저장소 모듈입니다.
unit_price 는 모든 읽기 경로에서 Decimal 로 정규화됩니다.
"""

from app.core.crud_base import CRUDEntityBase

from app.domains.items import models as items_models
from app.domains.items import schemas as items_schemas


# =============================================================================
# items 테이블 CRUD
# =============================================================================
class CRUDItem(CRUDEntityBase[items_models.Item, items_schemas.ItemCreate, items_schemas.ItemUpdate]):
    decimal_fields = ("unit_price",)

    def __init__(self):
        super().__init__(items_models.Item)


# CRUD 인스턴스 생성
item = CRUDItem()
