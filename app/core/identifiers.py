# app/core/identifiers.py

"""
엔티티 식별자 타입 정의 모듈입니다.

모든 주요 엔티티(Item, Person, Invoice)는 두 개의 식별자를 가집니다.
- InternalId: 저장소가 INSERT 시 부여하는 순차 키(id). 해당 엔티티 자신의 조회/수정/삭제에만 사용.
- AltId: INSERT 시 무작위로 생성되는 외부 식별자(alt_id, UUID). 엔티티 간 참조에 쓰이는 유일한 식별자.

다른 엔티티를 가리키는 모든 필드와 연결 테이블 파라미터는 AltId 로 타이핑합니다.
"""

import uuid
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, NewType, Optional

InternalId = NewType("InternalId", int)
AltId = NewType("AltId", uuid.UUID)

# 기본 작성자/수정자 값
SYSTEM_USER = "system"

# NUMERIC(15, 2) 컬럼의 소수 자릿수
MONEY_QUANTUM = Decimal("0.01")


def to_money(value: Any) -> Optional[Decimal]:
    """
    DB 드라이버가 돌려준 고정 소수점 값(문자열, float, Decimal)을 Decimal 로 변환합니다.
    """
    if value is None:
        return None
    if isinstance(value, float):
        # float 은 repr 문자열로 변환한 뒤 Decimal 로 만듭니다.
        value = repr(value)
    return Decimal(value).quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)
