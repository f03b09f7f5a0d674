# app/core/dependencies.py

"""
FastAPI 애플리케이션의 의존성 주입(Dependency Injection)을 정의하는 모듈입니다.

- Bearer 토큰 게이트 (get_current_client).
- 도메인별 서비스 제공 함수 (get_items_service 등).
"""

# flake8: noqa

# 보안 관련 의존성 임포트
from app.core.security import get_current_client  # 토큰에서 client_id 를 가져오는 함수

# --- 도메인 서비스 의존성 ---
from app.domains.items.services import ItemsService, get_items_service
from app.domains.persons.services import PersonsService, get_persons_service
from app.domains.invoices.services import InvoicesService, get_invoices_service
from app.domains.invoices_items.services import InvoicesItemsService, get_invoices_items_service
