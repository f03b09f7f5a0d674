# tests/__init__.py

"""
인벤토리 서비스 FastAPI 애플리케이션의 테스트 스위트 패키지입니다.

- `conftest.py`: 테스트 전용 인메모리 SQLite DB, 세션, HTTP 클라이언트 픽스처.
- `test_main.py`: 루트(`/`), 헬스 체크, 전역 예외 핸들러 테스트.
- `test_scripts.py`: 시드 데이터/OpenAPI 내보내기 스크립트 테스트.
- `domains/`: 도메인(items, persons, invoices, invoices_items, auth)별 테스트.
"""

__title__ = "Inventory Service API Tests"
__description__ = "Test suite for the Inventory Service FastAPI application."
__version__ = "1.0.0"
__all__ = []
