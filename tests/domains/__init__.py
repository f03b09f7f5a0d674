# tests/domains/__init__.py

"""
도메인별 테스트 모듈 패키지입니다.

- `test_auth.py`: 토큰 발급(/authorize)과 Bearer 게이트.
- `test_items.py`, `test_persons.py`, `test_invoices.py`: 엔티티 저장소와 API.
- `test_invoices_items.py`: 송장-품목 연결의 참조 무결성과 API.
"""

__title__ = "Inventory Service Domain Tests"
__version__ = "1.0.0"
__all__ = []
