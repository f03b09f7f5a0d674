# app/domains/__init__.py

"""
비즈니스 도메인 패키지입니다.

- `items`: 재고 품목(Item)
- `persons`: 사람(Person), 송장의 소유자
- `invoices`: 송장(Invoice)
- `invoices_items`: 송장-품목 다대다 연결(InvoiceItem)
- `auth`: 클라이언트 자격 증명 -> Bearer 토큰 발급
- `models`: 모든 테이블 모델의 중앙 임포트 지점
"""
