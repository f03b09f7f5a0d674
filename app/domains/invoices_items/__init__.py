# app/domains/invoices_items/__init__.py

"""
FastAPI 애플리케이션의 'invoices_items' 도메인 패키지입니다.

'invoices_items' 도메인은 송장과 품목 간의 다대다 연결을 처리합니다.
연결은 양쪽 엔티티의 외부 식별자(alt_id)만으로 표현되며 복합 기본 키를 가집니다.

주요 서브모듈:
- `models.py`: 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 요청 및 응답 유효성 검사를 위한 Pydantic 모델.
- `crud.py`: 비동기 저장소(repository) 로직.
- `services.py`: 라우터가 사용하는 서비스 계층과 의존성 함수.
- `routers.py`: API 엔드포인트 정의.
"""

__title__ = "Inventory Invoice Item Link Domain"
__description__ = "Manages the many-to-many links between invoices and items."
__version__ = "1.0.0"
__all__ = []  # 'from app.domains.invoices_items import *' 시 내보낼 이름 목록. 일반적으로 비워둡니다.
