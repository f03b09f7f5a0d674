# app/domains/persons/__init__.py

"""
FastAPI 애플리케이션의 'persons' 도메인 패키지입니다.

'persons' 도메인은 송장을 소유하는 사람(Person)과 고유 이메일을 관리합니다.

주요 서브모듈:
- `models.py`: 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 요청 및 응답 유효성 검사를 위한 Pydantic 모델.
- `crud.py`: 비동기 저장소(repository) 로직.
- `services.py`: 라우터가 사용하는 서비스 계층과 의존성 함수.
- `routers.py`: API 엔드포인트 정의.
"""

__title__ = "Inventory Person Domain"
__description__ = "Manages persons who own invoices."
__version__ = "1.0.0"
__all__ = []  # 'from app.domains.persons import *' 시 내보낼 이름 목록. 일반적으로 비워둡니다.
