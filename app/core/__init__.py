# app/core/__init__.py

"""
FastAPI 애플리케이션의 핵심 구성 요소 패키지입니다.

주요 서브모듈은 다음과 같습니다:

- `config.py`: 애플리케이션의 설정 및 환경 변수 관리 (Pydantic Settings).
- `database.py`: 데이터베이스 엔진(커넥션 풀), 세션 관리 (SQLModel 및 AsyncSQLAlchemy).
- `identifiers.py`: 내부 키(id)와 외부 식별자(alt_id)를 구분하는 타입 정의.
- `crud_base.py`: 모든 엔티티 저장소(repository)가 공유하는 공통 CRUD 클래스.
- `security.py`: 클라이언트 자격 증명 검증, JWT 발급 및 검증.
- `dependencies.py`: FastAPI의 의존성 주입 시스템에서 사용될 공통 의존성 함수들.
- `exception_handlers.py`: 저장소 계층에서 전파된 DB 예외를 HTTP 응답으로 변환.
"""

__title__ = "Inventory Service Core"
__version__ = "1.0.0"
__all__ = []  # 'from app.core import *' 시 내보낼 이름 목록. 일반적으로 비워둡니다.
