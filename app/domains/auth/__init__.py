# app/domains/auth/__init__.py

"""
FastAPI 애플리케이션의 'auth' 도메인 패키지입니다.

'auth' 도메인은 Basic 자격 증명(client_id:secret)을 검증하고 Bearer 토큰(JWT)을 발급합니다.

주요 서브모듈:
- `schemas.py`: 토큰 응답 모델.
- `services.py`: Authorization 헤더 파싱 및 토큰 발급 서비스.
- `routers.py`: POST /authorize 엔드포인트.
"""

__title__ = "Inventory Auth Domain"
__description__ = "Issues bearer tokens from Basic client credentials."
__version__ = "1.0.0"
__all__ = []  # 'from app.domains.auth import *' 시 내보낼 이름 목록. 일반적으로 비워둡니다.
