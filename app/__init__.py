# app/__init__.py

"""
Inventory Service FastAPI 애플리케이션의 메인 패키지입니다.

이 패키지는 FastAPI 애플리케이션의 진입점 (main.py)과
공통 설정, 데이터베이스 연결, 토큰 발급/검증 유틸리티를 담는 core 서브패키지,
그리고 각 엔티티(items, persons, invoices, invoices_items)와 인증(auth)을
대표하는 domains 서브패키지로 구성됩니다.
"""

APP_NAME = "Inventory Service API"
APP_VERSION = "1.0.0"

# PEP 440 (Version Identification and Dependency Specification)을 따르는 버전 정보
__version__ = APP_VERSION
__title__ = APP_NAME
__description__ = "Inventory management backend: items, persons, invoices and invoice-item links."
__all__ = []  # 'from app import *' 시 내보낼 이름 목록. 일반적으로 비워둡니다.
