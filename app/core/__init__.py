# app/core/__init__.py

"""
애플리케이션의 핵심 구성 요소 패키지입니다.

- `config.py`: 애플리케이션의 설정 및 환경 변수 관리 (Pydantic Settings)와 로깅 초기화.
"""

__title__ = "Petclinic Customers Core"
__description__ = "Core components for the Petclinic customers service."
__version__ = "0.1.0"
__all__ = []  # 'from app.core import *' 시 내보낼 이름 목록. 일반적으로 비워둡니다.

# 명시적인 임포트 경로(예: from app.core.config import settings)를 사용합니다.
