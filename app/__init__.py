# app/__init__.py

"""
Petclinic 고객(customers) 서비스의 메인 패키지입니다.

이 패키지는 공통 설정과 로깅을 담는 core 서브패키지,
그리고 고객(Owner)과 반려동물(Pet) 엔티티를 정의하는 domains 서브패키지로 구성됩니다.
"""

APP_NAME = "Petclinic Customers Service"
APP_VERSION = "0.1.0"

# PEP 440 (Version Identification and Dependency Specification)을 따르는 버전 정보
__version__ = APP_VERSION
__title__ = APP_NAME
__description__ = "Owner and Pet entity layer of the Petclinic customers service."
__license__ = "Apache-2.0"
__all__ = []  # 'from app import *' 시 내보낼 이름 목록. 일반적으로 비워둡니다.
