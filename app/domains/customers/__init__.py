# app/domains/customers/__init__.py

"""
Petclinic 애플리케이션의 'customers' 도메인 패키지입니다.

이 패키지는 'customers' 스키마에 해당하는 엔티티 모델을 포함합니다.
'customers' 도메인은 고객(Owner) 정보와 고객이 소유한 반려동물(Pet),
그리고 반려동물의 종류(PetType)를 관리하는 역할을 합니다.

주요 서브모듈:
- `models.py`: 'customers' 스키마의 테이블에 매핑되는 SQLModel 정의.
"""

__title__ = "Petclinic Customers Domain"
__description__ = "Manages pet owners, their pets, and pet types."
__version__ = "0.1.0"
__all__ = []  # 'from app.domains.customers import *' 시 내보낼 이름 목록. 일반적으로 비워둡니다.

# 일반적으로 명시적인 임포트 (예: from app.domains.customers.models import Owner)가 권장됩니다.
