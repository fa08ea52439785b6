# app/domains/__init__.py

"""
비즈니스 도메인 패키지입니다.

- `customers/`: 고객(Owner), 반려동물(Pet), 반려동물 종류(PetType) 엔티티.
- `models/`: 모든 도메인의 모델을 한 곳에서 임포트하는 집계 모듈.
"""
