# tests/domains/__init__.py

"""
도메인별 테스트 스위트 패키지입니다.

- `test_customers_n.py`: 'customers' 도메인 (Owner, Pet, PetType) 엔티티에 대한 테스트.
"""

__title__ = "Petclinic Domain Tests"
__description__ = "Categorized tests for each business domain."
__version__ = "0.1.0"
__all__ = []
