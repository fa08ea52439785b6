# tests/__init__.py

"""
Petclinic 고객 서비스의 테스트 스위트 패키지입니다.

테스트 코드는 `pytest` 프레임워크를 기반으로 작성되며,
각 비즈니스 도메인에 따라 하위 디렉토리로 구조화됩니다.

- `domains/`: 각 도메인(customers)에 대한 테스트 파일들을 포함하는 디렉토리입니다.
- `conftest.py`: 테스트 함수가 공유하는 `pytest` fixtures를 정의하는 파일입니다.
"""

__title__ = "Petclinic Customers Tests"
__description__ = "Test suite for the Petclinic customers service."
__version__ = "0.1.0"
__all__ = []
