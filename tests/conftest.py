# tests/conftest.py

import sys
import os
from typing import Callable, Optional

import pytest

# --- 경로 설정 ---
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

#  모든 모델을 한 번에 임포트하여 매퍼가 전체 관계를 인식하도록 합니다.
from app.domains.models import Owner, Pet, PetType  # noqa: E402


# --- 엔티티 픽스처 ---
@pytest.fixture
def owner() -> Owner:
    """아무 필드도 설정되지 않은 새 고객 엔티티를 반환합니다."""
    return Owner()


@pytest.fixture
def john_doe() -> Owner:
    """연락처 필드가 모두 채워진 고객 엔티티를 반환합니다."""
    return Owner(
        first_name="John",
        last_name="Doe",
        address="123 Main St",
        city="Springfield",
        telephone="1234567890",
    )


@pytest.fixture
def make_pet() -> Callable[..., Pet]:
    """이름(과 선택적으로 종류)을 받아 새 반려동물 엔티티를 만드는 팩토리 픽스처입니다."""
    def _make_pet(name: Optional[str] = None, type_name: Optional[str] = None) -> Pet:
        pet = Pet()
        pet.name = name
        if type_name is not None:
            pet.type = PetType(name=type_name)
        return pet
    return _make_pet
