# app/domains/customers/models.py

"""
'customers' 도메인 (PostgreSQL 'customers' 스키마)의 ORM 모델을 정의하는 모듈입니다.

이 모듈은 'customers' 스키마에 속하는 테이블 (types, owners, pets)에 대한 SQLModel 클래스를 포함합니다.
각 클래스는 테이블 구조를 Python 객체로 매핑하며,
SQLModel의 Field 및 Relationship을 사용하여 고객(Owner)과 반려동물(Pet) 간의
일대다 관계와 역참조(back-reference)를 정의합니다.
"""

import logging
from datetime import date
from typing import Any, Iterable, List, Optional, Tuple

from sqlmodel import Field, Relationship, SQLModel

logger = logging.getLogger(__name__)


def _format_value(value: Any) -> str:
    # 문자열은 작은따옴표로 감싸고, None 및 그 밖의 값은 그대로 출력합니다.
    if isinstance(value, str):
        return f"'{value}'"
    return str(value)


def _to_string(entity: Any, fields: Iterable[Tuple[str, Any]]) -> str:
    """
    엔티티를 `[ClassName@hex fieldName = 'value', ...]` 형식의 진단용 문자열로 만듭니다.
    """
    body = ", ".join(f"{name} = {_format_value(value)}" for name, value in fields)
    return f"[{entity.__class__.__name__}@{id(entity):x} {body}]"


def _pet_sort_key(pet: "Pet") -> Tuple[bool, str]:
    # 이름이 없는 반려동물이 먼저 오고, 나머지는 대소문자 구분 없이 오름차순으로 정렬합니다.
    return (pet.name is not None, (pet.name or "").lower())


# =============================================================================
# 1. customers.types 테이블 모델
# =============================================================================
class PetType(SQLModel, table=True):
    """
    반려동물의 종류 (예: cat, dog)를 나타내는 customers.types 테이블 모델입니다.
    """
    __tablename__ = "types"
    __table_args__ = {'schema': 'customers'}

    id: Optional[int] = Field(default=None, primary_key=True, description="반려동물 종류 고유 ID")
    name: Optional[str] = Field(default=None, max_length=80, description="종류명")

    def __str__(self) -> str:
        return self.name or ""


# =============================================================================
# 2. customers.owners 테이블 모델
# =============================================================================
class Owner(SQLModel, table=True):
    """
    클리닉 고객(반려동물 소유자)을 나타내는 customers.owners 테이블 모델입니다.

    연락처 필드들은 값 검증 없이 그대로 저장됩니다.
    소유한 반려동물 목록은 `pets` 관계가 보관하며, 외부에는 `get_pets()`와
    `add_pet()`을 통해서만 다루는 것을 원칙으로 합니다.
    """
    __tablename__ = "owners"
    __table_args__ = {'schema': 'customers'}

    id: Optional[int] = Field(default=None, primary_key=True, description="고객 고유 ID")
    first_name: Optional[str] = Field(default=None, max_length=30, description="이름")
    last_name: Optional[str] = Field(default=None, max_length=30, index=True, description="성")
    address: Optional[str] = Field(default=None, max_length=255, description="주소")
    city: Optional[str] = Field(default=None, max_length=80, description="도시")
    telephone: Optional[str] = Field(default=None, max_length=20, description="전화번호")

    # 관계 정의: Pet.owner 와 양방향으로 연결됩니다.
    pets: List["Pet"] = Relationship(
        back_populates="owner",
        sa_relationship_kwargs={"cascade": "all"}
    )

    @property
    def is_new(self) -> bool:
        """아직 ID가 부여되지 않은 (저장 전) 엔티티이면 True를 반환합니다."""
        return self.id is None

    def _get_pets_internal(self) -> List["Pet"]:
        """
        반려동물 컬렉션 자체를 반환합니다.

        최초 접근 시 빈 컬렉션을 만들고, 이후 호출에서는 항상 같은 컬렉션 객체를 돌려줍니다.
        """
        if self.pets is None:
            self.pets = []
        return self.pets

    def get_pets(self) -> List["Pet"]:
        """
        반려동물 목록을 이름순으로 정렬한 새 리스트로 반환합니다.
        반환된 리스트를 수정해도 고객 엔티티에는 영향이 없습니다.
        """
        return sorted(self._get_pets_internal(), key=_pet_sort_key)

    def add_pet(self, pet: "Pet") -> None:
        """
        반려동물을 이 고객에게 추가하고, 반려동물의 owner 역참조를 이 고객으로 설정합니다.

        같은 객체를 다시 추가하면 무시되며, 다른 고객에게 속해 있던 반려동물은
        이전 고객의 목록에서 빠지고 이 고객에게로 이동합니다.
        """
        if pet is None:
            raise TypeError("pet must not be None")

        previous_owner = pet.owner
        pets = self._get_pets_internal()
        #  동일성(identity) 기준으로 중복을 판단합니다.
        if not any(existing is pet for existing in pets):
            pets.append(pet)
        pet.owner = self

        if previous_owner is not None and previous_owner is not self:
            logger.debug(f"반려동물 '{pet.name}' 소유자 변경: {previous_owner.last_name} -> {self.last_name}")
        else:
            logger.debug(f"반려동물 '{pet.name}' 추가: owner={self.last_name}, 총 {len(pets)}마리")

    def __str__(self) -> str:
        return _to_string(self, [
            ("id", self.id),
            ("new", self.is_new),
            ("lastName", self.last_name),
            ("firstName", self.first_name),
            ("address", self.address),
            ("city", self.city),
            ("telephone", self.telephone),
        ])


# =============================================================================
# 3. customers.pets 테이블 모델
# =============================================================================
class Pet(SQLModel, table=True):
    """
    고객이 소유한 반려동물을 나타내는 customers.pets 테이블 모델입니다.
    owner 는 소유 고객에 대한 역참조이며, Owner.add_pet() 호출 시 설정됩니다.
    """
    __tablename__ = "pets"
    __table_args__ = {'schema': 'customers'}

    id: Optional[int] = Field(default=None, primary_key=True, description="반려동물 고유 ID")
    name: Optional[str] = Field(default=None, max_length=30, description="반려동물 이름")
    birth_date: Optional[date] = Field(default=None, description="생년월일")
    type_id: Optional[int] = Field(default=None, foreign_key="customers.types.id", description="반려동물 종류 ID (FK)")
    owner_id: Optional[int] = Field(default=None, foreign_key="customers.owners.id", description="소유 고객 ID (FK)")

    # 관계 정의:
    type: Optional["PetType"] = Relationship()
    owner: Optional["Owner"] = Relationship(back_populates="pets")

    @property
    def is_new(self) -> bool:
        return self.id is None

    def __str__(self) -> str:
        owner = self.owner
        return _to_string(self, [
            ("id", self.id),
            ("name", self.name),
            ("birthDate", self.birth_date),
            ("type", self.type.name if self.type is not None else None),
            ("ownerFirstname", owner.first_name if owner is not None else None),
            ("ownerLastname", owner.last_name if owner is not None else None),
        ])
