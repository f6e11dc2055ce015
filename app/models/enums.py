"""도메인 열거형 정의.

Domain enumerations shared by models and schemas.
Members are persisted by their display value (e.g. "Prefer not to say").
"""

import enum

from sqlalchemy import Enum as SAEnum


class Sex(str, enum.Enum):
    """프로필 성별 — Profile sex."""

    MALE = "Male"
    FEMALE = "Female"
    TRANSGENDER = "Transgender"
    OTHER = "Other"
    PREFER_NOT_TO_SAY = "Prefer not to say"


class Proficiency(str, enum.Enum):
    """기술 숙련도 — Technology proficiency."""

    EXPERT = "Expert"
    ADVANCED = "Advanced"
    INTERMEDIATE = "Intermediate"
    BEGINNER = "Beginner"


def value_enum(enum_cls: type[enum.Enum], length: int) -> SAEnum:
    """열거형 값을 VARCHAR로 저장하는 컬럼 타입을 생성합니다.

    Build a non-native Enum column type that stores member values.
    """
    return SAEnum(
        enum_cls,
        native_enum=False,
        length=length,
        values_callable=lambda members: [m.value for m in members],
    )
