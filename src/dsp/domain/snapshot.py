"""
SequenceSnapshot — неизменяемый снимок последовательности

Immutable Pydantic модель для обмена последовательностями через
JSON-контракт (contracts/schema/sequence.json). Снимок поддерживает
только типы элементов, представимые в JSON: float и int.
"""

from enum import Enum

from pydantic import BaseModel, Field, model_validator

from src.dsp.domain.sequence import Sequence


# =============================================================================
# ENUMS
# =============================================================================


class SampleType(str, Enum):
    """Тип элемента, допустимый в JSON-представлении"""

    FLOAT = "float"
    INT = "int"


_SAMPLE_TYPES = {
    SampleType.FLOAT: float,
    SampleType.INT: int,
}


# =============================================================================
# SNAPSHOT MODEL
# =============================================================================


class SequenceSnapshot(BaseModel):
    """
    Снимок последовательности: данные, смещение и тип элемента.

    Immutable модель (frozen=True); изменение последовательности
    требует нового снимка.
    """

    data: list[int | float] = Field(default_factory=list, description="Отсчёты по порядку")
    offset: int = Field(0, description="Логический индекс первого отсчёта")
    element_type: SampleType = Field(SampleType.FLOAT, description="Тип элемента")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_int_samples(self) -> "SequenceSnapshot":
        """Для element_type=int все отсчёты должны быть целыми."""
        if self.element_type is SampleType.INT:
            for i, v in enumerate(self.data):
                if isinstance(v, float) and not v.is_integer():
                    raise ValueError(f"data[{i}]={v} is not an integer sample")
        return self

    @classmethod
    def from_sequence(cls, seq: Sequence) -> "SequenceSnapshot":
        """
        Снимок существующей последовательности.

        Raises:
            ValueError: Если тип элемента не float/int
        """
        for sample_type, python_type in _SAMPLE_TYPES.items():
            if seq.element_type is python_type:
                return cls(data=list(seq.data), offset=seq.offset, element_type=sample_type)
        raise ValueError(
            f"element_type {seq.element_type!r} has no JSON representation "
            f"(supported: {', '.join(t.value for t in SampleType)})"
        )

    def to_sequence(self) -> Sequence:
        """Новая последовательность с отсчётами, приведёнными к element_type."""
        python_type = _SAMPLE_TYPES[self.element_type]
        return Sequence(
            [python_type(v) for v in self.data],
            offset=self.offset,
            element_type=python_type,
        )
