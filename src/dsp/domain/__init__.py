"""
Domain models and value objects.

Contains the Sequence entity, its immutable JSON snapshot and the
element-type helpers both are built on.
"""

from src.dsp.domain.numerical_safeguards import (
    DEFAULT_ELEMENT_TYPE,
    DEFAULT_OFFSET,
    ZERO_TOL,
    format_sample,
    infer_element_type,
    is_zero_sample,
    validate_count,
    validate_integer,
    zero_of,
)
from src.dsp.domain.sequence import Sequence, SequenceIndexError
from src.dsp.domain.snapshot import SampleType, SequenceSnapshot

__all__ = [
    # Numerical Safeguards — Constants
    "DEFAULT_ELEMENT_TYPE",
    "DEFAULT_OFFSET",
    "ZERO_TOL",
    # Numerical Safeguards — Functions
    "format_sample",
    "infer_element_type",
    "is_zero_sample",
    "validate_count",
    "validate_integer",
    "zero_of",
    # Sequence entity
    "Sequence",
    "SequenceIndexError",
    # Snapshot model
    "SampleType",
    "SequenceSnapshot",
]
