"""
Sequence math modules

Выравнивание, поэлементная арифметика и свёртка последовательностей.
"""

# Alignment
from src.dsp.math.alignment import (
    extend,
    logical_span,
    pad_to_span,
    union_span,
)

# Elementwise
from src.dsp.math.elementwise import (
    DEFAULT_COMBINE_MODE,
    CombineMode,
    add,
    elementwise,
    multiply,
    subtract,
)

# Convolution
from src.dsp.math.convolution import conv

__all__ = [
    # Alignment
    "extend",
    "logical_span",
    "pad_to_span",
    "union_span",
    # Elementwise — Constants
    "DEFAULT_COMBINE_MODE",
    # Elementwise — Types
    "CombineMode",
    # Elementwise — Functions
    "add",
    "elementwise",
    "multiply",
    "subtract",
    # Convolution
    "conv",
]
