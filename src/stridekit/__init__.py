"""
stridekit — generic stride sequences for measurable values.

    >>> from stridekit import stride_to, stride_through
    >>> list(stride_to(1, 10, 2))
    [1, 3, 5, 7, 9]
    >>> list(stride_through(0, 9, 3))
    [0, 3, 6, 9]
"""

from stridekit.core.domain import NotStrideableError, Strideable, advanced, distance
from stridekit.core.math import (
    InvalidStrideBound,
    InvalidStrideStep,
    StepPolicy,
    register_floating_distance,
    resolve_step_policy,
)
from stridekit.core.sequences import (
    StrideDescriptor,
    StrideThrough,
    StrideTo,
    stride,
    stride_through,
    stride_to,
)

__version__ = "0.1.0"

__all__ = [
    # Constructors
    "stride",
    "stride_through",
    "stride_to",
    # Sequences
    "StrideDescriptor",
    "StrideThrough",
    "StrideTo",
    # Measurable contract
    "Strideable",
    "advanced",
    "distance",
    # Step policies
    "StepPolicy",
    "register_floating_distance",
    "resolve_step_policy",
    # Exceptions
    "InvalidStrideBound",
    "InvalidStrideStep",
    "NotStrideableError",
]
