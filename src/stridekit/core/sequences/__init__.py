"""
Stride sequences: half-open (stride_to) and closed (stride_through).
"""

from stridekit.core.sequences.base import StrideIterator, StrideSequence
from stridekit.core.sequences.closed import StrideThrough, StrideThroughIterator
from stridekit.core.sequences.descriptor import StrideDescriptor
from stridekit.core.sequences.half_open import StrideTo, StrideToIterator
from stridekit.core.sequences.stride import stride, stride_through, stride_to

__all__ = [
    # Types
    "StrideDescriptor",
    "StrideIterator",
    "StrideSequence",
    "StrideThrough",
    "StrideThroughIterator",
    "StrideTo",
    "StrideToIterator",
    # Functions
    "stride",
    "stride_through",
    "stride_to",
]
