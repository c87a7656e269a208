"""
Measurable value contract.

Contains the generic distance / advanced operations and the Strideable base
class for custom measurable types.
"""

from stridekit.core.domain.measurable import (
    NotStrideableError,
    Strideable,
    advanced,
    distance,
    is_strideable,
    zero_of,
)

__all__ = [
    # Exceptions
    "NotStrideableError",
    # Types
    "Strideable",
    # Functions
    "advanced",
    "distance",
    "is_strideable",
    "zero_of",
]
