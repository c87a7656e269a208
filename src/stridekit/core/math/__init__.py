"""
Core math modules для stridekit

Предусловия stride, ULP-сравнения и выбор формулы шага.
"""

# Numerical Safeguards
from stridekit.core.math.numerical_safeguards import (
    DEFAULT_ULP_TOLERANCE,
    InvalidStrideBound,
    InvalidStrideStep,
    is_ascending,
    is_nan,
    is_valid_float,
    is_within_ulps,
    is_zero_step,
    ulp_distance,
    validate_bound,
    validate_step,
    validate_step_moves,
)

# Step Policy
from stridekit.core.math.step_policy import (
    StepPolicy,
    StrideCursor,
    adding_product,
    advance_cursor,
    initial_cursor,
    is_floating_distance,
    register_floating_distance,
    resolve_step_policy,
    unregister_floating_distance,
)

__all__ = [
    # Numerical Safeguards — Constants
    "DEFAULT_ULP_TOLERANCE",
    # Numerical Safeguards — Exceptions
    "InvalidStrideBound",
    "InvalidStrideStep",
    # Numerical Safeguards — Functions
    "is_ascending",
    "is_nan",
    "is_valid_float",
    "is_within_ulps",
    "is_zero_step",
    "ulp_distance",
    "validate_bound",
    "validate_step",
    "validate_step_moves",
    # Step Policy — Types
    "StepPolicy",
    "StrideCursor",
    # Step Policy — Functions
    "adding_product",
    "advance_cursor",
    "initial_cursor",
    "is_floating_distance",
    "register_floating_distance",
    "resolve_step_policy",
    "unregister_floating_distance",
]
