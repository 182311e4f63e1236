"""Free vector statistics usable on any 1D sample sequence."""

from windowdsp.vector.stats import (
    as_float_vector,
    v_add,
    v_correlation_coefficient,
    v_dot_product,
    v_energy,
    v_length,
    v_max,
    v_mean,
    v_min,
    v_mod,
    v_multiply,
    v_normalize_to_unit_length,
    v_normalize_to_unit_variance,
    v_power,
    v_remove_mean,
    v_sqrt,
    v_std,
    v_sum,
    v_variance,
)

__all__ = [
    "as_float_vector",
    "v_add",
    "v_correlation_coefficient",
    "v_dot_product",
    "v_energy",
    "v_length",
    "v_max",
    "v_mean",
    "v_min",
    "v_mod",
    "v_multiply",
    "v_normalize_to_unit_length",
    "v_normalize_to_unit_variance",
    "v_power",
    "v_remove_mean",
    "v_sqrt",
    "v_std",
    "v_sum",
    "v_variance",
]
