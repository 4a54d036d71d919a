# gpguide/kernel/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Gaussian Process kernels and related utilities.

This subpackage provides the periodic covariance functions used for
drift prediction and hyperparameter selection tools.

Modules
-------
periodic
    Periodic and square-exponential kernels with analytic gradients.
covfunc
    `CovarianceFunction`, a kernel variant with its parameters.
bounds
    Empirical parameter bounds (noise, signal sd, lengthscales, period).
parameter_selection
    Maximum-likelihood hyperparameter selection.

Public API
-----------
- Kernels:
    square_exponential_kernel, periodic_kernel,
    periodic_square_exponential_covariance,
    periodic_square_exponential2_covariance,
    square_exponential_periodic_covariance
- Covariance functions:
    CovarianceFunction, VARIANTS, finite_difference_gradient
- Parameter selection:
    empirical_bounds
    make_selection_criterion_with_gradient
    autoselect_parameters
    select_hyperparameters
"""

from .periodic import (
    square_exponential_kernel,
    periodic_kernel,
    periodic_square_exponential_covariance,
    periodic_square_exponential2_covariance,
    square_exponential_periodic_covariance,
)
from .covfunc import CovarianceFunction, VARIANTS, finite_difference_gradient
from .bounds import empirical_bounds
from .parameter_selection import (
    make_selection_criterion_with_gradient,
    autoselect_parameters,
    select_hyperparameters,
)

__all__ = [
    # Kernels
    "square_exponential_kernel",
    "periodic_kernel",
    "periodic_square_exponential_covariance",
    "periodic_square_exponential2_covariance",
    "square_exponential_periodic_covariance",
    # Covariance functions
    "CovarianceFunction",
    "VARIANTS",
    "finite_difference_gradient",
    # Parameter selection
    "empirical_bounds",
    "make_selection_criterion_with_gradient",
    "autoselect_parameters",
    "select_hyperparameters",
]
