# gpguide/core/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------

"""
Core components of the gpguide package.

This subpackage contains the core numerical routines for Gaussian
Process regression: Cholesky-based inference, posterior prediction,
likelihood, gradient and Fisher information computations, sampling,
and supporting linear algebra utilities.

Public API
----------
GaussianProcess : class
    Gaussian Process model façade combining all core routines.
"""

from .model import GaussianProcess

__all__ = ["GaussianProcess"]
