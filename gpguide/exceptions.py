# gpguide/exceptions.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Exceptions raised by gpguide.

Both exceptions leave the object that raised them unchanged.
"""
from numpy.linalg import LinAlgError


class ParameterCountError(ValueError):
    """A parameter vector does not have the length expected by its owner."""

    def __init__(self, expected, received, what="hyperparameters"):
        self.expected = expected
        self.received = received
        super().__init__(
            f"Expected {expected} {what}, received {received}."
        )


class NumericInstabilityError(LinAlgError):
    """A covariance matrix could not be Cholesky factored, even with jitter."""
