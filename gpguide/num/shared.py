# gpguide/num/shared.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""Backend-independent helpers for gpguide.num."""

from typing import Any, Callable, Union

Scalar = Union[int, float]
ArrayLike = Any


def central_finite_diff(
    f: Callable[[Scalar], ArrayLike], x: Scalar, h: Scalar
) -> ArrayLike:
    """2-point central difference ``(f(x + h) - f(x - h)) / 2h``.

    Used to check the analytic kernel derivatives; f(x) must return an
    array of fixed shape.
    """
    return (f(x + h) - f(x - h)) / (2.0 * h)
