# gpguide/num/numpy_backend.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""NumPy numerical backend for gpguide.

This module defines the NumPy implementation of the gpguide.num API:
array constructors coerced to float64, the elementwise and reduction
functions used by the kernels, triangular solves from SciPy and the
module random generator.
"""

import builtins
from typing import Any, Optional, Union
from gpguide.config import get_config, init_backend, get_logger

Scalar = Union[int, float]
ArrayLike = Any

_gpguide_backend_: str = init_backend()
_config = get_config()
_logger = get_logger()
_logger.info("Using backend: %s", _gpguide_backend_)

_LINALG_ERROR_KEYWORDS = (
    "singular",
    "not positive definite",
    "not positive-definite",
    "cholesky",
    "decomposition",
    "factorization",
    "ill-conditioned",
    "linalg",
    "lapack",
    "array must not contain infs or nans",
)

# -----------------------------------------------------
#
#                      NUMPY
#
# -----------------------------------------------------

import numpy

_np_dtype = numpy.float64

from numpy import (
    copy,
    any,
    all,
    isnan,
    isfinite,
    concatenate,
    diag,
    abs,
    sqrt,
    exp,
    log,
    sin,
    diff,
    sum,
    mean,
    std,
    sort,
    argsort,
    min,
    max,
    argmax,
    maximum,
    einsum,
    matmul,
    outer,
    interp,
    polyfit,
    polyval,
    hamming,
)
from numpy.fft import rfft, rfftfreq
from numpy.linalg import LinAlgError, cholesky
from numpy import pi, inf
from numpy import float64
from scipy.linalg import solve_triangular
from scipy.spatial.distance import cdist

# ..................................................


def _is_linalg_exception(exc: Exception) -> bool:
    if isinstance(exc, numpy.linalg.LinAlgError):
        return True
    msg = str(exc).lower()
    return builtins.any(keyword in msg for keyword in _LINALG_ERROR_KEYWORDS)


# ..................................................


def array(x, dtype=None):
    if dtype is not None:
        return numpy.array(x, dtype=dtype)
    out = numpy.array(x)
    if numpy.issubdtype(out.dtype, numpy.floating):
        return out.astype(_np_dtype, copy=False)
    return out


def asarray(x, dtype=None):
    if dtype is not None:
        return numpy.asarray(x, dtype=dtype)
    if isinstance(x, numpy.ndarray):
        if numpy.issubdtype(x.dtype, numpy.floating):
            return x.astype(_np_dtype, copy=False)
        return x
    elif isinstance(x, (int, float)):
        dt = _np_dtype if isinstance(x, float) else None
        return numpy.array([x], dtype=dt)
    else:
        out = numpy.asarray(x)
        if numpy.issubdtype(out.dtype, numpy.floating):
            return out.astype(_np_dtype, copy=False)
        return out


def asdouble(x):
    return numpy.asarray(x).astype(float64, copy=False)


def zeros(shape, dtype=None):
    return numpy.zeros(shape, dtype=_np_dtype if dtype is None else dtype)


def eye(n, m=None, k=0, dtype=None):
    return numpy.eye(n, M=m, k=k, dtype=_np_dtype if dtype is None else dtype)


def linspace(start, stop, num=50, endpoint=True, dtype=None):
    return numpy.linspace(
        start, stop, num=num, endpoint=endpoint,
        dtype=_np_dtype if dtype is None else dtype,
    )


def to_np(x):
    return x


# ..................................................


def sqeuclidean_distance(x: ArrayLike, y: ArrayLike) -> ArrayLike:
    """Squared Euclidean distances between the rows of x (n, d) and y (m, d)."""
    return cdist(x, y, "sqeuclidean")


def sqeuclidean_distance_elementwise(x: ArrayLike, y: Optional[ArrayLike]) -> ArrayLike:
    if x is y or y is None:
        return zeros((x.shape[0],))
    return sum((x - y) ** 2, axis=1)


# ..................................................

# Module generator, reseeded with set_seed(); callers may pass their own.
_np_rng = numpy.random.default_rng(seed=_config.seed)


def set_seed(seed: int) -> None:
    """Set the module NumPy generator seed."""
    global _np_rng
    _np_rng = numpy.random.default_rng(seed=seed)


def get_rng(rng=None):
    """Resolve ``rng`` (None, int seed or Generator) to a Generator."""
    if rng is None:
        return _np_rng
    if isinstance(rng, numpy.random.Generator):
        return rng
    return numpy.random.default_rng(seed=rng)


def rand(*shape: int, rng=None) -> ArrayLike:
    return get_rng(rng).random(shape, dtype=_np_dtype)


def randn(*shape: int, rng=None) -> ArrayLike:
    return get_rng(rng).standard_normal(size=shape, dtype=_np_dtype)
