# gpguide/core/linalg.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Linear-algebra utilities shared across gpguide.core modules.

This file isolates small helpers built on top of `gpguide.num as gnp`
around a lower-triangular Cholesky factor C of a covariance K = C Cᵀ, so
they can be reused by inference, prediction, likelihood and sampling
code without import cycles.
"""
import gpguide.num as gnp
from gpguide.config import get_logger
from gpguide.exceptions import NumericInstabilityError

_logger = get_logger()


def _cholesky_or_none(K):
    try:
        C = gnp.cholesky(K)
    except gnp.LinAlgError:
        return None
    if gnp.any(gnp.isnan(C)):
        return None
    return C


def cholesky_with_jitter(K, jitter):
    """Cholesky factor of K, retried once with diagonal jitter.

    Parameters
    ----------
    K : array_like, shape (n, n)
        Symmetric covariance matrix.
    jitter : float
        Relative jitter. On failure, ``jitter * mean(diag(K))`` is added to
        the diagonal and the factorization is attempted once more.

    Returns
    -------
    C : array_like, shape (n, n)
        Lower-triangular factor.
    added : float
        Jitter actually added to the diagonal (0.0 if none).

    Raises
    ------
    NumericInstabilityError
        If both attempts fail.
    """
    C = _cholesky_or_none(K)
    if C is not None:
        return C, 0.0

    added = jitter * float(gnp.mean(gnp.diag(K)))
    if not added > 0.0:
        added = jitter
    _logger.warning(
        "Cholesky factorization failed, retrying with jitter %.3e on the diagonal",
        added,
    )
    C = _cholesky_or_none(K + added * gnp.eye(K.shape[0]))
    if C is None:
        raise NumericInstabilityError(
            "Covariance matrix is not positive definite, even with jitter."
        )
    return C, added


def cholesky_factor_solve(C, b):
    """Solve K x = b given the lower-triangular factor C of K (two triangular solves)."""
    y = gnp.solve_triangular(C, b, lower=True)
    return gnp.solve_triangular(C.T, y, lower=False)


def logdet_from_chol(C):
    """log|K| = 2 Σ log diag(C)."""
    return 2.0 * gnp.sum(gnp.log(gnp.diag(C)))


def inv_from_chol(C):
    """Return K^{-1} from its lower-triangular Cholesky factor C.

    Notes
    -----
    With T = C^{-1}, K^{-1} = Tᵀ T.
    """
    T = gnp.solve_triangular(C, gnp.eye(C.shape[0]), lower=True)
    return gnp.matmul(T.T, T)
