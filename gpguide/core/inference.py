# gpguide/core/inference.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Conditioning of a GP on a training set.

`factorize` builds the regularized data covariance K(X, X) + σ_n² I,
factors it and returns a `Fit` record that holds everything the
prediction and likelihood routines need.
"""
from collections import namedtuple

import gpguide.num as gnp
from .linalg import cholesky_with_jitter, cholesky_factor_solve

Fit = namedtuple(
    "Fit",
    ["xi", "zi", "C", "alpha", "dK", "noise_variance", "jitter"],
)
Fit.__doc__ = """Cached factorization of a conditioned GP.

xi : (n, d) training locations
zi : (n,) training outputs
C : (n, n) lower Cholesky factor of K(xi, xi) + noise_variance I (+ jitter I)
alpha : (n,) K^{-1} zi
dK : list of (n, n) kernel derivatives at xi, in kernel parameter order
noise_variance : exp(2 log_noise_sd)
jitter : diagonal jitter added on top of the noise (0.0 if none)
"""


def noise_variance(log_noise_sd):
    return float(gnp.exp(2.0 * log_noise_sd))


def factorize(covariance_function, log_noise_sd, xi, zi, jitter):
    """Factor the data covariance of (xi, zi).

    Parameters
    ----------
    covariance_function : gpguide.kernel.CovarianceFunction
    log_noise_sd : float
        log of the observation noise standard deviation.
    xi : gnp.array, shape (n, d)
    zi : gnp.array, shape (n,)
    jitter : float
        Relative jitter for the retry, see `cholesky_with_jitter`.

    Returns
    -------
    Fit

    Raises
    ------
    NumericInstabilityError
        If K cannot be factored.
    """
    K, dK = covariance_function.evaluate(xi)
    sn2 = noise_variance(log_noise_sd)
    K = K + sn2 * gnp.eye(K.shape[0])
    C, added = cholesky_with_jitter(K, jitter)
    alpha = cholesky_factor_solve(C, zi)
    return Fit(xi, zi, C, alpha, dK, sn2, added)
