# gpguide/core/sample_paths.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Sampling routines for Gaussian Process models.

This module provides one draw from the prior (no fit) or from the
posterior (given a `Fit`) at a set of locations.
"""
import gpguide.num as gnp
from gpguide.exceptions import NumericInstabilityError
from . import prediction


def draw_sample(covariance_function, fit, xt, jitter, random_vector=None, rng=None):
    """Draw one sample path at ``xt``.

    Parameters
    ----------
    covariance_function : gpguide.kernel.CovarianceFunction
    fit : gpguide.core.inference.Fit or None
        None samples from the prior GP(0, k).
    xt : gnp.array, shape (m, d)
        Sample locations.
    jitter : float
        Added to the diagonal of the sampling covariance.
    random_vector : array_like, shape (m,), optional
        Standard normal vector. Drawn from ``rng`` when omitted.
    rng : None, int or numpy.random.Generator, optional

    Returns
    -------
    gnp.array, shape (m,)

    Notes
    -----
    With Σ + jitter I = C Cᵀ, the sample is mean + C u, u ~ N(0, I).
    """
    m = xt.shape[0]
    if random_vector is None:
        u = gnp.randn(m, rng=rng)
    else:
        u = gnp.asdouble(gnp.asarray(random_vector)).reshape(-1)
        if u.shape[0] != m:
            raise ValueError(
                f"random_vector has length {u.shape[0]}, expected {m}"
            )

    if fit is None:
        mean = gnp.zeros((m,))
        Sigma = covariance_function.covariance(xt)
    else:
        mean, Sigma = prediction.posterior(covariance_function, fit, xt, return_type=1)

    try:
        C = gnp.cholesky(Sigma + jitter * gnp.eye(m))
    except gnp.LinAlgError as e:
        raise NumericInstabilityError(
            "Sampling covariance is not positive definite; consider a larger jitter."
        ) from e
    if gnp.any(gnp.isnan(C)):
        raise NumericInstabilityError("Cholesky factorization failed (NaNs).")

    return gnp.matmul(C, u) + mean
