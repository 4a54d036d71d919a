# gpguide/core/prediction.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Posterior mean and variance of a conditioned GP.

Functions
---------
posterior(covariance_function, fit, xt, return_type=0)
    Posterior mean and variance (or covariance) at xt given a `Fit`.
prior(xt, return_type=0)
    "No information" prediction used before any inference: zero mean
    and zero variance.
"""
import gpguide.num as gnp


def posterior(covariance_function, fit, xt, return_type=0):
    """Compute the posterior mean and variance at xt.

    Parameters
    ----------
    covariance_function : gpguide.kernel.CovarianceFunction
    fit : gpguide.core.inference.Fit
    xt : gnp.array, shape (m, d)
        Prediction points.
    return_type : int, optional
        Indicator for posterior variance:
          -1: return None,
           0: return variance (default),
           1: return full covariance.

    Returns
    -------
    zt_posterior_mean : gnp.array, shape (m,)
    zt_posterior_variance : gnp.array, shape (m,) or (m, m), or None

    Notes
    -----
    mean = K(xt, xi) alpha and covariance = K(xt, xt) - vᵀ v with
    v = C^{-1} K(xi, xt), where C is the cached Cholesky factor.
    """
    Kit = covariance_function.covariance(fit.xi, xt)
    zt_posterior_mean = gnp.matmul(Kit.T, fit.alpha)

    if return_type == -1:
        return zt_posterior_mean, None

    v = gnp.solve_triangular(fit.C, Kit, lower=True)
    if return_type == 0:
        zt_prior_variance = covariance_function.covariance(xt, pairwise=True)
        return zt_posterior_mean, zt_prior_variance - gnp.sum(v * v, axis=0)
    elif return_type == 1:
        zt_prior_covariance = covariance_function.covariance(xt)
        return zt_posterior_mean, zt_prior_covariance - gnp.matmul(v.T, v)
    else:
        raise ValueError("return_type must be in {-1, 0, 1}")


def prior(xt, return_type=0):
    """Prediction of an unconditioned GP: zero mean, zero variance."""
    m = xt.shape[0]
    if return_type == -1:
        return gnp.zeros((m,)), None
    elif return_type == 0:
        return gnp.zeros((m,)), gnp.zeros((m,))
    elif return_type == 1:
        return gnp.zeros((m,)), gnp.zeros((m, m))
    else:
        raise ValueError("return_type must be in {-1, 0, 1}")
