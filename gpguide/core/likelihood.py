# gpguide/core/likelihood.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Negative log-likelihood, its gradient and the Fisher information.

All routines work on a `gpguide.core.inference.Fit` and treat the GP
hyperparameter vector ``[log_noise_sd, *kernel_parameters]``. The
derivative of the data covariance with respect to ``log_noise_sd`` is
``2 σ_n² I``; the kernel derivatives are the analytic ones cached in the
fit.
"""
import gpguide.num as gnp
from .linalg import logdet_from_chol, inv_from_chol


def negative_log_likelihood(fit):
    """Negative log-likelihood of the training outputs of `fit`.

    .. math::
        L = \\frac{1}{2}\\left(z^T K^{-1} z + \\log|K| + n \\log 2\\pi\\right)

    Returns
    -------
    nll : float
    """
    n = fit.zi.shape[0]
    norm2 = gnp.einsum("i, i", fit.zi, fit.alpha)
    ldetK = logdet_from_chol(fit.C)
    L = 0.5 * (norm2 + ldetK + n * gnp.log(2.0 * gnp.pi))
    return float(L)


def _derivatives(fit):
    """dK/dθ for every GP hyperparameter, noise first."""
    n = fit.zi.shape[0]
    return [2.0 * fit.noise_variance * gnp.eye(n)] + list(fit.dK)


def negative_log_likelihood_gradient(fit):
    """Gradient of `negative_log_likelihood` w.r.t. the GP hyperparameters.

    .. math::
        \\frac{\\partial L}{\\partial \\theta_h}
        = \\frac{1}{2} \\mathrm{tr}\\left((K^{-1} - \\alpha\\alpha^T)
          \\frac{\\partial K}{\\partial \\theta_h}\\right)

    Returns
    -------
    gradient : gnp.array, shape (1 + p,)
    """
    Kinv = inv_from_chol(fit.C)
    W = Kinv - gnp.outer(fit.alpha, fit.alpha)
    # dK is symmetric, so tr(W dK) is the sum of the elementwise product
    return gnp.array([0.5 * gnp.sum(W * dK) for dK in _derivatives(fit)])


def fisher_information(fit):
    """Fisher information matrix of the GP hyperparameters.

    .. math::
        I_{ij} = \\frac{1}{2} \\mathrm{tr}\\left(K^{-1}\\frac{\\partial K}{\\partial\\theta_i}
                 K^{-1}\\frac{\\partial K}{\\partial\\theta_j}\\right)

    Returns
    -------
    I : gnp.array, shape (1 + p, 1 + p)
    """
    Kinv = inv_from_chol(fit.C)
    A = [gnp.matmul(Kinv, dK) for dK in _derivatives(fit)]
    p = len(A)
    I = gnp.zeros((p, p))
    for i in range(p):
        for j in range(i, p):
            # tr(A_i A_j) = sum(A_i * A_j^T)
            I[i, j] = I[j, i] = 0.5 * gnp.sum(A[i] * A[j].T)
    return I
