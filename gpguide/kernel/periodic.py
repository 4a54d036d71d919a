# gpguide/kernel/periodic.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Periodic and square-exponential covariance functions with analytic
gradients.

All parameters are logarithms (of lengthscales, periods and signal
standard deviations). Each covariance function returns the covariance
matrix and, when ``gradient`` is True, the list of its elementwise
derivatives with respect to every parameter, in parameter order.
"""
import gpguide.num as gnp


def _distances(x, y, pairwise):
    """Squared distances and distances between the rows of x and y."""
    if pairwise:
        r2 = gnp.sqeuclidean_distance_elementwise(x, y)
    else:
        r2 = gnp.sqeuclidean_distance(x, x if y is None else y)
    return r2, gnp.sqrt(r2)


def square_exponential_kernel(r2, log_lengthscale, log_sd):
    """Square-exponential kernel and its log-parameter derivatives.

    .. math::
        k(r) = \\sigma^2 \\exp\\left(-\\frac{r^2}{2\\ell^2}\\right)

    Parameters
    ----------
    r2 : gnp.array
        Squared distances.
    log_lengthscale, log_sd : float
        :math:`\\log \\ell` and :math:`\\log \\sigma`.

    Returns
    -------
    k, dk_dlog_lengthscale, dk_dlog_sd : gnp.array
    """
    ls2 = gnp.exp(2.0 * log_lengthscale)
    sv = gnp.exp(2.0 * log_sd)
    k = sv * gnp.exp(-0.5 * r2 / ls2)
    return k, k * r2 / ls2, 2.0 * k


def periodic_kernel(r, log_lengthscale, log_period, log_sd):
    """Periodic kernel and its log-parameter derivatives.

    .. math::
        k(r) = \\sigma^2 \\exp\\left(-\\frac{2\\sin^2(\\pi r / P)}{\\ell^2}\\right)

    Returns
    -------
    k, dk_dlog_lengthscale, dk_dlog_period, dk_dlog_sd : gnp.array
    """
    ls2 = gnp.exp(2.0 * log_lengthscale)
    period = gnp.exp(log_period)
    sv = gnp.exp(2.0 * log_sd)
    u = gnp.pi * r / period
    s2 = gnp.sin(u) ** 2
    k = sv * gnp.exp(-2.0 * s2 / ls2)
    dk_dls = k * 4.0 * s2 / ls2
    # d(sin^2 u)/dlog P = -2 sin(u) cos(u) u = -sin(2u) u
    dk_dperiod = k * 2.0 * gnp.sin(2.0 * u) * u / ls2
    return k, dk_dls, dk_dperiod, 2.0 * k


def periodic_square_exponential_covariance(
    x, y, param, extra=None, pairwise=False, gradient=True
):
    """Square-exponential covariance modulated by a periodic term.

    .. math::
        k(r) = \\sigma_f^2 \\exp\\left(-\\frac{2\\sin^2(\\pi r/P)}{\\ell_p^2}
               - \\frac{r^2}{2\\ell_{se}^2}\\right)

    Parameters
    ----------
    x : gnp.array, shape (nx, d)
    y : gnp.array, shape (ny, d), or None for y := x
    param : gnp.array, shape (4,)
        [log(ell_p), log(P), log(sigma_f), log(ell_se)].
    extra : None
        Unused.
    pairwise : bool
        If True, return the vector k(x_i, y_i).
    gradient : bool
        If True, also return the list of derivatives.
    """
    r2, r = _distances(x, y, pairwise)
    p, dp_dls, dp_dperiod, _ = periodic_kernel(r, param[0], param[1], param[2])
    s, ds_dls, _ = square_exponential_kernel(r2, param[3], 0.0)
    K = p * s
    if not gradient:
        return K
    return K, [dp_dls * s, dp_dperiod * s, 2.0 * K, p * ds_dls]


def periodic_square_exponential2_covariance(
    x, y, param, extra, pairwise=False, gradient=True
):
    """Sum of a short square-exponential, a periodic with fixed period and a
    long square-exponential component.

    .. math::
        k(r) = \\sigma_0^2 e^{-r^2/(2\\ell_0^2)}
             + \\sigma_p^2 e^{-2\\sin^2(\\pi r/P)/\\ell_p^2}
             + \\sigma_1^2 e^{-r^2/(2\\ell_1^2)}

    Parameters
    ----------
    param : gnp.array, shape (6,)
        [log(ell_0), log(sigma_0), log(ell_p), log(sigma_p), log(ell_1), log(sigma_1)].
    extra : gnp.array, shape (1,)
        [log(P)]; the period is held fixed and not differentiated.
    """
    r2, r = _distances(x, y, pairwise)
    k0, dk0_dls, dk0_dsd = square_exponential_kernel(r2, param[0], param[1])
    k1, dk1_dls, _, dk1_dsd = periodic_kernel(r, param[2], extra[0], param[3])
    k2, dk2_dls, dk2_dsd = square_exponential_kernel(r2, param[4], param[5])
    K = k0 + k1 + k2
    if not gradient:
        return K
    return K, [dk0_dls, dk0_dsd, dk1_dls, dk1_dsd, dk2_dls, dk2_dsd]


def square_exponential_periodic_covariance(
    x, y, param, extra=None, pairwise=False, gradient=True
):
    """Composite of a periodic and a square-exponential component.

    .. math::
        k(r) = \\sigma_p^2 e^{-2\\sin^2(\\pi r/P)/\\ell_p^2}
             + \\sigma_{se}^2 e^{-r^2/(2\\ell_{se}^2)}

    Parameters
    ----------
    param : gnp.array, shape (5,)
        [log(ell_p), log(P), log(sigma_p), log(ell_se), log(sigma_se)].
    """
    r2, r = _distances(x, y, pairwise)
    k1, dk1_dls, dk1_dperiod, dk1_dsd = periodic_kernel(r, param[0], param[1], param[2])
    k2, dk2_dls, dk2_dsd = square_exponential_kernel(r2, param[3], param[4])
    K = k1 + k2
    if not gradient:
        return K
    return K, [dk1_dls, dk1_dperiod, dk1_dsd, dk2_dls, dk2_dsd]
