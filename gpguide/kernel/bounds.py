# gpguide/kernel/bounds.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Empirical parameter bounds for GP hyperparameters.
"""
import gpguide.num as gnp
from gpguide.core.utils import ensure_shapes_and_type


def _minimum_nonzero_gap_distance_1d(xj):
    """Smallest positive spacing among points in 1D (inf if none)."""
    xj = xj.reshape(-1)
    if xj.shape[0] < 2:
        return gnp.inf
    xs = gnp.sort(xj)
    diffs = gnp.diff(xs)
    diffs = diffs[diffs > 0.0]
    return gnp.min(diffs) if diffs.shape[0] > 0 else gnp.inf


def _log_interval(low, high):
    if not (gnp.isfinite(low) and gnp.isfinite(high)) or low <= 0.0 or high <= low:
        return (-gnp.inf, gnp.inf)
    return (float(gnp.log(low)), float(gnp.log(high)))


def empirical_bounds(
    covariance_function,
    xi,
    zi,
    *,
    noise_lower_factor=1e-4,
    sd_lower_factor=1e-2,
    sd_upper_factor=10.0,
    length_lower_factor=2.0,
    length_upper_factor=100.0,
    periodic_lengthscale_range=(0.05, 20.0),
):
    """Build bounds for ``[log_noise_sd, *kernel_parameters]``.

    Parameters
    ----------
    covariance_function : gpguide.kernel.CovarianceFunction
        Provides the role of each kernel parameter.
    xi : array_like, shape (n,) or (n, d)
    zi : array_like, shape (n,)

    Returns
    -------
    list of (float, float)
        Bounds in log space; ``(-inf, inf)`` where the data carry no
        information (e.g. a single location).

    Notes
    -----
    With s the empirical standard deviation of zi, h the smallest
    non-zero gap and R the range of the locations (first coordinate):

    - noise: [noise_lower_factor s, s]
    - sd: [sd_lower_factor s, sd_upper_factor s]
    - lengthscale: [length_lower_factor h, length_upper_factor R]
    - period: [length_lower_factor h, R]
    - periodic_lengthscale: `periodic_lengthscale_range` (dimensionless)
    """
    xi, zi, _ = ensure_shapes_and_type(xi=xi, zi=zi)
    s = float(gnp.std(zi)) if zi.shape[0] > 1 else 0.0
    if not s > 0.0:
        s = 1.0
    x = xi[:, 0]
    min_gap = _minimum_nonzero_gap_distance_1d(x)
    x_range = float(gnp.max(x) - gnp.min(x)) if x.shape[0] > 0 else 0.0

    bounds = [_log_interval(noise_lower_factor * s, s)]
    for role in covariance_function.parameter_roles:
        if role == "sd":
            bounds.append(_log_interval(sd_lower_factor * s, sd_upper_factor * s))
        elif role == "lengthscale":
            bounds.append(
                _log_interval(length_lower_factor * min_gap, length_upper_factor * x_range)
            )
        elif role == "period":
            bounds.append(_log_interval(length_lower_factor * min_gap, x_range))
        elif role == "periodic_lengthscale":
            bounds.append(_log_interval(*periodic_lengthscale_range))
        else:
            bounds.append((-gnp.inf, gnp.inf))
    return bounds
