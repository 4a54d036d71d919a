# gpguide/math_tools.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Math utilities: pairwise distances, seeded random matrices and spectral
analysis of time series.

Functions
---------
square_distance(a, b=None)
    Pairwise squared Euclidean distances between the columns of a and b.
generate_uniform_random_matrix_0_1(rows, cols, rng=None)
    Uniform random matrix on [0, 1).
generate_normal_random_matrix(rows, cols, rng=None)
    Standard normal random matrix.
hamming_window(n)
    Hamming window of length n.
compute_spectrum(data, n_min=0)
    One-sided power spectrum with zero padding to a power of two.
estimate_period(locations, outputs, n_min=4096)
    Dominant period of an irregularly sampled time series.
"""
from math import ceil, log2
import gpguide.num as gnp


def _as_columns(a):
    a = gnp.asarray(a)
    if a.ndim == 1:
        # a vector is a row of scalar points
        return a.reshape(1, -1)
    if a.ndim != 2:
        raise ValueError("square_distance expects 1D or 2D arrays")
    return a


def square_distance(a, b=None):
    """Squared Euclidean distances between the columns of ``a`` and ``b``.

    Parameters
    ----------
    a : array_like, shape (d, n)
        n points of dimension d, stored as columns. A 1D array of
        length n is read as n scalar points.
    b : array_like, shape (d, m), optional
        m points of dimension d. Defaults to ``a``.

    Returns
    -------
    D : ndarray, shape (n, m)
        ``D[i, j] = ||a[:, i] - b[:, j]||^2``.

    Notes
    -----
    Each entry is a sum of squared coordinate differences, so
    ``square_distance(a, b)`` equals ``square_distance(b, a).T`` exactly
    and does not depend on whether ``b`` is ``a`` or a copy of it.
    """
    a = _as_columns(a)
    b = a if b is None else _as_columns(b)
    if a.shape[0] != b.shape[0]:
        raise ValueError(
            f"Point dimensions differ: {a.shape[0]} and {b.shape[0]}"
        )
    return gnp.sqeuclidean_distance(a.T, b.T)


def generate_uniform_random_matrix_0_1(rows, cols, rng=None):
    """Matrix of i.i.d. uniform samples on [0, 1).

    ``rng`` is an int seed, a ``numpy.random.Generator`` or None (module
    generator, see ``gnp.set_seed``).
    """
    return gnp.rand(rows, cols, rng=rng)


def generate_normal_random_matrix(rows, cols, rng=None):
    """Matrix of i.i.d. standard normal samples (``rng`` as above)."""
    return gnp.randn(rows, cols, rng=rng)


def hamming_window(n):
    return gnp.hamming(n)


def compute_spectrum(data, n_min=0):
    """One-sided power spectrum of a uniformly sampled signal.

    The signal is zero-padded to the next power of two that is at least
    ``max(n_min, len(data))``.

    Returns
    -------
    amplitudes : ndarray, shape (N // 2 + 1,)
        Squared magnitudes of the FFT coefficients.
    frequencies : ndarray, shape (N // 2 + 1,)
        Frequencies in cycles per sample, from 0 to 0.5.
    """
    data = gnp.asarray(data).reshape(-1)
    n = max(int(n_min), data.shape[0], 1)
    n = 2 ** int(ceil(log2(n)))
    amplitudes = gnp.abs(gnp.rfft(data, n=n)) ** 2
    frequencies = gnp.rfftfreq(n)
    return amplitudes, frequencies


def estimate_period(locations, outputs, n_min=4096):
    """Estimate the dominant period of a time series.

    The samples are sorted, linearly interpolated onto a uniform grid with
    the same number of points, detrended with a least-squares line and
    weighted with a Hamming window before the spectrum is computed.

    Parameters
    ----------
    locations : array_like, shape (n,)
        Sample times (any order, not necessarily uniform).
    outputs : array_like, shape (n,)
        Measurements.
    n_min : int, optional
        Minimum FFT length (controls the frequency resolution).

    Returns
    -------
    period : float
        Period of the strongest non-zero frequency, in location units.
    """
    x = gnp.asarray(locations).reshape(-1)
    z = gnp.asarray(outputs).reshape(-1)
    if x.shape[0] != z.shape[0]:
        raise ValueError("locations and outputs must have the same length")
    n = x.shape[0]
    if n < 4:
        raise ValueError("at least 4 samples are needed to estimate a period")

    order = gnp.argsort(x)
    x, z = x[order], z[order]
    span = x[-1] - x[0]
    if span <= 0.0:
        raise ValueError("locations must not all be equal")
    step = span / (n - 1)

    grid = gnp.linspace(x[0], x[-1], n)
    zg = gnp.interp(grid, x, z)
    zg = zg - gnp.polyval(gnp.polyfit(grid, zg, 1), grid)
    zg = zg * hamming_window(n)

    amplitudes, frequencies = compute_spectrum(zg, n_min)
    k = int(gnp.argmax(amplitudes[1:])) + 1
    return float(step / frequencies[k])
