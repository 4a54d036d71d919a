# gpguide/core/utils.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Small utilities used across `gpguide.core` and `gpguide.kernel`.

This file hosts shape/type validation and conversion helpers for
locations and outputs.
"""
import gpguide.num as gnp


def as_locations(x):
    """Return locations as a 2D (n, d) backend array.

    A scalar or a 1D array of length n is read as n scalar locations.
    """
    x = gnp.asarray(x)
    if x.ndim == 0:
        x = x.reshape(1, 1)
    elif x.ndim == 1:
        x = x.reshape(-1, 1)
    assert x.ndim == 2, "locations should be a 1D or 2D array"
    return gnp.asdouble(x)


def ensure_shapes_and_type(*, xi=None, zi=None, xt=None):
    """Validate and adjust shapes/types of input arrays.

    Parameters
    ----------
    xi : array_like, optional
        Training locations (n,) or (n, d).
    zi : array_like, optional
        Training outputs (n,) or (n, 1).
    xt : array_like, optional
        Query locations (m,) or (m, d).

    Returns
    -------
    tuple
        (xi, zi, xt) with xi, xt of shape (., d) and zi of shape (n,).

    Notes
    -----
    - If `zi` is provided as a 2D column (n,1), it is reshaped to (n,).
    - Basic dimensionality checks are enforced:
        * zi is 1D or a single-column 2D
        * xi.shape[0] == zi.shape[0] (when both given)
        * xi.shape[1] == xt.shape[1] (when both given)
    """
    if xi is not None:
        xi = as_locations(xi)

    if zi is not None:
        zi = gnp.asdouble(gnp.asarray(zi))
        if zi.ndim == 2:
            assert zi.shape[1] == 1, "zi should only have one column if it's a 2D array"
            zi = zi.reshape(-1)  # (n,1) -> (n,)
        elif zi.ndim == 0:
            zi = zi.reshape(1)
        else:
            assert zi.ndim == 1, "zi should be 1D or a 2D column array"

    if xt is not None:
        xt = as_locations(xt)

    if xi is not None and zi is not None:
        if xi.shape[0] != zi.shape[0]:
            raise ValueError(
                f"locations and outputs differ in length ({xi.shape[0]} != {zi.shape[0]})"
            )
    if xi is not None and xt is not None:
        assert xi.shape[1] == xt.shape[1], "xi and xt must have the same number of columns"

    return xi, zi, xt
