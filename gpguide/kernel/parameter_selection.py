# gpguide/kernel/parameter_selection.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Hyperparameter selection by maximum likelihood and optimization helpers.
"""

import time
import numpy as np
from scipy.optimize import minimize
import gpguide.num as gnp
from gpguide.config import get_config, get_logger
from gpguide.core import inference, likelihood
from gpguide.core.utils import ensure_shapes_and_type

_logger = get_logger()


# ---------------------- criterion + gradient maker --------------------
def make_selection_criterion_with_gradient(gp, xi=None, zi=None):
    """
    Build the negative log-likelihood and its gradient as functions of the
    GP hyperparameter vector ``[log_noise_sd, *kernel_parameters]``.

    Parameters
    ----------
    gp : gpguide.core.GaussianProcess
        GP providing the covariance function. It is not modified: the
        criterion works on a private copy of its covariance function.
    xi, zi : array_like, optional
        Training set. Defaults to the training set of ``gp`` (which must
        then be inferred).

    Returns
    -------
    criterion : callable
        ``criterion(p) -> float``.
    gradient : callable
        ``gradient(p) -> array``.

    Notes
    -----
    The factorization at the last evaluated point is cached, so that the
    usual optimizer pattern (value then gradient at the same point) factors
    K once.
    """
    if xi is None and zi is None:
        if gp.fit is None:
            raise ValueError("xi and zi must be given when the GP is not inferred.")
        xi, zi = gp.fit.xi, gp.fit.zi
    elif xi is None or zi is None:
        raise ValueError("xi and zi must be given together.")
    else:
        xi, zi, _ = ensure_shapes_and_type(xi=xi, zi=zi)

    cf = gp.covariance_function
    if cf is None:
        raise ValueError("The GP has no covariance function.")
    jitter = get_config().jitter
    cache = {"p": None, "fit": None}

    def fit_at(p):
        p = gnp.asdouble(gnp.asarray(p)).reshape(-1)
        if cache["p"] is None or not gnp.all(cache["p"] == p):
            cache["p"], cache["fit"] = None, None
            cf.set_parameters(p[1:])
            cache["fit"] = inference.factorize(cf, p[0], xi, zi, jitter)
            cache["p"] = p.copy()
        return cache["fit"]

    def criterion(p):
        return likelihood.negative_log_likelihood(fit_at(p))

    def gradient(p):
        return likelihood.negative_log_likelihood_gradient(fit_at(p))

    return criterion, gradient


# ------------------------------ optimizer -----------------------------
def autoselect_parameters(
    p0,
    criterion,
    gradient,
    bounds=None,
    bounds_auto=True,
    bounds_delta=10.0,
    silent=True,
    info=False,
    method="L-BFGS-B",
    method_options=None,
):
    """
    Minimize a scalar selection criterion with SciPy.

    Parameters
    ----------
    p0 : array_like
        Initial parameter vector.
    criterion : callable
        Objective function ``criterion(p) -> scalar``.
    gradient : callable
        Gradient function ``gradient(p) -> array_like``.
    bounds : sequence of tuple, optional
        Bounds passed to SciPy.
    bounds_auto : bool, default=True
        If True and ``bounds`` is None, construct local bounds around ``p0``
        using ``bounds_delta`` and internal safety limits.
    bounds_delta : float, default=10.0
        Half-width used for automatic local bounds.
    silent : bool, default=True
        If False, enable solver output.
    info : bool, default=False
        If True, return the full SciPy result object.
    method : {"L-BFGS-B", "SLSQP"}, default="L-BFGS-B"
        Optimization method.
    method_options : dict, optional
        Additional options passed to SciPy ``minimize``.

    Returns
    -------
    p_opt : array_like
        Best parameter vector found.
    info_ret : scipy.optimize.OptimizeResult or None
        Optimization diagnostics if ``info=True``, else None.

    Notes
    -----
    The full optimization history is tracked. If the final SciPy result is
    worse than the best visited point, the best visited point is returned
    and ``best_value_returned`` is set to False in the result object.

    Linear-algebra failures while evaluating the criterion are mapped to
    ``+inf`` (and the gradient to zeros) so optimization can continue.
    Other exceptions are re-raised.

    Added fields in returned ``OptimizeResult`` (when ``info=True``):
    ``history_params``, ``history_criterion``, ``initial_params``,
    ``final_params``, ``bounds``, ``selection_criterion``, ``total_time``,
    and ``best_value_returned``.
    """
    if method_options is None:
        method_options = {}
    tic = time.time()
    p0 = np.asarray(p0, dtype=float).reshape(-1)

    # local tube if needed
    safe_lower, safe_upper = -500, 500
    if bounds is None and bounds_auto:
        bounds = [
            (
                max(param - bounds_delta, safe_lower),
                min(param + bounds_delta, safe_upper),
            )
            for param in p0
        ]
    if bounds is not None:
        lower = np.array([b[0] for b in bounds], dtype=float)
        upper = np.array([b[1] for b in bounds], dtype=float)
        p0 = np.clip(p0, lower, upper)

    history_params, history_criterion = [], []
    best_params, best_criterion = None, float("inf")

    def record(p, J):
        nonlocal best_params, best_criterion
        history_params.append(p.copy())
        history_criterion.append(J)
        if J < best_criterion:
            best_criterion, best_params = J, p.copy()

    def criterion_with_history(p):
        try:
            J = criterion(p)
        except Exception as exc:
            if gnp._is_linalg_exception(exc):
                J = np.inf
            else:
                raise
        record(p, J)
        return J

    def safe_gradient(p):
        try:
            return np.asarray(gradient(p), dtype=float)
        except Exception as exc:
            if gnp._is_linalg_exception(exc):
                return np.zeros_like(p)
            raise

    options = {"disp": not silent}
    if method == "L-BFGS-B":
        options.update(
            dict(
                maxcor=20,
                ftol=1e-6,
                gtol=1e-5,
                maxfun=15000,
                maxiter=15000,
                maxls=40,
            )
        )
    elif method == "SLSQP":
        options.update(dict(ftol=1e-6, maxiter=15000))
    else:
        raise ValueError("Optimization method not implemented.")
    options.update(method_options)

    r = minimize(
        criterion_with_history,
        p0,
        method=method,
        jac=safe_gradient,
        bounds=bounds,
        options=options,
    )

    # ensure returning best seen
    if best_params is not None and r.fun > best_criterion:
        r.x, r.fun, r.best_value_returned = best_params, best_criterion, False
    else:
        r.best_value_returned = True

    r.history_params = history_params
    r.history_criterion = history_criterion
    r.initial_params = p0
    r.final_params = r.x
    r.bounds = bounds
    r.selection_criterion = criterion
    r.total_time = time.time() - tic

    return (r.x, r) if info else (r.x, None)


# -------------------- high-level parameter selection procedure --------------
def select_hyperparameters(
    gp,
    xi=None,
    zi=None,
    p0=None,
    info=False,
    verbosity=0,
    *,
    bounds=None,
    bounds_auto=True,
    bounds_delta=10.0,
    method="L-BFGS-B",
    method_options=None,
):
    """
    Select the GP hyperparameters by maximum likelihood and apply them.

    Parameters
    ----------
    gp : gpguide.core.GaussianProcess
        GP whose hyperparameters are optimized.
    xi, zi : array_like, optional
        Training set. If given, ``gp.infer(xi, zi)`` is called first;
        otherwise the GP must already be inferred.
    p0 : array_like, optional
        Initial ``[log_noise_sd, *kernel_parameters]``. Defaults to the
        current hyperparameters of ``gp``.
    info : bool, default False
        If True, return optimization diagnostics.
    verbosity : int, default 0
        0: summary logged at DEBUG level, 1: at INFO level, 2: also SciPy
        solver output.
    bounds, bounds_auto, bounds_delta :
        Bounds configuration, forwarded to ``autoselect_parameters``
        (see also `gpguide.kernel.empirical_bounds`).
    method : str, default "L-BFGS-B"
        Optimization method ("L-BFGS-B" or "SLSQP").
    method_options : dict, optional
        Extra options passed to SciPy ``minimize``.

    Returns
    -------
    gp : gpguide.core.GaussianProcess
        The GP, inferred with the selected hyperparameters.
    info_ret : OptimizeResult | None
        Diagnostics if ``info=True``, else None.
    """
    tic = time.time()
    if xi is not None or zi is not None:
        gp.infer(xi, zi)
    if gp.fit is None:
        raise ValueError("The GP must be inferred (or xi, zi given) to select parameters.")

    if p0 is None:
        p0 = gp.get_hyper_parameters()

    crit, crit_grad = make_selection_criterion_with_gradient(gp)

    p_opt, info_ret = autoselect_parameters(
        p0,
        crit,
        crit_grad,
        bounds=bounds,
        bounds_auto=bounds_auto,
        bounds_delta=bounds_delta,
        silent=not (verbosity == 2),
        info=True,
        method=method,
        method_options=method_options,
    )

    gp.set_hyper_parameters(p_opt)

    log = _logger.info if verbosity >= 1 else _logger.debug
    log(
        "Hyperparameter selection: nll %.6g -> %.6g in %d evaluations (%.3fs)",
        info_ret.history_criterion[0] if info_ret.history_criterion else float("nan"),
        info_ret.fun,
        len(info_ret.history_criterion),
        time.time() - tic,
    )

    if info:
        info_ret["p0"] = gnp.to_np(gnp.asarray(p0))
        info_ret["time"] = time.time() - tic
        return gp, info_ret
    return gp, None
