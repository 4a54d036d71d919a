# gpguide/kernel/covfunc.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Covariance function objects.

A `CovarianceFunction` couples one variant of the closed kernel family
defined in `gpguide.kernel.periodic` with its hyperparameter vector and,
for some variants, a vector of extra parameters that are held fixed
(not differentiated, not optimized).

Variants
--------
periodic_square_exponential
    4 parameters, no extra parameter.
periodic_square_exponential2
    6 parameters, 1 extra parameter (log period).
square_exponential_periodic
    5 parameters, no extra parameter.
"""
from collections import namedtuple

import gpguide.num as gnp
from gpguide.exceptions import ParameterCountError
from gpguide.core.utils import as_locations
from .periodic import (
    periodic_square_exponential_covariance,
    periodic_square_exponential2_covariance,
    square_exponential_periodic_covariance,
)

KernelVariant = namedtuple(
    "KernelVariant",
    [
        "name",
        "covariance",
        "parameter_names",
        "parameter_roles",
        "extra_parameter_names",
        "default_extra_parameters",
    ],
)

VARIANTS = {
    "periodic_square_exponential": KernelVariant(
        "periodic_square_exponential",
        periodic_square_exponential_covariance,
        ("log_lengthscale_periodic", "log_period", "log_signal_sd", "log_lengthscale_se"),
        ("periodic_lengthscale", "period", "sd", "lengthscale"),
        (),
        (),
    ),
    "periodic_square_exponential2": KernelVariant(
        "periodic_square_exponential2",
        periodic_square_exponential2_covariance,
        (
            "log_lengthscale_se0",
            "log_signal_sd_se0",
            "log_lengthscale_periodic",
            "log_signal_sd_periodic",
            "log_lengthscale_se1",
            "log_signal_sd_se1",
        ),
        ("lengthscale", "sd", "periodic_lengthscale", "sd", "lengthscale", "sd"),
        ("log_period",),
        (0.0,),
    ),
    "square_exponential_periodic": KernelVariant(
        "square_exponential_periodic",
        square_exponential_periodic_covariance,
        (
            "log_lengthscale_periodic",
            "log_period",
            "log_signal_sd_periodic",
            "log_lengthscale_se",
            "log_signal_sd_se",
        ),
        ("periodic_lengthscale", "period", "sd", "lengthscale", "sd"),
        (),
        (),
    ),
}


def _as_vector(v):
    return gnp.asdouble(gnp.asarray(v)).reshape(-1).copy()


class CovarianceFunction:
    """Covariance function of one kernel variant with its parameters.

    Parameters
    ----------
    variant : str
        One of the keys of `VARIANTS`.
    parameters : array_like, optional
        Hyperparameters (log scale). Defaults to zeros.
    extra_parameters : array_like, optional
        Fixed extra parameters for variants that have some.

    Raises
    ------
    ValueError
        If the variant is unknown.
    ParameterCountError
        If a parameter vector has the wrong length.

    Examples
    --------
    >>> cf = CovarianceFunction("periodic_square_exponential", [1.0, 2.0, 3.0, 4.0])
    >>> K, dK = cf.evaluate([0.0, 50.0, 100.0])
    >>> len(dK) == cf.get_parameter_count()
    True
    """

    def __init__(self, variant, parameters=None, extra_parameters=None):
        try:
            self._variant = VARIANTS[variant]
        except KeyError:
            raise ValueError(
                f"Unknown covariance variant '{variant}'. "
                f"Supported variants are {sorted(VARIANTS)}."
            ) from None
        self._parameters = gnp.zeros((len(self._variant.parameter_names),))
        self._extra_parameters = _as_vector(self._variant.default_extra_parameters)
        if parameters is not None:
            self.set_parameters(parameters)
        if extra_parameters is not None:
            self.set_extra_parameters(extra_parameters)

    def __repr__(self):
        return (
            f"CovarianceFunction({self.variant!r}, "
            f"parameters={self._parameters.tolist()}, "
            f"extra_parameters={self._extra_parameters.tolist()})"
        )

    @property
    def variant(self):
        return self._variant.name

    @property
    def parameter_names(self):
        return list(self._variant.parameter_names)

    @property
    def parameter_roles(self):
        return list(self._variant.parameter_roles)

    @property
    def extra_parameter_names(self):
        return list(self._variant.extra_parameter_names)

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------
    def evaluate(self, x1, x2=None):
        """Covariance matrix between x1 and x2 and its parameter derivatives.

        Parameters
        ----------
        x1 : array_like, shape (n,) or (n, d)
        x2 : array_like, shape (m,) or (m, d), optional
            Defaults to x1.

        Returns
        -------
        K : gnp.array, shape (n, m)
        dK : list of gnp.array, shape (n, m)
            One matrix per hyperparameter, in parameter order.
        """
        x1 = as_locations(x1)
        x2 = None if x2 is None else as_locations(x2)
        return self._variant.covariance(
            x1, x2, self._parameters, self._extra_parameters, pairwise=False, gradient=True
        )

    def covariance(self, x1, x2=None, pairwise=False):
        """Covariance matrix (or pairwise vector) without derivatives."""
        x1 = as_locations(x1)
        x2 = None if x2 is None else as_locations(x2)
        return self._variant.covariance(
            x1, x2, self._parameters, self._extra_parameters, pairwise=pairwise, gradient=False
        )

    # ------------------------------------------------------------------
    # Parameters
    # ------------------------------------------------------------------
    def get_parameter_count(self):
        return len(self._variant.parameter_names)

    def get_parameters(self):
        return self._parameters.copy()

    get_hyper_parameters = get_parameters

    def set_parameters(self, parameters):
        p = _as_vector(parameters)
        if p.shape[0] != self.get_parameter_count():
            raise ParameterCountError(self.get_parameter_count(), p.shape[0])
        self._parameters = p

    def get_extra_parameter_count(self):
        return len(self._variant.extra_parameter_names)

    def get_extra_parameters(self):
        return self._extra_parameters.copy()

    def set_extra_parameters(self, extra_parameters):
        p = _as_vector(extra_parameters)
        if p.shape[0] != self.get_extra_parameter_count():
            raise ParameterCountError(
                self.get_extra_parameter_count(), p.shape[0], what="extra parameters"
            )
        self._extra_parameters = p

    def copy(self):
        return CovarianceFunction(
            self.variant, self._parameters, self._extra_parameters
        )


def finite_difference_gradient(covariance_function, x1, x2=None, step=1e-6):
    """Central finite-difference derivatives of K w.r.t. each hyperparameter.

    Parameters
    ----------
    covariance_function : CovarianceFunction
        Left unchanged.
    x1, x2 : array_like
        Locations, as for `CovarianceFunction.evaluate`.
    step : float, optional
        Finite-difference step.

    Returns
    -------
    list of gnp.array
        ``(K(theta + step e_h) - K(theta - step e_h)) / (2 step)`` for each h.
    """
    cf = covariance_function.copy()
    theta = cf.get_parameters()

    def covariance_at(h):
        def f(theta_h):
            p = theta.copy()
            p[h] = theta_h
            cf.set_parameters(p)
            return cf.covariance(x1, x2)

        return f

    return [
        gnp.central_finite_diff(covariance_at(h), theta[h], step)
        for h in range(theta.shape[0])
    ]
