# gpguide/core/model.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Gaussian Process model class.
"""
import warnings
import gpguide.num as gnp
from gpguide.config import get_config, get_logger
from gpguide.exceptions import ParameterCountError

from . import inference
from . import prediction
from . import likelihood
from . import sample_paths
from . import utils

_logger = get_logger()


class GaussianProcess:
    """Gaussian Process (GP) regression with a periodic covariance function.

    The model has a zero prior mean and a covariance
    ``k(x, y) + σ_n² δ(x, y)`` where ``k`` is a
    `gpguide.kernel.CovarianceFunction` and ``σ_n`` the observation noise
    standard deviation.

    States
    ------
    "empty"
        No training data. `predict` returns zero mean and zero variance,
        `draw_sample` samples from the prior.
    "inferred"
        A training set has been given to `infer`; its Cholesky
        factorization is cached and kept consistent with the
        hyperparameters.

    Attributes
    ----------
    covariance_function : gpguide.kernel.CovarianceFunction or None
        Read-only. A copy of the covariance function of the GP (None
        until one is given). The GP keeps its own copy of the object
        passed to the constructor or to `set_covariance_function`.
    log_noise_sd : float
        Read-only. log of the observation noise standard deviation.

    Public API (methods)
    --------------------
    infer
        Condition on a training set.
    predict
        Posterior mean/variance at target points.
    draw_sample
        One prior or posterior sample path.
    neg_log_likelihood, neg_log_likelihood_gradient
        Negative log-likelihood of the training set and its gradient
        w.r.t. ``[log_noise_sd, *kernel_parameters]``.
    fisher_information
        Fisher information of the same parameters.
    set_hyper_parameters, get_hyper_parameters, set_extra_parameters
        Parameter access; the cached fit follows parameter changes.
    set_covariance_function, clear
        Lifecycle.

    Examples
    --------
    >>> import gpguide as gg
    >>> cf = gg.kernel.CovarianceFunction(
    ...     "periodic_square_exponential", [1.0, 2.0, 3.0, 4.0])
    >>> gp = gg.core.GaussianProcess(cf)
    >>> gp.infer([0.0, 1.0, 2.0], [0.5, -0.2, 0.1]).state
    'inferred'
    >>> zt_mean, zt_var = gp.predict([3.0, 4.0])
    """

    def __init__(self, covariance_function=None, log_noise_sd=None):
        """
        Parameters
        ----------
        covariance_function : gpguide.kernel.CovarianceFunction, optional
        log_noise_sd : float, optional
            Defaults to ``get_config().log_noise_sd``.
        """
        self._covariance_function = (
            None if covariance_function is None else covariance_function.copy()
        )
        self._log_noise_sd = float(
            get_config().log_noise_sd if log_noise_sd is None else log_noise_sd
        )
        self._fit = None

    def __repr__(self):
        output = str("<gpguide.core.GaussianProcess object> " + hex(id(self)))
        return output

    def __str__(self):
        return (
            f"Gaussian Process:\n"
            f"  State: {self.state}\n"
            f"  Covariance Function: {self._covariance_function}\n"
            f"  Log Noise SD: {self.log_noise_sd}\n"
            f"  Training Points: {0 if self._fit is None else self._fit.zi.shape[0]}"
        )

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def state(self):
        return "empty" if self._fit is None else "inferred"

    @property
    def fit(self):
        """Cached `gpguide.core.inference.Fit`, None while empty."""
        return self._fit

    @property
    def covariance_function(self):
        """Copy of the covariance function (None if not set).

        The GP owns its covariance function; changes go through
        `set_hyper_parameters`, `set_extra_parameters` or
        `set_covariance_function` so that the cached fit follows them.
        """
        if self._covariance_function is None:
            return None
        return self._covariance_function.copy()

    @property
    def log_noise_sd(self):
        return self._log_noise_sd

    def _require_covariance_function(self):
        if self._covariance_function is None:
            raise ValueError(
                "No covariance function; use set_covariance_function first."
            )
        return self._covariance_function

    def _factorize(self, xi, zi):
        return inference.factorize(
            self._require_covariance_function(),
            self.log_noise_sd,
            xi,
            zi,
            get_config().jitter,
        )

    # ------------------------------------------------------------------
    # Inference and prediction
    # ------------------------------------------------------------------
    def infer(self, xi, zi):
        """Condition the GP on the training set (xi, zi).

        Parameters
        ----------
        xi : array_like, shape (n,) or (n, d)
            Training locations (time stamps), in any order.
        zi : array_like, shape (n,) or (n, 1)
            Training outputs.

        Returns
        -------
        self

        Raises
        ------
        NumericInstabilityError
            If the data covariance cannot be factored, even with jitter.
            The GP keeps its previous state.

        Notes
        -----
        An empty training set returns the GP to the "empty" state.
        """
        xi, zi, _ = utils.ensure_shapes_and_type(xi=xi, zi=zi)
        if zi.shape[0] == 0:
            self.clear()
            return self
        self._fit = self._factorize(xi, zi)
        _logger.debug("GP inferred on %d points", zi.shape[0])
        return self

    def predict(self, xt, return_type=0, zero_neg_variances=True):
        """Performs a prediction at target points xt.

        Parameters
        ----------
        xt : array_like, shape (m,) or (m, d)
            Target points.
        return_type : int, optional
            Indicator for posterior variance:
              -1: return None,
               0: return variance (default),
               1: return full covariance.
        zero_neg_variances : bool, optional
            Whether to replace negative posterior variances with zeros,
            by default True.

        Returns
        -------
        zt_posterior_mean : gnp.array, shape (m,)
        zt_posterior_variance : gnp.array, shape (m,) or (m, m), or None

        Notes
        -----
        While empty, the prediction carries no information: zero mean
        and zero variance.
        """
        _, _, xt = utils.ensure_shapes_and_type(xt=xt)
        if self._fit is None:
            return prediction.prior(xt, return_type)

        zt_posterior_mean, zt_posterior_variance = prediction.posterior(
            self._covariance_function, self._fit, xt, return_type
        )
        if return_type == 0:
            if gnp.any(zt_posterior_variance < 0.0):
                warnings.warn(
                    "Negative variances detected. Consider using jitter.",
                    RuntimeWarning,
                )
            if zero_neg_variances:
                zt_posterior_variance = gnp.maximum(zt_posterior_variance, 0.0)
        return zt_posterior_mean, zt_posterior_variance

    def draw_sample(self, xt, random_vector=None, rng=None):
        """Draw one sample path at xt from the prior (empty) or posterior (inferred).

        Parameters
        ----------
        xt : array_like, shape (m,) or (m, d)
        random_vector : array_like, shape (m,), optional
            Standard normal vector; drawn from ``rng`` when omitted.
        rng : None, int or numpy.random.Generator, optional
            Random source when ``random_vector`` is omitted. None uses the
            module generator (see `gpguide.num.set_seed`).

        Returns
        -------
        gnp.array, shape (m,)
        """
        _, _, xt = utils.ensure_shapes_and_type(xt=xt)
        return sample_paths.draw_sample(
            self._require_covariance_function(),
            self._fit,
            xt,
            get_config().jitter,
            random_vector=random_vector,
            rng=rng,
        )

    # ------------------------------------------------------------------
    # Likelihood (delegating to gpguide.core.likelihood)
    # ------------------------------------------------------------------
    def neg_log_likelihood(self):
        """Negative log-likelihood of the training set (0.0 while empty)."""
        if self._fit is None:
            return 0.0
        return likelihood.negative_log_likelihood(self._fit)

    def neg_log_likelihood_gradient(self):
        """Gradient of `neg_log_likelihood` w.r.t. `get_hyper_parameters()`.

        Returns zeros while empty.
        """
        if self._fit is None:
            return gnp.zeros((self._parameter_count(),))
        return likelihood.negative_log_likelihood_gradient(self._fit)

    def fisher_information(self):
        """Fisher information of the hyperparameters (zeros while empty)."""
        if self._fit is None:
            p = self._parameter_count()
            return gnp.zeros((p, p))
        return likelihood.fisher_information(self._fit)

    # ------------------------------------------------------------------
    # Parameters
    # ------------------------------------------------------------------
    def _parameter_count(self):
        return 1 + self._require_covariance_function().get_parameter_count()

    def get_hyper_parameters(self):
        """Return ``[log_noise_sd, *kernel_parameters]``."""
        cf = self._require_covariance_function()
        return gnp.concatenate(
            (gnp.array([self.log_noise_sd]), cf.get_parameters())
        )

    def set_hyper_parameters(self, hyper_parameters):
        """Set ``[log_noise_sd, *kernel_parameters]``.

        While inferred, the factorization is recomputed at once from the
        stored training set.

        Raises
        ------
        ParameterCountError
            Wrong vector length; nothing is changed.
        NumericInstabilityError
            The new covariance cannot be factored; the previous parameters
            and fit are restored.
        """
        cf = self._require_covariance_function()
        p = gnp.asdouble(gnp.asarray(hyper_parameters)).reshape(-1)
        if p.shape[0] != self._parameter_count():
            raise ParameterCountError(self._parameter_count(), p.shape[0])

        old_log_noise_sd, old_parameters = self.log_noise_sd, cf.get_parameters()
        self._log_noise_sd = float(p[0])
        cf.set_parameters(p[1:])
        try:
            self._refactorize()
        except gnp.LinAlgError:
            self._log_noise_sd = old_log_noise_sd
            cf.set_parameters(old_parameters)
            raise

    def set_extra_parameters(self, extra_parameters):
        """Set the fixed extra parameters of the covariance function."""
        cf = self._require_covariance_function()
        old_extra = cf.get_extra_parameters()
        cf.set_extra_parameters(extra_parameters)
        try:
            self._refactorize()
        except gnp.LinAlgError:
            cf.set_extra_parameters(old_extra)
            raise

    def get_extra_parameters(self):
        return self._require_covariance_function().get_extra_parameters()

    def _refactorize(self):
        if self._fit is not None:
            self._fit = self._factorize(self._fit.xi, self._fit.zi)
            _logger.debug("GP refactorized after a parameter change")

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def set_covariance_function(self, covariance_function):
        """Replace the covariance function.

        Returns
        -------
        bool
            True if replaced; False (and no change) while inferred.
        """
        if self._fit is not None:
            _logger.debug("Covariance function not replaced: GP is inferred")
            return False
        self._covariance_function = (
            None if covariance_function is None else covariance_function.copy()
        )
        return True

    def clear(self):
        """Drop the training set and cached factorization."""
        self._fit = None
        _logger.debug("GP cleared")
