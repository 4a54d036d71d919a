# gpguide/config.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import os
import logging

# Read version from VERSION file
_version_file = os.path.join(os.path.dirname(__file__), "..", "VERSION")
try:
    with open(os.path.abspath(_version_file), "r") as f:
        __version__ = f.read().strip()
except FileNotFoundError:
    __version__ = "0.0.0"

_SUPPORTED_BACKENDS = ("numpy",)


class _GPGuideConfig:
    def __init__(self):
        self.version = __version__
        self.backend = None
        self.dtype = float
        self.seed = 1234
        # diagonal jitter: scaled by mean(diag K) on factorization retries,
        # added as is to the sampling covariance
        self.jitter = 1e-6
        # default log of the observation noise standard deviation
        self.log_noise_sd = -10.0
        # logger lives in config
        self.logger = logging.getLogger("gpguide")
        if not self.logger.handlers:
            h = logging.StreamHandler()
            h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
            self.logger.addHandler(h)
        self.logger.setLevel(logging.INFO)

    def __str__(self):
        return (
            f"GPGuideConfig("
            f"version={self.version}, "
            f"backend={self.backend}, "
            f"dtype={self.dtype}, "
            f"seed={self.seed}, "
            f"jitter={self.jitter}, "
            f"log_noise_sd={self.log_noise_sd})"
        )

    def __repr__(self):
        return (
            f"<GPGuideConfig "
            f"version={self.version!r}, "
            f"backend={self.backend!r}, "
            f"dtype={self.dtype!r}, "
            f"seed={self.seed!r}, "
            f"jitter={self.jitter!r}, "
            f"log_noise_sd={self.log_noise_sd!r}>"
        )

    def update(self, **kwargs):
        for k, v in kwargs.items():
            if not hasattr(self, k):
                raise AttributeError(f"Unknown configuration entry '{k}'")
            setattr(self, k, v)
        return self


_config = _GPGuideConfig()


def get_config():
    return _config


def _detect_backend():
    env = os.environ.get("GPGUIDE_BACKEND")
    if env in _SUPPORTED_BACKENDS:
        return env
    return "numpy"


def init_backend():
    """Idempotent. Detect and store backend, set env for downstream imports."""
    if _config.backend is None:
        backend = _detect_backend()
        _config.backend = backend
        os.environ["GPGUIDE_BACKEND"] = backend
    return _config.backend


def set_backend(backend: str):
    """Force a backend before importing gpguide.num."""
    if backend not in _SUPPORTED_BACKENDS:
        raise ValueError("backend must be 'numpy'")
    _config.backend = backend
    os.environ["GPGUIDE_BACKEND"] = backend


def get_backend():
    """Return current backend; triggers detection if not set."""
    return _config.backend or init_backend()


def set_jitter(jitter: float):
    if jitter <= 0.0:
        raise ValueError("jitter must be positive")
    _config.jitter = float(jitter)


def get_logger():
    return _config.logger


def set_log_level(level):
    _config.logger.setLevel(level)
