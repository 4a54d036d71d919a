# gpguide/num/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""Numerical backend dispatcher for gpguide."""

from gpguide.config import init_backend

from . import shared as _shared

_gpguide_backend_ = init_backend()

if _gpguide_backend_ == "numpy":
    from . import numpy_backend as _backend
else:
    raise RuntimeError(
        "Please set the GPGUIDE_BACKEND environment variable to 'numpy'."
    )

# Re-export backend API.
for _name in dir(_backend):
    if _name.startswith("__"):
        continue
    globals()[_name] = getattr(_backend, _name)

# Re-export backend-independent helpers from shared.py.
central_finite_diff = _shared.central_finite_diff
