# gpguide/plot/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
gpguide plotting utilities.
"""

from .plotutils import Figure, plot_prediction

__all__ = ["Figure", "plot_prediction"]
