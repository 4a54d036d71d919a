# gpguide/__init__.py

from . import config
from . import num
from . import math_tools
from . import exceptions
from . import core
from . import kernel
from .core import GaussianProcess
from .kernel import CovarianceFunction
from .exceptions import ParameterCountError, NumericInstabilityError

__all__ = [
    "num",
    "math_tools",
    "core",
    "kernel",
    "GaussianProcess",
    "CovarianceFunction",
    "ParameterCountError",
    "NumericInstabilityError",
    "__version__",
]

__version__ = config.__version__
