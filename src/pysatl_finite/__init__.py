"""
PySATL Finite
=============

Exact calculus of finite discrete probability distributions: an exact
probability value type, the distribution monad with conditioning and
independent products, parametric families of the standard finite
distributions and transition combinators for multi-step processes.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from importlib.metadata import version

from .config import *
from .config import __all__ as _config_all
from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import *
from .errors import __all__ as _errors_all
from .families import *
from .families import __all__ as _family_all
from .probability import *
from .probability import __all__ as _probability_all
from .types import *
from .types import __all__ as _types_all

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = version("pysatl-finite")
__all__ = [
    "__version__",
    *_config_all,
    *_distr_all,
    *_errors_all,
    *_family_all,
    *_probability_all,
    *_types_all,
]

del _config_all
del _distr_all
del _errors_all
del _family_all
del _probability_all
del _types_all
