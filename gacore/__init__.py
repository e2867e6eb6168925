# gacore: Dense Clifford Algebra Kernel (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0

"""Core mathematical kernel for Geometric Algebra.

Provides the Clifford algebra with its product tables, the immutable
multivector type, blade bit helpers, and input validation.
"""

__version__ = "0.1.0"

from .algebra import CliffordAlgebra
from .multivector import Multivector
from .device import resolve_device
from .validation import AlgebraMismatchError, DimensionalityError

from .blades import (
    grade,
    basis_indices,
    metric_sign,
    blade_name,
    parse_blade,
)

__all__ = [
    "__version__",
    # algebra
    "CliffordAlgebra",
    "Multivector",
    # device / validation
    "resolve_device",
    "AlgebraMismatchError",
    "DimensionalityError",
    # blades
    "grade",
    "basis_indices",
    "metric_sign",
    "blade_name",
    "parse_blade",
]
