# gacore: Dense Clifford Algebra Kernel (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0

"""Input validation for gacore multivectors.

Unlike internal sanity checks (plain ``assert``), these guard user input and
always raise, even under ``python -O``.
"""

import torch


class DimensionalityError(ValueError):
    """Coefficient data does not fit the algebra it is built under."""


class AlgebraMismatchError(ValueError):
    """Operands belong to algebras with different signatures or devices."""


def check_coefficients(coefficients: torch.Tensor, algebra, name: str = "coefficients") -> None:
    """Raise unless *coefficients* is 1-D with at most ``algebra.dim`` entries."""
    if coefficients.ndim != 1:
        raise DimensionalityError(
            f"{name}: expected a flat list of coefficients, got shape {tuple(coefficients.shape)}"
        )
    count = coefficients.shape[0]
    if count > algebra.dim:
        raise DimensionalityError(
            f"INCOMPATIBLE DIMENSIONALITY: provided {count} coefficients, but the "
            f"configured algebra {algebra} supports only {algebra.dim}. Check the "
            f"algebra signature or adjust the number of coefficients."
        )


def check_blade_index(index: int, algebra) -> None:
    """Raise ``IndexError`` unless ``0 <= index < algebra.dim``."""
    if not 0 <= index < algebra.dim:
        raise IndexError(
            f"Blade index {index} out of range for {algebra} (valid: 0..{algebra.dim - 1})"
        )


def check_same_algebra(a, b, op: str) -> None:
    """Raise if two multivectors were built under different signatures."""
    if a.algebra != b.algebra:
        raise AlgebraMismatchError(
            f"{op}: operands belong to {a.algebra} and {b.algebra}; "
            f"multivectors of different algebras cannot be combined"
        )
    if str(a.algebra.device) != str(b.algebra.device):
        raise AlgebraMismatchError(
            f"{op}: operands of {a.algebra} live on {a.algebra.device} and "
            f"{b.algebra.device}; move both to one device first"
        )
