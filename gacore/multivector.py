# gacore: Dense Clifford Algebra Kernel
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""Multivector Container Class.

Provides an immutable, object-oriented wrapper around a dense coefficient
tensor to enable operator overloading (``A * B`` for the geometric product,
``A ^ B`` for the wedge, ``A | B`` for the inner product).
"""

import operator

import torch

from gacore.algebra import CliffordAlgebra
from gacore.blades import blade_name, parse_blade
from gacore.validation import (
    DimensionalityError,
    check_blade_index,
    check_coefficients,
    check_same_algebra,
)

# Fixed tolerance used by ``==``; independent of ``is_zero``.
EQUALITY_TOLERANCE = 1e-10


class Multivector:
    """Immutable linear combination of the blades of one algebra.

    Coefficient ``k`` belongs to blade ``k`` (see :mod:`gacore.blades`).
    Every operator returns a new instance; operands are never modified.

    Equality is tolerant: two multivectors differ only when some blade has
    ``|a_k - b_k| > 1e-10`` (a NaN difference never separates them), so
    multivectors are deliberately unhashable.

    Attributes:
        algebra (CliffordAlgebra): The algebra the coefficients belong to.
    """

    __hash__ = None

    def __init__(self, algebra: CliffordAlgebra, coefficients=()):
        """Initializes a Multivector.

        Args:
            algebra (CliffordAlgebra): The algebra instance.
            coefficients: Sequence or 1-D tensor of at most ``algebra.dim``
                values. Missing high blades are zero. A bare number is a
                scalar.

        Raises:
            DimensionalityError: More coefficients than ``algebra.dim``.
        """
        data = torch.as_tensor(coefficients, dtype=torch.float64, device=algebra.device)
        if data.ndim == 0:
            data = data.reshape(1)
        check_coefficients(data, algebra)

        padded = torch.zeros(algebra.dim, dtype=torch.float64, device=algebra.device)
        padded[:data.shape[0]] = data

        self.algebra = algebra
        self._coefficients = padded

    @classmethod
    def _wrap(cls, algebra: CliffordAlgebra, tensor: torch.Tensor) -> "Multivector":
        """Adopts a freshly computed ``[dim]`` tensor without copying."""
        mv = cls.__new__(cls)
        mv.algebra = algebra
        mv._coefficients = tensor
        return mv

    @classmethod
    def blade(cls, algebra: CliffordAlgebra, index: int) -> "Multivector":
        """Creates a multivector representing a single basis blade.

        Args:
            algebra (CliffordAlgebra): The algebra instance.
            index (int): Blade index, ``0 <= index < algebra.dim``.

        Returns:
            Multivector: Coefficient 1.0 at ``index``, zero elsewhere.
        """
        index = operator.index(index)
        check_blade_index(index, algebra)
        coefficients = torch.zeros(algebra.dim, dtype=torch.float64, device=algebra.device)
        coefficients[index] = 1.0
        return cls._wrap(algebra, coefficients)

    @classmethod
    def from_name(cls, algebra: CliffordAlgebra, name: str) -> "Multivector":
        """Basis blade by name, e.g. ``"1"``, ``"e2"``, ``"e13"``."""
        return cls.blade(algebra, parse_blade(name, algebra.n))

    @classmethod
    def scalar(cls, algebra: CliffordAlgebra, value: float) -> "Multivector":
        """Pure scalar ``value``."""
        return cls(algebra, [value])

    @classmethod
    def from_vector(cls, algebra: CliffordAlgebra, components) -> "Multivector":
        """Creates a grade-1 multivector from vector components.

        Component ``i`` becomes the coefficient of ``e_{i+1}``, i.e. blade
        ``1 << i``.

        Args:
            algebra (CliffordAlgebra): The algebra instance.
            components: At most ``algebra.n`` values.

        Returns:
            Multivector: The embedded vector.
        """
        values = torch.as_tensor(components, dtype=torch.float64, device=algebra.device)
        if values.ndim != 1 or values.shape[0] > algebra.n:
            raise DimensionalityError(
                f"Provided vector of shape {tuple(values.shape)}, but {algebra} "
                f"has only {algebra.n} basis vectors"
            )
        coefficients = torch.zeros(algebra.dim, dtype=torch.float64, device=algebra.device)
        for i in range(values.shape[0]):
            coefficients[1 << i] = values[i]
        return cls._wrap(algebra, coefficients)

    @property
    def tensor(self) -> torch.Tensor:
        """A copy of the ``[dim]`` coefficient tensor."""
        return self._coefficients.clone()

    def tolist(self) -> list:
        return self._coefficients.tolist()

    def __len__(self):
        return self.algebra.dim

    def __iter__(self):
        return iter(self.tolist())

    def __getitem__(self, index) -> float:
        """Coefficient of blade ``index``; out-of-range raises ``IndexError``."""
        index = operator.index(index)
        check_blade_index(index, self.algebra)
        return self._coefficients[index].item()

    def grade(self, k: int) -> "Multivector":
        """Projects to grade k (blades with exactly ``k`` basis vectors)."""
        return Multivector._wrap(self.algebra, self.algebra.grade_projection(self._coefficients, k))

    def is_scalar(self) -> bool:
        """True if every non-scalar coefficient is exactly zero."""
        return not bool((self._coefficients[1:] != 0.0).any())

    def is_zero(self, tolerance: float) -> bool:
        """Checks whether the multivector vanishes.

        ``tolerance == 0`` is a bit-exact test (every coefficient ``== 0.0``);
        a positive tolerance accepts ``|coefficient| <= tolerance``. The
        tolerance has no default so callers pick one of the two tests.

        Raises:
            ValueError: Negative tolerance.
        """
        if tolerance < 0:
            raise ValueError(f"tolerance must be non-negative, got {tolerance}")
        if tolerance == 0:
            return bool((self._coefficients == 0.0).all())
        return bool((self._coefficients.abs() <= tolerance).all())

    def __eq__(self, other):
        if not isinstance(other, Multivector):
            return NotImplemented
        if self is other:
            return True
        if self.algebra != other.algebra:
            return False
        diff = (self._coefficients - other._coefficients).abs()
        # Only a difference provably above the tolerance separates; NaN does not
        return not bool((diff > EQUALITY_TOLERANCE).any())

    def __add__(self, other):
        """Element-wise addition."""
        if not isinstance(other, Multivector):
            return NotImplemented
        check_same_algebra(self, other, "+")
        return Multivector._wrap(self.algebra, self._coefficients + other._coefficients)

    def __sub__(self, other):
        """Element-wise subtraction."""
        if not isinstance(other, Multivector):
            return NotImplemented
        check_same_algebra(self, other, "-")
        return Multivector._wrap(self.algebra, self._coefficients - other._coefficients)

    def __neg__(self):
        return Multivector._wrap(self.algebra, -self._coefficients)

    def __mul__(self, other):
        """Geometric product (A * B), or scaling by a real number."""
        if isinstance(other, Multivector):
            check_same_algebra(self, other, "*")
            res = self.algebra.geometric_product(self._coefficients, other._coefficients)
            return Multivector._wrap(self.algebra, res)
        elif isinstance(other, (int, float)):
            return Multivector._wrap(self.algebra, self._coefficients * float(other))
        else:
            return NotImplemented

    def __rmul__(self, other):
        """Scalar on the left; same as scalar on the right."""
        if isinstance(other, (int, float)):
            return self.__mul__(other)
        return NotImplemented

    def __xor__(self, other):
        """Wedge product (A ^ B)."""
        if not isinstance(other, Multivector):
            return NotImplemented
        check_same_algebra(self, other, "^")
        return Multivector._wrap(self.algebra, self.algebra.wedge(self._coefficients, other._coefficients))

    def __or__(self, other):
        """Inner product (A | B)."""
        if not isinstance(other, Multivector):
            return NotImplemented
        check_same_algebra(self, other, "|")
        return Multivector._wrap(self.algebra, self.algebra.inner_product(self._coefficients, other._coefficients))

    def __str__(self):
        # Exact-zero suppression, unlike is_zero(tol)
        terms = [
            f"{value:.4f}*{blade_name(index)}"
            for index, value in enumerate(self.tolist())
            if value != 0.0
        ]
        if not terms:
            return "0"
        return " + ".join(terms)

    def __repr__(self):
        return f"Multivector({self}, algebra={self.algebra})"
