# gacore: Dense Clifford Algebra Kernel
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

import torch

from log import get_logger
from gacore.blades import metric_sign
from gacore.device import resolve_device
from gacore.validation import check_blade_index

logger = get_logger(__name__)

# Dense tables hold dim^2 entries per product; past this many basis vectors
# they grow beyond a few hundred MB.
LARGE_N = 12


def _popcount(x: torch.Tensor, n: int) -> torch.Tensor:
    """Elementwise number of set bits among the low ``n`` bits of ``x``."""
    count = torch.zeros_like(x)
    for _ in range(n):
        count += x & 1
        x = x >> 1
    return count


class CliffordAlgebra:
    """Clifford algebra ``Cl(p, q, r)`` with precomputed product tables.

    ``p`` basis vectors square to +1, ``q`` to -1 and ``r`` to 0. Blades are
    bitmasks over the ``n = p + q + r`` basis vectors, so a multivector is a
    dense vector of ``dim = 2^n`` coefficients.

    Tables are computed once per ``(p, q, r, device)`` and shared between all
    instances with that key; they are never mutated afterwards.

    Attributes:
        p (int): Positive signature dimensions.
        q (int): Negative signature dimensions.
        r (int): Degenerate (null) dimensions.
        n (int): Total dimensions (p + q + r).
        dim (int): Total basis elements (2^n).
        device (str): Device holding the tables.
        cayley_indices (torch.Tensor): ``[dim, dim]`` result blade ``a ^ b``.
        cayley_signs (torch.Tensor): ``[dim, dim]`` product sign in {-1, 0, 1}.
        grades (torch.Tensor): ``[dim]`` grade of every blade.
        grade_masks (list[torch.Tensor]): One bool ``[dim]`` mask per grade.
    """
    _CACHED_TABLES = {}

    def __init__(self, p: int, q: int = 0, r: int = 0, device: str = 'cpu'):
        """Initialize the algebra and fetch or build its tables.

        Args:
            p (int): Positive dimensions (+1).
            q (int, optional): Negative dimensions (-1). Defaults to 0.
            r (int, optional): Degenerate dimensions (0). Defaults to 0.
            device (str, optional): Table device, ``'auto'`` allowed. Defaults to 'cpu'.
        """
        assert p >= 0, f"p must be non-negative, got {p}"
        assert q >= 0, f"q must be non-negative, got {q}"
        assert r >= 0, f"r must be non-negative, got {r}"

        self.p, self.q, self.r = int(p), int(q), int(r)
        self.n = self.p + self.q + self.r
        self.dim = 1 << self.n
        self.device = resolve_device(device)

        cache_key = (self.p, self.q, self.r, str(self.device))
        if cache_key not in CliffordAlgebra._CACHED_TABLES:
            if self.n > LARGE_N:
                logger.warning(
                    f"{self} has {self.dim} blades; product tables need "
                    f"{self.dim * self.dim} entries each"
                )
            logger.debug(f"Generating product tables for {self} on {self.device}")
            CliffordAlgebra._CACHED_TABLES[cache_key] = self._generate_cayley_table()

        (
            self.cayley_indices,
            self.cayley_signs,
            self.gp_signs,
            self.wedge_keep,
            self.inner_keep,
            self.grades,
            self.grade_masks,
        ) = CliffordAlgebra._CACHED_TABLES[cache_key]

    @property
    def signature(self) -> tuple:
        """The ``(p, q, r)`` triple."""
        return (self.p, self.q, self.r)

    @property
    def num_grades(self) -> int:
        """Counts the number of grades (n + 1)."""
        return self.n + 1

    def __eq__(self, other):
        if not isinstance(other, CliffordAlgebra):
            return NotImplemented
        return self.signature == other.signature

    def __hash__(self):
        return hash(self.signature)

    def __repr__(self):
        return f"Cl({self.p},{self.q},{self.r})"

    def metric(self, index: int) -> int:
        """Square of basis vector ``index`` (0-based): +1, -1 or 0."""
        if not 0 <= index < self.n:
            raise IndexError(f"Basis vector {index} out of range for {self} (valid: 0..{self.n - 1})")
        return metric_sign(index, self.p, self.q)

    def mask(self, a: int, b: int) -> int:
        """Blade produced by ``blade_a * blade_b`` (always ``a XOR b``)."""
        check_blade_index(a, self)
        check_blade_index(b, self)
        return int(self.cayley_indices[a, b].item())

    def sign(self, a: int, b: int) -> int:
        """Sign of ``blade_a * blade_b``: -1, 0 or +1."""
        check_blade_index(a, self)
        check_blade_index(b, self)
        return int(self.cayley_signs[a, b].item())

    def basis_vectors(self):
        """The grade-1 basis ``[e1, ..., en]`` as multivectors."""
        from gacore.multivector import Multivector
        return [Multivector.blade(self, 1 << i) for i in range(self.n)]

    def _generate_cayley_table(self):
        """Precompute the Cayley table, accumulation tables and grade masks."""
        indices = torch.arange(self.dim, dtype=torch.long, device=self.device)
        A = indices.unsqueeze(1)  # left blade, rows
        B = indices.unsqueeze(0)  # right blade, cols

        cayley_indices = A ^ B
        cayley_signs = self._compute_signs(A, B)

        grades = _popcount(indices, self.n)
        grade_masks = [grades == k for k in range(self.n + 1)]

        # Wedge keeps only pairs sharing no basis vector
        wedge_keep = (A & B) == 0
        # Inner keeps only pairs whose result grade is |grade(a) - grade(b)|
        inner_keep = grades[cayley_indices] == (grades[A] - grades[B]).abs()

        # Accumulation layout: [i, k] describes the pair (blade_i, blade_(i^k)),
        # the only right blade landing on result k.
        def _by_result(table):
            return torch.gather(table, 1, cayley_indices)

        gp_signs = _by_result(cayley_signs).to(torch.float64)
        wedge_keep = _by_result(wedge_keep.long()).bool()
        inner_keep = _by_result(inner_keep.long()).bool()

        return (cayley_indices, cayley_signs, gp_signs, wedge_keep,
                inner_keep, grades, grade_masks)

    def _compute_signs(self, A: torch.Tensor, B: torch.Tensor) -> torch.Tensor:
        """Sign matrix from reordering parity and metric contraction.

        1. Reordering: for every basis vector ``i`` of ``B``, each basis vector
           ``j > i`` of ``A`` must be swapped past it, flipping the sign once.
        2. Contraction: every basis vector shared by ``A`` and ``B`` squares to
           its metric (+1, -1 or 0); a single null vector kills the product.

        Args:
            A (torch.Tensor): Left blades ``[dim, 1]``.
            B (torch.Tensor): Right blades ``[1, dim]``.

        Returns:
            torch.Tensor: ``[dim, dim]`` int64 signs.
        """
        swap_counts = torch.zeros((self.dim, self.dim), dtype=torch.long, device=self.device)
        for i in range(self.n):
            b_i = (B >> i) & 1
            a_above = _popcount(A >> (i + 1), self.n)
            swap_counts = swap_counts + b_i * a_above

        parity = 1 - 2 * (swap_counts % 2)

        shared = A & B
        metric = torch.ones_like(parity)
        for i in range(self.n):
            square = metric_sign(i, self.p, self.q)
            if square == 1:
                continue
            has_i = ((shared >> i) & 1).bool()
            metric = torch.where(has_i, metric * square, metric)

        return parity * metric

    def _accumulate(self, A: torch.Tensor, B: torch.Tensor, keep=None) -> torch.Tensor:
        """``result[k] = sum_i A[i] * B[i ^ k] * sign(i, i ^ k)``, batched.

        Pairs with a zero coefficient on either side, or rejected by ``keep``,
        contribute nothing, so ``0 * inf`` never leaks NaN into the result.
        Sign-0 pairs of non-zero coefficients are still multiplied.
        """
        assert A.shape[-1] == self.dim, (
            f"left operand: last dim should be {self.dim}, got {A.shape[-1]}"
        )
        assert B.shape[-1] == self.dim, (
            f"right operand: last dim should be {self.dim}, got {B.shape[-1]}"
        )
        B_gathered = B[..., self.cayley_indices]  # [..., D, D]
        A_col = A.unsqueeze(-1)
        terms = A_col * B_gathered * self.gp_signs
        active = (A_col != 0) & (B_gathered != 0)
        if keep is not None:
            active = active & keep
        return torch.where(active, terms, torch.zeros_like(terms)).sum(dim=-2)

    def geometric_product(self, A: torch.Tensor, B: torch.Tensor) -> torch.Tensor:
        """Computes the geometric product.

        Every pair of blades ``(i, j)`` contributes ``sign(i, j) * A[i] * B[j]``
        to blade ``i ^ j``. Several pairs land on the same blade, so
        contributions are summed.

        Args:
            A (torch.Tensor): Left operand [..., dim].
            B (torch.Tensor): Right operand [..., dim].

        Returns:
            torch.Tensor: The product AB [..., dim].
        """
        return self._accumulate(A, B)

    def wedge(self, A: torch.Tensor, B: torch.Tensor) -> torch.Tensor:
        """Computes the wedge (outer) product.

        Same as the geometric product, restricted to blade pairs that share
        no basis vector. Anti-commutativity and ``v ^ v = 0`` follow from
        the table; nothing is special-cased.

        Args:
            A (torch.Tensor): Left operand [..., dim].
            B (torch.Tensor): Right operand [..., dim].

        Returns:
            torch.Tensor: Wedge product A ^ B [..., dim].
        """
        return self._accumulate(A, B, self.wedge_keep)

    def inner_product(self, A: torch.Tensor, B: torch.Tensor) -> torch.Tensor:
        """Computes the inner product (contraction).

        Same as the geometric product, but a blade pair ``(i, j)`` is kept
        only when its result has grade ``|grade(i) - grade(j)|``. On mixed
        grades this is not associative: for bivector ``i`` and vector ``j``,
        ``(i | i) | j`` generally differs from ``i | (i | j)``.

        Args:
            A (torch.Tensor): Left operand [..., dim].
            B (torch.Tensor): Right operand [..., dim].

        Returns:
            torch.Tensor: Inner product A | B [..., dim].
        """
        return self._accumulate(A, B, self.inner_keep)

    def grade_projection(self, mv: torch.Tensor, grade: int) -> torch.Tensor:
        """Isolates a specific grade.

        Args:
            mv (torch.Tensor): Multivector [..., dim].
            grade (int): Target grade. Grades outside 0..n give zero.

        Returns:
            torch.Tensor: Projected multivector.
        """
        if not 0 <= grade <= self.n:
            return torch.zeros_like(mv)
        mask = self.grade_masks[grade]
        if mask.device != mv.device:
            mask = mask.to(mv.device)
        return torch.where(mask, mv, torch.zeros_like(mv))
