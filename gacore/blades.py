# gacore: Dense Clifford Algebra Kernel (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0

"""Bit-level helpers for basis blades.

A blade is a plain ``int``: bit ``i`` is set when basis vector ``e_{i+1}``
participates. Example for ``Cl(3, 0, 0)``::

    index | binary | blade
    ------|--------|-------
      0   |  000   | 1
      1   |  001   | e1
      2   |  010   | e2
      3   |  011   | e12
      4   |  100   | e3
      5   |  101   | e13
      6   |  110   | e23
      7   |  111   | e123
"""

from typing import List


def grade(blade: int) -> int:
    """Number of basis vectors in the blade (popcount)."""
    count = 0
    while blade:
        # Drop the lowest set bit: 011010 -> 011000
        blade &= blade - 1
        count += 1
    return count


def basis_indices(blade: int) -> List[int]:
    """Zero-based positions of the basis vectors present, ascending."""
    positions = []
    i = 0
    while blade >> i:
        if (blade >> i) & 1:
            positions.append(i)
        i += 1
    return positions


def metric_sign(index: int, p: int, q: int) -> int:
    """Square of basis vector ``index`` under signature ``(p, q, *)``.

    Returns +1 for the first ``p`` vectors, -1 for the next ``q``,
    0 for the remaining (null) directions.
    """
    if index < p:
        return 1
    if index < p + q:
        return -1
    return 0


def blade_name(blade: int) -> str:
    """Readable name: ``"1"`` for the scalar, else ``"e"`` + 1-based indices."""
    if blade == 0:
        return "1"
    return "e" + "".join(str(i + 1) for i in basis_indices(blade))


def parse_blade(name: str, n: int) -> int:
    """Inverse of :func:`blade_name` for an algebra with ``n`` basis vectors.

    Digits must be strictly ascending, so each basis vector appears once and
    the blade is in canonical order. Only single-digit indices are
    addressable; use integer indices for ``n > 9``.

    Raises:
        ValueError: Malformed name or index outside ``1..n``.
    """
    name = name.strip()
    if name == "1":
        return 0
    if len(name) < 2 or name[0] != "e" or not name[1:].isdigit():
        raise ValueError(f"Malformed blade name {name!r}; expected '1' or 'e<digits>'")

    blade = 0
    previous = 0
    for digit in name[1:]:
        k = int(digit)
        if k < 1 or k > n:
            raise ValueError(f"Blade name {name!r} refers to e{k}, but the algebra has e1..e{n}")
        if k <= previous:
            raise ValueError(
                f"Blade name {name!r} must list basis vectors in strictly ascending order"
            )
        blade |= 1 << (k - 1)
        previous = k
    return blade
