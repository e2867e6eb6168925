"""Tests for the textual form of multivectors."""

import locale
import re

import pytest

from gacore.algebra import CliffordAlgebra
from gacore.multivector import Multivector


@pytest.fixture
def cl3():
    return CliffordAlgebra(3, 0, 0, device="cpu")


@pytest.fixture
def cl2():
    return CliffordAlgebra(2, 0, 0, device="cpu")


@pytest.mark.parametrize("coefficients, expected", [
    ([], "0"),
    ([5.5], "5.5000*1"),
    ([0.0, 2.5], "2.5000*e1"),
    ([0.0, 1.0, 2.0, 0.0, 3.0], "1.0000*e1 + 2.0000*e2 + 3.0000*e3"),
    ([0.0, 0.0, 0.0, 2.5], "2.5000*e12"),
    ([0.0] * 7 + [1.5], "1.5000*e123"),
    ([1.0, 2.0, 0.0, 3.0, 0.0, 0.0, 0.0, 4.0], "1.0000*1 + 2.0000*e1 + 3.0000*e12 + 4.0000*e123"),
    ([-1.0, 0.0, -2.5], "-1.0000*1 + -2.5000*e2"),
    ([1.23456], "1.2346*1"),
    ([1.0, 0.0, 2.0, 0.0, 3.0, 0.0, 4.0, 5.0], "1.0000*1 + 2.0000*e2 + 3.0000*e3 + 4.0000*e23 + 5.0000*e123"),
])
def test_cl3_strings(cl3, coefficients, expected):
    assert str(Multivector(cl3, coefficients)) == expected


@pytest.mark.parametrize("coefficients, expected", [
    ([0.0, 1.0, 0.0, 2.0], "1.0000*e1 + 2.0000*e12"),
    ([0.0, 0.0, 0.0, 3.14], "3.1400*e12"),
    ([0.00009, 0.00005], "0.0001*1 + 0.0001*e1"),
    ([1.1, 2.2, 3.3, 4.4], "1.1000*1 + 2.2000*e1 + 3.3000*e2 + 4.4000*e12"),
])
def test_cl2_strings(cl2, coefficients, expected):
    assert str(Multivector(cl2, coefficients)) == expected


def test_tiny_values_are_shown(cl2):
    # Suppression is exact; tolerant zero tests do not apply here
    assert str(Multivector(cl2, [0.0, 1e-12])) == "0.0000*e1"


def test_format_after_operations(cl2):
    a = Multivector(cl2, [1.0, 2.0])
    b = Multivector(cl2, [3.0, 4.0])
    pattern = r"^-?\d+\.\d{4}\*\d?e?\d*(\s\+\s-?\d+\.\d{4}\*\d?e?\d*)*$"
    assert re.match(pattern, str(a * b))


def test_locale_independent(cl2):
    previous = locale.setlocale(locale.LC_NUMERIC)
    try:
        try:
            locale.setlocale(locale.LC_NUMERIC, "de_DE.UTF-8")
        except locale.Error:
            pytest.skip("de_DE locale not installed")
        assert str(Multivector(cl2, [1.5])) == "1.5000*1"
    finally:
        locale.setlocale(locale.LC_NUMERIC, previous)


def test_repr_names_the_algebra(cl2):
    mv = Multivector.blade(cl2, 3)
    assert repr(mv) == "Multivector(1.0000*e12, algebra=Cl(2,0,0))"
