"""Tests for the CLI task dispatch."""

import logging

import pytest
from omegaconf import OmegaConf

from main import run
from gacore.algebra import CliffordAlgebra
from gacore.multivector import Multivector
from tasks.cayley import signed_name
from tasks.product import build_multivector


def _cfg(**overrides):
    base = {
        'name': 'cayley',
        'algebra': {'p': 2, 'q': 0, 'r': 0, 'device': 'cpu'},
        'product': {'op': 'geometric', 'left': {'e1': 1.0}, 'right': {'e2': 1.0}},
    }
    # Whole sections are replaced, so product operands never mix
    base.update(overrides)
    return OmegaConf.create(base)


def test_signed_name():
    assert signed_name(1, 3) == "e12"
    assert signed_name(-1, 3) == "-e12"
    assert signed_name(0, 3) == "0"
    assert signed_name(-1, 0) == "-1"


def test_cayley_table_cl2(caplog):
    with caplog.at_level(logging.INFO, logger="gacore"):
        header, rows = run(_cfg())
    assert header == ["1", "e1", "e2", "e12"]
    assert rows[1] == ["e1", "1", "e12", "e2"]
    assert rows[2] == ["e2", "-e12", "1", "-e1"]
    assert rows[3] == ["e12", "-e2", "e1", "-1"]
    assert any("Cayley table of Cl(2,0,0)" in rec.getMessage() for rec in caplog.records)


def test_cayley_table_null_entries():
    _, rows = run(_cfg(algebra={'p': 0, 'q': 0, 'r': 1}))
    assert rows == [["1", "e1"], ["e1", "0"]]


def test_product_task_geometric():
    left, right, value = run(_cfg(name='product'))
    assert value == left * right
    assert value[3] == 1.0


@pytest.mark.parametrize("op, expected", [
    ('geometric', [0.0, 0.0, 2.0, 0.0]),
    ('wedge', [0.0, 0.0, 0.0, 0.0]),
    ('inner', [0.0, 0.0, 2.0, 0.0]),
])
def test_product_task_ops(op, expected):
    cfg = _cfg(name='product', product={'op': op, 'left': {'e1': 2.0}, 'right': {'e12': 1.0}})
    _, _, value = run(cfg)
    assert value.tolist() == expected


def test_product_task_unknown_op():
    with pytest.raises(ValueError, match="Unknown product"):
        run(_cfg(name='product', product={'op': 'cross'}))


def test_unknown_task():
    with pytest.raises(ValueError, match="Unknown task"):
        run(_cfg(name='rotate'))


def test_build_multivector():
    alg = CliffordAlgebra(3, device='cpu')
    mv = build_multivector(alg, {'1': 2.0, 'e13': -1.0})
    assert mv == Multivector(alg, [2.0, 0, 0, 0, 0, -1.0])
