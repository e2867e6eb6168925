import pytest

from gacore.blades import basis_indices, blade_name, grade, metric_sign, parse_blade


@pytest.mark.parametrize("blade, expected", [(0, 0), (1, 1), (3, 2), (6, 2), (7, 3), (0b101101, 4)])
def test_grade(blade, expected):
    assert grade(blade) == expected


def test_basis_indices():
    assert basis_indices(0) == []
    assert basis_indices(0b1010) == [1, 3]


def test_metric_sign():
    # Cl(2,1,1)
    assert [metric_sign(i, 2, 1) for i in range(4)] == [1, 1, -1, 0]


@pytest.mark.parametrize("blade, name", [(0, "1"), (1, "e1"), (4, "e3"), (5, "e13"), (7, "e123")])
def test_names_round_trip(blade, name):
    assert blade_name(blade) == name
    assert parse_blade(name, 3) == blade


@pytest.mark.parametrize("name", ["", "e", "x1", "e21", "e11", "e4", "e0", "1e"])
def test_parse_rejects(name):
    with pytest.raises(ValueError):
        parse_blade(name, 3)
