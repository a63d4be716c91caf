import io
import math

import pytest

from supertrunfo.comparison import (
    compare,
    format_comparison,
    gdp_per_capita,
    main,
    population_density,
    super_power,
)
from supertrunfo.registration import CityCard

SP = CityCard("A", "A01", "São Paulo", 12300000, 1521.11, 799.34, 15)
RJ = CityCard("B", "B02", "Rio de Janeiro", 6000000, 1182.30, 364.53, 10)

LABELS = [
    "População",
    "Área",
    "PIB",
    "Pontos Turísticos",
    "Densidade Populacional",
    "PIB per Capita",
    "Super Poder",
]


def test_density_times_area_is_population():
    assert population_density(SP) * SP.area == pytest.approx(SP.population)


def test_per_capita_times_population_is_gdp():
    assert gdp_per_capita(RJ) * RJ.population == pytest.approx(RJ.gdp * 1_000_000_000)


def test_zero_area_gives_infinite_density():
    card = CityCard("C", "C01", "X", 10, 0.0, 1.0, 1)
    assert population_density(card) == math.inf


def test_zero_population_gives_infinite_per_capita():
    card = CityCard("C", "C01", "X", 0, 5.0, 1.0, 1)
    assert gdp_per_capita(card) == math.inf
    assert population_density(card) == 0.0


def test_super_power_exceeds_components():
    assert super_power(SP) > SP.gdp * 1_000_000_000 + SP.population


def test_compare_known_cards():
    results = compare(SP, RJ)
    assert results["População"] is True
    assert results["Área"] is True
    assert results["PIB"] is True
    assert results["Pontos Turísticos"] is True
    assert results["Densidade Populacional"] is False
    assert results["Super Poder"] is True
    assert list(results) == LABELS


def test_compare_identical_cards_never_wins():
    results = compare(SP, SP)
    assert list(results) == LABELS
    assert [results[label] for label in LABELS] == [False] * len(LABELS)


def test_compare_is_antisymmetric_on_strict_attributes():
    forward, backward = compare(SP, RJ), compare(RJ, SP)
    for label in forward:
        assert not (forward[label] and backward[label])


def test_format_comparison_lines():
    text = format_comparison(compare(SP, RJ))
    assert text.startswith("Comparação de Cartas:\n")
    assert "População: Carta 1 venceu (1)\n" in text
    assert "Densidade Populacional: Carta 1 venceu (0)\n" in text


def test_main_compares(monkeypatch, capsys):
    data = "A\nA01\nSão Paulo\n12300000\n1521.11\n799.34\n15\n" "B\nB02\nRio de Janeiro\n6000000\n1182.30\n364.53\n10\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(data))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Super Poder: Carta 1 venceu (1)" in out


def test_main_incomplete_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("A\nA01\n"))
    assert main([]) == 1