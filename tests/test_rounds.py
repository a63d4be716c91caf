import io

import pytest

from supertrunfo.rounds import (
    Attribute,
    Country,
    attribute_label,
    attribute_menu,
    attribute_value,
    attribute_winner,
    main,
    play_round,
)

BRAZIL = Country("Brasil", 214, 8516, 1868, 765, 25)
GERMANY = Country("Alemanha", 83, 357, 3845, 942, 232)
AUSTRALIA = Country("Austrália", 26, 7692, 1393, 944, 3)


def test_menu_lists_all_when_nothing_hidden():
    menu = attribute_menu(0)
    for entry in ("1. População", "2. Área", "3. PIB", "4. IDH", "5. Densidade Demográfica"):
        assert entry in menu
    assert menu.startswith("\nEscolha o atributo:\n")


@pytest.mark.parametrize("hidden", list(Attribute))
def test_menu_hides_one_entry(hidden):
    menu = attribute_menu(hidden)
    numbers = [line.split(".")[0] for line in menu.strip().splitlines()[1:]]
    assert str(hidden.value) not in numbers
    assert len(numbers) == len(Attribute) - 1


def test_attribute_values():
    assert attribute_value(BRAZIL, 1) == BRAZIL.population
    assert attribute_value(BRAZIL, Attribute.AREA) == BRAZIL.area
    assert attribute_value(BRAZIL, 3) == BRAZIL.gdp
    assert attribute_value(BRAZIL, 4) == BRAZIL.hdi
    assert attribute_value(BRAZIL, 5) == BRAZIL.density


@pytest.mark.parametrize("unknown", [0, 6, -3])
def test_unknown_attribute(unknown):
    assert attribute_value(BRAZIL, unknown) == 0
    assert attribute_label(unknown) == "Desconhecido"


def test_labels():
    assert attribute_label(1) == "População (milhões)"
    assert attribute_label(Attribute.GDP) == "PIB (bi USD)"
    assert attribute_label(4) == "IDH (x1000)"


def test_winner_higher_wins():
    assert attribute_winner(Attribute.POPULATION, BRAZIL.population, GERMANY.population) == 1
    assert attribute_winner(Attribute.HDI, BRAZIL.hdi, GERMANY.hdi) == 2
    assert attribute_winner(Attribute.AREA, BRAZIL.area, BRAZIL.area) == 0


def test_winner_density_lower_wins():
    assert attribute_winner(Attribute.DENSITY, AUSTRALIA.density, GERMANY.density) == 1
    assert attribute_winner(Attribute.DENSITY, GERMANY.density, AUSTRALIA.density) == 2
    assert attribute_winner(Attribute.DENSITY, BRAZIL.density, BRAZIL.density) == 0


def test_round_report():
    report = play_round(BRAZIL, GERMANY, 1, 2)
    assert "Carta 1: Brasil\nCarta 2: Alemanha\n" in report
    assert "População (milhões): Brasil\n" in report
    assert "Área (mil km²): Brasil\n" in report
    assert report.endswith("Brasil venceu a rodada! ***\n")


def test_round_second_wins():
    report = play_round(BRAZIL, GERMANY, Attribute.GDP, Attribute.HDI)
    assert "PIB (bi USD): Alemanha\n" in report
    assert report.endswith("Alemanha venceu a rodada! ***\n")


def test_round_sums_follow_values():
    report = play_round(AUSTRALIA, BRAZIL, 3, 4)
    assert f"Austrália: {AUSTRALIA.gdp + AUSTRALIA.hdi}\n" in report
    assert f"Brasil: {BRAZIL.gdp + BRAZIL.hdi}\n" in report


def test_round_tie():
    report = play_round(BRAZIL, BRAZIL, 1, 5)
    assert "População (milhões): Empate\n" in report
    assert report.endswith("Empate! ***\n")


def test_round_table_columns():
    report = play_round(BRAZIL, GERMANY, 1, 2)
    header = next(line for line in report.splitlines() if line.startswith("Atributo"))
    assert header.split(" | ")[0] == "Atributo".ljust(25)
    assert header.split(" | ")[1].rstrip() == "Brasil"


def test_round_rejects_repeated_attribute():
    with pytest.raises(ValueError):
        play_round(BRAZIL, GERMANY, 2, 2)


def test_round_rejects_unknown_attribute():
    with pytest.raises(ValueError):
        play_round(BRAZIL, GERMANY, 1, 7)


def test_main_reprompts(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("x\n9\n1\n1\n2\n0\n3\n3\n4\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("=== SUPER TRUNFO DE PAISES ===\n")
    assert out.count("Opção inválida.\n") == 2
    assert "Opção inválida ou igual à primeira carta.\n" in out
    assert "Atributo inválido.\n" in out
    assert "Atributo inválido ou repetido.\n" in out
    assert "Carta 1: Brasil\nCarta 2: Alemanha\n" in out
    assert out.endswith("\nObrigado por jogar Super Trunfo dos Países!\n")


def test_main_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n"))
    assert main([]) == 1
    assert "Entrada inválida" in capsys.readouterr().err