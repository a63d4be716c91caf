"""Comparison of two preset country cards on an attribute picked from a menu."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from enum import IntEnum

from supertrunfo.registration import TokenReader


@dataclass
class CountryCard:
    """A country card."""

    name: str
    population: int
    area: float
    gdp: float
    tourist_points: int
    density: float


class Attribute(IntEnum):
    """Menu options for a comparison."""

    POPULATION = 1
    AREA = 2
    GDP = 3
    TOURIST_POINTS = 4
    DENSITY = 5

    @property
    def label(self) -> str:
        return _SPECS[self][0]


# menu label, announcement, card field, value format, whether the lower value wins
_SPECS = {
    Attribute.POPULATION: ("População", "População", "population", "{} habitantes", False),
    Attribute.AREA: ("Área", "Área", "area", "{:.2f} km2", False),
    Attribute.GDP: ("PIB", "PIB", "gdp", "{:.2f} bilhões USD", False),
    Attribute.TOURIST_POINTS: (
        "Pontos turísticos",
        "Pontos Turísticos",
        "tourist_points",
        "{} pontos",
        False,
    ),
    Attribute.DENSITY: (
        "Densidade demográfica",
        "Densidade Demográfica (vence o menor)",
        "density",
        "{:.2f} hab/km2",
        True,
    ),
}

_INVALID = "Opção inválida! Por favor, escolha um número válido do menu.\n"


def format_card(card: CountryCard) -> str:
    """Return the display block for a card."""
    return (
        f"País: {card.name}\n"
        f"- População: {card.population}\n"
        f"- Área: {card.area:.2f} km2\n"
        f"- PIB: {card.gdp:.2f} bilhões USD\n"
        f"- Pontos turísticos: {card.tourist_points}\n"
        f"- Densidade demográfica: {card.density:.2f} hab/km2\n"
    )


def compare(a: CountryCard, b: CountryCard, option: int) -> CountryCard | None:
    """Return the winning card for ``option``, or None on a tie.

    Raises ValueError when ``option`` is not a menu entry.
    """
    attribute = Attribute(option)
    _, _, field, _, lower_wins = _SPECS[attribute]
    first, second = getattr(a, field), getattr(b, field)
    if lower_wins:
        first, second = second, first
    if first > second:
        return a
    if first < second:
        return b
    return None


def render_comparison(a: CountryCard, b: CountryCard, option: int) -> str:
    """Return the comparison report for the chosen menu option."""
    parts = [f"\nComparando {a.name} e {b.name}\n"]
    try:
        attribute = Attribute(option)
    except ValueError:
        parts.append(_INVALID)
        return "".join(parts)
    _, announcement, field, fmt, _ = _SPECS[attribute]
    parts.append(f"Você escolheu: {announcement}\n")
    for card in (a, b):
        parts.append(f"{card.name}: {fmt.format(getattr(card, field))}\n")
    winner = compare(a, b, attribute)
    parts.append(f"Vencedor: {winner.name}!\n" if winner is not None else "Empate!\n")
    return "".join(parts)


def _menu() -> str:
    lines = ["\nEscolha o atributo para comparar:"]
    lines.extend(f"{attribute.value} - {attribute.label}" for attribute in Attribute)
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Show the preset cards, read a menu option and compare on it."""
    argparse.ArgumentParser(description="Super Trunfo de países.").parse_args(argv)
    first = CountryCard("Brasil", 213000000, 8515767.0, 2055.0, 25, 25.0)
    second = CountryCard("Portugal", 10300000, 92212.0, 238.0, 12, 112.0)
    out = sys.stdout
    out.write("=== SUPER TRUNFO DE PAÍSES ===\n")
    out.write("Carta 1:\n" + format_card(first))
    out.write("\nCarta 2:\n" + format_card(second))
    out.write(_menu())
    out.write("Sua opção: ")
    out.flush()
    try:
        option = TokenReader(sys.stdin).integer()
    except (EOFError, ValueError):
        option = 0
    out.write(render_comparison(first, second, option))
    out.write("\nObrigado por jogar!\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())