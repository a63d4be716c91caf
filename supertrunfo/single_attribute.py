"""Comparison of two preset city cards on one chosen attribute."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from enum import Enum


@dataclass
class Card:
    """A city card with its derived figures."""

    state: str
    code: str
    city: str
    population: int
    area: float
    gdp: float
    tourist_points: int
    density: float = 0.0
    per_capita: float = 0.0


class Attribute(Enum):
    """Attributes a comparison can use."""

    POPULATION = "populacao"
    AREA = "area"
    GDP = "pib"
    DENSITY = "densidade"
    PER_CAPITA = "pib_per_capita"

    @property
    def label(self) -> str:
        return _SPECS[self][0]


# label, card field, value format, whether the lower value wins
_SPECS = {
    Attribute.POPULATION: ("População", "population", "{}", False),
    Attribute.AREA: ("Área", "area", "{:.2f} km2", False),
    Attribute.GDP: ("PIB", "gdp", "{:.2f} bilhões", False),
    Attribute.DENSITY: ("Densidade Populacional", "density", "{:.2f} hab/km2", True),
    Attribute.PER_CAPITA: ("PIB per capita", "per_capita", "{:.2f}", False),
}


def _lookup(attribute: Attribute | str) -> Attribute | None:
    if isinstance(attribute, Attribute):
        return attribute
    try:
        return Attribute(attribute)
    except ValueError:
        return None


def population_density(population: int, area: float) -> float:
    """Inhabitants per km²; zero when the area is not positive."""
    if area <= 0.0:
        return 0.0
    return population / area


def per_capita(gdp: float, population: int) -> float:
    """GDP divided by population; zero when the population is not positive."""
    if population <= 0:
        return 0.0
    return gdp / population


def make_card(state, code, city, population, area, gdp, tourist_points) -> Card:
    """Build a card and fill in its density and per-capita figures."""
    return Card(
        state,
        code,
        city,
        population,
        area,
        gdp,
        tourist_points,
        population_density(population, area),
        per_capita(gdp, population),
    )


def format_card(card: Card, index: int) -> str:
    """Return the display block for a card, ending with a blank line."""
    return (
        f"Carta {index} - {card.city} ({card.state}):\n"
        f"  Código: {card.code}\n"
        f"  População: {card.population}\n"
        f"  Área: {card.area:.2f} km2\n"
        f"  PIB: {card.gdp:.2f} bilhões\n"
        f"  Pontos Turísticos: {card.tourist_points}\n"
        f"  Densidade Populacional: {card.density:.2f} hab/km2\n"
        f"  PIB per capita: {card.per_capita:.2f}\n"
        "\n"
    )


def compare(first: Card, second: Card, attribute: Attribute | str) -> int:
    """Return 1 or 2 for the winning card, 0 for a tie or an unknown attribute."""
    chosen = _lookup(attribute)
    if chosen is None:
        return 0
    _, field, _, lower_wins = _SPECS[chosen]
    a, b = getattr(first, field), getattr(second, field)
    if lower_wins:
        a, b = b, a
    if a > b:
        return 1
    if b > a:
        return 2
    return 0


def render_comparison(first: Card, second: Card, attribute: Attribute | str) -> str:
    """Return the comparison report for one attribute."""
    chosen = _lookup(attribute)
    label = chosen.label if chosen else "Desconhecido"
    parts = [f"=== Comparação de cartas (Atributo: {label}) ===\n\n"]
    if chosen is not None:
        _, field, fmt, _ = _SPECS[chosen]
        for index, card in enumerate((first, second), start=1):
            value = fmt.format(getattr(card, field))
            parts.append(f"Carta {index} - {card.city} ({card.state}): {value}\n")
    winner = compare(first, second, attribute)
    parts.append("\nResultado: ")
    if winner == 1:
        parts.append(f"Carta 1 ({first.city}) venceu!\n")
    elif winner == 2:
        parts.append(f"Carta 2 ({second.city}) venceu!\n")
    else:
        parts.append("Empate!\n")
    return "".join(parts)


def main(argv: list[str] | None = None) -> int:
    """Show the preset cards and compare them on the chosen attribute."""
    parser = argparse.ArgumentParser(description="Compara duas cartas pré-definidas.")
    parser.add_argument(
        "--atributo",
        default=Attribute.POPULATION.value,
        choices=[attribute.value for attribute in Attribute],
    )
    args = parser.parse_args(argv)
    first = make_card("SP", "001", "São Paulo", 12300000, 1521.11, 799.34, 15)
    second = make_card("RJ", "002", "Rio de Janeiro", 6000000, 1182.30, 364.53, 10)
    sys.stdout.write("=== Cartas cadastradas ===\n\n")
    sys.stdout.write(format_card(first, 1))
    sys.stdout.write(format_card(second, 2))
    sys.stdout.write(render_comparison(first, second, args.atributo))
    return 0


if __name__ == "__main__":
    sys.exit(main())