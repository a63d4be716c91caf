"""Comparison of two typed-in city cards on every attribute, super power included."""

from __future__ import annotations

import argparse
import math
import sys

from supertrunfo.registration import CityCard, TokenReader, read_card

_BILLION = 1_000_000_000


def _divide(numerator: float, denominator: float) -> float:
    """Divide with floating-point semantics: zero divisors give inf or nan."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def population_density(card: CityCard) -> float:
    """Inhabitants per square kilometre."""
    return _divide(card.population, card.area)


def gdp_per_capita(card: CityCard) -> float:
    """GDP in reais per inhabitant."""
    return _divide(card.gdp * _BILLION, card.population)


def super_power(card: CityCard) -> float:
    """Sum of all attributes plus the inverse of the density."""
    return (
        card.population
        + card.area
        + card.gdp * _BILLION
        + card.tourist_points
        + gdp_per_capita(card)
        + _divide(1.0, population_density(card))
    )


def compare(first: CityCard, second: CityCard) -> dict[str, bool]:
    """Map each attribute label to whether the first card wins it."""
    return {
        "População": first.population > second.population,
        "Área": first.area > second.area,
        "PIB": first.gdp > second.gdp,
        "Pontos Turísticos": first.tourist_points > second.tourist_points,
        "Densidade Populacional": population_density(first) < population_density(second),
        "PIB per Capita": gdp_per_capita(first) > gdp_per_capita(second),
        "Super Poder": super_power(first) > super_power(second),
    }


def format_comparison(results: dict[str, bool]) -> str:
    """Render the results of :func:`compare`."""
    lines = ["Comparação de Cartas:"]
    lines.extend(f"{label}: Carta 1 venceu ({int(won)})" for label, won in results.items())
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Read two cards from standard input and compare them."""
    argparse.ArgumentParser(description="Compara duas cartas.").parse_args(argv)
    reader = TokenReader(sys.stdin)
    out = sys.stdout
    try:
        out.write("Insira os dados da primeira carta:\n")
        first = read_card(reader, out)
        out.write("\nInsira os dados da segunda carta:\n")
        second = read_card(reader, out)
    except (EOFError, ValueError) as exc:
        print(f"\nEntrada inválida: {exc}", file=sys.stderr)
        return 1
    out.write("\n" + format_comparison(compare(first, second)))
    return 0


if __name__ == "__main__":
    sys.exit(main())