"""A round of country cards compared on two attributes, decided by their sum."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable

from supertrunfo.registration import TokenReader


@dataclass(frozen=True)
class Country:
    """A country card with whole-number attributes."""

    name: str
    population: int  # millions
    area: int  # thousand km²
    gdp: int  # billion USD
    hdi: int  # HDI times 1000
    density: int  # inhabitants per km²


class Attribute(IntEnum):
    """Attributes a round can use."""

    POPULATION = 1
    AREA = 2
    GDP = 3
    HDI = 4
    DENSITY = 5


_FIELDS = {
    Attribute.POPULATION: "population",
    Attribute.AREA: "area",
    Attribute.GDP: "gdp",
    Attribute.HDI: "hdi",
    Attribute.DENSITY: "density",
}

_LABELS = {
    Attribute.POPULATION: "População (milhões)",
    Attribute.AREA: "Área (mil km²)",
    Attribute.GDP: "PIB (bi USD)",
    Attribute.HDI: "IDH (x1000)",
    Attribute.DENSITY: "Densidade Demográfica",
}

_MENU_NAMES = {
    Attribute.POPULATION: "População",
    Attribute.AREA: "Área",
    Attribute.GDP: "PIB",
    Attribute.HDI: "IDH",
    Attribute.DENSITY: "Densidade Demográfica",
}

CARDS = (
    Country("Brasil", 214, 8516, 1868, 765, 25),
    Country("Alemanha", 83, 357, 3845, 942, 232),
    Country("Austrália", 26, 7692, 1393, 944, 3),
)


def _as_attribute(attribute: int) -> Attribute | None:
    try:
        return Attribute(attribute)
    except ValueError:
        return None


def attribute_menu(hidden: int) -> str:
    """Return the attribute menu, leaving out the entry numbered ``hidden``."""
    lines = ["\nEscolha o atributo:"]
    lines.extend(
        f"{attribute.value}. {_MENU_NAMES[attribute]}"
        for attribute in Attribute
        if attribute != hidden
    )
    return "\n".join(lines) + "\n"


def attribute_value(country: Country, attribute: int) -> int:
    """Return the country's value for ``attribute``; 0 if it is unknown."""
    chosen = _as_attribute(attribute)
    return getattr(country, _FIELDS[chosen]) if chosen is not None else 0


def attribute_label(attribute: int) -> str:
    """Return the display name of ``attribute``."""
    chosen = _as_attribute(attribute)
    return _LABELS[chosen] if chosen is not None else "Desconhecido"


def attribute_winner(attribute: int, first: int, second: int) -> int:
    """Return 1 or 2 for the winning value, 0 on a tie; density is won by the lower."""
    if attribute == Attribute.DENSITY:
        first, second = second, first
    if first > second:
        return 1
    if first < second:
        return 2
    return 0


def play_round(first: Country, second: Country, attribute1: int, attribute2: int) -> str:
    """Compare two countries on two distinct attributes and return the report.

    Raises ValueError for an unknown or repeated attribute.
    """
    chosen = (Attribute(attribute1), Attribute(attribute2))
    if chosen[0] == chosen[1]:
        raise ValueError("the two attributes must differ")
    values = [(attribute_value(first, a), attribute_value(second, a)) for a in chosen]

    parts = [
        "\n--- Comparação ---\n",
        f"Carta 1: {first.name}\n",
        f"Carta 2: {second.name}\n",
        f"\n{'Atributo':<25} | {first.name:<10} | {second.name:<10}\n",
    ]
    for attribute, (a, b) in zip(chosen, values):
        parts.append(f"{attribute_label(attribute):<25} | {a:<10} | {b:<10}\n")

    parts.append("\nResultado por atributo:\n")
    names = {1: first.name, 2: second.name, 0: "Empate"}
    for attribute, (a, b) in zip(chosen, values):
        parts.append(f"{attribute_label(attribute)}: {names[attribute_winner(attribute, a, b)]}\n")

    total1 = sum(a for a, _ in values)
    total2 = sum(b for _, b in values)
    parts.append("\nSoma dos atributos:\n")
    parts.append(f"{first.name}: {total1}\n")
    parts.append(f"{second.name}: {total2}\n")

    parts.append("\n*** Resultado final: ")
    if total1 > total2:
        parts.append(f"{first.name} venceu a rodada! ***\n")
    elif total2 > total1:
        parts.append(f"{second.name} venceu a rodada! ***\n")
    else:
        parts.append("Empate! ***\n")
    return "".join(parts)


def _ask(reader: TokenReader, prompt: str, invalid: str, valid: Callable[[int], bool]) -> int:
    """Prompt until a valid integer is read; bad tokens discard the rest of the line."""
    out = sys.stdout
    while True:
        out.write(prompt)
        out.flush()
        try:
            value = reader.integer()
        except ValueError:
            reader.line()
            value = 0
        if valid(value):
            return value
        out.write(invalid)


def main(argv: list[str] | None = None) -> int:
    """Pick two countries and two attributes from standard input and play a round."""
    argparse.ArgumentParser(description="Super Trunfo dos Países.").parse_args(argv)
    out = sys.stdout
    reader = TokenReader(sys.stdin)
    count = len(CARDS)

    out.write("=== SUPER TRUNFO DE PAISES ===\n\n")
    out.write("Cartas disponíveis:\n")
    for number, card in enumerate(CARDS, start=1):
        out.write(f"{number}. {card.name}\n")

    try:
        idx1 = _ask(
            reader,
            "\nEscolha o número da primeira carta: ",
            "Opção inválida.\n",
            lambda v: 1 <= v <= count,
        )
        idx2 = _ask(
            reader,
            "Escolha o número da segunda carta: ",
            "Opção inválida ou igual à primeira carta.\n",
            lambda v: 1 <= v <= count and v != idx1,
        )
        attribute1 = _ask(
            reader,
            attribute_menu(0) + "Selecione o primeiro atributo (1-5): ",
            "Atributo inválido.\n",
            lambda v: 1 <= v <= len(Attribute),
        )
        attribute2 = _ask(
            reader,
            attribute_menu(attribute1)
            + "Selecione o segundo atributo (1-5), diferente do primeiro: ",
            "Atributo inválido ou repetido.\n",
            lambda v: 1 <= v <= len(Attribute) and v != attribute1,
        )
    except EOFError as exc:
        print(f"\nEntrada inválida: {exc}", file=sys.stderr)
        return 1

    out.write(play_round(CARDS[idx1 - 1], CARDS[idx2 - 1], attribute1, attribute2))
    out.write("\nObrigado por jogar Super Trunfo dos Países!\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())