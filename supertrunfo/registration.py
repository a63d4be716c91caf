"""Registration of two city cards typed in at the terminal."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass
from typing import TextIO

_WORD = re.compile(r"\S+")
_INTEGER = re.compile(r"[+-]?\d+")
_REAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass
class CityCard:
    """A city card as typed in by the player."""

    state: str
    code: str
    city: str
    population: int
    area: float
    gdp: float
    tourist_points: int


class TokenReader:
    """Reads whitespace-separated values from a text stream, line by line."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending = ""

    def _skip_space(self) -> None:
        while True:
            self._pending = self._pending.lstrip()
            if self._pending:
                return
            line = self._stream.readline()
            if not line:
                raise EOFError("unexpected end of input")
            self._pending = line

    def _take(self, pattern: re.Pattern[str], what: str) -> str:
        self._skip_space()
        match = pattern.match(self._pending)
        if match is None:
            raise ValueError(f"expected {what}, got {self._pending.split()[0]!r}")
        self._pending = self._pending[match.end():]
        return match.group()

    def word(self) -> str:
        """Return the next run of non-blank characters."""
        return self._take(_WORD, "a word")

    def char(self) -> str:
        """Return the next non-blank character."""
        self._skip_space()
        first, self._pending = self._pending[0], self._pending[1:]
        return first

    def line(self) -> str:
        """Skip blanks, then return the rest of the line, spaces included."""
        self._skip_space()
        text, sep, rest = self._pending.partition("\n")
        self._pending = sep + rest
        return text

    def integer(self) -> int:
        """Return the next decimal integer."""
        return int(self._take(_INTEGER, "an integer"))

    def real(self) -> float:
        """Return the next decimal number."""
        return float(self._take(_REAL, "a number"))


def read_card(reader: TokenReader, out: TextIO) -> CityCard:
    """Prompt on ``out`` for each field and read a card from ``reader``."""

    def ask(prompt: str) -> None:
        out.write(prompt)
        out.flush()

    ask("Estado (uma letra de A a H): ")
    state = reader.char()
    ask("Código da Carta (ex: A01): ")
    code = reader.word()
    ask("Nome da Cidade: ")
    city = reader.line()
    ask("População: ")
    population = reader.integer()
    ask("Área (em km²): ")
    area = reader.real()
    ask("PIB (em bilhões de reais): ")
    gdp = reader.real()
    ask("Número de Pontos Turísticos: ")
    tourist_points = reader.integer()
    return CityCard(state, code, city, population, area, gdp, tourist_points)


def format_card(card: CityCard, index: int) -> str:
    """Return the display block for a card."""
    return (
        f"Carta {index}:\n"
        f"Estado: {card.state}\n"
        f"Código: {card.code}\n"
        f"Nome da Cidade: {card.city}\n"
        f"População: {card.population}\n"
        f"Área: {card.area:.2f} km²\n"
        f"PIB: {card.gdp:.2f} bilhões de reais\n"
        f"Número de Pontos Turísticos: {card.tourist_points}\n"
    )


def main(argv: list[str] | None = None) -> int:
    """Read two cards from standard input and show them."""
    argparse.ArgumentParser(description="Cadastro de duas cartas.").parse_args(argv)
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
    out.write("\n" + format_card(first, 1))
    out.write("\n" + format_card(second, 2))
    return 0


if __name__ == "__main__":
    sys.exit(main())