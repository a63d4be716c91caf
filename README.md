# supertrunfo

Five small Super Trunfo (Top Trumps) games played in the terminal, with
Brazilian cities and with countries. Prompts and results are in Portuguese.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

- `supertrunfo-register`: asks for the data of two city cards (state,
  code, city name, population, area, GDP and number of tourist points) and
  prints both cards back.
- `supertrunfo-compare`: reads two city cards, works out the population
  density, the GDP per capita and the "super power" of each, and prints one
  line per attribute. Each line shows `1` if card 1 wins on that attribute
  and `0` if it does not. For density, the lower value wins.
- `supertrunfo-attribute`: shows two fixed cards, São Paulo and Rio de
  Janeiro, and compares them on a single attribute, naming the winner or
  reporting a tie. The attribute is chosen with `--atributo`, one of
  `populacao` (the default), `area`, `pib`, `densidade` or
  `pib_per_capita`.
- `supertrunfo-countries`: shows two country cards, Brasil and Portugal.
  You pick an attribute from a menu of five and it names the winner. An
  option outside the menu is reported as invalid.
- `supertrunfo-rounds`: you pick two of three countries (Brasil, Alemanha,
  Austrália) and two different attributes; invalid choices are asked for
  again. It shows a comparison table and the winner of each attribute. The
  card with the larger sum of the two values wins the round.

`supertrunfo-register` and `supertrunfo-compare` stop with exit status 1
when the input ends early or a number cannot be read, as does
`supertrunfo-rounds` when the input ends early.

In every comparison the larger value wins. The exception is population
density, where the smaller value wins.

## Library use

Each game is a module inside `supertrunfo`:

- `registration`: `CityCard`, `TokenReader`, `read_card`, `format_card`
- `comparison`: `population_density`, `gdp_per_capita`, `super_power`,
  `compare`, `format_comparison`
- `single_attribute`: `Card`, `Attribute`, `make_card`, `format_card`,
  `compare`, `render_comparison`
- `countries`: `CountryCard`, `Attribute`, `format_card`, `compare`,
  `render_comparison`
- `rounds`: `Country`, `Attribute`, `CARDS`, `attribute_menu`,
  `attribute_value`, `attribute_label`, `attribute_winner`, `play_round`

Each module also has a `main(argv=None)` entry point.

For example, to play a round of the country game from code:

```python
from supertrunfo.rounds import Attribute, Country, play_round

brasil = Country("Brasil", 214, 8516, 1868, 765, 25)
alemanha = Country("Alemanha", 83, 357, 3845, 942, 232)
print(play_round(brasil, alemanha, Attribute.AREA, Attribute.DENSITY))
```

`play_round` raises `ValueError` when an attribute is unknown or both
attributes are the same.

## What it does not do

Each game is a single comparison. Cards are not saved between runs, and
there is no deck or sequence of rounds with a running score.