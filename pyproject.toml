[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "supertrunfo"
version = "1.0.0"
description = "Super Trunfo card games for Brazilian cities and countries, played in the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["super trunfo", "card game", "top trumps", "terminal game"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
supertrunfo-register = "supertrunfo.registration:main"
supertrunfo-compare = "supertrunfo.comparison:main"
supertrunfo-attribute = "supertrunfo.single_attribute:main"
supertrunfo-countries = "supertrunfo.countries:main"
supertrunfo-rounds = "supertrunfo.rounds:main"

[tool.hatch.build.targets.wheel]
packages = ["supertrunfo"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
