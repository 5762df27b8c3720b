"""Shared test fixtures for unitconverter tests."""

import pytest

from unitconverter.units import (
    InverseUnit,
    LinearUnit,
    TemperatureUnit,
    UnitCatalog,
    UnitCategory,
    CategoryGroup,
    clear_cache,
)


@pytest.fixture(autouse=True)
def _fresh_catalog_cache():
    """Each test starts and ends with an empty catalog cache."""
    clear_cache()
    yield
    clear_cache()


# ---- Length ----

@pytest.fixture
def meter():
    return LinearUnit("Meter", "m", 1.0, is_base=True)


@pytest.fixture
def kilometer():
    return LinearUnit("Kilometer", "km", 1000.0)


@pytest.fixture
def foot():
    return LinearUnit("Foot", "ft", 0.3048)


@pytest.fixture
def mile():
    return LinearUnit("Mile", "mi", 1609.344)


@pytest.fixture
def length_units(meter, kilometer, foot, mile):
    return (meter, kilometer, foot, mile)


# ---- Temperature ----

@pytest.fixture
def celsius():
    return TemperatureUnit("Celsius", "°C", 1.0, offset=0.0, is_base=True)


@pytest.fixture
def fahrenheit():
    return TemperatureUnit("Fahrenheit", "°F", 5 / 9, offset=-32.0)


@pytest.fixture
def kelvin():
    return TemperatureUnit("Kelvin", "K", 1.0, offset=-273.15)


@pytest.fixture
def temperature_units(celsius, fahrenheit, kelvin):
    return (celsius, fahrenheit, kelvin)


# ---- Fuel economy ----

@pytest.fixture
def km_per_liter():
    return LinearUnit("Kilometers per Liter", "km/L", 1.0, is_base=True)


@pytest.fixture
def mpg():
    return LinearUnit("Miles per Gallon (US)", "mpg", 0.425143707)


@pytest.fixture
def liters_per_100km():
    return InverseUnit("Liters per 100 Kilometers", "L/100km", 100.0)


# ---- Catalog ----

@pytest.fixture
def small_catalog(length_units, temperature_units, km_per_liter, mpg, liters_per_100km):
    """Two groups, three categories, built without touching disk."""
    return UnitCatalog([
        CategoryGroup("Common", (
            UnitCategory("Length", length_units),
            UnitCategory("Temperature", temperature_units),
        )),
        CategoryGroup("Automotive", (
            UnitCategory("Fuel Economy", (km_per_liter, mpg, liters_per_100km)),
        )),
    ])


SMALL_CATALOG_YAML = """\
groups:
  - name: Common
    categories:
      - name: Length
        units:
          - {name: Meter, symbol: m, factor: 1, base: true, aliases: [metre]}
          - {name: Kilometer, symbol: km, factor: 1000, aliases: [kilometre]}
      - name: Temperature
        units:
          - {name: Celsius, symbol: "°C", factor: 1, offset: 0}
          - {name: Fahrenheit, symbol: "°F", factor: "5/9", offset: -32}
"""


@pytest.fixture
def catalog_file(tmp_path):
    """Small catalog written to a temporary YAML file."""
    path = tmp_path / "units.yaml"
    path.write_text(SMALL_CATALOG_YAML, encoding="utf-8")
    return path
