"""Tests for the unit data model, catalog lookups and catalog parsing."""

import dataclasses

import pandas as pd
import pytest

from unitconverter.units import (
    CatalogError,
    CategoryGroup,
    InverseUnit,
    LinearUnit,
    TemperatureUnit,
    UnitCatalog,
    UnitCategory,
    UnitKind,
    default_unit_pair,
    parse_catalog,
)
from unitconverter.units.unitcatalog import parse_category, parse_unit


class TestUnitKinds:
    """Tagged variant per unit kind"""

    def test_linear(self, meter):
        assert meter.kind is UnitKind.LINEAR
        assert not meter.is_temperature
        assert not meter.is_inverse

    def test_inverse(self, liters_per_100km):
        assert liters_per_100km.kind is UnitKind.INVERSE
        assert liters_per_100km.is_inverse
        assert not liters_per_100km.is_temperature

    def test_temperature(self, fahrenheit):
        assert fahrenheit.kind is UnitKind.TEMPERATURE
        assert fahrenheit.is_temperature
        assert fahrenheit.offset == -32.0

    def test_temperature_requires_offset(self):
        with pytest.raises(TypeError):
            TemperatureUnit("Celsius", "°C", 1.0)

    def test_units_are_frozen(self, meter):
        with pytest.raises(dataclasses.FrozenInstanceError):
            meter.conversion_factor = 2.0

    def test_units_are_hashable(self, meter, kilometer):
        assert len({meter, kilometer, LinearUnit("Meter", "m", 1.0, is_base=True)}) == 2

    def test_same_fields_different_kind_not_equal(self):
        assert LinearUnit("X", "x", 2.0) != InverseUnit("X", "x", 2.0)

    def test_category_units_become_tuple(self, meter, kilometer):
        category = UnitCategory("Length", [meter, kilometer])
        assert isinstance(category.units, tuple)
        assert category.symbols == ("m", "km")
        assert len(category) == 2
        assert list(category) == [meter, kilometer]


class TestCatalogLookups:
    """find_unit / find_category / groups"""

    def test_find_unit_across_categories(self, small_catalog, kilometer):
        unit, category = small_catalog.find_unit("km")
        assert unit is kilometer
        assert category.name == "Length"

    def test_find_unit_temperature(self, small_catalog):
        unit, category = small_catalog.find_unit("°F")
        assert unit.name == "Fahrenheit"
        assert category.name == "Temperature"

    def test_find_unit_miss(self, small_catalog):
        assert small_catalog.find_unit("furlong") is None

    def test_find_unit_is_case_sensitive(self, small_catalog):
        assert small_catalog.find_unit("KM") is None

    def test_find_unit_in_category(self, small_catalog):
        temperature = small_catalog.find_category("Temperature")
        assert small_catalog.find_unit_in_category("K", temperature).name == "Kelvin"
        assert small_catalog.find_unit_in_category("m", temperature) is None

    def test_find_category(self, small_catalog):
        assert small_catalog.find_category("Fuel Economy").symbols == ("km/L", "mpg", "L/100km")
        assert small_catalog.find_category("Pressure") is None

    def test_categories_in_catalog_order(self, small_catalog):
        assert [c.name for c in small_catalog.categories] == ["Length", "Temperature", "Fuel Economy"]

    def test_categories_in_group(self, small_catalog):
        assert [c.name for c in small_catalog.categories_in_group("Common")] == ["Length", "Temperature"]
        assert small_catalog.categories_in_group("Nope") == []

    def test_find_group(self, small_catalog):
        assert small_catalog.find_group("Automotive").name == "Automotive"
        assert small_catalog.find_group("Nope") is None

    def test_len_counts_units(self, small_catalog):
        assert len(small_catalog) == 10

    def test_symbol_collision_first_match_wins(self):
        first = LinearUnit("Pint", "pt", 0.473176473)
        second = LinearUnit("Point", "pt", 0.000352778)
        catalog = UnitCatalog.from_categories([
            UnitCategory("Volume", (first,)),
            UnitCategory("Typography", (second,)),
        ])
        unit, category = catalog.find_unit("pt")
        assert unit is first
        assert category.name == "Volume"

    def test_duplicate_category_rejected(self, meter):
        with pytest.raises(CatalogError, match="Duplicate category"):
            UnitCatalog([
                CategoryGroup("A", (UnitCategory("Length", (meter,)),)),
                CategoryGroup("B", (UnitCategory("Length", (meter,)),)),
            ])

    def test_empty_catalog(self):
        catalog = UnitCatalog([])
        assert len(catalog) == 0
        assert catalog.find_unit("m") is None
        assert catalog.to_frame().empty


class TestToFrame:
    """Flat DataFrame view of the catalog"""

    def test_columns_and_rows(self, small_catalog):
        df = small_catalog.to_frame()
        assert isinstance(df, pd.DataFrame)
        assert len(df) == 10
        for col in ["group", "category", "name", "name_norm", "symbol", "kind", "factor",
                    "offset", "is_base", "description", "alias1", "alias10"]:
            assert col in df.columns

    def test_kinds(self, small_catalog):
        df = small_catalog.to_frame().set_index("symbol")
        assert df.loc["m", "kind"] == "linear"
        assert df.loc["°C", "kind"] == "temperature"
        assert df.loc["L/100km", "kind"] == "inverse"
        assert df.loc["K", "offset"] == -273.15


class TestDefaultUnitPair:
    """First and second unit of a category"""

    def test_two_or_more(self, length_units, meter, kilometer):
        assert default_unit_pair(UnitCategory("Length", length_units)) == (meter, kilometer)

    def test_single_unit_pairs_with_itself(self, meter):
        assert default_unit_pair(UnitCategory("Length", (meter,))) == (meter, meter)

    def test_empty(self):
        assert default_unit_pair(UnitCategory("Empty")) is None


class TestParseUnit:
    """Catalog entries to UnitDefinition"""

    def test_linear(self):
        unit = parse_unit({"name": "Meter", "symbol": "m", "factor": 1, "base": True,
                           "aliases": ["metre"], "description": "SI"})
        assert isinstance(unit, LinearUnit)
        assert unit.conversion_factor == 1.0
        assert unit.is_base
        assert unit.aliases == ("metre",)
        assert unit.description == "SI"

    def test_inverse(self):
        unit = parse_unit({"name": "L/100km", "symbol": "L/100km", "factor": 100, "inverse": True})
        assert isinstance(unit, InverseUnit)

    def test_temperature(self):
        unit = parse_unit({"name": "Fahrenheit", "symbol": "°F", "factor": "5/9", "offset": -32})
        assert isinstance(unit, TemperatureUnit)
        assert unit.conversion_factor == pytest.approx(5 / 9)
        assert unit.offset == -32.0

    def test_zero_offset_is_still_temperature(self):
        unit = parse_unit({"name": "Celsius", "symbol": "°C", "factor": 1, "offset": 0})
        assert unit.is_temperature

    def test_exponent_string_factor(self):
        unit = parse_unit({"name": "Micrometer", "symbol": "µm", "factor": "1e-6"})
        assert unit.conversion_factor == pytest.approx(1e-6)

    def test_single_alias_string(self):
        unit = parse_unit({"name": "Foot", "symbol": "ft", "factor": 0.3048, "aliases": "feet"})
        assert unit.aliases == ("feet",)

    def test_zero_factor_is_accepted(self):
        """Zero factors surface as NaN at conversion time, not at load"""
        unit = parse_unit({"name": "Broken", "symbol": "brk", "factor": 0})
        assert unit.conversion_factor == 0.0

    def test_offset_without_factor_rejected(self):
        with pytest.raises(CatalogError, match="no factor"):
            parse_unit({"name": "Kelvin", "symbol": "K", "offset": -273.15})

    def test_inverse_temperature_rejected(self):
        with pytest.raises(CatalogError, match="both inverse and temperature"):
            parse_unit({"name": "X", "symbol": "x", "factor": 1, "offset": 0, "inverse": True})

    @pytest.mark.parametrize("entry", [
        {"symbol": "m", "factor": 1},
        {"name": "Meter", "factor": 1},
        {"name": "Meter", "symbol": "m", "factor": "abc"},
        {"name": "Meter", "symbol": "m", "factor": True},
        {"name": "Meter", "symbol": "m", "factor": "1/0"},
        {"name": "Meter", "symbol": "m", "factor": None},
        {"name": "Meter", "symbol": "m", "factor": [1]},
    ])
    def test_malformed(self, entry):
        with pytest.raises(CatalogError):
            parse_unit(entry, "Length")

    def test_not_a_mapping(self):
        with pytest.raises(CatalogError, match="mapping"):
            parse_unit(["m", 1.0], "Length")


class TestParseCatalog:
    """Whole catalog documents"""

    def test_groups(self):
        catalog = parse_catalog({"groups": [
            {"name": "Common", "categories": [
                {"name": "Length", "units": [
                    {"name": "Meter", "symbol": "m", "factor": 1},
                    {"name": "Kilometer", "symbol": "km", "factor": 1000},
                ]},
            ]},
        ]})
        assert [g.name for g in catalog.groups] == ["Common"]
        assert catalog.find_category("Length").symbols == ("m", "km")

    def test_bare_categories_land_in_default_group(self):
        catalog = parse_catalog({"categories": [
            {"name": "Length", "units": [{"name": "Meter", "symbol": "m", "factor": 1}]},
        ]})
        assert [g.name for g in catalog.groups] == ["Other"]

    def test_category_without_units(self):
        category = parse_category({"name": "Empty"})
        assert category.units == ()

    def test_duplicate_symbol_rejected(self):
        with pytest.raises(CatalogError, match="Duplicate symbol"):
            parse_category({"name": "Length", "units": [
                {"name": "Meter", "symbol": "m", "factor": 1},
                {"name": "Metre", "symbol": "m", "factor": 1},
            ]})

    def test_mixed_temperature_rejected(self):
        with pytest.raises(CatalogError, match="mixes temperature"):
            parse_category({"name": "Temperature", "units": [
                {"name": "Celsius", "symbol": "°C", "factor": 1, "offset": 0},
                {"name": "Meter", "symbol": "m", "factor": 1},
            ]})

    def test_category_requires_name(self):
        with pytest.raises(CatalogError, match="requires a name"):
            parse_category({"units": []})

    def test_root_must_be_mapping(self):
        with pytest.raises(CatalogError, match="root"):
            parse_catalog(["not", "a", "mapping"])

    def test_empty_document(self):
        assert len(parse_catalog({})) == 0
