"""Units module for unit conversion and result formatting.

Public API:
    convert(value, source, dest) -> float | None
        Pure single-pair conversion between resolved units

    convert_to_all(value, source, units) -> list[ConversionResult]
        Convert into every unit, silently omitting failures

    format_value(value) -> str
        Canonical display text for a converted value

    load_catalog(path=None) -> UnitCatalog
        Cached catalog of category groups, categories and units

    convert_units(value, from_symbol, to_symbol) -> ConversionResult | None
        Symbol-level conversion through the catalog

Key Principles:
1. The engine is pure: no catalog lookups, no logging, no state
2. convert() reports failures as values (None / NaN); convert_checked() raises
3. Temperature and non-temperature units never convert into each other

Examples:
    >>> from unitconverter.units import convert_units, convert_all
    >>>
    >>> convert_units(0, "°C", "K").value
    273.15
    >>> convert_units(1, "mi", "km").formatted_value
    '1.6093'
    >>> [r.formatted_value for r in convert_all(1, "h")][:4]
    ['3600', '3.60000e+06', '60', '1']
"""

from .unittypes import (
    UnitKind,
    UnitDefinition,
    LinearUnit,
    InverseUnit,
    TemperatureUnit,
    UnitCategory,
    CategoryGroup,
    ConversionError,
    IncompatibleUnitsError,
    ZeroFactorError,
    CatalogError,
)
from .unitformat import (
    format_value,
    ConversionResult,
)
from .unitengine import (
    convert,
    convert_checked,
    convert_to_all,
    try_convert_all,
    ConversionFailure,
)
from .unitcatalog import (
    UnitCatalog,
    default_unit_pair,
    parse_catalog,
)
from .unitapi import (
    load_catalog,
    clear_cache,
    convert_units,
    convert_all,
    list_units,
    unit_identifier,
    match_unit,
)

__all__ = [
    # Data model
    "UnitKind",
    "UnitDefinition",
    "LinearUnit",
    "InverseUnit",
    "TemperatureUnit",
    "UnitCategory",
    "CategoryGroup",
    # Errors
    "ConversionError",
    "IncompatibleUnitsError",
    "ZeroFactorError",
    "CatalogError",
    # Engine
    "convert",
    "convert_checked",
    "convert_to_all",
    "try_convert_all",
    "ConversionFailure",
    # Formatting
    "format_value",
    "ConversionResult",
    # Catalog
    "UnitCatalog",
    "default_unit_pair",
    "parse_catalog",
    # API
    "load_catalog",
    "clear_cache",
    "convert_units",
    "convert_all",
    "list_units",
    "unit_identifier",
    "match_unit",
]
