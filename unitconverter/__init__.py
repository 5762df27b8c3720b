"""Unit Converter - unit conversion engine and catalog

Public API for converting values between units of length, mass, temperature,
fuel economy and other categories, and formatting the results for display.

Usage:
    from unitconverter import convert_units, convert_all, load_catalog

    # Symbol-level conversion through the bundled catalog
    result = convert_units(100, "°C", "°F")  # result.formatted_value == '212'

    # Every unit in the source unit's category
    results = convert_all(1, "km")

    # Pure engine over resolved units
    catalog = load_catalog()
    km, _ = catalog.find_unit("km")
    mi, _ = catalog.find_unit("mi")
    convert(1.0, km, mi)  # 0.621371...

    # Look units up by name
    unit = unit_identifier("kilometres")  # {'symbol': 'km', ...}
"""

__version__ = "0.1.0"

# ============================================================================
# Conversion Engine
# ============================================================================

from .units.unitengine import (
    convert,             # Pure single-pair conversion (None / NaN on failure)
    convert_checked,     # Same, raising typed errors
    convert_to_all,      # Batch conversion, failures omitted
)
from .units.unitformat import (
    format_value,        # Canonical display text
    ConversionResult,    # value + unit + formatted text
)

# ============================================================================
# Data Model
# ============================================================================

from .units.unittypes import (
    UnitDefinition,
    LinearUnit,
    InverseUnit,
    TemperatureUnit,
    UnitCategory,
    CategoryGroup,
    IncompatibleUnitsError,
    ZeroFactorError,
    CatalogError,
)

# ============================================================================
# Catalog API
# ============================================================================

from .units.unitcatalog import (
    UnitCatalog,         # Immutable lookup object
    default_unit_pair,   # First/second unit of a category
)
from .units.unitapi import (
    load_catalog,        # Cached catalog load (bundled, env or explicit path)
    convert_units,       # Convert by symbol
    convert_all,         # Convert by symbol into the whole category
    list_units,          # DataFrame listing of units
    unit_identifier,     # Resolve symbol/name/alias to a unit
    match_unit,          # Top-K fuzzy candidates
)

__all__ = [
    "__version__",
    # Engine
    "convert",
    "convert_checked",
    "convert_to_all",
    "format_value",
    "ConversionResult",
    # Data model
    "UnitDefinition",
    "LinearUnit",
    "InverseUnit",
    "TemperatureUnit",
    "UnitCategory",
    "CategoryGroup",
    "IncompatibleUnitsError",
    "ZeroFactorError",
    "CatalogError",
    # Catalog
    "UnitCatalog",
    "default_unit_pair",
    "load_catalog",
    "convert_units",
    "convert_all",
    "list_units",
    "unit_identifier",
    "match_unit",
]
