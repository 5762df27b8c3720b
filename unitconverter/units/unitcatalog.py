"""Immutable unit catalog and its YAML parser.

A catalog is built once (usually by ``unitapi.load_catalog``) and handed to
callers; nothing in the engine reaches for a global catalog.

Catalog file layout:

    groups:
      - name: Common
        categories:
          - name: Temperature
            units:
              - {name: Celsius, symbol: "°C", factor: 1, offset: 0, base: true}
              - {name: Fahrenheit, symbol: "°F", factor: 0.5555555555555556, offset: -32}

A unit with ``offset`` is a temperature unit; ``inverse: true`` marks an
inverse unit. Everything else is linear.
"""

from __future__ import annotations

from fractions import Fraction
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

import pandas as pd

from unitconverter.utils.normalize import normalize_name
from unitconverter.utils.resolver import expand_aliases
from .unittypes import (
    CatalogError,
    CategoryGroup,
    InverseUnit,
    LinearUnit,
    TemperatureUnit,
    UnitCategory,
    UnitDefinition,
)


# Groups without a name in the file land here
DEFAULT_GROUP = "Other"


class UnitCatalog:
    """Read-only lookup over category groups, categories and units.

    Lookups return None on a miss. Symbols are expected to be unique; if two
    categories share one, ``find_unit`` returns the first in catalog order.
    """

    def __init__(self, groups: Iterable[CategoryGroup]):
        self._groups: Tuple[CategoryGroup, ...] = tuple(groups)

        categories: Dict[str, UnitCategory] = {}
        for group in self._groups:
            for category in group.categories:
                if category.name in categories:
                    raise CatalogError(f"Duplicate category name: {category.name!r}")
                categories[category.name] = category
        self._categories: Mapping[str, UnitCategory] = MappingProxyType(categories)

    @classmethod
    def from_categories(cls, categories: Iterable[UnitCategory], group: str = DEFAULT_GROUP) -> "UnitCatalog":
        """Build a single-group catalog from loose categories."""
        return cls([CategoryGroup(name=group, categories=tuple(categories))])

    @property
    def groups(self) -> Tuple[CategoryGroup, ...]:
        return self._groups

    @property
    def categories(self) -> Tuple[UnitCategory, ...]:
        return tuple(self._categories.values())

    def __len__(self) -> int:
        return sum(len(c) for c in self._categories.values())

    def find_unit(self, symbol: str) -> Optional[Tuple[UnitDefinition, UnitCategory]]:
        """Find a unit by symbol across all categories."""
        for category in self._categories.values():
            unit = self.find_unit_in_category(symbol, category)
            if unit is not None:
                return unit, category
        return None

    def find_unit_in_category(self, symbol: str, category: UnitCategory) -> Optional[UnitDefinition]:
        for unit in category.units:
            if unit.symbol == symbol:
                return unit
        return None

    def find_category(self, name: str) -> Optional[UnitCategory]:
        return self._categories.get(name)

    def find_group(self, name: str) -> Optional[CategoryGroup]:
        for group in self._groups:
            if group.name == name:
                return group
        return None

    def categories_in_group(self, name: str) -> List[UnitCategory]:
        group = self.find_group(name)
        return list(group.categories) if group is not None else []

    def to_frame(self) -> pd.DataFrame:
        """Flatten the catalog into one row per unit.

        Columns: group, category, name, name_norm, symbol, kind, factor,
        offset, is_base, description, alias1...alias10
        """
        rows = []
        for group in self._groups:
            for category in group.categories:
                for unit in category.units:
                    rows.append({
                        "group": group.name,
                        "category": category.name,
                        "name": unit.name,
                        "name_norm": normalize_name(unit.name),
                        "symbol": unit.symbol,
                        "kind": unit.kind.value,
                        "factor": unit.conversion_factor,
                        "offset": getattr(unit, "offset", None),
                        "is_base": unit.is_base,
                        "description": unit.description,
                        **expand_aliases(unit.aliases),
                    })
        columns = [
            "group", "category", "name", "name_norm", "symbol", "kind",
            "factor", "offset", "is_base", "description",
        ] + list(expand_aliases(None).keys())
        return pd.DataFrame(rows, columns=columns)


def default_unit_pair(category: UnitCategory) -> Optional[Tuple[UnitDefinition, UnitDefinition]]:
    """Default (from, to) selection: first and second unit.

    A single-unit category pairs the unit with itself; an empty one has no
    default.
    """
    if not category.units:
        return None
    first = category.units[0]
    second = category.units[1] if len(category.units) > 1 else first
    return first, second


# ============================================================================
# Parsing
# ============================================================================

def parse_unit(spec: Mapping[str, Any], category: str = "?") -> UnitDefinition:
    """Build one unit from its catalog mapping.

    Raises:
        CatalogError: Missing name/symbol/factor, non-numeric numbers, an
            offset without a factor, or a unit both inverse and temperature
    """
    if not isinstance(spec, Mapping):
        raise CatalogError(f"Unit entry in {category!r} must be a mapping, got {type(spec).__name__}")

    symbol = spec.get("symbol")
    name = spec.get("name")
    where = f"{category}/{symbol or name or '?'}"

    if not symbol or not name:
        raise CatalogError(f"Unit {where} requires both name and symbol")
    if "factor" not in spec or spec["factor"] is None:
        raise CatalogError(f"Unit {where} has no factor")

    factor = _as_float(spec["factor"], "factor", where)
    aliases = spec.get("aliases") or ()
    if isinstance(aliases, str):
        aliases = (aliases,)

    common = dict(
        name=str(name),
        symbol=str(symbol),
        conversion_factor=factor,
        is_base=bool(spec.get("base", False)),
        description=spec.get("description"),
        aliases=tuple(str(a) for a in aliases),
    )

    inverse = bool(spec.get("inverse", False))
    if spec.get("offset") is not None:
        if inverse:
            raise CatalogError(f"Unit {where} cannot be both inverse and temperature")
        return TemperatureUnit(offset=_as_float(spec["offset"], "offset", where), **common)
    if inverse:
        return InverseUnit(**common)
    return LinearUnit(**common)


def parse_category(spec: Mapping[str, Any]) -> UnitCategory:
    """Build a category and check its units are internally consistent.

    Raises:
        CatalogError: Missing name, duplicate symbols, or temperature units
            mixed with non-temperature units
    """
    if not isinstance(spec, Mapping) or not spec.get("name"):
        raise CatalogError("Category entry requires a name")

    name = str(spec["name"])
    units = tuple(parse_unit(u, name) for u in spec.get("units") or ())

    seen = set()
    for unit in units:
        if unit.symbol in seen:
            raise CatalogError(f"Duplicate symbol {unit.symbol!r} in category {name!r}")
        seen.add(unit.symbol)

    if len({u.is_temperature for u in units}) > 1:
        raise CatalogError(f"Category {name!r} mixes temperature and non-temperature units")

    return UnitCategory(name=name, units=units)


def parse_catalog(data: Mapping[str, Any]) -> UnitCatalog:
    """Build a catalog from parsed YAML.

    Accepts either ``{"groups": [...]}`` or a bare ``{"categories": [...]}``
    (which becomes a single group named "Other").
    """
    if not isinstance(data, Mapping):
        raise CatalogError(f"Catalog root must be a mapping, got {type(data).__name__}")

    if "groups" in data:
        groups = []
        for g in data.get("groups") or ():
            if not isinstance(g, Mapping):
                raise CatalogError("Group entry must be a mapping")
            groups.append(CategoryGroup(
                name=str(g.get("name") or DEFAULT_GROUP),
                categories=tuple(parse_category(c) for c in g.get("categories") or ()),
            ))
        return UnitCatalog(groups)

    categories = tuple(parse_category(c) for c in data.get("categories") or ())
    return UnitCatalog.from_categories(categories)


def _as_float(raw: Any, field_name: str, where: str) -> float:
    """Numbers, or strings such as "5/9" and "1e-3" (YAML reads both as text)."""
    if isinstance(raw, bool):
        raise CatalogError(f"Unit {where}: {field_name} must be a number, got {raw!r}")
    try:
        if isinstance(raw, str):
            return float(Fraction(raw.strip()))
        return float(raw)
    except (TypeError, ValueError, ZeroDivisionError) as e:
        raise CatalogError(f"Unit {where}: {field_name} must be a number, got {raw!r}") from e


__all__ = [
    "UnitCatalog",
    "default_unit_pair",
    "parse_unit",
    "parse_category",
    "parse_catalog",
    "DEFAULT_GROUP",
]
