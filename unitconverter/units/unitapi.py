"""Unit conversion API.

Public entry points that work from unit symbols and names rather than
resolved UnitDefinition objects. They load the catalog once (cached) and hand
resolved units to the pure engine in ``unitengine``.

Catalog source, in priority order:
  1. ``path`` argument to ``load_catalog``
  2. UNITCONVERTER_CATALOG_PATH environment variable
  3. Bundled unitconverter/units/data/units.yaml
"""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Tuple, Union

import pandas as pd

from unitconverter.utils.dataloader import (
    find_data_file,
    format_not_found_error,
    load_yaml_file,
)
from unitconverter.utils.normalize import normalize_name
from unitconverter.utils.resolver import find_best_match, topk_matches
from .unitcatalog import UnitCatalog, parse_catalog
from .unitengine import convert, convert_to_all
from .unitformat import ConversionResult
from .unittypes import UnitCategory, UnitDefinition

logger = logging.getLogger(__name__)

CATALOG_ENV_VAR = "UNITCONVERTER_CATALOG_PATH"
CATALOG_FILENAMES = ["units.yaml", "units.yml"]


@lru_cache(maxsize=4)
def _load_catalog_cached(path: Optional[str]) -> UnitCatalog:
    if path is not None:
        found_path = Path(path)
        if not found_path.exists():
            raise FileNotFoundError(format_not_found_error(
                subdirectory="units",
                searched_locations=[("Configured catalog path", found_path)],
                fix_instructions=[
                    f"Check the path passed to load_catalog() or {CATALOG_ENV_VAR}.",
                ],
            ))
    else:
        found_path = find_data_file(
            module_file=__file__,
            subdirectory="units",
            filenames=CATALOG_FILENAMES,
            module_local_data=True,
        )
        if found_path is None:
            units_dir = Path(__file__).parent / "data"
            raise FileNotFoundError(format_not_found_error(
                subdirectory="units",
                searched_locations=[
                    ("Module-local data", units_dir),
                    ("Package data", Path(__file__).parent.parent / "data" / "units"),
                ],
                fix_instructions=[
                    "Reinstall unitconverter so units/data/units.yaml is included.",
                    f"Or set {CATALOG_ENV_VAR} to a catalog YAML file.",
                ],
            ))

    catalog = parse_catalog(load_yaml_file(found_path))
    logger.info(
        f"Loaded {len(catalog)} units in {len(catalog.categories)} categories from {found_path}"
    )
    return catalog


def load_catalog(path: Optional[Union[str, Path]] = None) -> UnitCatalog:
    """Load the unit catalog, cached per source path.

    Args:
        path: Optional catalog YAML file. If None, uses UNITCONVERTER_CATALOG_PATH
              when set, otherwise the bundled catalog.

    Returns:
        Immutable UnitCatalog

    Raises:
        FileNotFoundError: Catalog file missing
        CatalogError: Catalog file is malformed

    Examples:
        >>> catalog = load_catalog()
        >>> catalog.find_category("Length").symbols[:3]
        ('m', 'km', 'cm')
    """
    if path is None:
        env_path = os.environ.get(CATALOG_ENV_VAR)
        if env_path:
            logger.debug(f"Using catalog from {CATALOG_ENV_VAR}: {env_path}")
            path = env_path
    return _load_catalog_cached(str(path) if path is not None else None)


def clear_cache() -> None:
    """Drop cached catalogs so the next load_catalog() re-reads from disk."""
    _load_catalog_cached.cache_clear()
    logger.debug("Cleared unit catalog cache")


def _resolve(
    symbol: str,
    category: Optional[str],
    catalog: UnitCatalog,
) -> Optional[Tuple[UnitDefinition, UnitCategory]]:
    if category is None:
        return catalog.find_unit(symbol)

    cat = catalog.find_category(category)
    if cat is None:
        return None
    unit = catalog.find_unit_in_category(symbol, cat)
    if unit is None:
        return None
    return unit, cat


def convert_units(
    value: float,
    from_symbol: str,
    to_symbol: str,
    *,
    category: Optional[str] = None,
    catalog: Optional[UnitCatalog] = None,
) -> Optional[ConversionResult]:
    """Convert a value between two units given by symbol.

    Args:
        value: Value expressed in ``from_symbol``
        from_symbol: Source unit symbol (e.g. "km")
        to_symbol: Destination unit symbol (e.g. "mi")
        category: Optional category name to resolve both symbols in
        catalog: Catalog to use (default: load_catalog())

    Returns:
        ConversionResult, or None when a symbol is unknown, the two units
        belong to different categories, or they are incompatible. A zero
        destination factor gives a result whose value is NaN.

    Examples:
        >>> convert_units(100, "°C", "°F").formatted_value
        '212'
        >>> convert_units(1, "km", "kg") is None
        True
    """
    if catalog is None:
        catalog = load_catalog()

    source = _resolve(from_symbol, category, catalog)
    if source is None:
        return None
    source_unit, source_category = source

    dest_unit = catalog.find_unit_in_category(to_symbol, source_category)
    if dest_unit is None:
        return None

    converted = convert(value, source_unit, dest_unit)
    if converted is None:
        return None
    return ConversionResult(value=converted, unit=dest_unit)


def convert_all(
    value: float,
    from_symbol: str,
    *,
    category: Optional[str] = None,
    catalog: Optional[UnitCatalog] = None,
) -> List[ConversionResult]:
    """Convert a value into every unit of its category.

    Returns:
        One ConversionResult per convertible unit in catalog order, or an
        empty list when ``from_symbol`` is unknown.

    Examples:
        >>> [r.unit.symbol for r in convert_all(1, "°C")]
        ['°C', '°F', 'K', '°R']
    """
    if catalog is None:
        catalog = load_catalog()

    source = _resolve(from_symbol, category, catalog)
    if source is None:
        return []
    source_unit, source_category = source
    return convert_to_all(value, source_unit, source_category.units)


def list_units(
    category: Optional[str] = None,
    group: Optional[str] = None,
    *,
    catalog: Optional[UnitCatalog] = None,
) -> pd.DataFrame:
    """List units filtered by category and/or group.

    Examples:
        >>> list_units(category="Temperature")[["name", "symbol"]].values
        array([['Celsius', '°C'], ['Fahrenheit', '°F'], ...])
    """
    if catalog is None:
        catalog = load_catalog()
    df = catalog.to_frame()

    if category is not None:
        df = df[df["category"] == category]

    if group is not None:
        df = df[df["group"] == group]

    return df.reset_index(drop=True)


def unit_identifier(
    query: str,
    *,
    category: Optional[str] = None,
    threshold: int = 90,
    catalog: Optional[UnitCatalog] = None,
) -> Optional[dict]:
    """Resolve a symbol, name or alias to a catalog unit row.

    Resolution strategy:
      1. Exact symbol match (case-sensitive, "mm" is not "Mm")
      2. RapidFuzz WRatio over names and aliases, above ``threshold``

    Returns:
        Dict of the unit's catalog row (see UnitCatalog.to_frame), or None

    Examples:
        >>> unit_identifier("ft")["name"]
        'Foot'
        >>> unit_identifier("kilometres")["symbol"]
        'km'
    """
    if not query or not query.strip():
        return None

    df = list_units(category=category, catalog=catalog)

    exact = df[df["symbol"] == query.strip()]
    if len(exact) > 0:
        return exact.iloc[0].to_dict()

    query_norm = normalize_name(query)
    if not query_norm:
        return None

    best = find_best_match(df, query_norm, normalize_name, threshold=threshold)
    if best is None:
        return None
    return best.to_dict()


def match_unit(
    query: str,
    *,
    k: int = 5,
    category: Optional[str] = None,
    catalog: Optional[UnitCatalog] = None,
) -> List[dict]:
    """Top-K candidate units with fuzzy scores (for pickers and review).

    Returns:
        List of unit row dicts with an added ``score`` (0-100), best first

    Examples:
        >>> [m["symbol"] for m in match_unit("mile", k=2)]
        ['mi', 'nmi']
    """
    query_norm = normalize_name(query or "")
    if not query_norm:
        return []

    df = list_units(category=category, catalog=catalog)
    return [
        {**row.to_dict(), "score": score}
        for row, score in topk_matches(df, query_norm, normalize_name, k=k)
    ]


__all__ = [
    "load_catalog",
    "clear_cache",
    "convert_units",
    "convert_all",
    "list_units",
    "unit_identifier",
    "match_unit",
    "CATALOG_ENV_VAR",
]
