#!/usr/bin/env python3
"""Command-line unit conversion.

Usage:
    # Single conversion
    python scripts/units/convert_units.py 100 °C °F

    # Every unit in the source unit's category
    python scripts/units/convert_units.py 1 km --all

    # Resolve symbols within one category only
    python scripts/units/convert_units.py 5 L/100km km/L --category "Fuel Economy"

    # List the catalog (optionally one category)
    python scripts/units/convert_units.py --list --category Length

Environment Variables:
    UNITCONVERTER_CATALOG_PATH: Catalog YAML to use instead of the bundled one

Exit status is 1 and "Error" is printed when a conversion cannot be made.
"""

import argparse
import logging
import math
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from unitconverter.units import (
    CatalogError,
    convert_all,
    convert_units,
    list_units,
    load_catalog,
)

ERROR_TEXT = "Error"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Convert a value between units of measurement',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('value', nargs='?', type=float, help='Value to convert')
    parser.add_argument('from_unit', nargs='?', help='Source unit symbol (e.g. km)')
    parser.add_argument('to_unit', nargs='?', help='Destination unit symbol (e.g. mi)')

    parser.add_argument(
        '--category', '-c',
        help='Resolve symbols within this category only'
    )
    parser.add_argument(
        '--all', '-a',
        action='store_true',
        help='Convert into every unit of the source unit\'s category'
    )
    parser.add_argument(
        '--list', '-l',
        action='store_true',
        help='List available units and exit'
    )
    parser.add_argument(
        '--catalog',
        type=Path,
        help='Catalog YAML file (default: bundled catalog)'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose output'
    )
    return parser


def main(argv=None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        catalog = load_catalog(args.catalog)
    except (FileNotFoundError, CatalogError) as e:
        print(f"Could not load catalog: {e}", file=sys.stderr)
        return 1

    if args.list:
        df = list_units(category=args.category, catalog=catalog)
        if df.empty:
            print("No units found", file=sys.stderr)
            return 1
        for category, rows in df.groupby('category', sort=False):
            print(f"{category}:")
            for _, row in rows.iterrows():
                print(f"  {row['symbol']:<10} {row['name']}")
        return 0

    if args.value is None or args.from_unit is None:
        parser.error('value and from_unit are required unless --list is given')

    if args.all:
        results = convert_all(args.value, args.from_unit, category=args.category, catalog=catalog)
        if not results:
            print(ERROR_TEXT)
            return 1
        for result in results:
            print(f"{result.formatted_value:>16}  {result.unit.symbol:<10} {result.unit.name}")
        return 0

    if args.to_unit is None:
        parser.error('to_unit is required unless --all or --list is given')

    result = convert_units(
        args.value, args.from_unit, args.to_unit,
        category=args.category, catalog=catalog,
    )
    if result is None or math.isnan(result.value):
        print(ERROR_TEXT)
        return 1

    print(f"{result.formatted_value} {result.unit.symbol}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
