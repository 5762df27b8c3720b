"""Unit conversion engine.

Pure functions over resolved UnitDefinition values. Callers pick both units
from the same category; the engine only checks that source and destination
agree on being temperature units.

Failure signalling in ``convert``:
  - incompatible units (temperature vs non-temperature) -> None
  - zero destination factor                             -> float('nan')

``convert_checked`` raises typed errors for the same two cases instead, and
``convert_to_all`` drops failed units from its result.

Linear path:
    base = value * source.factor
    out  = base / dest.factor
    then the inverse-unit correction (see _apply_inverse_correction)

Temperature path (Celsius is the intermediate):
    celsius = (value + source.offset) * source.factor
    out     = celsius / dest.factor - dest.offset
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from .unitformat import ConversionResult
from .unittypes import (
    ConversionError,
    IncompatibleUnitsError,
    UnitDefinition,
    ZeroFactorError,
)


NAN = float("nan")


# ============================================================================
# Single-pair conversion
# ============================================================================

def convert(value: float, source: UnitDefinition, dest: UnitDefinition) -> Optional[float]:
    """Convert ``value`` from ``source`` to ``dest``.

    Returns:
        The converted value, NaN when ``dest`` has a zero factor, or None when
        exactly one of the two units is a temperature unit.

    Examples:
        >>> convert(100.0, celsius, fahrenheit)
        212.0
        >>> convert(1.0, celsius, meter) is None
        True
    """
    if source.is_temperature != dest.is_temperature:
        return None

    if source.is_temperature:
        return _temperature_conversion(value, source, dest)
    return _standard_conversion(value, source, dest)


def convert_checked(value: float, source: UnitDefinition, dest: UnitDefinition) -> float:
    """Like ``convert`` but raises instead of returning a sentinel.

    Raises:
        IncompatibleUnitsError: Temperature and non-temperature units mixed
        ZeroFactorError: ``dest`` has a zero conversion factor
    """
    result = convert(value, source, dest)
    if result is None:
        raise IncompatibleUnitsError(
            f"Cannot convert between {source.symbol} ({source.kind.value}) "
            f"and {dest.symbol} ({dest.kind.value})"
        )
    if dest.conversion_factor == 0:
        raise ZeroFactorError(f"Unit {dest.symbol} has a zero conversion factor")
    return result


def _standard_conversion(value: float, source: UnitDefinition, dest: UnitDefinition) -> float:
    base_value = value * source.conversion_factor
    if dest.conversion_factor == 0:
        return NAN
    output_value = base_value / dest.conversion_factor
    return _apply_inverse_correction(value, base_value, output_value, source, dest)


def _temperature_conversion(value: float, source: UnitDefinition, dest: UnitDefinition) -> float:
    value_in_celsius = (value + source.offset) * source.conversion_factor
    if dest.conversion_factor == 0:
        return NAN
    return (value_in_celsius / dest.conversion_factor) - dest.offset


def _apply_inverse_correction(
    value: float,
    base_value: float,
    output_value: float,
    source: UnitDefinition,
    dest: UnitDefinition,
) -> float:
    """Correct a linear result when exactly one side is an inverse unit."""
    if not source.is_inverse and dest.is_inverse:
        if output_value != 0:
            return 1.0 / output_value
        return output_value

    if source.is_inverse and not dest.is_inverse:
        if value != 0:
            return _inverse_to_linear(value, base_value, dest)
        return output_value

    return output_value


def _inverse_to_linear(value: float, base_value: float, dest: UnitDefinition) -> float:
    # Known quirk: dest.conversion_factor is not used here, so the result is
    # always source.factor. Pinned by test_inverse_to_linear_regression.
    return base_value * (1.0 / value)


# ============================================================================
# Batch conversion
# ============================================================================

@dataclass(frozen=True)
class ConversionFailure:
    """Why a unit was left out of a batch conversion."""

    unit: UnitDefinition
    error: ConversionError


ConversionOutcome = Union[ConversionResult, ConversionFailure]


def try_convert_all(
    value: float,
    source: UnitDefinition,
    units: Iterable[UnitDefinition],
) -> List[ConversionOutcome]:
    """Convert ``value`` into every unit, keeping failures as entries.

    The entry for ``source`` itself (matched by symbol) carries ``value``
    unchanged, with no arithmetic applied.
    """
    outcomes: List[ConversionOutcome] = []
    for unit in units:
        if unit.symbol == source.symbol:
            outcomes.append(ConversionResult(value=value, unit=source))
            continue
        try:
            converted = convert_checked(value, source, unit)
        except ConversionError as e:
            outcomes.append(ConversionFailure(unit=unit, error=e))
            continue
        if math.isnan(converted):
            outcomes.append(ConversionFailure(
                unit=unit,
                error=ConversionError(f"Conversion to {unit.symbol} produced NaN"),
            ))
            continue
        outcomes.append(ConversionResult(value=converted, unit=unit))
    return outcomes


def convert_to_all(
    value: float,
    source: UnitDefinition,
    units: Iterable[UnitDefinition],
) -> List[ConversionResult]:
    """Convert ``value`` into every unit in ``units``, in order.

    Units that fail to convert are omitted, so the result can be shorter than
    ``units`` but never contains error placeholders.

    Examples:
        >>> [r.formatted_value for r in convert_to_all(1.0, km, length.units)]
        ['1000', '1', '100000']
    """
    return [
        outcome for outcome in try_convert_all(value, source, units)
        if isinstance(outcome, ConversionResult)
    ]


__all__ = [
    "convert",
    "convert_checked",
    "convert_to_all",
    "try_convert_all",
    "ConversionFailure",
    "ConversionOutcome",
]
