"""Unit data model.

A unit is one of three kinds, each its own frozen dataclass:

  LinearUnit       value_in_base = value * factor
  InverseUnit      reciprocal to the category's linear scale (e.g. L/100 km)
  TemperatureUnit  affine, celsius = (value + offset) * factor

TemperatureUnit takes ``offset`` as a required keyword, so a temperature unit
without one cannot be constructed. Everything here is immutable and safe to
share between threads.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Iterator, Optional, Tuple


class UnitKind(str, Enum):
    """Tag for the conversion family a unit belongs to."""

    LINEAR = "linear"
    INVERSE = "inverse"
    TEMPERATURE = "temperature"


class ConversionError(ValueError):
    """Base class for typed conversion failures."""


class IncompatibleUnitsError(ConversionError):
    """Source and destination disagree on temperature-ness."""


class ZeroFactorError(ConversionError):
    """Destination unit has a zero conversion factor."""


class CatalogError(ValueError):
    """Malformed unit catalog data."""


@dataclass(frozen=True)
class UnitDefinition:
    """Base for all unit kinds. Use one of the concrete subclasses."""

    name: str
    symbol: str
    conversion_factor: float
    is_base: bool = False
    description: Optional[str] = None
    aliases: Tuple[str, ...] = ()

    kind: ClassVar[UnitKind]

    @property
    def is_temperature(self) -> bool:
        return self.kind is UnitKind.TEMPERATURE

    @property
    def is_inverse(self) -> bool:
        return self.kind is UnitKind.INVERSE


@dataclass(frozen=True)
class LinearUnit(UnitDefinition):
    kind: ClassVar[UnitKind] = UnitKind.LINEAR


@dataclass(frozen=True)
class InverseUnit(UnitDefinition):
    kind: ClassVar[UnitKind] = UnitKind.INVERSE


@dataclass(frozen=True)
class TemperatureUnit(UnitDefinition):
    offset: float = field(kw_only=True)

    kind: ClassVar[UnitKind] = UnitKind.TEMPERATURE


@dataclass(frozen=True)
class UnitCategory:
    """Named, ordered collection of mutually convertible units.

    Identity is the name. Unit order comes from the catalog and only matters
    for picking default units.
    """

    name: str
    units: Tuple[UnitDefinition, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "units", tuple(self.units))

    def __iter__(self) -> Iterator[UnitDefinition]:
        return iter(self.units)

    def __len__(self) -> int:
        return len(self.units)

    @property
    def symbols(self) -> Tuple[str, ...]:
        return tuple(u.symbol for u in self.units)


@dataclass(frozen=True)
class CategoryGroup:
    """Named bundle of categories, used for browsing (e.g. "Common")."""

    name: str
    categories: Tuple[UnitCategory, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "categories", tuple(self.categories))


__all__ = [
    "UnitKind",
    "UnitDefinition",
    "LinearUnit",
    "InverseUnit",
    "TemperatureUnit",
    "UnitCategory",
    "CategoryGroup",
    "ConversionError",
    "IncompatibleUnitsError",
    "ZeroFactorError",
    "CatalogError",
]
