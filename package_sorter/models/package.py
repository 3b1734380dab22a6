"""
Package Sorter — Package Value Objects
========================================

What:  Immutable Dimension and Package values plus the validating builder.
Why:   Every later step (classification, remarks, API rendering) may assume
       the package is valid, so validation happens exactly once, here.
How:   Frozen dataclasses validate in __post_init__; a failed check raises
       before the constructor returns, so no half-built value ever escapes.
       make_package() is the single entry point used by services and tests.

Units:
    Dimensions are whole centimetres, mass is grams.
"""

import math
from dataclasses import dataclass
from numbers import Real
from typing import Tuple

from package_sorter.exceptions import InvalidDimensionError, InvalidMassError


def _require_positive_int(name: str, value: int) -> int:
    # bool is an int subclass, but True is not a 1 cm box side
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidDimensionError(field=name, value=value)
    return value


def _require_positive_mass(value: float) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidMassError(value=value)
    try:
        mass = float(value)
    except (OverflowError, ValueError):
        # ints past ~1.8e308 have no float form
        raise InvalidMassError(value=value) from None
    if not math.isfinite(mass) or mass <= 0:
        raise InvalidMassError(value=value)
    return mass


@dataclass(frozen=True)
class Dimension:
    """Box size in centimetres."""

    width: int
    height: int
    length: int

    def __post_init__(self) -> None:
        _require_positive_int("width", self.width)
        _require_positive_int("height", self.height)
        _require_positive_int("length", self.length)

    @property
    def volume(self) -> int:
        """Cubic centimetres. Python ints do not overflow."""
        return self.width * self.height * self.length

    @property
    def sides(self) -> Tuple[int, int, int]:
        return self.width, self.height, self.length


@dataclass(frozen=True)
class Package:
    """A box and its mass in grams."""

    dimension: Dimension
    mass: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "mass", _require_positive_mass(self.mass))

    @property
    def volume(self) -> int:
        return self.dimension.volume


def make_package(width: int, height: int, length: int, mass: float) -> Package:
    """
    Validate raw inputs and build a Package.

    Raises:
        InvalidDimensionError: width, height or length is not a positive integer
        InvalidMassError: mass is not a positive finite number

    All four values are checked before anything is built; the first failing
    field (width, height, length, then mass) is the one reported.
    """
    _require_positive_int("width", width)
    _require_positive_int("height", height)
    _require_positive_int("length", length)
    _require_positive_mass(mass)
    return Package(Dimension(width=width, height=height, length=length), mass)
