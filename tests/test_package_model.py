"""
Package Sorter — Package Model Unit Tests
===========================================

What:  Tests for Dimension, Package and make_package().
Why:   Validation is the only place the system can fail; every later step
       assumes a valid package.

What we test:
    ✅ Valid construction and derived volume
    ✅ Non-positive and non-integer dimensions raise InvalidDimensionError
    ✅ Non-positive, NaN and infinite mass raise InvalidMassError
    ✅ Values are immutable
    ✅ Large sides do not overflow the volume
"""

import dataclasses
import math

import pytest

from package_sorter.exceptions import InvalidDimensionError, InvalidMassError, ValidationError
from package_sorter.models.package import Dimension, Package, make_package


class TestValidConstruction:
    """make_package() with good input."""

    def test_builds_package_with_given_attributes(self):
        pkg = make_package(10, 20, 30, 15.5)

        assert pkg.dimension == Dimension(width=10, height=20, length=30)
        assert pkg.mass == 15.5

    def test_integer_mass_is_stored_as_float(self):
        pkg = make_package(10, 10, 10, 5000)
        assert isinstance(pkg.mass, float)
        assert pkg.mass == 5000.0

    @pytest.mark.parametrize("mass", [0.1, 1.0, 10.5, 1000.0, 5e-324, 1.7976931348623157e308])
    def test_accepts_any_positive_finite_mass(self, mass):
        assert make_package(10, 10, 10, mass).mass == mass

    def test_volume_is_product_of_sides(self):
        pkg = make_package(2, 3, 4, 1.0)
        assert pkg.volume == 24
        assert pkg.dimension.volume == 24

    def test_volume_does_not_overflow_for_large_sides(self):
        """10,000 cm per side is 10^12 cm³, well past 32-bit range."""
        pkg = make_package(10_000, 10_000, 10_000, 1.0)
        assert pkg.volume == 1_000_000_000_000

    def test_sides_are_width_height_length(self):
        assert make_package(1, 2, 3, 1.0).dimension.sides == (1, 2, 3)

    def test_equal_inputs_give_equal_packages(self):
        assert make_package(5, 6, 7, 8.0) == make_package(5, 6, 7, 8.0)


class TestInvalidDimensions:
    """Each dimension must be a positive integer."""

    @pytest.mark.parametrize("field, args", [
        ("width", (0, 10, 10, 1.0)),
        ("height", (10, 0, 10, 1.0)),
        ("length", (10, 10, 0, 1.0)),
        ("width", (-1, 10, 10, 1.0)),
        ("height", (10, -50, 10, 1.0)),
        ("length", (10, 10, -2_147_483_648, 1.0)),
    ])
    def test_non_positive_dimension_rejected(self, field, args):
        with pytest.raises(InvalidDimensionError) as exc_info:
            make_package(*args)

        assert exc_info.value.field == field
        assert exc_info.value.context["field"] == field
        assert field in exc_info.value.message

    @pytest.mark.parametrize("value", [10.5, "10", None, True])
    def test_non_integer_dimension_rejected(self, value):
        with pytest.raises(InvalidDimensionError):
            make_package(value, 10, 10, 1.0)

    def test_first_failing_field_is_reported(self):
        with pytest.raises(InvalidDimensionError) as exc_info:
            make_package(10, -1, -1, -1.0)
        assert exc_info.value.field == "height"

    def test_dimension_checked_before_mass(self):
        with pytest.raises(InvalidDimensionError):
            make_package(0, 10, 10, 0.0)

    def test_direct_dimension_construction_validates(self):
        with pytest.raises(InvalidDimensionError):
            Dimension(width=10, height=10, length=0)

    def test_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            make_package(0, 1, 1, 1.0)


class TestInvalidMass:
    """Mass must be a positive finite number."""

    @pytest.mark.parametrize("mass", [0, 0.0, -0.0, -1.0, -5000])
    def test_non_positive_mass_rejected(self, mass):
        with pytest.raises(InvalidMassError) as exc_info:
            make_package(10, 10, 10, mass)
        assert exc_info.value.field == "mass"

    @pytest.mark.parametrize("mass", [math.nan, math.inf, -math.inf])
    def test_non_finite_mass_rejected(self, mass):
        with pytest.raises(InvalidMassError):
            make_package(10, 10, 10, mass)

    @pytest.mark.parametrize("mass", [10**400, -(10**400)])
    def test_integer_mass_beyond_float_range_rejected(self, mass):
        with pytest.raises(InvalidMassError) as exc_info:
            make_package(1, 1, 1, mass)
        assert exc_info.value.field == "mass"

    def test_non_finite_value_kept_json_safe_in_context(self):
        with pytest.raises(InvalidMassError) as exc_info:
            make_package(10, 10, 10, math.inf)
        assert exc_info.value.context["value"] == "inf"

    @pytest.mark.parametrize("mass", ["5000", None, True])
    def test_non_numeric_mass_rejected(self, mass):
        with pytest.raises(InvalidMassError):
            make_package(10, 10, 10, mass)

    def test_message_names_the_value(self):
        with pytest.raises(InvalidMassError, match="-3.5"):
            make_package(10, 10, 10, -3.5)

    def test_direct_package_construction_validates(self):
        with pytest.raises(InvalidMassError):
            Package(Dimension(10, 10, 10), 0.0)


class TestImmutability:
    """Dimension and Package are frozen values."""

    def test_dimension_is_frozen(self):
        dim = Dimension(1, 2, 3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            dim.width = 100

    def test_package_is_frozen(self, standard_package):
        with pytest.raises(dataclasses.FrozenInstanceError):
            standard_package.mass = 1.0

    def test_package_is_hashable(self, standard_package):
        assert standard_package in {standard_package}
