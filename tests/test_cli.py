"""
Package Sorter — CLI Tests
============================

What:  Tests for parse_measurements() and main().
How:   main() takes argv and returns the exit code; output is read with capsys.
"""

import json

import pytest

from package_sorter.cli import InputFormatError, main, parse_measurements


class TestParseMeasurements:
    """Turning "w,h,l,m" into numbers."""

    def test_parses_four_values(self):
        assert parse_measurements("50,30,20,5000") == (50, 30, 20, 5000.0)

    def test_tolerates_whitespace(self):
        assert parse_measurements(" 50 , 30,20 ,  5000.5 ") == (50, 30, 20, 5000.5)

    @pytest.mark.parametrize("raw", ["", "   "])
    def test_empty_input(self, raw):
        with pytest.raises(InputFormatError, match="empty"):
            parse_measurements(raw)

    @pytest.mark.parametrize("raw", ["1,2,3", "1,2,3,4,5"])
    def test_wrong_field_count(self, raw):
        with pytest.raises(InputFormatError, match="exactly 4"):
            parse_measurements(raw)

    def test_fractional_dimension_is_a_format_error(self):
        with pytest.raises(InputFormatError, match="height"):
            parse_measurements("10,1.5,10,100")

    def test_non_numeric_mass(self):
        with pytest.raises(InputFormatError, match="mass"):
            parse_measurements("10,10,10,heavy")

    @pytest.mark.parametrize("raw, field", [
        ("1_000,30,20,5000", "width"),
        ("10,0x10,20,5000", "height"),
        ("10,30,٣,5000", "length"),
        ("10,30,20,5_000", "mass"),
        ("10,30,20,0x1p3", "mass"),
    ])
    def test_only_plain_decimal_literals_accepted(self, raw, field):
        with pytest.raises(InputFormatError, match=field):
            parse_measurements(raw)

    @pytest.mark.parametrize("mass, expected", [("1e3", 1000.0), (".5", 0.5), ("+7.", 7.0)])
    def test_mass_accepts_decimal_forms(self, mass, expected):
        assert parse_measurements(f"1,1,1,{mass}")[3] == expected

    def test_sign_is_left_for_the_validator(self):
        assert parse_measurements("10,-5,10,100") == (10, -5, 10, 100.0)


class TestMain:
    """Exit codes and output."""

    @pytest.mark.parametrize("raw, expected", [
        ("50,30,20,5000", "STANDARD"),
        ("150,30,20,5000", "SPECIAL"),
        ("100,100,100,15000", "SPECIAL"),
        ("50,30,20,25000", "SPECIAL"),
        ("150,30,20,25000", "REJECTED"),
    ])
    def test_prints_decision(self, capsys, raw, expected):
        assert main([raw]) == 0
        assert capsys.readouterr().out.strip() == expected

    def test_details_prints_json(self, capsys):
        assert main(["--details", "150,30,20,25000"]) == 0

        details = json.loads(capsys.readouterr().out)
        assert details["decision"] == "REJECTED"
        assert details["classification"] == ["BULKY", "HEAVY"]
        assert details["remarks"] == ["Dimension >= 150cm", "Mass >= 20000g"]
        assert details["volume"] == 90_000
        assert "timestamp" not in details

    def test_invalid_mass_exits_1_with_usage(self, capsys):
        assert main(["10,10,10,0"]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error: Invalid mass" in captured.err
        assert "usage:" in captured.err

    def test_invalid_dimension_exits_1(self, capsys):
        assert main(["10,-5,10,100"]) == 1
        assert "height" in capsys.readouterr().err

    def test_negative_leading_value_after_separator(self, capsys):
        assert main(["--", "-5,30,20,5000"]) == 1
        assert "width" in capsys.readouterr().err

    def test_malformed_input_exits_1(self, capsys):
        assert main(["10,10"]) == 1
        assert "exactly 4" in capsys.readouterr().err

    def test_digit_separator_exits_1(self, capsys):
        assert main(["1_000,30,20,5000"]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "width must be an integer" in captured.err

    def test_nan_mass_exits_1(self, capsys):
        assert main(["10,10,10,nan"]) == 1
        assert "Invalid mass" in capsys.readouterr().err

    def test_missing_argument_is_usage_error(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2

    def test_help_lists_rules(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])

        assert exc_info.value.code == 0
        out = capsys.readouterr().out
        assert "CLASSIFICATION RULES" in out
        assert "REJECTED" in out
