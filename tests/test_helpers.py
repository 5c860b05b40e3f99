"""Tests for numeric coercion and WKT number formatting."""

from __future__ import annotations

import logging
import math
from fractions import Fraction

import numpy
import pytest

from autogis import helpers
from autogis.error import GeometryError, InvalidCoordinates

# ---------------------------------------------------------------------------
# to_float
# ---------------------------------------------------------------------------

class TestToFloat:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (1, 1.0),
            (-7, -7.0),
            (0.25, 0.25),
            (Fraction(1, 2), 0.5),
            (numpy.int64(3), 3.0),
            (numpy.float32(1.5), 1.5),
            (2**53, 9007199254740992.0),
        ],
    )
    def test_accepts_exact_real_numbers(self, value, expected):
        result = helpers.to_float(value)
        assert type(result) is float
        assert result == expected

    def test_nan_and_infinity_pass_through(self):
        assert math.isnan(helpers.to_float(float("nan")))
        assert helpers.to_float(float("inf")) == math.inf
        assert helpers.to_float(-math.inf) == -math.inf

    @pytest.mark.parametrize("value", ["1", None, True, False, 1 + 2j, [1]])
    def test_rejects_non_real_input(self, value):
        with pytest.raises(InvalidCoordinates) as exc_info:
            helpers.to_float(value)
        assert exc_info.value.value is value

    def test_rejects_integer_too_large_for_double(self):
        with pytest.raises(InvalidCoordinates):
            helpers.to_float(10**400)

    @pytest.mark.parametrize("value", [2**53 + 1, numpy.int64(2**53 + 1), Fraction(1, 3)])
    def test_rejects_values_a_double_cannot_hold_exactly(self, value):
        with pytest.raises(InvalidCoordinates):
            helpers.to_float(value)

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            helpers.to_float("x")
        assert issubclass(InvalidCoordinates, GeometryError)

    def test_rejection_is_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="autogis.helpers"):
            with pytest.raises(InvalidCoordinates):
                helpers.to_float("abc")
        assert any("abc" in r.getMessage() for r in caplog.records)


# ---------------------------------------------------------------------------
# float_coordinates
# ---------------------------------------------------------------------------

class TestFloatCoordinates:
    def test_mixed_input_becomes_float_array(self):
        result = helpers.float_coordinates([[0, 1], (2.5, numpy.int32(3))])
        assert result.dtype == numpy.float64
        assert result.shape == (2, 2)
        assert result.tolist() == [[0.0, 1.0], [2.5, 3.0]]

    def test_result_is_read_only(self):
        result = helpers.float_coordinates([[0, 1]])
        with pytest.raises(ValueError):
            result[0, 0] = 5

    def test_input_array_is_copied(self):
        source = numpy.array([[0.0, 1.0], [2.0, 3.0]])
        result = helpers.float_coordinates(source)
        source[0, 0] = 99.0
        assert result[0, 0] == 0.0

    def test_empty_input_gives_empty_pairs(self):
        assert helpers.float_coordinates([]).shape == (0, 2)

    @pytest.mark.parametrize("coordinates", [[[0, 1, 2]], [[0]], [5], [[0, "y"]]])
    def test_malformed_pairs_raise(self, coordinates):
        with pytest.raises(InvalidCoordinates):
            helpers.float_coordinates(coordinates)


# ---------------------------------------------------------------------------
# WKT formatting
# ---------------------------------------------------------------------------

class TestFormatting:
    @pytest.mark.parametrize(
        "value, text",
        [
            (0.0, "0"),
            (1.0, "1"),
            (-2.0, "-2"),
            (0.5, "0.5"),
            (-1.25, "-1.25"),
            (1e-7, "0.0000001"),
            (1e20, "100000000000000000000"),
            (0.1 + 0.2, "0.30000000000000004"),
        ],
    )
    def test_format_number(self, value, text):
        assert helpers.format_number(value) == text

    def test_format_coordinates(self):
        coordinates = helpers.float_coordinates([[0, 0], [1.5, -2]])
        assert helpers.format_coordinates(coordinates) == "0 0, 1.5 -2"
