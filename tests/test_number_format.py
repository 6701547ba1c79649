"""
Tests for numeric text parsing and formatting.
"""

import math

import pytest

from scicalc import canonicalize, format_number, parse_operand
from scicalc.number_format import check_separator


class TestParseOperand:

    def test_locale_separator(self):
        assert parse_operand('12,5') == 12.5

    def test_constants(self):
        assert parse_operand('e') == math.e
        assert parse_operand('π') == math.pi

    @pytest.mark.parametrize('text', ['', ',', 'abc', '1,2,3', 'π5'])
    def test_unparseable_is_zero(self, text):
        assert parse_operand(text) == 0

    def test_displayed_infinity_parses_back(self):
        assert parse_operand('inf') == math.inf
        assert parse_operand('-inf') == -math.inf

    def test_other_separator(self):
        assert parse_operand('2.25', separator='.') == 2.25


class TestFormatNumber:

    def test_integral_value_has_no_fraction(self):
        assert format_number(5.0) == '5'

    def test_uses_locale_separator(self):
        assert format_number(12.5) == '12,5'
        assert format_number(12.5, separator='.') == '12.5'

    def test_float_noise_is_hidden(self):
        assert format_number(0.1 + 0.2) == '0,3'

    def test_large_and_small_values(self):
        assert format_number(1e20) == '1e+20'
        assert format_number(1.5e-7) == '1,5e-07'

    def test_non_finite(self):
        assert format_number(math.inf) == 'inf'
        assert format_number(-math.inf) == '-inf'
        assert format_number(math.nan) == 'nan'


class TestRoundTrip:

    @pytest.mark.parametrize('text', ['0', '7', '-7', '12,5', '3,14159', '1234567,89',
                                      '0,001', '999999999999999'])
    def test_canonical_text_round_trips(self, text):
        assert canonicalize(text) == text

    def test_canonicalize_normalizes(self):
        assert canonicalize('007,50') == '7,5'


class TestCheckSeparator:

    @pytest.mark.parametrize('separator', [',', ';', "'", '·'])
    def test_accepted(self, separator):
        assert check_separator(separator) == separator

    @pytest.mark.parametrize('separator', ['', ',,', '0', '-', '+', '.', '_', 'e', 'E',
                                           'i', 'n', 'f', 'a', 'N', 'y', 'π', ' '])
    def test_rejected(self, separator):
        with pytest.raises(ValueError):
            check_separator(separator)


class TestPrecisionLimit:

    def test_more_than_fifteen_digits_lose_precision_in_text(self):
        value = 1234567890123456.0
        text = format_number(value)
        assert text == '1,23456789012346e+15'
        assert parse_operand(text) == 1234567890123460.0
