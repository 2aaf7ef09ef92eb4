#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tests for the fixed-column field extractor

Covers numeric conversion, column slicing on multi-byte lines, paired
values with the ``#`` estimate marker, and full record assembly.
"""

from __future__ import annotations

import math

import pytest

from pyame.exceptions import (
    ParseFloatError,
    ParseIntError,
    StrIndexError,
    TooShortLineError,
)
from pyame.models.records import Value
from pyame.utils.parsing import (
    encode_line,
    extract_column,
    parse_float,
    parse_nuclide,
    parse_uint,
    parse_value,
)

from conftest import HYDROGEN_LINE, LITHIUM3_LINE, NEUTRON_LINE, make_line


class TestParseFloat:
    """Tests for float column conversion"""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("8071.31806", 8071.31806),
            ("-2267.", -2267.0),
            (".5", 0.5),
            ("+1e3", 1000.0),
            ("2.5E-2", 0.025),
        ],
    )
    def test_valid(self, text: str, expected: float) -> None:
        assert parse_float(text) == pytest.approx(expected)

    def test_special_values(self) -> None:
        assert math.isinf(parse_float("inf"))
        assert math.isinf(parse_float("-Infinity"))
        assert math.isnan(parse_float("NaN"))

    @pytest.mark.parametrize("text", ["", ".", "1_000", "1.2.3", "8071a", "#", "e5", "١٢"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ParseFloatError) as info:
            parse_float(text)
        assert info.value.text == text


class TestParseUint:
    """Tests for unsigned integer column conversion"""

    def test_valid(self) -> None:
        assert parse_uint("118") == 118
        assert parse_uint("+7") == 7
        assert parse_uint("007") == 7

    @pytest.mark.parametrize("text", ["", "-1", "1.0", "1_0", "x", "٣"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ParseIntError) as info:
            parse_uint(text)
        assert info.value.text == text

    def test_u16_overflow(self) -> None:
        assert parse_uint("65535", bits=16) == 65535
        with pytest.raises(ParseIntError):
            parse_uint("65536", bits=16)

    def test_u32_overflow(self) -> None:
        assert parse_uint(str(2**32 - 1)) == 2**32 - 1
        with pytest.raises(ParseIntError):
            parse_uint(str(2**32))


class TestExtractColumn:
    """Tests for byte-range column slicing"""

    def test_trims_whitespace(self) -> None:
        assert extract_column(b"ab  12  cd", 2, 8) == "12"

    def test_trims_unicode_whitespace(self) -> None:
        line = "\t12\u3000\xa0".encode("utf-8")
        assert extract_column(line, 0, len(line)) == "12"

    def test_keeps_ascii_separators(self) -> None:
        assert extract_column(b" \x1f12 ", 0, 5) == "\x1f12"
        with pytest.raises(ParseIntError):
            parse_uint(extract_column(b" \x1f12 ", 0, 5))

    def test_exact_length_is_enough(self) -> None:
        assert extract_column(b"abc", 0, 3) == "abc"

    def test_too_short(self) -> None:
        with pytest.raises(TooShortLineError) as info:
            extract_column(b"abc", 1, 4)
        assert (info.value.start, info.value.stop, info.value.length) == (1, 4, 3)

    def test_boundary_inside_character(self) -> None:
        line = "aé b".encode("utf-8")  # é occupies bytes 1-2
        with pytest.raises(StrIndexError):
            extract_column(line, 0, 2)
        with pytest.raises(StrIndexError):
            extract_column(line, 2, 4)

    def test_character_inside_range(self) -> None:
        line = "aé b".encode("utf-8")
        assert extract_column(line, 0, 3) == "aé"


class TestEncodeLine:
    """Tests for line-terminator handling"""

    def test_strips_terminators(self) -> None:
        assert encode_line("abc\n") == b"abc"
        assert encode_line(b"abc\r\n") == b"abc"
        assert encode_line(b"abc") == b"abc"

    def test_keeps_inner_carriage_return(self) -> None:
        assert encode_line("a\rb") == b"a\rb"


class TestParseValue:
    """Tests for mean / uncertainty pairs"""

    def test_measured(self) -> None:
        value = parse_value(b"   12.5   0.3", (0, 7), (7, 13))
        assert value == Value(12.5, 0.3, is_estimated=False)

    def test_estimated(self) -> None:
        value = parse_value(b"   12#5   0.3", (0, 7), (7, 13))
        assert value.mean == pytest.approx(12.5)
        assert value.is_estimated

    def test_marker_in_uncertainty_only(self) -> None:
        value = parse_value(b"   12.5   30#", (0, 7), (7, 13))
        assert value.uncertainty == pytest.approx(30.0)
        assert not value.is_estimated

    def test_bad_mean(self) -> None:
        with pytest.raises(ParseFloatError) as info:
            parse_value(b"   1x.5   0.3", (0, 7), (7, 13))
        assert info.value.text == "1x.5"

    def test_bad_mean_reported_before_short_uncertainty(self) -> None:
        with pytest.raises(ParseFloatError):
            parse_value(b"   1x.5", (0, 7), (7, 13))


class TestParseNuclide:
    """Tests for full record assembly"""

    def test_neutron(self) -> None:
        nuc = parse_nuclide(NEUTRON_LINE)
        assert nuc.n == 1
        assert nuc.z == 0
        assert nuc.element == "n"
        assert nuc.mass_excess.mean == pytest.approx(8071.31806)
        assert nuc.mass_excess.uncertainty == pytest.approx(0.00044)
        assert not nuc.mass_excess.is_estimated
        assert nuc.binding_energy_per_nucleon == Value(0.0, 0.0)
        assert nuc.beta_decay_energy is not None
        assert nuc.beta_decay_energy.mean == pytest.approx(782.347)
        assert nuc.beta_decay_energy.uncertainty == pytest.approx(0.0004)

    def test_atomic_mass_reconstruction(self) -> None:
        nuc = parse_nuclide(NEUTRON_LINE)
        assert nuc.atomic_mass.mean == pytest.approx(1.0 + 8664.91590e-6, rel=1e-15)
        assert nuc.atomic_mass.uncertainty == pytest.approx(0.00047e-6)
        assert not nuc.atomic_mass.is_estimated

    def test_builder_matches_literal(self) -> None:
        assert parse_nuclide(make_line()) == parse_nuclide(NEUTRON_LINE)

    def test_bytes_input(self) -> None:
        assert parse_nuclide(NEUTRON_LINE.encode() + b"\r\n") == parse_nuclide(NEUTRON_LINE)

    def test_beta_decay_not_applicable(self) -> None:
        nuc = parse_nuclide(HYDROGEN_LINE)
        assert nuc.beta_decay_energy is None
        assert nuc.element == "H"
        assert nuc.atomic_mass.mean == pytest.approx(1.007825031898)

    def test_estimated_values(self) -> None:
        nuc = parse_nuclide(LITHIUM3_LINE)
        assert nuc.mass_excess == Value(28670.0, 2000.0, is_estimated=True)
        assert nuc.binding_energy_per_nucleon.is_estimated
        assert nuc.atomic_mass.is_estimated
        assert nuc.atomic_mass.mean == pytest.approx(3.03078)
        assert nuc.atomic_mass.uncertainty == pytest.approx(2147e-6)

    def test_only_fractional_mean_marks_atomic_mass(self) -> None:
        nuc = parse_nuclide(make_line(mass_frac=("008664.91590", "0#5")))
        assert not nuc.atomic_mass.is_estimated
        assert nuc.atomic_mass.uncertainty == pytest.approx(0.5e-6)

    def test_mass_number(self) -> None:
        assert parse_nuclide(make_line(n="30", z="26", element="Fe")).a == 56

    @pytest.mark.parametrize(
        "fields, text",
        [
            ({"n": "1a"}, "1a"),
            ({"z": "-1"}, "-1"),
            ({"mass_int": "x"}, "x"),
        ],
    )
    def test_int_columns(self, fields: dict, text: str) -> None:
        with pytest.raises(ParseIntError) as info:
            parse_nuclide(make_line(**fields))
        assert info.value.text == text

    @pytest.mark.parametrize(
        "fields, text",
        [
            ({"mass_excess": ("80a1.3", "0.1")}, "80a1.3"),
            ({"mass_excess": ("8071.3", "0.x")}, "0.x"),
            ({"binding": ("?", "0.0")}, "?"),
            ({"beta": ("782.3470", "")}, ""),
            ({"mass_frac": ("0086x4.9", "0.1")}, "0086x4.9"),
        ],
    )
    def test_float_columns(self, fields: dict, text: str) -> None:
        with pytest.raises(ParseFloatError) as info:
            parse_nuclide(make_line(**fields))
        assert info.value.text == text

    def test_too_short(self) -> None:
        with pytest.raises(TooShortLineError):
            parse_nuclide(NEUTRON_LINE[:100])

    def test_missing_atomic_mass_uncertainty(self) -> None:
        with pytest.raises(ParseFloatError):
            parse_nuclide(NEUTRON_LINE[:123])

    def test_multibyte_straddles_column(self) -> None:
        line = NEUTRON_LINE[:8] + "é" + NEUTRON_LINE[9:]
        with pytest.raises(StrIndexError):
            parse_nuclide(line)

    def test_multibyte_inside_column(self) -> None:
        # two ASCII spaces replaced by one two-byte character: offsets unchanged
        line = NEUTRON_LINE[:29] + "é" + NEUTRON_LINE[31:]
        with pytest.raises(ParseFloatError) as info:
            parse_nuclide(line)
        assert info.value.text == "é8071.31806"
