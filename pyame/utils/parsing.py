#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Fixed-column field extraction for AME2020 mass-table lines

All low-level text slicing and numeric conversion lives here so that the
record scanner in :mod:`pyame.readers.ame` only deals with line
classification.  Every function is stateless and raises one of the
per-line :class:`~pyame.exceptions.AMEError` kinds on failure.

AME2020 Fixed-Column Format
---------------------------
Columns are **byte** offsets into the UTF-8 encoded line, 0-indexed and
half-open:

* **4-9**      neutron number N
* **9-14**     proton number Z
* **20-23**    element symbol
* **28-42**    mass excess (keV), **42-54** its uncertainty
* **54-67**    binding energy per nucleon (keV), **68-78** its uncertainty
* **87-88**    ``*`` when the beta-decay energy is not applicable
* **81-94**    beta-decay energy (keV), **94-105** its uncertainty
* **106-109**  integer part of the atomic mass (u)
* **110-123**  fractional atomic mass (micro-u), **123-EOL** its uncertainty

A ``#`` in place of the decimal point marks an estimated (non-experimental)
value.  The file's own preamble documents the layout as a Fortran format
statement.

References
----------
.. [1] M. Wang et al., "The AME 2020 atomic mass evaluation (II)",
   Chinese Physics C 45, 030003 (2021).
"""

from __future__ import annotations

import logging
import re

from pyame.exceptions import (
    ParseFloatError,
    ParseIntError,
    StrIndexError,
    TooShortLineError,
)
from pyame.models.records import Nuclide, Value

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# AME2020 column layout constants
# ---------------------------------------------------------------------------

Columns = tuple[int, int]

N_COLUMNS: Columns = (4, 9)
Z_COLUMNS: Columns = (9, 14)
ELEMENT_COLUMNS: Columns = (20, 23)
MASS_EXCESS_COLUMNS: Columns = (28, 42)
MASS_EXCESS_UNC_COLUMNS: Columns = (42, 54)
BINDING_COLUMNS: Columns = (54, 67)
BINDING_UNC_COLUMNS: Columns = (68, 78)
BETA_FLAG_COLUMNS: Columns = (87, 88)
BETA_COLUMNS: Columns = (81, 94)
BETA_UNC_COLUMNS: Columns = (94, 105)
MASS_INT_COLUMNS: Columns = (106, 109)
MASS_FRAC_COLUMNS: Columns = (110, 123)

MASS_FRAC_UNC_START: int = 123
"""First column of the atomic-mass uncertainty, which runs to end of line."""

NOT_APPLICABLE: str = "*"
"""Marker in :data:`BETA_FLAG_COLUMNS` for an absent beta-decay energy."""

ESTIMATE_MARKER: str = "#"
"""Stands in for the decimal point of an estimated value."""

MICRO_U: float = 1e-6
"""Conversion factor from micro-u to u."""

WHITESPACE: str = (
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)
"""Characters trimmed from both ends of a column: the Unicode ``White_Space`` set.

Narrower than :meth:`str.strip`, which also drops the ASCII separators
``\\x1c`` to ``\\x1f``.
"""

U16_BITS: int = 16
U32_BITS: int = 32

_FLOAT_PATTERN: re.Pattern[str] = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|nan)",
    re.IGNORECASE | re.ASCII,
)
"""Accepted float literals: plain decimal/scientific notation or inf/nan.

Stricter than :func:`float`, which would also take underscores and
non-ASCII digits.
"""

_UINT_PATTERN: re.Pattern[str] = re.compile(r"\+?\d+", re.ASCII)


# ---------------------------------------------------------------------------
# Numeric conversion
# ---------------------------------------------------------------------------

def parse_float(text: str) -> float:
    """Convert a trimmed column string to a float

    Parameters
    ----------
    text : str
        Column contents with surrounding :data:`WHITESPACE` removed.

    Returns
    -------
    float

    Raises
    ------
    ParseFloatError
        If *text* is empty or not a float literal.

    Examples
    --------
    >>> parse_float("8071.31806")
    8071.31806
    >>> parse_float("-1e3")
    -1000.0
    """
    if _FLOAT_PATTERN.fullmatch(text) is None:
        raise ParseFloatError(text)
    return float(text)


def parse_uint(text: str, bits: int = U32_BITS) -> int:
    """Convert a trimmed column string to an unsigned integer

    Parameters
    ----------
    text : str
        Column contents with surrounding :data:`WHITESPACE` removed.
    bits : int, optional
        Width of the target integer; values above ``2**bits - 1`` are
        rejected.  Default 32.

    Returns
    -------
    int

    Raises
    ------
    ParseIntError
        If *text* is empty, contains anything but an optional ``+`` and
        ASCII digits, or overflows *bits*.

    Examples
    --------
    >>> parse_uint("12")
    12
    >>> parse_uint("70000", bits=16)  # doctest: +ELLIPSIS
    Traceback (most recent call last):
        ...
    pyame.exceptions.ParseIntError: ...
    """
    if not text:
        raise ParseIntError(text, "cannot parse integer from empty string")
    if _UINT_PATTERN.fullmatch(text) is None:
        raise ParseIntError(text, "invalid digit found in string")
    value = int(text)
    if value >= 1 << bits:
        raise ParseIntError(text, f"number too large to fit in {bits}-bit unsigned integer")
    return value


# ---------------------------------------------------------------------------
# Column extraction
# ---------------------------------------------------------------------------

def extract_column(line: bytes, start: int, stop: int) -> str:
    """Return the trimmed text of a half-open byte range of *line*

    Parameters
    ----------
    line : bytes
        UTF-8 encoded line, without its line terminator.
    start, stop : int
        Byte offsets of the column.

    Returns
    -------
    str
        Column contents with surrounding :data:`WHITESPACE` removed.

    Raises
    ------
    TooShortLineError
        If the line ends before *stop*.
    StrIndexError
        If *start* or *stop* falls inside a multi-byte character.

    Notes
    -----
    The line as a whole is valid UTF-8, so a slice of it fails to decode
    exactly when one of its boundaries splits a character.
    """
    if len(line) < stop:
        raise TooShortLineError(start, stop, len(line))
    try:
        return line[start:stop].decode("utf-8").strip(WHITESPACE)
    except UnicodeDecodeError as exc:
        raise StrIndexError(start, stop) from exc


def parse_value(line: bytes, mean_columns: Columns, unc_columns: Columns) -> Value:
    """Extract a mean / uncertainty pair from two columns

    Every ``#`` is read as a decimal point.  The value is flagged as
    estimated when the mean column contained one.

    Parameters
    ----------
    line : bytes
        UTF-8 encoded line.
    mean_columns, unc_columns : tuple[int, int]
        Half-open byte ranges of the mean and its uncertainty.

    Returns
    -------
    Value

    Raises
    ------
    TooShortLineError, StrIndexError
        From :func:`extract_column`.
    ParseFloatError
        If either column is not a float literal.

    Examples
    --------
    >>> parse_value(b"  12#5  0.3", (0, 6), (6, 11))
    Value(mean=12.5, uncertainty=0.3, is_estimated=True)
    """
    raw_mean = extract_column(line, *mean_columns)
    mean = parse_float(raw_mean.replace(ESTIMATE_MARKER, "."))
    raw_unc = extract_column(line, *unc_columns)
    uncertainty = parse_float(raw_unc.replace(ESTIMATE_MARKER, "."))
    return Value(
        mean=mean,
        uncertainty=uncertainty,
        is_estimated=ESTIMATE_MARKER in raw_mean,
    )


def encode_line(line: str | bytes) -> bytes:
    """Return *line* as UTF-8 bytes without its line terminator

    Lone surrogates (from ``surrogateescape`` decoding upstream) are kept
    so that the columns they touch fail with :class:`StrIndexError`
    instead of an encoding exception.
    """
    if isinstance(line, str):
        line = line.encode("utf-8", "surrogatepass")
    if line.endswith(b"\n"):
        line = line[:-1]
        if line.endswith(b"\r"):
            line = line[:-1]
    return line


# ---------------------------------------------------------------------------
# Record assembly
# ---------------------------------------------------------------------------

def parse_nuclide(line: str | bytes) -> Nuclide:
    """Build a :class:`~pyame.models.records.Nuclide` from one data line

    Fields are extracted in column order; the first failure is raised and
    the rest of the line is not examined.

    Parameters
    ----------
    line : str | bytes
        One body line of a ``mass.mas20`` file.  ``bytes`` must be UTF-8.

    Returns
    -------
    Nuclide

    Raises
    ------
    TooShortLineError, StrIndexError, ParseIntError, ParseFloatError
        When a column is missing or malformed.

    Notes
    -----
    The atomic mass is printed as an integer part (columns 106-109) and
    a fractional part in micro-u with its own uncertainty (columns 110 to
    end of line).  The fractional pair is rescaled to u and the integer
    part added to the mean; only the fractional mean can carry ``#``.

    Examples
    --------
    >>> nuc = parse_nuclide(neutron_line)
    >>> round(nuc.atomic_mass.mean, 9)
    1.00866491
    """
    raw = encode_line(line)

    n = parse_uint(extract_column(raw, *N_COLUMNS))
    z = parse_uint(extract_column(raw, *Z_COLUMNS))
    element = extract_column(raw, *ELEMENT_COLUMNS)
    mass_excess = parse_value(raw, MASS_EXCESS_COLUMNS, MASS_EXCESS_UNC_COLUMNS)
    binding = parse_value(raw, BINDING_COLUMNS, BINDING_UNC_COLUMNS)

    beta_decay_energy: Value | None = None
    if extract_column(raw, *BETA_FLAG_COLUMNS) != NOT_APPLICABLE:
        beta_decay_energy = parse_value(raw, BETA_COLUMNS, BETA_UNC_COLUMNS)

    # The uncertainty has no fixed right edge; lines differ in length.
    frac = parse_value(raw, MASS_FRAC_COLUMNS, (MASS_FRAC_UNC_START, len(raw)))
    mass_int = parse_uint(extract_column(raw, *MASS_INT_COLUMNS), bits=U16_BITS)
    atomic_mass = Value(
        mean=mass_int + frac.mean * MICRO_U,
        uncertainty=frac.uncertainty * MICRO_U,
        is_estimated=frac.is_estimated,
    )

    return Nuclide(
        n=n,
        z=z,
        element=element,
        mass_excess=mass_excess,
        binding_energy_per_nucleon=binding,
        beta_decay_energy=beta_decay_energy,
        atomic_mass=atomic_mass,
    )
