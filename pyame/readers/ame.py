#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
AME2020 (Atomic Mass Evaluation 2020) mass-table reader

Scans a ``mass.mas20`` file line by line and yields one
:class:`~pyame.models.records.Nuclide` per data line.  Field extraction is
delegated to :mod:`pyame.utils.parsing`.

File Structure
--------------
A ``mass.mas20`` file is divided into zones by the Fortran carriage-control
character in its first column::

    ...            anything before the first page feed is ignored
    1 ...          page feed, start of the preamble
    ...            preamble (format description, references)
    1 ...          page feed, start of the column headers
    ...            header lines
    0 ...          first data line
    ...            data lines, whatever their first character

Only the *second* page feed matters; any number of them may appear in the
preamble.  Once the first data line has been seen, every following line is
treated as data.

Error Model
-----------
Per-line failures are **returned**, not raised: the iterator produces a
:class:`~pyame.exceptions.AMEError` item for that line and carries on with
the next one on the following call.  The scanner does not try to
resynchronise after a corrupt line, so records produced after an error are
not guaranteed to be meaningful.

The legacy rounded table (``rmass.mas20``) and AME2016-and-earlier files
use different columns and are not supported.

References
----------
.. [1] IAEA Atomic Mass Data Center, https://www-nds.iaea.org/amdc/
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from enum import Enum
from pathlib import Path

from pyame.exceptions import AMEError, FileFormatError, IoError
from pyame.models.records import Nuclide
from pyame.readers.base import BaseReader
from pyame.utils.parsing import encode_line, parse_nuclide

logger = logging.getLogger(__name__)

PAGE_FEED: str = "1"
"""First character of a line that starts a new page (zone boundary)."""

LINE_FEED: str = "0"
"""First character of the first data line."""


class ReadState(Enum):
    """Zone of the file the scanner is currently in

    States only ever advance, in declaration order.
    """

    START = "start"
    PREAMBLE = "preamble"
    HEADERS = "headers"
    BODY = "body"


class NuclideIter:
    """Lazy iterator over the data lines of an AME2020 mass table

    Each call to :func:`next` pulls lines from *source* until one of them
    is a data line, then returns the parsed
    :class:`~pyame.models.records.Nuclide` or the
    :class:`~pyame.exceptions.AMEError` describing why that line could not
    be read.  :exc:`StopIteration` is raised once *source* is exhausted; a
    file that ends before its first data line therefore yields nothing.

    Parameters
    ----------
    source : Iterable[str | bytes]
        Any line iterable: a binary file (lines are decoded as strict
        UTF-8), a text file, or a list of strings.  Text files are read
        through their binary ``buffer`` so that an undecodable byte only
        affects its own line.  The iterator takes ownership of *source*;
        nothing else should read from it concurrently.

    Attributes
    ----------
    state : ReadState
        Zone of the last line read.
    line_number : int
        Number of lines pulled from *source* so far.

    Notes
    -----
    Failing lines do not stop the iteration, but the scanner does not
    resynchronise either: after a :class:`TooShortLineError` or
    :class:`StrIndexError` caused by a damaged file, the following items
    may be garbage.  Collect with :func:`read_nuclides` to stop at the
    first error instead.

    A source that fails to produce a line at all (closed, write-only, or
    an OS-level read error) ends the iteration after its
    :class:`~pyame.exceptions.IoError` item.  Lines that merely fail to
    decode do not.

    The iterator is single-use.  Build a new one over a fresh (or
    rewound) source to parse again.

    Examples
    --------
    >>> with open("mass.mas20", "rb") as fh:
    ...     for item in NuclideIter(fh):
    ...         if isinstance(item, AMEError):
    ...             continue
    ...         print(item.element, item.a)
    """

    def __init__(self, source: Iterable[str | bytes]) -> None:
        self._lines = self._pull(source)
        self._failed = False
        self.state = ReadState.START
        self.line_number = 0

    @staticmethod
    def _pull(source: Iterable[str | bytes]) -> Iterator[str | bytes]:
        # opening the iteration lazily keeps a closed source's error on the first pull
        yield from getattr(source, "buffer", source)

    def __iter__(self) -> NuclideIter:
        return self

    def __next__(self) -> Nuclide | AMEError:
        if self._failed:
            raise StopIteration
        while True:
            try:
                raw = next(self._lines)
            except UnicodeError as exc:
                self.line_number += 1
                return self._fail(IoError.from_exception(exc))
            except (OSError, ValueError) as exc:
                # closed or unreadable source; retrying would fail the same way
                self.line_number += 1
                self._failed = True
                return self._fail(IoError.from_exception(exc))
            self.line_number += 1

            try:
                line = self._decode(raw)
            except UnicodeDecodeError as exc:
                return self._fail(IoError.from_exception(exc))

            if not self._advance(line):
                continue
            try:
                return parse_nuclide(line)
            except AMEError as exc:
                return self._fail(exc)

    @staticmethod
    def _decode(raw: str | bytes) -> str:
        if isinstance(raw, bytes):
            return encode_line(raw).decode("utf-8")
        if raw.endswith("\n"):
            raw = raw[:-1]
        return raw.removesuffix("\r")

    def _advance(self, line: str) -> bool:
        """Update :attr:`state` for *line*; return whether it is a data line."""
        if self.state is ReadState.START:
            if line.startswith(PAGE_FEED):
                self._enter(ReadState.PREAMBLE)
            return False
        if self.state is ReadState.PREAMBLE:
            if line.startswith(PAGE_FEED):
                self._enter(ReadState.HEADERS)
            return False
        if self.state is ReadState.HEADERS:
            if line.startswith(LINE_FEED):
                self._enter(ReadState.BODY)
                return True
            return False
        return True

    def _enter(self, state: ReadState) -> None:
        logger.debug("line %d: %s -> %s", self.line_number, self.state.value, state.value)
        self.state = state

    def _fail(self, exc: AMEError) -> AMEError:
        exc.line_number = self.line_number
        logger.debug("%s", exc)
        return exc


def read_nuclides(
    source: Iterable[str | bytes],
    *,
    strict: bool = True,
) -> list[Nuclide]:
    """Collect every nuclide of a line source into a list

    Parameters
    ----------
    source : Iterable[str | bytes]
        Line source, as accepted by :class:`NuclideIter`.
    strict : bool, optional
        If ``True`` (default), raise the first per-line error.  If
        ``False``, log it as a warning and skip the line.

    Returns
    -------
    list[Nuclide]
        Nuclides in source order.

    Raises
    ------
    AMEError
        When *strict* and a line fails to read or parse.
    """
    nuclides: list[Nuclide] = []
    for item in NuclideIter(source):
        if isinstance(item, AMEError):
            if strict:
                raise item
            logger.warning("Skipping unreadable line: %s", item)
            continue
        nuclides.append(item)
    return nuclides


def _check_path(path: Path | str) -> Path:
    filepath = Path(path)
    if not filepath.is_file():
        raise FileFormatError(f"Mass table not found or not a file: {filepath}")
    return filepath


class AMEReader(BaseReader):
    """Reader for ``mass.mas20`` files on disk

    Files are opened in binary mode so that undecodable bytes surface as
    :class:`~pyame.exceptions.IoError` items on the line that holds them.

    Examples
    --------
    >>> reader = AMEReader()
    >>> nuclides = reader.read("mass.mas20")
    >>> nuclides[0].element
    'n'
    """

    def read(self, path: Path | str, *, strict: bool = True) -> list[Nuclide]:
        """Parse an AME2020 file and return its nuclides

        Parameters
        ----------
        path : Path | str
            Path to the mass table.
        strict : bool, optional
            Raise on the first per-line error (default) instead of
            skipping failing lines.

        Returns
        -------
        list[Nuclide]

        Raises
        ------
        FileFormatError
            If *path* is missing or not a regular file.
        AMEError
            When *strict* and a line fails to read or parse.
        """
        filepath = _check_path(path)
        logger.debug("Opening AME2020 file: %s", filepath)
        with filepath.open("rb") as fh:
            nuclides = read_nuclides(fh, strict=strict)
        logger.debug("Parsed %d nuclides from %s", len(nuclides), filepath)
        return nuclides

    def iter(self, path: Path | str) -> Iterator[Nuclide | AMEError]:
        """Stream the items of an AME2020 file

        The file is closed when the returned generator is exhausted or
        closed.

        Raises
        ------
        FileFormatError
            Immediately, if *path* is missing or not a regular file.
        """
        return self._iter_file(_check_path(path))

    @staticmethod
    def _iter_file(filepath: Path) -> Iterator[Nuclide | AMEError]:
        with filepath.open("rb") as fh:
            yield from NuclideIter(fh)
