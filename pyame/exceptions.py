#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Custom exception hierarchy for the PyAME package

All exceptions defined by PyAME inherit from :class:`PyAMEError`, making it
possible to catch every library-specific error with a single ``except`` clause
while still allowing fine-grained handling when needed.

The five per-line kinds under :class:`AMEError` form a closed set.  The
record scanner does **not** raise them: it hands them back as items of the
produced sequence, one per failing line, so that callers can decide whether
to abort or skip.

Exception Hierarchy
-------------------
::

    PyAMEError
    ├── AMEError                # Per-line read/parse failure (returned)
    │   ├── IoError             # Read or decode failure of the source
    │   ├── ParseIntError       # Malformed integer column
    │   ├── ParseFloatError     # Malformed float column
    │   ├── TooShortLineError   # Line shorter than a column range
    │   └── StrIndexError       # Column range splits a multi-byte character
    ├── FileFormatError         # Input path missing or not a file
    ├── SerializationError      # Malformed dict / JSON input
    ├── ConversionError         # HDF5 write failures
    └── DownloadError           # Network errors
"""

from __future__ import annotations

import errno
import io
from enum import Enum


class PyAMEError(Exception):
    """Base exception for all PyAME errors

    Every exception defined by PyAME is a subclass of this type.
    Catching ``PyAMEError`` therefore catches any library-specific failure
    while still allowing standard Python exceptions (``KeyError``,
    ``TypeError``, etc.) to propagate normally.
    """


# ---------------------------------------------------------------------------
# Per-line errors
# ---------------------------------------------------------------------------

class AMEError(PyAMEError):
    """A reading or parsing failure for a single line of a mass table

    Attributes
    ----------
    line_number : int | None
        1-based number of the offending line in the source.  Assigned by
        :class:`~pyame.readers.ame.NuclideIter`; ``None`` when the error
        was raised by a field helper called directly.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.line_number: int | None = None

    def __str__(self) -> str:
        msg = super().__str__()
        if self.line_number is not None:
            return f"line {self.line_number}: {msg}"
        return msg


class IoErrorKind(str, Enum):
    """Classification of an :class:`IoError`"""

    INVALID_DATA = "invalid data"
    NOT_FOUND = "not found"
    PERMISSION_DENIED = "permission denied"
    IS_A_DIRECTORY = "is a directory"
    UNSUPPORTED = "unsupported"
    INTERRUPTED = "interrupted"
    OTHER = "other"

    @classmethod
    def from_exception(cls, exc: BaseException) -> "IoErrorKind":
        """Map a decode or OS-level exception onto a kind

        ``UnicodeError`` maps to :attr:`INVALID_DATA`.  ``OSError`` maps
        through its subclass first and its ``errno`` second.  Anything
        else, such as the ``ValueError`` of a closed stream, is
        :attr:`OTHER`.
        """
        if isinstance(exc, UnicodeError):
            return cls.INVALID_DATA
        if isinstance(exc, io.UnsupportedOperation):
            return cls.UNSUPPORTED
        if isinstance(exc, FileNotFoundError):
            return cls.NOT_FOUND
        if isinstance(exc, PermissionError):
            return cls.PERMISSION_DENIED
        if isinstance(exc, IsADirectoryError):
            return cls.IS_A_DIRECTORY
        if isinstance(exc, InterruptedError):
            return cls.INTERRUPTED
        if isinstance(exc, OSError) and exc.errno == errno.EILSEQ:
            return cls.INVALID_DATA
        return cls.OTHER


class IoError(AMEError):
    """The line source failed to produce a line

    Parameters
    ----------
    kind : IoErrorKind
        Classification of the failure.  Decode errors are always
        :attr:`IoErrorKind.INVALID_DATA`.
    detail : str, optional
        Message of the underlying exception.
    """

    def __init__(self, kind: IoErrorKind, detail: str = "") -> None:
        msg = f"read error ({kind.value})"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)
        self.kind = kind
        self.detail = detail

    @classmethod
    def from_exception(cls, exc: BaseException) -> "IoError":
        """Build an ``IoError`` from a decode or OS-level exception"""
        err = cls(IoErrorKind.from_exception(exc), str(exc))
        err.__cause__ = exc
        return err


class ParseIntError(AMEError):
    """A column expected to hold an unsigned integer failed to parse

    Parameters
    ----------
    text : str
        The trimmed column text that could not be parsed.
    reason : str
        Why it failed (``"invalid digit"``, ``"empty"``, ``"overflow"``).
    """

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"int parsing error: {reason} in {text!r}")
        self.text = text
        self.reason = reason


class ParseFloatError(AMEError):
    """A column expected to hold a float failed to parse

    Parameters
    ----------
    text : str
        The column text (after ``#`` substitution) that could not be parsed.
    """

    def __init__(self, text: str) -> None:
        super().__init__(f"float parsing error: invalid float literal {text!r}")
        self.text = text


class TooShortLineError(AMEError):
    """A data line ends before a required column range

    Parameters
    ----------
    start, stop : int
        The requested half-open byte range.
    length : int
        Actual byte length of the line.
    """

    def __init__(self, start: int, stop: int, length: int) -> None:
        super().__init__(
            f"line too short: columns {start}-{stop} requested, "
            f"line has {length} bytes"
        )
        self.start = start
        self.stop = stop
        self.length = length


class StrIndexError(AMEError):
    """A column boundary falls inside a multi-byte character

    Parameters
    ----------
    start, stop : int
        The requested half-open byte range.
    """

    def __init__(self, start: int, stop: int) -> None:
        super().__init__(
            f"string indexing error: columns {start}-{stop} split a "
            "multi-byte character"
        )
        self.start = start
        self.stop = stop


# ---------------------------------------------------------------------------
# Package-level errors
# ---------------------------------------------------------------------------

class FileFormatError(PyAMEError):
    """Raised when an input path cannot be read as a mass table

    This is raised *before* scanning begins, for example when the path
    does not exist or names a directory.
    """


class SerializationError(PyAMEError):
    """Raised when dict or JSON input does not describe valid nuclides

    Covers malformed JSON, missing required keys, and values of the wrong
    type or range (e.g. a negative neutron count or an element symbol
    longer than three characters).
    """


class ConversionError(PyAMEError):
    """Raised when HDF5 export fails

    This covers any error during HDF5 file creation: permission denied,
    disk full, or an output file that already exists while
    ``overwrite=False``.
    """


class DownloadError(PyAMEError):
    """Raised when fetching the mass table from the AMDC fails

    Covers HTTP errors, connection timeouts, and local write failures.
    """
