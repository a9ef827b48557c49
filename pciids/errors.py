#!/usr/bin/python
#
# Python pciids library
# Parse error taxonomy
#
# (c) 2025 Steven Noonan
# Licensed under the MIT license
#

from __future__ import annotations
from typing import Optional


class PciIdsError(ValueError):
    """Base class for every failure raised while parsing a pci.ids source."""

    def __init__(
        self, message: str, lineno: Optional[int] = None, line: Optional[str] = None
    ) -> None:
        self.message = message
        self.lineno = lineno
        self.line = line
        super().__init__(self._format())

    def _format(self) -> str:
        if self.lineno is None:
            return self.message
        if self.line is None:
            return f"line {self.lineno}: {self.message}"
        return f"line {self.lineno}: {self.message}: {self.line!r}"


class MalformedLineError(PciIdsError):
    """A non-comment line that does not have the expected shape."""


class InvalidIntegerError(PciIdsError):
    """An id field that is not valid hex for its expected width."""


class UnknownClassError(PciIdsError):
    """A class byte outside of the closed KnownClass enumeration."""
