#!/usr/bin/python
#
# Python pciids library
# Line classifier for the plaintext pci.ids format
#
# (c) 2025 Steven Noonan
# Licensed under the MIT license
#
# Line shapes, one per line:
#
#   vvvv  vendor name
#   \tdddd  device name
#   \t\tssss dddd  subsystem name
#   C cc  class name
#   \tss  subclass name
#   \t\tpp  programming interface name
#

from __future__ import annotations
import enum
from typing import NamedTuple, Optional

from .errors import MalformedLineError

MAX_DEPTH = 2
FIELD_SEPARATOR = "  "
CLASS_PREFIX = "C "


class Section(enum.Enum):
    VENDOR = "vendor"
    CLASS = "class"


class ClassifiedLine(NamedTuple):
    section: Section
    depth: int
    id_field: str
    name: str


def is_ignorable(line: str) -> bool:
    """Comments and blank lines never reach the classifier."""
    return line.startswith("#") or not line.rstrip()


def starts_class_section(body: str) -> bool:
    return body.lstrip().startswith(CLASS_PREFIX)


def classify_line(
    line: str,
    lineno: Optional[int] = None,
    in_class_section: bool = False,
    strict: bool = False,
) -> ClassifiedLine:
    """
    Split one non-comment line into (section, depth, id field, name).

    Depth is the number of leading tabs, capped at MAX_DEPTH unless `strict`
    is set, in which case deeper lines are rejected. Once `in_class_section`
    is true every line is a class-section line.
    """
    line = line.rstrip("\r\n")
    body = line.lstrip("\t")
    tabs = len(line) - len(body)
    if tabs > MAX_DEPTH and strict:
        raise MalformedLineError(
            f"indentation deeper than {MAX_DEPTH} tabs", lineno, line
        )
    depth = min(tabs, MAX_DEPTH)

    if in_class_section or starts_class_section(body):
        section = Section.CLASS
    else:
        section = Section.VENDOR

    id_field, sep, name = body.partition(FIELD_SEPARATOR)
    if not sep:
        raise MalformedLineError("missing double-space separator", lineno, line)

    id_field = id_field.strip()
    if section is Section.CLASS and depth == 0:
        if not id_field.startswith(CLASS_PREFIX):
            raise MalformedLineError("expected a 'C' class line", lineno, line)
        id_field = id_field[len(CLASS_PREFIX) :]

    return ClassifiedLine(section, depth, id_field, name.strip())
