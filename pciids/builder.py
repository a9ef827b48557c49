#!/usr/bin/python
#
# Python pciids library
# Single-pass hierarchy builder for plaintext pci.ids
#
# (c) 2025 Steven Noonan
# Licensed under the MIT license
#

from __future__ import annotations
import logging
from typing import Callable, Iterable, List, Optional, Tuple

from .errors import MalformedLineError
from .ids import parse_hex, parse_hex_pair
from .lines import MAX_DEPTH, ClassifiedLine, Section, classify_line, is_ignorable
from .types import (
    Catalog,
    Device,
    DeviceClass,
    ProgrammingInterface,
    SubClass,
    SubDevice,
    Vendor,
)

log = logging.getLogger(__name__)

# (id, name, children) -> node
NodeFactory = Callable[..., object]


class _Pipeline:
    """
    Deferred-flush builder for one three-level hierarchy.

    pci.ids never closes a node: a node's children are complete only once a
    line at the same or a shallower depth shows up, or the input ends. So
    headers at depth 0 and 1 stay open (id, name) while their children pile
    up in the scratch list one level down; closing a header builds the frozen
    node with its finished children and appends it to its own level.
    """

    __slots__ = ("_factories", "_kinds", "_open", "_children")

    def __init__(self, factories: Tuple[NodeFactory, ...], kinds: Tuple[str, ...]) -> None:
        self._factories = factories
        self._kinds = kinds
        self._open: List[Optional[Tuple[object, str]]] = [None] * MAX_DEPTH
        self._children: List[List[object]] = [[] for _ in range(MAX_DEPTH + 1)]

    def _flush(self, depth: int) -> None:
        # Close open headers at `depth` and deeper, innermost first
        for d in range(MAX_DEPTH - 1, depth - 1, -1):
            hdr = self._open[d]
            if hdr is None:
                continue
            node = self._factories[d](hdr[0], hdr[1], tuple(self._children[d + 1]))
            self._children[d + 1] = []
            self._children[d].append(node)
            self._open[d] = None

    def add(self, depth: int, ident: object, name: str, lineno: int, line: str) -> None:
        self._flush(depth)
        if depth > 0 and self._open[depth - 1] is None:
            raise MalformedLineError(
                f"{self._kinds[depth]} without an enclosing {self._kinds[depth - 1]}",
                lineno,
                line,
            )
        if depth < MAX_DEPTH:
            self._open[depth] = (ident, name)
        else:
            self._children[depth].append(self._factories[depth](ident, name))

    def finish(self) -> Tuple[object, ...]:
        self._flush(0)
        return tuple(self._children[0])


def _subdevice(ident: Tuple[int, int], name: str) -> SubDevice:
    return SubDevice(ident[0], ident[1], name)


class CatalogBuilder:
    """
    Feed pci.ids lines in file order, then call finish() for the Catalog.

    skip_vendors still scans the vendor section (to find where the classes
    start) but decodes nothing there; skip_classes stops at the first class
    line. A raised error leaves no catalog behind.
    """

    def __init__(
        self,
        skip_vendors: bool = False,
        skip_classes: bool = False,
        strict: bool = False,
    ) -> None:
        self.skip_vendors = skip_vendors
        self.skip_classes = skip_classes
        self.strict = strict
        self.in_class_section = False
        self.done = False
        self._vendors = _Pipeline(
            (Vendor, Device, _subdevice), ("vendor", "device", "subsystem")
        )
        self._classes = _Pipeline(
            (DeviceClass, SubClass, ProgrammingInterface),
            ("class", "subclass", "programming interface"),
        )

    def feed(self, line: str, lineno: int) -> None:
        if self.done or is_ignorable(line):
            return

        cl = classify_line(line, lineno, self.in_class_section, self.strict)

        if cl.section is Section.CLASS and not self.in_class_section:
            log.debug("class section starts at line %d", lineno)
            if self.skip_classes:
                self.done = True
                return
            self.in_class_section = True

        if cl.section is Section.VENDOR:
            if not self.skip_vendors:
                self._add_vendor_line(cl, lineno, line)
        else:
            # 8-bit ids throughout the class section
            ident = parse_hex(cl.id_field, 8, lineno, line)
            self._classes.add(cl.depth, ident, cl.name, lineno, line)

    def _add_vendor_line(self, cl: ClassifiedLine, lineno: int, line: str) -> None:
        ident: object
        if cl.depth == MAX_DEPTH:
            ident = parse_hex_pair(cl.id_field, 16, lineno, line)
        else:
            ident = parse_hex(cl.id_field, 16, lineno, line)
        self._vendors.add(cl.depth, ident, cl.name, lineno, line)

    def finish(self) -> Catalog:
        vendors = self._vendors.finish()
        classes = self._classes.finish()
        log.debug("built %d vendors, %d classes", len(vendors), len(classes))
        return Catalog(vendors=vendors, classes=classes)  # type: ignore[arg-type]


def build_catalog(
    lines: Iterable[str],
    skip_vendors: bool = False,
    skip_classes: bool = False,
    strict: bool = False,
) -> Catalog:
    b = CatalogBuilder(skip_vendors=skip_vendors, skip_classes=skip_classes, strict=strict)
    for lineno, line in enumerate(lines, start=1):
        b.feed(line, lineno)
        if b.done:
            break
    return b.finish()
