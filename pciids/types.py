#!/usr/bin/python
#
# Python pciids library
# Parsed catalog data model
#
# (c) 2025 Steven Noonan
# Licensed under the MIT license
#

from __future__ import annotations
from dataclasses import dataclass
from functools import cached_property
from typing import Dict, Iterator, List, Optional, Tuple

from .device_class import KnownClass


def _clamp(x: int, low: int, high: int) -> int:
    return max(low, min(x, high))


# ---------- Vendor hierarchy ----------
@dataclass(frozen=True, slots=True)
class SubDevice:
    subvendor_id: int
    subdevice_id: int
    name: str


@dataclass(frozen=True, slots=True)
class Device:
    id: int
    name: str
    subdevices: Tuple[SubDevice, ...] = ()

    def find_subdevice(self, subvendor_id: int, subdevice_id: int) -> Optional[SubDevice]:
        for s in self.subdevices:
            if s.subvendor_id == subvendor_id and s.subdevice_id == subdevice_id:
                return s
        return None


@dataclass(frozen=True, slots=True)
class Vendor:
    id: int
    name: str
    devices: Tuple[Device, ...] = ()

    def find_device(self, device_id: int) -> Optional[Device]:
        for d in self.devices:
            if d.id == device_id:
                return d
        return None


# ---------- Class hierarchy ----------
@dataclass(frozen=True, slots=True)
class ProgrammingInterface:
    id: int
    name: str


@dataclass(frozen=True, slots=True)
class SubClass:
    id: int
    name: str
    interfaces: Tuple[ProgrammingInterface, ...] = ()

    def find_interface(self, prog_if: int) -> Optional[ProgrammingInterface]:
        for i in self.interfaces:
            if i.id == prog_if:
                return i
        return None


@dataclass(frozen=True, slots=True)
class DeviceClass:
    id: int
    name: str
    subclasses: Tuple[SubClass, ...] = ()

    @property
    def known(self) -> Optional[KnownClass]:
        """The matching KnownClass member, or None for bytes outside the table."""
        return KnownClass.lookup(self.id)

    def find_subclass(self, subclass_id: int) -> Optional[SubClass]:
        for s in self.subclasses:
            if s.id == subclass_id:
                return s
        return None


# ---------- Catalog ----------
@dataclass(frozen=True)
class Catalog:
    """
    Root of a parsed pci.ids database.

    Both lists are in file order. Lookups below are conveniences over the
    finished catalog; the id indexes are built on first use and keep the first
    entry when an id repeats.
    """

    vendors: Tuple[Vendor, ...] = ()
    classes: Tuple[DeviceClass, ...] = ()

    # ----- traversal -----
    def iter_devices(self) -> Iterator[Tuple[Vendor, Device]]:
        for v in self.vendors:
            for d in v.devices:
                yield v, d

    def iter_subclasses(self) -> Iterator[Tuple[DeviceClass, SubClass]]:
        for c in self.classes:
            for s in c.subclasses:
                yield c, s

    def stats(self) -> Dict[str, int]:
        return {
            "vendors": len(self.vendors),
            "devices": sum(len(v.devices) for v in self.vendors),
            "subdevices": sum(len(d.subdevices) for _, d in self.iter_devices()),
            "classes": len(self.classes),
            "subclasses": sum(len(c.subclasses) for c in self.classes),
            "interfaces": sum(len(s.interfaces) for _, s in self.iter_subclasses()),
        }

    # ----- lookup helpers -----
    @cached_property
    def _vendor_index(self) -> Dict[int, Vendor]:
        idx: Dict[int, Vendor] = {}
        for v in self.vendors:
            idx.setdefault(v.id, v)
        return idx

    @cached_property
    def _class_index(self) -> Dict[int, DeviceClass]:
        idx: Dict[int, DeviceClass] = {}
        for c in self.classes:
            idx.setdefault(c.id, c)
        return idx

    def find_vendor(self, vendor_id: int) -> Optional[Vendor]:
        return self._vendor_index.get(vendor_id & 0xFFFF)

    def find_vendors_by_name(self, name: str) -> List[Vendor]:
        return [v for v in self.vendors if v.name == name]

    def find_device(self, vendor_id: int, device_id: int) -> Optional[Device]:
        v = self.find_vendor(vendor_id)
        if v is None:
            return None
        return v.find_device(device_id & 0xFFFF)

    def find_class(self, class_id: int) -> Optional[DeviceClass]:
        return self._class_index.get(class_id & 0xFF)

    # ----- public API -----
    def get_vendor_name(self, vendor_id: int) -> Optional[str]:
        v = self.find_vendor(vendor_id)
        return v.name if v else None

    def get_device_name(self, vendor_id: int, device_id: int) -> Optional[str]:
        d = self.find_device(vendor_id, device_id)
        return d.name if d else None

    def get_subsystem_name(
        self, vendor_id: int, device_id: int, subvendor_id: int, subdevice_id: int
    ) -> Optional[str]:
        d = self.find_device(vendor_id, device_id)
        if d is None:
            return None
        s = d.find_subdevice(subvendor_id & 0xFFFF, subdevice_id & 0xFFFF)
        return s.name if s else None

    def get_class_name(
        self, base: int, subclass: Optional[int] = None, prog_if: Optional[int] = None
    ) -> Optional[str]:
        c = self.find_class(base)
        if c is None:
            return None
        if subclass is None:
            return c.name

        s = c.find_subclass(subclass & 0xFF)
        if s is None:
            # unknown subclass → fall back to base only
            return c.name
        if prog_if is None:
            return s.name

        i = s.find_interface(prog_if & 0xFF)
        # fall back to subclass name if specific prog-if not found
        return i.name if i else s.name

    def get_class_name_from_code(
        self, class_code_24bit: int, depth: int = 3
    ) -> Optional[str]:
        base = (class_code_24bit >> 16) & 0xFF
        sub = (class_code_24bit >> 8) & 0xFF
        pi = class_code_24bit & 0xFF
        depth = _clamp(depth, 0, 3)
        if depth > 2:
            return self.get_class_name(base, sub, pi)
        if depth > 1:
            return self.get_class_name(base, sub, None)
        return self.get_class_name(base, None, None)

    def describe_device_best_effort(
        self, vendor_id: int, device_id: int, class_code_24bit: Optional[int]
    ) -> str:
        dn = self.get_device_name(vendor_id, device_id)
        vn = self.get_vendor_name(vendor_id)
        if dn:
            return f"{vn or f'0x{vendor_id:04x}'} {dn}"
        cn = self.get_class_name_from_code(class_code_24bit or 0, depth=2)
        vendor_part = vn if vn else f"0x{vendor_id:04x}"
        class_part = cn if cn else "PCI device"
        return f"Unknown {vendor_part} {class_part} (0x{device_id:04x})"
