"""
Closed enumeration of the well-known PCI base classes.

pci.ids carries free-form class names and the parser keeps those; this table is
only a convenience for callers that want to switch on a fixed set of classes.
See https://pci-ids.ucw.cz/read/PD/
"""

from __future__ import annotations
import enum
from typing import Optional

from .errors import UnknownClassError


class KnownClass(enum.IntEnum):
    # fmt: off
    UNCLASSIFIED                        = 0x00
    MASS_STORAGE_CONTROLLER             = 0x01
    NETWORK_CONTROLLER                  = 0x02
    DISPLAY_CONTROLLER                  = 0x03
    MULTIMEDIA_CONTROLLER               = 0x04
    MEMORY_CONTROLLER                   = 0x05
    BRIDGE                              = 0x06
    COMMUNICATION_CONTROLLER            = 0x07
    GENERIC_SYSTEM_PERIPHERAL           = 0x08
    INPUT_DEVICE_CONTROLLER             = 0x09
    DOCKING_STATION                     = 0x0A
    PROCESSOR                           = 0x0B
    SERIAL_BUS_CONTROLLER               = 0x0C
    WIRELESS_CONTROLLER                 = 0x0D
    INTELLIGENT_CONTROLLER              = 0x0E
    SATELLITE_COMMUNICATIONS_CONTROLLER = 0x0F
    ENCRYPTION_CONTROLLER               = 0x10
    SIGNAL_PROCESSING_CONTROLLER        = 0x11
    PROCESSING_ACCELERATOR              = 0x12
    NON_ESSENTIAL_INSTRUMENTATION       = 0x13
    COPROCESSOR                         = 0x40
    UNASSIGNED                          = 0xFF
    # fmt: on

    @classmethod
    def from_id(cls, class_id: int) -> "KnownClass":
        try:
            return cls(class_id)
        except ValueError:
            raise UnknownClassError(f"unknown device class 0x{class_id:02x}") from None

    @classmethod
    def lookup(cls, class_id: int) -> Optional["KnownClass"]:
        try:
            return cls(class_id)
        except ValueError:
            return None

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES.get(self) or self.name.replace("_", " ").title()

    def __str__(self) -> str:
        return self.display_name


# Everything else is derived from the member name
_DISPLAY_NAMES = {
    KnownClass.PROCESSING_ACCELERATOR: "Processing Accelerators",
}
