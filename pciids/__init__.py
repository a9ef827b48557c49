"""
pciids — parser for the plaintext pci.ids database.

Public API:
    - Entry points:
        parse, parse_file, parse_vendors, parse_classes, open_catalog
    - Parsed model:
        Catalog, Vendor, Device, SubDevice,
        DeviceClass, SubClass, ProgrammingInterface
    - Optional class enumeration:
        KnownClass
    - Errors:
        PciIdsError, MalformedLineError, InvalidIntegerError, UnknownClassError
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

# Version from installed dist; falls back to dev string when run from source tree.
try:  # pragma: no cover
    __version__ = version("pciids")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0.dev0"

# Public API re-exports
from .api import open_catalog, parse, parse_classes, parse_file, parse_vendors
from .builder import CatalogBuilder
from .device_class import KnownClass
from .errors import (
    InvalidIntegerError,
    MalformedLineError,
    PciIdsError,
    UnknownClassError,
)
from .types import (
    Catalog,
    Device,
    DeviceClass,
    ProgrammingInterface,
    SubClass,
    SubDevice,
    Vendor,
)

__all__ = [
    "__version__",
    # Entry points
    "parse",
    "parse_file",
    "parse_vendors",
    "parse_classes",
    "open_catalog",
    "CatalogBuilder",
    # Model
    "Catalog",
    "Vendor",
    "Device",
    "SubDevice",
    "DeviceClass",
    "SubClass",
    "ProgrammingInterface",
    "KnownClass",
    # Errors
    "PciIdsError",
    "MalformedLineError",
    "InvalidIntegerError",
    "UnknownClassError",
]
