# tests/conftest.py
from __future__ import annotations
from pathlib import Path
import gzip
import pytest

MINIMAL_PCI_IDS = """\
#
#\tList of PCI ID's
#
# Syntax:
# vendor  vendor_name
#\tdevice  device_name\t\t\t\t<-- single tab
#\t\tsubvendor subdevice  subsystem_name\t<-- two tabs

0e11  Compaq Computer Corporation
\t0046  Smart Array 64xx
\t\t0e11 4091  Smart Array 6i
\t\t0e11 409a  Smart Array 641
\t\t0e11 409d  Smart Array 6400 EM
\tb178  Smart Array 5i/532
8086  Intel Corporation
\t1237  440FX - 82441FX PMC
10de  NVIDIA Corporation
\t0020  NV4 [Riva TNT]
\t\t1043 0200  V3400 TNT
\t\t1048 0c18  Erazor II SGRAM
\t\t1092 0550  Viper V550
\t\t1092 8225  Viper V550
\t\t10de 0020  Riva TNT
\t1db6  GV100GL [Tesla V100 PCIe 32GB]
\t1ba1  GP104M [GeForce GTX 1070 Mobile]
\t\t1458 1651  GeForce GTX 1070 Max-Q
beef  Vendor Without Devices

# List of known device classes, subclasses and programming interfaces

# Syntax:
# C class\tclass_name
#\tsubclass\tsubclass_name\t\t<-- single tab
#\t\tprog-if  prog-if_name  \t<-- two tabs

C 02  Network controller
\t00  Ethernet controller
\t02  FDDI network controller
\t80  Network controller
C 03  Display controller
\t00  VGA compatible controller
\t\t00  VGA controller
\t\t01  8514 controller
\t02  3D controller
C 0c  Serial bus controller
\t00  FireWire (IEEE 1394)
\t\t00  Generic
\t\t10  OHCI
\t03  USB controller
\t\t00  UHCI
\t\t10  OHCI
\t\t20  EHCI
\t\t30  XHCI
\t\t40  USB4 Host Interface
\t\t80  Unspecified
\t\tfe  USB Device
C 06  Bridge
\t04  PCI bridge
\t\t00  Normal decode
\t\t01  Subtractive decode
"""


@pytest.fixture
def pci_ids_source() -> str:
    return MINIMAL_PCI_IDS


@pytest.fixture
def pci_ids_text(tmp_path: Path) -> Path:
    p = tmp_path / "pci.ids"
    p.write_text(MINIMAL_PCI_IDS, encoding="utf-8")
    return p


@pytest.fixture
def pci_ids_gz(tmp_path: Path) -> Path:
    p = tmp_path / "pci.ids.gz"
    with gzip.open(p, "wb") as f:
        f.write(MINIMAL_PCI_IDS.encode("utf-8"))
    return p
