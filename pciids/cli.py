#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import argparse
import sys
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import pciids
from pciids.errors import PciIdsError
from pciids.ids import parse_hex

IdQuery = Tuple[int, ...]


@dataclass
class ProgramArgs:
    db_path: Optional[str]
    ids: List[IdQuery] = field(default_factory=list)
    class_codes: List[str] = field(default_factory=list)
    vendors_only: bool = False
    classes_only: bool = False
    strict: bool = False


def id_query(s: str) -> IdQuery:
    parts = s.split(":")
    if len(parts) not in (1, 2, 4):
        raise argparse.ArgumentTypeError(
            f"expected VEN[:DEV[:SUBVEN:SUBDEV]], got {s!r}"
        )
    try:
        return tuple(parse_hex(p, 16) for p in parts)
    except PciIdsError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def class_query(s: str) -> str:
    if len(s) not in (2, 4, 6):
        raise argparse.ArgumentTypeError(f"expected 2, 4 or 6 hex digits, got {s!r}")
    try:
        parse_hex(s, 24)
    except PciIdsError as e:
        raise argparse.ArgumentTypeError(str(e)) from None
    return s.lower()


def format_id(db: pciids.Catalog, q: IdQuery) -> str:
    ven = q[0]
    if len(q) == 1:
        return f"{ven:04x} {db.get_vendor_name(ven) or 'Unknown vendor'}"

    dev = q[1]
    desc = db.describe_device_best_effort(ven, dev, None)
    if len(q) == 2:
        return f"{ven:04x}:{dev:04x} {desc}"

    subven, subdev = q[2], q[3]
    sname = db.get_subsystem_name(ven, dev, subven, subdev) or "Unknown subsystem"
    return f"{ven:04x}:{dev:04x}:{subven:04x}:{subdev:04x} {desc} (subsystem: {sname})"


def format_class(db: pciids.Catalog, code: str) -> str:
    base = int(code[0:2], 16)
    sub = int(code[2:4], 16) if len(code) >= 4 else None
    pi = int(code[4:6], 16) if len(code) >= 6 else None
    name = db.get_class_name(base, sub, pi)
    return f"{code} {name or f'Class {code}'}"


def run(args: ProgramArgs) -> int:
    try:
        db = pciids.open_catalog(
            args.db_path,
            skip_vendors=args.classes_only,
            skip_classes=args.vendors_only,
            strict=args.strict,
        )
    except (OSError, PciIdsError) as e:
        print(f"pciids: error: {e}", file=sys.stderr)
        return 1

    out_lines = []
    for q in args.ids:
        out_lines.append(format_id(db, q))
    for code in args.class_codes:
        out_lines.append(format_class(db, code))

    if not out_lines:
        for kind, count in db.stats().items():
            out_lines.append(f"{kind}: {count}")

    for line in out_lines:
        print(line)
    return 0


def main() -> None:  # pragma: no cover
    ap = argparse.ArgumentParser(description="Query a pci.ids database")
    ap.add_argument("--db", dest="db_path", default=None, help="path to pci.ids")
    only = ap.add_mutually_exclusive_group()
    only.add_argument(
        "--vendors-only", action="store_true", help="skip the class section"
    )
    only.add_argument(
        "--classes-only", action="store_true", help="skip the vendor section"
    )
    ap.add_argument(
        "--strict", action="store_true", help="reject lines nested deeper than 2 tabs"
    )
    ap.add_argument(
        "--id",
        dest="ids",
        type=id_query,
        action="append",
        default=[],
        metavar="VEN[:DEV[:SUBVEN:SUBDEV]]",
        help="look up vendor/device/subsystem names",
    )
    ap.add_argument(
        "--class",
        dest="class_codes",
        type=class_query,
        action="append",
        default=[],
        metavar="CODE",
        help="look up a class name from 2, 4 or 6 hex digits",
    )
    sys.exit(run(ProgramArgs(**vars(ap.parse_args()))))


if __name__ == "__main__":  # pragma: no cover
    main()
