from __future__ import annotations
import gzip
import os
from typing import IO, Optional, Union

from .builder import CatalogBuilder, build_catalog
from .types import Catalog

Source = Union[str, bytes, bytearray, IO[str], IO[bytes]]
PathLike = Union[str, "os.PathLike[str]"]

BOM = "\ufeff"


def _decode(data: Union[str, bytes, bytearray]) -> str:
    if isinstance(data, (bytes, bytearray)):
        return bytes(data).decode("utf-8-sig", errors="replace")
    return data.removeprefix(BOM)


def _read_source(source: Source) -> str:
    if isinstance(source, (str, bytes, bytearray)):
        return _decode(source)
    return _decode(source.read())


def parse(
    source: Source,
    *,
    skip_vendors: bool = False,
    skip_classes: bool = False,
    strict: bool = False,
) -> Catalog:
    """
    Parse pci.ids contents into a Catalog.

    `source` is the database text itself (str or bytes) or a readable stream;
    use parse_file() for paths. Raises MalformedLineError / InvalidIntegerError
    on bad input.
    """
    text = _read_source(source)
    return build_catalog(
        text.split("\n"),
        skip_vendors=skip_vendors,
        skip_classes=skip_classes,
        strict=strict,
    )


def parse_file(
    path: PathLike,
    *,
    skip_vendors: bool = False,
    skip_classes: bool = False,
    strict: bool = False,
) -> Catalog:
    opener = gzip.open if os.fspath(path).endswith(".gz") else open
    with opener(path, "rb") as f:
        data = f.read()
    return parse(
        data, skip_vendors=skip_vendors, skip_classes=skip_classes, strict=strict
    )


def parse_vendors(source: Source) -> Catalog:
    return parse(source, skip_classes=True)


def parse_classes(source: Source) -> Catalog:
    return parse(source, skip_vendors=True)


def open_catalog(path: Optional[PathLike] = None, **kwargs) -> Catalog:
    from .discovery import discover_path

    return parse_file(discover_path(path), **kwargs)


__all__ = [
    "Catalog",
    "CatalogBuilder",
    "open_catalog",
    "parse",
    "parse_classes",
    "parse_file",
    "parse_vendors",
]
