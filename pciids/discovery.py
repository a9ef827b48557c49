from __future__ import annotations
from dataclasses import dataclass
import logging
import os
from pathlib import Path
from typing import List, Optional, Sequence, Union

log = logging.getLogger(__name__)

ENV_PATH = "PCIIDS_PATH"
ENV_NO_SYSTEM = "PCIIDS_NO_SYSTEM"

SYSTEM_PATHS = (
    "/usr/share/hwdata/pci.ids",
    "/usr/share/misc/pci.ids",
    "/usr/share/misc/pci.ids.gz",
    "/usr/share/pci.ids",
)


@dataclass(frozen=True)
class Candidate:
    """A potential database location in the discovery order."""

    kind: str  # "explicit", "env", "system"
    path: str


def _resolve_candidates(
    *,
    explicit_path: Optional[str],
    env_path: Optional[str],
    system_paths: Sequence[str],
    allow_system: bool,
) -> List[Candidate]:
    """
    Build an ordered list of candidates. Pure function -> easy to unit test.
    An explicit path is the only candidate when given.
    """
    if explicit_path:
        return [Candidate("explicit", explicit_path)]

    cands: List[Candidate] = []
    if env_path:
        cands.append(Candidate("env", env_path))
    if allow_system:
        cands.extend(Candidate("system", p) for p in system_paths)
    return cands


# -------- public entry --------


def discover_path(path: Optional[Union[str, "os.PathLike[str]"]] = None) -> str:
    explicit = os.fspath(path) if path is not None else None
    cands = _resolve_candidates(
        explicit_path=explicit,
        env_path=os.getenv(ENV_PATH),
        system_paths=SYSTEM_PATHS,
        allow_system=os.getenv(ENV_NO_SYSTEM) != "1",
    )

    for c in cands:
        if Path(c.path).is_file():
            log.debug("using %s pci.ids at %s", c.kind, c.path)
            return c.path
        log.debug("no %s pci.ids at %s", c.kind, c.path)

    if explicit:
        raise FileNotFoundError(f"pci.ids not found: {explicit}")
    raise FileNotFoundError(
        "No PCI ID database found. "
        f"Set {ENV_PATH}, pass a path, or install hwdata."
    )
