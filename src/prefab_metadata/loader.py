"""File helpers around ``decode`` for callers that start from paths.

Reading files lives here so the decoder itself stays free of I/O.
"""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Tuple, Union

from prefab_metadata.decoder import DecodeResult, decode, try_decode
from prefab_metadata.schemas.package_metadata import PackageMetadataV1
from prefab_metadata.utils.logger_util import get_logger, logging
logger = get_logger(__name__, logging.INFO)

DESCRIPTOR_FILENAME = "prefab.json"

PathLike = Union[str, Path]


def descriptor_path(path: PathLike) -> Path:
    """Return the descriptor file for ``path``: the path itself, or ``<dir>/prefab.json``."""
    p = Path(path)
    if p.is_dir():
        return p / DESCRIPTOR_FILENAME
    return p


def load_package_metadata(path: PathLike) -> PackageMetadataV1:
    """Read and decode one descriptor file or package directory.

    OSError from reading and DecodeError from decoding propagate unchanged.
    """
    p = descriptor_path(path)
    raw = p.read_bytes()
    logger.debug("loading descriptor %s (%d bytes)", p, len(raw))
    return decode(raw)


def scan_package_metadata(paths: Iterable[PathLike]) -> List[Tuple[Path, DecodeResult]]:
    """Decode every descriptor in ``paths``; a malformed one does not stop the scan.

    Unreadable files still raise OSError.
    """
    results: List[Tuple[Path, DecodeResult]] = []
    for path in paths:
        p = descriptor_path(path)
        result = try_decode(p.read_bytes())
        if not result.ok:
            logger.warning("skipping %s: %s", p, result.error)
        results.append((p, result))
    return results
