"""
Content fingerprints of the proto files under a directory (``protoweld init``).

Writes ``<root>/.protoweld/sha.json`` mapping each ``*.proto`` file (relative
POSIX path) to the SHA-256 hex digest of its content. ``generate`` does not
read this file.
"""

from __future__ import annotations

import hashlib
import json
import logging
from pathlib import Path

from protoweld.errors.fingerprint import (
    FingerprintError,
    FingerprintReadFailed,
    FingerprintWriteFailed,
)
from protoweld.result import Failure, Result, Success


logger = logging.getLogger(__name__)

STATE_DIRECTORY = ".protoweld"
FINGERPRINT_FILENAME = "sha.json"


def hash_content(payload: bytes) -> str:
    """SHA-256 hex digest of ``payload``."""
    return hashlib.sha256(payload).hexdigest()


def find_proto_files(root: Path) -> list[Path]:
    """Every ``*.proto`` file below ``root``, sorted, skipping protoweld's own state."""
    return sorted(
        path
        for path in root.rglob("*.proto")
        if path.is_file() and STATE_DIRECTORY not in path.relative_to(root).parts
    )


def fingerprint_files(root: Path, paths: list[Path]) -> Result[dict[str, str], FingerprintError]:
    """Hash each file, keyed by its path relative to ``root``."""
    entries: dict[str, str] = {}
    for path in paths:
        try:
            payload = path.read_bytes()
        except OSError as exc:
            return Failure(FingerprintReadFailed(path=path, message=str(exc)))
        logger.info("Detected proto %s", path.name)
        entries[path.relative_to(root).as_posix()] = hash_content(payload)
    return Success(entries)


def write_fingerprints(root: Path, entries: dict[str, str]) -> Result[Path, FingerprintError]:
    """Write ``entries`` as JSON into ``<root>/.protoweld/sha.json``."""
    target = root / STATE_DIRECTORY / FINGERPRINT_FILENAME
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps(entries, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    except OSError as exc:
        return Failure(FingerprintWriteFailed(path=target, message=str(exc)))
    return Success(target)


def init_fingerprints(root: Path) -> Result[Path, FingerprintError]:
    """Fingerprint every proto file under ``root`` and persist the result."""
    return fingerprint_files(root, find_proto_files(root)).and_then(
        lambda entries: write_fingerprints(root, entries)
    )


__all__ = [
    "FINGERPRINT_FILENAME",
    "STATE_DIRECTORY",
    "find_proto_files",
    "fingerprint_files",
    "hash_content",
    "init_fingerprints",
    "write_fingerprints",
]
