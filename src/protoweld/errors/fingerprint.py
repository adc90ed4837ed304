"""ADTs for the ``init`` fingerprinting command."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal


@dataclass(frozen=True)
class FingerprintReadFailed:
    """A proto file could not be read for hashing."""

    path: Path
    message: str
    kind: Literal["FingerprintReadFailed"] = "FingerprintReadFailed"


@dataclass(frozen=True)
class FingerprintWriteFailed:
    """The fingerprint JSON could not be written."""

    path: Path
    message: str
    kind: Literal["FingerprintWriteFailed"] = "FingerprintWriteFailed"


FingerprintError = FingerprintReadFailed | FingerprintWriteFailed

__all__ = ["FingerprintError", "FingerprintReadFailed", "FingerprintWriteFailed"]
