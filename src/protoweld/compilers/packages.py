"""Extract the ``package`` declared by each proto file."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Sequence

from protoweld.errors.compiler import (
    MalformedPackageDeclaration,
    PackageError,
    PackageKeywordMissing,
    ProtoFileUnreadable,
)
from protoweld.result import Failure, Result, Success, fold_results
from protoweld.system.operations import SearchHit, SearchMiss
from protoweld.system.protocols import SystemManager


logger = logging.getLogger(__name__)

PACKAGE_KEYWORD = "package"
STATEMENT_TERMINATOR = ";"

# ``go_package`` and dotted names also contain the keyword; a declaration
# must not follow a word character or a dot.
_DECLARATION = re.compile(r"(?<![\w.])package\s+([^;]*);")


def parse_package(
    content: str, keyword_position: int, proto_file: str
) -> Result[str, PackageError]:
    """Return the package declared in ``content``.

    The scan starts at the first occurrence of the keyword.
    The name is the text between the keyword and the next ``;``, stripped.
    """
    match_ = _DECLARATION.search(content, keyword_position)
    if match_ is None:
        return Failure(
            MalformedPackageDeclaration(
                proto_file=proto_file,
                detail=f"no '{PACKAGE_KEYWORD} <name>{STATEMENT_TERMINATOR}' statement",
            )
        )
    name = match_.group(1).strip()
    if not name:
        return Failure(
            MalformedPackageDeclaration(proto_file=proto_file, detail="empty package name")
        )
    return Success(name)


def extract_package(
    system: SystemManager, base_path: Path, proto_file: str
) -> Result[str, PackageError]:
    """Read one proto file (relative to ``base_path``) and return its package."""
    match system.search(base_path / proto_file, PACKAGE_KEYWORD):
        case Failure(error):
            return Failure(ProtoFileUnreadable(proto_file=proto_file, error=error))
        case Success(SearchMiss()):
            return Failure(PackageKeywordMissing(proto_file=proto_file))
        case Success(SearchHit(content=content, position=position)):
            return parse_package(content, position, proto_file)


def extract_packages(
    system: SystemManager, base_path: Path, proto_files: Sequence[str]
) -> Result[frozenset[str], PackageError]:
    """Collect the distinct packages declared by ``proto_files``.

    One package may span several files; duplicates collapse. The first file
    without a usable declaration fails the whole extraction.
    """

    def add(found: frozenset[str], proto_file: str) -> Result[frozenset[str], PackageError]:
        return extract_package(system, base_path, proto_file).and_then(
            lambda package: Success(found | {package})
        )

    empty: frozenset[str] = frozenset()
    result = fold_results(list(proto_files), add, empty)
    if isinstance(result, Success):
        logger.debug("Packages found: %s", ", ".join(sorted(result.value)))
    return result


__all__ = [
    "PACKAGE_KEYWORD",
    "extract_package",
    "extract_packages",
    "parse_package",
]
