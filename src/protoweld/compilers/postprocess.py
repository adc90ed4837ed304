"""
Post-processing of Rust code generated by protoc-gen-prost and protoc-gen-tonic.

The Rust plugins write, for package ``p``, ``p/p.rs`` (prost messages) and
``p/p.tonic.rs`` (tonic services), with the message file pulling the service
file in through ``include!("p.tonic.rs");``. A dot is not allowed in a Rust
module name, so each package is rewritten into a proper module:

1. ``p.tonic.rs`` is renamed to ``p_tonic.rs``
2. the ``include!`` directive is removed from ``p.rs``
3. ``use super::p::*;`` is inserted at the top of ``p_tonic.rs``
4. ``mod.rs`` is written declaring ``pub mod p;`` and ``pub mod p_tonic;``

Packages are independent: a failure stops the pipeline and is reported for
that package, while packages already rewritten stay rewritten.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from protoweld.errors.compiler import PostProcessingFailed, PostProcessingStep
from protoweld.errors.system import FileOperationFailed
from protoweld.result import Failure, Result, Success, fold_results
from protoweld.system.protocols import SystemManager


logger = logging.getLogger(__name__)

TONIC_SUFFIX = "tonic"
RUST_EXTENSION = ".rs"
RUST_MODULE_FILENAME = "mod.rs"
INCLUDE_DIRECTIVE_TEMPLATE = 'include!("{filename}");'
USE_SUPER_TEMPLATE = "use super::{package}::*;\n"


@dataclass(frozen=True)
class RustPackageLayout:
    """Paths involved in repairing one generated package."""

    package: str
    directory: Path

    @classmethod
    def for_package(cls, output_dir: Path, package: str) -> RustPackageLayout:
        return cls(package=package, directory=output_dir / package)

    @property
    def message_file(self) -> Path:
        return self.directory / f"{self.package}{RUST_EXTENSION}"

    @property
    def generated_service_name(self) -> str:
        return f"{self.package}.{TONIC_SUFFIX}{RUST_EXTENSION}"

    @property
    def generated_service_file(self) -> Path:
        return self.directory / self.generated_service_name

    @property
    def service_module(self) -> str:
        return f"{self.package}_{TONIC_SUFFIX}"

    @property
    def service_file(self) -> Path:
        return self.directory / f"{self.service_module}{RUST_EXTENSION}"

    @property
    def module_file(self) -> Path:
        return self.directory / RUST_MODULE_FILENAME

    def include_directive(self) -> str:
        return INCLUDE_DIRECTIVE_TEMPLATE.format(filename=self.generated_service_name)

    def use_directive(self) -> str:
        return USE_SUPER_TEMPLATE.format(package=self.package)

    def module_declarations(self) -> str:
        return f"pub mod {self.package};\npub mod {self.service_module};\n"


def _step(
    package: str, step: PostProcessingStep, result: Result[object, FileOperationFailed]
) -> Result[None, PostProcessingFailed]:
    match result:
        case Failure(error):
            return Failure(PostProcessingFailed(package=package, step=step, error=error))
        case Success(_):
            return Success(None)


def repair_rust_package(
    system: SystemManager, output_dir: Path, package: str
) -> Result[None, PostProcessingFailed]:
    """Run the four rewrite steps for one package, stopping at the first failure."""
    layout = RustPackageLayout.for_package(output_dir, package)
    logger.debug(
        "prost file: %s and tonic file: %s", layout.message_file, layout.generated_service_file
    )

    renamed = _step(
        package, "rename", system.rename_file(layout.generated_service_file, layout.service_file)
    )
    if isinstance(renamed, Failure):
        return renamed

    match system.find_replace(layout.message_file, layout.include_directive(), ""):
        case Failure(error):
            return Failure(PostProcessingFailed(package=package, step="strip_include", error=error))
        case Success(0):
            logger.warning(
                "No %s directive found in %s", layout.include_directive(), layout.message_file
            )
        case Success(_):
            pass

    inserted = _step(
        package, "insert_use", system.insert_text(layout.service_file, 0, layout.use_directive())
    )
    if isinstance(inserted, Failure):
        return inserted

    written = _step(
        package,
        "write_module",
        system.write_file(layout.module_file, layout.module_declarations()),
    )
    if isinstance(written, Success):
        logger.info("Post-processed Rust package %s", package)
    return written


def repair_rust_modules(
    system: SystemManager, output_dir: Path, packages: Iterable[str]
) -> Result[None, PostProcessingFailed]:
    """Repair every package under ``output_dir``.

    Packages are visited in sorted order so logs are reproducible; nothing
    about correctness depends on that order.
    """

    def repair(_: None, package: str) -> Result[None, PostProcessingFailed]:
        return repair_rust_package(system, output_dir, package)

    return fold_results(sorted(packages), repair, None)


__all__ = [
    "INCLUDE_DIRECTIVE_TEMPLATE",
    "RUST_MODULE_FILENAME",
    "RustPackageLayout",
    "USE_SUPER_TEMPLATE",
    "repair_rust_modules",
    "repair_rust_package",
]
