# tests/helpers/__init__.py
"""Shared test utilities for the protoweld test suite.

Usage:
    >>> from tests.helpers import expect_success, make_project
    >>> project = make_project("billing", lang=Language.RUST)
    >>> config = expect_success(parse_config(text, Path("protoweld.yaml")))
"""

from __future__ import annotations

from tests.helpers.constants import (
    BASE_PATH,
    CSHARP_PLUGIN_PATH,
    DOTNET_DEPENDENCIES,
    EXAMPLE_PROTO,
    GO_DEPENDENCIES,
    OUTPUT_FOLDER,
    RUST_DEPENDENCIES,
    TONIC_OUTPUT,
)
from tests.helpers.factories import (
    make_config,
    make_project,
    prost_source,
    proto_source,
    seed_generated_rust,
    write_generated_rust,
)
from tests.helpers.result_utils import E, T, expect_failure, expect_success

__all__ = [
    # Result unwrapping
    "expect_success",
    "expect_failure",
    "T",
    "E",
    # Factories
    "make_config",
    "make_project",
    "prost_source",
    "proto_source",
    "seed_generated_rust",
    "write_generated_rust",
    # Constants
    "BASE_PATH",
    "CSHARP_PLUGIN_PATH",
    "DOTNET_DEPENDENCIES",
    "EXAMPLE_PROTO",
    "GO_DEPENDENCIES",
    "OUTPUT_FOLDER",
    "RUST_DEPENDENCIES",
    "TONIC_OUTPUT",
]
