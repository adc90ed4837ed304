"""Tests for configuration parsing and loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from protoweld.config import Language, ProcessTimeouts, load_config, parse_config
from protoweld.errors import ConfigFileUnreadable, ConfigParseFailed, InvalidConfig
from tests.helpers import expect_failure, expect_success


EXAMPLE_CONFIG = Path(__file__).resolve().parents[2] / "examples" / "protoweld.yaml"
SOURCE = Path("protoweld.yaml")

MINIMAL = """
active_projects:
  - path: svc
    compiled_proto_folder: gen
    associated_proto_files: [a.proto]
    lang: Rust
"""


class TestParseConfig:
    """Tests for parse_config."""

    def test_minimal_project_defaults(self) -> None:
        config = expect_success(parse_config(MINIMAL, SOURCE))

        (project,) = config.active_projects
        assert project.lang is Language.RUST
        assert project.plugin_path is None
        assert project.compile_options == {}
        assert config.timeouts == ProcessTimeouts()

    def test_null_option_value_is_a_bare_flag(self) -> None:
        text = MINIMAL + "    compile_options:\n      --fatal_warnings:\n      -I: protos\n"

        project = expect_success(parse_config(text, SOURCE)).active_projects[0]

        assert project.compile_options == {"--fatal_warnings": "", "-I": "protos"}
        assert list(project.compile_options) == ["--fatal_warnings", "-I"]

    def test_custom_timeouts(self) -> None:
        text = MINIMAL + "timeouts:\n  dependency_probe: 2.5\n"

        config = expect_success(parse_config(text, SOURCE))

        assert config.timeouts == ProcessTimeouts(dependency_probe=2.5, compilation=5.0)

    def test_invalid_yaml(self) -> None:
        error = expect_failure(parse_config("active_projects: [unclosed", SOURCE))

        assert isinstance(error, ConfigParseFailed)
        assert error.path == SOURCE

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "active_projects: nope",
            MINIMAL.replace("Rust", "Python"),
            MINIMAL.replace("[a.proto]", "[]"),
            MINIMAL + "    unexpected: true\n",
            MINIMAL + "timeouts:\n  compilation: 0\n",
        ],
        ids=["empty", "not-a-list", "unknown-lang", "no-protos", "extra-key", "zero-timeout"],
    )
    def test_schema_violations(self, text: str) -> None:
        error = expect_failure(parse_config(text, SOURCE))

        assert isinstance(error, InvalidConfig)
        assert isinstance(error.error, ValidationError)

    def test_config_is_frozen(self) -> None:
        config = expect_success(parse_config(MINIMAL, SOURCE))

        with pytest.raises(ValidationError):
            config.active_projects[0].path = "other"  # type: ignore[misc]


class TestLoadConfig:
    """Tests for load_config."""

    def test_example_configuration(self) -> None:
        config = expect_success(load_config(EXAMPLE_CONFIG))

        assert [project.lang for project in config.active_projects] == [
            Language.GO,
            Language.DOTNET,
            Language.RUST,
        ]
        dotnet = config.active_projects[1]
        assert dotnet.plugin_path == "/usr/local/bin/grpc_csharp_plugin"
        assert dotnet.compile_options["--experimental_allow_proto3_optional"] == ""

    def test_missing_file(self, tmp_path: Path) -> None:
        error = expect_failure(load_config(tmp_path / "absent.yaml"))

        assert isinstance(error, ConfigFileUnreadable)

    def test_reads_from_disk(self, config_dir: Path) -> None:
        path = config_dir / "protoweld.yaml"
        path.write_text(MINIMAL, encoding="utf-8")

        config = expect_success(load_config(path))

        assert config.active_projects[0].path == "svc"
