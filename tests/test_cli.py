"""Tests for the protoweld command line."""

from __future__ import annotations

import logging
import os
import stat
import subprocess
import sys
from pathlib import Path
from typing import Generator

import pytest

from protoweld.__main__ import build_parser, run
from protoweld.log import LOG_LEVEL_ENV, LOGGER_NAME, default_log_level
from tests.helpers import proto_source


SRC_DIR = Path(__file__).resolve().parents[1] / "src"

# Fake protoc: records its arguments, and for Rust emits what the prost and
# tonic plugins would generate for package ``p``.
FAKE_PROTOC = """
import pathlib
import sys

args = sys.argv[1:]
if args == ["--version"]:
    print("libprotoc 27.0")
    sys.exit(0)
pathlib.Path("protoc-args.txt").write_text("\\n".join(args))
for arg in args:
    if arg.startswith("--prost_out="):
        package_dir = pathlib.Path(arg.split("=", 1)[1]) / "p"
        package_dir.mkdir(parents=True, exist_ok=True)
        (package_dir / "p.rs").write_text('pub struct Ping;\\ninclude!("p.tonic.rs");\\n')
        (package_dir / "p.tonic.rs").write_text("pub mod ping_client {}\\n")
"""

FAKE_FAILING_PROTOC = """
import sys

if sys.argv[1:] == ["--version"]:
    sys.exit(0)
sys.stderr.write("protos/p.proto:3:9: Expected \\";\\".\\n")
sys.exit(1)
"""

FAKE_TOOL = "import sys\nsys.exit(0)\n"

GO_CONFIG = """
active_projects:
  - path: go-service
    compiled_proto_folder: gen/go
    associated_proto_files: [protos/p.proto]
    lang: GoLang
    compile_options:
      -I: protos
"""

RUST_CONFIG = """
active_projects:
  - path: rust-service
    compiled_proto_folder: gen/rust
    associated_proto_files: [protos/p.proto]
    lang: Rust
"""


def _install_tool(bin_dir: Path, name: str, body: str) -> None:
    path = bin_dir / name
    path.write_text(f"#!{sys.executable}\n{body}", encoding="utf-8")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)


def _workspace(root: Path, config: str) -> Path:
    (root / "protos").mkdir()
    (root / "protos" / "p.proto").write_text(proto_source("p"), encoding="utf-8")
    config_path = root / "protoweld.yaml"
    config_path.write_text(config, encoding="utf-8")
    return config_path


def run_cli(bin_dir: Path, cwd: Path, *args: str) -> subprocess.CompletedProcess[str]:
    """Run ``python -m protoweld`` with only ``bin_dir`` on PATH."""
    pythonpath = os.pathsep.join(filter(None, [str(SRC_DIR), os.environ.get("PYTHONPATH")]))
    env = {**os.environ, "PATH": str(bin_dir), "PYTHONPATH": pythonpath}
    env.pop(LOG_LEVEL_ENV, None)
    return subprocess.run(
        [sys.executable, "-m", "protoweld", *args],
        check=False,
        capture_output=True,
        text=True,
        timeout=30,
        cwd=cwd,
        env=env,
        encoding="utf-8",
    )


@pytest.fixture
def bin_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "bin"
    directory.mkdir()
    return directory


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    directory = tmp_path / "repo"
    directory.mkdir()
    return directory


@pytest.fixture(autouse=True)
def restore_protoweld_logger() -> Generator[None, None, None]:
    """Undo the handler and level configure_logging installs during in-process runs."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


class TestEndToEnd:
    """Full runs with fake toolchains on PATH."""

    @pytest.mark.timeout(seconds=40)
    def test_go_generation(self, bin_dir: Path, workspace: Path, tmp_path: Path) -> None:
        for tool in ("go", "protoc-gen-go", "protoc-gen-go-grpc"):
            _install_tool(bin_dir, tool, FAKE_TOOL)
        _install_tool(bin_dir, "protoc", FAKE_PROTOC)
        config_path = _workspace(workspace, GO_CONFIG)

        result = run_cli(bin_dir, tmp_path, "generate", "-f", str(config_path))

        assert result.returncode == 0, result.stderr
        assert "✓ [PROTOWELD] Compiled project go-service" in result.stdout
        assert "✓ [PROTOWELD] Generation completed." in result.stdout
        # protoc ran inside the configuration directory
        assert (workspace / "protoc-args.txt").read_text().splitlines() == [
            "-I=protos",
            "--go_out=gen/go",
            "--go-grpc_out=gen/go",
            "protos/p.proto",
        ]

    @pytest.mark.timeout(seconds=40)
    def test_rust_generation_is_post_processed(
        self, bin_dir: Path, workspace: Path, tmp_path: Path
    ) -> None:
        for tool in ("protoc-gen-tonic", "protoc-gen-prost"):
            _install_tool(bin_dir, tool, FAKE_TOOL)
        _install_tool(bin_dir, "protoc", FAKE_PROTOC)
        config_path = _workspace(workspace, RUST_CONFIG)

        result = run_cli(bin_dir, tmp_path, "generate", "--filename", str(config_path))

        assert result.returncode == 0, result.stderr
        package_dir = workspace / "gen" / "rust" / "p"
        assert (package_dir / "mod.rs").read_text() == "pub mod p;\npub mod p_tonic;\n"
        assert (package_dir / "p.rs").read_text() == "pub struct Ping;\n\n"
        assert (package_dir / "p_tonic.rs").read_text().startswith("use super::p::*;\n")
        assert not (package_dir / "p.tonic.rs").exists()

    @pytest.mark.timeout(seconds=40)
    def test_missing_dependencies_exit_code(
        self, bin_dir: Path, workspace: Path, tmp_path: Path
    ) -> None:
        _install_tool(bin_dir, "protoc", FAKE_PROTOC)
        _install_tool(bin_dir, "go", FAKE_TOOL)
        config_path = _workspace(workspace, GO_CONFIG)

        result = run_cli(bin_dir, tmp_path, "generate", "-f", str(config_path))

        assert result.returncode == 1
        assert (
            "Failed to check installation of the following dependencies: "
            "protoc-gen-go,protoc-gen-go-grpc"
        ) in result.stderr
        assert not (workspace / "protoc-args.txt").exists()

    @pytest.mark.timeout(seconds=40)
    def test_compiler_diagnostics_are_shown(
        self, bin_dir: Path, workspace: Path, tmp_path: Path
    ) -> None:
        for tool in ("go", "protoc-gen-go", "protoc-gen-go-grpc"):
            _install_tool(bin_dir, tool, FAKE_TOOL)
        _install_tool(bin_dir, "protoc", FAKE_FAILING_PROTOC)
        config_path = _workspace(workspace, GO_CONFIG)

        result = run_cli(bin_dir, tmp_path, "generate", "-f", str(config_path))

        assert result.returncode == 1
        assert "✗ [PROTOWELD] Generation failed. [go-service]" in result.stderr
        assert 'protos/p.proto:3:9: Expected ";".' in result.stderr
        assert "Generation completed" not in result.stdout


class TestInProcess:
    """Runs through ``run`` without spawning the CLI itself."""

    def test_unreadable_config(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code = run(["generate", "-f", str(tmp_path / "missing.yaml")])

        assert code == 2
        assert "✗ [PROTOWELD] Parser threw an error" in capsys.readouterr().err

    def test_invalid_config(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        config_path = tmp_path / "protoweld.yaml"
        config_path.write_text("active_projects:\n  - path: x\n", encoding="utf-8")

        assert run(["generate", "-f", str(config_path)]) == 2
        assert "is invalid" in capsys.readouterr().err

    def test_empty_project_list(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        config_path = tmp_path / "protoweld.yaml"
        config_path.write_text("active_projects: []\n", encoding="utf-8")

        assert run(["generate", "-f", str(config_path)]) == 0
        assert "Generation completed." in capsys.readouterr().out

    def test_init(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (tmp_path / "a.proto").write_text(proto_source("a"), encoding="utf-8")

        assert run(["--log-level", "debug", "init", "--root", str(tmp_path)]) == 0
        assert (tmp_path / ".protoweld" / "sha.json").exists()
        assert "Fingerprints written" in capsys.readouterr().out

    def test_filename_is_required(self) -> None:
        with pytest.raises(SystemExit) as excinfo:
            build_parser().parse_args(["generate"])

        assert excinfo.value.code == 2


class TestLogLevel:
    """Tests for the log level default."""

    def test_default_is_warning(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)

        assert default_log_level() == "warning"

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV, "DEBUG")

        assert default_log_level() == "debug"

    def test_unknown_value_falls_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")

        assert default_log_level() == "warning"
