"""CLI for protoweld.

Usage:
    python -m protoweld generate --filename <config.yaml>
    python -m protoweld init [--root DIR]

Examples:
    # Compile every project listed in protoweld.yaml
    protoweld generate -f protoweld.yaml

    # Same, showing every probe and the assembled protoc command lines
    protoweld --log-level debug generate -f protoweld.yaml

    # Record SHA-256 fingerprints of the proto files under the current directory
    protoweld init

Exit codes:
    0: success
    1: generation failed for a project
    2: configuration, platform or filesystem error
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import NoReturn, Sequence

from protoweld.config.loader import load_config
from protoweld.config.models import Project
from protoweld.errors.compiler import BasePathUnresolvable, ProjectFailed
from protoweld.errors.messages import assert_never, describe_error
from protoweld.executor import generate_protos
from protoweld.fingerprint import init_fingerprints
from protoweld.log import LOG_LEVELS, configure_logging, default_log_level
from protoweld.result import Failure, Success
from protoweld.system.unix import get_system_manager


BANNER = "[PROTOWELD]"


def _report_compiled(project: Project) -> None:
    print(f"✓ {BANNER} Compiled project {project.path}")


def cmd_generate(filename: str) -> int:
    """
    Compile every project of the configuration file.

    Args:
        filename: Path to the YAML configuration file

    Returns:
        Exit code (0 = success, 1 = a project failed, 2 = setup error)
    """
    config_path = Path(filename)
    match load_config(config_path):
        case Failure(config_error):
            print(
                f"✗ {BANNER} Parser threw an error: {describe_error(config_error)}",
                file=sys.stderr,
            )
            return 2
        case Success(config):
            pass

    match get_system_manager(config.timeouts):
        case Failure(platform_error):
            print(f"✗ {BANNER} {describe_error(platform_error)}", file=sys.stderr)
            return 2
        case Success(system):
            pass

    match generate_protos(config, config_path, system, on_project_compiled=_report_compiled):
        case Success(_):
            print(f"✓ {BANNER} Generation completed.")
            return 0
        case Failure(ProjectFailed() as project_error):
            print(
                f"✗ {BANNER} Generation failed. {describe_error(project_error)}", file=sys.stderr
            )
            return 1
        case Failure(BasePathUnresolvable() as path_error):
            print(f"✗ {BANNER} {describe_error(path_error)}", file=sys.stderr)
            return 2
        case Failure(unexpected):
            assert_never(unexpected)


def cmd_init(root: str) -> int:
    """
    Fingerprint the proto files under ``root``.

    Returns:
        Exit code (0 = success, 2 = error)
    """
    match init_fingerprints(Path(root)):
        case Success(target):
            print(f"✓ {BANNER} Fingerprints written to {target}")
            return 0
        case Failure(error):
            print(f"✗ {BANNER} {describe_error(error)}", file=sys.stderr)
            return 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="protoweld",
        description="Generate code from .proto files for several projects at once",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=default_log_level(),
        help="Logging verbosity (default: $PROTOWELD_LOG_LEVEL or warning)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # generate command
    generate_parser = subparsers.add_parser(
        "generate", help="Compile the proto files of every configured project"
    )
    generate_parser.add_argument(
        "-f", "--filename", required=True, help="Path to the YAML configuration file"
    )

    # init command
    init_parser = subparsers.add_parser("init", help="Fingerprint proto files")
    init_parser.add_argument(
        "--root", default=".", help="Directory to scan (default: current directory)"
    )
    return parser


def run(argv: Sequence[str] | None = None) -> int:
    """Parse ``argv`` and dispatch; returns the exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.command == "generate":
        return cmd_generate(args.filename)
    elif args.command == "init":
        return cmd_init(args.root)
    parser.print_help()
    return 2


def main() -> NoReturn:
    """Main CLI entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
