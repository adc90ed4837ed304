"""Test runner for the ``test-all`` script.

Usage:
    test-all                                 # Run the whole suite
    test-all -v                              # Verbose output
    test-all tests/test_compilers            # Run one package of tests
    test-all -k "postprocess"                # Run tests matching keyword

All pytest arguments are forwarded directly to pytest.
"""

import sys

import pytest


def run_all_tests() -> None:
    """
    Run tests via pytest with argument forwarding.

    Behavior:
    - No CLI args: runs everything under ``tests``
    - With CLI args: forwards all arguments to pytest directly
    """
    cli_args = sys.argv[1:]
    pytest_args = cli_args if cli_args else ["tests"]
    sys.exit(pytest.main(pytest_args))
