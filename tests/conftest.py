"""
Pytest configuration and fixtures for persistent list tests.

Provides reusable fixtures for:
- Running the list_demo driver as a subprocess
- Verifying expected output
- Checking driver errors
"""

import pytest
import subprocess
import os
import sys
from pathlib import Path

# Add project root so the flat modules import without installation
sys.path.insert(0, str(Path(__file__).parent.parent))


class DemoResult:
    """Result of running the list_demo driver."""

    def __init__(self, returncode: int, stdout: str, stderr: str):
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr

    @property
    def success(self) -> bool:
        return self.returncode == 0

    @property
    def lines(self):
        return self.stdout.splitlines()


@pytest.fixture
def project_root():
    """Path to project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def run_demo(project_root):
    """
    Fixture that returns a function to run list_demo.py with arguments.

    Usage:
        result = run_demo("-s", "tail")
        assert result.success
        assert result.lines == ["tail(list_of(1, 2, 3)) = 2, 3"]
    """
    def _run(*args: str) -> DemoResult:
        demo = os.path.join(project_root, "list_demo.py")
        result = subprocess.run(
            [sys.executable, demo, *args],
            capture_output=True,
            text=True,
            cwd=project_root
        )
        return DemoResult(result.returncode, result.stdout, result.stderr)

    return _run


@pytest.fixture
def expect_output(run_demo):
    """
    Fixture that runs the driver and asserts expected output.

    Usage:
        expect_output(["-s", "init"], "init(list_of(1, 2, 3)) = 1, 2\\n")
        expect_output(["-s", "map"], "10, 20", partial=True)
    """
    def _expect(args, expected: str, partial: bool = False):
        result = run_demo(*args)
        assert result.success, f"Demo failed:\n{result.stderr}"
        if partial:
            assert expected in result.stdout, \
                f"Output does not contain expected substring:\nExpected to find: {expected!r}\nIn output: {result.stdout!r}"
        else:
            assert result.stdout == expected, \
                f"Output mismatch:\nExpected: {expected!r}\nGot: {result.stdout!r}"

    return _expect


@pytest.fixture
def expect_demo_error(run_demo):
    """
    Fixture that verifies the driver fails with the expected error.

    Usage:
        expect_demo_error(["-s", "nope"], "unknown section")
    """
    def _expect(args, error_substring: str = None, returncode: int = 1):
        result = run_demo(*args)
        assert result.returncode == returncode, \
            f"Expected exit code {returncode} but got {result.returncode}.\nOutput: {result.stdout}{result.stderr}"
        if error_substring:
            assert error_substring.lower() in result.stderr.lower(), \
                f"Expected error containing '{error_substring}' but got:\n{result.stderr}"

    return _expect
