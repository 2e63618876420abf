"""
Integration tests for loading the shipped proto files.

The proto modules must import from any working directory, not only from the
project checkout.
"""

import os
import subprocess
import sys
from pathlib import Path

import pytest

import demo_app
from demo_app.adapters.grpc import stubs

IMPORT_SCRIPT = """
try:
    import demo_app
except ModuleNotFoundError:
    print("not-installed")
    raise SystemExit(0)
from demo_app.adapters.grpc.stubs import hello_pb2
print(hello_pb2.HelloRequest(name="World").name)
"""


class TestProtoLoading:
    """Tests for proto module resolution."""

    def test_proto_root_is_package_parent(self) -> None:
        """Proto include root is the directory containing the demo_app package."""
        assert Path(stubs.PROTO_ROOT).resolve() == Path(demo_app.__file__).resolve().parent.parent
        assert stubs.PROTO_ROOT in sys.path

    def test_import_from_foreign_directory(self, tmp_path: Path) -> None:
        """An installed package loads its protos when started outside the checkout."""
        env = {key: value for key, value in os.environ.items() if key != "PYTHONPATH"}

        result = subprocess.run(
            [sys.executable, "-c", IMPORT_SCRIPT],
            cwd=tmp_path,
            env=env,
            capture_output=True,
            text=True,
            timeout=60,
        )

        if result.stdout.strip() == "not-installed":
            pytest.skip("demo_app is not installed in this interpreter")
        assert result.returncode == 0, result.stderr
        assert result.stdout.strip() == "World"


class TestTestLayout:
    """Tests for the test tree itself."""

    def test_test_module_basenames_are_unique(self) -> None:
        """Test modules in different directories never share a basename."""
        tests_dir = Path(__file__).resolve().parent.parent
        names = [path.name for path in tests_dir.rglob("test_*.py")]
        assert len(names) == len(set(names))
