"""
Shared fixtures for the build pipeline tests.

Provides an in-memory compiler (no network) and helpers for building
service responses.
"""
import base64
import threading
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

import pytest

from hooks_builder.models import BuildResult, BuildUnit


def encoded(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def success_result(data: bytes = b"\x00asm\x01\x00\x00\x00") -> BuildResult:
    return BuildResult(
        succeeded=True,
        message="ok",
        encoded_output=encoded(data),
        tasks=[{"name": "build", "console": "", "success": True}],
    )


def failure_result(console: str = "error A", message: str = "Build failed") -> BuildResult:
    return BuildResult(
        succeeded=False,
        message=message,
        tasks=[
            {"name": "optimize", "console": "all good", "success": True},
            {"name": "build", "console": console, "success": False},
        ],
    )


class FakeCompiler:
    """Compiler double recording every call.

    ``responses`` maps unit names to a BuildResult or an exception to raise;
    unknown names get ``default``.
    """

    def __init__(self, responses: Optional[Dict[str, object]] = None, default: Optional[object] = None):
        self.responses = responses or {}
        self.default = default if default is not None else success_result()
        self.calls: List[List[str]] = []
        self._lock = threading.Lock()

    def compile(self, units: Sequence[BuildUnit]) -> BuildResult:
        with self._lock:
            self.calls.append([unit.name for unit in units])
        response = self.responses.get(units[0].name, self.default)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def fake_compiler() -> FakeCompiler:
    return FakeCompiler()


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[Dict[str, str]], Path]:
    """Write ``{relative_path: content}`` under tmp_path/src and return the root."""

    def _make(files: Dict[str, str]) -> Path:
        root = tmp_path / "src"
        root.mkdir(exist_ok=True)
        for rel, content in files.items():
            target = root / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return root

    return _make
