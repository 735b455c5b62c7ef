"""Build pipeline for hook modules compiled by the remote compile service."""

from .collector import collect_file, collect_tree
from .compiler import Compiler, RemoteCompiler
from .orchestrator import build_dir, build_file, build_unit

__all__ = [
    "Compiler",
    "RemoteCompiler",
    "build_dir",
    "build_file",
    "build_unit",
    "collect_file",
    "collect_tree",
]
