"""Source collection - turns a file or directory tree into build units."""

from pathlib import Path
from typing import List, Union

from loguru import logger

from .errors import InvalidExtension, SourceReadError
from .models import BuildUnit, DEFAULT_OPTIONS, SourceKind


def _read_source(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        cause = e if isinstance(e, OSError) else OSError(str(e))
        raise SourceReadError(path, cause) from e


def _make_unit(path: Path, kind: SourceKind) -> BuildUnit:
    return BuildUnit(
        name=path.name,
        kind=kind,
        options=DEFAULT_OPTIONS,
        source=_read_source(path),
        path=path,
    )


def collect_file(path: Union[str, Path]) -> BuildUnit:
    """Collect a single source file.

    Raises:
        InvalidExtension: the suffix is not a recognized source kind.
        SourceReadError: the file could not be read.
    """
    path = Path(path)
    kind = SourceKind.from_path(path)
    if kind is None:
        raise InvalidExtension(path)
    return _make_unit(path, kind)


def collect_tree(root: Union[str, Path]) -> List[BuildUnit]:
    """Recursively collect every recognized source file under ``root``.

    Entries are visited in sorted name order; subdirectories are descended
    depth-first where they sort. Files with unrecognized suffixes and
    symlinked directories are skipped.
    """
    root = Path(root)
    units: List[BuildUnit] = []

    try:
        entries = sorted(root.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise SourceReadError(root, e) from e

    for entry in entries:
        if entry.is_symlink() and entry.is_dir():
            logger.debug(f"Skipping {entry}: symlinked directory")
            continue
        if entry.is_dir():
            units.extend(collect_tree(entry))
            continue

        kind = SourceKind.from_path(entry)
        if kind is None:
            logger.debug(f"Skipping {entry}: unrecognized extension")
            continue
        units.append(_make_unit(entry, kind))

    return units
