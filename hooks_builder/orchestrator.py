"""
Build orchestration.

Each unit runs its own pipeline::

    Collected -> Encoded -> Sent -> ResponseOk -> Decoded -> Written
                                 -> ResponseOk -> TaskFailed -> LogWritten -> Failed
                                 -> TransportError -> Failed

The blocking HTTP call runs in a worker thread so every unit of a directory
build is in flight at once. The output directory is created before any unit
starts, and the outcome of every unit is collected before returning.
"""

import asyncio
from pathlib import Path
from typing import Dict, List, Sequence, Union

from loguru import logger

from .artifacts import ensure_out_dir, write_failure, write_success
from .binary import decode_binary
from .collector import collect_file, collect_tree
from .compiler import Compiler
from .errors import CompileFailed, DuplicateArtifactName, HooksBuildError, InvalidExtension, ProtocolError, TransportError
from .models import BuildReport, BuildUnit, SourceKind, UnitOutcome, UnitState

PathLike = Union[str, Path]


def check_artifact_names(units: Sequence[BuildUnit]) -> None:
    """Raise DuplicateArtifactName when two units map to the same artifact file."""
    by_name: Dict[str, List[Path]] = {}
    for unit in units:
        by_name.setdefault(unit.base_name, []).append(unit.path or Path(unit.name))

    clashes = {name: paths for name, paths in by_name.items() if len(paths) > 1}
    if clashes:
        raise DuplicateArtifactName(clashes)


async def build_unit(unit: BuildUnit, out_dir: Path, compiler: Compiler) -> UnitOutcome:
    """Run one unit through encode, send, decode and write.

    Build errors are recorded on the outcome rather than raised.
    """
    outcome = UnitOutcome(unit_name=unit.name)
    try:
        outcome.advance(UnitState.ENCODED)
        outcome.advance(UnitState.SENT)
        try:
            result = await asyncio.to_thread(compiler.compile, [unit])
        except (TransportError, ProtocolError):
            outcome.advance(UnitState.TRANSPORT_ERROR)
            raise
        outcome.advance(UnitState.RESPONSE_OK)

        if not result.succeeded:
            outcome.advance(UnitState.TASK_FAILED)
            try:
                write_failure(out_dir, unit.base_name, result)
            except CompileFailed:
                outcome.advance(UnitState.LOG_WRITTEN)
                raise

        data = decode_binary(result.encoded_output or "")
        outcome.advance(UnitState.DECODED)
        outcome.artifact = write_success(out_dir, unit.base_name, result, data=data)
        outcome.advance(UnitState.WRITTEN)
    except HooksBuildError as e:
        logger.warning(f"Error building {unit.name}: {e}")
        outcome.error = e
        outcome.advance(UnitState.FAILED)
    else:
        logger.debug(f"{unit.name}: {' -> '.join(state.value for state in outcome.states)}")
    return outcome


async def build_file(path: PathLike, out_dir: PathLike, compiler: Compiler) -> BuildReport:
    """Build a single source file.

    The suffix is validated before anything is read or sent.

    Raises:
        InvalidExtension: ``path`` is not a .js or .ts file.
        SourceReadError: ``path`` could not be read.
    """
    path = Path(path)
    if SourceKind.from_path(path) is None:
        raise InvalidExtension(path)

    unit = collect_file(path)
    out_dir = ensure_out_dir(Path(out_dir))
    outcome = await build_unit(unit, out_dir, compiler)
    return BuildReport(outcomes=[outcome])


async def build_dir(root: PathLike, out_dir: PathLike, compiler: Compiler) -> BuildReport:
    """Build every source file under ``root``, one artifact per file.

    All units are sent concurrently. An empty tree produces an empty report
    without touching the network.

    Raises:
        DuplicateArtifactName: two sources share a base name; nothing is sent.
    """
    units = collect_tree(Path(root))
    if not units:
        logger.info(f"No source files found under {root}")
        return BuildReport()

    check_artifact_names(units)
    out_dir = ensure_out_dir(Path(out_dir))
    logger.info(f"Building {len(units)} unit(s) from {root}")
    outcomes = await asyncio.gather(*(build_unit(unit, out_dir, compiler) for unit in units))
    return BuildReport(outcomes=list(outcomes))
