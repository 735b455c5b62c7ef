import hashlib
from pathlib import Path
from typing import Callable, Optional

from loguru import logger

from hooks_builder.binary import decode_binary
from hooks_builder.errors import ArtifactWriteError, CompileFailed
from hooks_builder.models import Artifact, BuildResult

HASH_BYTES = 32
ARTIFACT_SUFFIX = ".bc"
LOG_SUFFIX = ".log"


def content_hash(data: bytes) -> str:
    """SHA-512 truncated to its first 32 bytes, as upper-case hex."""
    return hashlib.sha512(data).digest()[:HASH_BYTES].hex().upper()


def format_diagnostics(result: BuildResult) -> str:
    """Newline-joined console output of every failed task."""
    return "\n".join(task.console_output for task in result.failed_tasks)


def ensure_out_dir(out_dir: Path) -> Path:
    """Create the output directory if absent; must run before any write."""
    out_dir = Path(out_dir)
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ArtifactWriteError(out_dir, e) from e
    return out_dir


def _write(path: Path, write: Callable[[Path], object]) -> None:
    try:
        write(path)
    except OSError as e:
        raise ArtifactWriteError(path, e) from e


def write_failure(out_dir: Path, base_name: str, result: BuildResult) -> None:
    """Persist failed-task diagnostics to ``<base_name>.log`` then raise CompileFailed."""
    out_dir = ensure_out_dir(out_dir)
    log_path = out_dir / f"{base_name}{LOG_SUFFIX}"
    diagnostics = format_diagnostics(result)

    _write(log_path, lambda p: p.write_text(diagnostics, encoding="utf-8"))
    logger.warning(f"Build of {base_name} failed, diagnostics written to {log_path}")

    raise CompileFailed(result.message, diagnostics=diagnostics, log_path=log_path)


def write_success(
    out_dir: Path,
    base_name: str,
    result: BuildResult,
    data: Optional[bytes] = None,
) -> Artifact:
    """Decode the module, write ``<base_name>.bc`` and return its Artifact.

    ``data`` may carry bytes already decoded by the caller.
    """
    if data is None:
        data = decode_binary(result.encoded_output or "")

    out_dir = ensure_out_dir(out_dir)
    artifact_path = out_dir / f"{base_name}{ARTIFACT_SUFFIX}"
    _write(artifact_path, lambda p: p.write_bytes(data))

    artifact = Artifact(
        unit_name=base_name,
        path=artifact_path,
        content_hash=content_hash(data),
        size=len(data),
    )
    logger.info(f"Wrote {artifact.path} ({artifact.size}b, hash {artifact.content_hash})")
    return artifact
