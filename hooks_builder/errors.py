"""Error taxonomy for the build pipeline."""

from pathlib import Path
from typing import Dict, List, Optional


class HooksBuildError(Exception):
    """Base class for every error raised by the build core."""


class ConfigError(HooksBuildError):
    """Required configuration (service host, etc.) is missing or invalid."""


class InvalidExtension(HooksBuildError):
    """Source file does not carry a recognized source suffix."""

    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(f"Invalid file type: {self.path.name}. Must be a .js or .ts file")


class SourceReadError(HooksBuildError):
    """Reading a source file failed."""

    def __init__(self, path: Path, cause: OSError):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Failed to read {self.path}: {cause}")


class ArtifactWriteError(HooksBuildError):
    """Writing an artifact or log file failed."""

    def __init__(self, path: Path, cause: OSError):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Failed to write {self.path}: {cause}")


class TransportError(HooksBuildError):
    """Compile service unreachable or answered with a non-success status."""


class ProtocolError(HooksBuildError):
    """Compile service response is malformed or incomplete."""


class DecodeError(HooksBuildError):
    """Encoded binary payload could not be decoded."""


class CompileFailed(HooksBuildError):
    """Compile service reported a failed build."""

    def __init__(self, message: str, diagnostics: str = "", log_path: Optional[Path] = None):
        self.message = message
        self.diagnostics = diagnostics
        self.log_path = log_path
        super().__init__(message or "Build failed")


class DuplicateArtifactName(HooksBuildError):
    """Several source files would write the same artifact."""

    def __init__(self, clashes: Dict[str, List[Path]]):
        self.clashes = clashes
        details = "; ".join(
            f"{name}: {', '.join(str(p) for p in paths)}" for name, paths in sorted(clashes.items())
        )
        super().__init__(f"Source files share an artifact name: {details}")
