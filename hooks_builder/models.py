"""
Core models for the hooks build pipeline.

Wire-facing models use aliases matching the compile service JSON
(``type``/``src`` on files, ``console``/``success`` on tasks). Python code
always uses the field names.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator


DEFAULT_OPTIONS = "-O3"
OUTPUT_FORMAT = "bc"


# ============================================================================
# Source units
# ============================================================================


class SourceKind(str, Enum):
    """Source languages accepted by the compile service."""

    JS = "js"
    TS = "ts"

    @property
    def suffix(self) -> str:
        return f".{self.value}"

    @classmethod
    def from_path(cls, path: Path) -> Optional["SourceKind"]:
        """Return the kind for a path's suffix, or None when unrecognized."""
        suffix = Path(path).suffix
        for kind in cls:
            if kind.suffix == suffix:
                return kind
        return None


class BuildUnit(BaseModel):
    """One compilable source file."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="File name including suffix")
    kind: SourceKind = Field(..., alias="type", description="Derived from the file suffix")
    options: str = Field(default=DEFAULT_OPTIONS, description="Compiler flags")
    source: str = Field(..., alias="src", description="UTF-8 source text")
    path: Optional[Path] = Field(default=None, exclude=True, description="Local path, never sent")

    @property
    def base_name(self) -> str:
        return self.name.split(".")[0] or Path(self.name).stem


class BuildRequest(BaseModel):
    """Request body for the compile service."""

    model_config = ConfigDict(populate_by_name=True)

    output_format: str = Field(default=OUTPUT_FORMAT, alias="output")
    compress: bool = True
    strip: bool = True
    units: List[BuildUnit] = Field(default_factory=list, alias="files")


# ============================================================================
# Service response
# ============================================================================


class TaskReport(BaseModel):
    """Outcome of one compilation stage."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    console_output: str = Field(default="", alias="console")
    succeeded: bool = Field(default=False, alias="success")

    @field_validator("succeeded", mode="before")
    @classmethod
    def _only_true_succeeds(cls, value):
        return value is True

    @field_validator("console_output", mode="before")
    @classmethod
    def _console_text(cls, value):
        return "" if value is None else value


class BuildResult(BaseModel):
    """Full compile service response."""

    model_config = ConfigDict(populate_by_name=True)

    succeeded: StrictBool = Field(..., alias="success")
    message: str = ""
    encoded_output: Optional[str] = Field(default=None, alias="output")
    tasks: List[TaskReport] = Field(default_factory=list)

    @field_validator("message", mode="before")
    @classmethod
    def _message_text(cls, value):
        return "" if value is None else value

    @property
    def failed_tasks(self) -> List[TaskReport]:
        return [task for task in self.tasks if not task.succeeded]


# ============================================================================
# Artifacts and outcomes
# ============================================================================


class Artifact(BaseModel):
    """Compiled module persisted to disk."""

    unit_name: str
    path: Path
    content_hash: str = Field(..., description="First 32 bytes of SHA-512, upper-case hex")
    size: int = Field(..., description="Artifact size in bytes")


class UnitState(str, Enum):
    """States of a single unit's build pipeline."""

    COLLECTED = "collected"
    ENCODED = "encoded"
    SENT = "sent"
    RESPONSE_OK = "response_ok"
    DECODED = "decoded"
    WRITTEN = "written"
    TASK_FAILED = "task_failed"
    LOG_WRITTEN = "log_written"
    TRANSPORT_ERROR = "transport_error"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (UnitState.WRITTEN, UnitState.FAILED)


@dataclass
class UnitOutcome:
    """Result of one unit's pipeline."""

    unit_name: str
    states: List[UnitState] = field(default_factory=lambda: [UnitState.COLLECTED])
    artifact: Optional[Artifact] = None
    error: Optional[Exception] = None

    @property
    def state(self) -> UnitState:
        return self.states[-1]

    @property
    def succeeded(self) -> bool:
        return self.state == UnitState.WRITTEN

    def advance(self, state: UnitState) -> None:
        self.states.append(state)


@dataclass
class BuildReport:
    """Outcomes of every unit in one build invocation, in collection order."""

    outcomes: List[UnitOutcome] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return all(outcome.succeeded for outcome in self.outcomes)

    @property
    def failures(self) -> List[UnitOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.succeeded]

    @property
    def artifacts(self) -> List[Artifact]:
        return [outcome.artifact for outcome in self.outcomes if outcome.artifact is not None]
