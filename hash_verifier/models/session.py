"""Comparison session lifecycle."""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
import uuid

from .common import ComparisonMode, HashAlgorithm
from .inputs import InputFile
from .report import Report


class ComparisonState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    COMPUTING = "computing"
    COMPARING = "comparing"
    REPORTED = "reported"
    ERROR = "error"


_TRANSITIONS: dict[ComparisonState, set[ComparisonState]] = {
    ComparisonState.IDLE: {ComparisonState.VALIDATING},
    ComparisonState.VALIDATING: {ComparisonState.COMPUTING, ComparisonState.ERROR},
    ComparisonState.COMPUTING: {ComparisonState.COMPARING, ComparisonState.ERROR},
    ComparisonState.COMPARING: {ComparisonState.REPORTED},
    ComparisonState.REPORTED: {ComparisonState.VALIDATING},
    ComparisonState.ERROR: {ComparisonState.VALIDATING},
}

BUSY_STATES = frozenset({
    ComparisonState.VALIDATING,
    ComparisonState.COMPUTING,
    ComparisonState.COMPARING,
})


class ComparisonSession(BaseModel):
    id: str = Field(default_factory=lambda: uuid.uuid4().hex[:8])
    state: ComparisonState = ComparisonState.IDLE
    generation: int = 0
    report: Optional[Report] = None
    error: Optional[str] = None
    updated_at: datetime = Field(default_factory=lambda: datetime.now(tz=timezone.utc))

    @classmethod
    def create(cls) -> "ComparisonSession":
        return cls()

    @property
    def busy(self) -> bool:
        return self.state in BUSY_STATES

    def begin(self) -> int:
        """Start a new request, dropping any previous report or error."""
        self.advance(ComparisonState.VALIDATING)
        self.generation += 1
        self.report = None
        self.error = None
        return self.generation

    def advance(self, state: ComparisonState, report: Optional[Report] = None) -> None:
        if state not in _TRANSITIONS[self.state]:
            raise ValueError(f"Illegal transition {self.state.value} -> {state.value}")
        self.state = state
        if report is not None:
            self.report = report
        self.updated_at = datetime.now(tz=timezone.utc)

    def fail(self, message: str) -> None:
        self.advance(ComparisonState.ERROR)
        self.error = message

    def abort(self, message: str) -> None:
        """End a failed request: Error where the lifecycle allows it, Idle otherwise."""
        if ComparisonState.ERROR in _TRANSITIONS[self.state]:
            self.fail(message)
        else:
            self.reset()
            self.error = message

    def reset(self) -> None:
        # Bumping the generation orphans any request still in flight.
        self.generation += 1
        self.state = ComparisonState.IDLE
        self.report = None
        self.error = None
        self.updated_at = datetime.now(tz=timezone.utc)

    def is_current(self, generation: int) -> bool:
        return self.generation == generation


class ComparisonRequest(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    mode: ComparisonMode = ComparisonMode.FILE_VS_FILE
    algorithm: HashAlgorithm = HashAlgorithm.MD5
    source: Optional[InputFile] = None
    comparison: Optional[InputFile] = None
    expected_hash: str = ""
