from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class CompileState(str, Enum):
    SKIPPED = "skipped"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class CompileOutcome:
    """
    Result of one compile attempt.
    `stderr` is the raw compiler error stream, empty when nothing was written.
    """
    state: CompileState
    stderr: str = ""
    command: Tuple[str, ...] = ()
    returncode: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.state != CompileState.FAILED

    @property
    def skipped(self) -> bool:
        return self.state == CompileState.SKIPPED
