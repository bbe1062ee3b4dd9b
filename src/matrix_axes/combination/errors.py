"""Error types for the combination module.

A single exception class carries an error code plus a context mapping,
so callers branch on ``err.code`` instead of on exception subclasses.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Mapping


class CombinationErrorCode(Enum):
    """Failure modes surfaced by combination construction and codecs."""

    INVALID_ARGUMENT = auto()
    PARSE_ERROR = auto()
    UNSUPPORTED_OPERATION = auto()
    KEY_NOT_FOUND = auto()


@dataclass(eq=False)
class CombinationError(Exception):
    """Structured error raised by axes, combinations and digest helpers."""

    code: CombinationErrorCode
    ctx: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        if self.ctx is None:
            self.ctx = {}
        super().__init__(self.code.name)

    def __str__(self) -> str:
        if not self.ctx:
            return self.code.name
        parts = ", ".join(f"{k}={v!r}" for k, v in self.ctx.items())
        return f"{self.code.name}: {parts}"
