from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ErrorKind(Enum):
    NOT_FOUND = "not_found"
    PARSE_ERROR = "parse_error"
    IO_ERROR = "io_error"


@dataclass(frozen=True)
class Outcome:
    """
    The result of an operation that can fail in an expected way.

    Callers check `ok` before touching `value`; `message` is always suitable
    for showing to the user.
    """
    value: Any = None
    error: Optional[ErrorKind] = None
    message: str = ""

    @classmethod
    def success(cls, value: Any = None, message: str = "") -> Outcome:
        return cls(value=value, message=message)

    @classmethod
    def failure(cls, error: ErrorKind, message: str) -> Outcome:
        return cls(error=error, message=message)

    @property
    def ok(self) -> bool:
        return self.error is None
