# typed_json/core/types/results.py

"""Result types for callers that prefer explicit values over exceptions."""

# Standard library imports
from typing import Callable
from typing import Literal
from typing import NoReturn

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict

# Local imports
from typed_json.core.domain.enums import ErrorKind
from typed_json.core.domain.errors import JsonReadError

# ============================================================================
# Result Monad Pattern
# ============================================================================


class Ok[T](BaseModel):
    """Success result."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    type: Literal["ok"] = "ok"
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def map[U](self, func: Callable[[T], U]) -> "Ok[U]":
        """Map function over success value."""
        return Ok(value=func(self.value))

    def flat_map[U](self, func: Callable[[T], "Result[U]"]) -> "Result[U]":
        """Flat map for chaining operations."""
        return func(self.value)

    def unwrap(self) -> T:
        return self.value

    def unwrap_or[U](self, default: U) -> T:
        return self.value


class Err(BaseModel):
    """Error result carrying the failure kind and location."""

    model_config = ConfigDict(frozen=True)

    type: Literal["err"] = "err"
    error: str
    kind: ErrorKind
    path: str | None = None

    @classmethod
    def from_exception(cls, exc: JsonReadError) -> "Err":
        return cls(error=exc.message, kind=exc.kind, path=exc.path)

    @property
    def is_ok(self) -> bool:
        return False

    def map[U](self, func: Callable[[object], U]) -> "Err":
        """Map has no effect on errors."""
        return self

    def flat_map[U](self, func: Callable[[object], "Result[U]"]) -> "Err":
        """Flat map has no effect on errors."""
        return self

    def unwrap(self) -> NoReturn:
        raise ValueError(f"Called unwrap on Err ({self.kind.value}): {self.error}")

    def unwrap_or[U](self, default: U) -> U:
        """Return a caller-chosen default; nothing is defaulted implicitly."""
        return default


type Result[T] = Ok[T] | Err


__all__ = [
    "Ok",
    "Err",
    "Result",
]
