# echotext/codec/result.py
# Success/failure values for chaining decode stages without exceptions

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


class DecodeStage(IntEnum):
    """Decode pipeline stages, ordered by how far a token got."""
    BASE64 = 1
    DECOMPRESSION = 2
    JSON = 3
    STRUCTURE = 4


@dataclass(frozen=True)
class DecodeError:
    stage: DecodeStage
    detail: str


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True

    def bind(self, fn: Callable[[T], "Result[U]"]) -> "Result[U]":
        return fn(self.value)

    def unwrap_or(self, default: Any) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    error: DecodeError

    @property
    def ok(self) -> bool:
        return False

    def bind(self, fn: Callable[[Any], "Result[U]"]) -> "Err":
        return self

    def unwrap_or(self, default: Any) -> Any:
        return default


Result = Union[Ok[T], Err]


def attempt(stage: DecodeStage, fn: Callable[..., T], *args: Any,
            errors: tuple[type[BaseException], ...] = (ValueError,)) -> "Result[T]":
    """Run fn, turning the listed exceptions into an Err tagged with stage."""
    try:
        return Ok(fn(*args))
    except errors as e:
        return Err(DecodeError(stage, str(e) or type(e).__name__))


def fail(stage: DecodeStage, detail: str) -> Err:
    return Err(DecodeError(stage, detail))
