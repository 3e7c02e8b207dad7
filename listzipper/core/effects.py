"""Effects — small Applicative instances for traverse and the deduplication log.

Invariants:
    - OPTION: one NOTHING makes the combined result NOTHING
    - VALIDATION: Invalid results combine by concatenating errors, left operand first
    - LOGGER: logs concatenate left operand first; never fails
    - NOTHING is a singleton, like maybe_zipper.NOT_Z

Design Decisions:
    - Effect instances are plain objects satisfying capabilities.Applicative, passed to
      traverse explicitly instead of being looked up from the value type
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")
L = TypeVar("L")


# ─── Option ──────────────────────────────────────────────────────

@dataclass(frozen=True)
class Some(Generic[T]):
    value: T


class Nothing:
    _instance: "Nothing | None" = None

    def __new__(cls) -> "Nothing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __reduce__(self):
        return (Nothing, ())

    def __repr__(self) -> str:
        return "NOTHING"


NOTHING = Nothing()

Option = Union[Some[T], Nothing]


class OptionEffect:
    def pure(self, value: T) -> Some[T]:
        return Some(value)

    def map2(self, fn: Callable[[Any, Any], Any], fa: Option, fb: Option) -> Option:
        match (fa, fb):
            case (Some(value=a), Some(value=b)):
                return Some(fn(a, b))
            case _:
                return NOTHING


OPTION = OptionEffect()


# ─── Validation ──────────────────────────────────────────────────

@dataclass(frozen=True)
class Valid(Generic[T]):
    value: T


@dataclass(frozen=True)
class Invalid:
    errors: tuple


Validated = Union[Valid[T], Invalid]


class ValidationEffect:
    def pure(self, value: T) -> Valid[T]:
        return Valid(value)

    def map2(self, fn: Callable[[Any, Any], Any], fa: Validated, fb: Validated) -> Validated:
        match (fa, fb):
            case (Valid(value=a), Valid(value=b)):
                return Valid(fn(a, b))
            case (Invalid(errors=left), Invalid(errors=right)):
                return Invalid(left + right)
            case (Invalid(), _):
                return fa
            case _:
                return fb


VALIDATION = ValidationEffect()


# ─── Logger ──────────────────────────────────────────────────────

@dataclass(frozen=True)
class Logger(Generic[L, T]):
    """A value together with the log produced while computing it."""
    logs: tuple[L, ...]
    value: T


def log1(entry: L, value: T) -> Logger[L, T]:
    return Logger((entry,), value)


class LoggerEffect:
    def pure(self, value: T) -> Logger[Any, T]:
        return Logger((), value)

    def map2(self, fn: Callable[[Any, Any], Any], fa: Logger, fb: Logger) -> Logger:
        return Logger(fa.logs + fb.logs, fn(fa.value, fb.value))


LOGGER = LoggerEffect()
