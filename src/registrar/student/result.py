"""
Result values returned across the service boundary.

Presentation code branches on ``Ok`` / ``Err`` instead of catching
store exceptions:

    result = service.add(name, email, age, course)
    if result.ok:
        ...
    else:
        show_error(result.message)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from registrar.student.errors import NotFoundError, StudentError, ValidationError

T = TypeVar("T")


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T
    ok = True


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    message: str
    ok = False

    @classmethod
    def from_exception(cls, exc: StudentError) -> "Err":
        if isinstance(exc, NotFoundError):
            return cls(ErrorKind.NOT_FOUND, exc.message)
        if isinstance(exc, ValidationError):
            return cls(ErrorKind.VALIDATION, exc.message)
        raise TypeError(f"Unsupported error type: {type(exc).__name__}")


Result = Ok[T] | Err
