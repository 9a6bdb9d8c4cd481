from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class Causer(Protocol):
    def cause(self) -> object | None: ...


@runtime_checkable
class StackTracer(Protocol):
    def stack_trace(self) -> Sequence[object]: ...


def _native_cause(err: BaseException) -> BaseException | None:
    if err.__cause__ is not None:
        return err.__cause__
    if not err.__suppress_context__ and err.__context__ is not None:
        return err.__context__
    return None


def is_causer(err: object) -> bool:
    if isinstance(err, Causer):
        return True
    return isinstance(err, BaseException) and _native_cause(err) is not None


def cause_of(err: object) -> object | None:
    if isinstance(err, Causer):
        return err.cause()
    if isinstance(err, BaseException):
        return _native_cause(err)
    return None


def stack_of(err: object) -> tuple[object, ...] | None:
    """Frames of a stack-bearing error, innermost first; None when it captured no stack."""
    if isinstance(err, StackTracer):
        return tuple(err.stack_trace())
    return None
