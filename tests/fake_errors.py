from __future__ import annotations

import traceback

from chain_printer.models import Frame

EOF_ERROR = EOFError("EOF")


class Fundamental(Exception):
    def __init__(self, message: str, frames: tuple[Frame, ...]) -> None:
        super().__init__(message)
        self._frames = frames

    def stack_trace(self) -> tuple[Frame, ...]:
        return self._frames


class WithMessage(Exception):
    def __init__(self, cause: BaseException, message: str) -> None:
        super().__init__(f"{message}: {cause}")
        self._cause = cause

    def cause(self) -> BaseException:
        return self._cause


class WithStack(Exception):
    def __init__(self, cause: BaseException, frames: tuple[Frame, ...]) -> None:
        super().__init__(str(cause))
        self._cause = cause
        self._frames = frames

    def cause(self) -> BaseException:
        return self._cause

    def stack_trace(self) -> tuple[Frame, ...]:
        return self._frames


def callers(skip: int = 0) -> tuple[Frame, ...]:
    summaries = traceback.extract_stack()[: -(skip + 1)]
    return tuple(Frame.from_summary(summary) for summary in reversed(summaries))


def wrap(err: BaseException, message: str, frames: tuple[Frame, ...] | None = None) -> WithStack:
    if frames is None:
        frames = callers(skip=1)
    return WithStack(WithMessage(err, message), frames)
