from __future__ import annotations

import logging
from typing import Callable, Iterable

from chain_printer.capabilities import cause_of, is_causer, stack_of
from chain_printer.constants import CAUSE_SEPARATOR, LINE_SEPARATOR, NO_ERROR_TEXT
from chain_printer.frames import format_stack
from chain_printer.models import ChainWalk, StackLayer


def exception_chain(err: object) -> list[object]:
    chain: list[object] = []
    seen: set[int] = set()
    current: object | None = err
    while current is not None:
        current_id = id(current)
        if current_id in seen:
            break
        seen.add(current_id)
        chain.append(current)
        current = cause_of(current)
    return chain


def root_cause(err: object) -> object | None:
    chain = exception_chain(err)
    return chain[-1] if chain else None


def walk_stack_layers(err: object) -> ChainWalk:
    layers: list[StackLayer] = []
    current: object | None = err
    while current is not None:
        frames = stack_of(current)
        if frames is not None:
            layers.append(StackLayer(current, str(current), frames))
        if not is_causer(current):
            break
        current = cause_of(current)
    return ChainWalk(tuple(layers), current)


def walk_alternating_layers(err: object) -> ChainWalk | None:
    """Collect stack layers from a chain that alternates stack and plain wrappers.

    Returns None when a non-terminal error breaks the alternation.
    """
    layers: list[StackLayer] = []
    expect_stack = True
    current: object | None = err
    while current is not None:
        frames = stack_of(current)
        if frames is not None:
            layers.append(StackLayer(current, str(current), frames))
        if not is_causer(current):
            break
        if (frames is not None) != expect_stack:
            logging.debug(
                "Stack alternation broken at %s (expected stack: %s)",
                type(current).__name__,
                expect_stack,
            )
            return None
        current = cause_of(current)
        expect_stack = not expect_stack
    return ChainWalk(tuple(layers), current)


def local_message(curr: object, next_err: object) -> str:
    message = str(curr)
    suffix = CAUSE_SEPARATOR + str(next_err)
    if message.endswith(suffix):
        return message[: -len(suffix)]
    return message


def format_verbose(
    err: object,
    stack_formatter: Callable[[Iterable[object]], str] = format_stack,
) -> str:
    if err is None:
        return NO_ERROR_TEXT
    lines: list[str] = []
    cause: object | None = None
    for item in reversed(exception_chain(err)):
        if cause is None:
            lines.append(str(item))
        elif str(item) != str(cause):
            lines.append(local_message(item, cause))
        frames = stack_of(item)
        if frames:
            lines.append(stack_formatter(frames))
        cause = item
    return LINE_SEPARATOR.join(lines)
