from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Iterable

from chain_printer.constants import LINE_SEPARATOR
from chain_printer.error_utils import (
    format_verbose,
    local_message,
    walk_alternating_layers,
    walk_stack_layers,
)
from chain_printer.frames import format_stack
from chain_printer.models import StackLayer
from chain_printer.stack_utils import has_suffix, suffix_overlap


class ChainPrinter:
    def __init__(
        self,
        verbose_formatter: Callable[[object], str] | None = None,
        stack_formatter: Callable[[Iterable[object]], str] = format_stack,
    ) -> None:
        self._format_stack = stack_formatter
        self._format_verbose = verbose_formatter or self._default_verbose

    def _default_verbose(self, err: object) -> str:
        return format_verbose(err, stack_formatter=self._format_stack)

    def print_single_stack(self, err: object) -> str:
        """Print every message once, then the longest stack trace of the chain.

        Falls back to the verbose rendering unless each enclosing stack is a
        suffix of the stack it wraps.
        """
        walk = walk_stack_layers(err)
        if not walk.layers:
            logging.debug("No stack traces in error chain; using verbose format.")
            return self._format_verbose(err)
        layers = walk.layers
        for index in range(len(layers) - 1, 0, -1):
            if not has_suffix(layers[index].frames, layers[index - 1].frames):
                logging.debug(
                    "Stack of %s does not continue the stack of %s; using verbose format.",
                    type(layers[index - 1].error).__name__,
                    type(layers[index].error).__name__,
                )
                return self._format_verbose(err)

        layers = _with_local_messages(layers, walk.root)
        lines = _root_lines(layers, walk.root)
        lines.extend(layer.message for layer in reversed(layers))
        stack_text = self._format_stack(layers[-1].frames)
        if stack_text:
            lines.append(stack_text)
        return LINE_SEPARATOR.join(lines)

    def print_stack_with_messages(self, err: object) -> str:
        """Print each message directly above the part of the stack it annotates.

        Frames already shown by an enclosing layer are dropped from the inner
        layer. Falls back to the verbose rendering unless the chain alternates
        between stack-bearing and plain errors.
        """
        walk = walk_alternating_layers(err)
        if walk is None or not walk.layers:
            logging.debug("Error chain is not an alternating stack chain; using verbose format.")
            return self._format_verbose(err)

        layers = _with_local_messages(_trim_shared_frames(walk.layers), walk.root)
        blocks = _root_lines(layers, walk.root)
        for layer in reversed(layers):
            stack_text = self._format_stack(layer.frames)
            if stack_text:
                blocks.append(f"{layer.message}{LINE_SEPARATOR}{stack_text}")
            else:
                blocks.append(layer.message)
        return LINE_SEPARATOR.join(blocks)


def _trim_shared_frames(layers: tuple[StackLayer, ...]) -> tuple[StackLayer, ...]:
    trimmed = [layers[0]]
    for outer, inner in zip(layers, layers[1:]):
        overlap = suffix_overlap(inner.frames, outer.frames)
        if overlap:
            inner = replace(inner, frames=inner.frames[: len(inner.frames) - overlap])
        trimmed.append(inner)
    return tuple(trimmed)


def _with_local_messages(
    layers: tuple[StackLayer, ...], root: object | None
) -> tuple[StackLayer, ...]:
    updated = [
        replace(layer, message=local_message(layer.error, inner.error))
        for layer, inner in zip(layers, layers[1:])
    ]
    innermost = layers[-1]
    if root is not None:
        innermost = replace(innermost, message=local_message(innermost.error, root))
    updated.append(innermost)
    return tuple(updated)


def _root_lines(layers: tuple[StackLayer, ...], root: object | None) -> list[str]:
    if root is None:
        return []
    root_message = str(root)
    if root_message == layers[-1].message:
        return []
    return [root_message]


_DEFAULT_PRINTER = ChainPrinter()


def print_single_stack(err: object) -> str:
    return _DEFAULT_PRINTER.print_single_stack(err)


def print_stack_with_messages(err: object) -> str:
    return _DEFAULT_PRINTER.print_stack_with_messages(err)
