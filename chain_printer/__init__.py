from chain_printer.capabilities import Causer, StackTracer
from chain_printer.error_utils import (
    exception_chain,
    format_verbose,
    local_message,
    root_cause,
    walk_alternating_layers,
    walk_stack_layers,
)
from chain_printer.frames import format_frame, format_stack
from chain_printer.models import ChainWalk, Frame, StackLayer
from chain_printer.printer import ChainPrinter, print_single_stack, print_stack_with_messages
from chain_printer.stack_utils import has_suffix, suffix_overlap

__all__ = [
    "ChainPrinter",
    "ChainWalk",
    "Causer",
    "Frame",
    "StackLayer",
    "StackTracer",
    "exception_chain",
    "format_frame",
    "format_stack",
    "format_verbose",
    "has_suffix",
    "local_message",
    "print_single_stack",
    "print_stack_with_messages",
    "root_cause",
    "suffix_overlap",
    "walk_alternating_layers",
    "walk_stack_layers",
]
