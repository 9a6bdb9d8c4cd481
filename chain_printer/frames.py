from __future__ import annotations

import traceback
from typing import Iterable

from chain_printer.constants import FRAME_LOCATION_INDENT, LINE_SEPARATOR
from chain_printer.models import Frame


def format_frame(frame: object) -> str:
    if isinstance(frame, Frame):
        return f"{frame.function}\n{FRAME_LOCATION_INDENT}{frame.filename}:{frame.lineno}"
    if isinstance(frame, traceback.FrameSummary):
        return f"{frame.name}\n{FRAME_LOCATION_INDENT}{frame.filename}:{frame.lineno}"
    return str(frame)


def format_stack(frames: Iterable[object]) -> str:
    return LINE_SEPARATOR.join(format_frame(frame) for frame in frames)
