from __future__ import annotations

import traceback
from dataclasses import dataclass


@dataclass(frozen=True)
class Frame:
    function: str
    filename: str
    lineno: int

    @classmethod
    def from_summary(cls, summary: traceback.FrameSummary) -> Frame:
        return cls(summary.name, summary.filename, summary.lineno or 0)


@dataclass(frozen=True)
class StackLayer:
    error: object
    message: str
    frames: tuple[object, ...]


@dataclass(frozen=True)
class ChainWalk:
    layers: tuple[StackLayer, ...]
    root: object | None
