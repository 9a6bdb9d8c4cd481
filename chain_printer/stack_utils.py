from __future__ import annotations

from typing import Sequence


def has_suffix(inner: Sequence[object], outer: Sequence[object]) -> bool:
    """Return True if ``inner`` ends with the stack captured by ``outer``.

    Frames are compared from the tails. The match holds only when the walk
    stops exactly on ``outer[0]``: that frame is the capture site inside the
    enclosing function and sits on a different line than the matching frame
    of ``inner``. An empty ``outer`` never matches, and neither does an
    ``outer`` whose every frame equals the tail of ``inner``.
    """
    outer_index = len(outer) - 1
    inner_index = len(inner) - 1
    while outer_index >= 0 and inner_index >= 0:
        if outer[outer_index] != inner[inner_index]:
            break
        outer_index -= 1
        inner_index -= 1
    return outer_index == 0 and inner_index >= 0


def suffix_overlap(inner: Sequence[object], outer: Sequence[object]) -> int:
    # The capture-site frame of ``outer`` shadows the unmatched frame of ``inner``.
    if has_suffix(inner, outer):
        return len(outer)
    return 0
