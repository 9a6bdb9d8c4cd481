from __future__ import annotations

CAUSE_SEPARATOR = ": "
FRAME_LOCATION_INDENT = "\t"
LINE_SEPARATOR = "\n"
NO_ERROR_TEXT = "<nil>"
