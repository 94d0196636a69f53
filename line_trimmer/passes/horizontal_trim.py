"""
HorizontalTrimPass
==================

Strips whitespace from both ends of every line and, when a least indent is
supplied, re-indents each line relative to it.

Rules per line:

+------------------------------------------------+-------------------------------+
| Condition                                      | Result                        |
+================================================+===============================+
| ``least_indent`` is None                       | ``line.strip()``              |
+------------------------------------------------+-------------------------------+
| stripped content is 0 or 1 characters long     | ``line.strip()``              |
+------------------------------------------------+-------------------------------+
| otherwise                                      | ``" " * (indent - least)``    |
|                                                | + ``line.strip()``            |
+------------------------------------------------+-------------------------------+

A lone character is never re-indented, even when its neighbours are.  The
re-added indentation is always spaces; tabs in the original prefix are not
kept.
"""
from __future__ import annotations

from typing import List, Optional

from ..models import TrimmedLines
from .least_indent import WHITESPACE, indent_width


class HorizontalTrimPass:
    """Per-line trimming with optional re-indentation."""

    def run(self, lines: List[str], least_indent: Optional[int] = None) -> TrimmedLines:
        """
        Trim every line and record the occupied range.

        Parameters
        ----------
        lines:
            The input split on ``"\\n"``.
        least_indent:
            Result of :class:`~line_trimmer.passes.least_indent.LeastIndentPass`,
            or *None* to skip re-indentation.

        Returns
        -------
        TrimmedLines
            Same number of lines as the input.
        """
        result = TrimmedLines()
        for idx, line in enumerate(lines):
            value = self._trim(line, least_indent)

            if value:
                if result.first_occupied is None:
                    result.first_occupied = idx
                result.last_occupied = idx

            result.lines.append(value)
        return result

    @staticmethod
    def _trim(line: str, least_indent: Optional[int]) -> str:
        trimmed = line.strip(WHITESPACE)
        if least_indent is None or len(trimmed) <= 1:
            return trimmed
        return " " * (indent_width(line) - least_indent) + trimmed
