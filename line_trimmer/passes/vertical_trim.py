"""
VerticalTrimPass
================

Removes the leading and/or trailing runs of blank lines around the occupied
range found by :class:`~line_trimmer.passes.horizontal_trim.HorizontalTrimPass`.
Blank lines between occupied lines are always kept.
"""
from __future__ import annotations

from typing import List

from ..models import TrimmedLines


class VerticalTrimPass:
    """Slices a :class:`TrimmedLines` down to its occupied range."""

    def run(
        self,
        trimmed: TrimmedLines,
        trim_start: bool = True,
        trim_end: bool = True,
    ) -> List[str]:
        """
        Parameters
        ----------
        trimmed:
            Output of the horizontal pass.  Must not be blank.
        trim_start:
            Drop lines before ``first_occupied``.
        trim_end:
            Drop lines after ``last_occupied``.

        Returns
        -------
        List[str]
        """
        if trimmed.is_blank:
            raise ValueError("VerticalTrimPass needs at least one occupied line")

        start = trimmed.first_occupied if trim_start else 0
        end = trimmed.last_occupied + 1 if trim_end else len(trimmed.lines)
        return trimmed.lines[start:end]
