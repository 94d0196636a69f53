"""
LineTrimmer
===========

Orchestrates the trimming pipeline and returns the normalised text.

Pipeline stages:

1. :class:`~line_trimmer.passes.least_indent.LeastIndentPass`
   – Find the least indent among non-blank lines (skipped when
   ``trim_left_to_least_indent`` is off).
2. :class:`~line_trimmer.passes.horizontal_trim.HorizontalTrimPass`
   – Strip each line and re-indent it relative to the least indent.
3. :class:`~line_trimmer.passes.vertical_trim.VerticalTrimPass`
   – Drop leading / trailing blank line blocks.

The input is split on ``"\\n"`` once and the same list feeds every stage.
An input with no occupied line short-circuits to ``""`` before stage 3.
"""
from __future__ import annotations

import logging
from typing import Mapping, Optional, Union

from ..models import TrimConfig
from ..passes.horizontal_trim import HorizontalTrimPass
from ..passes.least_indent import LeastIndentPass
from ..passes.vertical_trim import VerticalTrimPass

logger = logging.getLogger(__name__)

ConfigLike = Union[TrimConfig, Mapping[str, Optional[bool]], None]


class LineTrimmer:
    """
    Reusable trimmer bound to one resolved :class:`TrimConfig`.

    Parameters
    ----------
    config:
        A ``TrimConfig``, a mapping of option names, or *None* for defaults.
    **options:
        Individual option overrides (``trim_vertical_end=False`` …).
    """

    def __init__(self, config: ConfigLike = None, **options: Optional[bool]) -> None:
        self.config = TrimConfig.resolve(config, **options)
        self._least_indent = LeastIndentPass()
        self._horizontal = HorizontalTrimPass()
        self._vertical = VerticalTrimPass()

    def trim(self, text: str) -> str:
        """Trim *text* according to :attr:`config`."""
        config = self.config
        logger.debug("Trimming with %s", config)

        lines = text.split("\n")

        # Stage 1 – least indent
        least_indent: Optional[int] = None
        if config.trim_left_to_least_indent:
            least_indent = self._least_indent.run(lines)
            logger.debug("Least indent: %s", least_indent)

        # Stage 2 – per-line trimming
        trimmed = self._horizontal.run(lines, least_indent)
        if trimmed.is_blank:
            logger.debug("All %d line(s) blank; returning empty string", len(lines))
            return ""

        # Stage 3 – vertical trimming
        result = self._vertical.run(
            trimmed,
            trim_start=config.trim_vertical_start,
            trim_end=config.trim_vertical_end,
        )

        logger.debug("Trimmed %d line(s) to %d", len(lines), len(result))
        return "\n".join(result)

    def __repr__(self) -> str:
        return f"LineTrimmer({self.config!r})"


def trim_lines(text: str, config: ConfigLike = None, **options: Optional[bool]) -> str:
    """
    Trim whitespace from each line of *text* and optionally drop the blank
    line blocks around it.

    Parameters
    ----------
    text:
        Input string; ``"\\n"`` is the only line separator.
    config:
        A ``TrimConfig``, a mapping of option names, or *None*.
    **options:
        ``trim_left_to_least_indent``, ``trim_vertical_start`` and
        ``trim_vertical_end``; each defaults to ``True``.

    Returns
    -------
    str
        The trimmed text.  Empty when *text* is empty or all whitespace.

    Examples
    --------
    >>> trim_lines("  hello\\n    world\\n")
    'hello\\n  world'
    >>> trim_lines("\\n\\nfoo\\n\\n", trim_vertical_start=False)
    '\\n\\nfoo'
    """
    return LineTrimmer(config, **options).trim(text)
