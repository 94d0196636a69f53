"""
LeastIndentPass
===============

Finds the smallest indentation among the non-blank lines of a text.

Indentation is a literal character count: a tab counts as one character,
the same as a space.  Lines that are empty or whitespace-only do not take
part, so a blank line with no indentation never forces the result to 0.

Whitespace is the ECMAScript set (WhiteSpace + LineTerminator), not
Python's ``str.isspace``: a BOM (U+FEFF) is whitespace, while the C0
separators U+001C..U+001F and NEL (U+0085) are content.
"""
from __future__ import annotations

from typing import List, Optional

WHITESPACE = (
    "\t\n\v\f\r "
    "\u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def indent_width(line: str) -> int:
    """Number of leading whitespace characters in *line*."""
    return len(line) - len(line.lstrip(WHITESPACE))


class LeastIndentPass:
    """Computes the least indent of a list of lines."""

    def run(self, lines: List[str]) -> Optional[int]:
        """
        Parameters
        ----------
        lines:
            The input split on ``"\\n"`` (untrimmed).

        Returns
        -------
        int | None
            The minimum :func:`indent_width` over non-blank lines, or
            *None* when every line is blank.
        """
        least: Optional[int] = None
        for line in lines:
            if not line.strip(WHITESPACE):
                continue
            indent = indent_width(line)
            if least is None or indent < least:
                least = indent
        return least
