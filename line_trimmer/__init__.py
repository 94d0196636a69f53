"""
Line Trimmer
============

Normalises multi-line strings: strips whitespace from each line, re-indents
lines relative to the least indented non-blank line, and drops the blank
line blocks before and after the content.

Useful for cleaning up triple-quoted literals, templates and pasted
snippets.

Quick start
-----------
>>> from line_trimmer import trim_lines
>>> trim_lines('''
...     def f():
...         return 1
... ''')
'def f():\\n    return 1'
"""

from .models import TrimConfig, TrimmedLines
from .passes.horizontal_trim import HorizontalTrimPass
from .passes.least_indent import LeastIndentPass, indent_width
from .passes.vertical_trim import VerticalTrimPass
from .pipeline.line_trimmer import LineTrimmer, trim_lines

__version__ = "0.1.0"
__all__ = [
    "TrimConfig",
    "TrimmedLines",
    "HorizontalTrimPass",
    "LeastIndentPass",
    "VerticalTrimPass",
    "LineTrimmer",
    "indent_width",
    "trim_lines",
]
