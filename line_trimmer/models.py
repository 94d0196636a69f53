"""
Core data models for the line trimmer.

``TrimConfig`` is the resolved option set for one call; ``TrimmedLines`` is
what the horizontal pass hands to the vertical pass.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, List, Mapping, Optional, Union


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TrimConfig:
    """
    Options controlling :func:`~line_trimmer.pipeline.line_trimmer.trim_lines`.

    Attributes
    ----------
    trim_left_to_least_indent:
        Re-indent every non-trivial line relative to the least indent found
        among non-blank lines.
    trim_vertical_start:
        Drop the block of blank lines before the first occupied line.
    trim_vertical_end:
        Drop the block of blank lines after the last occupied line.
    """

    trim_left_to_least_indent: bool = True
    trim_vertical_start: bool = True
    trim_vertical_end: bool = True

    @classmethod
    def option_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def resolve(
        cls,
        config: Union[TrimConfig, Mapping[str, Optional[bool]], None] = None,
        **overrides: Optional[bool],
    ) -> TrimConfig:
        """
        Build the effective configuration for one call.

        Layers, lowest priority first: the defaults, *config* (a
        ``TrimConfig`` or a mapping of option names), then keyword
        *overrides*.  A ``None`` value in either layer leaves the option
        to the layer below.

        Raises
        ------
        TypeError
            If an option name is unknown or a value is neither ``bool`` nor
            ``None``.
        """
        if isinstance(config, TrimConfig):
            values: Dict[str, bool] = config.to_dict()
        else:
            values = cls().to_dict()
            if config is not None:
                cls._merge(values, config)
        cls._merge(values, overrides)
        return cls(**values)

    @classmethod
    def _merge(cls, values: Dict[str, bool], options: Mapping[str, Any]) -> None:
        known = set(values)
        for name, value in options.items():
            if name not in known:
                raise TypeError(
                    f"Unknown trim option {name!r}; "
                    f"expected one of {', '.join(cls.option_names())}"
                )
            if value is None:
                continue
            if not isinstance(value, bool):
                raise TypeError(
                    f"Trim option {name!r} must be a bool, "
                    f"got {type(value).__name__}"
                )
            values[name] = value

    def to_dict(self) -> Dict[str, bool]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Horizontal pass result
# ---------------------------------------------------------------------------


@dataclass
class TrimmedLines:
    """
    Lines after per-line trimming, in original order.

    ``first_occupied`` and ``last_occupied`` are the indices of the first and
    last non-empty lines, or ``None`` when every line is empty.
    """

    lines: List[str] = field(default_factory=list)
    first_occupied: Optional[int] = None
    last_occupied: Optional[int] = None

    @property
    def is_blank(self) -> bool:
        return self.first_occupied is None or self.last_occupied is None

    def __repr__(self) -> str:
        return (
            f"TrimmedLines(lines={len(self.lines)}, "
            f"occupied={self.first_occupied}..{self.last_occupied})"
        )
