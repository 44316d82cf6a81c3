from typing import Optional, Sequence, Tuple

from .alphabet import BASE

# Glyph for trit value 0, 1, 2 respectively.
GLYPHS = ("▲", "▼", "◆")

# Written in place of a space; never one of GLYPHS.
SEPARATOR = "/"

_GLYPH_VALUES = {g: v for v, g in enumerate(GLYPHS)}


def is_glyph(ch: str) -> bool:
    return ch in _GLYPH_VALUES


def glyph_val(ch: str) -> Optional[int]:
    """Trit value of a glyph, or None if `ch` is not a glyph."""
    return _GLYPH_VALUES.get(ch)


def is_glyph_run(run: str) -> bool:
    """True when `run` is exactly BASE glyph characters."""
    return len(run) == BASE and all(ch in _GLYPH_VALUES for ch in run)


def to_glyph_run(triple: Sequence[int]) -> str:
    return "".join(GLYPHS[t] for t in triple)


def from_glyph_run(run: str) -> Tuple[int, ...]:
    if not is_glyph_run(run):
        raise ValueError(f"Not a glyph run: {run!r}")
    return tuple(_GLYPH_VALUES[ch] for ch in run)
