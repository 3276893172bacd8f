"""Wrapping Stage - Split a line into width-bounded segments.

Widths are estimated from a tiered character model rather than real font
metrics, so layout is reproducible on any machine:
- wide: CJK ideographs and full-width forms (1.0 x font size)
- medium: ASCII letters and digits (0.6 x font size)
- narrow: spaces, punctuation and everything else (0.35 x font size)

Wrapping is greedy and character-based: a segment closes as soon as the
next character would overflow it.
"""

import re
from typing import Callable

from svgdoc.models import WrappedSegment


# C0 controls except TAB, DEL, lone surrogates, and the two XML non-characters
UNRENDERABLE_PATTERN = re.compile("[\x00-\x08\x0a-\x1f\x7f\ud800-\udfff\ufffe\uffff]")


# Inclusive code point ranges rendered as full-width glyphs
WIDE_RANGES = [
    (0x1100, 0x115F),  # Hangul Jamo
    (0x2E80, 0x2FDF),  # CJK radicals, Kangxi radicals
    (0x3000, 0x303F),  # CJK symbols and punctuation
    (0x3040, 0x30FF),  # Hiragana, Katakana
    (0x3100, 0x31BF),  # Bopomofo
    (0x3400, 0x4DBF),  # CJK Extension A
    (0x4E00, 0x9FFF),  # CJK Unified Ideographs
    (0xAC00, 0xD7AF),  # Hangul syllables
    (0xF900, 0xFAFF),  # CJK Compatibility Ideographs
    (0xFE30, 0xFE4F),  # CJK compatibility forms
    (0xFF00, 0xFF60),  # Full-width ASCII variants
    (0xFFE0, 0xFFE6),  # Full-width signs
    (0x20000, 0x3FFFF),  # CJK Extensions B and later
]

WIDE_FACTOR = 1.0
MEDIUM_FACTOR = 0.6
NARROW_FACTOR = 0.35


def strip_unrenderable(text: str) -> str:
    """Remove characters that have no glyph and cannot appear in XML."""
    return UNRENDERABLE_PATTERN.sub("", text)


def is_wide(char: str) -> bool:
    """Check if a character renders as a full-width glyph."""
    code = ord(char)
    return any(lo <= code <= hi for lo, hi in WIDE_RANGES)


def is_medium(char: str) -> bool:
    """Check if a character is an ASCII letter or digit."""
    return char.isascii() and char.isalnum()


# Ordered (matcher, factor) tiers; first match wins, last entry is the fallback
WIDTH_TIERS: list[tuple[Callable[[str], bool], float]] = [
    (is_wide, WIDE_FACTOR),
    (is_medium, MEDIUM_FACTOR),
    (lambda char: True, NARROW_FACTOR),
]


def estimate_char_width(char: str, font_size: float) -> float:
    """Estimate the rendered width of one character."""
    for matcher, factor in WIDTH_TIERS:
        if matcher(char):
            return factor * font_size
    return NARROW_FACTOR * font_size


def estimate_text_width(text: str, font_size: float) -> float:
    """Estimate the rendered width of a string."""
    return sum(estimate_char_width(char, font_size) for char in text)


def wrap_line(
    text: str,
    font_size: float,
    max_width: float,
    offset: int = 0,
) -> list[WrappedSegment]:
    """Wrap a line into segments no wider than `max_width`.

    A character that is wider than `max_width` on its own still gets a
    segment; it is never dropped.

    Args:
        text: Line text (no newlines)
        font_size: Font size the line will be rendered at
        max_width: Maximum segment width
        offset: Position of `text` within its source line

    Returns:
        Ordered segments covering `text`; exactly one empty segment if
        `text` is empty
    """
    if max_width <= 0:
        raise ValueError(f"max_width must be positive, got {max_width}")

    if not text:
        return [WrappedSegment(text="", width=0.0, start=offset)]

    segments: list[WrappedSegment] = []
    start = 0
    width = 0.0

    for i, char in enumerate(text):
        char_width = estimate_char_width(char, font_size)
        if width + char_width > max_width and i > start:
            segments.append(
                WrappedSegment(text=text[start:i], width=width, start=offset + start)
            )
            start = i
            width = 0.0
        width += char_width

    segments.append(WrappedSegment(text=text[start:], width=width, start=offset + start))
    return segments
