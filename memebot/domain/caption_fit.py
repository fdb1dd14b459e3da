# memebot/domain/caption_fit.py
from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import List

# Width of one character relative to the font size.
CHAR_WIDTH_RATIO = 0.6
LINE_HEIGHT_RATIO = 1.2


@dataclass(frozen=True)
class Paragraph:
    """One wrapped line and the y coordinate of its baseline."""
    text: str
    y: float


@dataclass(frozen=True)
class FitResult:
    font_size: int
    paragraphs: List[Paragraph] = field(default_factory=list)
    line_height: float = 0.0


def measure_text(text: str, font_size: float) -> float:
    """Approximate rendered width. Not real glyph metrics."""
    return len(text) * (font_size * CHAR_WIDTH_RATIO)


def wrap_words(words: List[str], font_size: int, width: float) -> List[str]:
    """
    Greedy word-wrap. Words wider than `width` are never split; an over-wide
    first word closes the still-empty line ahead of it, which counts toward
    the block height.
    """
    lines: List[str] = []
    current = ""
    for word in words:
        candidate = f"{current} {word}" if current else word
        if measure_text(candidate, font_size) > width:
            lines.append(current)
            current = word
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines


def fit_caption(text: str, width: float, height: float) -> FitResult:
    """
    Pick the largest font size whose wrapped block fits in half of `height`
    and stack the lines upward from the bottom edge (last line at y=height).

    Never raises; the font size may degrade to 0 when nothing fits.
    """
    max_font_size = math.floor(width * 0.5)
    target_height = math.floor(height / 2)
    words = text.split(" ")

    font_size = max_font_size
    lines: List[str] = []
    line_height = font_size * LINE_HEIGHT_RATIO

    while font_size > 0:
        lines = wrap_words(words, font_size, width)
        line_height = font_size * LINE_HEIGHT_RATIO
        if len(lines) * line_height <= target_height:
            break
        font_size -= 1
    else:
        # Search exhausted: re-wrap at size 0, so every line sits on y=height.
        # The old renderer kept the size-1 wrap and its 1.2 line height instead.
        lines = wrap_words(words, font_size, width)
        line_height = font_size * LINE_HEIGHT_RATIO

    if not lines:
        # blank caption occupies no height but still yields one line
        lines = [""]

    y_start = height
    stacked = [
        Paragraph(text=line, y=y_start - index * line_height)
        for index, line in enumerate(reversed(lines))
    ]
    stacked.reverse()
    return FitResult(font_size=font_size, paragraphs=stacked, line_height=line_height)
