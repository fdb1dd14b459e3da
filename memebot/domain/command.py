# memebot/domain/command.py
from __future__ import annotations
from typing import Tuple


def split_command(text: str) -> Tuple[str, str]:
    """'drake MORE TESTS' -> ('drake', 'MORE TESTS'). Splits on single spaces only."""
    template, _, caption = (text or "").partition(" ")
    return template, caption


def meme_filename(epoch_seconds: float) -> str:
    return f"meme-{int(epoch_seconds * 1000)}.png"
