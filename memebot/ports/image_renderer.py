from __future__ import annotations
from typing import Protocol, Tuple

from memebot.domain.caption_fit import FitResult

class ImageInspector(Protocol):
    def dimensions(self, data: bytes) -> Tuple[int, int]:
        """Return (width, height); either may be 0 when the image reports none."""

class ImageComposer(Protocol):
    def compose(self, background: bytes, caption: FitResult) -> bytes: ...
