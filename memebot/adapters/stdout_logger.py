from __future__ import annotations
import json
from typing import Any
from memebot.ports.logger import Logger

class StdoutLogger(Logger):
    """Prints every argument JSON-encoded on one line."""
    def __init__(self, sink=None):
        self._sink = sink  # optional callback, receives the formatted line
    def log(self, *args: Any) -> None:
        line = " ".join(json.dumps(a, default=str, ensure_ascii=False) for a in args)
        if self._sink:
            self._sink(line)
        print(line, flush=True)
