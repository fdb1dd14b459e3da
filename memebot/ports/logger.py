from __future__ import annotations
from typing import Any, Protocol

class Logger(Protocol):
    def log(self, *args: Any) -> None: ...
