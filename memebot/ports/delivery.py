from __future__ import annotations
from typing import Protocol

class DeliverySink(Protocol):
    def deliver(self, data: bytes, destination: str, filename: str) -> None: ...
