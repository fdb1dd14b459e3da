from __future__ import annotations
from typing import Protocol

class TemplateStore(Protocol):
    def exists(self, name: str) -> bool: ...
    def download(self, name: str) -> bytes: ...
