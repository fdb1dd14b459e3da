from __future__ import annotations
from pathlib import Path
from memebot.ports.template_store import TemplateStore

class FilesystemTemplateStore(TemplateStore):
    def __init__(self, root: Path):
        self.root = Path(root)

    def _path(self, name: str):
        if not name or "/" in name or "\\" in name or ".." in name:
            return None
        return self.root / f"{name}.png"

    def exists(self, name: str) -> bool:
        p = self._path(name)
        return bool(p and p.is_file())

    def download(self, name: str) -> bytes:
        p = self._path(name)
        if p is None:
            raise FileNotFoundError(name)
        return p.read_bytes()
