from __future__ import annotations
from pathlib import Path
from typing import Optional
from memebot.ports.delivery import DeliverySink

class DirectorySink(DeliverySink):
    """Writes memes to <out_dir>/<destination>/<filename>."""
    def __init__(self, out_dir: Path):
        self.out_dir = Path(out_dir)
        self.last_path: Optional[Path] = None

    def deliver(self, data: bytes, destination: str, filename: str) -> None:
        sub = (destination or "").replace("/", "_").replace("\\", "_")
        folder = self.out_dir if sub in ("", ".", "..") else self.out_dir / sub
        folder.mkdir(parents=True, exist_ok=True)
        path = folder / filename
        path.write_bytes(data)
        self.last_path = path
