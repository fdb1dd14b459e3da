from __future__ import annotations

import io
from typing import Dict, List, Tuple

import pytest
from PIL import Image

from memebot.application.pipeline import MemePipeline
from memebot.adapters.pillow_image_renderer import PillowImageComposer, PillowImageInspector


def png_bytes(width: int, height: int, color: str = "navy") -> bytes:
    out = io.BytesIO()
    Image.new("RGB", (width, height), color).save(out, format="PNG")
    return out.getvalue()


class MemoryTemplateStore:
    def __init__(self, templates: Dict[str, bytes]) -> None:
        self.templates = templates

    def exists(self, name: str) -> bool:
        return name in self.templates

    def download(self, name: str) -> bytes:
        return self.templates[name]


class RecordingSink:
    def __init__(self) -> None:
        self.deliveries: List[Tuple[bytes, str, str]] = []

    def deliver(self, data: bytes, destination: str, filename: str) -> None:
        self.deliveries.append((data, destination, filename))


class ListLogger:
    def __init__(self) -> None:
        self.records: List[tuple] = []

    def log(self, *args) -> None:
        self.records.append(args)

    def messages(self) -> List[object]:
        return [r[0] for r in self.records if r]


@pytest.fixture
def template_png() -> bytes:
    return png_bytes(400, 300)


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def list_logger() -> ListLogger:
    return ListLogger()


@pytest.fixture
def pipeline(template_png: bytes, sink: RecordingSink, list_logger: ListLogger) -> MemePipeline:
    return MemePipeline(
        templates=MemoryTemplateStore({"drake": template_png}),
        inspector=PillowImageInspector(),
        composer=PillowImageComposer(),
        sink=sink,
        logger=list_logger,
        clock=lambda: 1700000000.123,
    )


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.setenv("MEMEBOT_CONFIG", str(tmp_path / "missing-config.json"))
