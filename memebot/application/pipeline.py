from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, List

from memebot.domain.caption_fit import fit_caption
from memebot.domain.command import meme_filename, split_command
from memebot.domain.errors import ImageProcessingError, TemplateNotFound
from memebot.ports.delivery import DeliverySink
from memebot.ports.image_renderer import ImageComposer, ImageInspector
from memebot.ports.logger import Logger
from memebot.ports.template_store import TemplateStore


@dataclass(frozen=True)
class MemeResult:
    filename: str
    font_size: int
    lines: List[str]


class MemePipeline:
    """
    High-level orchestration. Knows nothing about Cloud Storage/Slack/Pillow.
    It only talks to *interfaces* (ports).
    """

    def __init__(
        self,
        templates: TemplateStore,
        inspector: ImageInspector,
        composer: ImageComposer,
        sink: DeliverySink,
        logger: Logger,
        margin: int = 50,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.templates = templates
        self.inspector = inspector
        self.composer = composer
        self.sink = sink
        self.log = logger.log
        self.margin = margin
        self.clock = clock

    def run(self, destination: str, text: str) -> MemeResult:
        template, caption = split_command(text)

        if not self.templates.exists(template):
            self.log("File not found", template)
            raise TemplateNotFound(template)

        background = self.templates.download(template)
        width, height = self.inspector.dimensions(background)
        if not width or not height:
            self.log("Something is wrong with image, width, height is 0", template)
            raise ImageProcessingError(f"Template {template!r} has no usable dimensions.")
        if width <= self.margin or height <= self.margin:
            self.log("Image is smaller than the caption margin", template, width, height)
            raise ImageProcessingError(f"Template {template!r} is too small for a caption.")

        fit = fit_caption(caption.upper(), width - self.margin, height - self.margin)
        image = self.composer.compose(background, fit)

        filename = meme_filename(self.clock())
        self.sink.deliver(image, destination, filename)
        self.log("Delivered meme", {"template": template, "destination": destination,
                                    "filename": filename, "font_size": fit.font_size})
        return MemeResult(filename=filename, font_size=fit.font_size,
                          lines=[p.text for p in fit.paragraphs])
