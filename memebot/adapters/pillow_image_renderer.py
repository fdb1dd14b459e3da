from __future__ import annotations
import io
from pathlib import Path
from typing import Optional, Sequence, Tuple

from PIL import Image, ImageDraw, ImageFont, UnidentifiedImageError

from memebot.domain.caption_fit import FitResult
from memebot.domain.errors import ImageProcessingError
from memebot.ports.image_renderer import ImageComposer, ImageInspector

# Bold condensed sans-serif first, then whatever bold sans is installed.
FONT_CANDIDATES: Sequence[str] = (
    "impact.ttf",
    "Impact.ttf",
    "/usr/share/fonts/truetype/msttcorefonts/Impact.ttf",
    "DejaVuSans-Bold.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
    "arialbd.ttf",
)


def _open(data: bytes) -> Image.Image:
    try:
        im = Image.open(io.BytesIO(data))
        im.load()
        return im
    except (UnidentifiedImageError, OSError) as e:
        raise ImageProcessingError(f"Cannot decode image: {e}") from e


class PillowImageInspector(ImageInspector):
    def dimensions(self, data: bytes) -> Tuple[int, int]:
        im = _open(data)
        return im.width or 0, im.height or 0


class PillowImageComposer(ImageComposer):
    """Draws white, black-stroked caption lines centred on the image."""

    def __init__(self, font_path: Optional[Path] = None, stroke_width: int = 10,
                 fill: str = "white", stroke_fill: str = "black"):
        self.font_path = font_path
        self.stroke_width = stroke_width
        self.fill = fill
        self.stroke_fill = stroke_fill

    def _font(self, size: int):
        candidates = [str(self.font_path)] if self.font_path else []
        candidates.extend(FONT_CANDIDATES)
        for name in candidates:
            try:
                return ImageFont.truetype(name, size)
            except OSError:
                continue
        return ImageFont.load_default(size=size)

    def compose(self, background: bytes, caption: FitResult) -> bytes:
        im = _open(background).convert("RGBA")
        if caption.font_size > 0:
            overlay = Image.new("RGBA", im.size, (255, 255, 255, 0))
            draw = ImageDraw.Draw(overlay)
            font = self._font(caption.font_size)
            x = im.width / 2
            for p in caption.paragraphs:
                if not p.text:
                    continue
                # "mm" centres the line on its y, like dy=0.35em on an SVG baseline
                draw.text((x, p.y), p.text, font=font, fill=self.fill, anchor="mm",
                          stroke_width=self.stroke_width, stroke_fill=self.stroke_fill)
            im = Image.alpha_composite(im, overlay)
        out = io.BytesIO()
        im.save(out, format="PNG")
        return out.getvalue()
