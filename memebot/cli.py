#!/usr/bin/env python3
"""Render a meme from a local template folder without Slack or Cloud Storage."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from memebot.config import ConfigManager
from memebot.application.pipeline import MemePipeline
from memebot.domain.errors import MemeError
from memebot.adapters.stdout_logger import StdoutLogger
from memebot.adapters.filesystem_template_store import FilesystemTemplateStore
from memebot.adapters.pillow_image_renderer import PillowImageComposer, PillowImageInspector
from memebot.adapters.directory_sink import DirectorySink


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="memebot-render", description=__doc__)
    ap.add_argument("template", help="Template name (file <name>.png in the template folder)")
    ap.add_argument("caption", nargs="*", help="Caption words")
    ap.add_argument("--templates", type=Path, default=None, help="Template folder (default: config template_dir or .)")
    ap.add_argument("--out", type=Path, default=None, help="Output folder (default: config output_dir or .)")
    ap.add_argument("--margin", type=int, default=None, help="Pixels reserved around the caption area")
    ap.add_argument("--font", type=Path, default=None, help="TrueType font to draw with")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = ConfigManager.load()

    sink = DirectorySink(args.out or cfg.output_dir or Path.cwd())
    pipeline = MemePipeline(
        templates=FilesystemTemplateStore(args.templates or cfg.template_dir or Path.cwd()),
        inspector=PillowImageInspector(),
        composer=PillowImageComposer(font_path=args.font or cfg.font_path),
        sink=sink,
        logger=StdoutLogger(),
        margin=cfg.margin if args.margin is None else args.margin,
    )
    text = " ".join([args.template] + list(args.caption))
    try:
        pipeline.run("", text)
    except MemeError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    print(sink.last_path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
