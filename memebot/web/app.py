#!/usr/bin/env python3
from __future__ import annotations

from flask import Flask, request
from pydantic import ValidationError

from memebot.config import Config, ConfigManager
from memebot.application.pipeline import MemePipeline
from memebot.domain.errors import ImageProcessingError, TemplateNotFound
from memebot.ports.logger import Logger

# Adapters
from memebot.adapters.stdout_logger import StdoutLogger
from memebot.adapters.bucket_template_store import HttpBucketTemplateStore
from memebot.adapters.filesystem_template_store import FilesystemTemplateStore
from memebot.adapters.pillow_image_renderer import PillowImageComposer, PillowImageInspector
from memebot.adapters.slack_uploader import SlackFileUploader
from memebot.adapters.directory_sink import DirectorySink
from memebot.web.schemas import GenerateRequest

app = Flask(__name__)
logger = StdoutLogger()


def build_pipeline(cfg: Config, log: Logger) -> MemePipeline:
    """Compose adapters from config."""
    if cfg.template_dir:
        templates = FilesystemTemplateStore(cfg.template_dir)
    else:
        templates = HttpBucketTemplateStore(cfg.template_bucket, token=cfg.storage_token)
    if cfg.output_dir:
        sink = DirectorySink(cfg.output_dir)
    else:
        sink = SlackFileUploader(cfg.slack_bot_token)
    return MemePipeline(
        templates=templates,
        inspector=PillowImageInspector(),
        composer=PillowImageComposer(font_path=cfg.font_path),
        sink=sink,
        logger=log,
        margin=cfg.margin,
    )


@app.post("/generate")
def generate():
    body = request.get_json(silent=True)
    if body is None:
        body = request.form.to_dict()
    logger.log("Received request", body, dict(request.headers))

    try:
        req = GenerateRequest.model_validate(body)
    except ValidationError as e:
        logger.log("Failed to parse request", e.errors())
        return "", 400

    try:
        pipeline = build_pipeline(ConfigManager.load(), logger)
        pipeline.run(req.channel_id, req.text)
    except TemplateNotFound:
        return "Image not found", 404
    except ImageProcessingError:
        return "Failed to process image", 500
    except Exception as e:
        logger.log("Failed to process request", repr(e))
        return "", 500
    return "", 200


@app.get("/health-check")
def health_check():
    return "OK", 200


def main() -> None:
    cfg = ConfigManager.load()
    logger.log(f"Server is running on port {cfg.port}")
    app.run("0.0.0.0", cfg.port)


if __name__ == "__main__":
    main()
