from __future__ import annotations
import json, os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


def _env_path(name: str) -> Optional[Path]:
    v = os.environ.get(name, "").strip()
    return Path(v) if v else None


def config_path() -> Path:
    return _env_path("MEMEBOT_CONFIG") or Path.home() / ".config" / "memebot" / "config.json"


@dataclass
class Config:
    # Server
    port: int = field(default_factory=lambda: int(os.environ.get("PORT", "3000")))

    # Services
    slack_bot_token: str = field(default_factory=lambda: os.environ.get("BOT_TOKEN", ""))
    template_bucket: str = field(default_factory=lambda: os.environ.get("MEMEBOT_TEMPLATE_BUCKET", "playter-meme-templates"))
    storage_token: str = field(default_factory=lambda: os.environ.get("MEMEBOT_STORAGE_TOKEN", ""))

    # Local overrides: a template folder instead of the bucket, an output folder instead of Slack
    template_dir: Optional[Path] = field(default_factory=lambda: _env_path("MEMEBOT_TEMPLATE_DIR"))
    output_dir: Optional[Path] = field(default_factory=lambda: _env_path("MEMEBOT_OUTPUT_DIR"))

    # Rendering
    font_path: Optional[Path] = field(default_factory=lambda: _env_path("MEMEBOT_FONT_PATH"))
    margin: int = field(default_factory=lambda: int(os.environ.get("MEMEBOT_MARGIN", "50")))


class ConfigManager:
    """Environment defaults, optionally overridden by a JSON file."""

    @staticmethod
    def load(path: Optional[Path] = None) -> Config:
        c = Config()
        path = path or config_path()
        if not path.exists():
            return c
        try:
            d = json.loads(path.read_text())
            def p(k: str) -> Optional[Path]:
                v = d.get(k) or ""
                return Path(v) if v else None
            c.port = int(d.get("port", c.port))
            c.slack_bot_token = d.get("slack_bot_token", c.slack_bot_token)
            c.template_bucket = d.get("template_bucket", c.template_bucket)
            c.storage_token = d.get("storage_token", c.storage_token)
            c.template_dir = p("template_dir") or c.template_dir
            c.output_dir = p("output_dir") or c.output_dir
            c.font_path = p("font_path") or c.font_path
            c.margin = int(d.get("margin", c.margin))
        except (OSError, ValueError, TypeError, AttributeError):
            # unreadable or malformed file: keep environment defaults
            return Config()
        return c
