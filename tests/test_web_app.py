from __future__ import annotations

import pytest

from memebot.domain.errors import DeliveryError
from memebot.web import app as web


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch, pipeline, list_logger):
    monkeypatch.setattr(web, "logger", list_logger)
    monkeypatch.setattr(web, "build_pipeline", lambda cfg, log: pipeline)
    web.app.config["TESTING"] = True
    return web.app.test_client()


def test_health_check(client) -> None:
    res = client.get("/health-check")

    assert res.status_code == 200
    assert res.get_data(as_text=True) == "OK"


def test_slash_command_form_post_delivers_meme(client, sink) -> None:
    res = client.post("/generate", data={"channel_id": "C123", "text": "drake ship it"})

    assert res.status_code == 200
    assert sink.deliveries[0][1] == "C123"


def test_json_body_is_accepted(client, sink) -> None:
    res = client.post("/generate", json={"channel_id": "C9", "text": "drake ok"})

    assert res.status_code == 200
    assert len(sink.deliveries) == 1


def test_invalid_body_is_rejected(client, list_logger) -> None:
    res = client.post("/generate", data={"text": "drake no channel"})

    assert res.status_code == 400
    assert "Failed to parse request" in list_logger.messages()


def test_unknown_template_is_404(client) -> None:
    res = client.post("/generate", data={"channel_id": "C1", "text": "nope caption"})

    assert res.status_code == 404
    assert res.get_data(as_text=True) == "Image not found"


def test_broken_template_is_500(client, pipeline) -> None:
    pipeline.templates.templates["broken"] = b"not a png"

    res = client.post("/generate", data={"channel_id": "C1", "text": "broken caption"})

    assert res.status_code == 500
    assert res.get_data(as_text=True) == "Failed to process image"


def test_delivery_failure_is_logged_500(client, pipeline, list_logger) -> None:
    class FailingSink:
        def deliver(self, data, destination, filename):
            raise DeliveryError("not_in_channel")

    pipeline.sink = FailingSink()

    res = client.post("/generate", data={"channel_id": "C1", "text": "drake caption"})

    assert res.status_code == 500
    assert res.get_data(as_text=True) == ""
    assert "Failed to process request" in list_logger.messages()


def test_unknown_template_is_404_without_slack_token(
    monkeypatch: pytest.MonkeyPatch, tmp_path, list_logger
) -> None:
    monkeypatch.delenv("BOT_TOKEN", raising=False)
    monkeypatch.delenv("MEMEBOT_OUTPUT_DIR", raising=False)
    monkeypatch.setenv("MEMEBOT_TEMPLATE_DIR", str(tmp_path))
    monkeypatch.setattr(web, "logger", list_logger)
    web.app.config["TESTING"] = True

    res = web.app.test_client().post("/generate", data={"channel_id": "C1", "text": "nope hi"})

    assert res.status_code == 404
    assert res.get_data(as_text=True) == "Image not found"


def test_build_pipeline_uses_local_adapters_when_configured(tmp_path, list_logger) -> None:
    from memebot.adapters.directory_sink import DirectorySink
    from memebot.adapters.filesystem_template_store import FilesystemTemplateStore
    from memebot.config import Config

    cfg = Config(template_dir=tmp_path / "t", output_dir=tmp_path / "o")
    p = web.build_pipeline(cfg, list_logger)

    assert isinstance(p.templates, FilesystemTemplateStore)
    assert isinstance(p.sink, DirectorySink)
