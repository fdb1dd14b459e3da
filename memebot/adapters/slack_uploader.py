from __future__ import annotations
from typing import Any, Dict

import requests

from memebot.domain.errors import DeliveryError
from memebot.ports.delivery import DeliverySink

SLACK_API_URL = "https://slack.com/api"


class SlackFileUploader(DeliverySink):
    """
    Posts a file to a Slack channel using the external upload flow:
    reserve an upload URL, send the bytes, then share the file in the channel.
    """

    def __init__(self, token: str, base_url: str = SLACK_API_URL, session=None, timeout: float = 60):
        self.token = token
        self.base = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers["Authorization"] = f"Bearer {token}"

    def _call(self, method: str, **kwargs) -> Dict[str, Any]:
        res = self.session.post(f"{self.base}/{method}", timeout=self.timeout, **kwargs)
        res.raise_for_status()
        data: Dict[str, Any] = res.json()
        if not data.get("ok"):
            raise DeliveryError(f"Slack {method} failed: {data.get('error', 'unknown_error')}")
        return data

    def deliver(self, data: bytes, destination: str, filename: str) -> None:
        if not self.token:
            raise DeliveryError("Slack bot token is not configured.")
        ticket = self._call("files.getUploadURLExternal",
                            data={"filename": filename, "length": len(data)})
        upload = self.session.post(ticket["upload_url"], files={"file": (filename, data)},
                                   timeout=self.timeout)
        upload.raise_for_status()
        self._call("files.completeUploadExternal",
                   json={"files": [{"id": ticket["file_id"], "title": filename}],
                         "channel_id": destination})
