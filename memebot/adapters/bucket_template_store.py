from __future__ import annotations
from urllib.parse import quote

import requests

from memebot.ports.template_store import TemplateStore

STORAGE_BASE_URL = "https://storage.googleapis.com"


class HttpBucketTemplateStore(TemplateStore):
    """Reads `<name>.png` objects from a Cloud Storage bucket over HTTP."""

    def __init__(self, bucket: str, token: str = "", base_url: str = STORAGE_BASE_URL,
                 session=None, timeout: float = 30):
        self.bucket = bucket
        self.base = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        if token:
            self.session.headers["Authorization"] = f"Bearer {token}"

    def _url(self, name: str) -> str:
        return f"{self.base}/{self.bucket}/{quote(name + '.png', safe='')}"

    def exists(self, name: str) -> bool:
        res = self.session.head(self._url(name), timeout=self.timeout)
        if res.status_code == 404:
            return False
        res.raise_for_status()
        return True

    def download(self, name: str) -> bytes:
        res = self.session.get(self._url(name), timeout=self.timeout)
        res.raise_for_status()
        return res.content
