# backend/pdfsearch/ui/client.py
import logging
from typing import Optional

import requests

from pdfsearch.core.config import settings

logger = logging.getLogger(__name__)


class SearchClientError(RuntimeError):
    pass


class SearchClient:
    """HTTP client the UI uses to reach the /upload and /query endpoints."""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        self.base_url = (base_url or settings.API_URL).rstrip("/")
        self.timeout = timeout or settings.UI_TIMEOUT

    def _post(self, path: str, **kwargs) -> dict:
        url = f"{self.base_url}{path}"
        try:
            resp = requests.post(url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise SearchClientError(f"API error calling {url}: {e}") from e

        try:
            data = resp.json()
        except ValueError:
            data = {}
        if not resp.ok:
            message = data.get("error") if isinstance(data, dict) else None
            raise SearchClientError(message or f"API error {resp.status_code} calling {url}")
        return data

    def upload(self, filename: str, content: bytes, collection: Optional[str] = None) -> dict:
        data = {"collection": collection} if collection else {}
        return self._post(
            "/upload",
            files={"pdfFile": (filename, content, "application/pdf")},
            data=data,
        )

    def query(self, question: str, collection: Optional[str] = None) -> dict:
        payload = {"question": question}
        if collection:
            payload["collection"] = collection
        return self._post("/query", json=payload)
