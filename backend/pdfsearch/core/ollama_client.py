# backend/pdfsearch/core/ollama_client.py
"""
Thin HTTP client for the Ollama runtime.

Every call carries an explicit timeout; any failure (transport, non-200,
unparseable body) is raised as OllamaError with the raw message so the API
layer can hand it back to the caller.
"""
import logging
from typing import Optional

import requests

from pdfsearch.core.config import settings

logger = logging.getLogger(__name__)


class OllamaError(RuntimeError):
    pass


class OllamaClient:
    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        self.base_url = (base_url or settings.OLLAMA_BASE_URL).rstrip("/")
        self.timeout = timeout or settings.OLLAMA_TIMEOUT

    def post(self, path: str, body: dict) -> dict:
        endpoint = f"{self.base_url}/{path.lstrip('/')}"
        logger.debug(f"POST {endpoint} | model={body.get('model')}")
        try:
            resp = requests.post(endpoint, json=body, timeout=self.timeout)
        except requests.Timeout as e:
            raise OllamaError(f"Ollama request to {endpoint} timed out after {self.timeout}s") from e
        except requests.RequestException as e:
            raise OllamaError(f"HTTP exception: {e}") from e

        if resp.status_code != 200:
            raw = resp.text or "<no-body>"
            preview = raw if len(raw) < 2000 else raw[:2000] + "...(truncated)"
            logger.warning(f"Non-200 status from Ollama: {resp.status_code} | body={preview}")
            raise OllamaError(f"Ollama error {resp.status_code}: {raw}")

        try:
            return resp.json()
        except ValueError as e:
            raise OllamaError(f"Invalid JSON from Ollama: {e}") from e
