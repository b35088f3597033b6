# backend/pdfsearch/core/llm.py
from typing import Optional

from pdfsearch.core.config import settings
from pdfsearch.core.ollama_client import OllamaClient, OllamaError


class OllamaLLM:
    def __init__(self, model_name: str = "", client: Optional[OllamaClient] = None):
        self.model_name = (model_name or "").strip() or settings.LLM_MODEL
        self.client = client or OllamaClient()

    def generate(self, prompt: str) -> str:
        data = self.client.post(
            "/api/generate",
            {"model": self.model_name, "prompt": prompt, "stream": False},
        )
        text = data.get("response")
        if text is None:
            raise OllamaError(f"Model '{self.model_name}' returned no response text")
        return str(text).strip()
