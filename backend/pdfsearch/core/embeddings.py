# backend/pdfsearch/core/embeddings.py
"""
Embeddings wrapper around the Ollama /api/embed endpoint.
If no model name is given, fall back to settings.EMBEDDING_MODEL.
"""

import logging
from typing import List, Optional

import numpy as np

from pdfsearch.core.config import settings
from pdfsearch.core.ollama_client import OllamaClient, OllamaError

logger = logging.getLogger(__name__)


class EmbeddingModel:
    def __init__(self, model_name: str = "", client: Optional[OllamaClient] = None, batch_size: int = 0):
        self.model_name = (model_name or "").strip() or settings.EMBEDDING_MODEL
        self.client = client or OllamaClient()
        self.batch_size = batch_size or settings.EMBED_BATCH_SIZE

    def _embed_batch(self, texts: List[str]) -> List[List[float]]:
        data = self.client.post("/api/embed", {"model": self.model_name, "input": texts})
        vectors = data.get("embeddings")
        if not isinstance(vectors, list) or len(vectors) != len(texts):
            got = len(vectors) if isinstance(vectors, list) else 0
            raise OllamaError(
                f"Embedding model '{self.model_name}' returned {got} vectors for {len(texts)} inputs"
            )
        return vectors

    def embed_texts(self, texts: List[str]) -> np.ndarray:
        """
        Embed a list of texts -> float32 array of shape (len(texts), dim).
        """
        if not texts:
            return np.zeros((0, 0), dtype=np.float32)
        vectors = []
        for i in range(0, len(texts), self.batch_size):
            vectors.extend(self._embed_batch(texts[i : i + self.batch_size]))
        logger.info(f"Embedded {len(texts)} texts with {self.model_name}")
        return np.asarray(vectors, dtype=np.float32)

    def embed_text(self, text: str) -> np.ndarray:
        """
        Embed a single text -> numpy vector.
        """
        return self.embed_texts([text])[0]
