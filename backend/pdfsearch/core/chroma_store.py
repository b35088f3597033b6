# chroma_store.py
import logging
from typing import List, Optional

import numpy as np

from pdfsearch.core.config import settings

logger = logging.getLogger(__name__)


class ChromaStore:
    def __init__(self, host: Optional[str] = None, port: Optional[int] = None):
        self.host = host or settings.CHROMA_HOST
        self.port = port or settings.CHROMA_PORT
        self._client = None

    @property
    def client(self):
        """
        Connect on first use so the app can start before Chroma is reachable.
        """
        if self._client is None:
            try:
                import chromadb
            except ImportError as e:
                raise ImportError(
                    "chromadb is not installed in this environment. "
                    "Run: pip install chromadb-client\nOriginal error: " + str(e)
                )
            self._client = chromadb.HttpClient(host=self.host, port=self.port)
            logger.info(f"Connected to Chroma at {self.host}:{self.port}")
        return self._client

    def collection(self, name: str):
        """
        Resolve the named collection, creating it (cosine space) if missing.
        Not cached: every call asks the server again.
        """
        return self.client.get_or_create_collection(name=name, metadata={"hnsw:space": "cosine"})

    def add(self, collection: str, ids: List[str], vectors: np.ndarray, texts: List[str], metadatas: List[dict]):
        """
        vectors: (n, dim) float32
        ids, texts, metadatas: length n, metadata values already flattened
        """
        if not (len(ids) == len(vectors) == len(texts) == len(metadatas)):
            raise ValueError("ids, vectors, texts and metadatas must have the same length")
        col = self.collection(collection)
        col.add(
            ids=list(ids),
            embeddings=np.asarray(vectors, dtype=np.float32).tolist(),
            documents=list(texts),
            metadatas=list(metadatas),
        )
        logger.info(f"Stored {len(ids)} chunks in collection '{collection}'")

    def count(self, collection: str) -> int:
        return self.collection(collection).count()

    def search(self, collection: str, q_vector: np.ndarray, top_k: int = 3) -> List[dict]:
        col = self.collection(collection)
        total = col.count()
        if total == 0 or top_k <= 0:
            return []
        res = col.query(
            query_embeddings=[np.asarray(q_vector, dtype=np.float32).tolist()],
            n_results=min(top_k, total),
            include=["documents", "metadatas", "distances"],
        )
        ids = res["ids"][0]
        docs = res["documents"][0]
        metas = res["metadatas"][0]
        dists = res["distances"][0]
        results = []
        for id_, doc, md, dist in zip(ids, docs, metas, dists):
            results.append({
                "id": id_,
                "text": doc or "",
                "metadata": dict(md or {}),
                "score": 1.0 - float(dist),
            })
        return results[:top_k]
