# backend/pdfsearch/core/rag.py
"""
RAG pipeline with Upload -> Query flow.

Key methods:
- ingest_pdf(path, source_name, collection): load, chunk, embed and store a PDF.
- answer(question, collection): retrieve top_k chunks and ask the LLM to answer from them.

Nothing here retries or rolls back: if storing fails half way, the chunks
already added stay in the collection.
"""
import logging
import uuid
from typing import List, Tuple

from pdfsearch.core.chroma_store import ChromaStore
from pdfsearch.core.chunker import split_documents
from pdfsearch.core.config import settings
from pdfsearch.core.embeddings import EmbeddingModel
from pdfsearch.core.llm import OllamaLLM
from pdfsearch.core.pdf_loader import load_pdf
from pdfsearch.core.prompts import ANSWER_PROMPT
from pdfsearch.logging_config import log_latency
from pdfsearch.utils import flatten_metadata

logger = logging.getLogger(__name__)


class RAGPipeline:
    def __init__(
        self,
        embed_model: EmbeddingModel,
        store: ChromaStore,
        llm: OllamaLLM,
        chunk_size: int = 0,
        overlap: int = -1,
        top_k: int = 0,
    ):
        self.embed_model = embed_model
        self.store = store
        self.llm = llm
        self.chunk_size = chunk_size or settings.CHUNK_SIZE
        self.overlap = overlap if overlap >= 0 else settings.CHUNK_OVERLAP
        self.top_k = top_k or settings.TOP_K

    @log_latency("rag.ingest_pdf")
    def ingest_pdf(self, path, source_name: str, collection: str) -> int:
        """
        Chunk, embed and store a PDF under `collection`. Returns the number of chunks added.
        """
        logger.info(f"Loading PDF | source={source_name} | collection={collection}")
        pages = load_pdf(path, source_name=source_name)
        chunks = split_documents(pages, chunk_size=self.chunk_size, overlap=self.overlap)
        if not chunks:
            raise ValueError(f"No extractable text found in {source_name}")
        logger.info(f"Split into {len(chunks)} chunks")

        texts = [c["text"] for c in chunks]
        metadatas = [flatten_metadata(c["metadata"]) for c in chunks]
        vectors = self.embed_model.embed_texts(texts)
        ids = [str(uuid.uuid4()) for _ in chunks]
        self.store.add(collection, ids, vectors, texts, metadatas)
        return len(chunks)

    def build_prompt(self, question: str, contexts: List[dict]) -> str:
        context = "\n\n".join(c.get("text", "") for c in contexts)
        return ANSWER_PROMPT.format(context=context, question=question)

    @log_latency("rag.answer")
    def answer(self, question: str, collection: str) -> Tuple[str, List[dict]]:
        """
        Returns: (answer_text, [metadata of each retrieved chunk, best match first])
        """
        logger.info(f"Query received | question_length={len(question)} | collection={collection}")
        q_vector = self.embed_model.embed_text(question)
        contexts = self.store.search(collection, q_vector, top_k=self.top_k)
        logger.info(f"Retrieved {len(contexts)} chunks")
        prompt = self.build_prompt(question, contexts)
        answer_text = self.llm.generate(prompt)
        return answer_text, [c.get("metadata", {}) for c in contexts]
