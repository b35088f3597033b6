# backend/pdfsearch/core/config.py
import os
from pathlib import Path
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parents[2]  # backend/
ENV_PATH = BASE_DIR / ".env"
load_dotenv(dotenv_path=ENV_PATH)


def _origins(raw: str):
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings:
    # Ollama runtime (embeddings + generation)
    OLLAMA_BASE_URL: str = os.getenv("OLLAMA_BASE_URL", "http://localhost:11434").strip().rstrip("/")
    EMBEDDING_MODEL: str = os.getenv("EMBEDDING_MODEL", "embeddinggemma").strip()
    LLM_MODEL: str = os.getenv("LLM_MODEL", "gemma:2b").strip()
    OLLAMA_TIMEOUT: int = int(os.getenv("OLLAMA_TIMEOUT", 60))
    EMBED_BATCH_SIZE: int = int(os.getenv("EMBED_BATCH_SIZE", 32))

    # Chroma server
    CHROMA_HOST: str = os.getenv("CHROMA_HOST", "localhost").strip()
    CHROMA_PORT: int = int(os.getenv("CHROMA_PORT", 8000))
    DEFAULT_COLLECTION: str = os.getenv("DEFAULT_COLLECTION", "documents").strip()

    # Chunking / retrieval
    CHUNK_SIZE: int = int(os.getenv("CHUNK_SIZE", 500))
    CHUNK_OVERLAP: int = int(os.getenv("CHUNK_OVERLAP", 200))
    TOP_K: int = int(os.getenv("TOP_K", 3))

    # Transient upload storage
    STORAGE_DIR: Path = Path(os.getenv("STORAGE_DIR", str(BASE_DIR / "pdfsearch" / "storage")))
    UPLOAD_DIR: Path = STORAGE_DIR / "uploads"

    # Request deadlines (seconds)
    UPLOAD_TIMEOUT: float = float(os.getenv("UPLOAD_TIMEOUT", 300))
    QUERY_TIMEOUT: float = float(os.getenv("QUERY_TIMEOUT", 120))

    # Server
    HOST: str = os.getenv("HOST", "127.0.0.1").strip()
    PORT: int = int(os.getenv("PORT", 3002))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").strip().upper()

    # CORS (for dev)
    ALLOW_ORIGINS = _origins(os.getenv("ALLOW_ORIGINS", "*"))

    # Streamlit UI
    API_URL: str = os.getenv("API_URL", "http://localhost:3002").strip().rstrip("/")
    UI_TIMEOUT: float = float(os.getenv("UI_TIMEOUT", 330))
    TAB_WIDTH: int = 180
    TAB_STRIP_PADDING: int = 50
    TAB_STRIP_WIDTH: int = int(os.getenv("TAB_STRIP_WIDTH", 1100))
    OVERFLOW_PAGE_SIZE: int = 5

# instantiate
settings = Settings()

# Ensure storage dirs exist
settings.STORAGE_DIR.mkdir(parents=True, exist_ok=True)
settings.UPLOAD_DIR.mkdir(parents=True, exist_ok=True)
