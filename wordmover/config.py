"""Configuration helpers for wordmover."""
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent
WORKSPACE_ROOT = BASE_DIR.parent

# Word vectors in word2vec/GloVe text format (used by the "keyed" model)
DEFAULT_EMBEDDINGS_PATH = Path(
    os.getenv("WORDMOVER_EMBEDDINGS", str(WORKSPACE_ROOT / "data" / "vectors.txt"))
)

DEFAULT_MODEL = os.getenv("WORDMOVER_MODEL", "keyed")
DEFAULT_SOLVER = os.getenv("WORDMOVER_SOLVER", "sinkhorn")

DEFAULT_OLLAMA_BASE_URL = os.getenv("OLLAMA_BASE_URL", "http://localhost:11434")
DEFAULT_OLLAMA_EMBED_MODEL = os.getenv("OLLAMA_EMBED_MODEL", "nomic-embed-text")


def get_embeddings_path() -> Path:
    """Return the path to the word vectors file, raising if it does not exist."""
    if not DEFAULT_EMBEDDINGS_PATH.exists():
        raise FileNotFoundError(
            "Expected word vectors file not found at " f"{DEFAULT_EMBEDDINGS_PATH}"
        )
    return DEFAULT_EMBEDDINGS_PATH
