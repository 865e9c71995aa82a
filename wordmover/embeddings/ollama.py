"""Word vectors served by a local Ollama server."""
from __future__ import annotations

import zlib
from typing import Optional

import requests

from ..config import DEFAULT_OLLAMA_BASE_URL, DEFAULT_OLLAMA_EMBED_MODEL
from ..logging_config import get_logger
from .base import Vector, vec_sum

logger = get_logger("embeddings.ollama")


class OllamaWordVectors:
    """Embedding source that asks Ollama for one vector per word.

    Nothing is cached: every lookup is a request. ``word_index`` is the CRC32
    of the word, reported only for words the server embeds.
    """

    name = "ollama"
    description = "Per-word embeddings from a local Ollama server."

    def __init__(
        self,
        *,
        base_url: str | None = None,
        model: str | None = None,
        timeout: float = 30,
    ) -> None:
        self.base_url = base_url or DEFAULT_OLLAMA_BASE_URL
        self.model = model or DEFAULT_OLLAMA_EMBED_MODEL
        self.timeout = timeout
        self._check_server()

    def _check_server(self) -> None:
        try:
            response = requests.get(f"{self.base_url}/api/tags", timeout=5)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise RuntimeError(
                "Ollama server not reachable. Ensure Ollama is running locally."
            ) from exc

    def word_to_vector(self, word: str) -> Optional[Vector]:
        if not word.strip():
            return None
        response = requests.post(
            f"{self.base_url}/api/embeddings",
            json={"model": self.model, "prompt": word},
            timeout=self.timeout,
        )
        response.raise_for_status()
        embedding = response.json().get("embedding") or []
        if not embedding:
            logger.debug(f"No embedding returned for '{word}'")
            return None
        return [float(value) for value in embedding]

    def word_index(self, word: str) -> Optional[int]:
        if self.word_to_vector(word) is None:
            return None
        return zlib.crc32(word.encode("utf-8"))

    def sentence_to_vector(self, text: str) -> Optional[Vector]:
        vectors = [vector for vector in map(self.word_to_vector, text.split()) if vector]
        if not vectors:
            return None
        return vec_sum(vectors)
