"""Embedding source registry and helpers."""
from __future__ import annotations

from typing import Callable, Dict, Iterable, List

from ..config import get_embeddings_path
from .base import Vector, WordVectorModel, vec_sum
from .keyed import KeyedVectors
from .ollama import OllamaWordVectors

_MODEL_FACTORIES: Dict[str, Callable[[], WordVectorModel]] = {
    "keyed": lambda: KeyedVectors.load(get_embeddings_path()),
    "ollama": lambda: OllamaWordVectors(),
}

_MODEL_DESCRIPTIONS: Dict[str, str] = {
    "keyed": KeyedVectors.description,
    "ollama": OllamaWordVectors.description,
}

__all__ = [
    "KeyedVectors",
    "OllamaWordVectors",
    "Vector",
    "WordVectorModel",
    "available_models",
    "describe_models",
    "get_model",
    "vec_sum",
]


def get_model(key: str) -> WordVectorModel:
    try:
        factory = _MODEL_FACTORIES[key]
    except KeyError as exc:
        raise ValueError(f"Unknown embedding model '{key}'") from exc
    return factory()


def available_models() -> Iterable[str]:
    return _MODEL_FACTORIES.keys()


def describe_models() -> List[dict]:
    # Building a model may load a file or hit the network, so describe statically.
    return [
        {"key": key, "name": key, "description": _MODEL_DESCRIPTIONS[key]}
        for key in _MODEL_FACTORIES
    ]
