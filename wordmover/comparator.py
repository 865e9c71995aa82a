"""Document comparison over word embeddings."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .bow import bow_normalized
from .dictionary import Dictionary
from .distance import build_distance_matrix, euclidean_distance
from .embeddings.base import Vector, WordVectorModel
from .errors import ComparisonError, EmptyBow, EmptyDoc, EmptyVocabulary
from .logging_config import get_logger
from .solvers.base import DistanceSolver

logger = get_logger("comparator")


@dataclass
class RankedDocument:
    """Single hit from :meth:`WordVectorComparator.rank`."""

    position: int
    distance: float
    tokens: List[str]


class WordVectorComparator:
    """Compares tokenised documents with an embedding model and an optional solver.

    Holds no state between calls; every comparison builds its own
    dictionaries and cost matrix.
    """

    def __init__(self, model: WordVectorModel, solver: Optional[DistanceSolver] = None) -> None:
        self.model = model
        self.solver = solver

    def dictionary(self, doc: Sequence[str]) -> Dictionary:
        """Reindexed vocabulary of the tokens the model knows."""
        dictionary = Dictionary()
        for word in doc:
            if self.model.word_index(word) is not None:
                dictionary.insert(word)
        dictionary.reindex()
        return dictionary

    def word_distance(self, word1: str, word2: str) -> Optional[float]:
        vec1 = self.model.word_to_vector(word1)
        if vec1 is None:
            return None
        vec2 = self.model.word_to_vector(word2)
        if vec2 is None:
            return None
        return euclidean_distance(vec1, vec2)

    def wm_distance(self, doc1: Sequence[str], doc2: Sequence[str]) -> float:
        """Word Mover's distance between two token sequences.

        Raises:
            EmptyVocabulary: either document has no token known to the model.
            EmptyBow: a normalised bag-of-words could not be built.
            ValueError: the comparator was built without a solver.
        """
        if self.solver is None:
            raise ValueError("wm_distance requires a distance solver")
        doc1 = list(doc1)
        doc2 = list(doc2)
        dict1 = self.dictionary(doc1)
        dict2 = self.dictionary(doc2)
        if dict1.is_empty() or dict2.is_empty():
            raise EmptyVocabulary("empty dictionary")

        dictionary = dict1.join(dict2)
        if len(dictionary) <= 1:
            logger.debug("Joined vocabulary has a single word; nothing to transport")
            return 1.0

        bow1 = bow_normalized(doc1, dictionary)
        bow2 = bow_normalized(doc2, dictionary)
        if bow1 is None or bow2 is None:
            raise EmptyBow("empty doc bow")

        matrix = build_distance_matrix(dictionary, dict1, dict2, self.model)
        logger.debug(
            f"Solving {self.solver.name} over {len(dictionary)} words "
            f"({len(dict1)} x {len(dict2)} cross pairs)"
        )
        return self.solver.solve(bow1, bow2, matrix)

    def doc_to_unit_core(self, doc: Sequence[str]) -> Vector:
        """Mean embedding of the document, scaled to unit length when non-zero."""
        doc = list(doc)
        if not doc:
            raise EmptyDoc("empty document")
        total = self.model.sentence_to_vector(" ".join(doc))
        if not total:
            raise EmptyDoc("no embeddable tokens in document")
        mean = [value / len(doc) for value in total]
        norm = math.sqrt(sum(value * value for value in mean))
        if norm == 0:
            return mean
        return [value / norm for value in mean]

    def similarity(self, doc1: Sequence[str], doc2: Sequence[str]) -> float:
        core1 = self.doc_to_unit_core(doc1)
        core2 = self.doc_to_unit_core(doc2)
        return sum(a * b for a, b in zip(core1, core2))

    def rank(
        self,
        query: Sequence[str],
        documents: Sequence[Sequence[str]],
        *,
        top_k: int = 5,
    ) -> List[RankedDocument]:
        """Corpus documents nearest to ``query`` by :meth:`wm_distance`."""
        if top_k < 1:
            raise ValueError(f"top_k must be at least 1, got {top_k}")
        query = list(query)
        if self.dictionary(query).is_empty():
            raise EmptyVocabulary("empty query dictionary")
        results: List[RankedDocument] = []
        for position, doc in enumerate(documents):
            try:
                distance = self.wm_distance(query, doc)
            except ComparisonError as exc:
                logger.warning(f"Skipping document {position}: {exc}")
                continue
            results.append(RankedDocument(position=position, distance=distance, tokens=list(doc)))
        results.sort(key=lambda item: item.distance)
        return results[:top_k]
