"""Word Mover's distance and embedding similarity between short documents."""

from .bow import bow, bow_normalized
from .comparator import RankedDocument, WordVectorComparator
from .dictionary import Dictionary
from .distance import build_distance_matrix, euclidean_distance
from .errors import ComparisonError, EmptyBow, EmptyDoc, EmptyVocabulary
from .matrix import Matrix

__all__ = [
    "ComparisonError",
    "Dictionary",
    "EmptyBow",
    "EmptyDoc",
    "EmptyVocabulary",
    "Matrix",
    "RankedDocument",
    "WordVectorComparator",
    "bow",
    "bow_normalized",
    "build_distance_matrix",
    "euclidean_distance",
]
