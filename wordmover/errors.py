"""Exceptions raised by document comparisons."""
from __future__ import annotations


class ComparisonError(ValueError):
    """Input could not be compared; terminal for that single call."""


class EmptyVocabulary(ComparisonError):
    """A document has no token known to the embedding model."""


class EmptyBow(ComparisonError):
    """A document's token list was empty, so no normalised BOW exists."""


class EmptyDoc(ComparisonError):
    """No embeddable token to build a document's mean vector from."""
