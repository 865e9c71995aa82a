"""Pydantic schemas for the wordmover API."""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class WordDistanceRequest(BaseModel):
    word1: str
    word2: str


class WordDistanceResponse(BaseModel):
    word1: str
    word2: str
    distance: Optional[float] = Field(None, description="Null when either word is unknown")


class CompareRequest(BaseModel):
    doc1: str = Field(..., description="First document, split on whitespace")
    doc2: str = Field(..., description="Second document, split on whitespace")
    solver: Optional[str] = Field(None, description="Distance solver key; server default if omitted")


class DistanceResponse(BaseModel):
    solver: str
    distance: float


class SimilarityRequest(BaseModel):
    doc1: str
    doc2: str


class SimilarityResponse(BaseModel):
    similarity: float


class RankRequest(BaseModel):
    query: str
    documents: List[str]
    top_k: int = Field(5, ge=1, le=50)
    solver: Optional[str] = None


class RankedResult(BaseModel):
    position: int
    distance: float
    document: str


class RankResponse(BaseModel):
    solver: str
    results: List[RankedResult]


class StrategyDescriptor(BaseModel):
    key: str
    name: str
    description: str


class StrategyListResponse(BaseModel):
    strategies: List[StrategyDescriptor]


class ErrorResponse(BaseModel):
    detail: str
