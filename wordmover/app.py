"""FastAPI application exposing document comparisons."""
from __future__ import annotations

from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .comparator import WordVectorComparator
from .config import DEFAULT_MODEL, DEFAULT_SOLVER
from .documents import tokenize
from .embeddings import WordVectorModel, describe_models, get_model
from .errors import ComparisonError
from .logging_config import get_logger
from .schemas import (CompareRequest, DistanceResponse, ErrorResponse,
                      RankedResult, RankRequest, RankResponse,
                      SimilarityRequest, SimilarityResponse,
                      StrategyDescriptor, StrategyListResponse,
                      WordDistanceRequest, WordDistanceResponse)
from .solvers import DistanceSolver, describe_solvers, get_solver

logger = get_logger("app")

app = FastAPI(
    title="wordmover – document distance service",
    version="0.1.0",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_model: Optional[WordVectorModel] = None


def get_embedding_model() -> WordVectorModel:
    global _model
    if _model is None:
        try:
            _model = get_model(DEFAULT_MODEL)
        except (FileNotFoundError, RuntimeError, ValueError) as exc:
            logger.error(f"Embedding model '{DEFAULT_MODEL}' unavailable: {exc}")
            raise HTTPException(status_code=503, detail=str(exc)) from exc
    return _model


def _resolve_solver(key: Optional[str]) -> DistanceSolver:
    try:
        return get_solver(key or DEFAULT_SOLVER)
    except ValueError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@app.exception_handler(ComparisonError)
async def comparison_error_handler(request: Request, exc: ComparisonError) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": f"{type(exc).__name__}: {exc}"})


@app.get("/solvers", response_model=StrategyListResponse)
def list_solvers() -> StrategyListResponse:
    return StrategyListResponse(
        strategies=[StrategyDescriptor(**item) for item in describe_solvers()]
    )


@app.get("/models", response_model=StrategyListResponse)
def list_models() -> StrategyListResponse:
    return StrategyListResponse(
        strategies=[StrategyDescriptor(**item) for item in describe_models()]
    )


@app.post("/word-distance", response_model=WordDistanceResponse)
def word_distance(
    request: WordDistanceRequest,
    model: WordVectorModel = Depends(get_embedding_model),
) -> WordDistanceResponse:
    comparator = WordVectorComparator(model)
    distance = comparator.word_distance(request.word1, request.word2)
    return WordDistanceResponse(word1=request.word1, word2=request.word2, distance=distance)


@app.post(
    "/distance",
    response_model=DistanceResponse,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
def distance(
    request: CompareRequest,
    model: WordVectorModel = Depends(get_embedding_model),
) -> DistanceResponse:
    solver = _resolve_solver(request.solver)
    comparator = WordVectorComparator(model, solver)
    value = comparator.wm_distance(tokenize(request.doc1), tokenize(request.doc2))
    return DistanceResponse(solver=solver.name, distance=value)


@app.post(
    "/similarity",
    response_model=SimilarityResponse,
    responses={422: {"model": ErrorResponse}},
)
def similarity(
    request: SimilarityRequest,
    model: WordVectorModel = Depends(get_embedding_model),
) -> SimilarityResponse:
    comparator = WordVectorComparator(model)
    value = comparator.similarity(tokenize(request.doc1), tokenize(request.doc2))
    return SimilarityResponse(similarity=value)


@app.post(
    "/rank",
    response_model=RankResponse,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
def rank(
    request: RankRequest,
    model: WordVectorModel = Depends(get_embedding_model),
) -> RankResponse:
    solver = _resolve_solver(request.solver)
    comparator = WordVectorComparator(model, solver)
    corpus = [tokenize(document) for document in request.documents]
    hits = comparator.rank(tokenize(request.query), corpus, top_k=request.top_k)
    return RankResponse(
        solver=solver.name,
        results=[
            RankedResult(
                position=hit.position,
                distance=hit.distance,
                document=request.documents[hit.position],
            )
            for hit in hits
        ],
    )
