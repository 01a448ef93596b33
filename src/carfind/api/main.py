# src/carfind/api/main.py

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import List, Optional

from ..data.loader import build_service
from ..service.completion import CompletionService, normalize

# ---------------------- Schemas ----------------------
class SuggestRequest(BaseModel):
    prefix: str = Field(..., description="Partial text typed by the user")
    limit: Optional[int] = Field(None, ge=1, description="Maximum number of suggestions")

class SuggestResponse(BaseModel):
    prefix: str
    normalized_prefix: str
    suggestions: List[str]
    count: int

# ---------------------- Factory ----------------------
def create_app(service: CompletionService = None) -> FastAPI:
    """
    Factory to create FastAPI app.
    Allows injecting a pre-loaded service for testing.
    """
    app = FastAPI(title='CarFind Completion API')

    # CORS middleware for frontend access
    app.add_middleware(
        CORSMiddleware,
        allow_origins=['*'],
        allow_methods=['*'],
        allow_headers=['*'],
    )

    # Use provided service (for tests) or build one from the configured vocabulary
    if service is None:
        service = build_service()

    def run_suggest(prefix: str, limit: Optional[int]) -> SuggestResponse:
        suggestions = service.suggest(prefix, limit=limit)
        return SuggestResponse(
            prefix=prefix,
            normalized_prefix=normalize(prefix),
            suggestions=suggestions,
            count=len(suggestions),
        )

    # ---------- Health check ----------
    @app.get('/')
    def read_root():
        return {'message': 'CarFind completion backend is running', 'vocabulary_size': len(service)}

    # ---------- Suggestions ----------
    @app.get('/suggest', response_model=SuggestResponse)
    def suggest_get(prefix: str = Query(""), limit: Optional[int] = Query(None, ge=1)):
        return run_suggest(prefix, limit)

    @app.post('/suggest', response_model=SuggestResponse)
    def suggest_post(req: SuggestRequest):
        return run_suggest(req.prefix, req.limit)

    return app

# ---------------------- Uvicorn entry ----------------------
# Expose a top-level 'app' for Uvicorn
app = create_app()
