from datetime import datetime
from pathlib import Path
from typing import List, Optional

import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from src.application.retrieval_service import RetrievalService
from src.domain.models import Document, SearchResult
from src.infrastructure.document_loader import DocumentLoader
from src.infrastructure.document_store import InMemoryDocumentStore

# ── Configuration ────────────────────────────────────────────────────────────
DATA_DIRECTORY = "data"
DEFAULT_TOP_K = 3
CORS_ORIGINS = ["http://localhost:5173", "http://localhost:8080", "http://127.0.0.1:8080"]

# ── API Models ───────────────────────────────────────────────────────────────
class DocumentCreate(BaseModel):
    title: str
    content: str

class DocumentSchema(BaseModel):
    id: str
    title: str
    content: Optional[str]
    timestamp: datetime

class ScoredDocumentSchema(DocumentSchema):
    score: float

class SearchRequest(BaseModel):
    query: str
    top_k: int = Field(default=DEFAULT_TOP_K, ge=1)

class SearchResponse(BaseModel):
    query: str
    results: List[ScoredDocumentSchema]

class ContextResponse(BaseModel):
    query: str
    status: str
    prompt: Optional[str]
    sources: List[ScoredDocumentSchema]


def _document_schema(document: Document) -> DocumentSchema:
    return DocumentSchema(
        id=document.id,
        title=document.title,
        content=document.content,
        timestamp=document.timestamp,
    )

def _scored_schema(result: SearchResult) -> ScoredDocumentSchema:
    return ScoredDocumentSchema(
        id=result.document.id,
        title=result.document.title,
        content=result.document.content,
        timestamp=result.document.timestamp,
        score=round(result.score, 4),
    )

# ── App Initialization ───────────────────────────────────────────────────────
app = FastAPI(
    title="Document Q&A Retrieval API",
    description="TF-IDF keyword retrieval over a small document collection.",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Initialize infrastructure (global scope for singleton behavior)
document_store = InMemoryDocumentStore()
search_service = RetrievalService(document_store, top_k=DEFAULT_TOP_K)

if Path(DATA_DIRECTORY).is_dir():
    for _document in DocumentLoader().load_directory(DATA_DIRECTORY):
        document_store.add(_document)
    print(f"[API] Loaded {document_store.count()} documents from '{DATA_DIRECTORY}/'.")
else:
    print(f"[API] No '{DATA_DIRECTORY}/' directory, starting with an empty collection.")

# ── Endpoints ────────────────────────────────────────────────────────────────
@app.get("/")
def read_root():
    return {
        "message": "Document Q&A Retrieval API is running.",
        "status": "ready" if document_store.count() else "no_documents",
        "documents_indexed": document_store.count(),
    }

@app.get("/health")
def health():
    return {"status": "ok"}

@app.get("/documents", response_model=List[DocumentSchema])
def list_documents():
    return [_document_schema(d) for d in document_store.list()]

@app.post("/documents", response_model=DocumentSchema, status_code=201)
def add_document(request: DocumentCreate):
    try:
        document = search_service.add_document(request.title, request.content)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _document_schema(document)

@app.delete("/documents/{document_id}")
def delete_document(document_id: str):
    try:
        search_service.delete_document(document_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Document not found: {document_id}")
    return {"message": f"Successfully deleted document '{document_id}'"}

@app.post("/search", response_model=SearchResponse)
def search(request: SearchRequest):
    results = search_service.search(request.query, top_k=request.top_k)
    return SearchResponse(
        query=request.query,
        results=[_scored_schema(r) for r in results],
    )

@app.post("/context", response_model=ContextResponse)
def context(request: SearchRequest):
    """Retrieve sources and the grounded prompt to send to a generative model."""
    ctx = search_service.prepare_context(request.query, top_k=request.top_k)
    return ContextResponse(
        query=ctx.query,
        status=ctx.status.value,
        prompt=ctx.prompt,
        sources=[_scored_schema(r) for r in ctx.results],
    )

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
