"""Health and status endpoints.

Exposes:
- GET /health: lightweight health check
- GET /      : status page with the model name and accuracy
"""

from fastapi import APIRouter

from ..core.config import MODEL_ACCURACY, MODEL_NAME

router = APIRouter()

@router.get("/health")
def health():
    """Container/ELB-friendly health probe endpoint."""
    return {"status": "healthy"}

@router.get("/")
def health_check():
    """Basic status for quick diagnostics."""
    return {
        "status": "OK",
        "model": MODEL_NAME,
        "model_accuracy": MODEL_ACCURACY,
    }
