from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Health"])

LIVENESS_MESSAGE = "API Server is running successfully!"


@router.get("/", response_class=PlainTextResponse, summary="Liveness")
def root() -> str:
    return LIVENESS_MESSAGE


@router.get("/health", summary="Health check")
def health() -> dict[str, str]:
    return {"status": "ok"}
