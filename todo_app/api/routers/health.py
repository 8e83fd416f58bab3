from fastapi import APIRouter

from todo_app.domain.schemas import HealthOut

router = APIRouter(tags=["health"])


@router.get("/health", summary="Liveness", response_model=HealthOut)
def health():
    return {"status": "ok"}
