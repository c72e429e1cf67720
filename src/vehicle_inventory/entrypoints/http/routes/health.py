from fastapi import APIRouter
from fastapi.responses import RedirectResponse

router = APIRouter(tags=["Health"])


@router.get("/health", summary="Liveness probe")
def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/", include_in_schema=False)
def root() -> RedirectResponse:
    return RedirectResponse(url="/docs")
