from fastapi import APIRouter
from safehorizon.api import localization
from safehorizon.api import translation

router = APIRouter()


@router.get("/health")
async def health():
    return {"status": "ok"}


# Include translation and localization routers
router.include_router(translation.router)
router.include_router(localization.router)
