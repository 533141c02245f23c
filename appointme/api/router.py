"""Main API router."""

from fastapi import APIRouter

from appointme.api.routes import auth, business_reps, businesses

router = APIRouter()

router.include_router(auth.router)
router.include_router(business_reps.router)
router.include_router(businesses.router)


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "success", "message": "AppointMe API is running"}
