from fastapi import APIRouter

from habitgrid.api.routes import bridge_body_error
from habitgrid.api.routes import router as bridge_router

router = APIRouter()
router.include_router(bridge_router)

__all__ = ["router", "bridge_body_error"]
