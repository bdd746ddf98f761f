from fastapi import APIRouter
from umlgen.api.routes_health import router as health_router
from umlgen.api.routes_generate import router as generate_router
from umlgen.api.routes_exports import router as exports_router

router = APIRouter()
router.include_router(health_router, tags=["health"])
router.include_router(generate_router, tags=["generate"])
router.include_router(exports_router, tags=["exports"])
