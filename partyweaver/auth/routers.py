from fastapi import APIRouter

from .features.get_current_user.router import router as get_current_user_router
from .features.request_sign_in.router import router as request_sign_in_router
from .features.verify_sign_in.router import router as verify_sign_in_router

router = APIRouter()

router.include_router(request_sign_in_router)
router.include_router(verify_sign_in_router)
router.include_router(get_current_user_router)
