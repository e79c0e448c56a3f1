from fastapi import APIRouter

from .features.get_invitation.router import router as get_invitation_router
from .features.respond.router import router as respond_router

router = APIRouter()

router.include_router(get_invitation_router)
router.include_router(respond_router)
