from fastapi import APIRouter

from .features.create_event.router import router as create_event_router
from .features.create_invite.router import router as create_invite_router
from .features.delete_event.router import router as delete_event_router
from .features.get_event.router import router as get_event_router
from .features.list_events.router import router as list_events_router
from .features.list_invites.router import router as list_invites_router
from .features.manage_cohosts.router import router as manage_cohosts_router
from .features.send_invite.router import router as send_invite_router
from .features.update_event.router import router as update_event_router

router = APIRouter()

router.include_router(list_events_router)
router.include_router(create_event_router)
router.include_router(get_event_router)
router.include_router(update_event_router)
router.include_router(delete_event_router)
router.include_router(manage_cohosts_router)
router.include_router(list_invites_router)
router.include_router(create_invite_router)
router.include_router(send_invite_router)
