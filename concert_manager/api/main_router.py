from fastapi import APIRouter
from concert_manager.api.concert_system import (
    api_auth,
    api_admin,
    api_staff,
    api_venues,
    api_artists,
    api_streaming,
    api_concerts,
    api_tickets,
    api_feedback,
    api_sponsorships,
)

router = APIRouter()

router.include_router(api_auth.router)
router.include_router(api_admin.router)
router.include_router(api_staff.router)
router.include_router(api_venues.router)
router.include_router(api_artists.router)
router.include_router(api_streaming.router)
router.include_router(api_concerts.router)
router.include_router(api_tickets.router)
router.include_router(api_feedback.router)
router.include_router(api_sponsorships.router)
