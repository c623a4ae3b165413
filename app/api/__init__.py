from fastapi import APIRouter

from app.api.modules.contact.routes.contact import router as contact_router

router = APIRouter(prefix="/api")
router.include_router(contact_router)
