from fastapi import APIRouter
from contact_api.api.endpoints import contact, health

api_router = APIRouter(prefix="/api")

api_router.include_router(contact.router, prefix="/contact", tags=["Contact"])
api_router.include_router(health.router, tags=["Health"])
