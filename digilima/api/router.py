from fastapi import APIRouter
from digilima.api import contact

api_router = APIRouter()

# Include contact endpoint
api_router.include_router(contact.router, tags=["contact"])
