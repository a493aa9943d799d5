"""
Health check endpoint.
Lets monitors confirm the backend is up without touching the greeting route.
"""
from fastapi import APIRouter
from app.models import HealthResponse

SERVICE_NAME = "hello-backend"

router = APIRouter()

@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", service=SERVICE_NAME)
