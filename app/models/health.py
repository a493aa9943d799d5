"""
Health check response model.
Service status indicator for API monitoring.
"""
from pydantic import BaseModel

class HealthResponse(BaseModel):
    status: str
    service: str
