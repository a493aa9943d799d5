"""
Root endpoint.
Plain-text greeting served at the service root.
"""
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

GREETING = "Hello from Backend!"

router = APIRouter()

@router.get("/", response_class=PlainTextResponse)
async def root() -> str:
    return GREETING
