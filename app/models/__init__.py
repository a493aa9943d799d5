from app.models.health import HealthResponse

__all__ = ["HealthResponse"]
