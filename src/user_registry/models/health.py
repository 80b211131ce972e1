"""Health check response models."""

from pydantic import BaseModel, ConfigDict


class HealthCheckResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str
    environment: str | None = None
    user_count: int = 0
    message: str = "API is healthy"

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "ok",
                "version": "1.0.0",
                "environment": "development",
                "user_count": 2,
                "message": "API is healthy",
            }
        }
    )
