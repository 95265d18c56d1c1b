"""
Response model for the health endpoint.
"""
from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    """Liveness plus credential presence."""

    model_config = ConfigDict(populate_by_name=True)

    ok: bool = True
    has_key: bool = Field(..., alias="hasKey")
    time: str
