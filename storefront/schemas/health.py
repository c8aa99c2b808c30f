"""Health check schema."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    status: str
    # Wire name kept for existing clients; carries the Python version.
    runtime_version: str = Field(serialization_alias="nodeVersion")
    time: str
    environment: str

    model_config = ConfigDict(populate_by_name=True)
