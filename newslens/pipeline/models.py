"""Pipeline models."""

from typing import Optional

from pydantic import BaseModel, Field


class RefreshResult(BaseModel):
    """Outcome of a forced refresh."""

    success: bool = Field(..., description="Whether the refresh completed")
    count: Optional[int] = Field(None, description="Stories in the new cache generation")
    error: Optional[str] = Field(None, description="Error message if failed")
    message: str = Field("", description="Human-readable status")
