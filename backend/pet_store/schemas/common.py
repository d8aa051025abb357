"""Shared response schemas."""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Plain confirmation message, e.g. after a delete."""

    message: str = Field(..., description="Human-readable confirmation")


# Largest value a 64-bit INTEGER column accepts.
MAX_ID = 2**63 - 1
