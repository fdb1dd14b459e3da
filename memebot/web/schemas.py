from __future__ import annotations

from pydantic import BaseModel, Field


class GenerateRequest(BaseModel):
    channel_id: str = Field(..., description="Slack channel (or output folder) that receives the meme.")
    text: str = Field(..., description="Template name followed by the caption, e.g. 'drake MORE TESTS'.")
