"""Diary event model with Pydantic v2 validation."""

from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel, Field


class DiaryEvent(BaseModel):
    """All-day calendar event built from a diary note.

    Events are rebuilt on every feed request and never persisted.
    """

    model_config = {"frozen": True}

    title: str
    date: date
    description: str = ""
    url: Optional[str] = None
    duration_days: int = Field(default=1, ge=1)
    status: Literal["CONFIRMED"] = "CONFIRMED"
    busy_status: Literal["FREE"] = "FREE"
    source_path: Optional[str] = None
