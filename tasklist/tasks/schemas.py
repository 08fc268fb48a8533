"""Pydantic schemas for the task service."""

import json
from typing import Any

from pydantic import BaseModel, Field, field_validator


class TaskRequest(BaseModel):
    """Body of add and delete requests.

    The task value is not validated: empty strings are kept, other JSON
    scalars are stored in their JSON text form, and a missing or null task
    becomes the empty string.
    """
    
    task: str = Field(default="", description="Opaque task text")

    @field_validator("task", mode="before")
    @classmethod
    def _as_text(cls, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        return json.dumps(value)
