# src/wheel_spinner/schemas/settings.py
"""Settings Pydantic schemas."""

from pydantic import BaseModel, Field


class DirtyWordsUpdate(BaseModel):
    """Schema for replacing the dirty-word list."""

    words: list[str] = Field(default_factory=list, description="Words to ban, any case")
