"""Pydantic data models for persisted preferences."""

from pydantic import BaseModel, Field


class Settings(BaseModel):
    """User's language preferences.

    Field order matches the on-disk JSON layout.
    """

    target_languages: list[str] = Field(default_factory=list)
    source_language: str = ""
