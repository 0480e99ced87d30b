# Models for the build inputs
#
# SourceConfig mirrors learnings.json, LessonRecord mirrors the codelab.json
# file that claat writes next to every exported lesson.

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class SourceConfig(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # Google Doc ids to export, in build order
    google_docs: List[str] = Field(default_factory=list, alias="googleDocs")


class LessonRecord(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    # Deployment environment claat was asked to target
    environment: str = ""
    # Last time the source document changed
    updated: Optional[datetime] = Field(
        default=None, validation_alias=AliasChoices("updated", "Updated")
    )
    # Unique lesson id, also the name of its output directory
    id: str = ""
    # Estimated completion time
    duration: int = 0
    title: str = ""
    author: str = ""
    summary: str = ""
    theme: str = ""
    # Should always contain "cloud"
    category: List[str] = Field(default_factory=list)
    # Technologies the lesson covers, used to build the landing page index
    tags: List[str] = Field(default_factory=list)
    # Where readers send feedback
    feedback: str = ""
    # Lesson page, relative to the lesson folder until rewritten
    url: str = ""

    @field_validator(
        "environment", "id", "title", "author", "summary", "theme", "feedback", "url",
        mode="before",
    )
    @classmethod
    def _null_string(cls, value):
        return "" if value is None else value

    @field_validator("category", "tags", mode="before")
    @classmethod
    def _null_list(cls, value):
        return [] if value is None else value

    @field_validator("duration", mode="before")
    @classmethod
    def _null_duration(cls, value):
        return 0 if value is None else value

    def with_url_prefix(self, prefix: str) -> "LessonRecord":
        return self.model_copy(update={"url": prefix + self.url})

    def tag_keys(self) -> List[str]:
        """Lower-cased tags in their original order, duplicates included."""
        return [tag.lower() for tag in self.tags]
