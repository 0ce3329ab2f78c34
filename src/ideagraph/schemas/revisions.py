"""Drive revision models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Revision(BaseModel):
    """One entry of a Drive ``revisions.list`` response."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    modified_time: datetime = Field(..., alias="modifiedTime")
    export_links: dict[str, str] = Field(default_factory=dict, alias="exportLinks")


class RevisionList(BaseModel):
    """One page of a Drive ``revisions.list`` response."""

    model_config = ConfigDict(populate_by_name=True)

    revisions: list[Revision] = Field(default_factory=list)
    next_page_token: str | None = Field(default=None, alias="nextPageToken")


class RevisionContent(BaseModel):
    """A revision paired with its exported text or a placeholder."""

    id: str
    modified_time: datetime
    content: str
