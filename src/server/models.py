"""Pydantic models for the API."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

from server.server_config import MAX_TAB_SIZE


class MindMapRequest(BaseModel):
    """Request model for the /api/mindmap endpoint.

    Attributes
    ----------
    text : str
        Indented outline text. May be empty.
    tab_size : int | None
        Tab stop width used to measure indentation. ``None`` counts each
        tab as one unit.

    """

    text: str = Field(..., description="Indented outline text")
    tab_size: int | None = Field(
        default=None,
        ge=1,
        le=MAX_TAB_SIZE,
        description="Tab stop width for indentation",
    )


class MindMapResponse(BaseModel):
    """Success response model for the mind map endpoints.

    Attributes
    ----------
    tree : dict[str, Any]
        Root node in ``{name, children?}`` renderer shape.
    summary : str
        Node count, top-level count and depth.
    outline : str
        Plain text rendering of the tree.
    node_count : int
        Number of nodes below the root.

    """

    tree: dict[str, Any] = Field(..., description="Tree in renderer shape")
    summary: str = Field(..., description="Tree summary")
    outline: str = Field(..., description="Plain text outline")
    node_count: int = Field(..., ge=0, description="Nodes below the root")


class RevisionsRequest(BaseModel):
    """Request model for the /api/revisions endpoint.

    Attributes
    ----------
    document : str
        Google Doc link or document id.
    access_token : str | None
        OAuth access token. Falls back to server-side credentials when omitted.

    """

    document: str = Field(..., description="Google Doc link or ID")
    access_token: str | None = Field(default=None, description="OAuth access token")

    @field_validator("document")
    @classmethod
    def validate_document(cls, v: str) -> str:
        """Strip surrounding whitespace from ``document``."""
        return v.strip()


class RevisionItem(BaseModel):
    """One revision and its exported text."""

    id: str
    modified_time: datetime
    content: str


class RevisionsResponse(BaseModel):
    """Success response model for the /api/revisions endpoint."""

    document_id: str = Field(..., description="Resolved document ID")
    revisions: list[RevisionItem] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Error response model for all endpoints.

    Attributes
    ----------
    error : str
        Error message describing what went wrong.

    """

    error: str = Field(..., description="Error message")
