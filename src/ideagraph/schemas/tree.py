"""Outline tree models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class TreeNode(BaseModel):
    """A named outline node with ordered children.

    Attributes:
        name: Trimmed text of the source line.
        indent: Leading whitespace width of the source line. ``None`` for the
            synthetic root.
        children: Child nodes in input order.
    """

    name: str
    indent: int | None = Field(default=None, ge=0)
    children: list["TreeNode"] = Field(default_factory=list)
