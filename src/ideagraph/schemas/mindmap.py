"""Mind map output model."""

from __future__ import annotations

from pydantic import BaseModel

from ideagraph.schemas.tree import TreeNode


class MindMapResult(BaseModel):
    """Final mind map output."""

    tree: TreeNode
    summary: str
    outline: str
