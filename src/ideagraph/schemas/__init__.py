"""Shared schemas for ideagraph."""

from ideagraph.schemas.auth import AccessToken
from ideagraph.schemas.mindmap import MindMapResult
from ideagraph.schemas.revisions import Revision, RevisionContent, RevisionList
from ideagraph.schemas.tree import TreeNode

__all__ = [
    "AccessToken",
    "MindMapResult",
    "Revision",
    "RevisionContent",
    "RevisionList",
    "TreeNode",
]
