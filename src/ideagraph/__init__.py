"""ideagraph: build mind maps from indented text and browse Drive revisions."""

from ideagraph.auth import DriveSession, OAuthCredentials, connect, refresh_access_token
from ideagraph.document_id import extract_document_id
from ideagraph.exceptions import (
    AuthenticationError,
    DocumentIdError,
    DocumentNotFoundError,
    FetchError,
    FileReadError,
    IdeagraphError,
    ParseError,
)
from ideagraph.mindmap import build_mind_map, load_mind_map
from ideagraph.outline_parser import parse_outline
from ideagraph.revisions import fetch_all_revision_contents, list_revisions
from ideagraph.schemas import MindMapResult, RevisionContent, TreeNode
from ideagraph.tree_format import render_outline, to_renderer_dict

__all__ = [
    "AuthenticationError",
    "DocumentIdError",
    "DocumentNotFoundError",
    "DriveSession",
    "FetchError",
    "FileReadError",
    "IdeagraphError",
    "MindMapResult",
    "OAuthCredentials",
    "ParseError",
    "RevisionContent",
    "TreeNode",
    "build_mind_map",
    "connect",
    "extract_document_id",
    "fetch_all_revision_contents",
    "list_revisions",
    "load_mind_map",
    "parse_outline",
    "refresh_access_token",
    "render_outline",
    "to_renderer_dict",
]
