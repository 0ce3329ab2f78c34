"""Run mind map and revision requests and build API responses."""

from __future__ import annotations

from ideagraph.auth import connect
from ideagraph.config import IDEAGRAPH_MAX_TREE_DEPTH
from ideagraph.document_id import extract_document_id
from ideagraph.exceptions import TreeTooDeepError
from ideagraph.file_utils import decode_upload
from ideagraph.mindmap import build_mind_map
from ideagraph.revisions import fetch_all_revision_contents
from ideagraph.tree_format import count_nodes, to_renderer_dict, tree_depth
from ideagraph.utils.logging_config import get_logger
from server.models import MindMapResponse, RevisionItem, RevisionsResponse

# Initialize logger for this module
logger = get_logger(__name__)


def process_mind_map(
    text: str,
    *,
    source: str | None = None,
    tab_size: int | None = None,
) -> MindMapResponse:
    """Parse outline text into a mind map response.

    Raises
    ------
    TreeTooDeepError
        If the outline nests deeper than ``IDEAGRAPH_MAX_TREE_DEPTH``.

    """
    result = build_mind_map(text, source=source, tab_size=tab_size)
    depth = tree_depth(result.tree)
    if depth > IDEAGRAPH_MAX_TREE_DEPTH:
        raise TreeTooDeepError(
            f"Outline is nested {depth} levels deep; the limit is {IDEAGRAPH_MAX_TREE_DEPTH}"
        )

    node_count = count_nodes(result.tree)
    logger.info(
        "Mind map built from %s: %d nodes",
        source or "text",
        node_count,
        extra={"source": source, "node_count": node_count},
    )
    return MindMapResponse(
        tree=to_renderer_dict(result.tree),
        summary=result.summary,
        outline=result.outline,
        node_count=node_count,
    )


def process_upload(
    filename: str,
    data: bytes,
    *,
    tab_size: int | None = None,
) -> MindMapResponse:
    """Decode an uploaded text file and build its mind map.

    Raises
    ------
    FileReadError
        If the upload is too large or cannot be decoded. The parser is not
        invoked in that case.

    """
    text = decode_upload(data)
    return process_mind_map(text, source=filename, tab_size=tab_size)


async def process_revisions(document: str, *, access_token: str | None = None) -> RevisionsResponse:
    """Fetch every revision's text for a document.

    Parameters
    ----------
    document : str
        Google Doc link or document id.
    access_token : str | None
        OAuth access token; server-side credentials are used when omitted.

    Returns
    -------
    RevisionsResponse
        The resolved document id and its revisions in listing order.

    """
    document_id = extract_document_id(document)
    async with await connect(access_token=access_token) as session:
        contents = await fetch_all_revision_contents(session, document_id)

    logger.info(
        "Fetched %d revisions of %s",
        len(contents),
        document_id,
        extra={"document_id": document_id, "revision_count": len(contents)},
    )
    return RevisionsResponse(
        document_id=document_id,
        revisions=[RevisionItem.model_validate(rev.model_dump()) for rev in contents],
    )
