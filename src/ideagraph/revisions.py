"""List Drive document revisions and export their plain text."""

from __future__ import annotations

import asyncio
import logging

from pydantic import ValidationError

from ideagraph.auth import DriveSession
from ideagraph.config import IDEAGRAPH_DRIVE_API_URL
from ideagraph.document_id import extract_document_id
from ideagraph.exceptions import DocumentNotFoundError, ParseError
from ideagraph.http_utils import fetch_with_retries
from ideagraph.schemas import Revision, RevisionContent, RevisionList

logger = logging.getLogger(__name__)

NO_EXPORT_PLACEHOLDER = "(No plain text export available)"
PLAIN_TEXT_MIME = "text/plain"

_REVISION_FIELDS = "nextPageToken,revisions(id,modifiedTime,exportLinks)"


async def list_revisions(session: DriveSession, file_id: str) -> list[Revision]:
    """List every revision of a Drive file, following pagination.

    Args:
        session: Authenticated Drive session.
        file_id: Drive file id.

    Returns:
        Revisions in the order the API reports them.

    Raises:
        DocumentNotFoundError: If the file does not exist or is not shared
            with the token's user.
        ParseError: If a response page is not a valid revision listing.
        FetchError: If the request fails after retries.
    """
    url = f"{IDEAGRAPH_DRIVE_API_URL}/files/{file_id}/revisions"
    revisions: list[Revision] = []
    page_token: str | None = None

    while True:
        params = {"fields": _REVISION_FIELDS}
        if page_token:
            params["pageToken"] = page_token

        body = await fetch_with_retries(
            url,
            client=session.client,
            headers=session.auth_headers,
            params=params,
            on_404=DocumentNotFoundError,
            on_404_message=f"Document {file_id} not found or not accessible",
        )
        page = _parse_revision_page(body)
        revisions.extend(page.revisions)

        if not page.next_page_token:
            break
        page_token = page.next_page_token

    logger.debug(
        "Listed %d revisions of %s",
        len(revisions),
        file_id,
        extra={"file_id": file_id, "count": len(revisions)},
    )
    return revisions


async def fetch_revision_content(session: DriveSession, revision: Revision) -> RevisionContent:
    """Download a revision's plain text export, or use the placeholder."""
    export_url = revision.export_links.get(PLAIN_TEXT_MIME)
    if not export_url:
        content = NO_EXPORT_PLACEHOLDER
    else:
        content = await fetch_with_retries(
            export_url,
            client=session.client,
            headers=session.auth_headers,
        )

    return RevisionContent(
        id=revision.id,
        modified_time=revision.modified_time,
        content=content,
    )


async def fetch_all_revision_contents(
    session: DriveSession,
    document: str,
) -> list[RevisionContent]:
    """Fetch the text of every revision of a document.

    Args:
        session: Authenticated Drive session.
        document: Google Doc link or bare document id.

    Returns:
        One entry per revision, in listing order.

    Raises:
        DocumentIdError: If ``document`` holds no usable id.
    """
    file_id = extract_document_id(document)
    revisions = await list_revisions(session, file_id)
    tasks = [
        asyncio.create_task(fetch_revision_content(session, revision))
        for revision in revisions
    ]
    try:
        contents = await asyncio.gather(*tasks)
    except BaseException:
        # One failed export stops the rest.
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise

    for rev in contents:
        logger.info(
            "Fetched revision %s (%s)", rev.id, rev.modified_time.isoformat()
        )
        logger.debug("Revision %s content:\n%s", rev.id, rev.content)

    return list(contents)


def _parse_revision_page(body: str) -> RevisionList:
    try:
        return RevisionList.model_validate_json(body)
    except ValidationError as exc:
        raise ParseError(f"Malformed revision listing: {exc}") from exc
