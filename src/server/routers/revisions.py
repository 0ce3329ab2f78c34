"""Revision endpoint for the API."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ideagraph.exceptions import IdeagraphError
from server.models import RevisionsRequest
from server.processor import process_revisions
from server.routers_utils import REVISION_RESPONSES, error_response

router = APIRouter()


@router.post("/api/revisions", responses=REVISION_RESPONSES)
async def api_revisions(revisions_request: RevisionsRequest) -> JSONResponse:
    """Fetch the plain text of every revision of a Google Doc.

    **Parameters**

    - **revisions_request** (`RevisionsRequest`): document link or ID, and an access token

    **Returns**

    - **JSONResponse**: revisions in listing order. Revisions without a plain
      text export carry a fixed placeholder as their content.
    """
    try:
        response = await process_revisions(
            revisions_request.document,
            access_token=revisions_request.access_token,
        )
    except IdeagraphError as exc:
        return error_response(exc, document=revisions_request.document)
    return JSONResponse(content=response.model_dump(mode="json"))
