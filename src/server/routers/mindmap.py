"""Mind map endpoints for the API."""

from __future__ import annotations

from pathlib import PurePath

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ideagraph.exceptions import FileReadError, IdeagraphError
from server.form_types import OptIntForm, UploadForm
from server.models import MindMapRequest, MindMapResponse
from server.processor import process_mind_map, process_upload
from server.routers_utils import COMMON_RESPONSES, error_message, error_response
from server.server_config import ALLOWED_UPLOAD_SUFFIXES, MAX_TAB_SIZE, MAX_UPLOAD_KB

router = APIRouter()


@router.post("/api/mindmap", responses=COMMON_RESPONSES)
async def api_mindmap(mindmap_request: MindMapRequest) -> JSONResponse:
    """Build a mind map from outline text.

    **Parameters**

    - **mindmap_request** (`MindMapRequest`): outline text and optional tab size

    **Returns**

    - **JSONResponse**: tree in renderer shape, summary and plain text outline,
      or **400** if the outline is nested too deeply
    """
    try:
        response = process_mind_map(mindmap_request.text, tab_size=mindmap_request.tab_size)
    except IdeagraphError as exc:
        return error_response(exc)
    return _mind_map_json(response)


@router.post("/api/mindmap/upload", responses=COMMON_RESPONSES)
async def api_mindmap_upload(file: UploadForm, tab_size: OptIntForm = None) -> JSONResponse:
    """Build a mind map from an uploaded ``.txt`` file.

    **Parameters**

    - **file** (`UploadFile`): plain text outline
    - **tab_size** (`int`, optional): tab stop width for indentation

    **Returns**

    - **JSONResponse**: mind map response, or **400** if the file is rejected
    """
    filename = file.filename or ""
    if PurePath(filename).suffix.lower() not in ALLOWED_UPLOAD_SUFFIXES:
        return error_message(f"Unsupported file type: {filename!r} (expected .txt)")
    if tab_size is not None and not 1 <= tab_size <= MAX_TAB_SIZE:
        return error_message(f"tab_size must be between 1 and {MAX_TAB_SIZE}")

    limit = MAX_UPLOAD_KB * 1024
    data = await file.read(limit + 1)
    try:
        if len(data) > limit:
            raise FileReadError(f"File exceeds the {MAX_UPLOAD_KB} KB upload limit")
        response = process_upload(filename, data, tab_size=tab_size)
    except IdeagraphError as exc:
        return error_response(exc, upload_name=filename)
    return _mind_map_json(response)


def _mind_map_json(response: MindMapResponse) -> JSONResponse:
    # The nested tree is handed to the JSON encoder as-is.
    content = response.model_dump(exclude={"tree"})
    content["tree"] = response.tree
    return JSONResponse(content=content)
