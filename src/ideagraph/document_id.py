"""Parse Google Doc links and ids."""

from __future__ import annotations

import re

from ideagraph.exceptions import DocumentIdError

_ID_PATTERN = r"[a-zA-Z0-9_-]+"
_LINK_RE = re.compile(rf"/d/({_ID_PATTERN})")
_ID_RE = re.compile(rf"^{_ID_PATTERN}$")


def extract_document_id(value: str) -> str:
    """Return the document id from a Google Doc link or a bare id.

    Examples:
        ``https://docs.google.com/document/d/1AbC_d-E/edit`` -> ``1AbC_d-E``
        ``1AbC_d-E`` -> ``1AbC_d-E``

    Raises:
        DocumentIdError: If no id can be found.
    """
    value = value.strip()
    if not value:
        raise DocumentIdError("Missing document ID.")

    if "/d/" in value:
        match = _LINK_RE.search(value)
        if not match:
            raise DocumentIdError(f"No document ID found in link: {value}")
        return match.group(1)

    if not _ID_RE.match(value):
        raise DocumentIdError(f"Invalid document ID: {value}")
    return value
