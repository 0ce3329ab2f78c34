"""File utilities for reading outline text from disk or uploads."""

from __future__ import annotations

import asyncio
import codecs
import logging
from pathlib import Path

from ideagraph.config import IDEAGRAPH_FALLBACK_ENCODING, IDEAGRAPH_MAX_UPLOAD_KB
from ideagraph.exceptions import FileReadError

logger = logging.getLogger(__name__)


def read_text_file(path: Path, encoding: str = "utf-8") -> str:
    """Read and decode a text file.

    Args:
        path: Path to the file to read.
        encoding: Preferred text encoding.

    Returns:
        The decoded file contents.

    Raises:
        FileReadError: If the path is not a readable file.
    """
    if not path.is_file():
        raise FileReadError(f"File not found: {path}")
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise FileReadError(f"Failed to read {path}: {exc}") from exc
    return decode_upload(data, encoding=encoding, max_size_kb=None)


async def read_text_async(path: Path, encoding: str = "utf-8") -> str:
    """Read a text file asynchronously using a thread pool.

    Args:
        path: Path to the file to read.
        encoding: Preferred text encoding.

    Returns:
        The decoded file contents.
    """
    return await asyncio.to_thread(read_text_file, path, encoding)


def decode_upload(
    data: bytes,
    *,
    encoding: str = "utf-8",
    max_size_kb: int | None = IDEAGRAPH_MAX_UPLOAD_KB,
) -> str:
    """Decode uploaded bytes into text.

    A UTF-8 byte order mark is dropped. If the bytes are not valid in
    ``encoding`` the configured fallback encoding is tried before giving up.

    Args:
        data: Raw file contents.
        encoding: Preferred text encoding.
        max_size_kb: Reject payloads above this size. ``None`` disables the
            check.

    Returns:
        The decoded text.

    Raises:
        FileReadError: If the payload is too large or cannot be decoded.
    """
    if max_size_kb is not None and len(data) > max_size_kb * 1024:
        raise FileReadError(f"File exceeds the {max_size_kb} KB upload limit")

    if data.startswith(codecs.BOM_UTF8):
        data = data[len(codecs.BOM_UTF8):]

    try:
        return data.decode(encoding)
    except UnicodeDecodeError as exc:
        if not IDEAGRAPH_FALLBACK_ENCODING or IDEAGRAPH_FALLBACK_ENCODING == encoding:
            raise FileReadError(f"Failed to decode file as {encoding}: {exc}") from exc
        logger.warning(
            "Falling back to %s after %s decode failure", IDEAGRAPH_FALLBACK_ENCODING, encoding
        )

    try:
        return data.decode(IDEAGRAPH_FALLBACK_ENCODING)
    except (UnicodeDecodeError, LookupError) as exc:
        raise FileReadError(
            f"Failed to decode file as {IDEAGRAPH_FALLBACK_ENCODING}: {exc}"
        ) from exc
