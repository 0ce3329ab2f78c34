"""Tests for file utilities module."""

from __future__ import annotations

import codecs
from pathlib import Path
from unittest.mock import patch

import pytest

from ideagraph.exceptions import FileReadError
from ideagraph.file_utils import decode_upload, read_text_async, read_text_file


class TestReadTextFile:
    """Tests for read_text_file function."""

    def test_reads_utf8_file(self, tmp_path: Path) -> None:
        """Reads UTF-8 content from disk."""
        path = tmp_path / "ideas.txt"
        path.write_text("Idées\n  café", encoding="utf-8")

        assert read_text_file(path) == "Idées\n  café"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """Raises FileReadError when the file does not exist."""
        with pytest.raises(FileReadError, match="File not found"):
            read_text_file(tmp_path / "missing.txt")

    def test_directory_raises(self, tmp_path: Path) -> None:
        """Raises FileReadError when the path is a directory."""
        with pytest.raises(FileReadError, match="File not found"):
            read_text_file(tmp_path)

    def test_os_error_is_wrapped(self, tmp_path: Path) -> None:
        """Wraps OS errors raised while reading."""
        path = tmp_path / "ideas.txt"
        path.write_text("A")

        with patch.object(Path, "read_bytes", side_effect=PermissionError("denied")):
            with pytest.raises(FileReadError, match="denied"):
                read_text_file(path)

    def test_large_file_is_not_size_limited(self, tmp_path: Path) -> None:
        """Local files are not subject to the upload size limit."""
        path = tmp_path / "big.txt"
        path.write_text("A\n" * 2_000_000)

        assert read_text_file(path).count("A") == 2_000_000


class TestDecodeUpload:
    """Tests for decode_upload function."""

    def test_decodes_utf8(self) -> None:
        assert decode_upload("A\n  B".encode("utf-8")) == "A\n  B"

    def test_strips_utf8_bom(self) -> None:
        data = codecs.BOM_UTF8 + b"A\n  B"
        assert decode_upload(data) == "A\n  B"

    def test_falls_back_to_latin1(self) -> None:
        """Invalid UTF-8 is decoded with the fallback encoding."""
        data = "Caf\xe9".encode("latin-1")
        assert decode_upload(data) == "Café"

    def test_fails_without_fallback(self) -> None:
        data = b"\xff\xfe\xfa"
        with patch("ideagraph.file_utils.IDEAGRAPH_FALLBACK_ENCODING", ""):
            with pytest.raises(FileReadError, match="Failed to decode"):
                decode_upload(data)

    def test_fallback_failure_is_wrapped(self) -> None:
        data = b"\xff\xfe\xfa"
        with patch("ideagraph.file_utils.IDEAGRAPH_FALLBACK_ENCODING", "ascii"):
            with pytest.raises(FileReadError, match="ascii"):
                decode_upload(data)

    def test_rejects_oversized_payload(self) -> None:
        with pytest.raises(FileReadError, match="1 KB upload limit"):
            decode_upload(b"A" * 1025, max_size_kb=1)

    def test_accepts_payload_at_limit(self) -> None:
        assert decode_upload(b"A" * 1024, max_size_kb=1) == "A" * 1024


class TestReadTextAsync:
    """Tests for read_text_async function."""

    @pytest.mark.asyncio
    async def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "ideas.txt"
        path.write_text("async content", encoding="utf-8")

        assert await read_text_async(path) == "async content"

    @pytest.mark.asyncio
    async def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileReadError):
            await read_text_async(tmp_path / "nope.txt")
