"""Reusable form type aliases for FastAPI form parameters."""

from __future__ import annotations

from typing import Annotated, Optional, TypeAlias

from fastapi import File, Form, UploadFile

UploadForm: TypeAlias = Annotated[UploadFile, File(...)]
OptIntForm: TypeAlias = Annotated[Optional[int], Form()]
