"""Server configuration."""

from __future__ import annotations

import os

from ideagraph.config import IDEAGRAPH_MAX_UPLOAD_KB

APP_TITLE = "Idea Graph Visualizer & Google Doc Revision Viewer"
MAX_UPLOAD_KB = IDEAGRAPH_MAX_UPLOAD_KB
MAX_TAB_SIZE = 16
ALLOWED_UPLOAD_SUFFIXES = (".txt",)
CORS_ALLOW_ORIGINS = [
    origin.strip() for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if origin.strip()
]
