"""Local configuration for ideagraph."""

from __future__ import annotations

import os


DEFAULT_ROOT_NAME = "Document"
DEFAULT_MAX_TREE_DEPTH = 100
DEFAULT_MAX_UPLOAD_KB = 1024
DEFAULT_FALLBACK_ENCODING = "latin-1"
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "ideagraph/0.1"
DEFAULT_DRIVE_API_URL = "https://www.googleapis.com/drive/v3"
DEFAULT_TOKEN_URL = "https://oauth2.googleapis.com/token"
DEFAULT_SCOPES = "https://www.googleapis.com/auth/drive.readonly"

# Name of the synthetic node that owns every top-level outline entry.
IDEAGRAPH_ROOT_NAME = os.getenv("IDEAGRAPH_ROOT_NAME", DEFAULT_ROOT_NAME)
# Deepest outline the server will return as a renderer tree.
IDEAGRAPH_MAX_TREE_DEPTH = int(os.getenv("IDEAGRAPH_MAX_TREE_DEPTH", str(DEFAULT_MAX_TREE_DEPTH)))
IDEAGRAPH_MAX_UPLOAD_KB = int(os.getenv("IDEAGRAPH_MAX_UPLOAD_KB", str(DEFAULT_MAX_UPLOAD_KB)))
IDEAGRAPH_FALLBACK_ENCODING = os.getenv("IDEAGRAPH_FALLBACK_ENCODING", DEFAULT_FALLBACK_ENCODING)

IDEAGRAPH_FETCH_TIMEOUT_S = float(os.getenv("IDEAGRAPH_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
IDEAGRAPH_FETCH_MAX_RETRIES = int(os.getenv("IDEAGRAPH_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
IDEAGRAPH_FETCH_BACKOFF_S = float(os.getenv("IDEAGRAPH_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
IDEAGRAPH_USER_AGENT = os.getenv("IDEAGRAPH_USER_AGENT", DEFAULT_USER_AGENT)

IDEAGRAPH_DRIVE_API_URL = os.getenv("IDEAGRAPH_DRIVE_API_URL", DEFAULT_DRIVE_API_URL).rstrip("/")
IDEAGRAPH_TOKEN_URL = os.getenv("IDEAGRAPH_TOKEN_URL", DEFAULT_TOKEN_URL)
IDEAGRAPH_SCOPES = os.getenv("IDEAGRAPH_SCOPES", DEFAULT_SCOPES)

# Credentials are read lazily by ideagraph.auth so tests can patch the environment.
ACCESS_TOKEN_ENV = "IDEAGRAPH_ACCESS_TOKEN"
CLIENT_ID_ENV = "IDEAGRAPH_CLIENT_ID"
CLIENT_SECRET_ENV = "IDEAGRAPH_CLIENT_SECRET"
REFRESH_TOKEN_ENV = "IDEAGRAPH_REFRESH_TOKEN"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
