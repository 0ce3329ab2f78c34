"""Custom exceptions for ideagraph."""


class IdeagraphError(Exception):
    """Base exception for ideagraph operations."""


class FileReadError(IdeagraphError):
    """Input file could not be read or decoded."""


class DocumentIdError(IdeagraphError, ValueError):
    """Document link or id is missing or malformed."""


class AuthenticationError(IdeagraphError):
    """Access token is missing, rejected, or could not be obtained."""


class FetchError(IdeagraphError):
    """Error during content fetching."""


class DocumentNotFoundError(FetchError):
    """Document does not exist or is not visible to the token."""


class ParseError(IdeagraphError):
    """Upstream response could not be parsed."""


class TreeTooDeepError(IdeagraphError):
    """Outline is nested deeper than the configured maximum."""
