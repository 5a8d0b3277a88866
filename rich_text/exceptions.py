"""
Custom exceptions for the rich_text package.

Error severity:
  - MalformedNodeError → NON-FATAL: the offending node renders as nothing,
    logged at debug level.
  - DocumentLoadError  → FAIL HARD: the input file could not be turned into a
    document tree.
  - ConfigurationError → FAIL HARD: render or plain-text options are invalid.

Exceptions raised by caller-supplied override hooks are never wrapped; they
reach the caller unchanged.
"""

from typing import Any, Optional


class RichTextError(Exception):
    """Base exception for all rich_text errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


# --- NON-FATAL: the node is dropped from the output ---

class MalformedNodeError(RichTextError):
    """
    Raised when a raw mapping cannot be read as a document node.

    Covers unknown node types, missing required fields and empty tag names.
    The transformer and the plain-text extractor treat it as "render nothing".
    """

    def __init__(self, message: str, raw: Any = None, details: Optional[dict] = None):
        super().__init__(message, details)
        self.raw = raw


# --- FAIL HARD: stops the caller ---

class DocumentLoadError(RichTextError):
    """Raised when a document file is missing, unreadable or not a document."""

    def __init__(self, message: str, path: str, details: Optional[dict] = None):
        super().__init__(message, details)
        self.path = path

    def to_response(self) -> dict:
        """Convert to the error entry reported by the command line runner."""
        return {
            "error": "DocumentLoadError",
            "message": self.message,
            "path": self.path,
            "details": self.details
        }


class ConfigurationError(RichTextError):
    """Raised when render or plain-text options fail validation."""
    pass
